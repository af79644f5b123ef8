"""Tests for AI module type definitions."""

import json

import pytest
from pydantic import ValidationError

from launcher_ai.ai.exceptions import (
    AIConfigurationError,
    AIDecodeError,
    AIError,
    AISerializationError,
    AIStatusError,
    AITransportError,
)
from launcher_ai.ai.types import ChatRequest, ChatResponse, Message, QueryResult


class TestMessage:
    def test_create_user_message(self):
        msg = Message(role="user", content="Hello")
        assert msg.role == "user"
        assert msg.content == "Hello"

    def test_create_system_message(self):
        msg = Message(role="system", content="You are helpful")
        assert msg.role == "system"

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            Message(role="custom_role", content="test")

    def test_equality_by_value(self):
        assert Message(role="user", content="a") == Message(role="user", content="a")
        assert Message(role="user", content="a") != Message(role="assistant", content="a")


class TestChatRequest:
    def _request(self) -> ChatRequest:
        return ChatRequest(
            model="grok-3-mini",
            max_tokens=256,
            temperature=0.5,
            messages=[
                Message(role="user", content="a"),
                Message(role="assistant", content="b"),
            ],
        )

    def test_wire_field_names(self):
        body = json.loads(self._request().model_dump_json())
        assert list(body) == ["model", "max_tokens", "temperature", "messages"]
        assert body["messages"][1] == {"role": "assistant", "content": "b"}

    def test_json_roundtrip_preserves_fields(self):
        request = self._request()
        decoded = ChatRequest.model_validate_json(request.model_dump_json())
        assert decoded == request
        assert decoded.max_tokens == 256
        assert decoded.temperature == 0.5


class TestChatResponse:
    def test_parses_full_body(self, chat_response):
        resp = ChatResponse.model_validate(chat_response("hi", "there"))
        assert resp.id == "resp-test-001"
        assert resp.object == "chat.completion"
        assert len(resp.choices) == 2
        assert resp.choices[1].index == 1
        assert resp.choices[0].finish_reason == "stop"
        assert resp.choices[0].message.reasoning_content == "let me think"
        assert resp.usage.total_tokens == 15
        assert resp.usage.prompt_tokens_details.cached_tokens == 4
        assert resp.usage.completion_tokens_details.reasoning_tokens == 2

    def test_missing_fields_default(self):
        resp = ChatResponse.model_validate_json("{}")
        assert resp.choices == []
        assert resp.usage.total_tokens == 0

    def test_assistant_messages_use_content_only(self, chat_response):
        resp = ChatResponse.model_validate(chat_response("x", "y"))
        assert resp.assistant_messages() == [
            Message(role="assistant", content="x"),
            Message(role="assistant", content="y"),
        ]

    def test_null_content_becomes_empty(self, chat_response):
        resp = ChatResponse.model_validate(chat_response(None))
        assert resp.assistant_messages() == [Message(role="assistant", content="")]

    def test_null_fields_decode_to_defaults(self, chat_response):
        body = chat_response("hi")
        body.update(id=None, model=None, object=None, created=None, usage=None)
        body["choices"][0]["index"] = None
        body["choices"][0]["finish_reason"] = None

        resp = ChatResponse.model_validate_json(json.dumps(body))

        assert resp.id == ""
        assert resp.created == 0
        assert resp.usage.total_tokens == 0
        assert resp.choices[0].index == 0
        assert resp.assistant_messages() == [Message(role="assistant", content="hi")]

    def test_null_choices_means_no_replies(self):
        resp = ChatResponse.model_validate_json('{"choices": null}')
        assert resp.assistant_messages() == []

    def test_null_token_details(self, chat_response):
        body = chat_response("hi")
        body["usage"]["prompt_tokens_details"] = None
        resp = ChatResponse.model_validate(body)
        assert resp.usage.prompt_tokens_details.cached_tokens == 0
        assert resp.usage.total_tokens == 15

    def test_malformed_json_raises(self):
        with pytest.raises(ValidationError):
            ChatResponse.model_validate_json("{not json")


class TestQueryResult:
    def test_ok_without_error(self):
        assert QueryResult().ok

    def test_not_ok_with_error(self):
        result = QueryResult(error=AIDecodeError("bad"))
        assert not result.ok
        assert isinstance(result.error, AIDecodeError)


class TestAIExceptions:
    def test_exception_hierarchy(self):
        assert issubclass(AIConfigurationError, AIError)
        assert issubclass(AISerializationError, AIError)
        assert issubclass(AITransportError, AIError)
        assert issubclass(AIStatusError, AIError)
        assert issubclass(AIDecodeError, AIError)
        assert issubclass(AIError, Exception)

    def test_status_error_keeps_code(self):
        err = AIStatusError("boom", status_code=503)
        assert err.status_code == 503
        assert str(err) == "boom"
