"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from launcher_ai.ai.config import PromptConfig, ProviderConfig


def _chat_response(*contents: str | None, model: str = "grok-3-mini") -> dict[str, Any]:
    """Build a chat completion response body with one choice per content."""
    return {
        "id": "resp-test-001",
        "model": model,
        "object": "chat.completion",
        "system_fingerprint": "fp_test",
        "created": 1700000000,
        "choices": [
            {
                "index": i,
                "finish_reason": "stop",
                "message": {
                    "role": "assistant",
                    "content": content,
                    "reasoning_content": "let me think",
                    "refusal": None,
                },
            }
            for i, content in enumerate(contents)
        ],
        "usage": {
            "prompt_tokens": 12,
            "completion_tokens": 3,
            "total_tokens": 15,
            "prompt_tokens_details": {
                "text_tokens": 12,
                "audio_tokens": 0,
                "image_tokens": 0,
                "cached_tokens": 4,
            },
            "completion_tokens_details": {
                "reasoning_tokens": 2,
                "audio_tokens": 0,
                "accepted_prediction_tokens": 0,
                "rejected_prediction_tokens": 0,
            },
        },
    }


@pytest.fixture
def chat_response() -> Callable[..., dict[str, Any]]:
    """Factory for upstream response bodies."""
    return _chat_response


@pytest.fixture
def prompt() -> PromptConfig:
    return PromptConfig(label="Ask Grok", model="grok-3-mini", max_tokens=1000, temperature=0.7)


@pytest.fixture
def provider_config(prompt: PromptConfig) -> ProviderConfig:
    return ProviderConfig(prompts=[prompt])


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Create an httpx client whose requests are answered by a handler."""
    clients: list[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
