"""xAI Grok provider implementation.

Public API (the "studs"):
    GrokProvider: Grok chat completions provider
    create_grok_provider: Build a provider, or None when no API key is set
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import ValidationError

from launcher_ai.ai.config import PromptConfig, ProviderConfig
from launcher_ai.ai.display import DisplaySink, replace_all
from launcher_ai.ai.exceptions import (
    AIConfigurationError,
    AIDecodeError,
    AIError,
    AISerializationError,
    AIStatusError,
    AITransportError,
)
from launcher_ai.ai.providers.base import BaseProvider
from launcher_ai.ai.types import ChatRequest, ChatResponse, Message, QueryResult
from launcher_ai.entries import Entry, MatchingAlgorithm

_logger = logging.getLogger(__name__)

GROK_API_URL = "https://api.x.ai/v1/chat/completions"
GROK_SUBTITLE = "Grok"


class GrokProvider(BaseProvider):
    """Grok provider implementation.

    Talks to the xAI chat completions endpoint with a static bearer token.
    One POST per query, no retries.
    """

    name = "grok"

    def __init__(
        self,
        config: ProviderConfig,
        api_key: str,
        special_func: Callable[..., Any] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise AIConfigurationError("api_key is required for Grok provider")
        if not (api_key.isascii() and api_key.isprintable()):
            # Sent as an HTTP header value.
            raise AIConfigurationError("api_key for Grok provider must be printable ASCII")

        self._config = config
        self._api_key = api_key
        self._special_func = special_func
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout_seconds)

    def setup_data(self) -> list[Entry]:
        entries = [
            Entry(
                label=prompt.label,
                sub=GROK_SUBTITLE,
                exec="",
                recalculate_score=True,
                matching=MatchingAlgorithm.FUZZY,
                special_func=self._special_func,
                special_func_args=[self.name, prompt],
                single_module_only=prompt.single_module_only,
            )
            for prompt in self._config.prompts
        ]

        if not self._config.prompts:
            _logger.warning("grok: no prompts set.")

        return entries

    def query(
        self,
        query: str,
        history: list[Message] | None,
        prompt: PromptConfig,
        items: DisplaySink,
    ) -> QueryResult:
        messages: list[Message] = list(history) if history else []
        messages.append(Message(role="user", content=query))

        replace_all(items, messages)

        try:
            body = self._encode_request(prompt, messages)
            response = self._send(body)
            grok_response = self._decode_response(response)
        except AIError as e:
            # The user's turn is kept even though the assistant turn failed.
            _write_back(history, messages)
            return QueryResult(messages=messages, error=e)

        replies = grok_response.assistant_messages()
        messages.extend(replies)
        _write_back(history, messages)

        _logger.debug(
            "grok: %d choice(s), %d total tokens",
            len(replies),
            grok_response.usage.total_tokens,
        )
        return QueryResult(messages=messages, replies=replies)

    def _encode_request(self, prompt: PromptConfig, messages: list[Message]) -> bytes:
        try:
            request = ChatRequest(
                model=prompt.model,
                max_tokens=prompt.max_tokens,
                temperature=prompt.temperature,
                messages=messages,
            )
            return request.model_dump_json().encode()
        except (ValueError, TypeError) as e:
            _logger.error("grok: failed to encode request: %s", e)
            raise AISerializationError(f"Grok request could not be encoded: {e}") from e

    def _send(self, body: bytes) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = self._client.post(GROK_API_URL, content=body, headers=headers)
        except httpx.HTTPError as e:
            _logger.error("grok: error making request: %s", e)
            raise AITransportError(f"Grok request failed: {e}") from e

        if not response.is_success:
            _logger.error("grok: API returned unexpected status code %d", response.status_code)
            raise AIStatusError(
                f"Grok API returned status {response.status_code}",
                status_code=response.status_code,
            )

        return response

    def _decode_response(self, response: httpx.Response) -> ChatResponse:
        try:
            return ChatResponse.model_validate_json(response.content)
        except ValidationError as e:
            _logger.error("grok: error decoding response: %s", e)
            raise AIDecodeError(f"Grok response could not be decoded: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


def _write_back(history: list[Message] | None, messages: list[Message]) -> None:
    if history is not None:
        history[:] = messages


def create_grok_provider(
    config: ProviderConfig,
    api_key: str | None,
    special_func: Callable[..., Any] | None = None,
    client: httpx.Client | None = None,
) -> GrokProvider | None:
    """Create a Grok provider if an API key is available.

    Args:
        config: Grok settings block
        api_key: xAI API key
        special_func: Callback bound to every launcher entry
        client: Optional preconfigured HTTP client

    Returns:
        GrokProvider, or None when no API key is set (provider inactive)
    """
    if not api_key:
        _logger.warning("grok: no api key set")
        return None
    return GrokProvider(config, api_key, special_func=special_func, client=client)


__all__ = ["GrokProvider", "create_grok_provider", "GROK_API_URL"]
