"""Abstract base class for AI providers.

Public API (the "studs"):
    BaseProvider: Abstract base class for AI providers
"""

import asyncio
from abc import ABC, abstractmethod

from launcher_ai.ai.config import PromptConfig
from launcher_ai.ai.display import DisplaySink
from launcher_ai.ai.types import Message, QueryResult
from launcher_ai.entries import Entry


class BaseProvider(ABC):
    """Abstract base class for AI providers.

    A provider maps the AI module's two capabilities onto one upstream
    chat-completion service: listing its prompts as launcher entries, and
    running a query against a conversation.
    """

    name: str = ""

    @abstractmethod
    def setup_data(self) -> list[Entry]:
        """Build one launcher entry per configured prompt.

        Returns:
            Entries in configuration order (empty if no prompts are set)
        """
        ...

    @abstractmethod
    def query(
        self,
        query: str,
        history: list[Message] | None,
        prompt: PromptConfig,
        items: DisplaySink,
    ) -> QueryResult:
        """Send a query and fold the reply into the conversation.

        Blocks for the full duration of the upstream call. Failures are
        logged and reported in ``QueryResult.error``, never raised.

        Args:
            query: Text the user entered
            history: Caller-owned transcript, updated in place (may be None)
            prompt: Prompt whose model settings apply
            items: Display sink, replaced with the transcript before the call

        Returns:
            QueryResult with the final transcript
        """
        ...

    async def query_async(
        self,
        query: str,
        history: list[Message] | None,
        prompt: PromptConfig,
        items: DisplaySink,
    ) -> QueryResult:
        """Run ``query`` in a worker thread.

        Note: the upstream call cannot be cancelled. If the awaiting
        coroutine is cancelled the thread still runs to completion and
        updates ``history``.
        """
        return await asyncio.to_thread(self.query, query, history, prompt, items)

    def close(self) -> None:
        """Release transport resources held by the provider."""
        return None


__all__ = ["BaseProvider"]
