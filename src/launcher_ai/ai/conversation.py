"""Conversation state for one activated prompt.

A Conversation owns the transcript and the display model that a provider
mutates. Only one query may be in flight per conversation.
"""

import asyncio
import logging
import threading

from launcher_ai.ai.config import PromptConfig
from launcher_ai.ai.display import MessageListModel
from launcher_ai.ai.providers.base import BaseProvider
from launcher_ai.ai.types import Message, QueryResult

_logger = logging.getLogger(__name__)


class ConversationBusyError(RuntimeError):
    """Raised when a second query is started before the first finished."""


class Conversation:
    """Transcript plus display model for one provider prompt."""

    def __init__(
        self,
        provider: BaseProvider,
        prompt: PromptConfig,
        display: MessageListModel | None = None,
    ) -> None:
        self.provider = provider
        self.prompt = prompt
        self.history: list[Message] = []
        self.display = display if display is not None else MessageListModel()
        self._lock = threading.Lock()

    def ask(self, query: str) -> QueryResult:
        """Send one query and block until the reply has been folded in.

        Raises:
            ConversationBusyError: If another query is still running
        """
        if not self._lock.acquire(blocking=False):
            raise ConversationBusyError("a query is already in flight for this conversation")
        try:
            _logger.debug("Sending query to %s (%s)", self.provider.name, self.prompt.label)
            result = self.provider.query(query, self.history, self.prompt, self.display)
            # The provider only shows the user's turn; show the replies too.
            self.display.replace_all(self.history)
            return result
        finally:
            self._lock.release()

    async def ask_async(self, query: str) -> QueryResult:
        """Run ``ask`` in a worker thread."""
        return await asyncio.to_thread(self.ask, query)

    def reset(self) -> None:
        """Forget the transcript and clear the display."""
        self.history.clear()
        self.display.replace_all([])


__all__ = ["Conversation", "ConversationBusyError"]
