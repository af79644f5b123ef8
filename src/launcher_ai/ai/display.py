"""Display-facing message list.

The GUI renders the conversation from a list model. Providers only ever
replace its whole contents; listeners see that as one items-changed
notification.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Protocol, runtime_checkable

from launcher_ai.ai.types import Message

ItemsChangedCallback = Callable[[int, int, int], None]


@runtime_checkable
class DisplaySink(Protocol):
    """Mutable ordered view of a transcript, as exposed to providers."""

    def n_items(self) -> int: ...

    def splice(self, position: int, removals: int, messages: Sequence[Message]) -> None: ...


class MessageListModel:
    """List-backed DisplaySink with items-changed listeners.

    Listeners are called as ``callback(position, removed, added)`` after
    every splice.
    """

    def __init__(self, messages: Sequence[Message] = ()) -> None:
        self._items: list[Message] = list(messages)
        self._listeners: list[ItemsChangedCallback] = []

    def connect(self, callback: ItemsChangedCallback) -> None:
        self._listeners.append(callback)

    def n_items(self) -> int:
        return len(self._items)

    def splice(self, position: int, removals: int, messages: Sequence[Message]) -> None:
        """Remove ``removals`` items at ``position`` and insert ``messages`` there."""
        if position < 0 or position > len(self._items):
            raise IndexError(f"splice position {position} out of range")
        if removals < 0 or position + removals > len(self._items):
            raise IndexError(f"cannot remove {removals} items at {position}")

        self._items[position : position + removals] = list(messages)
        for callback in self._listeners:
            callback(position, removals, len(messages))

    def replace_all(self, messages: Sequence[Message]) -> None:
        self.splice(0, self.n_items(), messages)

    def items(self) -> list[Message]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Message:
        return self._items[index]


def replace_all(sink: DisplaySink, messages: Sequence[Message]) -> None:
    """Replace the entire contents of any DisplaySink."""
    sink.splice(0, sink.n_items(), messages)


__all__ = ["DisplaySink", "MessageListModel", "replace_all"]
