"""Launcher entry model.

Entries are what the launcher lists, fuzzy-matches and activates. The AI
module contributes one entry per configured prompt.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class MatchingAlgorithm(str, Enum):
    """How the launcher matches typed text against an entry label."""

    FUZZY = "fuzzy"
    EXACT = "exact"


class Entry(BaseModel):
    """A single selectable launcher entry."""

    label: str = Field(..., description="Text shown and matched against")
    sub: str = Field(default="", description="Subtitle, e.g. the providing module")
    exec: str = Field(default="", description="Command to run on activation")
    recalculate_score: bool = Field(default=False, description="Rescore on every keystroke")
    matching: MatchingAlgorithm = Field(default=MatchingAlgorithm.FUZZY)
    special_func: Callable[..., Any] | None = Field(
        default=None, description="Callback invoked on activation instead of exec"
    )
    special_func_args: list[Any] = Field(default_factory=list)
    single_module_only: bool = Field(default=False)

    def activate(self) -> Any:
        """Invoke the bound callback with its bound arguments.

        Returns:
            Whatever the callback returns, or None if no callback is bound
        """
        if self.special_func is None:
            return None
        return self.special_func(*self.special_func_args)


__all__ = ["Entry", "MatchingAlgorithm"]
