"""Exceptions for the launcher AI module.

Public API (the "studs"):
    AIError: Base exception for all AI module errors
    AIConfigurationError: Missing credential or unreadable configuration
    AISerializationError: Request body could not be encoded
    AITransportError: Network or connection failure
    AIStatusError: Upstream returned a non-success HTTP status
    AIDecodeError: Response body is not the expected JSON
"""


class AIError(Exception):
    """Base exception for all AI module errors."""

    pass


class AIConfigurationError(AIError):
    """Missing credential or unreadable configuration."""

    pass


class AISerializationError(AIError):
    """Request body could not be encoded."""

    pass


class AITransportError(AIError):
    """Network or connection failure. Never retried automatically."""

    pass


class AIStatusError(AIError):
    """Upstream returned a non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class AIDecodeError(AIError):
    """Response body is not the expected JSON."""

    pass


__all__ = [
    "AIError",
    "AIConfigurationError",
    "AISerializationError",
    "AITransportError",
    "AIStatusError",
    "AIDecodeError",
]
