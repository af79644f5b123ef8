"""Type definitions for the launcher AI module.

Field names on the request and response models match the xAI chat
completions API exactly, since they are serialized straight onto the wire.

Public API (the "studs"):
    Message: A single message in a conversation transcript
    ChatRequest: Request body for a chat completion call
    ChatResponse: Decoded chat completion response
    QueryResult: Outcome of one provider query
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from launcher_ai.ai.exceptions import AIError

Role = Literal["user", "assistant", "system"]


class Message(BaseModel):
    """Represents a single message in a conversation.

    Attributes:
        role: Message role ("user", "assistant", or "system")
        content: Message content text
    """

    role: Role = Field(..., description="Message role: user, assistant, or system")
    content: str = Field(..., description="Message content")


class ChatRequest(BaseModel):
    """Request body for a chat completion call."""

    model: str = Field(..., description="Upstream model name")
    max_tokens: int = Field(..., description="Maximum tokens to generate")
    temperature: float = Field(..., description="Sampling temperature")
    messages: list[Message] = Field(default_factory=list, description="Conversation so far")


class _ResponseModel(BaseModel):
    """Response part whose JSON nulls decode to the field defaults."""

    @model_validator(mode="before")
    @classmethod
    def null_as_default(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ChoiceMessage(_ResponseModel):
    role: str = ""
    content: str | None = None
    reasoning_content: str | None = None
    refusal: str | None = None


class Choice(_ResponseModel):
    index: int = 0
    finish_reason: str | None = None
    message: ChoiceMessage = Field(default_factory=ChoiceMessage)


class PromptTokensDetails(_ResponseModel):
    text_tokens: int = 0
    audio_tokens: int = 0
    image_tokens: int = 0
    cached_tokens: int = 0


class CompletionTokensDetails(_ResponseModel):
    reasoning_tokens: int = 0
    audio_tokens: int = 0
    accepted_prediction_tokens: int = 0
    rejected_prediction_tokens: int = 0


class Usage(_ResponseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_tokens_details: PromptTokensDetails = Field(default_factory=PromptTokensDetails)
    completion_tokens_details: CompletionTokensDetails = Field(
        default_factory=CompletionTokensDetails
    )


class ChatResponse(_ResponseModel):
    """Decoded chat completion response.

    Only ``choices[*].message.content`` feeds the transcript; the remaining
    fields are kept so the response can be inspected or logged as received.
    """

    id: str = ""
    model: str = ""
    object: str = ""
    system_fingerprint: str | None = None
    created: int = 0
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    def assistant_messages(self) -> list[Message]:
        """One assistant message per returned choice, in order."""
        return [
            Message(role="assistant", content=choice.message.content or "")
            for choice in self.choices
        ]


class QueryResult(BaseModel):
    """Outcome of one provider query.

    Attributes:
        messages: Transcript after the call (always ends with the user
            message, followed by any assistant replies)
        replies: Assistant messages added by this call
        error: Failure that aborted the call, or None on success
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    messages: list[Message] = Field(default_factory=list)
    replies: list[Message] = Field(default_factory=list)
    error: AIError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    "Message",
    "Role",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "ChoiceMessage",
    "Usage",
    "QueryResult",
]
