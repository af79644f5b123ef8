"""AI module for the launcher.

Turns prompts typed into the launcher into chat-completion calls and keeps
the resulting conversation for display.

Public API (the "studs"):
    create_provider: Factory function to create provider instances
    create_providers: Create every provider that has a credential
    AIConfig: Configuration model for the AI module
    AICredentials: Provider credentials sourced from the environment
    PromptConfig: One configured prompt template
    Message: Message type for conversations
    QueryResult: Outcome of one query
    BaseProvider: Abstract base class for providers (for custom providers)
    Conversation: Transcript and display model for one prompt

Example:
    >>> from launcher_ai.ai import AIConfig, Conversation, create_provider
    >>>
    >>> config = AIConfig.from_yaml("~/.config/launcher-ai/config.yaml")
    >>> provider = create_provider("grok", config)  # None if GROK_API_KEY unset
    >>> conversation = Conversation(provider, config.grok.prompts[0])
    >>> result = conversation.ask("Hello!")
    >>> print(result.replies[0].content)
"""

from launcher_ai.ai.config import AIConfig, AICredentials, PromptConfig, ProviderConfig
from launcher_ai.ai.conversation import Conversation, ConversationBusyError
from launcher_ai.ai.display import DisplaySink, MessageListModel
from launcher_ai.ai.exceptions import (
    AIConfigurationError,
    AIDecodeError,
    AIError,
    AISerializationError,
    AIStatusError,
    AITransportError,
)
from launcher_ai.ai.factory import create_provider, create_providers
from launcher_ai.ai.providers.base import BaseProvider
from launcher_ai.ai.types import Message, QueryResult

__all__ = [
    # Factory
    "create_provider",
    "create_providers",
    # Config
    "AIConfig",
    "AICredentials",
    "PromptConfig",
    "ProviderConfig",
    # Types
    "Message",
    "QueryResult",
    # Display and conversation
    "DisplaySink",
    "MessageListModel",
    "Conversation",
    "ConversationBusyError",
    # Base class (for custom providers)
    "BaseProvider",
    # Exceptions
    "AIError",
    "AIConfigurationError",
    "AISerializationError",
    "AITransportError",
    "AIStatusError",
    "AIDecodeError",
]
