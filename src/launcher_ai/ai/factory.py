"""Factory functions for creating AI providers.

Public API (the "studs"):
    create_provider: Create one provider by name
    create_providers: Create every active provider
    PROVIDER_NAMES: Names of the supported providers
"""

from collections.abc import Callable
from typing import Any

from launcher_ai.ai.config import AIConfig, AICredentials
from launcher_ai.ai.providers.base import BaseProvider

PROVIDER_NAMES: tuple[str, ...] = ("grok",)


def create_provider(
    name: str,
    config: AIConfig,
    credentials: AICredentials | None = None,
    special_func: Callable[..., Any] | None = None,
) -> BaseProvider | None:
    """Create a provider based on its name.

    Args:
        name: Provider name (see PROVIDER_NAMES)
        config: AI module configuration
        credentials: Provider credentials (read from the environment if None)
        special_func: Callback bound to the provider's launcher entries

    Returns:
        BaseProvider, or None if the provider has no credential

    Raises:
        ValueError: If provider is unknown

    Example:
        >>> provider = create_provider("grok", AIConfig.from_yaml("config.yaml"))
        >>> entries = provider.setup_data() if provider else []
    """
    if credentials is None:
        credentials = AICredentials.from_env()

    if name == "grok":
        from launcher_ai.ai.providers.grok import create_grok_provider

        return create_grok_provider(
            config.grok,
            credentials.api_key_for("grok"),
            special_func=special_func,
        )
    else:
        raise ValueError(f"Unknown provider: {name}")


def create_providers(
    config: AIConfig,
    credentials: AICredentials | None = None,
    special_func: Callable[..., Any] | None = None,
) -> dict[str, BaseProvider]:
    """Create every provider that has a credential.

    Returns:
        Dict mapping provider names to active providers
    """
    if credentials is None:
        credentials = AICredentials.from_env()

    providers: dict[str, BaseProvider] = {}
    for name in PROVIDER_NAMES:
        provider = create_provider(name, config, credentials, special_func)
        if provider is not None:
            providers[name] = provider
    return providers


__all__ = ["create_provider", "create_providers", "PROVIDER_NAMES"]
