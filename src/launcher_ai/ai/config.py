"""Configuration models for the launcher AI module.

Public API (the "studs"):
    PromptConfig: One configured prompt template
    ProviderConfig: Per-provider settings (prompts, transport timeout)
    AIConfig: Top-level AI module configuration
    AICredentials: Provider credentials sourced from the environment
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from launcher_ai.ai.exceptions import AIConfigurationError

_logger = logging.getLogger(__name__)

# Data-driven mapping: provider -> credential env var
_PROVIDER_ENV_MAP: dict[str, str] = {
    "grok": "GROK_API_KEY",
}

DEFAULT_CONFIG_PATH = Path("~/.config/launcher-ai/config.yaml")


class PromptConfig(BaseModel):
    """One configured prompt template.

    Attributes:
        label: Label shown in the launcher list
        model: Upstream model name
        max_tokens: Maximum tokens to generate
        temperature: Sampling temperature
        single_module_only: Only show the entry when the AI module is the sole module
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Label shown in the launcher")
    model: str = Field(..., min_length=1, description="Upstream model name")
    max_tokens: int = Field(..., ge=1, description="Maximum tokens to generate")
    temperature: float = Field(..., ge=0.0, le=2.0, description="Sampling temperature")
    single_module_only: bool = Field(False, description="Restrict entry to single-module mode")


class ProviderConfig(BaseModel):
    """Settings for one upstream provider."""

    prompts: list[PromptConfig] = Field(default_factory=list, description="Configured prompts")
    timeout_seconds: float = Field(
        120, ge=1, le=600, description="Transport timeout in seconds"
    )


class AIConfig(BaseModel):
    """Top-level AI module configuration.

    Example YAML:

        grok:
          prompts:
            - label: Ask Grok
              model: grok-3-mini
              max_tokens: 1000
              temperature: 1.0
    """

    grok: ProviderConfig = Field(default_factory=ProviderConfig)

    def provider(self, name: str) -> ProviderConfig:
        """Get the settings block for a provider by name."""
        if name not in type(self).model_fields:
            raise ValueError(f"Unknown provider: {name}")
        return getattr(self, name)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "AIConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML document

        Returns:
            AIConfig instance (defaults for an empty document)

        Raises:
            AIConfigurationError: If the file is missing or not valid YAML
            pydantic.ValidationError: If field values are invalid
        """
        path = Path(path).expanduser()
        if not path.exists():
            raise AIConfigurationError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise AIConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise AIConfigurationError(f"Config root must be a mapping: {path}")

        _logger.debug("Loaded AI config from %s", path)
        return cls.model_validate(data)


class AICredentials(BaseModel):
    """API credentials per provider.

    Read once at process start and passed into provider constructors.
    """

    grok_api_key: SecretStr | None = Field(None, description="xAI API key")

    @field_validator("grok_api_key", mode="before")
    @classmethod
    def empty_as_missing(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @classmethod
    def from_env(cls) -> "AICredentials":
        """Create AICredentials from environment variables.

        Environment variables:
            GROK_API_KEY: xAI API key

        Missing variables are not an error; the matching provider is
        simply inactive.
        """
        kwargs: dict[str, Any] = {}
        for provider, env_var in _PROVIDER_ENV_MAP.items():
            value = os.environ.get(env_var)
            if value is not None:
                kwargs[f"{provider}_api_key"] = value
        return cls(**kwargs)

    def api_key_for(self, provider: str) -> str | None:
        """Return the plain API key for a provider, or None if unset."""
        if provider not in _PROVIDER_ENV_MAP:
            raise ValueError(f"Unknown provider: {provider}")
        secret: SecretStr | None = getattr(self, f"{provider}_api_key")
        return secret.get_secret_value() if secret else None


def default_config_path() -> Path:
    """Config path from $LAUNCHER_AI_CONFIG, else the per-user default."""
    env_path = os.environ.get("LAUNCHER_AI_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


__all__ = [
    "PromptConfig",
    "ProviderConfig",
    "AIConfig",
    "AICredentials",
    "default_config_path",
]
