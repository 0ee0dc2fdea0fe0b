"""Runtime configuration loaded from environment variables.

Environment variables:
    LLM_PROVIDER: Provider type (openai, deepseek; default: openai)
    OPENAI_API_KEY: OpenAI API key (required for openai)
    DEEPSEEK_API_KEY: DeepSeek API key (required for deepseek)
    OPENAI_BASE_URL: Optional custom API base URL
    CHAT_MODEL: Model override (default: provider's default)
    CHAT_MAX_TOKENS: Maximum reply length in tokens (default: 1000)
    CHAT_TEMPERATURE: Sampling temperature (default: 0.7)
    CHAT_HISTORY_FILE: History file (default: ~/.chat-cli-state.json)
    CHAT_LOG_LEVEL: Logging level (default: WARNING)
"""

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .conversation import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .errors import ConfigError
from .llm import SUPPORTED_PROVIDERS

DEFAULT_HISTORY_FILE = Path.home() / ".chat-cli-state.json"


class LogLevel(str, Enum):
    """Logging levels accepted by CHAT_LOG_LEVEL and --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


DEFAULT_LOG_LEVEL = LogLevel.WARNING

API_KEY_VARIABLES = {
    "openai": "OPENAI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
}


class ChatConfig(BaseModel):
    """Validated settings for one CLI invocation."""

    model_config = ConfigDict(frozen=True)

    provider: str = Field(default="openai", description="LLM provider name")
    api_key: str = Field(min_length=1, description="Bearer credential for the provider")
    base_url: str | None = Field(default=None, description="Custom API base URL")
    model: str | None = Field(default=None, description="Model override")
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1)
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    history_file: Path = Field(default=DEFAULT_HISTORY_FILE)
    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL)

    def provider_kwargs(self) -> dict[str, str]:
        """Keyword arguments for ``create_llm_provider``."""
        kwargs = {"api_key": self.api_key}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        if self.model:
            kwargs["model"] = self.model
        return kwargs


def missing_credential_message(variable: str) -> str:
    return (
        f"{variable} environment variable is not set.\n"
        f'Please set it using: export {variable}="your-api-key-here"'
    )


def load_config(environ: Mapping[str, str] | None = None) -> ChatConfig:
    """Build a ``ChatConfig`` from the environment.

    The credential is checked first so a missing key is reported before
    any other setting is looked at.

    Args:
        environ: Mapping to read from (default: ``os.environ``)

    Raises:
        ConfigError: If the credential is missing or a value is invalid
    """
    env = os.environ if environ is None else environ

    provider = env.get("LLM_PROVIDER", "openai").lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigError(
            f"Unknown LLM provider: {provider}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    key_variable = API_KEY_VARIABLES[provider]
    api_key = env.get(key_variable)
    if not api_key:
        raise ConfigError(missing_credential_message(key_variable))

    values: dict[str, object] = {"provider": provider, "api_key": api_key}
    optional = {
        "OPENAI_BASE_URL": "base_url",
        "CHAT_MODEL": "model",
        "CHAT_MAX_TOKENS": "max_tokens",
        "CHAT_TEMPERATURE": "temperature",
        "CHAT_HISTORY_FILE": "history_file",
        "CHAT_LOG_LEVEL": "log_level",
    }
    for variable, field_name in optional.items():
        value = env.get(variable)
        if value:
            values[field_name] = value.upper() if field_name == "log_level" else value

    try:
        config = ChatConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    return config.model_copy(update={"history_file": config.history_file.expanduser()})
