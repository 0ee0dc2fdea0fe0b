"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and history store from a
``ChatConfig``. Hides configuration details from the command implementation.
"""

from pathlib import Path

from ..config import ChatConfig
from ..history import HistoryStore, create_history_store
from ..llm import LLMProvider, create_llm_provider


def get_llm(config: ChatConfig, model: str | None = None) -> LLMProvider:
    """Create the LLM provider named by ``config``.

    Args:
        config: Loaded configuration
        model: Optional model override taking precedence over CHAT_MODEL
    """
    kwargs = config.provider_kwargs()
    if model:
        kwargs["model"] = model
    return create_llm_provider(config.provider, **kwargs)


def get_history_store(config: ChatConfig, history_file: Path | None = None) -> HistoryStore:
    """Create the JSON history store.

    Args:
        config: Loaded configuration
        history_file: Optional path taking precedence over CHAT_HISTORY_FILE
    """
    return create_history_store("json", path=history_file or config.history_file)
