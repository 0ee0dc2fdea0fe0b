"""
chatcli: a minimal command-line chat client.

Sends a message with the whole conversation to a hosted completion API,
keeps the conversation in a local JSON file, and prints the reply.
"""

__version__ = "1.0.0"

from .conversation import ConversationClient
from .errors import (
    AuthError,
    ChatError,
    ConfigError,
    ProviderError,
    RateLimitError,
    RemoteError,
    StoreError,
)
from .history import HistoryStore, JsonHistoryStore, StoreResult, create_history_store
from .llm import ChatMessage, LLMProvider, create_llm_provider

__all__ = [
    "AuthError",
    "ChatError",
    "ChatMessage",
    "ConfigError",
    "ConversationClient",
    "HistoryStore",
    "JsonHistoryStore",
    "LLMProvider",
    "ProviderError",
    "RateLimitError",
    "RemoteError",
    "StoreError",
    "StoreResult",
    "create_history_store",
    "create_llm_provider",
]
