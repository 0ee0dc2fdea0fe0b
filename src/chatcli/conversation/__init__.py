from .client import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, ConversationClient

__all__ = ["ConversationClient", "DEFAULT_MAX_TOKENS", "DEFAULT_TEMPERATURE"]
