"""Exception hierarchy for chatcli.

Provider errors are the closed set of failures a remote exchange can end in.
Adapters in ``chatcli.llm.providers`` translate SDK exceptions into them so
callers never inspect transport status codes.
"""


class ChatError(Exception):
    """Base class for all chatcli errors."""


class ConfigError(ChatError):
    """Required configuration is missing or invalid."""


class StoreError(ChatError):
    """History could not be read from or written to storage.

    Stores return this inside a ``StoreResult`` rather than raising it.
    """


class ProviderError(ChatError):
    """A remote completion request failed."""


class AuthError(ProviderError):
    """The credential was rejected by the remote service."""


class RateLimitError(ProviderError):
    """The remote service signalled rate limiting."""


class RemoteError(ProviderError):
    """Any other remote failure."""
