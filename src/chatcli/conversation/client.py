"""Conversation client: one exchange between local history and a provider."""

import logging
from typing import Any

from ..history import HistoryStore, StoreResult
from ..llm import ChatMessage, LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


class ConversationClient:
    """Mediates exchanges between a history store and an LLM provider.

    The full history is sent with every request. History is loaded from
    the store once, at construction, and the in-memory copy stays
    authoritative for the lifetime of the client even if a save fails.

    Usage:
        async with ConversationClient(provider, store) as client:
            reply = await client.send_message("Hello")
    """

    def __init__(
        self,
        provider: LLMProvider,
        store: HistoryStore,
        model: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self._provider = provider
        self._store = store
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._history: list[ChatMessage] = list(store.load().messages)

    @property
    def history(self) -> tuple[ChatMessage, ...]:
        """Snapshot of the current history, oldest first."""
        return tuple(self._history)

    @property
    def exchange_count(self) -> int:
        return len(self._history) // 2

    def conversation_length(self) -> int:
        """Number of messages in the current history."""
        return len(self._history)

    async def send_message(self, text: str) -> str:
        """Send ``text`` with the whole history and return the reply.

        The user message is appended before the request is made and is
        not rolled back if the request fails. History is persisted only
        after a successful reply.

        Raises:
            AuthError: The credential was rejected
            RateLimitError: The service is rate limiting this client
            RemoteError: Any other remote failure
        """
        self._history.append(ChatMessage(role="user", content=text))

        response = await self._provider.chat_completion(
            list(self._history),
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        logger.debug(
            "Exchange %d completed by %s (usage=%s)",
            self.exchange_count + 1, response.model, response.usage,
        )

        self._history.append(ChatMessage(role="assistant", content=response.content))
        self._store.save(self._history)
        return response.content

    def new_conversation(self) -> StoreResult:
        """Clear the history and persist the empty conversation."""
        self._history = []
        return self._store.save(self._history)

    async def close(self) -> None:
        await self._provider.close()

    async def __aenter__(self) -> "ConversationClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._provider.__aexit__(exc_type, exc_val, exc_tb)
