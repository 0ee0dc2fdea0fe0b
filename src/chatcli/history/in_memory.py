"""In-memory history backend.

Data is lost when the process exits.
"""

from collections.abc import Sequence

from ..llm.models import ChatMessage
from .base import HistoryStore
from .models import StoreResult


class InMemoryHistoryStore(HistoryStore):
    """Session-only history store, suitable for testing or embedding."""

    def __init__(self, messages: Sequence[ChatMessage] | None = None):
        self._messages: list[ChatMessage] = list(messages or [])

    def load(self) -> StoreResult:
        return StoreResult(messages=list(self._messages))

    def save(self, messages: Sequence[ChatMessage]) -> StoreResult:
        self._messages = list(messages)
        return StoreResult(messages=list(self._messages))

    @property
    def backend_type(self) -> str:
        return "memory"
