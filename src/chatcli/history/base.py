"""Abstract base class for conversation history backends.

This module defines the interface for history storage.
The abstraction hides:
- Storage format (JSON file, in-memory)
- Persistence mechanism
- How I/O failures are recovered from
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..llm.models import ChatMessage
from .models import StoreResult


class HistoryStore(ABC):
    """Abstract conversation history backend.

    Implementations must never raise on storage faults: failures are
    logged at WARNING and reported through the returned ``StoreResult``.
    """

    @abstractmethod
    def load(self) -> StoreResult:
        """Load the persisted history, oldest message first."""

    @abstractmethod
    def save(self, messages: Sequence[ChatMessage]) -> StoreResult:
        """Overwrite the persisted history with ``messages``."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
