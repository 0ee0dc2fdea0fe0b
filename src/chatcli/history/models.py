"""Data models for conversation history storage.

These models describe the outcome of store operations, independent of
the storage backend used.
"""

from dataclasses import dataclass, field

from ..errors import StoreError
from ..llm.models import ChatMessage


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a history load or save.

    Stores never raise on I/O failure. A failed operation carries the
    ``StoreError`` here and, for loads, an empty message list.
    """

    messages: list[ChatMessage] = field(default_factory=list)
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
