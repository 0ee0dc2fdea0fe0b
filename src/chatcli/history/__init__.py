"""Conversation history module for chatcli.

Provides best-effort persistence of the message sequence.
"""

from .base import HistoryStore
from .factory import create_history_store
from .in_memory import InMemoryHistoryStore
from .json_file import JsonHistoryStore, dump_history
from .models import StoreResult

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "JsonHistoryStore",
    "StoreResult",
    "create_history_store",
    "dump_history",
]
