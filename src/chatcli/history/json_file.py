"""JSON file history backend.

Stores the whole conversation as a single JSON array of
``{"role": ..., "content": ...}`` objects. The file is rewritten in full
on every save; there is no locking, so concurrent writers race and the
last one wins.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..errors import StoreError
from ..llm.models import ChatMessage
from .base import HistoryStore
from .models import StoreResult

logger = logging.getLogger(__name__)

_history_adapter = TypeAdapter(list[ChatMessage])


def dump_history(messages: Sequence[ChatMessage]) -> str:
    """Serialize messages the way they are written to disk."""
    return json.dumps(
        [msg.model_dump() for msg in messages],
        indent=2,
        ensure_ascii=False,
    )


class JsonHistoryStore(HistoryStore):
    """History persisted to a single JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backend_type(self) -> str:
        return "json"

    def load(self) -> StoreResult:
        """Read the history file.

        A missing file is an empty history. A file that cannot be read,
        is not valid JSON, or whose top level is not an array of
        ``{"role", "content"}`` records is also treated as empty, with the
        failure logged and returned in the result. Role values and extra
        keys are kept as found.
        """
        if not self._path.exists():
            return StoreResult()

        try:
            raw = self._path.read_text(encoding="utf-8")
            messages = _history_adapter.validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            error = StoreError(f"Could not load conversation history from {self._path}: {e}")
            logger.warning("%s", error)
            return StoreResult(error=error)

        logger.debug("Loaded %d messages from %s", len(messages), self._path)
        return StoreResult(messages=messages)

    def save(self, messages: Sequence[ChatMessage]) -> StoreResult:
        """Overwrite the history file with ``messages``."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(dump_history(messages), encoding="utf-8")
        except OSError as e:
            error = StoreError(f"Could not save conversation history to {self._path}: {e}")
            logger.warning("%s", error)
            return StoreResult(messages=list(messages), error=error)

        logger.debug("Saved %d messages to %s", len(messages), self._path)
        return StoreResult(messages=list(messages))
