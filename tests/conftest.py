"""Pytest configuration and shared fixtures."""
from typing import Any

import pytest

from chatcli.errors import ProviderError
from chatcli.history import JsonHistoryStore
from chatcli.llm import ChatMessage, LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """Scripted provider that records every request.

    Each entry in ``replies`` is either the reply text or a
    ``ProviderError`` to raise for that call.
    """

    def __init__(self, replies: list[str | ProviderError] | None = None):
        self.replies = list(replies or [])
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({
            "messages": list(messages),
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        reply = self.replies.pop(0)
        if isinstance(reply, ProviderError):
            raise reply
        return LLMResponse(content=reply, model=model or self.model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_provider():
    """Return a provider with no scripted replies."""
    return FakeProvider()


@pytest.fixture
def history_path(tmp_path):
    """Return a history file path that does not exist yet."""
    return tmp_path / "history.json"


@pytest.fixture
def json_store(history_path):
    """Return a JSON store over a fresh file."""
    return JsonHistoryStore(history_path)


@pytest.fixture
def sample_history():
    """Return one completed exchange."""
    return [
        ChatMessage(role="user", content="Hello"),
        ChatMessage(role="assistant", content="Hi there!"),
    ]
