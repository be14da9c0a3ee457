from types import SimpleNamespace

import pytest

from textsql import llm
from textsql.config import settings


class FakeCompletions:
    """Stands in for `client.chat.completions` on the OpenAI client."""

    def __init__(self):
        self.reply: str | None = "SELECT 1;"
        self.exc: Exception | None = None
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason="stop")])


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings.genai, "api_key", "test-key")


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings.genai, "api_key", "")


@pytest.fixture
def fake_llm(monkeypatch, api_key):
    completions = FakeCompletions()
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(llm, "get_client", lambda: client)
    monkeypatch.setattr(llm, "_model", "gemini-2.0-flash")
    return completions
