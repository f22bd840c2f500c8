from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from novaria_proxy.core.gemini_client import get_gemini_client
from novaria_proxy.main import app
from novaria_proxy.models.model_registry import ModelEntry


class StubGeminiClient:
    """
    In-memory stand-in for GeminiChatClient.
    Records every call and either replies with `reply` or raises `error`.
    """

    def __init__(self, reply: str = "Hi!", error: Optional[BaseException] = None, configured: bool = True):
        self.reply = reply
        self.error = error
        self.configured = configured
        self.calls: List[Dict[str, Any]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send_chat_message(self, entry: ModelEntry, history: List[Dict[str, Any]], parts: List[Dict[str, Any]]) -> str:
        self.calls.append({"entry": entry, "history": history, "parts": parts})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_gemini() -> StubGeminiClient:
    return StubGeminiClient()


@pytest.fixture
def client(stub_gemini: StubGeminiClient):
    app.dependency_overrides[get_gemini_client] = lambda: stub_gemini
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_gemini_client, None)
