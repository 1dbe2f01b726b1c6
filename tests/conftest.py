"""Shared fixtures for the notifier tests."""
from __future__ import annotations

import json
from typing import Any, Optional

import pytest


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, status_code: int = 200, body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real LARK_* variables from leaking into tests."""

    for name in ("LARK_WEBHOOK_URL", "LARK_SECRET", "LARK_TIMEOUT", "LARK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_post(monkeypatch):
    """Patch ``requests.post`` and record every call."""

    calls: list[dict[str, Any]] = []
    state = {"response": FakeResponse(200, {"code": 0, "msg": "success"})}

    def _post(url, json=None, timeout=None, **kwargs):
        calls.append({"url": url, "json": json, "timeout": timeout})
        response = state["response"]
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr("lark_notifier.notifier.requests.post", _post)

    def respond(status_code=200, body=None, text=None, error=None):
        state["response"] = error or FakeResponse(status_code, body, text)

    _post.calls = calls
    _post.respond = respond
    return _post
