import json

import pytest
import requests

from app import llm_client
from app.config import get_settings


def make_response(status_code=200, payload=None, text=None):
    """A real requests.Response carrying `payload` as JSON, or `text` verbatim."""
    r = requests.models.Response()
    r.status_code = status_code
    if text is not None:
        r._content = text.encode("utf-8")
    elif payload is not None:
        r._content = json.dumps(payload).encode("utf-8")
    else:
        r._content = b""
    r.encoding = "utf-8"
    r.headers["Content-Type"] = "application/json"
    return r


def chat_reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def settings_env(monkeypatch):
    monkeypatch.setenv("API_KEY", "test-key")
    monkeypatch.delenv("AI_BASE_URL", raising=False)
    monkeypatch.delenv("AI_MODEL", raising=False)
    monkeypatch.delenv("AI_TIMEOUT", raising=False)
    monkeypatch.delenv("AI_TEMPERATURE", raising=False)
    monkeypatch.delenv("AI_MAX_TOKENS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def upstream(monkeypatch):
    """Replace requests.post in the client; returns the list of captured calls."""
    calls = []
    state = {"response": make_response(200, chat_reply('{"timetable": []}'))}

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if isinstance(state["response"], Exception):
            raise state["response"]
        return state["response"]

    monkeypatch.setattr(llm_client.requests, "post", fake_post)

    class Upstream:
        def reply(self, content):
            state["response"] = make_response(200, chat_reply(content))

        def respond(self, response):
            state["response"] = response

        def fail(self, exc=None):
            state["response"] = exc or requests.ConnectionError("connection refused")

        @property
        def calls(self):
            return calls

    return Upstream()
