"""Tests for the Ollama client with the HTTP transport replaced."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from app.services import ollama_client
from app.services.ollama_client import OllamaClient, OllamaError
from app.services.seo_description import SeoDescriptionGenerator


class FakeResponse:
    def __init__(self, data: Any = None, status_code: int = 200, is_json: bool = True) -> None:
        self.data = data
        self.status_code = status_code
        self.is_json = is_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self) -> Any:
        if not self.is_json:
            raise requests.JSONDecodeError("Expecting value", "<html>", 0)
        return self.data


class Transport:
    """Records outgoing requests and answers with a queued response."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[FakeResponse] = []

    def __call__(self, method, url, *, json=None, timeout=None) -> FakeResponse:
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        return self.responses.pop(0)


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> Transport:
    fake = Transport()
    monkeypatch.setattr(ollama_client.requests, "request", fake)
    return fake


def test_generate_returns_text(transport: Transport) -> None:
    transport.responses.append(FakeResponse({"model": "llama3", "response": "Short summary.", "done": True}))

    result = OllamaClient("http://ollama:11434/").generate("llama3", "prompt", options={"temperature": 0.3})

    assert result.response == "Short summary."
    assert result.model == "llama3"
    assert transport.calls == [
        {
            "method": "POST",
            "url": "http://ollama:11434/api/generate",
            "json": {"model": "llama3", "prompt": "prompt", "stream": False, "options": {"temperature": 0.3}},
            "timeout": 60,
        }
    ]


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"model": "llama3", "done": True}),
        FakeResponse({"response": None}),
        FakeResponse([{"response": "chunk"}]),
        FakeResponse(status_code=500),
        FakeResponse(is_json=False),
    ],
)
def test_generate_rejects_unusable_replies(transport: Transport, response: FakeResponse) -> None:
    transport.responses.append(response)

    with pytest.raises(OllamaError):
        OllamaClient().generate("llama3", "prompt")


def test_unreachable_server_raises_ollama_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(ollama_client.requests, "request", refuse)

    with pytest.raises(OllamaError):
        OllamaClient().list_models()


def test_reply_without_text_triggers_excerpt_fallback(transport: Transport) -> None:
    transport.responses.append(FakeResponse({"model": "llama3", "done": True}))
    generator = SeoDescriptionGenerator(OllamaClient(), model="llama3", prompt_template="{content}")

    result = generator.generate("Title", "Plain body text.")

    assert result.used_fallback is True
    assert result.description == "Plain body text."


def test_list_models(transport: Transport) -> None:
    transport.responses.append(
        FakeResponse({"models": [{"name": "llama3"}, {"model": "qwen2.5:1.5b"}, {"size": 1}, "junk"]})
    )

    assert OllamaClient().list_models() == ["llama3", "qwen2.5:1.5b"]
    assert transport.calls[0]["method"] == "GET"
    assert transport.calls[0]["timeout"] == 10
