"""Minimal Ollama client used for meta description completions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

TAGS_PATH = "/api/tags"
GENERATE_PATH = "/api/generate"


class OllamaError(RuntimeError):
    """Raised when Ollama is unreachable or answers with an unusable payload."""


@dataclass
class OllamaResponse:
    """A single non-streamed completion."""

    model: str
    response: str
    raw: Dict[str, Any] = field(default_factory=dict)


class OllamaClient:
    """Blocking client for the two Ollama endpoints the service needs."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        *,
        timeout: float = 60,
        tags_timeout: float = 10,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.tags_timeout = tags_timeout

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        timeout: float,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(method, url, json=payload, timeout=timeout)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as exc:
            raise OllamaError(f"Ollama {method} {path} returned {exc.response.status_code}") from exc
        except requests.JSONDecodeError as exc:
            raise OllamaError(f"Ollama {method} {path} did not return JSON") from exc
        except requests.RequestException as exc:
            raise OllamaError(f"Failed to reach Ollama at {url}: {exc}") from exc
        if not isinstance(data, dict):
            raise OllamaError(f"Ollama {method} {path} returned {type(data).__name__}, expected an object")
        return data

    def list_models(self) -> List[str]:
        """Names of the models pulled into the Ollama instance."""

        tags = self._request_json("GET", TAGS_PATH, timeout=self.tags_timeout)
        models = tags.get("models") or []
        return [
            str(item.get("name") or item.get("model"))
            for item in models
            if isinstance(item, dict) and (item.get("name") or item.get("model"))
        ]

    def generate(
        self,
        model: str,
        prompt: str,
        *,
        options: Optional[Dict[str, Any]] = None,
    ) -> OllamaResponse:
        """Request a single completion for ``prompt``.

        A reply without a string ``response`` field raises :class:`OllamaError`
        so callers can fall back instead of using the raw payload as text.
        """

        payload: Dict[str, Any] = {"model": model, "prompt": prompt, "stream": False}
        if options:
            payload["options"] = options

        logger.debug("Requesting completion from model '%s'", model)
        data = self._request_json("POST", GENERATE_PATH, timeout=self.timeout, payload=payload)
        text = data.get("response")
        if not isinstance(text, str):
            raise OllamaError(f"Ollama reply from model '{model}' has no text response")
        return OllamaResponse(model=str(data.get("model") or model), response=text, raw=data)


__all__ = ["OllamaClient", "OllamaError", "OllamaResponse"]
