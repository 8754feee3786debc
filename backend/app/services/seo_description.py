"""Service for writing SEO meta descriptions for blog posts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from app.markdown_utils import markdown_to_plain_text, truncate_text
from app.services.blog_metadata import excerpt_description
from app.services.ollama_client import OllamaClient, OllamaError

logger = logging.getLogger(__name__)


@dataclass
class SeoDescriptionResult:
    """Normalized result returned by the description service."""

    description: str
    used_fallback: bool
    raw_model_output: Optional[str] = None


class SeoDescriptionGenerator:
    """Ask the language model for a meta description, falling back to an excerpt."""

    QUOTES = "\"'“”«»"

    def __init__(
        self,
        ollama_client: OllamaClient,
        *,
        model: str,
        prompt_template: str,
        max_length: int = 160,
        sample_length: int = 500,
        enable_fallback: bool = True,
    ) -> None:
        self._ollama = ollama_client
        self._model = model
        self._prompt_template = prompt_template
        self._max_length = max_length
        self._sample_length = sample_length
        self._enable_fallback = enable_fallback

    # ------------------------------------------------------------------
    def generate(self, title: str, markdown: str, *, prefer_model: bool = True) -> SeoDescriptionResult:
        """Return a meta description for the post."""

        plain_text = markdown_to_plain_text(markdown)
        if not plain_text:
            raise ValueError("Blog content is empty")

        model_output: Optional[str] = None

        if prefer_model:
            sample = truncate_text(plain_text, self._sample_length)
            prompt = self._prompt_template.replace("{title}", title.strip()).replace("{content}", sample)
            try:
                response = self._ollama.generate(
                    model=self._model,
                    prompt=prompt,
                    options={"temperature": 0.3},
                )
                model_output = response.response
                description = self._clean_model_output(model_output)
                if description:
                    logger.info("SEO description generated via LLM")
                    return SeoDescriptionResult(
                        description=description,
                        used_fallback=False,
                        raw_model_output=model_output,
                    )
                logger.warning("Model returned an empty description; falling back to excerpt")
            except OllamaError as exc:
                logger.warning("Model call failed: %s", exc)

        if not self._enable_fallback:
            raise OllamaError("Model did not produce a description and the excerpt fallback is disabled")

        logger.info("Using plain-text excerpt as SEO description")
        return SeoDescriptionResult(
            description=excerpt_description(plain_text, self._max_length),
            used_fallback=True,
            raw_model_output=model_output,
        )

    # ------------------------------------------------------------------
    def _clean_model_output(self, raw: str) -> str:
        description = (raw or "").strip().strip(self.QUOTES).strip()
        if len(description) > self._max_length:
            description = truncate_text(description, self._max_length - 3)
        return description


__all__ = ["SeoDescriptionGenerator", "SeoDescriptionResult"]
