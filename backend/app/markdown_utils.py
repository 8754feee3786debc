"""Utilities for Markdown text processing and blog metadata generation."""
from __future__ import annotations

import math
import re

WORDS_PER_MINUTE = 200

_markdown_syntax_re = re.compile(r"[#*`>\-\[\]()]")
_whitespace_re = re.compile(r"\s+")
_image_re = re.compile(r"!\[.*?\]\(.*?\)")
_link_re = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_blank_lines_re = re.compile(r"\n{2,}")
_slug_strip_re = re.compile(r"[^A-Za-z0-9_\s-]")
_hyphens_re = re.compile(r"-+")
_slug_pattern_re = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def calculate_reading_time(markdown: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Return the reading time in whole minutes, never less than one."""

    stripped = _markdown_syntax_re.sub("", markdown or "")
    words = [word for word in _whitespace_re.split(stripped) if word]
    return max(1, math.ceil(len(words) / max(words_per_minute, 1)))


def generate_slug(title: str) -> str:
    """Return a URL-safe slug derived from a post title."""

    slug = (title or "").lower()
    slug = _slug_strip_re.sub("", slug)
    slug = _whitespace_re.sub("-", slug)
    slug = _hyphens_re.sub("-", slug)
    return slug.strip().strip("-")


def is_valid_slug(slug: str) -> bool:
    return bool(_slug_pattern_re.match(slug or ""))


def truncate_text(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters and append an ellipsis."""

    if len(text) <= max_length:
        return text
    return text[:max(max_length, 0)].rstrip() + "..."


def markdown_to_plain_text(markdown: str) -> str:
    """Strip Markdown syntax and return the readable text."""

    text = _image_re.sub("", markdown or "")
    text = _link_re.sub(r"\1", text)
    text = _markdown_syntax_re.sub("", text)
    text = _blank_lines_re.sub("\n", text)
    return text.strip()


__all__ = [
    "WORDS_PER_MINUTE",
    "calculate_reading_time",
    "generate_slug",
    "is_valid_slug",
    "markdown_to_plain_text",
    "truncate_text",
]
