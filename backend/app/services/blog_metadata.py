"""Derive blog post metadata from its title and Markdown body."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from app.markdown_utils import (
    WORDS_PER_MINUTE,
    calculate_reading_time,
    generate_slug,
    is_valid_slug,
    markdown_to_plain_text,
    truncate_text,
)

DEFAULT_DESCRIPTION_LENGTH = 160

_whitespace_re = re.compile(r"\s+")


@dataclass
class BlogMetadata:
    """Metadata saved next to a post's Markdown file."""

    slug: str
    slug_is_valid: bool
    reading_time: int
    description: str
    plain_text: str


def excerpt_description(plain_text: str, max_length: int = DEFAULT_DESCRIPTION_LENGTH) -> str:
    """Collapse whitespace and cut the text down to a meta description."""

    text = _whitespace_re.sub(" ", plain_text).strip()
    if len(text) > max_length:
        return truncate_text(text, max_length - 3)
    return text


def build_blog_metadata(
    title: str,
    markdown: str,
    *,
    slug: Optional[str] = None,
    description: Optional[str] = None,
    words_per_minute: int = WORDS_PER_MINUTE,
    description_max_length: int = DEFAULT_DESCRIPTION_LENGTH,
) -> BlogMetadata:
    """Fill in slug, reading time and description for a post being saved."""

    final_slug = (slug or "").strip() or generate_slug(title)
    plain_text = markdown_to_plain_text(markdown)
    final_description = (description or "").strip() or excerpt_description(plain_text, description_max_length)

    return BlogMetadata(
        slug=final_slug,
        slug_is_valid=is_valid_slug(final_slug),
        reading_time=calculate_reading_time(markdown, words_per_minute),
        description=final_description,
        plain_text=plain_text,
    )


__all__ = ["BlogMetadata", "build_blog_metadata", "excerpt_description"]
