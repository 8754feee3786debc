"""Tests for blog metadata derivation."""

from __future__ import annotations

from app.services.blog_metadata import build_blog_metadata, excerpt_description


def test_metadata_is_derived_from_title_and_content() -> None:
    metadata = build_blog_metadata("Hello, World! 2024", "# Hi\n\nSome words here")

    assert metadata.slug == "hello-world-2024"
    assert metadata.slug_is_valid is True
    assert metadata.reading_time == 1
    assert metadata.plain_text == "Hi\nSome words here"
    assert metadata.description == "Hi Some words here"


def test_explicit_values_are_kept() -> None:
    metadata = build_blog_metadata(
        "Ignored Title",
        "text",
        slug="custom-slug",
        description="  Hand written.  ",
    )

    assert metadata.slug == "custom-slug"
    assert metadata.description == "Hand written."


def test_long_content_description_is_truncated() -> None:
    metadata = build_blog_metadata("Long", "word " * 300, words_per_minute=100)

    assert metadata.reading_time == 3
    assert len(metadata.description) <= 160
    assert metadata.description.endswith("...")


def test_untitled_slug_is_flagged_invalid() -> None:
    metadata = build_blog_metadata("!!!", "content")

    assert metadata.slug == ""
    assert metadata.slug_is_valid is False


def test_excerpt_keeps_short_text() -> None:
    assert excerpt_description("short\ntext", 160) == "short text"
