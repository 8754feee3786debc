"""Pydantic schemas exposed by the HTTP API."""

from app.schemas.blog import (
    SLUG_PATTERN,
    BlogMetadataRequest,
    BlogMetadataResponse,
    SeoDescriptionRequest,
    SeoDescriptionResponse,
)
from app.schemas.editor import (
    EditorBlockPayload,
    EditorDocument,
    MarkdownConversionResponse,
    MarkdownPayload,
    PlainTextRequest,
    PlainTextResponse,
)

__all__ = [
    "SLUG_PATTERN",
    "BlogMetadataRequest",
    "BlogMetadataResponse",
    "EditorBlockPayload",
    "EditorDocument",
    "MarkdownConversionResponse",
    "MarkdownPayload",
    "PlainTextRequest",
    "PlainTextResponse",
    "SeoDescriptionRequest",
    "SeoDescriptionResponse",
]
