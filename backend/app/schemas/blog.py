"""Schemas for blog metadata endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"


class BlogMetadataRequest(BaseModel):
    title: str = Field(..., min_length=1, description="Post title")
    content: str = Field(default="", description="Markdown body of the post")
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN, description="Explicit URL slug")
    description: Optional[str] = Field(default=None, description="Explicit meta description")


class BlogMetadataResponse(BaseModel):
    slug: str = Field(..., description="URL slug used for the post file name")
    slug_is_valid: bool = Field(..., description="Whether the slug satisfies the URL slug pattern")
    reading_time: int = Field(..., ge=1, description="Estimated reading time in minutes")
    description: str = Field(..., description="Meta description for search engines")
    plain_text: str = Field(..., description="Post body without Markdown syntax")


class SeoDescriptionRequest(BaseModel):
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Markdown body of the post")
    prefer_model: bool = Field(
        default=True,
        description="If true, the LLM will be used before falling back to a plain-text excerpt.",
    )


class SeoDescriptionResponse(BaseModel):
    description: str = Field(..., description="Generated meta description")
    used_fallback: bool = Field(default=False, description="Indicates whether the excerpt fallback was used.")
    raw_model_output: Optional[str] = Field(
        default=None,
        description="Raw response returned by the language model, useful for debugging.",
    )
