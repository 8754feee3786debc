"""Schemas for the Markdown conversion endpoints."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class EditorBlockPayload(BaseModel):
    id: Optional[str] = Field(default=None, description="Editor block identifier")
    type: str = Field(..., description="Editor block type, e.g. 'paragraph' or 'header'")
    data: dict[str, Any] = Field(default_factory=dict, description="Type specific block payload")


class EditorDocument(BaseModel):
    time: Optional[int] = Field(default=None, description="Editor save timestamp in milliseconds")
    blocks: List[EditorBlockPayload] = Field(default_factory=list, description="Ordered editor blocks")
    version: Optional[str] = Field(default=None, description="Editor version that produced the blocks")


class MarkdownPayload(BaseModel):
    markdown: str = Field(default="", description="Markdown document body")


class MarkdownConversionResponse(BaseModel):
    markdown: str = Field(..., description="Markdown rendered from the editor blocks")
    reading_time: int = Field(..., ge=1, description="Estimated reading time in minutes")


class PlainTextRequest(BaseModel):
    value: str = Field(default="", description="Raw form field value")
    wysiwyg: bool = Field(default=False, description="Whether the value came from the block editor")


class PlainTextResponse(BaseModel):
    text: str
