"""Common document model definitions used by the Markdown converters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Union

BlockType = Literal[
    "header",
    "paragraph",
    "list",
    "code",
    "quote",
    "delimiter",
    "image",
    "table",
]
ListStyle = Literal["ordered", "unordered"]


@dataclass(slots=True)
class HeaderBlock:
    """A heading line.

    Parameters
    ----------
    text:
        Heading text without the leading ``#`` markers.
    level:
        Heading depth, between 1 and 6.
    """

    type: ClassVar[BlockType] = "header"

    text: str
    level: int = 2


@dataclass(slots=True)
class ParagraphBlock:
    type: ClassVar[BlockType] = "paragraph"

    text: str


@dataclass(slots=True)
class ListBlock:
    """A flat list. Items never contain nested lists."""

    type: ClassVar[BlockType] = "list"

    style: ListStyle
    items: list[str] = field(default_factory=list)


@dataclass(slots=True)
class CodeBlock:
    type: ClassVar[BlockType] = "code"

    code: str
    language: str = ""


@dataclass(slots=True)
class QuoteBlock:
    type: ClassVar[BlockType] = "quote"

    text: str
    caption: str | None = None


@dataclass(slots=True)
class DelimiterBlock:
    type: ClassVar[BlockType] = "delimiter"


@dataclass(slots=True)
class ImageBlock:
    type: ClassVar[BlockType] = "image"

    url: str
    caption: str | None = None


@dataclass(slots=True)
class TableBlock:
    """Table rows; the first row is rendered as the header row."""

    type: ClassVar[BlockType] = "table"

    content: list[list[str]] = field(default_factory=list)


@dataclass(slots=True)
class UnknownBlock:
    """Editor block that does not map onto a known variant.

    ``type_name`` keeps the editor's original tag and ``data`` its raw payload
    so the serializer can still salvage a ``text`` field.
    """

    type: ClassVar[str] = "unknown"

    type_name: str
    data: dict[str, Any] = field(default_factory=dict)


Block = Union[
    HeaderBlock,
    ParagraphBlock,
    ListBlock,
    CodeBlock,
    QuoteBlock,
    DelimiterBlock,
    ImageBlock,
    TableBlock,
    UnknownBlock,
]


__all__ = [
    "Block",
    "BlockType",
    "CodeBlock",
    "DelimiterBlock",
    "HeaderBlock",
    "ImageBlock",
    "ListBlock",
    "ListStyle",
    "ParagraphBlock",
    "QuoteBlock",
    "TableBlock",
    "UnknownBlock",
]
