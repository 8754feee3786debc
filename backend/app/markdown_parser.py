"""Line-oriented Markdown parser producing flat document blocks.

The parser walks the input once, classifying the current line and greedily
consuming the run of lines that belongs to the matched block kind. Checks
run in a fixed priority order and the first match wins:

1. blank line (skipped)
2. ATX heading
3. fenced code
4. list item (``-``/``*``/``+`` or ``1.``)
5. blockquote
6. horizontal rule
7. standalone image
8. paragraph (everything else)

Tables are not recognised; pipe rows fall through to paragraphs.
"""
from __future__ import annotations

import logging
import re
from typing import Literal

from .document_models import (
    Block,
    CodeBlock,
    DelimiterBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)

logger = logging.getLogger(__name__)

LineKind = Literal["blank", "heading", "fence", "list", "quote", "rule", "image", "text"]

_heading_re = re.compile(r"^(#{1,6})\s+(.+)$")
_unordered_item_re = re.compile(r"^[-*+]\s")
_ordered_item_re = re.compile(r"^\d+\.\s")
_list_marker_re = re.compile(r"^(?:[-*+]|\d+\.)\s+")
_rule_re = re.compile(r"^[-*_]{3,}$")
_image_re = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")
_quote_marker_re = re.compile(r"^>")

_FENCE = "```"


def _is_list_item(stripped: str) -> bool:
    return bool(_unordered_item_re.match(stripped) or _ordered_item_re.match(stripped))


def classify_line(line: str) -> LineKind:
    """Return the block kind a line would start, honouring check priority."""

    stripped = line.strip()
    if not stripped:
        return "blank"
    if _heading_re.match(stripped):
        return "heading"
    if stripped.startswith(_FENCE):
        return "fence"
    if _is_list_item(stripped):
        return "list"
    if stripped.startswith(">"):
        return "quote"
    if _rule_re.match(stripped):
        return "rule"
    if _image_re.match(stripped):
        return "image"
    return "text"


def _parse_heading(lines: list[str], index: int) -> tuple[Block, int]:
    match = _heading_re.match(lines[index].strip())
    if match is None:
        return ParagraphBlock(text=lines[index].strip()), index + 1
    return HeaderBlock(text=match.group(2), level=len(match.group(1))), index + 1


def _parse_code(lines: list[str], index: int) -> tuple[Block, int]:
    language = lines[index].strip()[len(_FENCE):].strip()
    code_lines: list[str] = []
    cursor = index + 1
    while cursor < len(lines) and not lines[cursor].strip().startswith(_FENCE):
        code_lines.append(lines[cursor])
        cursor += 1
    if cursor < len(lines):
        # closing fence
        cursor += 1
    return CodeBlock(code="\n".join(code_lines), language=language), cursor


def _parse_list(lines: list[str], index: int) -> tuple[Block, int]:
    first = lines[index].strip()
    style = "ordered" if _ordered_item_re.match(first) else "unordered"
    items: list[str] = []
    cursor = index
    while cursor < len(lines):
        stripped = lines[cursor].strip()
        if not _is_list_item(stripped):
            break
        items.append(_list_marker_re.sub("", stripped, count=1))
        cursor += 1
    return ListBlock(style=style, items=items), cursor


def _parse_quote(lines: list[str], index: int) -> tuple[Block, int]:
    parts: list[str] = []
    cursor = index
    while cursor < len(lines):
        stripped = lines[cursor].strip()
        if not stripped.startswith(">"):
            break
        parts.append(_quote_marker_re.sub("", stripped, count=1).strip())
        cursor += 1
    return QuoteBlock(text=" ".join(parts)), cursor


def _parse_image(lines: list[str], index: int) -> tuple[Block, int]:
    match = _image_re.match(lines[index].strip())
    if match is None:
        return ParagraphBlock(text=lines[index].strip()), index + 1
    return ImageBlock(url=match.group(2), caption=match.group(1)), index + 1


def _parse_paragraph(lines: list[str], index: int) -> tuple[Block, int]:
    parts = [lines[index].strip()]
    cursor = index + 1
    while cursor < len(lines) and classify_line(lines[cursor]) == "text":
        parts.append(lines[cursor].strip())
        cursor += 1
    return ParagraphBlock(text=" ".join(parts)), cursor


def markdown_to_blocks(markdown: str) -> list[Block]:
    """Parse Markdown text into an ordered list of blocks.

    The function is total: any input yields a (possibly empty) block list.
    """

    lines = (markdown or "").replace("\r\n", "\n").split("\n")
    blocks: list[Block] = []
    index = 0

    while index < len(lines):
        kind = classify_line(lines[index])
        if kind == "blank":
            index += 1
            continue
        if kind == "heading":
            block, index = _parse_heading(lines, index)
        elif kind == "fence":
            block, index = _parse_code(lines, index)
        elif kind == "list":
            block, index = _parse_list(lines, index)
        elif kind == "quote":
            block, index = _parse_quote(lines, index)
        elif kind == "rule":
            block, index = DelimiterBlock(), index + 1
        elif kind == "image":
            block, index = _parse_image(lines, index)
        else:
            block, index = _parse_paragraph(lines, index)
        blocks.append(block)

    logger.debug("Parsed %s markdown lines into %s blocks", len(lines), len(blocks))
    return blocks


__all__ = ["LineKind", "classify_line", "markdown_to_blocks"]
