"""Serialize document blocks into Markdown text."""
from __future__ import annotations

import logging
from typing import Iterable, assert_never

from .document_models import (
    Block,
    CodeBlock,
    DelimiterBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
    TableBlock,
    UnknownBlock,
)

logger = logging.getLogger(__name__)

_DEFAULT_IMAGE_CAPTION = "Image"


def _table_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _table_to_markdown(content: list[list[str]]) -> str:
    if not content:
        return ""
    header, *rows = content
    lines = [_table_row(header), _table_row(["---"] * len(header))]
    lines.extend(_table_row(row) for row in rows)
    return "\n".join(lines) + "\n"


def _unknown_to_markdown(block: UnknownBlock) -> str:
    text = block.data.get("text") if isinstance(block.data, dict) else None
    if isinstance(text, str) and text:
        return f"{text}\n"
    logger.debug("Dropping block of type '%s' without usable text", block.type_name)
    return ""


def block_to_markdown(block: Block) -> str:
    """Return the Markdown chunk for a single block.

    Every non-empty chunk ends with a newline; joining chunks with another
    newline yields the blank line between blocks.
    """

    match block:
        case HeaderBlock(text=text, level=level):
            return f"{'#' * level} {text}\n"
        case ParagraphBlock(text=text):
            return f"{text}\n" if text else ""
        case ListBlock(style=style, items=items):
            prefix = "1. " if style == "ordered" else "- "
            return "\n".join(f"{prefix}{item}" for item in items) + "\n"
        case CodeBlock(code=code, language=language):
            return f"```{language}\n{code}\n```\n"
        case QuoteBlock(text=text, caption=caption):
            chunk = f"> {text}"
            if caption:
                chunk += f"\n> — {caption}"
            return chunk + "\n"
        case DelimiterBlock():
            return "---\n"
        case ImageBlock(url=url, caption=caption):
            return f"![{caption or _DEFAULT_IMAGE_CAPTION}]({url})\n"
        case TableBlock(content=content):
            return _table_to_markdown(content)
        case UnknownBlock():
            return _unknown_to_markdown(block)
        case _:
            assert_never(block)


def blocks_to_markdown(blocks: Iterable[Block]) -> str:
    """Render an ordered block sequence as a Markdown document."""

    chunks = [block_to_markdown(block) for block in blocks]
    # Empty chunks are skipped so dropped blocks leave no extra newline.
    return "\n".join(chunk for chunk in chunks if chunk)


__all__ = ["block_to_markdown", "blocks_to_markdown"]
