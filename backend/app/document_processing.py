"""Utility helpers for reading uploaded Markdown documents into blocks."""
from __future__ import annotations

from pathlib import Path
import logging

from .document_models import (
    Block,
    CodeBlock,
    HeaderBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
    TableBlock,
)
from .markdown_parser import markdown_to_blocks

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".md", ".markdown", ".txt"}


class UnsupportedDocumentError(RuntimeError):
    """Raised when an uploaded document is not a Markdown or text file."""


def _decode_payload(payload: bytes) -> str:
    """Декодирует байты в текст, отбрасывая BOM и битые символы."""

    text = payload.decode("utf-8", "ignore")
    return text.lstrip("\ufeff")


def load_blocks(filename: str, payload: bytes) -> list[Block]:
    """Load document blocks for the provided filename and payload."""

    suffix = Path(filename or "").suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedDocumentError("Supported formats are Markdown (.md, .markdown) and plain text (.txt)")

    blocks = markdown_to_blocks(_decode_payload(payload))
    logger.info("Loaded %s blocks from '%s'", len(blocks), filename)
    return blocks


def _block_lines(block: Block) -> list[str]:
    if isinstance(block, (HeaderBlock, ParagraphBlock, QuoteBlock)):
        return [block.text]
    if isinstance(block, ListBlock):
        return list(block.items)
    if isinstance(block, CodeBlock):
        return block.code.splitlines()
    if isinstance(block, TableBlock):
        return [" | ".join(cell.strip() for cell in row if cell.strip()) for row in block.content]
    return []


def blocks_to_text_lines(blocks: list[Block]) -> list[str]:
    """Convert blocks to the non-empty text lines they contain."""

    lines: list[str] = []
    for block in blocks:
        for line in _block_lines(block):
            value = line.strip()
            if value:
                lines.append(value)
    return lines


__all__ = [
    "SUPPORTED_SUFFIXES",
    "UnsupportedDocumentError",
    "blocks_to_text_lines",
    "load_blocks",
]
