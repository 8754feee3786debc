"""Mapping between block-editor JSON payloads and document blocks."""
from __future__ import annotations

import json
import logging
import uuid
from typing import Any, Iterable, Mapping, assert_never

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

EditorPayload = dict[str, Any]

_DEFAULT_HEADER_LEVEL = 2


def generate_block_id() -> str:
    """Return a short random id for a new editor block."""

    return uuid.uuid4().hex[:12]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _header_level(value: Any) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError, OverflowError):
        return _DEFAULT_HEADER_LEVEL
    return min(max(level, 1), 6)


def _list_items(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    items: list[str] = []
    for item in value:
        if isinstance(item, Mapping):
            items.append(_as_text(item.get("content")))
        else:
            items.append(_as_text(item))
    return items


def _table_rows(value: Any) -> list[list[str]] | None:
    if not isinstance(value, list):
        return None
    rows: list[list[str]] = []
    for row in value:
        if not isinstance(row, list):
            return None
        rows.append([_as_text(cell) for cell in row])
    return rows


def _image_url(data: Mapping[str, Any]) -> str:
    file_info = data.get("file")
    if isinstance(file_info, Mapping) and file_info.get("url"):
        return _as_text(file_info.get("url"))
    return _as_text(data.get("url"))


def block_from_editor(payload: Any) -> Block:
    """Convert an editor payload ``{"type", "data"}`` into a :class:`Block`.

    Payloads with an unknown type or unusable fields become
    :class:`UnknownBlock`, never an exception.
    """

    if not isinstance(payload, Mapping):
        return UnknownBlock(type_name="", data={})

    block_type = _as_text(payload.get("type"))
    raw_data = payload.get("data")
    data: dict[str, Any] = dict(raw_data) if isinstance(raw_data, Mapping) else {}

    if block_type == "header":
        return HeaderBlock(text=_as_text(data.get("text")), level=_header_level(data.get("level")))
    elif block_type == "paragraph":
        return ParagraphBlock(text=_as_text(data.get("text")))
    elif block_type == "list":
        items = _list_items(data.get("items"))
        if items:
            style = "ordered" if data.get("style") == "ordered" else "unordered"
            return ListBlock(style=style, items=items)
    elif block_type == "code":
        return CodeBlock(code=_as_text(data.get("code")), language=_as_text(data.get("language")))
    elif block_type == "quote":
        caption = _as_text(data.get("caption")) or None
        return QuoteBlock(text=_as_text(data.get("text")), caption=caption)
    elif block_type == "delimiter":
        return DelimiterBlock()
    elif block_type == "image":
        url = _image_url(data)
        if url:
            return ImageBlock(url=url, caption=_as_text(data.get("caption")) or None)
    elif block_type == "table":
        rows = _table_rows(data.get("content"))
        if rows:
            return TableBlock(content=rows)

    logger.debug("Keeping editor block of type '%s' as unknown", block_type)
    return UnknownBlock(type_name=block_type, data=data)


def block_to_editor(block: Block, block_id: str | None = None) -> EditorPayload:
    """Return the editor payload for ``block``."""

    data: dict[str, Any]
    match block:
        case HeaderBlock(text=text, level=level):
            data = {"text": text, "level": level}
        case ParagraphBlock(text=text):
            data = {"text": text}
        case ListBlock(style=style, items=items):
            data = {"style": style, "items": list(items)}
        case CodeBlock(code=code, language=language):
            data = {"code": code, "language": language}
        case QuoteBlock(text=text, caption=caption):
            data = {"text": text, "caption": caption or "", "alignment": "left"}
        case DelimiterBlock():
            data = {}
        case ImageBlock(url=url, caption=caption):
            data = {"file": {"url": url}, "url": url, "caption": caption or ""}
        case TableBlock(content=content):
            data = {"withHeadings": True, "content": [list(row) for row in content]}
        case UnknownBlock(type_name=type_name, data=raw):
            return {"id": block_id or generate_block_id(), "type": type_name, "data": dict(raw)}
        case _:
            assert_never(block)
    return {"id": block_id or generate_block_id(), "type": block.type, "data": data}


def blocks_from_editor(payloads: Iterable[Any]) -> list[Block]:
    return [block_from_editor(payload) for payload in payloads]


def blocks_to_editor(blocks: Iterable[Block]) -> list[EditorPayload]:
    return [block_to_editor(block) for block in blocks]


def _editor_block_text(payload: Any) -> str:
    block = block_from_editor(payload)
    match block:
        case HeaderBlock(text=text) | ParagraphBlock(text=text):
            return text
        case ListBlock(items=items):
            return "\n".join(items)
        case QuoteBlock(text=text, caption=caption):
            suffix = f" - {caption}" if caption else ""
            return f'"{text}"{suffix}'
        case CodeBlock(code=code):
            return code
        case DelimiterBlock():
            return "***"
        case TableBlock(content=content):
            return "\n".join(" | ".join(row) for row in content)
        case ImageBlock():
            return ""
        case UnknownBlock(data=data):
            fallback = data.get("text") or data.get("content") or ""
            return fallback if isinstance(fallback, str) else ""
        case _:
            assert_never(block)


def _load_editor_json(value: str) -> list[Any] | None:
    try:
        parsed = json.loads(value)
    except (json.JSONDecodeError, TypeError, RecursionError):
        return None
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict) and isinstance(parsed.get("blocks"), list):
        return parsed["blocks"]
    return None


def editor_blocks_to_text(blocks: Iterable[Any] | str) -> str:
    """Render editor blocks (or their JSON string) as plain text.

    A string that is not editor JSON is returned unchanged.
    """

    if isinstance(blocks, str):
        loaded = _load_editor_json(blocks)
        if loaded is None:
            return blocks
        payloads: list[Any] = loaded
    elif isinstance(blocks, Iterable):
        payloads = list(blocks)
    else:
        return ""

    return "\n\n".join(_editor_block_text(payload) for payload in payloads).strip()


def text_to_editor_blocks(text: str) -> list[EditorPayload]:
    """Split plain text on blank lines into paragraph payloads."""

    if not text:
        return []
    paragraphs = [chunk.strip() for chunk in text.split("\n\n") if chunk.strip()]
    return [
        {"id": generate_block_id(), "type": "paragraph", "data": {"text": paragraph}}
        for paragraph in paragraphs
    ]


def is_editor_format(value: Any) -> bool:
    """Return ``True`` when ``value`` is a JSON string holding editor blocks."""

    if not value or not isinstance(value, str):
        return False
    return _load_editor_json(value) is not None


def process_form_value(value: str, is_wysiwyg: bool) -> str:
    """Normalize a submitted form field depending on the editing mode."""

    if not value:
        return ""
    if is_wysiwyg and is_editor_format(value):
        return editor_blocks_to_text(value)
    return value


__all__ = [
    "EditorPayload",
    "block_from_editor",
    "block_to_editor",
    "blocks_from_editor",
    "blocks_to_editor",
    "editor_blocks_to_text",
    "generate_block_id",
    "is_editor_format",
    "process_form_value",
    "text_to_editor_blocks",
]
