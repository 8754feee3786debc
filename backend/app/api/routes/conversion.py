"""Endpoints converting between editor blocks and Markdown."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.document_models import Block
from app.document_processing import UnsupportedDocumentError, load_blocks
from app.editor_format import block_to_editor, blocks_from_editor, process_form_value
from app.markdown_parser import markdown_to_blocks
from app.markdown_serializer import blocks_to_markdown
from app.markdown_utils import calculate_reading_time
from app.schemas.editor import (
    EditorBlockPayload,
    EditorDocument,
    MarkdownConversionResponse,
    MarkdownPayload,
    PlainTextRequest,
    PlainTextResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert", tags=["convert"])


def _to_editor_document(blocks: list[Block], version: str) -> EditorDocument:
    return EditorDocument(
        time=int(time.time() * 1000),
        blocks=[EditorBlockPayload(**block_to_editor(block)) for block in blocks],
        version=version,
    )


@router.post("/markdown", response_model=MarkdownConversionResponse)
def convert_to_markdown(
    payload: EditorDocument,
    app_settings: Settings = Depends(get_app_settings),
) -> MarkdownConversionResponse:
    blocks = blocks_from_editor(block.model_dump() for block in payload.blocks)
    markdown = blocks_to_markdown(blocks)
    return MarkdownConversionResponse(
        markdown=markdown,
        reading_time=calculate_reading_time(markdown, app_settings.words_per_minute),
    )


@router.post("/blocks", response_model=EditorDocument)
def convert_to_blocks(
    payload: MarkdownPayload,
    app_settings: Settings = Depends(get_app_settings),
) -> EditorDocument:
    return _to_editor_document(markdown_to_blocks(payload.markdown), app_settings.editor_version)


@router.post("/blocks/file", response_model=EditorDocument)
async def convert_file_to_blocks(
    file: UploadFile = File(...),
    app_settings: Settings = Depends(get_app_settings),
) -> EditorDocument:
    contents = await file.read()
    try:
        blocks = load_blocks(file.filename or "", contents)
    except UnsupportedDocumentError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    return _to_editor_document(blocks, app_settings.editor_version)


@router.post("/plain-text", response_model=PlainTextResponse)
def convert_to_plain_text(payload: PlainTextRequest) -> PlainTextResponse:
    return PlainTextResponse(text=process_form_value(payload.value, payload.wysiwyg))
