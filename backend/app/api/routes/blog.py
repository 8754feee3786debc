"""Endpoints that fill in blog post metadata."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_app_settings, get_seo_generator
from app.core.config import Settings
from app.schemas.blog import (
    BlogMetadataRequest,
    BlogMetadataResponse,
    SeoDescriptionRequest,
    SeoDescriptionResponse,
)
from app.services.blog_metadata import build_blog_metadata
from app.services.ollama_client import OllamaError
from app.services.seo_description import SeoDescriptionGenerator

router = APIRouter(prefix="/blog", tags=["blog"])


@router.post("/metadata", response_model=BlogMetadataResponse)
def blog_metadata(
    payload: BlogMetadataRequest,
    app_settings: Settings = Depends(get_app_settings),
) -> BlogMetadataResponse:
    metadata = build_blog_metadata(
        payload.title,
        payload.content,
        slug=payload.slug,
        description=payload.description,
        words_per_minute=app_settings.words_per_minute,
        description_max_length=app_settings.seo_description_max_length,
    )
    return BlogMetadataResponse(**metadata.__dict__)


@router.post("/seo-description", response_model=SeoDescriptionResponse)
def seo_description(
    payload: SeoDescriptionRequest,
    generator: SeoDescriptionGenerator = Depends(get_seo_generator),
) -> SeoDescriptionResponse:
    try:
        result = generator.generate(payload.title, payload.content, prefer_model=payload.prefer_model)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OllamaError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return SeoDescriptionResponse(**result.__dict__)
