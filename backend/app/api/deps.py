"""Common dependency functions for API routes."""

from functools import lru_cache
from typing import Generator

from fastapi import Depends

from app.core.config import Settings, get_settings, settings
from app.services.ollama_client import OllamaClient
from app.services.seo_description import SeoDescriptionGenerator


@lru_cache
def get_ollama_client() -> OllamaClient:
    return OllamaClient(base_url=settings.ollama_base_url)


def get_app_settings() -> Generator[Settings, None, None]:
    yield get_settings()


def get_seo_generator(
    client: OllamaClient = Depends(get_ollama_client),
    app_settings: Settings = Depends(get_app_settings),
) -> SeoDescriptionGenerator:
    return SeoDescriptionGenerator(
        client,
        model=app_settings.seo_model,
        prompt_template=app_settings.seo_prompt_template,
        max_length=app_settings.seo_description_max_length,
        sample_length=app_settings.seo_sample_length,
        enable_fallback=app_settings.seo_enable_fallback,
    )
