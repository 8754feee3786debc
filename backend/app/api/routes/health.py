"""Health check endpoints."""

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_app_settings, get_ollama_client
from app.core.config import Settings
from app.services.ollama_client import OllamaClient, OllamaError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", tags=["system"])
def healthcheck() -> dict[str, str]:
    """Simple readiness probe."""

    return {"status": "ok"}


@router.get("/health/llm", tags=["system"])
def llm_healthcheck(
    client: OllamaClient = Depends(get_ollama_client),
    app_settings: Settings = Depends(get_app_settings),
) -> dict[str, object]:
    """Report whether the SEO model is loaded in Ollama."""

    model_available = False
    try:
        model_available = app_settings.seo_model in set(client.list_models())
    except OllamaError as exc:
        logger.warning("Failed to query Ollama tags: %s", exc)
    return {"status": "ok", "model": app_settings.seo_model, "model_available": model_available}
