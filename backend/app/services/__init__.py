"""Service layer for the application."""

from app.services.blog_metadata import BlogMetadata, build_blog_metadata
from app.services.ollama_client import OllamaClient, OllamaError
from app.services.seo_description import SeoDescriptionGenerator, SeoDescriptionResult

__all__ = [
    "BlogMetadata",
    "OllamaClient",
    "OllamaError",
    "SeoDescriptionGenerator",
    "SeoDescriptionResult",
    "build_blog_metadata",
]
