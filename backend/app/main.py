from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import blog_router, conversion_router, health_router
from .core.config import settings

logger = logging.getLogger("blog_converter.backend")
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(conversion_router, prefix="/api")
    app.include_router(blog_router, prefix="/api")

    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    return app


app = create_app()


__all__ = ["app", "create_app"]
