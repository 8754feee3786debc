"""HTTP routers grouped by feature."""

from app.api.routes.blog import router as blog_router
from app.api.routes.conversion import router as conversion_router
from app.api.routes.health import router as health_router

__all__ = ["blog_router", "conversion_router", "health_router"]
