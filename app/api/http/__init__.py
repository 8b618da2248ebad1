from app.api.http.health import router as health_router
from app.api.http.documents import router as documents_router
from app.api.http.themes import router as themes_router

__all__ = [
    "health_router",
    "documents_router",
    "themes_router"
]
