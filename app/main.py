from fastapi import FastAPI
import logging

from app.core.config import settings
from app.api.http.health import router as health_router
from app.api.http.documents import router as documents_router
from app.api.http.themes import router as themes_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Zen Focus",
    description="Редактор для письма без отвлечений с локальным хранением документов",
    version="1.0.0"
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(documents_router)
app.include_router(themes_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Zen Focus API",
        "version": "1.0.0",
        "description": "Редактор для письма без отвлечений с локальным хранением документов",
        "docs": "/docs",
        "health": "/health"
    }
