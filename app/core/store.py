from typing import Optional, Callable
import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import SessionLocal, init_db
from app.db.repositories.storage_repository import StorageRepository
from app.domains.documents.services import DocumentStore

logger = logging.getLogger(__name__)

# Одна сессия редактора на процесс
_document_store: Optional[DocumentStore] = None


def build_document_store(
    session_factory: Optional[Callable[[], Session]] = None,
    storage_key: str = settings.storage_key
) -> DocumentStore:
    """Создание хранилища документов поверх базы данных и загрузка коллекции"""
    store = DocumentStore(StorageRepository(session_factory or SessionLocal), storage_key=storage_key)
    store.load()
    return store


def get_document_store() -> DocumentStore:
    """Зависимость FastAPI: хранилище документов текущего процесса

    Хранилище не потокобезопасно. Обработчики, которые его используют,
    объявлены async def и выполняются в потоке event loop; синхронные
    def-обработчики FastAPI запускал бы в пуле потоков.
    """
    global _document_store
    if _document_store is None:
        init_db()
        _document_store = build_document_store()
        logger.info(f"Document store ready, {len(_document_store)} documents")
    return _document_store
