from fastapi import APIRouter, Depends

from app.core.store import get_document_store
from app.domains.documents.services import DocumentStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(store: DocumentStore = Depends(get_document_store)):
    """Проверка работоспособности"""
    return {"status": "ok", "documents": len(store)}
