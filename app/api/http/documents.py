from fastapi import APIRouter, Depends, HTTPException, status

from app.core.store import get_document_store
from app.domains.documents.schemas import (
    DocumentSaveRequest, DocumentSaveResponse, DocumentSummaryResponse, DocumentListResponse,
    LoadedDocumentResponse, DocumentDeleteResponse, NewDocumentResponse,
    WordCountRequest, WordCountResponse
)
from app.domains.documents.services import DocumentStore

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("/", response_model=DocumentListResponse)
async def list_documents(store: DocumentStore = Depends(get_document_store)):
    """Получение библиотеки документов"""
    documents = store.list_documents()

    return DocumentListResponse(
        documents=[DocumentSummaryResponse.model_validate(doc) for doc in documents],
        total=len(documents),
        current_id=store.current_id
    )


@router.post("/", response_model=DocumentSaveResponse)
async def save_document(
    save_data: DocumentSaveRequest,
    store: DocumentStore = Depends(get_document_store)
):
    """Сохранение текста редактора"""
    # Без current_id в запросе сохраняем в текущий документ сессии
    if "current_id" in save_data.model_fields_set:
        current_id = save_data.current_id
    else:
        current_id = store.current_id

    document_id = store.save(save_data.content, current_id)

    if document_id is None:
        return DocumentSaveResponse(saved=False)

    document = store.get(document_id)
    return DocumentSaveResponse(
        saved=True,
        id=document.id,
        title=document.title,
        word_count=document.word_count
    )


@router.post("/new", response_model=NewDocumentResponse)
async def new_document(store: DocumentStore = Depends(get_document_store)):
    """Начало нового документа"""
    store.new_document()
    return NewDocumentResponse(current_id=store.current_id)


@router.post("/word-count", response_model=WordCountResponse)
async def word_count(data: WordCountRequest, store: DocumentStore = Depends(get_document_store)):
    """Подсчет слов в тексте редактора"""
    return WordCountResponse(word_count=store.word_count(data.content))


@router.get("/{document_id}", response_model=LoadedDocumentResponse)
async def load_document(document_id: str, store: DocumentStore = Depends(get_document_store)):
    """Открытие документа в редакторе"""
    document = store.load_document(document_id)

    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return LoadedDocumentResponse.model_validate(document)


@router.delete("/{document_id}", response_model=DocumentDeleteResponse)
async def delete_document(document_id: str, store: DocumentStore = Depends(get_document_store)):
    """Удаление документа"""
    result = store.delete_document(document_id)

    if not result.deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return DocumentDeleteResponse(was_current=result.was_current)
