from pydantic import BaseModel, Field, ConfigDict, TypeAdapter
from typing import Optional, List
from datetime import datetime

from app.domains.documents.entities import Document


class PersistedDocument(BaseModel):
    """Запись документа в сохраненной коллекции

    Имена полей в JSON совпадают с форматом браузерного приложения
    (createdAt, wordCount).
    """
    id: str
    title: str
    content: str
    created_at: datetime = Field(..., alias="createdAt")
    word_count: int = Field(..., alias="wordCount", ge=0)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, document: Document) -> "PersistedDocument":
        return cls(
            id=document.id,
            title=document.title,
            content=document.content,
            created_at=document.created_at,
            word_count=document.word_count
        )

    def to_entity(self) -> Document:
        return Document(
            id=self.id,
            title=self.title,
            content=self.content,
            created_at=self.created_at,
            word_count=self.word_count
        )


PersistedCollection = TypeAdapter(List[PersistedDocument])


class DocumentSaveRequest(BaseModel):
    """Схема для сохранения текста редактора

    Если current_id не передан, используется текущий документ сессии.
    """
    content: str = Field(..., max_length=1000000)  # 1MB max content
    current_id: Optional[str] = None


class DocumentSaveResponse(BaseModel):
    """Схема для ответа на сохранение"""
    saved: bool
    id: Optional[str] = None
    title: Optional[str] = None
    word_count: int = 0


class DocumentSummaryResponse(BaseModel):
    """Схема элемента библиотеки"""
    id: str
    title: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DocumentListResponse(BaseModel):
    """Схема для списка документов"""
    documents: List[DocumentSummaryResponse]
    total: int
    current_id: Optional[str] = None


class LoadedDocumentResponse(BaseModel):
    """Схема открытого документа"""
    id: str
    content: str

    model_config = ConfigDict(from_attributes=True)


class DocumentDeleteResponse(BaseModel):
    was_current: bool


class NewDocumentResponse(BaseModel):
    current_id: Optional[str] = None


class WordCountRequest(BaseModel):
    content: str = Field(..., max_length=1000000)


class WordCountResponse(BaseModel):
    word_count: int
