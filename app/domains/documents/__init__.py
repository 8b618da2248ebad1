from app.domains.documents.entities import (
    Document, DocumentSummary, LoadedDocument, DeleteResult, count_words
)
from app.domains.documents.ports import (
    KeyValueStorage, MemoryStorage, IdGenerator, TimestampIdGenerator, CounterIdGenerator
)
from app.domains.documents.schemas import (
    PersistedDocument, PersistedCollection, DocumentSaveRequest, DocumentSaveResponse,
    DocumentSummaryResponse, DocumentListResponse, LoadedDocumentResponse,
    DocumentDeleteResponse, NewDocumentResponse, WordCountRequest, WordCountResponse
)
from app.domains.documents.services import DocumentStore, DEFAULT_STORAGE_KEY
from app.domains.documents.titles import generate_title

__all__ = [
    "Document", "DocumentSummary", "LoadedDocument", "DeleteResult", "count_words",
    "KeyValueStorage", "MemoryStorage", "IdGenerator", "TimestampIdGenerator",
    "CounterIdGenerator",
    "PersistedDocument", "PersistedCollection", "DocumentSaveRequest",
    "DocumentSaveResponse", "DocumentSummaryResponse", "DocumentListResponse",
    "LoadedDocumentResponse", "DocumentDeleteResponse", "NewDocumentResponse",
    "WordCountRequest", "WordCountResponse",
    "DocumentStore", "DEFAULT_STORAGE_KEY",
    "generate_title"
]
