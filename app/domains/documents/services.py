from typing import Optional, List, Callable
from datetime import datetime, timezone
import logging

from pydantic import ValidationError

from app.domains.documents.entities import (
    Document, DocumentSummary, LoadedDocument, DeleteResult, count_words, summarize
)
from app.domains.documents.ports import KeyValueStorage, IdGenerator, TimestampIdGenerator
from app.domains.documents.schemas import PersistedDocument, PersistedCollection
from app.domains.documents.titles import generate_title

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "zen-focus-documents"
MAX_ID_ATTEMPTS = 100


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentStore:
    """Хранилище документов одной сессии редактора

    Коллекция читается из хранилища один раз при load() и
    перезаписывается целиком при каждом изменении.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
        storage_key: str = DEFAULT_STORAGE_KEY
    ):
        self.storage = storage
        self.id_generator = id_generator or TimestampIdGenerator()
        self.clock = clock or utcnow
        self.storage_key = storage_key
        self._documents: List[Document] = []
        self._current_id: Optional[str] = None

    @property
    def current_id(self) -> Optional[str]:
        """Идентификатор документа, привязанного к редактору"""
        return self._current_id

    def __len__(self) -> int:
        return len(self._documents)

    def load(self) -> List[DocumentSummary]:
        """Загрузка коллекции из хранилища в начале сессии"""
        self._documents = self._read_collection()
        self._current_id = None
        logger.info(f"Loaded {len(self._documents)} documents from '{self.storage_key}'")
        return self.list_documents()

    def save(self, content: str, current_id: Optional[str]) -> Optional[str]:
        """Сохранение текста редактора

        Обновляет документ current_id на месте или создает новый.
        Возвращает действующий идентификатор, для пустого текста None.
        """
        if content.strip() == "":
            logger.debug("Ignoring save of empty content")
            return None

        title = generate_title(content, len(self._documents))
        document = self.get(current_id) if current_id is not None else None

        if document is not None:
            document.update_content(content, title)
            logger.debug(f"Updated document {document.id}")
        else:
            document = Document.create_document(
                id=self._allocate_id(),
                title=title,
                content=content,
                created_at=self.clock()
            )
            self._documents.append(document)
            logger.info(f"Created document {document.id} '{document.title}'")

        self._write_collection()
        self._current_id = document.id
        return document.id

    def get(self, document_id: str) -> Optional[Document]:
        """Получение документа по идентификатору"""
        for document in self._documents:
            if document.id == document_id:
                return document
        return None

    def load_document(self, document_id: str) -> Optional[LoadedDocument]:
        """Открытие документа в редакторе"""
        document = self.get(document_id)
        if document is None:
            logger.debug(f"Cannot open unknown document {document_id}")
            return None

        self._current_id = document.id
        return LoadedDocument(id=document.id, content=document.content)

    def new_document(self) -> None:
        """Сброс привязки к текущему документу"""
        self._current_id = None

    def delete_document(self, document_id: str) -> DeleteResult:
        """Удаление документа

        was_current сообщает вызывающему, что нужно очистить редактор.
        """
        document = self.get(document_id)
        if document is None:
            logger.debug(f"Cannot delete unknown document {document_id}")
            return DeleteResult(deleted=False, was_current=False)

        self._documents = [doc for doc in self._documents if doc.id != document_id]
        self._write_collection()
        logger.info(f"Deleted document {document_id}")

        was_current = self._current_id == document_id
        if was_current:
            self._current_id = None
        return DeleteResult(deleted=True, was_current=was_current)

    def list_documents(self) -> List[DocumentSummary]:
        """Документы в порядке создания"""
        return summarize(self._documents)

    def word_count(self, content: str) -> int:
        return count_words(content)

    def _allocate_id(self) -> str:
        taken = {doc.id for doc in self._documents}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self.id_generator()
            if candidate not in taken:
                return candidate
        raise RuntimeError("Id generator keeps returning existing ids")

    def _read_collection(self) -> List[Document]:
        raw = self.storage.get_item(self.storage_key)
        if raw is None:
            return []

        try:
            records = PersistedCollection.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed document collection: {e.error_count()} errors")
            return []

        documents: List[Document] = []
        seen = set()
        for record in records:
            if record.id in seen:
                logger.warning(f"Skipping duplicate document id {record.id}")
                continue
            document = record.to_entity()
            if document.is_empty():
                logger.warning(f"Skipping empty document {record.id}")
                continue
            seen.add(record.id)
            documents.append(document)
        return documents

    def _write_collection(self) -> None:
        records = [PersistedDocument.from_entity(doc) for doc in self._documents]
        payload = PersistedCollection.dump_json(records, by_alias=True)
        self.storage.set_item(self.storage_key, payload.decode("utf-8"))
