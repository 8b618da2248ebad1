from datetime import datetime
from typing import Optional, List


def count_words(content: str) -> int:
    """Подсчет количества слов (токенов, разделенных пробелами)"""
    if not content.strip():
        return 0
    return len(content.split())


class Document:
    """Сущность сохраненного документа"""

    def __init__(
        self,
        id: str,
        title: str,
        content: str,
        created_at: datetime,
        word_count: Optional[int] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.created_at = created_at
        self.word_count = count_words(content) if word_count is None else word_count

    def update_content(self, new_content: str, new_title: str) -> None:
        """Замена содержимого документа на месте, created_at не меняется"""
        self.content = new_content
        self.title = new_title
        self.word_count = count_words(new_content)

    def is_empty(self) -> bool:
        return not self.content.strip()

    @classmethod
    def create_document(
        cls,
        id: str,
        title: str,
        content: str,
        created_at: datetime
    ) -> "Document":
        """Создание нового документа"""
        return cls(
            id=id,
            title=title,
            content=content,
            created_at=created_at,
            word_count=count_words(content)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, word_count={self.word_count})"


class LoadedDocument:
    """Документ, привязанный к редактору как текущий"""

    def __init__(self, id: str, content: str):
        self.id = id
        self.content = content

    def __repr__(self) -> str:
        return f"LoadedDocument(id={self.id})"


class DeleteResult:
    """Результат удаления документа"""

    def __init__(self, deleted: bool, was_current: bool):
        self.deleted = deleted
        self.was_current = was_current

    def __repr__(self) -> str:
        return f"DeleteResult(deleted={self.deleted}, was_current={self.was_current})"


class DocumentSummary:
    """Краткие данные документа для отображения в библиотеке"""

    def __init__(self, id: str, title: str, created_at: datetime):
        self.id = id
        self.title = title
        self.created_at = created_at

    @classmethod
    def from_document(cls, document: Document) -> "DocumentSummary":
        return cls(id=document.id, title=document.title, created_at=document.created_at)

    def __repr__(self) -> str:
        return f"DocumentSummary(id={self.id}, title={self.title})"


def summarize(documents: List[Document]) -> List[DocumentSummary]:
    """Список кратких данных в порядке вставки"""
    return [DocumentSummary.from_document(doc) for doc in documents]
