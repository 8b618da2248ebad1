from datetime import datetime, timezone

from app.domains.documents.entities import Document, count_words


def test_count_words():
    assert count_words("") == 0
    assert count_words("   \n") == 0
    assert count_words("one") == 1
    assert count_words("  one two\tthree\nfour  ") == 4


def test_update_content_keeps_identity_and_creation_time():
    created = datetime(2026, 3, 1, tzinfo=timezone.utc)
    document = Document.create_document(id="1", title="Old", content="old text", created_at=created)

    document.update_content("brand new text here", "New")

    assert document.id == "1"
    assert document.title == "New"
    assert document.word_count == 4
    assert document.created_at == created


def test_documents_compare_by_id():
    created = datetime(2026, 3, 1, tzinfo=timezone.utc)
    a = Document(id="1", title="A", content="a", created_at=created)
    b = Document(id="1", title="B", content="b b", created_at=created)

    assert a == b
    assert a.word_count == 1
    assert not a.is_empty()


def test_whitespace_only_document_is_empty():
    created = datetime(2026, 3, 1, tzinfo=timezone.utc)
    document = Document(id="1", title="t", content=" \n\t ", created_at=created)

    assert document.is_empty()
    assert document.word_count == 0
