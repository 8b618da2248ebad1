import re

SENTENCE_SPLIT = re.compile(r"[.!?]+")

MIN_SENTENCE_LENGTH = 10
MAX_SENTENCE_LENGTH = 60
TRUNCATED_LENGTH = 50
MAX_TITLE_WORDS = 8
ELLIPSIS = "..."


def fallback_title(existing_count: int) -> str:
    """Заголовок для пустого содержимого"""
    return f"Document {existing_count + 1}"


def generate_title(content: str, existing_count: int) -> str:
    """Генерация заголовка из текста документа

    existing_count - число документов в коллекции до сохранения.
    """
    text = content.strip()
    if text == "":
        return fallback_title(existing_count)

    # Первое осмысленное предложение
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    if sentences:
        first_sentence = sentences[0].strip()
        if MIN_SENTENCE_LENGTH <= len(first_sentence) <= MAX_SENTENCE_LENGTH:
            return first_sentence
        if len(first_sentence) > MAX_SENTENCE_LENGTH:
            return first_sentence[:TRUNCATED_LENGTH].strip() + ELLIPSIS

    # Запасной вариант: первые слова
    words = text.split()
    if len(words) <= MAX_TITLE_WORDS:
        return " ".join(words)
    return " ".join(words[:MAX_TITLE_WORDS]) + ELLIPSIS
