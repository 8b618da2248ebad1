import pytest

from app.domains.documents.titles import generate_title


def test_empty_content_uses_collection_size():
    assert generate_title("", 0) == "Document 1"
    assert generate_title("   \n\t", 4) == "Document 5"


def test_first_sentence_in_range_is_used():
    content = "Morning pages are a habit. Then coffee!"
    assert generate_title(content, 0) == "Morning pages are a habit"


def test_sentence_length_bounds_are_inclusive():
    assert generate_title("abcdefghij. and more", 0) == "abcdefghij"
    sixty = "a" * 60
    assert generate_title(sixty + "! tail", 0) == sixty


def test_long_sentence_is_truncated():
    sentence = ("lorem ipsum " * 10)[:70]
    assert len(sentence) == 70

    title = generate_title(sentence, 0)

    assert title == sentence[:50].strip() + "..."


def test_truncation_trims_trailing_space():
    sentence = "x" * 49 + " " + "y" * 20
    assert generate_title(sentence, 0) == "x" * 49 + "..."


def test_short_sentence_falls_back_to_words():
    assert generate_title("a b c d e", 0) == "a b c d e"
    assert generate_title("Hi. See you at noon ok", 0) == "Hi. See you at noon ok"


def test_word_fallback_caps_at_eight_words():
    content = "Hi! one two three four five six seven eight nine"
    assert generate_title(content, 0) == "Hi! one two three four five six seven..."


def test_word_fallback_collapses_whitespace():
    assert generate_title("Ok.\n\n  fine   then", 0) == "Ok. fine then"


@pytest.mark.parametrize("content", ["?!", "...   ...", "!", "x", " . . . "])
def test_degenerate_content_does_not_crash(content):
    title = generate_title(content, 3)
    assert title
    assert not title.startswith("Document")


def test_leading_terminators_are_skipped():
    assert generate_title("...Once upon a time there was. End", 0) == "Once upon a time there was"
