"""
Tests for the sentence-boundary paragraph paginator.
"""

from mimbar.script.paginator import MAX_PARAGRAPH_LENGTH, paginate, split_fragments

SENTENCE = "Puasa mengajarkan kita untuk menahan diri dari hal yang sia-sia. "


def _long_text(sentences: int = 30) -> str:
    return (SENTENCE * sentences).rstrip()


def test_empty_input_yields_nothing():
    assert list(paginate("")) == []
    assert list(paginate(None)) == []


def test_short_text_is_a_single_paragraph():
    assert list(paginate("Satu kalimat. Dua kalimat.")) == ["Satu kalimat. Dua kalimat."]


def test_exactly_max_length_is_not_split():
    text = ("a. " * 150)[:MAX_PARAGRAPH_LENGTH]
    assert len(text) == 450
    assert list(paginate(text)) == [text]


def test_451_chars_without_delimiter_is_one_oversized_paragraph():
    text = "x" * 451
    assert list(paginate(text)) == [text]


def test_concatenation_reproduces_input():
    text = _long_text()
    assert "".join(paginate(text)) == text

    trailing = SENTENCE * 20
    assert "".join(paginate(trailing)) == trailing


def test_split_fragments_round_trip():
    text = "A. B. C"
    assert split_fragments(text) == ["A. ", "B. ", "C"]
    assert "".join(split_fragments(text)) == text


def test_paragraphs_respect_bound_or_are_single_fragments():
    text = _long_text() + ". " + "y" * 600 + ". " + _long_text(5)
    fragments = set(split_fragments(text))
    for paragraph in paginate(text):
        assert len(paragraph) <= MAX_PARAGRAPH_LENGTH or paragraph in fragments


def test_paragraphs_end_on_sentence_boundary():
    paragraphs = list(paginate(_long_text()))
    assert len(paragraphs) > 1
    for paragraph in paragraphs[:-1]:
        assert paragraph.endswith(". ")


def test_custom_max_length():
    paragraphs = list(paginate("Aa. Bb. Cc. Dd", max_length=8))
    assert paragraphs == ["Aa. Bb. ", "Cc. Dd"]


def test_oversized_first_fragment_does_not_emit_empty_paragraph():
    text = "z" * 500 + ". Kalimat pendek."
    paragraphs = list(paginate(text))
    assert paragraphs == ["z" * 500 + ". ", "Kalimat pendek."]


def test_output_is_a_single_pass_iterator():
    it = paginate(_long_text())
    first = list(it)
    assert first
    assert list(it) == []
