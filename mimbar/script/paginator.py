"""
Paragraph pagination for unbounded body text.

The producer delivers each section body as one long string.  For both
the teleprompter and the printed page it is re-flowed into paragraphs
of bounded length, breaking only between sentences.
"""

from typing import Iterator, List, Optional

MAX_PARAGRAPH_LENGTH = 450

# Sentence delimiter: period followed by a single space
SENTENCE_DELIMITER = ". "


def split_fragments(text: str) -> List[str]:
    """
    Split *text* on :data:`SENTENCE_DELIMITER`, re-attaching the
    delimiter to every fragment except the last so that
    ``"".join(split_fragments(t)) == t``.
    """
    parts = text.split(SENTENCE_DELIMITER)
    last = len(parts) - 1
    return [p + SENTENCE_DELIMITER if i < last else p for i, p in enumerate(parts)]


def paginate(
    text: Optional[str],
    max_length: int = MAX_PARAGRAPH_LENGTH,
) -> Iterator[str]:
    """
    Yield paragraphs of at most *max_length* characters.

    Sentence fragments are packed greedily.  A single fragment longer
    than *max_length* is yielded on its own rather than cut, so the
    bound is a soft target.  Empty input yields nothing.

    Args:
        text:       Body text, may be ``None``.
        max_length: Target upper bound per paragraph.

    Yields:
        Paragraph strings whose concatenation equals *text*.
    """
    if not text:
        return

    if len(text) <= max_length:
        yield text
        return

    buffer = ""
    for fragment in split_fragments(text):
        if len(buffer) + len(fragment) > max_length:
            if buffer:
                yield buffer
            buffer = fragment
        else:
            buffer += fragment

    if buffer:
        yield buffer
