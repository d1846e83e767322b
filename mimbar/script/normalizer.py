"""
Block normalization: loosely-typed producer blocks → ScriptBlock.

Field names vary between responses, so every canonical field is
resolved through an ordered table of source-field synonyms.  The first
non-empty string wins; empty strings, missing keys and wrong-typed
values are all treated as absent.
"""

from typing import Any, Iterable, List, Mapping, Optional

from .models import (
    DEFAULT_CLOSING_SALUTATION,
    TYPE_TO_KIND,
    BlockKind,
    Citation,
    ScriptBlock,
)

# -----------------------------------------------------------------
# Synonym tables (priority order)
# -----------------------------------------------------------------

BODY_FIELDS = ("text", "content", "content_text", "explanation", "meat", "story")
CUE_FIELDS = ("cue", "cues")

# Placeholders such as "-" or ".." are observed in Arabic fields;
# anything at or below this length is noise.
MIN_ARABIC_LENGTH = 2


# -----------------------------------------------------------------
# Probes
# -----------------------------------------------------------------


def _string(raw: Mapping[str, Any], name: str) -> Optional[str]:
    value = raw.get(name)
    if isinstance(value, str) and len(value) > 0:
        return value
    return None


def first_present(raw: Mapping[str, Any], names: Iterable[str]) -> Optional[str]:
    """Return the first non-empty string among *names*, in order."""
    for name in names:
        value = _string(raw, name)
        if value is not None:
            return value
    return None


def _arabic(raw: Mapping[str, Any], name: str) -> Optional[str]:
    value = _string(raw, name)
    if value is not None and len(value) > MIN_ARABIC_LENGTH:
        return value
    return None


def _citation(raw: Mapping[str, Any]) -> Optional[Citation]:
    dalil = raw.get("dalil")
    if not isinstance(dalil, Mapping):
        return None

    arabic_text = _string(dalil, "arabic")
    meaning = _string(dalil, "meaning")
    if arabic_text is None and meaning is None:
        return None

    return Citation(
        arabic_text=arabic_text,
        source_label=_string(dalil, "source"),
        translated_meaning=meaning,
    )


# -----------------------------------------------------------------
# Public API
# -----------------------------------------------------------------


def normalize_block(raw: Any) -> ScriptBlock:
    """
    Map one raw producer block onto a :class:`ScriptBlock`.

    Never raises: a non-object block normalizes to an empty CONTENT
    block so the document keeps the producer's block count and order.
    """
    if not isinstance(raw, Mapping):
        return ScriptBlock()

    type_tag = raw.get("type")
    if not isinstance(type_tag, str):
        type_tag = ""
    kind = TYPE_TO_KIND.get(type_tag.strip().lower(), BlockKind.CONTENT)

    body = first_present(raw, BODY_FIELDS)

    cue = first_present(raw, CUE_FIELDS)
    if cue is None and kind == BlockKind.CUE_ONLY:
        cue = body

    return ScriptBlock(
        kind=kind,
        title=_string(raw, "title"),
        arabic_quote=_arabic(raw, "arabic"),
        body=body,
        cue=cue,
        greeting=_string(raw, "greeting"),
        supplication_text=_arabic(raw, "doa_arabic"),
        closing_salutation=_string(raw, "salam") or DEFAULT_CLOSING_SALUTATION,
        citation=_citation(raw),
    )


def normalize_blocks(raw_blocks: Iterable[Any]) -> List[ScriptBlock]:
    """Normalize every raw block, preserving the producer's order."""
    return [normalize_block(raw) for raw in raw_blocks]
