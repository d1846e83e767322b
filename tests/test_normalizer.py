"""
Tests for block normalization: synonym priority and presence gates.
"""

import dataclasses

import pytest

from mimbar.script.models import DEFAULT_CLOSING_SALUTATION, BlockKind, ScriptBlock
from mimbar.script.normalizer import normalize_block, normalize_blocks


def test_body_prefers_content_over_story():
    block = normalize_block({"content": "utama", "story": "kisah"})
    assert block.body == "utama"


def test_body_priority_order():
    raw = {
        "story": "6",
        "meat": "5",
        "explanation": "4",
        "content_text": "3",
        "content": "2",
        "text": "1",
    }
    assert normalize_block(raw).body == "1"
    del raw["text"]
    assert normalize_block(raw).body == "2"
    del raw["content"]
    assert normalize_block(raw).body == "3"
    del raw["content_text"]
    assert normalize_block(raw).body == "4"
    del raw["explanation"]
    assert normalize_block(raw).body == "5"


def test_empty_string_is_treated_as_absent():
    block = normalize_block({"text": "", "content": "isi"})
    assert block.body == "isi"


def test_wrong_typed_fields_are_absent():
    block = normalize_block({"text": 12, "title": ["x"], "dalil": "Al-Baqarah"})
    assert block.body is None
    assert block.title is None
    assert block.citation is None


def test_arabic_quote_gate():
    assert normalize_block({"arabic": "-"}).arabic_quote is None
    assert normalize_block({"arabic": "ab"}).arabic_quote is None
    assert normalize_block({"arabic": "بسم"}).arabic_quote == "بسم"


def test_supplication_gate_and_default_salutation():
    assert normalize_block({"doa_arabic": "."}).supplication_text is None

    block = normalize_block({"type": "doa", "doa_arabic": "ربنا آتنا"})
    assert block.kind == BlockKind.SUPPLICATION
    assert block.supplication_text == "ربنا آتنا"
    assert block.closing_salutation == DEFAULT_CLOSING_SALUTATION

    custom = normalize_block({"doa_arabic": "ربنا آتنا", "salam": "Wassalam."})
    assert custom.closing_salutation == "Wassalam."


def test_citation_with_only_source_is_absent():
    block = normalize_block({"dalil": {"source": "HR. Bukhari"}})
    assert block.citation is None


def test_citation_with_meaning_is_present():
    block = normalize_block(
        {"dalil": {"source": "QS. Al-Baqarah: 183", "meaning": "Diwajibkan atas kamu berpuasa"}}
    )
    assert block.citation is not None
    assert block.citation.arabic_text is None
    assert block.citation.source_label == "QS. Al-Baqarah: 183"
    assert block.citation.translated_meaning == "Diwajibkan atas kamu berpuasa"


def test_cue_synonyms():
    assert normalize_block({"cue": "Senyum", "cues": "Tegas"}).cue == "Senyum"
    assert normalize_block({"cues": "Tegas"}).cue == "Tegas"


def test_cue_only_block_falls_back_to_body():
    block = normalize_block({"type": "cues", "explanation": "Jeda sejenak"})
    assert block.kind == BlockKind.CUE_ONLY
    assert block.cue == "Jeda sejenak"


def test_content_block_does_not_fall_back_to_body_for_cue():
    block = normalize_block({"type": "content", "text": "Isi ceramah"})
    assert block.cue is None


def test_kind_mapping_defaults_to_content():
    assert normalize_block({"type": "opening"}).kind == BlockKind.OPENING
    assert normalize_block({"type": "mystery"}).kind == BlockKind.CONTENT
    assert normalize_block({}).kind == BlockKind.CONTENT


def test_non_object_block_normalizes_to_empty():
    block = normalize_block("not a block")
    assert block == ScriptBlock()
    assert block.is_empty


def test_blocks_keep_order_and_duplicates():
    raw = [{"title": "B"}, {"title": "A"}, {"title": "B"}]
    assert [b.title for b in normalize_blocks(raw)] == ["B", "A", "B"]


def test_script_block_is_immutable():
    block = normalize_block({"title": "Sabar"})
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.title = "Syukur"
