"""
Tests for the render tree builder.
"""

from mimbar.script.models import (
    BlockKind,
    Citation,
    NodeKind,
    RenderMode,
    ScriptBlock,
)
from mimbar.script.preview import document_lines, preview_document
from mimbar.script.renderer import (
    DOCUMENT_FOOTER,
    DOCUMENT_TITLE,
    render_block,
    render_document,
)

FULL_BLOCK = ScriptBlock(
    kind=BlockKind.CONTENT,
    title="Keutamaan Sabar",
    arabic_quote="إِنَّ اللَّهَ مَعَ الصَّابِرِينَ",
    body="Sabar adalah separuh iman. Ia menjaga hati kita.",
    cue="Nada pelan",
    greeting="Assalamu'alaikum Wr. Wb.",
    supplication_text="رَبَّنَا أَفْرِغْ عَلَيْنَا صَبْرًا",
    citation=Citation(
        arabic_text="وَاصْبِرُوا",
        source_label="QS. Al-Anfal: 46",
        translated_meaning="Dan bersabarlah",
    ),
)


def _kinds(group):
    return [n.kind for n in group.nodes]


def test_leaf_order_for_full_block():
    group = render_block(FULL_BLOCK, 0)
    assert _kinds(group) == [
        NodeKind.CUE_BANNER,
        NodeKind.SECTION_DIVIDER,
        NodeKind.ARABIC_QUOTE_PANEL,
        NodeKind.GREETING_LINE,
        NodeKind.PARAGRAPH,
        NodeKind.CITATION_PANEL,
        NodeKind.SUPPLICATION_PANEL,
    ]


def test_supplication_panel_carries_closing_salutation():
    group = render_block(FULL_BLOCK, 0)
    last = group.nodes[-1]
    assert last.kind == NodeKind.SUPPLICATION_PANEL
    assert last.caption == "Wassalamu'alaikum Wr. Wb."


def test_citation_panel_fields():
    citation = render_block(FULL_BLOCK, 0).nodes[5]
    assert citation.text == "وَاصْبِرُوا"
    assert citation.caption == "QS. Al-Anfal: 46"
    assert citation.detail == "Dan bersabarlah"


def test_empty_block_renders_empty_group():
    group = render_block(ScriptBlock(), 3)
    assert group.index == 3
    assert group.nodes == ()


def test_absent_fields_emit_no_nodes():
    group = render_block(ScriptBlock(body="Isi saja."), 0)
    assert _kinds(group) == [NodeKind.PARAGRAPH]


def test_body_is_paginated_into_paragraph_nodes():
    body = "Kalimat satu. Kalimat dua. " + "x" * 460
    group = render_block(ScriptBlock(body=body), 0)
    texts = [n.text for n in group.paragraphs]
    assert texts == ["Kalimat satu. Kalimat dua. ", "x" * 460]


def test_screen_mode_has_no_header_or_footer():
    doc = render_document([FULL_BLOCK], RenderMode.SCREEN, font_size=30)
    assert doc.header is None
    assert doc.footer is None
    assert doc.font_size == "30px"
    assert doc.groups[0].nodes[2].size == "large"


def test_screen_mode_default_font_size():
    assert render_document([], RenderMode.SCREEN).font_size == "24px"


def test_print_mode_header_footer_and_fixed_font():
    doc = render_document(
        [FULL_BLOCK, ScriptBlock()],
        RenderMode.PRINT,
        font_size=40,
        topic="Sabar",
        audience="Umum",
    )
    assert doc.font_size == "13pt"
    assert doc.header.text == DOCUMENT_TITLE
    assert doc.header.caption == "Sabar • Umum"
    assert doc.footer.text == DOCUMENT_FOOTER
    assert doc.groups[0].keep_together
    assert doc.groups[0].nodes[2].size == "medium"

    nodes = list(doc.iter_nodes())
    assert nodes[0].kind == NodeKind.DOCUMENT_HEADER
    assert nodes[-1].kind == NodeKind.DOCUMENT_FOOTER


def test_groups_preserve_block_order():
    blocks = [ScriptBlock(title=t) for t in ("C", "A", "B")]
    doc = render_document(blocks)
    assert [g.nodes[0].text for g in doc.groups] == ["C", "A", "B"]
    assert [g.index for g in doc.groups] == [0, 1, 2]


def test_zero_blocks_is_a_valid_empty_document():
    doc = render_document([], RenderMode.PRINT)
    assert doc.groups == ()
    assert [n.kind for n in doc.iter_nodes()] == [
        NodeKind.DOCUMENT_HEADER,
        NodeKind.DOCUMENT_FOOTER,
    ]


def test_preview_and_lines():
    doc = render_document([FULL_BLOCK, ScriptBlock()], RenderMode.PRINT, topic="Sabar")
    text = preview_document(doc)
    assert "[BLOCK 1]" in text
    assert "[EMPTY]" in text
    assert "[SUPPLICATION]" in text

    lines = document_lines(doc, width=60)
    assert any("KEUTAMAAN SABAR" in line for line in lines)
    assert all(len(line) <= 60 for line in lines)
