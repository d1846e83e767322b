"""
Builds the display-agnostic render tree from normalized blocks.

One :class:`BlockGroup` is produced per :class:`ScriptBlock`, in source
order.  Nodes are only emitted for fields that are present; a block
with every field absent yields an empty group.
"""

from typing import Iterable, List, Optional

from .models import (
    BlockGroup,
    NodeKind,
    RenderedDocument,
    RenderMode,
    RenderNode,
    ScriptBlock,
)
from .paginator import MAX_PARAGRAPH_LENGTH, paginate

DEFAULT_SCREEN_FONT_SIZE = 24  # px
PRINT_FONT_SIZE = 13  # pt

DOCUMENT_TITLE = "Naskah Kultum Ramadhan"
DOCUMENT_FOOTER = "Dibuat secara otomatis dengan MimbarPro"


def render_block(
    block: ScriptBlock,
    index: int,
    mode: RenderMode = RenderMode.SCREEN,
    max_paragraph_length: int = MAX_PARAGRAPH_LENGTH,
) -> BlockGroup:
    """
    Render one block into its ordered group of leaf nodes.

    Order: cue banner, section divider, Arabic quote, greeting,
    paragraphs, citation, supplication.  The supplication panel is
    always last.
    """
    nodes: List[RenderNode] = []

    if block.cue:
        nodes.append(RenderNode(NodeKind.CUE_BANNER, block.cue))

    if block.title:
        nodes.append(RenderNode(NodeKind.SECTION_DIVIDER, block.title))

    if block.arabic_quote:
        nodes.append(
            RenderNode(
                NodeKind.ARABIC_QUOTE_PANEL,
                block.arabic_quote,
                size="medium" if mode == RenderMode.PRINT else "large",
            )
        )

    if block.greeting:
        nodes.append(RenderNode(NodeKind.GREETING_LINE, block.greeting))

    for paragraph in paginate(block.body, max_paragraph_length):
        nodes.append(RenderNode(NodeKind.PARAGRAPH, paragraph))

    citation = block.citation
    if citation is not None:
        nodes.append(
            RenderNode(
                NodeKind.CITATION_PANEL,
                citation.arabic_text or "",
                caption=citation.source_label,
                detail=citation.translated_meaning,
            )
        )

    if block.supplication_text:
        nodes.append(
            RenderNode(
                NodeKind.SUPPLICATION_PANEL,
                block.supplication_text,
                caption=block.closing_salutation,
            )
        )

    return BlockGroup(
        index=index,
        nodes=tuple(nodes),
        keep_together=mode == RenderMode.PRINT,
    )


def render_document(
    blocks: Iterable[ScriptBlock],
    mode: RenderMode = RenderMode.SCREEN,
    font_size: Optional[int] = None,
    topic: str = "",
    audience: str = "",
    max_paragraph_length: int = MAX_PARAGRAPH_LENGTH,
    print_font_size: int = PRINT_FONT_SIZE,
) -> RenderedDocument:
    """
    Render the whole script for *mode*.

    Print mode ignores *font_size* in favour of *print_font_size*
    and wraps the groups in a fixed header and footer.

    Args:
        blocks:               Normalized blocks in source order.
        mode:                 ``RenderMode.SCREEN`` or ``RenderMode.PRINT``.
        font_size:            Screen font size in px (default 24).
        topic:                Topic line for the print header.
        audience:             Audience line for the print header.
        max_paragraph_length: Paginator bound.
        print_font_size:      Print font size in pt (default 13).

    Returns:
        :class:`RenderedDocument` with one group per block.
    """
    groups = tuple(
        render_block(block, i, mode, max_paragraph_length)
        for i, block in enumerate(blocks)
    )

    if mode == RenderMode.PRINT:
        header = RenderNode(
            NodeKind.DOCUMENT_HEADER,
            DOCUMENT_TITLE,
            caption=f"{topic} • {audience}",
        )
        footer = RenderNode(NodeKind.DOCUMENT_FOOTER, DOCUMENT_FOOTER)
        return RenderedDocument(
            mode=mode,
            font_size=f"{print_font_size}pt",
            groups=groups,
            header=header,
            footer=footer,
        )

    size = font_size if font_size is not None else DEFAULT_SCREEN_FONT_SIZE
    return RenderedDocument(mode=mode, font_size=f"{size}px", groups=groups)
