"""
Plain-text views of a rendered document.

``preview_document`` is a tagged listing for reviewing the structure;
``document_lines`` lays the document out as wrapped console lines for
the terminal teleprompter.
"""

import textwrap
from typing import List

from .models import NodeKind, RenderedDocument, RenderNode


def preview_document(document: RenderedDocument) -> str:
    """
    Format the render tree as a human-readable listing.

    Example output::

        [BLOCK 1]
        [CUE_BANNER] "Senyum, tatap jamaah"
        [SECTION_DIVIDER] "Pembukaan"
        [PARAGRAPH 312] "Alhamdulillah, puji syukur..."
    """
    lines: List[str] = []

    if document.header is not None:
        lines.append(f'[HEADER] "{document.header.text}" {document.header.caption}')

    for group in document.groups:
        lines.append(f"\n[BLOCK {group.index + 1}]")
        if not group.nodes:
            lines.append("[EMPTY]")
        for node in group.nodes:
            lines.append(_preview_node(node))

    if document.footer is not None:
        lines.append(f'\n[FOOTER] "{document.footer.text}"')

    return "\n".join(lines)


def _preview_node(node: RenderNode) -> str:
    preview = node.text[:80].replace("\n", " ")
    if node.kind == NodeKind.PARAGRAPH:
        return f'[PARAGRAPH {len(node.text)}] "{preview}"'
    if node.kind == NodeKind.CITATION_PANEL:
        return f'[CITATION {node.caption or "-"}] "{preview}" / "{node.detail or ""}"'
    if node.kind == NodeKind.SUPPLICATION_PANEL:
        return f'[SUPPLICATION] "{preview}" / {node.caption}'
    return f'[{node.kind.name}] "{preview}"'


def document_lines(document: RenderedDocument, width: int = 72) -> List[str]:
    """
    Lay the document out as wrapped text lines, one blank line between
    nodes and two between blocks.
    """
    out: List[str] = []
    for node in document.iter_nodes():
        if node.kind == NodeKind.CUE_BANNER:
            out.extend(textwrap.wrap(f">> {node.text.upper()}", width))
        elif node.kind == NodeKind.SECTION_DIVIDER:
            out.append(f" {node.text.upper()} ".center(width, "-"))
        elif node.kind in (NodeKind.DOCUMENT_HEADER, NodeKind.DOCUMENT_FOOTER):
            out.append(node.text.center(width))
            if node.caption:
                out.append(node.caption.center(width))
        elif node.kind in (NodeKind.ARABIC_QUOTE_PANEL, NodeKind.SUPPLICATION_PANEL):
            out.extend(line.rjust(width) for line in textwrap.wrap(node.text, width))
            if node.caption:
                out.append(node.caption.center(width))
        elif node.kind == NodeKind.CITATION_PANEL:
            if node.text:
                out.extend(line.rjust(width) for line in textwrap.wrap(node.text, width))
            if node.caption:
                out.append(node.caption)
            if node.detail:
                out.extend(textwrap.wrap(f'"{node.detail}"', width))
        else:
            out.extend(textwrap.wrap(node.text, width) or [""])
        out.append("")
    return out
