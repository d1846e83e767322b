"""
Serialises a print-mode render tree into HTML + CSS for the exporter.

The markup only uses the subset of HTML/CSS that ``fitz.Story``
understands (block elements, borders, alignment, font sizes).
"""

import html
from typing import List, Optional

from tqdm import tqdm

from mimbar.script.models import BlockGroup, NodeKind, RenderedDocument, RenderNode

ARABIC_FONT_FAMILY = "ScriptArabic"

BASE_CSS = """
body { font-family: serif; color: #1c1917; }
.doc-header { text-align: center; border-bottom: 2px solid #064e3b;
              padding-bottom: 8px; margin-bottom: 20px; }
.doc-title { font-size: 20pt; font-weight: bold; color: #064e3b; }
.doc-subtitle { font-size: 9pt; font-family: monospace; color: #78716c; }
.block { margin-bottom: 18px; page-break-inside: avoid; }
.cue { background-color: #fffbeb; border-left: 4px solid #f59e0b;
       padding: 4px; font-size: 8pt; font-weight: bold; color: #92400e; }
.divider { text-align: center; font-size: 8pt; font-weight: bold;
           color: #a8a29e; margin: 8px 0; }
.arabic { text-align: right; background-color: #fafaf9;
          border: 1px solid #e7e5e4; padding: 8px; margin-bottom: 12px; }
.arabic.large { font-size: 24pt; }
.arabic.medium { font-size: 16pt; }
.greeting { font-weight: bold; color: #065f46; margin-bottom: 4px; }
.para { text-align: justify; margin-bottom: 10px; }
.dalil { border: 1px solid #e7e5e4; padding: 8px; margin-top: 8px; }
.dalil-tag { font-size: 7pt; font-weight: bold; color: #065f46; }
.dalil-arabic { text-align: right; font-size: 15pt; }
.dalil-source { font-size: 8pt; font-weight: bold; color: #b45309; }
.dalil-meaning { font-size: 9pt; font-style: italic; color: #78716c; }
.doa { text-align: center; border: 2px solid #064e3b; padding: 12px;
       margin-top: 16px; }
.doa-text { font-size: 18pt; margin-bottom: 8px; }
.doa-salam { font-weight: bold; color: #b45309; }
.doc-footer { text-align: center; border-top: 1px solid #e7e5e4;
              padding-top: 6px; margin-top: 16px; font-size: 7pt;
              font-family: monospace; color: #a8a29e; }
"""


def build_css(font_size: str, arabic_font_file: Optional[str] = None) -> str:
    """Return the stylesheet, optionally binding an Arabic font file."""
    css = BASE_CSS + f"\nbody {{ font-size: {font_size}; }}\n"
    if arabic_font_file:
        css += (
            f"@font-face {{ font-family: {ARABIC_FONT_FAMILY}; "
            f"src: url({arabic_font_file}); }}\n"
            f".arabic, .dalil-arabic, .doa-text "
            f"{{ font-family: {ARABIC_FONT_FAMILY}; }}\n"
        )
    return css


def _e(text: Optional[str]) -> str:
    return html.escape(text or "")


def _node_html(node: RenderNode) -> str:
    kind = node.kind
    if kind == NodeKind.CUE_BANNER:
        return f'<div class="cue">{_e(node.text.upper())}</div>'
    if kind == NodeKind.SECTION_DIVIDER:
        return f'<div class="divider">— {_e(node.text.upper())} —</div>'
    if kind == NodeKind.ARABIC_QUOTE_PANEL:
        size = node.size or "medium"
        return f'<div class="arabic {size}" dir="rtl">{_e(node.text)}</div>'
    if kind == NodeKind.GREETING_LINE:
        return f'<p class="greeting">{_e(node.text)}</p>'
    if kind == NodeKind.PARAGRAPH:
        return f'<p class="para">{_e(node.text)}</p>'
    if kind == NodeKind.CITATION_PANEL:
        parts = ['<div class="dalil">', '<span class="dalil-tag">DALIL</span>']
        if node.text:
            parts.append(f'<p class="dalil-arabic" dir="rtl">{_e(node.text)}</p>')
        if node.caption:
            parts.append(f'<p class="dalil-source">{_e(node.caption)}</p>')
        if node.detail:
            parts.append(f'<p class="dalil-meaning">"{_e(node.detail)}"</p>')
        parts.append("</div>")
        return "".join(parts)
    if kind == NodeKind.SUPPLICATION_PANEL:
        return (
            '<div class="doa">'
            f'<p class="doa-text" dir="rtl">{_e(node.text)}</p>'
            f'<p class="doa-salam">{_e(node.caption)}</p>'
            "</div>"
        )
    if kind == NodeKind.DOCUMENT_HEADER:
        return (
            '<div class="doc-header">'
            f'<p class="doc-title">{_e(node.text)}</p>'
            f'<p class="doc-subtitle">{_e(node.caption)}</p>'
            "</div>"
        )
    if kind == NodeKind.DOCUMENT_FOOTER:
        return f'<div class="doc-footer">{_e(node.text)}</div>'
    return ""


def _group_html(group: BlockGroup) -> str:
    inner = "".join(_node_html(n) for n in group.nodes)
    return f'<div class="block">{inner}</div>'


def build_html(document: RenderedDocument, disable_tqdm: bool = True) -> str:
    """
    Serialise *document* to an HTML body.

    Header, groups and footer are emitted as top-level elements so the
    Story engine can break pages between them.
    """
    parts: List[str] = []
    if document.header is not None:
        parts.append(_node_html(document.header))

    for group in tqdm(
        document.groups,
        desc="Rendering blocks",
        unit="block",
        disable=disable_tqdm,
    ):
        parts.append(_group_html(group))

    if document.footer is not None:
        parts.append(_node_html(document.footer))
    return "\n".join(parts)
