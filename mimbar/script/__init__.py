"""Script normalization, pagination and rendering."""

from .envelope import ENVELOPE_KEYS, unwrap_envelope
from .models import (
    BlockGroup,
    BlockKind,
    Citation,
    NodeKind,
    RenderedDocument,
    RenderMode,
    RenderNode,
    ScriptBlock,
    ScrollState,
)
from .normalizer import normalize_block, normalize_blocks
from .paginator import MAX_PARAGRAPH_LENGTH, paginate
from .preview import document_lines, preview_document
from .renderer import render_block, render_document

__all__ = [
    "BlockKind",
    "Citation",
    "ScriptBlock",
    "ScrollState",
    "NodeKind",
    "RenderMode",
    "RenderNode",
    "BlockGroup",
    "RenderedDocument",
    "ENVELOPE_KEYS",
    "unwrap_envelope",
    "normalize_block",
    "normalize_blocks",
    "MAX_PARAGRAPH_LENGTH",
    "paginate",
    "render_block",
    "render_document",
    "preview_document",
    "document_lines",
]
