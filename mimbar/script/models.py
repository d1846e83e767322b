"""
Data models for the normalized script and its render tree.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

DEFAULT_CLOSING_SALUTATION = "Wassalamu'alaikum Wr. Wb."


class BlockKind(Enum):
    """Role a block plays in the script."""

    OPENING = auto()
    CONTENT = auto()
    SUPPLICATION = auto()
    CUE_ONLY = auto()


# Raw ``type`` tag → BlockKind
TYPE_TO_KIND = {
    "opening": BlockKind.OPENING,
    "content": BlockKind.CONTENT,
    "doa": BlockKind.SUPPLICATION,
    "supplication": BlockKind.SUPPLICATION,
    "cues": BlockKind.CUE_ONLY,
    "cue": BlockKind.CUE_ONLY,
}


@dataclass(frozen=True)
class Citation:
    """
    A structured source reference attached to a content block.

    Only built when ``arabic_text`` or ``translated_meaning`` is
    non-empty; a lone source label is not a citation.
    """

    arabic_text: Optional[str] = None
    source_label: Optional[str] = None
    translated_meaning: Optional[str] = None


@dataclass(frozen=True)
class ScriptBlock:
    """
    One normalized section of the script.

    Every optional field is either ``None`` or a non-empty string that
    already passed its presence gate, so the renderer only has to test
    for ``None``.
    """

    kind: BlockKind = BlockKind.CONTENT
    title: Optional[str] = None
    arabic_quote: Optional[str] = None
    body: Optional[str] = None
    cue: Optional[str] = None
    greeting: Optional[str] = None
    supplication_text: Optional[str] = None
    closing_salutation: str = DEFAULT_CLOSING_SALUTATION
    citation: Optional[Citation] = None

    @property
    def is_empty(self) -> bool:
        return not any(
            (
                self.title,
                self.arabic_quote,
                self.body,
                self.cue,
                self.greeting,
                self.supplication_text,
                self.citation,
            )
        )

    def __repr__(self) -> str:
        label = self.title or (self.body or self.cue or "")[:40]
        return f"ScriptBlock({self.kind.name}, '{label}')"


class RenderMode(Enum):
    """Presentation target for the render tree."""

    SCREEN = "screen"
    PRINT = "print"


class NodeKind(Enum):
    """Typed leaf nodes of the render tree."""

    DOCUMENT_HEADER = auto()
    CUE_BANNER = auto()
    SECTION_DIVIDER = auto()
    ARABIC_QUOTE_PANEL = auto()
    GREETING_LINE = auto()
    PARAGRAPH = auto()
    CITATION_PANEL = auto()
    SUPPLICATION_PANEL = auto()
    DOCUMENT_FOOTER = auto()


@dataclass(frozen=True)
class RenderNode:
    """
    A single display-agnostic node.

    ``text`` holds the primary content.  Panels with more than one line
    use the secondary fields: a citation keeps its source label in
    ``caption`` and its meaning in ``detail``; a supplication keeps its
    closing salutation in ``caption``; the document header keeps its
    topic line in ``caption``.
    """

    kind: NodeKind
    text: str = ""
    caption: Optional[str] = None
    detail: Optional[str] = None
    size: Optional[str] = None  # "large" | "medium" for Arabic panels

    def __repr__(self) -> str:
        preview = self.text[:50].replace("\n", " ")
        return f"RenderNode({self.kind.name}, '{preview}')"


@dataclass(frozen=True)
class BlockGroup:
    """All leaf nodes produced for one ScriptBlock, in display order."""

    index: int
    nodes: Tuple[RenderNode, ...] = ()
    keep_together: bool = False

    @property
    def paragraphs(self) -> Tuple[RenderNode, ...]:
        return tuple(n for n in self.nodes if n.kind == NodeKind.PARAGRAPH)


@dataclass(frozen=True)
class RenderedDocument:
    """Ordered render tree handed to the presentation layer or exporter."""

    mode: RenderMode
    font_size: str
    groups: Tuple[BlockGroup, ...] = ()
    header: Optional[RenderNode] = None
    footer: Optional[RenderNode] = None

    def iter_nodes(self):
        """Yield every node in display order, header and footer included."""
        if self.header is not None:
            yield self.header
        for group in self.groups:
            yield from group.nodes
        if self.footer is not None:
            yield self.footer


@dataclass(frozen=True)
class ScrollState:
    """Snapshot of the scroll controller's state."""

    speed_level: int = 0
    running: bool = False
    sub_pixel_carry: float = 0.0
