"""
PDF exporter built on PyMuPDF's Story layout engine.

The print-mode render tree is serialised to HTML, laid out onto fixed
pages, and written with ``fitz.DocumentWriter``.  Page previews are
rasterised back from the written file with Pillow.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import fitz
from PIL import Image

from mimbar.errors import ExportFailed
from mimbar.script.models import RenderedDocument, RenderMode

from .html_builder import build_css, build_html

logger = logging.getLogger(__name__)

# 1 mm in PDF points
_MM = 72 / 25.4

# Whitespace runs and characters that are unsafe in file names
_RE_UNSAFE = re.compile(r'[\s/\\:*?"<>|]+')

# Story may report a filled rect a hair past the frame from rounding
_OVERFLOW_TOLERANCE = 1.0


def default_filename(topic: str) -> str:
    """``Naskah_MimbarPro_<first 15 chars of topic>.pdf``, unsafe runs → ``_``."""
    return f"Naskah_MimbarPro_{_RE_UNSAFE.sub('_', topic[:15])}.pdf"


@dataclass
class ExportResult:
    """Summary of a finished export."""

    output_path: str = ""
    page_count: int = 0
    file_size_kb: float = 0.0
    elapsed_seconds: float = 0.0

    def summary(self) -> str:
        return (
            f"Exported {self.output_path}: {self.page_count} page(s), "
            f"{self.file_size_kb:.1f} KB in {self.elapsed_seconds:.2f}s"
        )


class PdfExporter:
    """
    Writes print-mode documents to paginated PDF files.

    Usage::

        exporter = PdfExporter(paper="a4", margin_mm=15)
        pages = exporter.export(document, "naskah.pdf")
    """

    def __init__(
        self,
        paper: str = "a4",
        margin_mm: float = 15.0,
        arabic_font: Optional[str] = None,
        disable_tqdm: bool = True,
    ):
        self.paper = paper
        self.margin_mm = margin_mm
        self.arabic_font = Path(arabic_font) if arabic_font else None
        self.disable_tqdm = disable_tqdm

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _story(self, document: RenderedDocument) -> fitz.Story:
        archive = None
        font_file = None
        if self.arabic_font is not None:
            archive = fitz.Archive(str(self.arabic_font.parent))
            font_file = self.arabic_font.name

        html = build_html(document, disable_tqdm=self.disable_tqdm)
        css = build_css(document.font_size, font_file)
        return fitz.Story(html=html, user_css=css, archive=archive)

    def export(self, document: RenderedDocument, output_path: str) -> int:
        """
        Lay out *document* and write it to *output_path*.

        Returns:
            Number of pages written.

        Raises:
            ExportFailed: If the document is not print-mode, a page
                          overflows its frame, or the layout/writing
                          step fails.
        """
        if document.mode != RenderMode.PRINT:
            raise ExportFailed("Only print-mode documents can be exported")

        path = Path(output_path)
        writer = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            story = self._story(document)
            mediabox = fitz.paper_rect(self.paper)
            m = self.margin_mm * _MM
            where = mediabox + (m, m, -m, -m)

            writer = fitz.DocumentWriter(str(path))
            pages = 0
            more = 1
            while more:
                device = writer.begin_page(mediabox)
                more, filled = story.place(where)
                filled = fitz.Rect(filled)
                if filled.y1 > where.y1 + _OVERFLOW_TOLERANCE:
                    raise ExportFailed(
                        f"Page {pages + 1} overflows its frame "
                        f"({filled.y1:.0f}pt > {where.y1:.0f}pt)"
                    )
                story.draw(device)
                writer.end_page()
                pages += 1
        except ExportFailed:
            raise
        except Exception as e:
            raise ExportFailed(f"Failed to export PDF '{path}': {e}") from e
        finally:
            if writer is not None:
                writer.close()

        logger.info("Wrote %s (%d pages)", path, pages)
        return pages


def render_previews(
    pdf_path: str,
    output_dir: str,
    scale: float = 1.2,
) -> List[Path]:
    """
    Rasterise every page of an exported PDF to PNG files.

    Returns:
        Paths of the written images, in page order.

    Raises:
        ExportFailed: If the PDF cannot be read or an image cannot be saved.
    """
    out = Path(output_dir)
    written: List[Path] = []
    try:
        out.mkdir(parents=True, exist_ok=True)
        doc = fitz.open(pdf_path)
        try:
            mat = fitz.Matrix(scale, scale)
            for idx in range(doc.page_count):
                pix = doc.load_page(idx).get_pixmap(matrix=mat, alpha=False)
                img = Image.frombytes("RGB", [pix.width, pix.height], pix.samples)
                path = out / f"page_{idx:03d}.png"
                img.save(str(path))
                written.append(path)
                logger.debug("Saved page preview: %s", path)
        finally:
            doc.close()
    except Exception as e:
        raise ExportFailed(f"Failed to render previews of '{pdf_path}': {e}") from e

    logger.info("Page previews saved to %s/", out)
    return written
