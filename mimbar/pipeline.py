"""
Script pipeline orchestrator: request → producer → script → render → PDF.

Coordinates the full studio workflow:

1. **Production**: send the request to the configured producer and
   receive raw JSON text.
2. **Normalization**: parse the text, unwrap the envelope, and map each
   raw block onto a :class:`ScriptBlock`.
3. **Rendering**: build the screen or print render tree, paginating
   body text into bounded paragraphs.
4. **Export**: lay the print tree out onto pages and write a PDF.

Usage::

    from mimbar.pipeline import ScriptConfig, ScriptPipeline

    pipeline = ScriptPipeline(ScriptConfig.from_env())
    session = pipeline.new_session()
    pipeline.generate(session)
    result = pipeline.export_pdf(session, "naskah.pdf")
    print(result.summary())
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from mimbar.errors import (
    EmptyDocument,
    ExportFailed,
    ProducerRequestFailed,
    ProducerUnavailable,
    ScriptError,
)
from mimbar.export.pdf_exporter import ExportResult, PdfExporter, default_filename
from mimbar.producer.base_producer import (
    BaseScriptProducer,
    ScriptRequest,
    parse_producer_text,
)
from mimbar.producer.http_producer import HttpScriptProducer
from mimbar.script.envelope import unwrap_envelope
from mimbar.script.models import RenderedDocument, RenderMode, ScriptBlock
from mimbar.script.normalizer import normalize_blocks
from mimbar.script.paginator import MAX_PARAGRAPH_LENGTH
from mimbar.script.renderer import (
    DEFAULT_SCREEN_FONT_SIZE,
    PRINT_FONT_SIZE,
    render_document,
)
from mimbar.session import DocumentSession

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@dataclass
class ScriptConfig:
    """
    All tuneable parameters for the script pipeline.

    Attributes:
        max_paragraph_length: Soft bound for paginated paragraphs.
        screen_font_size:     Initial screen font size in px for new sessions.
        print_font_size:      Fixed print font size in pt.
        tick_interval_ms:     Teleprompter tick period.
        carry_per_level:      Pixels per tick added per speed level.
        producer_url:         HTTP producer endpoint (``None`` = unconfigured).
        producer_key:         Optional bearer key for the endpoint.
        producer_timeout:     Request timeout in seconds.
        paper:                Page format name understood by PyMuPDF.
        margin_mm:            Page margin on every side.
        arabic_font:          Font file used for Arabic panels in the PDF.
        preview_scale:        Resolution multiplier for page previews.
        disable_tqdm:         Suppress progress bars.
    """

    max_paragraph_length: int = MAX_PARAGRAPH_LENGTH
    screen_font_size: int = DEFAULT_SCREEN_FONT_SIZE
    print_font_size: int = PRINT_FONT_SIZE

    tick_interval_ms: int = 30
    carry_per_level: float = 0.3

    producer_url: Optional[str] = None
    producer_key: Optional[str] = None
    producer_timeout: float = 120.0

    paper: str = "a4"
    margin_mm: float = 15.0
    arabic_font: Optional[str] = None
    preview_scale: float = 1.2

    disable_tqdm: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "ScriptConfig":
        """Build a config from ``MIMBAR_*`` environment variables."""
        env = os.environ
        values = {
            "producer_url": env.get("MIMBAR_PRODUCER_URL") or None,
            "producer_key": env.get("MIMBAR_PRODUCER_KEY") or None,
            "arabic_font": env.get("MIMBAR_ARABIC_FONT") or None,
        }
        timeout = env.get("MIMBAR_PRODUCER_TIMEOUT")
        if timeout:
            try:
                values["producer_timeout"] = float(timeout)
            except ValueError:
                logger.warning("Ignoring invalid MIMBAR_PRODUCER_TIMEOUT=%r", timeout)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


# ------------------------------------------------------------------
# Pipeline
# ------------------------------------------------------------------


class ScriptPipeline:
    """
    End-to-end script pipeline.

    The producer defaults to an :class:`HttpScriptProducer` built from
    the config; pass any :class:`BaseScriptProducer` to override it.
    """

    def __init__(
        self,
        config: Optional[ScriptConfig] = None,
        producer: Optional[BaseScriptProducer] = None,
    ):
        self.config = config or ScriptConfig()
        self.producer = producer or HttpScriptProducer(
            self.config.producer_url,
            api_key=self.config.producer_key,
            timeout=self.config.producer_timeout,
        )
        self._exporter: Optional[PdfExporter] = None

    def _ensure_exporter(self) -> PdfExporter:
        if self._exporter is None:
            cfg = self.config
            self._exporter = PdfExporter(
                paper=cfg.paper,
                margin_mm=cfg.margin_mm,
                arabic_font=cfg.arabic_font,
                disable_tqdm=cfg.disable_tqdm,
            )
        return self._exporter

    def new_session(self, request: Optional[ScriptRequest] = None) -> DocumentSession:
        """Start a session at the configured screen font size."""
        session = DocumentSession(
            request=request or ScriptRequest(),
            font_size=self.config.screen_font_size,
        )
        session.adjust_font_size(0)
        return session

    # ------------------------------------------------------------------
    # Phase 1+2: Production & normalization
    # ------------------------------------------------------------------

    def generate(self, session: DocumentSession) -> List[ScriptBlock]:
        """
        Produce and normalize a script for ``session.request``.

        On success the blocks are stored on the session.  On failure
        the error message is recorded, the previous blocks are kept and
        the exception is re-raised.

        Raises:
            ProducerUnavailable:   No producer configured (nothing sent).
            ProducerRequestFailed: Call rejected or response unparseable.
            EmptyDocument:         Response held zero blocks.
        """
        if not self.producer.is_available:
            err = ProducerUnavailable(
                "No script producer configured. Set MIMBAR_PRODUCER_URL "
                "or pass a saved response file."
            )
            session.fail(str(err))
            raise err

        session.begin_loading()
        t0 = time.perf_counter()
        logger.info("Phase 1: Requesting script for '%s'", session.request.topic)

        try:
            raw = self.producer.produce(session.request)
            blocks = normalize_text(raw)
        except ScriptError as e:
            logger.error("Generation failed: %s", e)
            session.fail(f"Gagal: {e}")
            raise
        except Exception as e:
            logger.error("Producer raised unexpectedly: %s", e)
            session.fail(f"Gagal: {e}")
            raise ProducerRequestFailed(f"Producer call failed: {e}") from e

        session.accept(blocks)
        logger.info(
            "Script ready: %d blocks in %.2fs",
            len(blocks),
            time.perf_counter() - t0,
        )
        return blocks

    # ------------------------------------------------------------------
    # Phase 3: Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        session: DocumentSession,
        mode: RenderMode = RenderMode.SCREEN,
    ) -> RenderedDocument:
        """Render the session's blocks for *mode*."""
        return render_document(
            session.blocks,
            mode=mode,
            font_size=session.font_size,
            topic=session.request.topic,
            audience=session.request.audience,
            max_paragraph_length=self.config.max_paragraph_length,
            print_font_size=self.config.print_font_size,
        )

    # ------------------------------------------------------------------
    # Phase 4: Export
    # ------------------------------------------------------------------

    def export_pdf(
        self,
        session: DocumentSession,
        output_path: Optional[str] = None,
    ) -> ExportResult:
        """
        Render the session in print mode and export it as PDF.

        The session's blocks are never modified, so a failed export can
        be retried directly.

        Raises:
            ExportFailed: If there is nothing to export or writing fails.
        """
        if not session.has_document:
            raise ExportFailed("No script to export")

        path = output_path or default_filename(session.request.topic)
        t0 = time.perf_counter()
        logger.info("Phase 4: Exporting PDF to %s", path)

        session.exporting = True
        try:
            document = self.render(session, RenderMode.PRINT)
            pages = self._ensure_exporter().export(document, path)
        except ExportFailed as e:
            logger.error("Export failed: %s", e)
            raise
        finally:
            session.exporting = False

        result = ExportResult(
            output_path=str(path),
            page_count=pages,
            elapsed_seconds=time.perf_counter() - t0,
        )
        out = Path(path)
        if out.exists():
            result.file_size_kb = out.stat().st_size / 1024
        logger.info("%s", result.summary())
        return result


def normalize_text(raw: str) -> List[ScriptBlock]:
    """
    Parse raw producer text into normalized blocks.

    Raises:
        ProducerRequestFailed: If the text is not JSON.
        EmptyDocument:         If no blocks were found.
    """
    blocks = normalize_blocks(unwrap_envelope(parse_producer_text(raw)))
    if not blocks:
        raise EmptyDocument("Hasil naskah kosong.")
    return blocks
