"""Exporter boundary: print-mode render tree → PDF."""

from .html_builder import build_css, build_html
from .pdf_exporter import ExportResult, PdfExporter, default_filename, render_previews

__all__ = [
    "ExportResult",
    "PdfExporter",
    "build_css",
    "build_html",
    "default_filename",
    "render_previews",
]
