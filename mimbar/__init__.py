"""
MimbarPro script studio.

Normalizes loosely-structured generated sermon scripts, paginates them
for screen and print, exports PDFs, and drives a teleprompter scroll.
"""

from .errors import (
    EmptyDocument,
    ExportFailed,
    ProducerRequestFailed,
    ProducerUnavailable,
    ScriptError,
)
from .pipeline import ScriptConfig, ScriptPipeline, normalize_text
from .session import DocumentSession, Step

__all__ = [
    "ScriptConfig",
    "ScriptPipeline",
    "normalize_text",
    "DocumentSession",
    "Step",
    "ScriptError",
    "ProducerUnavailable",
    "ProducerRequestFailed",
    "EmptyDocument",
    "ExportFailed",
]
