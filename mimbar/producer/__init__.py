"""Producer boundary: prompts and script producers."""

from .base_producer import (
    BaseScriptProducer,
    ScriptRequest,
    parse_producer_text,
    strip_code_fence,
)
from .file_producer import FileScriptProducer
from .http_producer import HttpScriptProducer
from .prompts import (
    AUDIENCES,
    DURATIONS,
    RAMADHAN_TOPICS,
    TONES,
    build_system_prompt,
    build_user_prompt,
    length_instruction,
)

__all__ = [
    "BaseScriptProducer",
    "ScriptRequest",
    "FileScriptProducer",
    "HttpScriptProducer",
    "parse_producer_text",
    "strip_code_fence",
    "RAMADHAN_TOPICS",
    "AUDIENCES",
    "TONES",
    "DURATIONS",
    "build_system_prompt",
    "build_user_prompt",
    "length_instruction",
]
