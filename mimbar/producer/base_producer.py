"""
Abstract base class for script producers.

A producer takes the user's request and returns the raw text of a
generated script.  The pipeline does not care where the text comes
from; it only parses it as JSON and unwraps the envelope.
"""

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from mimbar.errors import ProducerRequestFailed

# ```json ... ``` fences some producers wrap around JSON output
_RE_CODE_FENCE = re.compile(r"^\s*```[a-zA-Z]*\s*\n?(.*?)\n?\s*```\s*$", re.DOTALL)


@dataclass
class ScriptRequest:
    """Free-form parameters of one generation request."""

    topic: str = "Keutamaan Menjaga Lisan"
    audience: str = "Umum"
    duration: str = "5 Menit"
    tone: str = "Santai"


class BaseScriptProducer(ABC):
    """
    Common interface for all script producers.

    Subclasses implement :meth:`produce` and report whether they are
    configured through :attr:`is_available`.
    """

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the producer is configured well enough to be called."""

    @abstractmethod
    def produce(self, request: ScriptRequest) -> str:
        """
        Generate a script for *request*.

        Returns:
            Raw producer text, expected to parse as JSON.

        Raises:
            ProducerRequestFailed: If the call is rejected.
        """

    @property
    @abstractmethod
    def producer_name(self) -> str:
        """Human-readable producer identifier."""

    def __repr__(self) -> str:
        state = "ready" if self.is_available else "unconfigured"
        return f"{type(self).__name__}({self.producer_name}, {state})"


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    m = _RE_CODE_FENCE.match(text)
    return m.group(1) if m else text


def parse_producer_text(raw: str) -> Any:
    """
    Parse raw producer text as JSON.

    Raises:
        ProducerRequestFailed: If the text is empty or not valid JSON.
    """
    if not raw or not raw.strip():
        raise ProducerRequestFailed("Producer returned an empty response")
    try:
        return json.loads(strip_code_fence(raw))
    except json.JSONDecodeError as e:
        raise ProducerRequestFailed(f"Producer response is not valid JSON: {e}") from e
