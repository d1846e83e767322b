"""
Document session: the state of one user's script studio.

Holds the request, the normalized blocks and the presentation settings
that the pipeline stages read and update.  Scroll state is deliberately
not part of it; the scroll controller owns its own state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from mimbar.producer.base_producer import ScriptRequest
from mimbar.script.models import ScriptBlock

MIN_FONT_SIZE = 16
MAX_FONT_SIZE = 48
FONT_SIZE_STEP = 2
DEFAULT_FONT_SIZE = 24


class Step(Enum):
    INPUT = "input"
    LOADING = "loading"
    RESULT = "result"


@dataclass
class DocumentSession:
    """
    Mutable session value passed by reference to each pipeline stage.

    A failed generation keeps the last successful ``blocks``: the step
    returns to INPUT with ``error`` set, and :meth:`reopen_result` goes
    back to the kept document.
    """

    request: ScriptRequest = field(default_factory=ScriptRequest)
    blocks: Tuple[ScriptBlock, ...] = ()
    step: Step = Step.INPUT
    error: Optional[str] = None
    font_size: int = DEFAULT_FONT_SIZE
    exporting: bool = False

    @property
    def has_document(self) -> bool:
        return len(self.blocks) > 0

    def begin_loading(self) -> None:
        self.error = None
        self.step = Step.LOADING

    def accept(self, blocks: Sequence[ScriptBlock]) -> None:
        """Store a freshly normalized document and show it."""
        self.blocks = tuple(blocks)
        self.error = None
        self.step = Step.RESULT

    def fail(self, message: str) -> None:
        """Record a generation failure without touching ``blocks``."""
        self.error = message
        self.step = Step.INPUT

    def back_to_input(self) -> None:
        self.step = Step.INPUT

    def reopen_result(self) -> bool:
        """Return to the kept document, if there is one."""
        if not self.has_document:
            return False
        self.step = Step.RESULT
        return True

    def adjust_font_size(self, steps: int) -> int:
        """Move the screen font size by *steps* increments, clamped."""
        size = self.font_size + steps * FONT_SIZE_STEP
        self.font_size = max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, size))
        return self.font_size
