"""
Console teleprompter: reveals document lines as the controller scrolls.
"""

import asyncio
import logging
import sys
from typing import List, Optional, TextIO

from .controller import CARRY_PER_LEVEL, TICK_INTERVAL_MS, ScrollController
from .scheduler import AsyncioTickScheduler

logger = logging.getLogger(__name__)


class TerminalViewport:
    """
    A scrollable viewport over pre-wrapped text lines.

    The first ``window`` lines are visible at offset 0; every
    ``line_height`` pixels of scrolling brings one more line into view,
    which is written to *stream* exactly once.
    """

    def __init__(
        self,
        lines: List[str],
        line_height: int = 36,
        window: int = 12,
        stream: Optional[TextIO] = None,
    ):
        self.lines = lines
        self.line_height = max(1, line_height)
        self.window = window
        self.stream = stream or sys.stdout
        self.offset = 0
        self._shown = 0

    @property
    def finished(self) -> bool:
        return self._shown >= len(self.lines)

    def show_initial(self) -> None:
        self._reveal(min(self.window, len(self.lines)))

    def scroll_by(self, delta: int) -> None:
        self.offset += delta
        visible = self.window + self.offset // self.line_height
        self._reveal(min(visible, len(self.lines)))

    def _reveal(self, upto: int) -> None:
        while self._shown < upto:
            self.stream.write(self.lines[self._shown] + "\n")
            self._shown += 1
        self.stream.flush()


async def run_teleprompter(
    viewport: TerminalViewport,
    speed: int,
    tick_interval_ms: int = TICK_INTERVAL_MS,
    carry_per_level: float = CARRY_PER_LEVEL,
    poll_seconds: float = 0.1,
) -> int:
    """
    Scroll *viewport* at *speed* until every line has been shown.

    Returns:
        Total pixels scrolled.
    """
    viewport.show_initial()
    scheduler = AsyncioTickScheduler(asyncio.get_running_loop())

    with ScrollController(
        viewport,
        scheduler,
        tick_interval_ms=tick_interval_ms,
        carry_per_level=carry_per_level,
    ) as controller:
        controller.set_speed(speed)
        controller.toggle()
        logger.info("Teleprompter running at level %d", controller.speed_level)
        while not viewport.finished:
            await asyncio.sleep(poll_seconds)
        return controller.total_emitted
