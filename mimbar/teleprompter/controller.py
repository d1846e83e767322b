"""
Teleprompter scroll controller.

Turns a discrete speed level (0-5) into whole-pixel scroll deltas.
Every tick adds ``speed_level * carry_per_level`` to a sub-pixel carry;
once the carry reaches one pixel its integer part is emitted and
subtracted.  Motion stays smooth at fractional rates and the average
rate converges to ``speed_level * carry_per_level`` pixels per tick.
"""

import logging
import math
from typing import Optional, Protocol

from mimbar.script.models import ScrollState

from .scheduler import TickHandle, TickScheduler

logger = logging.getLogger(__name__)

MIN_SPEED = 0
MAX_SPEED = 5
TICK_INTERVAL_MS = 30
CARRY_PER_LEVEL = 0.3


class Viewport(Protocol):
    """Anything that can be scrolled forward by whole pixels."""

    def scroll_by(self, delta: int) -> None:
        ...


class ScrollController:
    """
    State machine: ``stopped`` or ``running(speed_level)``.

    Owns a single tick handle.  The handle is armed when the controller
    starts running and cancelled on every exit from running, so two
    tick loops can never overlap.

    Usage::

        with ScrollController(viewport, AsyncioTickScheduler()) as ctl:
            ctl.set_speed(3)
            ctl.toggle()
    """

    def __init__(
        self,
        viewport: Viewport,
        scheduler: TickScheduler,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        carry_per_level: float = CARRY_PER_LEVEL,
    ):
        self._viewport = viewport
        self._scheduler = scheduler
        self._interval = tick_interval_ms / 1000.0
        self._carry_per_level = carry_per_level

        self._speed_level = 0
        self._running = False
        self._carry = 0.0
        self._handle: Optional[TickHandle] = None
        self._emitted = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def speed_level(self) -> int:
        return self._speed_level

    @property
    def is_running(self) -> bool:
        """Running with a non-zero speed; level 0 always counts as stopped."""
        return self._running and self._speed_level > 0

    @property
    def total_emitted(self) -> int:
        """Sum of all deltas sent to the viewport."""
        return self._emitted

    @property
    def state(self) -> ScrollState:
        return ScrollState(
            speed_level=self._speed_level,
            running=self.is_running,
            sub_pixel_carry=self._carry,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_speed(self, level: int) -> None:
        """
        Clamp *level* to 0-5 and apply it.

        Level 0 stops the controller.  Raising the level from 0 does not
        start it; use :meth:`toggle`.
        """
        level = max(MIN_SPEED, min(MAX_SPEED, int(level)))
        self._speed_level = level
        if level == 0:
            self._running = False
        self._sync_timer()
        logger.debug("Speed set to %d (running=%s)", level, self.is_running)

    def toggle(self) -> None:
        """Pause when running; otherwise start, bumping level 0 to 1."""
        if self.is_running:
            self._running = False
        else:
            if self._speed_level == 0:
                self._speed_level = 1
            self._running = True
        self._sync_timer()
        logger.debug("Toggled: running=%s at level %d", self.is_running, self._speed_level)

    def reset(self) -> None:
        """Stop, drop the speed to 0 and clear the sub-pixel carry."""
        self._running = False
        self._speed_level = 0
        self._carry = 0.0
        self._sync_timer()

    def close(self) -> None:
        """Release the tick handle; the controller stays usable."""
        self._cancel_timer()
        self._running = False

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def tick(self) -> int:
        """
        Advance one fixed tick.

        Returns:
            The whole-pixel delta sent to the viewport (0 if none).
        """
        if not self.is_running:
            return 0

        self._carry += self._speed_level * self._carry_per_level
        if self._carry < 1:
            return 0

        delta = math.floor(self._carry)
        self._carry -= delta
        self._emitted += delta
        self._viewport.scroll_by(delta)
        return delta

    def _sync_timer(self) -> None:
        if self.is_running:
            if self._handle is None or not self._handle.active:
                self._handle = self._scheduler.start(self._interval, self.tick)
        else:
            self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def __repr__(self) -> str:
        return (
            f"ScrollController(level={self._speed_level}, "
            f"running={self.is_running}, carry={self._carry:.2f})"
        )
