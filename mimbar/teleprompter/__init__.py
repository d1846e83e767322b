"""Teleprompter scroll control."""

from .controller import (
    CARRY_PER_LEVEL,
    MAX_SPEED,
    MIN_SPEED,
    TICK_INTERVAL_MS,
    ScrollController,
    Viewport,
)
from .scheduler import AsyncioTickScheduler, TickHandle, TickScheduler
from .terminal import TerminalViewport, run_teleprompter

__all__ = [
    "ScrollController",
    "Viewport",
    "TickHandle",
    "TickScheduler",
    "AsyncioTickScheduler",
    "TerminalViewport",
    "run_teleprompter",
    "MIN_SPEED",
    "MAX_SPEED",
    "TICK_INTERVAL_MS",
    "CARRY_PER_LEVEL",
]
