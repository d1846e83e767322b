"""
Fixed-interval tick schedulers for the scroll controller.

A scheduler hands out a :class:`TickHandle` per armed loop.  The
controller owns at most one handle at a time and must cancel it before
arming another.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Optional


class TickHandle(ABC):
    """Cancellable handle of one repeating tick loop."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until :meth:`cancel` has been called."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the loop.  Calling it twice is a no-op."""


class TickScheduler(ABC):
    """Arms repeating callbacks on a fixed interval."""

    @abstractmethod
    def start(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        """
        Call *callback* every *interval* seconds until the returned
        handle is cancelled.
        """


class _LoopTickHandle(TickHandle):
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: Callable[[], None],
    ):
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._timer: Optional[asyncio.TimerHandle] = None
        self._active = True
        self._arm()

    def _arm(self) -> None:
        self._timer = self._loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        if not self._active:
            return
        self._arm()
        self._callback()

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class AsyncioTickScheduler(TickScheduler):
    """
    Drives ticks from an asyncio event loop with ``call_later``.

    Ticks run on the loop's thread, so the controller never sees
    concurrent callbacks.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def start(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _LoopTickHandle(loop, interval, callback)
