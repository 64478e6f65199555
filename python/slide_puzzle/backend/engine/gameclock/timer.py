"""One-second repeating timers whose lifetime follows the running phase.

The session starts its timer when a game begins and cancels it on every
exit from the running phase, so a stale timer never ticks a new board.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]


class Timer(Protocol):
    @property
    def active(self) -> bool: ...

    def start(self) -> None: ...

    def cancel(self) -> None: ...


class NullTimer:
    """Timer that never fires.  Callers drive ``Session.tick`` themselves."""

    def __init__(self, callback: TickCallback | None = None) -> None:
        self.active = False

    def start(self) -> None:
        self.active = True

    def cancel(self) -> None:
        self.active = False


class PolledTimer:
    """Timer driven from an event loop.

    :meth:`pump` is called whenever the loop wakes up; it fires *callback*
    once for every whole second that has passed since the timer started.
    """

    def __init__(
        self,
        callback: TickCallback,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._callback = callback
        self._interval = interval
        self._clock = clock
        self._next: float | None = None

    @property
    def active(self) -> bool:
        return self._next is not None

    def start(self) -> None:
        self._next = self._clock() + self._interval
        logger.debug("timer started")

    def cancel(self) -> None:
        if self._next is not None:
            logger.debug("timer cancelled")
        self._next = None

    def pump(self) -> int:
        """Fire any ticks that are due.  Returns how many fired."""
        fired = 0
        now = self._clock()
        # The callback may cancel or restart the timer; re-check each pass.
        while self._next is not None and now >= self._next:
            self._next += self._interval
            fired += 1
            self._callback()
        return fired
