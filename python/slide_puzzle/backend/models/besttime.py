"""Best completion time, kept in memory for the life of the process."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class BestTimeRecord:
    """Tracks the fastest completion across games.

    Nothing is written to disk; a fresh process starts with no best time.
    Share one instance between sessions to carry the record across games.
    """

    def __init__(self, seconds: int | None = None) -> None:
        self.seconds = seconds

    def is_improvement(self, elapsed: int) -> bool:
        return self.seconds is None or elapsed < self.seconds

    def record(self, elapsed: int) -> bool:
        """Offer a completion time.  Returns True if it set a new best.

        An equal time is not an improvement and leaves the record alone.
        """
        if not self.is_improvement(elapsed):
            return False
        logger.info("new best time %ss (was %s)", elapsed, self.seconds)
        self.seconds = elapsed
        return True

    def reset(self) -> None:
        self.seconds = None

    def __repr__(self) -> str:
        return f"BestTimeRecord(seconds={self.seconds!r})"
