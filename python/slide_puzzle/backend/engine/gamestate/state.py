"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from slide_puzzle.backend.models.board import Board
from slide_puzzle.settings import TIME_LIMIT


class Phase(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"
    TIMED_OUT = "timed_out"


class GameState:
    """Holds the current board, move counter, and elapsed time.

    Time is logical: each :meth:`advance` is exactly one second, whatever
    the wall clock says.
    """

    def __init__(self, board: Board, time_limit: int = TIME_LIMIT) -> None:
        self.board = board
        self.time_limit = time_limit
        self.moves: int = 0
        self.elapsed: int = 0

    # -- time tracking --------------------------------------------------------

    @property
    def remaining(self) -> int:
        return self.time_limit - self.elapsed

    @property
    def expired(self) -> bool:
        return self.elapsed >= self.time_limit

    def advance(self) -> bool:
        """Add one second, clamped at the limit.  Returns True once expired."""
        if self.elapsed + 1 >= self.time_limit:
            self.elapsed = self.time_limit
        else:
            self.elapsed += 1
        return self.expired

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
