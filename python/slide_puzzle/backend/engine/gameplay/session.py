"""Core gameplay logic — the timed session state machine."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from typing import Callable

from slide_puzzle.backend.engine.gameclock import NullTimer, Timer
from slide_puzzle.backend.engine.gameclock.timer import TickCallback
from slide_puzzle.backend.engine.gamegenerator import GameGenerator
from slide_puzzle.backend.engine.gamestate import GameState, Phase
from slide_puzzle.backend.models.besttime import BestTimeRecord
from slide_puzzle.backend.models.board import check_size
from slide_puzzle.settings import DEFAULT_SIZE, SessionSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    applied: bool = False
    completed: bool = False
    new_best: bool = False


@dataclass(frozen=True)
class SessionView:
    """Everything a frontend needs to draw one frame."""

    phase: Phase
    size: int
    cells: tuple[int, ...]
    empty_pos: tuple[int, int] | None
    moves: int
    elapsed: int
    remaining: int
    time_limit: int
    best_time: int | None


class Session:
    """Orchestrates games: start, moves, clock ticks, difficulty changes.

    Illegal input (non-adjacent clicks, moves or ticks outside a running
    game) is ignored.  The only error raised is ``InvalidSize``.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        *,
        settings: SessionSettings | None = None,
        best: BestTimeRecord | None = None,
        timer_factory: Callable[[TickCallback], Timer] = NullTimer,
        rng: random.Random | None = None,
    ) -> None:
        self.size = check_size(size)
        self.settings = settings or SessionSettings()
        self.best = best if best is not None else BestTimeRecord()
        self.state: GameState | None = None
        self.phase = Phase.IDLE
        self._rng = rng
        self._lock = threading.RLock()
        self._timer = timer_factory(self.tick)

    # -- transitions ----------------------------------------------------------

    def start(self, size: int | None = None) -> None:
        """Shuffle a fresh board and start the clock, from any phase."""
        with self._lock:
            size = self.size if size is None else check_size(size)
            self._timer.cancel()
            board = GameGenerator.generate(
                size, self._rng, self.settings.shuffle_moves
            )
            self.size = size
            self.state = GameState(board, self.settings.time_limit)
            self.phase = Phase.RUNNING
            self._timer.start()
            logger.info("started %dx%d game", size, size)

    def tick(self) -> Phase:
        """Advance the clock one second.  Ignored unless running."""
        with self._lock:
            if self.phase is not Phase.RUNNING or self.state is None:
                logger.debug("tick ignored in phase %s", self.phase)
                return self.phase
            if self.state.advance():
                self.phase = Phase.TIMED_OUT
                self._timer.cancel()
                logger.info("time over after %d moves", self.state.moves)
            return self.phase

    def request_move(self, row: int, col: int) -> MoveResult:
        """Slide the tile at (row, col) into the blank if it is adjacent."""
        with self._lock:
            if self.phase is not Phase.RUNNING or self.state is None:
                logger.debug("move ignored in phase %s", self.phase)
                return MoveResult()
            if not self.state.board.move(row, col):
                logger.debug("illegal move (%d, %d) ignored", row, col)
                return MoveResult()

            self.state.increment_moves()
            if not self.state.is_solved:
                return MoveResult(applied=True)

            self.phase = Phase.COMPLETE
            self._timer.cancel()
            new_best = self.best.record(self.state.elapsed)
            logger.info(
                "solved in %ds with %d moves", self.state.elapsed, self.state.moves
            )
            return MoveResult(applied=True, completed=True, new_best=new_best)

    def change_difficulty(self, size: int) -> None:
        """Discard the current game and go idle with a new grid size."""
        with self._lock:
            self.size = check_size(size)
            self._timer.cancel()
            self.state = None
            self.phase = Phase.IDLE
            logger.info("difficulty changed to %dx%d", size, size)

    # -- queries --------------------------------------------------------------

    @property
    def timer(self) -> Timer:
        return self._timer

    @property
    def cells(self) -> list[int]:
        return self.state.board.cells[:] if self.state else []

    @property
    def empty_pos(self) -> tuple[int, int] | None:
        return self.state.board.empty_pos if self.state else None

    @property
    def moves(self) -> int:
        return self.state.moves if self.state else 0

    @property
    def elapsed(self) -> int:
        return self.state.elapsed if self.state else 0

    @property
    def remaining(self) -> int:
        return self.settings.time_limit - self.elapsed

    @property
    def best_time(self) -> int | None:
        return self.best.seconds

    def snapshot(self) -> SessionView:
        with self._lock:
            return SessionView(
                phase=self.phase,
                size=self.size,
                cells=tuple(self.cells),
                empty_pos=self.empty_pos,
                moves=self.moves,
                elapsed=self.elapsed,
                remaining=self.remaining,
                time_limit=self.settings.time_limit,
                best_time=self.best_time,
            )
