"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from slide_puzzle.backend.models.board import Board
from slide_puzzle.settings import SHUFFLE_MOVES

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        moves: int = SHUFFLE_MOVES,
    ) -> Board:
        """Return a random *solvable* board of the given size.

        The move count is fixed; a board that happens to land back on the
        solved arrangement is returned as-is.
        """
        board = Board.solved(size)
        board.shuffle(rng, moves)
        logger.debug("generated %dx%d board: %s", size, size, board.cells)
        return board
