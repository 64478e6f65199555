"""Solvability check for sliding puzzle boards."""

from __future__ import annotations

from slide_puzzle.backend.models.board import Board


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong relative order (blank excluded)."""
        tiles = [v for v in board.cells if v != board.blank]
        count = 0
        for i, a in enumerate(tiles):
            for b in tiles[i + 1 :]:
                if a > b:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd widths need an even inversion count.  Even widths need the
        inversion count plus the blank's row (1-based, counted from the
        bottom) to be odd.
        """
        inv = Solver.inversions(board)
        if board.size % 2 == 1:
            return inv % 2 == 0
        row_from_bottom = board.size - board.empty_pos[0]
        return (inv + row_from_bottom) % 2 == 1
