"""Board model for the sliding puzzle game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import StrEnum

from slide_puzzle.settings import MIN_SIZE, SHUFFLE_MOVES

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides in *direction*.
# UP    → tile below the blank moves up
# DOWN  → tile above the blank moves down
# LEFT  → tile right of the blank moves left
# RIGHT → tile left of the blank moves right
_SOURCE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class InvalidSize(ValueError):
    """Raised when a board is requested with an unusable grid size."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Grid size must be at least {MIN_SIZE}, got {size}.")
        self.size = size


def check_size(size: int) -> int:
    if not isinstance(size, int) or isinstance(size, bool) or size < MIN_SIZE:
        raise InvalidSize(size)
    return size


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list holding a permutation of
    ``1..size*size``.  The largest value (``size*size``) is the blank.
    """

    size: int
    cells: list[int]
    empty_pos: tuple[int, int]

    def __post_init__(self) -> None:
        check_size(self.size)
        total = self.size * self.size
        if len(self.cells) != total:
            raise ValueError(
                f"Expected {total} tiles for a {self.size}×{self.size} board, "
                f"got {len(self.cells)}."
            )
        if sorted(self.cells) != list(range(1, total + 1)):
            raise ValueError(
                f"Tiles must be a permutation of 1..{total}, got {self.cells}."
            )
        actual = self.position(self.cells.index(total))
        if tuple(self.empty_pos) != actual:
            raise ValueError(
                f"empty_pos {self.empty_pos} does not match the blank at {actual}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        check_size(size)
        return cls(
            size=size,
            cells=list(range(1, size * size + 1)),
            empty_pos=(size - 1, size - 1),
        )

    @classmethod
    def from_cells(cls, size: int, cells: list[int]) -> Board:
        """Create a board from a flat row-major tile list, locating the blank.

        Example::

            Board.from_cells(3, [1, 2, 3, 4, 5, 6, 7, 9, 8])
        """
        check_size(size)
        cells = list(cells)
        total = size * size
        # A missing blank is reported by the permutation check.
        index = cells.index(total) if total in cells else 0
        return cls(size=size, cells=cells, empty_pos=divmod(index, size))

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        return self.size * self.size

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[self.index(row, col)]

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(v == i + 1 for i, v in enumerate(self.cells))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        idx = self.index(row, col)
        return self.cells[idx] == idx + 1

    def is_adjacent(self, row: int, col: int) -> bool:
        """True if (row, col) is an on-board 4-neighbour of the blank."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            return False
        br, bc = self.empty_pos
        return abs(row - br) + abs(col - bc) == 1

    def source_of(self, direction: Direction) -> tuple[int, int]:
        """Position of the tile that would slide in *direction*.

        The position may lie off the board, in which case moving it is a
        no-op.
        """
        br, bc = self.empty_pos
        dr, dc = _SOURCE_OFFSETS[direction]
        return br + dr, bc + dc

    def neighbors(self) -> list[tuple[int, int]]:
        """In-bounds positions the blank can swap with."""
        br, bc = self.empty_pos
        found: list[tuple[int, int]] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                found.append((nr, nc))
        return found

    # -- mutation -------------------------------------------------------------

    def move(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied; anything else leaves the board untouched.
        """
        if not self.is_adjacent(row, col):
            return False
        self._swap((row, col))
        return True

    def shuffle(
        self,
        rng: random.Random | None = None,
        moves: int = SHUFFLE_MOVES,
    ) -> list[tuple[int, int]]:
        """Scramble the board in-place using random legal blank moves.

        Every step picks uniformly among the blank's in-bounds neighbours,
        so the result is always reachable from the starting arrangement.
        Returns the positions the blank visited, in order.
        """
        rng = rng or random.Random()
        trail: list[tuple[int, int]] = []
        for _ in range(moves):
            target = rng.choice(self.neighbors())
            self._swap(target)
            trail.append(target)
        self.empty_pos = self.position(self.cells.index(self.blank))
        logger.debug("shuffled %dx%d board with %d moves", self.size, self.size, moves)
        return trail

    def copy(self) -> Board:
        return Board(size=self.size, cells=self.cells[:], empty_pos=self.empty_pos)

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: tuple[int, int]) -> None:
        bi = self.index(*self.empty_pos)
        ti = self.index(*target)
        self.cells[bi], self.cells[ti] = self.cells[ti], self.cells[bi]
        self.empty_pos = target
