"""Presentation helpers shared by every frontend."""

from __future__ import annotations

from slide_puzzle.settings import DIFFICULTIES, WARN_RATIO


def format_time(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}"


def is_warning(elapsed: int, time_limit: int) -> bool:
    """True once the clock has used up the warning share of the limit."""
    return elapsed >= time_limit * WARN_RATIO


def difficulty_label(size: int) -> str:
    for label, s in DIFFICULTIES:
        if s == size:
            return f"{label} ({size}×{size})"
    return f"{size}×{size}"


def next_difficulty(size: int) -> int:
    """Cycle through the offered grid sizes."""
    sizes = [s for _, s in DIFFICULTIES]
    if size not in sizes:
        return sizes[0]
    return sizes[(sizes.index(size) + 1) % len(sizes)]


def tile_origin(value: int, size: int) -> tuple[int, int]:
    """Row and column of the image crop that belongs to tile *value*.

    Tile ``v`` shows the piece of the picture that sits at its solved
    position, ``((v-1) // size, (v-1) % size)``.
    """
    if not 1 <= value <= size * size:
        raise ValueError(f"Tile value {value} out of range for a {size}×{size} board.")
    return divmod(value - 1, size)
