"""Game constants and session configuration."""

from __future__ import annotations

from dataclasses import dataclass

TIME_LIMIT = 600  # seconds
SHUFFLE_MOVES = 1000
MIN_SIZE = 2
DEFAULT_SIZE = 3

# Fraction of the time limit after which the clock is drawn as a warning.
WARN_RATIO = 0.8

DIFFICULTIES: list[tuple[str, int]] = [
    ("EASY", 3),
    ("NORMAL", 4),
    ("HARD", 5),
]


@dataclass(frozen=True)
class SessionSettings:
    time_limit: int = TIME_LIMIT
    shuffle_moves: int = SHUFFLE_MOVES

    def __post_init__(self) -> None:
        if self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}.")
        if self.shuffle_moves < 0:
            raise ValueError(
                f"shuffle_moves must be non-negative, got {self.shuffle_moves}."
            )
