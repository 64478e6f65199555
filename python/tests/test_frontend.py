"""Frontend helpers, key mapping and Rich rendering."""

from __future__ import annotations

import random

import pytest

from slide_puzzle.backend.engine.gameclock import PolledTimer
from slide_puzzle.backend.engine.gameplay import Session
from slide_puzzle.backend.engine.gamestate import Phase
from slide_puzzle.frontend.cli import input_handler
from slide_puzzle.frontend.cli.rich import app as rich_app
from slide_puzzle.frontend.cli.rich.app import render_banner, render_board, render_stats
from slide_puzzle.frontend.common import (
    difficulty_label,
    format_time,
    is_warning,
    next_difficulty,
    tile_origin,
)
from slide_puzzle.settings import SessionSettings


# -- common -------------------------------------------------------------------


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0:00"), (9, "0:09"), (65, "1:05"), (600, "10:00")],
)
def test_format_time(seconds: int, expected: str) -> None:
    assert format_time(seconds) == expected


def test_warning_threshold() -> None:
    assert not is_warning(479, 600)
    assert is_warning(480, 600)


def test_difficulty_cycle_and_labels() -> None:
    assert next_difficulty(3) == 4
    assert next_difficulty(4) == 5
    assert next_difficulty(5) == 3
    assert next_difficulty(7) == 3
    assert difficulty_label(4) == "NORMAL (4×4)"
    assert difficulty_label(6) == "6×6"


@pytest.mark.parametrize("size", [3, 4, 5])
def test_tile_origin_is_solved_position(size: int) -> None:
    for value in range(1, size * size + 1):
        row, col = tile_origin(value, size)
        assert row * size + col == value - 1


@pytest.mark.parametrize("value", [0, 10])
def test_tile_origin_out_of_range(value: int) -> None:
    with pytest.raises(ValueError):
        tile_origin(value, 3)


# -- input handler ------------------------------------------------------------


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("W", "up"),
        ("d", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("R", "restart"),
        ("c", "difficulty"),
        (" ", "enter"),
        ("\r", "enter"),
        ("1", "1"),
        ("\x01", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert input_handler.resolve(ch) == action


@pytest.mark.parametrize(
    ("tail", "action"),
    [
        (["[", "A"], "up"),
        (["[", "D"], "left"),
        (["[", "Z"], ""),
        (["[", None], ""),
        (["x"], "quit"),
        ([None], "quit"),
    ],
)
def test_decode_escape(tail: list, action: str) -> None:
    it = iter(tail)
    assert input_handler._decode_escape(lambda: next(it)) == action


# -- rich rendering -----------------------------------------------------------


def _running_session() -> Session:
    session = Session(
        3, settings=SessionSettings(shuffle_moves=0), rng=random.Random(0)
    )
    session.start()
    return session


def test_render_board_has_one_row_per_grid_row() -> None:
    session = _running_session()
    table = render_board(session.snapshot())
    assert table.row_count == 3
    assert len(table.columns) == 3


def test_render_stats_shows_clock_and_best() -> None:
    session = _running_session()
    for _ in range(65):
        session.tick()
    text = render_stats(session.snapshot()).plain
    assert "MOVES 0" in text
    assert "ELAPSED 1:05" in text
    assert "TIME LEFT 8:55" in text
    assert "BEST" not in text


def test_render_banner_per_phase() -> None:
    session = _running_session()
    assert render_banner(session.snapshot(), new_best=False) is None

    session.request_move(2, 1)
    result = session.request_move(2, 2)
    assert session.phase is Phase.COMPLETE
    banner = render_banner(session.snapshot(), new_best=result.new_best)
    assert banner is not None
    assert "CLEAR!" in banner.plain
    assert "Moves: 2" in banner.plain
    assert "New Best Time!" in banner.plain

    session.change_difficulty(3)
    idle = render_banner(session.snapshot(), new_best=False)
    assert idle is not None
    assert "Enter" in idle.plain


def test_render_banner_time_over() -> None:
    session = Session(3, settings=SessionSettings(time_limit=1), rng=random.Random(0))
    session.start()
    session.tick()
    banner = render_banner(session.snapshot(), new_best=False)
    assert banner is not None
    assert "TIME OVER" in banner.plain


# -- rich game loop -----------------------------------------------------------


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _scripted_keys(clock: FakeClock, session: Session, presses: int, seen: dict):
    """Key reader that answers every 0.25 s, then quits after *presses* keys."""
    count = 0

    def read(timeout: float) -> str | None:
        nonlocal count
        clock.now += 0.25
        count += 1
        if count > presses:
            seen["phase"] = session.phase
            seen["elapsed"] = session.elapsed
            return "quit"
        return "x"

    return read


def test_clock_runs_while_keys_are_pressed(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = FakeClock()
    session = Session(
        3,
        settings=SessionSettings(time_limit=10),
        timer_factory=lambda tick: PolledTimer(tick, clock=clock),
        rng=random.Random(3),
    )
    seen: dict = {}
    monkeypatch.setattr(rich_app, "_draw_game", lambda session, new_best: None)
    monkeypatch.setattr(
        rich_app, "get_key_timeout", _scripted_keys(clock, session, 150, seen)
    )

    rich_app._play(session, session.timer)

    assert seen == {"phase": Phase.TIMED_OUT, "elapsed": 10}
    # Quitting the board discards the game and stops the clock.
    assert session.phase is Phase.IDLE
    assert not session.timer.active


def test_clock_counts_seconds_between_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = FakeClock()
    session = Session(
        3,
        timer_factory=lambda tick: PolledTimer(tick, clock=clock),
        rng=random.Random(4),
    )
    seen: dict = {}
    monkeypatch.setattr(rich_app, "_draw_game", lambda session, new_best: None)
    monkeypatch.setattr(
        rich_app, "get_key_timeout", _scripted_keys(clock, session, 18, seen)
    )

    rich_app._play(session, session.timer)

    # 18 keys span 4.5 s; the quit key is read before its wake-up is pumped.
    assert seen == {"phase": Phase.RUNNING, "elapsed": 4}


@pytest.mark.parametrize(
    ("keys", "games"),
    [(["1", "quit"], 0), (["enter", "quit"], 1), (["right", "enter", "quit"], 1)],
)
def test_menu_starts_games_on_enter_only(
    monkeypatch: pytest.MonkeyPatch, keys: list[str], games: int
) -> None:
    session = Session(3, rng=random.Random(6))
    played: list[int] = []
    it = iter(keys)
    monkeypatch.setattr(rich_app, "_draw_menu", lambda sel_size, best: None)
    monkeypatch.setattr(rich_app, "get_key", lambda: next(it))
    monkeypatch.setattr(
        rich_app, "_play", lambda session, timer: played.append(session.size)
    )

    rich_app._menu_loop(session, session.timer)

    assert len(played) == games
    if "right" in keys:
        assert played == [4]


def test_get_key_never_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(input_handler, "_read", lambda timeout: None)
    assert input_handler.get_key() == ""
    assert input_handler.get_key_timeout(0.1) is None
