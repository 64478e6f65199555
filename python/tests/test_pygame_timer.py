"""Pygame clock — queued ticks never outlive the game they were armed for."""

from __future__ import annotations

import random
from typing import Iterator

import pygame
import pytest

from slide_puzzle.backend.engine.gameplay import Session
from slide_puzzle.backend.engine.gamestate import Phase
from slide_puzzle.frontend.gui.pygame.app import TICK_EVENT, PygameTimer


@pytest.fixture
def headless(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    pygame.display.set_mode((1, 1))
    pygame.event.clear()
    yield
    pygame.quit()


def test_fire_ticks_only_while_active(headless: None) -> None:
    calls: list[int] = []
    timer = PygameTimer(lambda: calls.append(1))

    timer.fire()
    assert calls == []

    timer.start()
    assert timer.active
    timer.fire()
    assert calls == [1]

    timer.cancel()
    timer.fire()
    assert calls == [1]


def test_cancel_purges_queued_ticks(headless: None) -> None:
    calls: list[int] = []
    timer = PygameTimer(lambda: calls.append(1))
    timer.start()
    pygame.event.post(pygame.event.Event(TICK_EVENT))

    timer.cancel()

    assert pygame.event.get(TICK_EVENT) == []
    assert not timer.active
    timer.fire()
    assert calls == []


def test_stale_tick_does_not_reach_next_game(headless: None) -> None:
    session = Session(3, timer_factory=PygameTimer, rng=random.Random(5))
    session.start()
    pygame.event.post(pygame.event.Event(TICK_EVENT))

    session.change_difficulty(4)
    assert pygame.event.get(TICK_EVENT) == []

    session.start()
    timer = session.timer
    assert isinstance(timer, PygameTimer)
    timer.fire()
    assert session.phase is Phase.RUNNING
    assert session.elapsed == 1
