"""Command-line entry point."""

from __future__ import annotations

import sys
import types

import pytest
from typer.testing import CliRunner

from slide_puzzle import __version__
from slide_puzzle import main as cli
from slide_puzzle.settings import SessionSettings

runner = CliRunner()


@pytest.fixture
def fake_frontend(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    """Route every frontend to a stub module that records its arguments."""
    calls: list[dict] = []
    module = types.ModuleType("fake_frontend")
    module.run = lambda **kwargs: calls.append(kwargs)  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fake_frontend", module)
    monkeypatch.setattr(
        cli, "_RUNNERS", {f: "fake_frontend" for f in cli.Frontend}
    )
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return calls


def test_version() -> None:
    result = runner.invoke(cli.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_defaults_launch_rich(fake_frontend: list[dict]) -> None:
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 0, result.output
    assert fake_frontend == [{"size": 3, "settings": SessionSettings()}]


def test_options_reach_pygame(fake_frontend: list[dict]) -> None:
    result = runner.invoke(
        cli.app,
        ["-f", "pygame", "-s", "5", "--time-limit", "120", "--shuffle-moves", "50"],
    )
    assert result.exit_code == 0, result.output
    assert fake_frontend == [
        {
            "size": 5,
            "settings": SessionSettings(time_limit=120, shuffle_moves=50),
            "image": None,
        }
    ]


@pytest.mark.parametrize("size", ["2", "6"])
def test_size_out_of_range(fake_frontend: list[dict], size: str) -> None:
    result = runner.invoke(cli.app, ["-s", size])
    assert result.exit_code != 0
    assert fake_frontend == []


def test_time_limit_must_be_positive(fake_frontend: list[dict]) -> None:
    result = runner.invoke(cli.app, ["--time-limit", "0"])
    assert result.exit_code != 0
    assert fake_frontend == []
