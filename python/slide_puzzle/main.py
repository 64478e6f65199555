"""Slide Puzzle.

Usage::

    slide-puzzle                        # Rich terminal, 3×3
    slide-puzzle -f rich -s 4           # Rich terminal, 4×4
    slide-puzzle -f pygame --image p.png
    slide-puzzle --time-limit 300 --log-level debug
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from slide_puzzle import __version__
from slide_puzzle.settings import DEFAULT_SIZE, SHUFFLE_MOVES, TIME_LIMIT, SessionSettings

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "slide_puzzle.frontend.cli.rich.app",
    Frontend.pygame: "slide_puzzle.frontend.gui.pygame.app",
}


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _version(value: bool) -> None:
    if value:
        typer.echo(f"slide-puzzle {__version__}")
        raise typer.Exit()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=3, max=5,
        help="Grid size (3 easy, 4 normal, 5 hard).",
    ),
    time_limit: int = typer.Option(
        TIME_LIMIT, "--time-limit",
        min=1,
        help="Seconds allowed per game.",
    ),
    shuffle_moves: int = typer.Option(
        SHUFFLE_MOVES, "--shuffle-moves",
        min=0,
        help="Random blank moves used to scramble a new board.",
    ),
    image: Optional[Path] = typer.Option(
        None, "--image",
        exists=True, dir_okay=False,
        help="Picture to slice into tiles (pygame only).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
    version: bool = typer.Option(
        False, "--version",
        callback=_version, is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Slide Puzzle — complete the puzzle within the time limit."""
    configure_logging(log_level)
    settings = SessionSettings(time_limit=time_limit, shuffle_moves=shuffle_moves)
    logger.debug("launching %s frontend with %s", frontend.value, settings)

    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.pygame:
        mod.run(size=size, settings=settings, image=image)
    else:
        if image is not None:
            logger.warning("--image is ignored by the %s frontend", frontend.value)
        mod.run(size=size, settings=settings)


if __name__ == "__main__":
    app()
