"""Rich terminal frontend — coloured board, stats panel and banners.

Arrow keys / WASD slide the tile next to the blank into it.  The clock
is a polled one-second timer pumped every time the key reader wakes up.
"""

from __future__ import annotations

from typing import cast

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slide_puzzle.backend.engine.gameclock import PolledTimer
from slide_puzzle.backend.engine.gameplay import Session, SessionView
from slide_puzzle.backend.engine.gamestate import Phase
from slide_puzzle.backend.models.besttime import BestTimeRecord
from slide_puzzle.backend.models.board import Direction
from slide_puzzle.frontend.common import (
    difficulty_label,
    format_time,
    is_warning,
    next_difficulty,
)
from slide_puzzle.frontend.cli.input_handler import get_key, get_key_timeout
from slide_puzzle.settings import DIFFICULTIES, SessionSettings

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(view: SessionView) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    size = view.size
    blank = size * size
    width = len(str(blank - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    for r in range(size):
        row: list[str] = []
        for c in range(size):
            idx = r * size + c
            val = view.cells[idx]
            if val == blank:
                row.append("[dim]·[/dim]")
            elif val == idx + 1:
                row.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                row.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*row)
    return table


def render_stats(view: SessionView) -> Text:
    clock_style = (
        "bold red" if is_warning(view.elapsed, view.time_limit) else "bold green"
    )
    stats = Text()
    stats.append("  MOVES ", style="dim")
    stats.append(str(view.moves), style="bold magenta")
    stats.append("    ELAPSED ", style="dim")
    stats.append(format_time(view.elapsed), style=clock_style)
    stats.append("    TIME LEFT ", style="dim")
    stats.append(format_time(view.remaining), style=clock_style)
    if view.best_time is not None:
        stats.append("    BEST ", style="dim")
        stats.append(format_time(view.best_time), style="bold yellow")
    return stats


def render_banner(view: SessionView, new_best: bool) -> Text | None:
    """The CLEAR! / TIME OVER / idle line under the board, if any."""
    if view.phase is Phase.COMPLETE:
        banner = Text()
        banner.append("★ CLEAR! ", style="bold green")
        banner.append(
            f"Time: {format_time(view.elapsed)} | Moves: {view.moves}",
            style="green",
        )
        if new_best:
            banner.append("   \U0001f3c6 New Best Time!", style="bold yellow")
        return banner
    if view.phase is Phase.TIMED_OUT:
        return Text("TIME OVER — time limit exceeded", style="bold red")
    if view.phase is Phase.IDLE:
        return Text("Press Enter to start", style="bold cyan")
    return None


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int, best: BestTimeRecord) -> None:
    console.clear()

    sizes = Text()
    for i, (label, s) in enumerate(DIFFICULTIES):
        if i:
            sizes.append("  ")
        style = "bold white on red" if s == sel_size else "dim"
        sizes.append(f" {label} ({s}×{s}) ", style=style)

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Start game    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    parts = [
        Text("Complete the puzzle within the time limit", style="dim"),
        Text(""),
        Align.center(sizes),
        Align.center(Text("← →  change difficulty", style="dim")),
        Text(""),
        Align.center(opts),
    ]
    if best.seconds is not None:
        parts.append(Text(""))
        parts.append(
            Align.center(Text(f"BEST TIME  {format_time(best.seconds)}", style="bold yellow"))
        )

    panel = Panel(
        Group(*parts),
        title="[bold red]S L I D E   P U Z Z L E[/bold red]",
        border_style="red",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(session: Session, new_best: bool) -> None:
    console.clear()
    view = session.snapshot()

    parts: list = []
    if view.cells:
        parts.append(Align.center(render_board(view)))
        parts.append(Text(""))
        parts.append(Align.center(render_stats(view)))
    banner = render_banner(view, new_best)
    if banner is not None:
        parts.append(Text(""))
        parts.append(Align.center(banner))

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("C", style="bold cyan")
    controls.append("  difficulty   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Group(*parts),
        title=f"[bold red]{difficulty_label(view.size)}[/bold red]",
        border_style="green" if view.phase is Phase.COMPLETE else "bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(session: Session, timer: PolledTimer) -> None:
    session.start()
    new_best = False

    while True:
        _draw_game(session, new_best)

        # Wait for input with a short timeout so the clock keeps ticking.
        # The timer is pumped on every wake-up, key or not.
        while True:
            key = get_key_timeout(0.25)
            fired = timer.pump()
            if key is not None:
                break
            if fired:
                _draw_game(session, new_best)

        if key in _DIRECTIONS:
            state = session.state
            if state is None:
                continue
            row, col = state.board.source_of(_DIRECTIONS[key])
            result = session.request_move(row, col)
            if result.completed:
                new_best = result.new_best
        elif key == "restart" or (key == "enter" and session.phase is not Phase.RUNNING):
            session.start()
            new_best = False
        elif key == "difficulty":
            session.change_difficulty(next_difficulty(session.size))
            new_best = False
        elif key == "quit":
            # Leaving the board discards the game and stops its clock.
            session.change_difficulty(session.size)
            return


def _menu_loop(session: Session, timer: PolledTimer) -> None:
    sizes = [s for _, s in DIFFICULTIES]
    sel_size = session.size if session.size in sizes else sizes[0]

    while True:
        _draw_menu(sel_size, session.best)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key == "left":
            sel_size = sizes[max(0, sizes.index(sel_size) - 1)]
        elif key == "right":
            sel_size = sizes[min(len(sizes) - 1, sizes.index(sel_size) + 1)]
        elif key == "enter":
            session.change_difficulty(sel_size)
            _play(session, timer)
            sel_size = session.size


# -- public entry point -------------------------------------------------------


def run(size: int, settings: SessionSettings | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    session = Session(size, settings=settings, timer_factory=PolledTimer)
    _menu_loop(session, cast(PolledTimer, session.timer))
