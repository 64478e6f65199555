"""Single-keypress reader for the terminal frontend.

Maps arrow keys, WASD and a handful of command letters to action strings
without waiting for Enter.  Works on macOS / Linux (tty+termios) and
Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time
from typing import Callable

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "c": "difficulty",
    " ": "enter",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Letters are case-insensitive; unmapped printable characters are
    returned unchanged and anything else becomes ``""``.
    """
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def _decode_escape(read_next: Callable[[], str | None]) -> str:
    """Finish reading an ``ESC [ X`` arrow sequence after the ESC byte."""
    ch2 = read_next()
    if ch2 != "[":
        return "quit"  # bare Escape
    ch3 = read_next()
    if ch3 is None:
        return ""
    return _ARROW_MAP.get(ch3, "")


# -- Windows -------------------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)
    return resolve(msvcrt.getwch())


# -- Unix ----------------------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read_byte(wait: float | None) -> str | None:
        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte escape sequence.
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = read_byte(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            return _decode_escape(lambda: read_byte(0.1))
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "difficulty"                   — c (cycle grid size)
        "enter"                        — Enter / Space
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    return _read(None) or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but give up after *timeout* seconds.

    Returns ``None`` if nothing was pressed in time.
    """
    return _read(timeout)
