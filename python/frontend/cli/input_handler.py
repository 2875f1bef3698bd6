"""Single-keypress input for the terminal frontends.

Keys are read raw (no Enter) and normalised to action strings such as
``"up"`` or ``"restart"``; ``to_direction`` turns the four movement
actions into engine commands.  POSIX terminals go through termios,
Windows consoles through msvcrt.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable

from backend.models.board import Direction

_ESC = "\x1b"


# -- key tables ---------------------------------------------------------------

_KEY_GROUPS: dict[str, str] = {
    "wW": "up",
    "sS": "down",
    "aA": "left",
    "dD": "right",
    "qQ\x03": "quit",
    "rR": "restart",
    "hH?": "help",
    "pP": "print",
    "\r\n": "enter",
}

_KEY_MAP: dict[str, str] = {
    ch: action for chars, action in _KEY_GROUPS.items() for ch in chars
}

# final byte of the ANSI cursor sequences ESC [ A..D
_ARROW_MAP: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}

_DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


def _resolve(ch: str) -> str:
    """Action for a plain character; unmapped printables pass through."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def _decode_escape(read_next: Callable[[], str | None]) -> str:
    """Finish an escape sequence whose ESC byte was already read.

    *read_next* returns the following byte, or ``None`` when nothing
    arrives in time.  A bare Escape quits.
    """
    second = read_next()
    if second != "[":
        return "quit"
    final = read_next()
    if final is None:
        return ""
    return _ARROW_MAP.get(final, "")


# -- platform readers -----------------------------------------------------------


def _read_posix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)

    def read_byte(wait: float | None) -> str | None:
        # os.read keeps pending bytes visible to select()
        if wait is not None and not select.select([fd], [], [], wait)[0]:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = read_byte(timeout)
        if ch is None:
            return None
        if ch == _ESC:
            return _decode_escape(lambda: read_byte(0.1))
        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        deadline = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.02)
    ch = msvcrt.getch().decode("utf-8", errors="ignore")
    if ch == _ESC:
        return "quit"
    return _resolve(ch)


_read = _read_windows if os.name == "nt" else _read_posix


# -- public API -------------------------------------------------------------------


def to_direction(action: str | None) -> Direction | None:
    """Return the move command for a movement action, else ``None``."""
    if action is None:
        return None
    return _DIRECTIONS.get(action)


def get_key() -> str:
    """Block for one keypress and return its action.

    Actions: ``up``/``down``/``left``/``right`` (arrows or WASD),
    ``quit`` (q, Ctrl-C, Escape), ``restart`` (r), ``help`` (h, ?),
    ``print`` (p), ``enter``; any other printable character is returned
    as itself and anything else as ``""``.
    """
    return _read(None) or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but gives up after *timeout* seconds with ``None``."""
    return _read(timeout)
