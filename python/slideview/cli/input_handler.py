"""Cross-platform single-keypress reader for the terminal view.

Arrow keys move the selection cursor, WASD slides the tile next to the
blank. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "slide_up",
    "s": "slide_down",
    "a": "slide_left",
    "d": "slide_right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "i": "reset",
    " ": "click",
    "\r": "click",
    "\n": "click",
}

_ARROW_MAP: dict[str, str] = {
    "A": "cursor_up",
    "B": "cursor_down",
    "C": "cursor_right",
    "D": "cursor_left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch.lower(), "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "cursor_up", "cursor_down", "cursor_left", "cursor_right"
        "slide_up", "slide_down", "slide_left", "slide_right"
        "click"      — Enter / Space
        "shuffle"    — r
        "reset"      — i
        "quit"       — q / Ctrl-C / Escape
        ""           — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)
