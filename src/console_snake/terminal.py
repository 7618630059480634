"""Terminal I/O used by the game, and its curses implementation."""

from __future__ import annotations

import curses
import logging
import os
import sys
import time
from typing import Protocol

from console_snake.grid import GLYPHS, CellType

logger = logging.getLogger(__name__)

KEY_UP = "w"
KEY_DOWN = "s"
KEY_LEFT = "a"
KEY_RIGHT = "d"
KEY_PLAY = "p"
KEY_QUIT = "q"

# Checks of the tty size after a resize request, and the pause between them.
RESIZE_POLLS = 10
RESIZE_POLL_INTERVAL = 0.02


class TerminalIO(Protocol):
    """What the game needs from a terminal.

    Keys are reported as lower-cased single characters.
    """

    def clear(self) -> None: ...

    def draw_symbol(self, x: int, y: int, cell: CellType) -> None: ...

    def read_available_keys(self) -> list[str]: ...

    def read_key_blocking(self) -> str | None: ...

    def display_text(self, row: int, text: str) -> None: ...

    def get_window_size(self) -> tuple[int, int]: ...

    def set_window_size(self, width: int, height: int) -> bool: ...

    def set_cursor_visible(self, visible: bool) -> None: ...

    def set_title(self, title: str) -> None: ...

    def flush(self) -> None: ...


def _tty_size() -> tuple[int, int] | None:
    """Return the ``(columns, lines)`` the tty reports, if stdout is one."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError):
        return None
    return size.columns, size.lines


def _decode(ch: int) -> str | None:
    """Map a curses key code to a lower-cased character, if it is one."""
    if 0 <= ch < 256:
        return chr(ch).lower()
    return None


class CursesTerminal:
    """:class:`TerminalIO` on top of a curses window.

    Expects the ``stdscr`` handed out by :func:`curses.wrapper`, which
    also takes care of restoring the terminal on exit.
    """

    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def clear(self) -> None:
        self.stdscr.erase()
        self.stdscr.noutrefresh()

    def draw_symbol(self, x: int, y: int, cell: CellType) -> None:
        self._put(y, x, GLYPHS[cell])

    def display_text(self, row: int, text: str) -> None:
        for offset, line in enumerate(text.split("\n")):
            self._put(row + offset, 0, line)

    def read_available_keys(self) -> list[str]:
        """Drain every buffered key without blocking."""
        self.stdscr.nodelay(True)
        keys: list[str] = []
        while True:
            ch = self.stdscr.getch()
            if ch == -1:
                break
            key = _decode(ch)
            if key is not None:
                keys.append(key)
        return keys

    def read_key_blocking(self) -> str | None:
        """Wait for one key.

        Returns ``None`` when the wait ends without a key, e.g. because a
        signal interrupted it.
        """
        self.stdscr.nodelay(False)
        ch = self.stdscr.getch()
        if ch == -1:
            return None
        return _decode(ch)

    def get_window_size(self) -> tuple[int, int]:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def set_window_size(self, width: int, height: int) -> bool:
        """Ask the terminal emulator to resize itself to *width* × *height*.

        Curses is only told about the new size once the tty reports it.
        Returns ``False`` if the terminal did not grow that far.
        """
        # xterm CSI 8: resize the text area.
        sys.stdout.write(f"\x1b[8;{height};{width}t")
        sys.stdout.flush()

        for _ in range(RESIZE_POLLS):
            actual = _tty_size()
            if actual is not None and actual[0] >= width and actual[1] >= height:
                break
            time.sleep(RESIZE_POLL_INTERVAL)
        else:
            logger.warning(
                "Terminal refused resize to %dx%d, size is %s.",
                width, height, _tty_size(),
            )
            return False

        try:
            curses.resize_term(actual[1], actual[0])
        except curses.error:
            logger.warning("Curses could not adopt size %dx%d.", *actual)
            return False
        return True

    def set_cursor_visible(self, visible: bool) -> None:
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            logger.debug("Terminal does not support cursor visibility changes.")

    def set_title(self, title: str) -> None:
        # xterm OSC 0: set icon name and window title.
        sys.stdout.write(f"\x1b]0;{title}\x07")
        sys.stdout.flush()

    def _put(self, row: int, col: int, text: str) -> None:
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            # Writing the bottom-right cell raises after the write succeeds;
            # anything off-screen is simply not shown.
            pass
        self.stdscr.noutrefresh()

    def flush(self) -> None:
        """Push every pending write to the screen in one update."""
        curses.doupdate()
