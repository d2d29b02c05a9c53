"""
curses implementation of the render/input shell.

Meant to be driven from inside curses.wrapper(), which owns terminal setup
and guarantees the terminal is restored on exit, including on exceptions.
"""

import curses
import logging
from typing import Iterable, List, Optional, Tuple

from domain.constants import DEFAULT_QUIT_KEYS
from .shell import Shell, QUIT


logger = logging.getLogger(__name__)

BACKGROUND_PAIR = 1


class CursesShell(Shell):
    """Draws on a curses window and reads one key per tick from it."""

    def __init__(self, stdscr, quit_keys: Iterable[str] = DEFAULT_QUIT_KEYS):
        self.stdscr = stdscr
        self.quit_keys = set(quit_keys)
        self.rows, self.cols = stdscr.getmaxyx()
        self._setup()

    def _setup(self) -> None:
        curses.cbreak()
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals can't hide the cursor
            pass

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(BACKGROUND_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
            self.stdscr.bkgd(" ", curses.color_pair(BACKGROUND_PAIR))

        self.stdscr.keypad(True)
        self.stdscr.clear()
        logger.debug("Curses shell ready: %dx%d, quit keys %s", self.rows, self.cols, sorted(self.quit_keys))

    def clear_and_draw_frame(self, hud_lines: List[str]) -> None:
        self.stdscr.erase()
        for row, line in enumerate(hud_lines):
            if row >= self.rows:
                break
            self._write(row, 0, line[: self.cols])

    def draw(self, position: Tuple[int, int], glyph: str) -> None:
        row, col = position
        self._write(row, col, glyph)

    def _write(self, row: int, col: int, text: str) -> None:
        try:
            self.stdscr.addstr(row, col, text)
        except curses.error:
            # Raised for the bottom-right cell (the cursor can't advance) and
            # for any cell outside a terminal that was shrunk mid-game.
            logger.debug("Skipped off-window write at (%d, %d)", row, col)

    def refresh(self) -> None:
        self.stdscr.refresh()

    def read_input(self, timeout: int) -> Optional[str]:
        self.stdscr.timeout(timeout)
        code = self.stdscr.getch()
        return self.key_token(code)

    def key_token(self, code: int) -> Optional[str]:
        """Turn a getch() code into a key token, QUIT or None."""
        if code == -1:
            return None
        if 32 <= code < 127:
            token = chr(code)
        else:
            token = curses.keyname(code).decode("ascii", "replace")
        if token in self.quit_keys:
            return QUIT
        return token
