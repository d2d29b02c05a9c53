"""
Render/input shell interface.

The game loop only ever talks to the terminal through this interface, which
keeps the domain free of curses and lets tests drive the loop with a fake.
"""

from typing import List, Optional, Tuple

# Returned by read_input() when the player asked to leave
QUIT = "QUIT"


class Shell:
    """
    Base class/interface for a render/input shell.

    Attributes:
        rows, cols: size of the play area
    """

    rows: int
    cols: int

    def clear_and_draw_frame(self, hud_lines: List[str]) -> None:
        """Erase the screen, then write the HUD lines from the top-left corner."""
        raise NotImplementedError

    def draw(self, position: Tuple[int, int], glyph: str) -> None:
        """Place a single glyph at a (row, col) cell."""
        raise NotImplementedError

    def refresh(self) -> None:
        raise NotImplementedError

    def read_input(self, timeout: int) -> Optional[str]:
        """
        Block for up to timeout milliseconds waiting for one key.

        Returns:
            A key token, QUIT, or None if the timeout elapsed.
        """
        raise NotImplementedError
