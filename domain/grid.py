"""
Grid geometry helpers.

Positions are (row, col) tuples. Row 0 is the top of the screen, so UP
decreases the row and DOWN increases it.
"""

from typing import Tuple

from .constants import UP, DOWN, LEFT, RIGHT

Position = Tuple[int, int]

_STEPS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}


def in_bounds(pos: Position, rows: int, cols: int) -> bool:
    """Return True if pos lies inside [0, rows) x [0, cols)."""
    row, col = pos
    return 0 <= row < rows and 0 <= col < cols


def translate(pos: Position, direction: str) -> Position:
    """Return the cell one step from pos along direction."""
    try:
        d_row, d_col = _STEPS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction {direction!r}")
    return (pos[0] + d_row, pos[1] + d_col)


def at_edge(pos: Position, direction: str, rows: int, cols: int) -> bool:
    """
    Return True if pos already sits on the boundary it is heading towards.

    A snake moving RIGHT is blocked while its head column is cols - 1,
    before it ever leaves the grid.
    """
    row, col = pos
    if direction == DOWN:
        return row >= rows - 1
    if direction == RIGHT:
        return col >= cols - 1
    if direction == UP:
        return row <= 0
    if direction == LEFT:
        return col <= 0
    return False


def center(rows: int, cols: int) -> Position:
    return (rows // 2, cols // 2)


def clamp(pos: Position, rows: int, cols: int) -> Position:
    """Return the in-bounds cell closest to pos."""
    row = min(max(pos[0], 0), rows - 1)
    col = min(max(pos[1], 0), cols - 1)
    return (row, col)

