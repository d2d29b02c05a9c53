"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import Iterator, List, Optional, Tuple

from .constants import (
    RIGHT, VALID_MOVES, START_SPEED, SPEED_DIVISOR,
    HEAD_GLYPH, BODY_GLYPH, TAIL_GLYPH,
)
from .direction import is_reverse
from .grid import Position, at_edge, translate


logger = logging.getLogger(__name__)


class SnakeInvariantError(RuntimeError):
    """Raised when the snake's internal state breaks its contract."""


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (row, col) from head at index 0 to tail at the end
        direction: current heading
        just_ate: set by the game when the head landed on food; consumed by
                  the next update, which grows the snake and bumps the score
        score: food eaten so far
        speed: tick interval in milliseconds (smaller is faster)
        death_reason: None while alive, then 'wall' or 'self'
    """

    def __init__(
        self,
        positions: List[Position],
        direction: str = RIGHT,
        speed: int = START_SPEED,
    ):
        if not positions:
            raise ValueError("Snake needs at least one segment.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction {direction!r}")
        self.positions = deque(positions)
        self.direction = direction
        self.just_ate = False
        self.score = 0
        self.speed = speed
        self.death_reason: Optional[str] = None

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        if not self.positions:
            raise SnakeInvariantError("Snake has no body")
        return self.positions[0]

    @property
    def tail(self) -> Position:
        if not self.positions:
            raise SnakeInvariantError("Snake has no body")
        return self.positions[-1]

    def set_direction(self, new_dir: str) -> None:
        """Turn towards new_dir unless it would reverse onto the body."""
        if new_dir not in VALID_MOVES:
            return
        if is_reverse(self.direction, new_dir):
            return
        self.direction = new_dir

    def is_collide(self, pos: Position) -> bool:
        return pos in self.positions

    def update(self, rows: int, cols: int) -> bool:
        """
        Advance one cell along the current heading.

        Returns:
            False if the move hits the edge or the body (the snake is left
            untouched and death_reason is set), True otherwise.
        """
        head = self.head
        if at_edge(head, self.direction, rows, cols):
            self.death_reason = "wall"
            return False

        new_head = translate(head, self.direction)
        if self.is_collide(new_head):
            self.death_reason = "self"
            return False

        self.positions.appendleft(new_head)
        if self.just_ate:
            self.score += 1
            self.speed -= self.speed // SPEED_DIVISOR
            self.just_ate = False
            logger.info("Snake grew to %d segments, score=%d speed=%d",
                        len(self.positions), self.score, self.speed)
        else:
            self.positions.pop()
        return True

    def segments_with_glyphs(self) -> Iterator[Tuple[Position, str]]:
        """Yield each segment with the glyph it is drawn with."""
        last = len(self.positions) - 1
        for i, pos in enumerate(self.positions):
            if i == 0:
                yield pos, HEAD_GLYPH
            elif i == last:
                yield pos, TAIL_GLYPH
            else:
                yield pos, BODY_GLYPH

    def __repr__(self):
        return (
            f"<Snake head={self.positions[0] if self.positions else None} "
            f"len={len(self.positions)} dir={self.direction} score={self.score}>"
        )
