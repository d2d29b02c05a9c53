"""
Food entity and its respawn rule.
"""

import logging
import random
from typing import Optional

from .constants import FOOD_GLYPH
from .grid import Position
from .snake import Snake


logger = logging.getLogger(__name__)


class Food:
    """
    A single piece of food on the board.

    Attributes:
        position: (row, col) of the food
        glyph: character the food is drawn with
    """

    def __init__(self, position: Position, glyph: str = FOOD_GLYPH, rng: Optional[random.Random] = None):
        self.position = position
        self.glyph = glyph
        self._rng = rng if rng is not None else random

    def is_collide(self, pos: Position) -> bool:
        return self.position == pos

    def update(self, rows: int, cols: int, snake: Snake) -> bool:
        """
        Check whether the snake's head is on the food and respawn it if so.

        Returns:
            True if the food was eaten this tick.
        """
        eaten = self.is_collide(snake.head)
        if eaten:
            self.respawn(rows, cols, snake)
        return eaten

    def respawn(self, rows: int, cols: int, snake: Snake) -> None:
        """
        Move the food to a random cell not occupied by the snake.

        When the snake fills the whole grid there is nowhere to go, so the
        food stays put.
        """
        if len(snake) >= rows * cols:
            logger.warning("No free cell left for food on a %dx%d grid", rows, cols)
            return

        while True:
            row = self._rng.randint(0, rows - 1)
            col = self._rng.randint(0, cols - 1)
            if not snake.is_collide((row, col)):
                self.position = (row, col)
                logger.debug("Food respawned at %s", self.position)
                return

    def __repr__(self):
        return f"<Food at {self.position}>"
