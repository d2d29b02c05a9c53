"""
SnakeGame - owns the board, the snake and the food and runs one tick at a time.
"""

import logging
import random
from typing import Any, List, Optional

from .constants import RIGHT, START_SPEED, FOOD_OFFSET, TITLE, CONTROLS
from .direction import direction_from_input
from .food import Food
from .game_state import GameState
from .grid import center, clamp
from .snake import Snake


logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (rows, cols)
      - The snake
      - The food
      - Tick counter and game-over flag

    The game never talks to the terminal directly; render() goes through a
    shell object exposing draw() and clear_and_draw_frame().
    """

    def __init__(self, rows: int, cols: int, snake: Snake, food: Food, quit_hint: str = "Press F1 to exit."):
        self.rows = rows
        self.cols = cols
        self.snake = snake
        self.food = food
        self.quit_hint = quit_hint
        self.tick = 0
        self.game_over = False

    @classmethod
    def new(
        cls,
        rows: int,
        cols: int,
        speed: int = START_SPEED,
        rng: Optional[random.Random] = None,
        **kwargs
    ) -> "SnakeGame":
        """
        Build a fresh game: a two-segment snake in the middle heading right,
        with the food a few cells down and to the right of it.
        """
        if rows < 1 or cols < 2:
            raise ValueError(f"Grid {rows}x{cols} is too small for a snake.")

        mid_row, mid_col = center(rows, cols)
        snake = Snake([(mid_row, mid_col), (mid_row, mid_col - 1)], direction=RIGHT, speed=speed)

        food_pos = clamp((mid_row + FOOD_OFFSET[0], mid_col + FOOD_OFFSET[1]), rows, cols)
        food = Food(food_pos, rng=rng)
        if snake.is_collide(food_pos):
            food.respawn(rows, cols, snake)

        logger.debug("New %dx%d game: %r %r", rows, cols, snake, food)
        return cls(rows, cols, snake, food, **kwargs)

    def input(self, event: Any) -> None:
        """Apply a raw key event; anything that isn't a movement key is ignored."""
        direction = direction_from_input(event)
        if direction is not None:
            self.snake.set_direction(direction)

    def steer(self, direction: Optional[str]) -> None:
        if direction is not None:
            self.snake.set_direction(direction)

    def update(self) -> bool:
        """
        Execute one tick:
          1) Move the snake (growing it if it ate on the previous tick)
          2) On a wall or self collision, end the game
          3) Check whether the new head is on the food; if so the food
             respawns and the snake grows on the next tick

        Returns:
            False once the game is over, True otherwise.
        """
        if self.game_over:
            return False

        if not self.snake.update(self.rows, self.cols):
            self.game_over = True
            logger.info(
                "Game over at tick %d: hit %s, score=%d",
                self.tick, self.snake.death_reason, self.snake.score,
            )
            return False

        self.snake.just_ate = self.food.update(self.rows, self.cols, self.snake)
        if self.snake.just_ate:
            logger.info("Food eaten at %s on tick %d", self.snake.head, self.tick)

        self.tick += 1
        logger.debug("Tick %d: head=%s score=%d speed=%d",
                     self.tick, self.snake.head, self.snake.score, self.snake.speed)
        return True

    def hud_lines(self) -> List[str]:
        return [
            TITLE,
            CONTROLS,
            self.quit_hint,
            f"Score: {self.snake.score}",
        ]

    def render(self, shell) -> None:
        """Draw the HUD, then the food, then the snake on top."""
        shell.clear_and_draw_frame(self.hud_lines())
        shell.draw(self.food.position, self.food.glyph)
        for pos, glyph in self.snake.segments_with_glyphs():
            shell.draw(pos, glyph)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            rows=self.rows,
            cols=self.cols,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            food=self.food.position,
            score=self.snake.score,
            speed=self.snake.speed,
            alive=not self.game_over,
            death_reason=self.snake.death_reason,
            food_glyph=self.food.glyph,
        )
