"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import HEAD_GLYPH, BODY_GLYPH, TAIL_GLYPH, FOOD_GLYPH


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: how many successful updates have run (0-based)
        rows, cols: board dimensions
        snake_positions: list of (row, col), head first
        direction: the snake's heading
        food: (row, col) of the food
        score: food eaten so far
        speed: current tick interval in ms
        alive: False once the game is over
        death_reason: 'wall', 'self' or None
        food_glyph: character the food is drawn with in print_board()
    """

    def __init__(
        self,
        tick: int,
        rows: int,
        cols: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        food: Tuple[int, int],
        score: int,
        speed: int,
        alive: bool = True,
        death_reason: Optional[str] = None,
        food_glyph: str = FOOD_GLYPH,
    ):
        self.tick = tick
        self.rows = rows
        self.cols = cols
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.score = score
        self.speed = speed
        self.alive = alive
        self.death_reason = death_reason
        self.food_glyph = food_glyph

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        - = empty space
        . = food
        @ = snake head
        O = snake body
        o = snake tail
        Row 0 is printed first, matching the terminal.
        """
        board = [['-' for _ in range(self.cols)] for _ in range(self.rows)]

        fr, fc = self.food
        if 0 <= fr < self.rows and 0 <= fc < self.cols:
            board[fr][fc] = self.food_glyph

        last = len(self.snake_positions) - 1
        for idx, (r, c) in enumerate(self.snake_positions):
            if idx == 0:
                glyph = HEAD_GLYPH
            elif idx == last:
                glyph = TAIL_GLYPH
            else:
                glyph = BODY_GLYPH
            board[r][c] = glyph

        result = [f"Tick {self.tick}  Score {self.score}"]
        for row in board:
            result.append(''.join(row))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, head={self.snake_positions[0]}, "
            f"food={self.food}, score={self.score}, alive={self.alive}>"
        )
