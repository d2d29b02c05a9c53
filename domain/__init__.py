"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
the terminal (curses setup, drawing, key polling).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, REVERSE, START_SPEED
from .direction import direction_from_input
from .snake import Snake, SnakeInvariantError
from .food import Food
from .game_state import GameState
from .game import SnakeGame

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'REVERSE', 'START_SPEED',
    'direction_from_input',
    'Snake',
    'SnakeInvariantError',
    'Food',
    'GameState',
    'SnakeGame',
]
