"""
Player implementations for terminal Snake.

A player is an alternative to the keyboard: it steers the snake from the
game state, e.g. the --demo autopilot.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
