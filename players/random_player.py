"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, REVERSE
from domain.game_state import GameState
from domain.grid import in_bounds, translate
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, its own body
    and a reversal onto its neck.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random

    def get_move(self, game_state: GameState) -> Optional[str]:
        positions = game_state.snake_positions
        head = positions[0]
        heading = game_state.direction

        valid_moves: List[str] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            if move == REVERSE[heading]:
                continue
            new_head = translate(head, move)
            # Check wall collisions
            if not in_bounds(new_head, game_state.rows, game_state.cols):
                continue
            # Check self collisions. The tail still counts: the game checks
            # the new head before the tail moves.
            if new_head in positions:
                continue
            valid_moves.append(move)

        # No way out: keep going, we'll die anyway
        if not valid_moves:
            return heading

        return self._rng.choice(valid_moves)
