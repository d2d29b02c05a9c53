"""
Base player interface for the game loop.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for automated steering.

    A player looks at the current game state once per tick and returns the
    direction it wants the snake to take.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None to keep the heading
        """
        raise NotImplementedError
