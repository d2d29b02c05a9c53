#!/usr/bin/env python3
"""
Terminal Snake.

Steer the snake with wasd, hjkl or the arrow keys, eat the food, and don't
hit the walls or yourself. F1 (or q) quits.
"""

import argparse
import curses
import logging
import random
import sys
from typing import List, Optional, Tuple

from config import Settings, load_settings
from domain.game import SnakeGame
from players import Player, RandomPlayer
from services.curses_shell import CursesShell
from services.shell import Shell, QUIT


logger = logging.getLogger(__name__)

OUTCOME_QUIT = "quit"
OUTCOME_GAME_OVER = "game_over"


def describe_quit_keys(quit_keys) -> str:
    """Human readable hint, e.g. 'Press F1 or q to exit.'"""
    names = []
    for key in quit_keys:
        if key.startswith("KEY_F(") and key.endswith(")"):
            names.append("F" + key[len("KEY_F("):-1])
        elif key.startswith("KEY_"):
            names.append(key[len("KEY_"):].title())
        else:
            names.append(key)
    if not names:
        return "Press Ctrl-C to exit."
    return f"Press {' or '.join(names)} to exit."


def run_game(game: SnakeGame, shell: Shell, player: Optional[Player] = None) -> str:
    """
    Main loop: render, wait up to the snake's speed for one key, update.

    The blocking read is the only pacing; a faster snake simply waits less.

    Returns:
        OUTCOME_QUIT if the player quit, OUTCOME_GAME_OVER on a collision.
    """
    while True:
        game.render(shell)
        shell.refresh()

        event = shell.read_input(game.snake.speed)
        if event == QUIT:
            logger.info("Quit at tick %d with score %d", game.tick, game.snake.score)
            return OUTCOME_QUIT

        if player is not None:
            game.steer(player.get_move(game.get_current_state()))
        else:
            game.input(event)

        if not game.update():
            logger.debug("Final board:\n%s", game.get_current_state().print_board())
            return OUTCOME_GAME_OVER


def _play(stdscr, settings: Settings, demo: bool, rng: Optional[random.Random]) -> Tuple[str, SnakeGame]:
    shell = CursesShell(stdscr, quit_keys=settings.quit_keys)
    game = SnakeGame.new(
        shell.rows,
        shell.cols,
        speed=settings.start_speed,
        rng=rng,
        quit_hint=describe_quit_keys(settings.quit_keys),
    )
    player = RandomPlayer(rng=rng) if demo else None
    logger.info("Starting %dx%d game (speed=%d ms, demo=%s)", shell.rows, shell.cols, settings.start_speed, demo)
    return run_game(game, shell, player), game


def setup_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}")
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal."
    )
    parser.add_argument("--speed", type=int, default=None,
                        help="Starting tick interval in milliseconds (default: SNAKE_START_SPEED or 500)")
    parser.add_argument("--demo", action="store_true",
                        help="Let a random autopilot steer the snake")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (default: SNAKE_LOG_FILE or stderr)")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level, e.g. DEBUG or INFO (default: SNAKE_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)
    if args.speed is not None and args.speed <= 0:
        parser.error("--speed must be positive")
    return args


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """CLI flags win over the environment."""
    if args.speed is not None:
        settings.start_speed = args.speed
    if args.log_file:
        settings.log_file = args.log_file
    if args.log_level:
        settings.log_level = args.log_level.upper()
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = apply_overrides(load_settings(), args)
    setup_logging(settings)

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        outcome, game = curses.wrapper(_play, settings, args.demo, rng)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        print("Quit.")
        return 0

    if outcome == OUTCOME_GAME_OVER:
        print(f"Game over (hit {game.snake.death_reason}). Final score: {game.snake.score}")
    else:
        print(f"Quit. Final score: {game.snake.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
