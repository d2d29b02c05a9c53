"""
Runtime settings, read from the environment (and a local .env file).

Variables:
    SNAKE_START_SPEED   starting tick interval in ms (default 500)
    SNAKE_LOG_FILE      write logs here instead of stderr
    SNAKE_LOG_LEVEL     logging level name (default WARNING)
    SNAKE_QUIT_KEYS     comma separated key tokens that quit (default KEY_F(1),q)
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from domain.constants import START_SPEED, DEFAULT_QUIT_KEYS


@dataclass
class Settings:
    start_speed: int = START_SPEED
    log_file: Optional[str] = None
    log_level: str = "WARNING"
    quit_keys: Tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_QUIT_KEYS))


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    load_dotenv()

    log_file = (os.getenv("SNAKE_LOG_FILE") or "").strip() or None
    log_level = (os.getenv("SNAKE_LOG_LEVEL") or "WARNING").strip().upper()

    raw_keys = os.getenv("SNAKE_QUIT_KEYS")
    if raw_keys and raw_keys.strip():
        quit_keys = tuple(k.strip() for k in raw_keys.split(",") if k.strip())
    else:
        quit_keys = tuple(DEFAULT_QUIT_KEYS)

    return Settings(
        start_speed=_get_int("SNAKE_START_SPEED", START_SPEED),
        log_file=log_file,
        log_level=log_level,
        quit_keys=quit_keys,
    )
