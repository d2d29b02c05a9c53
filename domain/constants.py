"""
Game constants for terminal Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# A heading may never flip straight back onto its own neck
REVERSE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Key tokens -> direction. wasd, vi keys and the arrow keys.
KEY_BINDINGS = {
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
    "k": UP,
    "h": LEFT,
    "j": DOWN,
    "l": RIGHT,
    "KEY_UP": UP,
    "KEY_LEFT": LEFT,
    "KEY_DOWN": DOWN,
    "KEY_RIGHT": RIGHT,
}

# Glyphs
HEAD_GLYPH = "@"
BODY_GLYPH = "O"
TAIL_GLYPH = "o"
FOOD_GLYPH = "."

# Game settings
START_SPEED = 500           # ms between ticks
SPEED_DIVISOR = 10          # each meal shaves speed // SPEED_DIVISOR off
FOOD_OFFSET = (5, 5)        # food starts this far from the center
DEFAULT_QUIT_KEYS = ("KEY_F(1)", "q")

TITLE = "Snake: Help Kanka find food!"
CONTROLS = "Use wasd, hjkl or the arrow keys to move."
