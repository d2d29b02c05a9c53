"""
Tests for the Snake entity: steering, movement, growth and collisions.
"""

import os
import sys
from collections import deque

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, REVERSE, START_SPEED
from domain.snake import Snake, SnakeInvariantError


class TestSnakeInit:

    def test_defaults(self):
        """A new snake heads right at the starting speed with no score."""
        snake = Snake([(5, 5), (5, 4)])
        assert list(snake.positions) == [(5, 5), (5, 4)]
        assert snake.direction == RIGHT
        assert snake.just_ate is False
        assert snake.score == 0
        assert snake.speed == START_SPEED
        assert snake.death_reason is None

    def test_positions_is_deque(self):
        """Positions are stored as a deque for push-front / pop-back moves."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_head_and_tail(self):
        snake = Snake([(5, 5), (5, 4), (5, 3)])
        assert snake.head == (5, 5)
        assert snake.tail == (5, 3)
        assert len(snake) == 3

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_invalid_direction_rejected(self):
        with pytest.raises(ValueError):
            Snake([(5, 5)], direction="NORTH")

    def test_head_of_emptied_snake_is_a_contract_violation(self):
        """If the body somehow empties, reading the head aborts loudly."""
        snake = Snake([(5, 5)])
        snake.positions.clear()
        with pytest.raises(SnakeInvariantError):
            _ = snake.head
        with pytest.raises(SnakeInvariantError):
            snake.update(10, 10)


class TestSetDirection:

    @pytest.mark.parametrize("heading", sorted(VALID_MOVES))
    @pytest.mark.parametrize("new_dir", sorted(VALID_MOVES))
    def test_changes_unless_reverse(self, heading, new_dir):
        """The heading changes to new_dir iff new_dir isn't its opposite."""
        snake = Snake([(5, 5), (5, 4)], direction=heading)
        snake.set_direction(new_dir)
        if new_dir == REVERSE[heading]:
            assert snake.direction == heading
        else:
            assert snake.direction == new_dir

    def test_unknown_direction_ignored(self):
        snake = Snake([(5, 5), (5, 4)], direction=UP)
        snake.set_direction("BACKWARDS")
        snake.set_direction(None)
        assert snake.direction == UP


class TestIsCollide:

    def test_hits_any_segment(self):
        snake = Snake([(5, 5), (5, 4), (5, 3)])
        assert snake.is_collide((5, 5))
        assert snake.is_collide((5, 4))
        assert snake.is_collide((5, 3))

    def test_misses_empty_cell(self):
        snake = Snake([(5, 5), (5, 4)])
        assert not snake.is_collide((4, 4))


class TestUpdate:

    def test_plain_move_keeps_length(self):
        """Without food the head advances and the tail is dropped."""
        snake = Snake([(5, 5), (5, 4)])
        assert snake.update(10, 10) is True
        assert list(snake.positions) == [(5, 6), (5, 5)]
        assert snake.score == 0
        assert snake.speed == START_SPEED

    @pytest.mark.parametrize("direction,expected_head", [
        (UP, (4, 5)),
        (DOWN, (6, 5)),
        (LEFT, (5, 4)),
        (RIGHT, (5, 6)),
    ])
    def test_moves_along_heading(self, direction, expected_head):
        snake = Snake([(5, 5)], direction=direction)
        assert snake.update(10, 10)
        assert snake.head == expected_head

    def test_growth_after_eating(self):
        """just_ate adds a segment, scores 1 and speeds up by speed // 10."""
        snake = Snake([(5, 5), (5, 4)])
        snake.just_ate = True

        assert snake.update(10, 10) is True
        assert list(snake.positions) == [(5, 6), (5, 5), (5, 4)]
        assert snake.score == 1
        assert snake.speed == 450
        assert snake.just_ate is False

    def test_speed_decrement_shrinks_as_speed_drops(self):
        snake = Snake([(5, 5)], speed=45)
        snake.just_ate = True
        snake.update(10, 10)
        assert snake.speed == 41

    def test_speed_stalls_below_ten(self):
        snake = Snake([(5, 5)], speed=9)
        snake.just_ate = True
        snake.update(10, 10)
        assert snake.speed == 9
        assert snake.score == 1

    @pytest.mark.parametrize("head,direction", [
        ((0, 5), UP),
        ((9, 5), DOWN),
        ((5, 0), LEFT),
        ((5, 9), RIGHT),
    ])
    def test_wall_collision_leaves_snake_untouched(self, head, direction):
        snake = Snake([head], direction=direction)
        snake.just_ate = True

        assert snake.update(10, 10) is False
        assert list(snake.positions) == [head]
        assert snake.death_reason == "wall"
        assert snake.score == 0
        assert snake.just_ate is True

    def test_self_collision(self):
        """Turning back into the body ends the game."""
        positions = [(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)]
        snake = Snake(positions, direction=DOWN)

        assert snake.update(10, 10) is False
        assert list(snake.positions) == positions
        assert snake.death_reason == "self"

    def test_moving_into_current_tail_is_a_collision(self):
        """The tail is still occupied when the new head is checked."""
        positions = [(5, 5), (5, 6), (6, 6), (6, 5)]
        snake = Snake(positions, direction=DOWN)

        assert snake.update(10, 10) is False
        assert snake.death_reason == "self"


class TestGlyphs:

    def test_head_body_tail(self):
        snake = Snake([(5, 5), (5, 4), (5, 3), (5, 2)])
        glyphs = [g for _, g in snake.segments_with_glyphs()]
        assert glyphs == ["@", "O", "O", "o"]

    def test_two_segments(self):
        snake = Snake([(5, 5), (5, 4)])
        assert list(snake.segments_with_glyphs()) == [((5, 5), "@"), ((5, 4), "o")]

    def test_single_segment_is_a_head(self):
        snake = Snake([(5, 5)])
        assert list(snake.segments_with_glyphs()) == [((5, 5), "@")]
