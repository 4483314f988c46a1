"""
Tests for players/ - the autopilot and the keyboard mapping.
"""

import os
import random
import sys

import pygame
import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig
from domain import DOWN, LEFT, RIGHT, UP, VALID_MOVES, GameState, InputSignal, RandomFoodPlacer, Snake
from players import Player, RandomPlayer
from players.keyboard_player import KeyboardPlayer


@pytest.fixture
def state():
    state = GameState(GameConfig(), food_placer=RandomFoodPlacer(random.Random(3)))
    state.start()
    return state


class TestPlayer:

    def test_base_player_not_implemented(self, state):
        with pytest.raises(NotImplementedError):
            Player().get_move(state)


class TestRandomPlayer:

    def test_returns_valid_move(self, state):
        player = RandomPlayer(random.Random(0))
        assert player.get_move(state) in VALID_MOVES

    def test_never_reverses(self, state):
        player = RandomPlayer(random.Random(0))
        for _ in range(50):
            assert player.get_move(state) != LEFT

    def test_avoids_walls_in_corner(self, state):
        # Head in the top-left corner heading left: only DOWN is safe
        state.snake = Snake([(0, 0), (1, 0)])
        state.direction = LEFT
        player = RandomPlayer(random.Random(0))

        for _ in range(20):
            assert player.get_move(state) == DOWN

    def test_avoids_own_body(self, state):
        state.snake = Snake([(5, 5), (4, 5), (4, 4), (5, 4), (6, 4), (6, 3)])
        state.direction = RIGHT
        player = RandomPlayer(random.Random(0))

        for _ in range(20):
            assert player.get_move(state) in {RIGHT, DOWN}

    def test_tail_cell_is_safe(self, state):
        # The tail moves away, so heading UP into it is allowed
        state.snake = Snake([(5, 5), (4, 5), (4, 4), (5, 4)])
        state.direction = RIGHT
        state.food = (0, 0)
        player = RandomPlayer(random.Random(0))

        moves = {player.get_move(state) for _ in range(50)}
        assert UP in moves

    def test_trapped_keeps_direction(self, state):
        state.snake = Snake([(0, 0), (1, 0), (1, 1), (0, 1), (0, 2)])
        state.direction = LEFT
        player = RandomPlayer(random.Random(0))
        assert player.get_move(state) == LEFT

    def test_seeded_autopilot_is_deterministic(self, state):
        a = RandomPlayer(random.Random(9))
        b = RandomPlayer(random.Random(9))
        assert [a.get_move(state) for _ in range(10)] == [b.get_move(state) for _ in range(10)]


class TestKeyboardPlayer:

    @pytest.mark.parametrize("key,direction", [
        (pygame.K_RIGHT, RIGHT),
        (pygame.K_LEFT, LEFT),
        (pygame.K_UP, UP),
        (pygame.K_DOWN, DOWN),
    ])
    def test_arrow_keys(self, key, direction):
        assert KeyboardPlayer().signal_for_key(key) == InputSignal.move(direction)

    def test_space_is_start(self):
        assert KeyboardPlayer().signal_for_key(pygame.K_SPACE) == InputSignal.start()

    def test_escape_is_exit(self):
        assert KeyboardPlayer().signal_for_key(pygame.K_ESCAPE) == InputSignal.exit()

    def test_unbound_key(self):
        assert KeyboardPlayer().signal_for_key(pygame.K_a) is None

    def test_custom_keymap(self):
        keyboard = KeyboardPlayer({pygame.K_w: InputSignal.move(UP)})
        assert keyboard.signal_for_key(pygame.K_w) == InputSignal.move(UP)
        assert keyboard.signal_for_key(pygame.K_UP) is None


class TestInputSignal:

    def test_direction_required_for_moves(self):
        from domain.signals import SignalKind
        with pytest.raises(ValueError):
            InputSignal(SignalKind.DIRECTION)

    def test_start_has_no_direction(self):
        from domain.signals import SignalKind
        with pytest.raises(ValueError):
            InputSignal(SignalKind.START, RIGHT)

    def test_move_accepts_string(self):
        assert InputSignal.move("UP").direction == UP
