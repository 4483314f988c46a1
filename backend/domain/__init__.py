"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
the window, keyboard and rendering layers.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction, OPPOSITES
from .snake import Point, Snake
from .food import RandomFoodPlacer
from .signals import InputSignal, SignalKind
from .game_state import GameState, Phase, RenderState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction', 'OPPOSITES',
    'Point',
    'Snake',
    'RandomFoodPlacer',
    'InputSignal',
    'SignalKind',
    'GameState',
    'Phase',
    'RenderState',
]
