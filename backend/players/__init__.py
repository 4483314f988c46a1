"""
Player implementations for Snake.

This module contains the sources of input for the snake: the keyboard,
which produces signals as keys are pressed, and an autopilot that picks
a safe random move every tick.

KeyboardPlayer lives in players.keyboard_player and is imported from
there, so headless runs never load pygame.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
