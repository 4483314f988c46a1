"""
Keyboard player - turns pygame key presses into input signals.
"""

from typing import Dict, Optional

import pygame

from domain.constants import DOWN, LEFT, RIGHT, UP
from domain.signals import InputSignal

DEFAULT_KEYMAP: Dict[int, InputSignal] = {
    pygame.K_RIGHT: InputSignal.move(RIGHT),
    pygame.K_LEFT: InputSignal.move(LEFT),
    pygame.K_UP: InputSignal.move(UP),
    pygame.K_DOWN: InputSignal.move(DOWN),
    pygame.K_SPACE: InputSignal.start(),
    pygame.K_ESCAPE: InputSignal.exit(),
}


class KeyboardPlayer:
    """
    Maps key codes to signals. Unlike the autopilot it does not pick moves
    itself; the driver feeds it key events as they arrive.
    """

    def __init__(self, keymap: Optional[Dict[int, InputSignal]] = None):
        self.keymap = dict(keymap) if keymap is not None else dict(DEFAULT_KEYMAP)

    def signal_for_key(self, key: int) -> Optional[InputSignal]:
        """Return the signal bound to ``key``, or None for unbound keys."""
        return self.keymap.get(key)
