"""
Game constants for Snake.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Movement directions. Screen coordinates: UP decreases y."""

    RIGHT = "RIGHT"
    LEFT = "LEFT"
    UP = "UP"
    DOWN = "DOWN"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @property
    def vector(self) -> Tuple[int, int]:
        return UNIT_VECTORS[self]


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# A snake may never turn straight back onto its own neck
OPPOSITES: Dict[Direction, Direction] = {
    RIGHT: LEFT,
    LEFT: RIGHT,
    UP: DOWN,
    DOWN: UP,
}

UNIT_VECTORS: Dict[Direction, Tuple[int, int]] = {
    RIGHT: (1, 0),
    LEFT: (-1, 0),
    UP: (0, -1),
    DOWN: (0, 1),
}

INITIAL_DIRECTION = RIGHT

# Death reasons
WALL = "wall"
SELF = "self"
