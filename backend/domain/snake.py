"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, NamedTuple, Optional


class Point(NamedTuple):
    """A grid cell, in cell units."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Points from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self' once the snake has died
    """

    def __init__(self, positions: Iterable):
        self.positions = deque(Point(*p) for p in positions)
        self.alive = True
        self.death_reason: Optional[str] = None

    @classmethod
    def centered(cls, width_cells: int, height_cells: int, length: int) -> "Snake":
        """Build a horizontal snake with its head at the board centre, body to the left."""
        head_x, head_y = width_cells // 2, height_cells // 2
        return cls([(head_x - i, head_y) for i in range(length)])

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def body(self) -> List[Point]:
        """Every segment except the head."""
        return list(self.positions)[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake len={len(self)}, head={self.head}, alive={self.alive}>"
