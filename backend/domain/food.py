"""
Food placement.
"""

import random
from typing import Optional

from .snake import Point


class RandomFoodPlacer:
    """
    Picks a uniformly random cell for the next piece of food.

    The cell is not checked against the snake, so food can land on the body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def spawn(self, width_cells: int, height_cells: int) -> Point:
        x = self.rng.randrange(width_cells)
        y = self.rng.randrange(height_cells)
        return Point(x, y)
