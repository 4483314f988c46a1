"""
Tests for domain/food.py.
"""

import os
import random
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.food import RandomFoodPlacer
from domain.snake import Point


def test_spawn_returns_point_on_board():
    placer = RandomFoodPlacer(random.Random(42))
    for _ in range(500):
        point = placer.spawn(30, 20)
        assert isinstance(point, Point)
        assert 0 <= point.x < 30
        assert 0 <= point.y < 20


def test_spawn_reaches_every_cell_of_small_board():
    placer = RandomFoodPlacer(random.Random(1))
    seen = {placer.spawn(3, 2) for _ in range(300)}
    assert seen == {(x, y) for x in range(3) for y in range(2)}


def test_same_seed_same_sequence():
    a = RandomFoodPlacer(random.Random(7))
    b = RandomFoodPlacer(random.Random(7))
    assert [a.spawn(30, 20) for _ in range(20)] == [b.spawn(30, 20) for _ in range(20)]


def test_single_cell_board():
    placer = RandomFoodPlacer()
    assert placer.spawn(1, 1) == (0, 0)
