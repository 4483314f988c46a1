"""
Tests for the frame renderer.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig
from domain import Point, RenderState
from services.frame_renderer import ColorScheme, FrameRenderer, hex_to_rgb

BLACK = (0, 0, 0)
GREEN = hex_to_rgb(ColorScheme.SNAKE)
RED = hex_to_rgb(ColorScheme.FOOD)


@pytest.fixture
def renderer():
    return FrameRenderer(GameConfig())


def cell_center(point, unit=20):
    return (point[0] * unit + unit // 2, point[1] * unit + unit // 2)


def test_hex_to_rgb():
    assert hex_to_rgb("#FF0000") == (255, 0, 0)
    assert hex_to_rgb("00ff00") == (0, 255, 0)


def test_frame_matches_board_size(renderer):
    state = RenderState(segments=(Point(15, 10), Point(14, 10)), food=Point(3, 3),
                        is_game_over=False, score=0)
    img = renderer.render(state)
    assert img.size == (600, 400)
    assert img.mode == "RGB"


def test_draws_snake_and_food(renderer):
    state = RenderState(segments=(Point(15, 10), Point(14, 10)), food=Point(3, 3),
                        is_game_over=False, score=0)
    img = renderer.render(state)

    assert img.getpixel(cell_center((15, 10))) == GREEN
    assert img.getpixel(cell_center((14, 10))) == GREEN
    assert img.getpixel(cell_center((3, 3))) == RED
    assert img.getpixel(cell_center((0, 0))) == BLACK


def test_cells_do_not_bleed(renderer):
    state = RenderState(segments=(Point(1, 1),), food=Point(5, 5), is_game_over=False, score=0)
    img = renderer.render(state)

    assert img.getpixel((20, 20)) == GREEN
    assert img.getpixel((39, 39)) == GREEN
    assert img.getpixel((40, 40)) == BLACK
    assert img.getpixel((19, 19)) == BLACK


def test_game_over_screen(renderer):
    state = RenderState(segments=(Point(15, 10), Point(14, 10)), food=Point(3, 3),
                        is_game_over=True, score=4)
    img = renderer.render(state)

    # Board is not drawn
    assert img.getpixel(cell_center((3, 3))) == BLACK
    # Text sits around and below the vertical centre
    assert img.crop((0, 150, 600, 290)).getbbox() is not None
    # Nothing above it
    assert img.crop((0, 0, 600, 100)).getbbox() is None
