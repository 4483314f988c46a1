"""
Frame rendering for Snake.

Draws a RenderState into a Pillow image:
- black board
- green snake segments, red food
- a centred "Game Over" screen with the score and key hints

The window layer blits these frames; tests inspect them directly.
"""

import logging
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from config import GameConfig
from domain.game_state import RenderState
from domain.snake import Point

logger = logging.getLogger(__name__)

FONT_PATHS = {
    "bold": ["DejaVuSans-Bold.ttf", "Arial Bold.ttf", "/System/Library/Fonts/Helvetica.ttc"],
    "regular": ["DejaVuSans.ttf", "Arial.ttf", "/System/Library/Fonts/Helvetica.ttc"],
}


class ColorScheme:
    """Colours of the classic board"""

    BACKGROUND = "#000000"
    SNAKE = "#00FF00"
    FOOD = "#FF0000"
    TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def _load_font(style: str, size: int):
    for path in FONT_PATHS[style]:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    logger.debug(f"No TrueType font found for {style}, using Pillow default")
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        # Pillow < 10.1 has no sized default font
        return ImageFont.load_default()


class FrameRenderer:
    """Render snapshots of a single game at the configured pixel size"""

    def __init__(self, config: GameConfig):
        self.config = config
        self.font_large = _load_font("bold", 30)
        self.font_small = _load_font("regular", 20)

    def render(self, state: RenderState) -> Image.Image:
        """
        Render one frame.

        Args:
            state: snapshot taken after the latest tick

        Returns:
            RGB image of width x height pixels
        """
        img = Image.new("RGB", (self.config.width, self.config.height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        if state.is_game_over:
            self._draw_game_over(draw, state.score)
            return img

        for point in state.segments:
            self._draw_cell(draw, point, hex_to_rgb(ColorScheme.SNAKE))
        self._draw_cell(draw, state.food, hex_to_rgb(ColorScheme.FOOD))

        return img

    def _draw_cell(self, draw: ImageDraw.ImageDraw, point: Point, color: Tuple[int, int, int]):
        """Fill one grid cell"""
        size = self.config.unit_size
        x, y = point.x * size, point.y * size
        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color)

    def _draw_game_over(self, draw: ImageDraw.ImageDraw, score: int):
        """Score line at the vertical centre, key hints below it"""
        center_y = self.config.height // 2
        lines = [
            (f"Game Over! Score: {score}", self.font_large, center_y),
            ("Press SPACE to Play Again", self.font_small, center_y + 50),
            ("Press ESC to Exit", self.font_small, center_y + 80),
        ]
        for text, font, baseline in lines:
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                ((self.config.width - text_width) // 2, baseline - text_height),
                text,
                fill=hex_to_rgb(ColorScheme.TEXT),
                font=font
            )
