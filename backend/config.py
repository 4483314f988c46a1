"""
Game configuration for Snake.

All values are fixed when the game is constructed. They come from the
environment (optionally a .env file) and can be overridden on the command
line. Board logic works in cell units, i.e. pixels divided by the unit size.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Defaults
DEFAULT_WIDTH = 600         # window width in pixels
DEFAULT_HEIGHT = 400        # window height in pixels
DEFAULT_UNIT_SIZE = 20      # side of one grid cell in pixels
DEFAULT_INITIAL_LENGTH = 2  # segments at start
DEFAULT_TICK_MS = 100       # timer period
DEFAULT_LOG_LEVEL = "INFO"

ENV_VARS = {
    "width": "SNAKE_WIDTH",
    "height": "SNAKE_HEIGHT",
    "unit_size": "SNAKE_UNIT_SIZE",
    "initial_length": "SNAKE_INITIAL_LENGTH",
    "tick_ms": "SNAKE_TICK_MS",
}


class ConfigError(ValueError):
    """Raised when the game configuration cannot produce a playable board."""


@dataclass(frozen=True)
class GameConfig:
    """
    Board and timing constants.

    Attributes:
        width, height: board size in pixels
        unit_size: size of one cell in pixels
        initial_length: number of segments the snake starts with
        tick_ms: interval between ticks in milliseconds
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    unit_size: int = DEFAULT_UNIT_SIZE
    initial_length: int = DEFAULT_INITIAL_LENGTH
    tick_ms: int = DEFAULT_TICK_MS

    def __post_init__(self):
        for name in ("width", "height", "unit_size", "initial_length", "tick_ms"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        if self.width % self.unit_size or self.height % self.unit_size:
            raise ConfigError(
                f"Board {self.width}x{self.height} is not a multiple of "
                f"unit size {self.unit_size}"
            )

        # The snake starts centred and extends to the left of the head
        if self.initial_length > self.width_cells // 2 + 1:
            raise ConfigError(
                f"Initial length {self.initial_length} does not fit on a board "
                f"{self.width_cells} cells wide"
            )

    @property
    def width_cells(self) -> int:
        return self.width // self.unit_size

    @property
    def height_cells(self) -> int:
        return self.height // self.unit_size


def _env_int(var: str) -> Optional[int]:
    raw = os.getenv(var)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{var} must be an integer, got {raw!r}") from None


def resolve_log_level(name: str) -> str:
    """Normalise a level name, raising ConfigError when logging does not know it."""
    level = name.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return level


def get_log_level() -> str:
    """Return the configured log level name."""
    load_dotenv()
    return resolve_log_level(os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL))


def load_config(**overrides) -> GameConfig:
    """
    Build a GameConfig from the environment.

    Keyword overrides (e.g. from argparse) win over environment values;
    ``None`` overrides are ignored so unset CLI flags fall through.
    """
    load_dotenv()

    values = {}
    for field_name, var in ENV_VARS.items():
        env_value = _env_int(var)
        if env_value is not None:
            values[field_name] = env_value

    for field_name, value in overrides.items():
        if field_name not in ENV_VARS:
            raise ConfigError(f"Unknown configuration field: {field_name}")
        if value is not None:
            values[field_name] = value

    return GameConfig(**values)
