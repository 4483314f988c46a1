"""
Input signals delivered by the keyboard (or an autopilot) to the driver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import Direction


class SignalKind(str, Enum):
    DIRECTION = "DIRECTION"
    START = "START"
    EXIT = "EXIT"


@dataclass(frozen=True)
class InputSignal:
    """
    One discrete input event.

    ``direction`` is only set for DIRECTION signals. START doubles as
    restart when the game is over; the driver decides which applies.
    """

    kind: SignalKind
    direction: Optional[Direction] = None

    def __post_init__(self):
        if (self.kind == SignalKind.DIRECTION) != (self.direction is not None):
            raise ValueError("Only DIRECTION signals carry a direction")

    @classmethod
    def move(cls, direction: Direction) -> "InputSignal":
        return cls(SignalKind.DIRECTION, Direction(direction))

    @classmethod
    def start(cls) -> "InputSignal":
        return cls(SignalKind.START)

    @classmethod
    def exit(cls) -> "InputSignal":
        return cls(SignalKind.EXIT)
