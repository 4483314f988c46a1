"""
GameState entity - the single-player board and its Idle/Running/GameOver lifecycle.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from config import GameConfig
from .constants import Direction, INITIAL_DIRECTION, SELF, WALL
from .food import RandomFoodPlacer
from .snake import Point, Snake

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class RenderState:
    """What the rendering layer needs to draw one frame."""

    segments: Tuple[Point, ...]
    food: Point
    is_game_over: bool
    score: int


class GameState:
    """
    Owns the snake, the food, the current direction and the running/game_over flags.

    Nothing here does I/O; a driver calls ``tick()`` on a fixed interval and
    forwards input through ``start()``, ``restart()`` and ``set_direction()``.

    Attributes:
        config: board and timing constants
        snake: the Snake, head first
        food: Point of the current food
        direction: Direction applied on the next tick
        running: whether the player has started the game
        game_over: terminal flag, cleared only by restart/reset
        ticks: number of ticks that moved the snake since the last reset
    """

    def __init__(self, config: GameConfig, food_placer: Optional[RandomFoodPlacer] = None):
        self.config = config
        self.food_placer = food_placer if food_placer is not None else RandomFoodPlacer()
        self.running = False
        self.game_over = False
        self._init_board()

    def _init_board(self):
        self.snake = Snake.centered(
            self.config.width_cells,
            self.config.height_cells,
            self.config.initial_length
        )
        self.direction = INITIAL_DIRECTION
        self.ticks = 0
        self._spawn_food()

    def _spawn_food(self):
        self.food = self.food_placer.spawn(self.config.width_cells, self.config.height_cells)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.running:
            return Phase.RUNNING
        return Phase.IDLE

    @property
    def segments(self) -> Tuple[Point, ...]:
        return tuple(self.snake.positions)

    @property
    def head(self) -> Point:
        return self.snake.head

    @property
    def score(self) -> int:
        """Number of food items eaten."""
        return len(self.snake) - self.config.initial_length

    @property
    def death_reason(self) -> Optional[str]:
        return self.snake.death_reason

    def snapshot(self) -> RenderState:
        return RenderState(
            segments=self.segments,
            food=self.food,
            is_game_over=self.game_over,
            score=self.score
        )

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.config.width_cells and 0 <= point.y < self.config.height_cells

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Idle -> Running. Returns False when not idle."""
        if self.phase != Phase.IDLE:
            return False
        self.running = True
        logger.info("Game started")
        return True

    def restart(self) -> bool:
        """GameOver -> Idle. Another start() is needed before the snake moves."""
        if self.phase != Phase.GAME_OVER:
            return False
        self.reset()
        return True

    def reset(self):
        """Put a fresh snake and food on the board and return to Idle."""
        self._init_board()
        self.game_over = False
        self.running = False
        logger.info("Game reset, waiting for start")

    def set_direction(self, requested) -> bool:
        """
        Change the direction used by the next tick.

        Ignored unless the game is running, when ``requested`` is not a
        direction, or when it would reverse the snake onto itself.

        Returns:
            True if the direction was accepted.
        """
        if self.phase != Phase.RUNNING:
            return False

        try:
            requested = Direction(requested)
        except ValueError:
            logger.debug(f"Ignoring unknown direction {requested!r}")
            return False

        if requested == self.direction.opposite:
            return False

        self.direction = requested
        return True

    def tick(self):
        """
        Advance one step:
          1) move the head one cell in the current direction
          2) grow if the head lands on food (and respawn it), otherwise drop the tail
          3) end the game on wall or self collision
        """
        if self.phase != Phase.RUNNING:
            return

        dx, dy = self.direction.vector
        new_head = self.snake.head.shifted(dx, dy)
        self.snake.positions.appendleft(new_head)

        if new_head == self.food:
            self._spawn_food()
            logger.debug(f"Ate food at {new_head}, length {len(self.snake)}")
        else:
            self.snake.positions.pop()

        self.ticks += 1
        self._check_collision()

    def _check_collision(self):
        head = self.snake.head
        reason = None
        if not self.in_bounds(head):
            reason = WALL
        elif head in self.snake.body:
            reason = SELF

        if reason is not None:
            self.snake.alive = False
            self.snake.death_reason = reason
            self.game_over = True
            logger.info(f"Game Over: {reason} collision at {head}. Score: {self.score}")

    # ------------------------------------------------------------------
    # Debug output
    # ------------------------------------------------------------------

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        T = snake body
        Row 0 is at the top, matching screen coordinates.
        """
        width, height = self.config.width_cells, self.config.height_cells
        board = [['.' for _ in range(width)] for _ in range(height)]

        if self.in_bounds(self.food):
            board[self.food.y][self.food.x] = 'A'

        for idx, point in enumerate(self.snake.positions):
            if not self.in_bounds(point):
                continue
            board[point.y][point.x] = 'H' if idx == 0 else 'T'

        return "\n".join(f"{y:2d} {' '.join(row)}" for y, row in enumerate(board))

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, score={self.score}, "
            f"head={self.head}, food={self.food}, direction={self.direction.value}>"
        )
