import argparse
import json
import logging
import random
import sys
from typing import Any, Dict, Optional

from config import ConfigError, GameConfig, get_log_level, load_config, resolve_log_level
from domain.food import RandomFoodPlacer
from domain.game_state import GameState, Phase, RenderState
from domain.signals import InputSignal, SignalKind
from players.base import Player
from players.random_player import RandomPlayer

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"
FRAME_RATE = 60


class SnakeSession:
    """
    Drives one GameState:
      - owns the fixed-interval timer (an elapsed-time accumulator)
      - resolves input signals into game transitions
      - remembers whether the player asked to exit
    """

    def __init__(self, config: GameConfig, food_placer: Optional[RandomFoodPlacer] = None):
        self.config = config
        self.state = GameState(config, food_placer=food_placer)
        self.exit_requested = False
        self._elapsed_ms = 0

    def handle_signal(self, signal: InputSignal):
        """
        Apply one input signal:
          START     -> restart when the game is over, otherwise start when idle
          DIRECTION -> steer the snake (ignored unless running)
          EXIT      -> flag the session for shutdown
        """
        if signal.kind == SignalKind.START:
            if self.state.game_over:
                self.state.restart()
            elif not self.state.running:
                self.state.start()
        elif signal.kind == SignalKind.DIRECTION:
            self.state.set_direction(signal.direction)
        elif signal.kind == SignalKind.EXIT:
            logger.info("Exit requested")
            self.exit_requested = True

    def advance(self, elapsed_ms: int) -> int:
        """
        Feed wall-clock time into the timer and run the ticks that are due.

        Returns:
            Number of ticks run.
        """
        if self.state.phase != Phase.RUNNING:
            # The timer only runs while the game does
            self._elapsed_ms = 0
            return 0

        self._elapsed_ms += elapsed_ms
        ticks = 0
        while self._elapsed_ms >= self.config.tick_ms and self.state.phase == Phase.RUNNING:
            self._elapsed_ms -= self.config.tick_ms
            self.state.tick()
            ticks += 1

        if self.state.phase != Phase.RUNNING:
            self._elapsed_ms = 0
        return ticks

    def render_state(self) -> RenderState:
        return self.state.snapshot()


# -------------------------------
# Headless simulation
# -------------------------------

def run_headless(config: GameConfig, player: Player, max_ticks: int = 1000,
                 food_placer: Optional[RandomFoodPlacer] = None) -> Dict[str, Any]:
    """
    Play one game without a window, letting ``player`` steer every tick.

    Args:
        config: board and timing constants
        player: picks the direction before each tick
        max_ticks: stop after this many ticks even if the snake is still alive
        food_placer: optional placer (seeded in tests)

    Returns:
        A dictionary summarizing the game (score, ticks, death_reason, length).
    """
    session = SnakeSession(config, food_placer=food_placer)
    session.handle_signal(InputSignal.start())
    state = session.state

    while state.phase == Phase.RUNNING and state.ticks < max_ticks:
        session.handle_signal(InputSignal.move(player.get_move(state)))
        session.advance(config.tick_ms)

    logger.info(f"Final board:\n{state.print_board()}")

    return {
        "score": state.score,
        "ticks": state.ticks,
        "death_reason": state.death_reason,
        "length": len(state.snake),
    }


# -------------------------------
# Window loop
# -------------------------------

def run_window(config: GameConfig, autopilot: Optional[Player] = None,
               food_placer: Optional[RandomFoodPlacer] = None):
    """
    Open the game window and run until the player exits.

    Arrow keys steer, SPACE starts (or restarts after game over), ESC exits.
    With ``autopilot`` set, it steers instead of the arrow keys.
    """
    import pygame

    from players.keyboard_player import KeyboardPlayer
    from services.frame_renderer import FrameRenderer

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()

    session = SnakeSession(config, food_placer=food_placer)
    keyboard = KeyboardPlayer()
    renderer = FrameRenderer(config)
    logger.info(f"Window open at {config.width}x{config.height}, press SPACE to start")

    while not session.exit_requested:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                session.handle_signal(InputSignal.exit())
            elif event.type == pygame.KEYDOWN:
                signal = keyboard.signal_for_key(event.key)
                if signal is None:
                    continue
                if autopilot is not None and signal.kind == SignalKind.DIRECTION:
                    continue
                session.handle_signal(signal)
            if session.exit_requested:
                break

        if session.exit_requested:
            break

        if autopilot is not None and session.state.phase == Phase.RUNNING:
            session.handle_signal(InputSignal.move(autopilot.get_move(session.state)))

        session.advance(clock.tick(FRAME_RATE))

        frame = renderer.render(session.render_state())
        surface = pygame.image.frombuffer(frame.tobytes(), frame.size, frame.mode)
        screen.blit(surface, (0, 0))
        pygame.display.flip()

    pygame.quit()
    sys.exit(0)


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play single-player Snake.")
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in pixels (default 600)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in pixels (default 400)")
    parser.add_argument("--unit-size", type=int, default=None,
                        help="Cell size in pixels (default 20)")
    parser.add_argument("--initial-length", type=int, default=None,
                        help="Starting snake length (default 2)")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds between moves (default 100)")
    parser.add_argument("--autopilot", action="store_true",
                        help="Let the random autopilot steer in the window")
    parser.add_argument("--headless", action="store_true",
                        help="Run one autopilot game without a window and print a summary")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Tick limit for --headless runs")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default from SNAKE_LOG_LEVEL or INFO)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        log_level = resolve_log_level(args.log_level) if args.log_level else get_log_level()
        config = load_config(
            width=args.width,
            height=args.height,
            unit_size=args.unit_size,
            initial_length=args.initial_length,
            tick_ms=args.tick_ms
        )
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    food_placer = RandomFoodPlacer(random.Random(args.seed))
    autopilot = RandomPlayer(random.Random(args.seed)) if (args.autopilot or args.headless) else None

    if args.headless:
        result = run_headless(config, autopilot, max_ticks=args.max_ticks, food_placer=food_placer)
        print(json.dumps(result, indent=2))
        return

    run_window(config, autopilot=autopilot, food_placer=food_placer)


if __name__ == "__main__":
    main()
