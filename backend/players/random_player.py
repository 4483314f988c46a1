"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        current = game_state.direction
        head = game_state.head
        positions = list(game_state.segments)

        # The tail moves out of the way unless this move eats the food
        blocked = positions[1:-1]

        # Filter out moves that:
        # 1. Reverse onto the neck (rejected by the game anyway)
        # 2. Hit walls
        # 3. Hit own body
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if move == current.opposite:
                continue

            new_head = head.shifted(*move.vector)
            if not game_state.in_bounds(new_head):
                continue

            if new_head in blocked or (new_head == game_state.food and new_head in positions):
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
