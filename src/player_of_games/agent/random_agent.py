"""
Uniform random mover.
"""

from __future__ import annotations

import random
from typing import Any, Optional, TYPE_CHECKING

from player_of_games.agent.agent import Agent, Player
from player_of_games.core.errors import InvariantViolation
from player_of_games.simulation.rollout import random_sample

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


class RandomAgent(Agent):
    """Picks uniformly among the legal moves."""

    def __init__(self, player: Player, rng: Optional[random.Random] = None):
        self.player = Player(player)
        self.rng = rng or random.Random()

    def choose_move(self, position: "GameBase") -> Any:
        move = random_sample(position.legal_moves(self.player), self.rng)
        if move is None:
            raise InvariantViolation("There were no legal moves")
        return move

    def __repr__(self) -> str:
        return f"RandomAgent(player={int(self.player)})"
