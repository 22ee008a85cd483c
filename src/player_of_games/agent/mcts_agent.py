"""
Monte Carlo tree search agent.

Keeps one exploration graph for the whole game. Each decision adds to
it; each move played (by either side) prunes what the game can no
longer reach.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional, TYPE_CHECKING

from player_of_games.agent.agent import Agent, Player
from player_of_games.core.errors import BudgetExhausted, InvariantViolation
from player_of_games.core.types import DEFAULT_EXPLORATION
from player_of_games.simulation.budget import IterationBudget, SearchBudget
from player_of_games.simulation.rollout import random_sample
from player_of_games.simulation.search import MonteCarloTreeSearch

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 100


class MonteCarloTreeSearchAgent(Agent):
    """
    Args:
        player: The side this agent plays.
        c: Exploration constant.
        budget: Stopping policy per decision (default: 100 iterations).
        rng: Random source for rollouts and the fallback move.
        max_rollout_steps: Optional cap on moves per rollout.
        fallback_random: On BudgetExhausted, play a random legal move
            instead of raising.
        audit: Check graph invariants after every mutation.
        show_stats: Print the root's child statistics after each decision.
    """

    def __init__(
        self,
        player: Player,
        c: float = DEFAULT_EXPLORATION,
        budget: Optional[SearchBudget] = None,
        rng: Optional[random.Random] = None,
        max_rollout_steps: Optional[int] = None,
        fallback_random: bool = False,
        audit: bool = False,
        show_stats: bool = False,
    ):
        self.player = Player(player)
        self.budget = budget or IterationBudget(DEFAULT_ITERATIONS)
        self.rng = rng or random.Random()
        self.fallback_random = fallback_random
        self.show_stats = show_stats
        self.search = MonteCarloTreeSearch(
            self.player,
            c=c,
            rng=self.rng,
            max_rollout_steps=max_rollout_steps,
            audit=audit,
        )
        self.last_position: Optional["GameBase"] = None

    @property
    def store(self):
        return self.search.store

    def choose_move(self, position: "GameBase") -> Any:
        root = position.clone()
        self.last_position = root

        try:
            move = self.search.decide(root, self.budget)
        except BudgetExhausted:
            if not self.fallback_random:
                raise
            move = random_sample(root.legal_moves(self.player), self.rng)
            if move is None:
                raise InvariantViolation("There were no legal moves") from None
            logger.warning("Search budget exhausted; playing random move %s", move)
            return move

        if self.show_stats:
            from player_of_games.debug.viz import render_decision
            render_decision(self.store, root, move)
        return move

    def inform_of_move_played(self, new_position: "GameBase", move: Any) -> None:
        previous, self.last_position = self.last_position, new_position.clone()
        self.search.advance(previous, move, realized=self.last_position)

    def __repr__(self) -> str:
        return (
            f"MonteCarloTreeSearchAgent(player={int(self.player)}, c={self.search.c:.3f}, "
            f"budget={self.budget!r})"
        )
