"""
Configuration and game registry.
"""

import random
from typing import Optional

import numpy as np

from player_of_games.agent.agent import Player
from player_of_games.agent.mcts_agent import DEFAULT_ITERATIONS
from player_of_games.core.types import DEFAULT_EXPLORATION
from player_of_games.games import TicTacToe, Nim
from player_of_games.games.game_state import GameState
from player_of_games.simulation.budget import DeadlineBudget, IterationBudget, SearchBudget


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
    "nim": Nim,
}

# Initial states use int8 encoding (0 = empty)
INITIAL_STATES = {
    "tic_tac_toe": GameState(
        np.zeros((3, 3), dtype=np.int8),
        current_player=Player.ONE,
    ),
    "nim": GameState(
        Nim._initial_board(),  # Static method
        current_player=Player.ONE,
    ),
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Search configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        iterations: int = DEFAULT_ITERATIONS,
        deadline: Optional[float] = None,
        exploration: float = DEFAULT_EXPLORATION,
        max_rollout_steps: Optional[int] = None,
        fallback_random: bool = False,
        audit: bool = False,
        show_stats: bool = False,
        seed: Optional[int] = None,
    ):
        if game_name not in GAMES:
            raise KeyError(game_name)
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        if deadline is not None and deadline < 0:
            raise ValueError(f"deadline must be >= 0, got {deadline}")
        if exploration < 0:
            raise ValueError(f"exploration must be >= 0, got {exploration}")

        self.game_name = game_name
        self.iterations = iterations
        self.deadline = deadline
        self.exploration = exploration
        self.max_rollout_steps = max_rollout_steps
        self.fallback_random = fallback_random
        self.audit = audit
        self.show_stats = show_stats
        self.seed = seed

    def budget(self) -> SearchBudget:
        """Stopping policy for one decision: deadline if set, else iteration count."""
        if self.deadline is not None:
            return DeadlineBudget(self.deadline)
        return IterationBudget(self.iterations)

    def rng(self, offset: int = 0) -> random.Random:
        """Independent random source; reproducible when a seed is configured."""
        if self.seed is None:
            return random.Random()
        return random.Random(self.seed + offset)


# Default configuration
DEFAULT_CONFIG = Config()
