"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Stats: visit/win/loss counts with upper-confidence scoring
- Exploration constants
"""

from __future__ import annotations

import math
from typing import NamedTuple

from player_of_games.core.errors import InvariantViolation


# Exploration constant c in the upper-confidence bound (UCB1 value).
DEFAULT_EXPLORATION = math.sqrt(2)

# Score given to a move with no statistics yet (untried or unvisited child).
UNEXPLORED_SCORE = math.inf


class Stats(NamedTuple):
    """
    Visit/win/loss counts, seen from one player's perspective.

    Draws count as visits only, so wins + losses <= visits.
    """

    visits: int = 0
    wins: int = 0
    losses: int = 0

    @property
    def draws(self) -> int:
        return self.visits - self.wins - self.losses

    def flipped(self) -> "Stats":
        """Same counts from the opponent's perspective."""
        return Stats(self.visits, self.losses, self.wins)

    def __add__(self, other: "Stats") -> "Stats":  # type: ignore[override]
        return Stats(
            self.visits + other.visits,
            self.wins + other.wins,
            self.losses + other.losses,
        )

    @property
    def exploitation(self) -> float:
        """Win ratio. Zero visits has no defined ratio."""
        if self.visits == 0:
            return UNEXPLORED_SCORE
        return self.wins / self.visits

    def exploration(self, parent_visits: int, c: float) -> float:
        """c * sqrt(ln(parent_visits) / visits)."""
        if self.visits == 0:
            return UNEXPLORED_SCORE
        if parent_visits <= 0:
            return 0.0
        return c * math.sqrt(math.log(parent_visits) / self.visits)

    def uct_value(self, parent_visits: int, c: float) -> float:
        """
        Upper-confidence value: exploitation + exploration.

        Anything never visited scores +inf so it is always preferred over a
        visited alternative. Raises InvariantViolation on NaN.
        """
        if self.visits == 0:
            return UNEXPLORED_SCORE

        value = self.exploitation + self.exploration(parent_visits, c)
        if math.isnan(value):
            raise InvariantViolation(
                f"UCT value is NaN for {self!r} (parent_visits={parent_visits}, c={c})"
            )
        return value
