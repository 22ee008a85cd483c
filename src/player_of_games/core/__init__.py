"""
Core module - fundamental types, hashing, and error classes.

This module provides the building blocks used throughout the engine.
"""

from player_of_games.core.types import (
    Stats,
    DEFAULT_EXPLORATION,
    UNEXPLORED_SCORE,
)
from player_of_games.core.errors import InvariantViolation, BudgetExhausted
from player_of_games.core.hashing import hash_board

__all__ = [
    # Types
    "Stats",
    # Constants
    "DEFAULT_EXPLORATION",
    "UNEXPLORED_SCORE",
    # Errors
    "InvariantViolation",
    "BudgetExhausted",
    # Functions
    "hash_board",
]
