"""
Simulation module - random playouts and the search loop.

Provides the infrastructure for running many simulated games below a
position and turning their results into a decision.
"""

from player_of_games.simulation.budget import SearchBudget, IterationBudget, DeadlineBudget
from player_of_games.simulation.rollout import random_sample, rollout
from player_of_games.simulation.search import MonteCarloTreeSearch, record

__all__ = [
    "SearchBudget",
    "IterationBudget",
    "DeadlineBudget",
    "random_sample",
    "rollout",
    "MonteCarloTreeSearch",
    "record",
]
