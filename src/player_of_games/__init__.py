"""
Player of Games - Monte Carlo tree search for two-player board games.

This package provides a search agent that picks moves by running many
random playouts over a persistent, transposition-aware exploration graph,
plus the game abstraction and drivers needed to play with it.

Quick Start:
    from player_of_games import MonteCarloTreeSearchAgent, RandomAgent, Player, play_game
    from player_of_games.games import TicTacToe

    agents = {
        Player.ONE: MonteCarloTreeSearchAgent(Player.ONE),
        Player.TWO: RandomAgent(Player.TWO),
    }
    print(play_game(TicTacToe(), agents))

Modules:
    agent      - Player identities, conclusions, and the agents
    core       - Stats, error classes, hashing
    games      - Position abstraction and game implementations
    memory     - Node store, lazy aggregation, pruning
    selection  - UCT descent, expansion, final move choice
    simulation - Random rollouts, search budgets, the search loop
    debug      - Visualization tools for development
"""

from player_of_games.agent.agent import Agent, Conclusion, Player, State
from player_of_games.agent.mcts_agent import MonteCarloTreeSearchAgent
from player_of_games.agent.random_agent import RandomAgent
from player_of_games.api import Adjudicator, play_game, start_match
from player_of_games.core import Stats, InvariantViolation, BudgetExhausted
from player_of_games.simulation import IterationBudget, DeadlineBudget

__version__ = "1.0.0"

__all__ = [
    # Main API
    "Adjudicator",
    "play_game",
    "start_match",
    "MonteCarloTreeSearchAgent",
    "RandomAgent",
    # Types
    "Agent",
    "Conclusion",
    "Player",
    "State",
    "Stats",
    "IterationBudget",
    "DeadlineBudget",
    # Errors
    "InvariantViolation",
    "BudgetExhausted",
]
