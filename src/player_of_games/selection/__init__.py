"""
Selection module - tree descent and final move choice.

Provides the main entry points:
- select_and_expand(): descend by UCT score to this iteration's leaf
- best_move(): pick the most-simulated child once the search is done
"""

from player_of_games.selection.uct import score_moves, choose_move_by_uct
from player_of_games.selection.expansion import ensure_node, select_and_expand
from player_of_games.selection.decision import best_move, child_statistics, visit_counts

__all__ = [
    "score_moves",
    "choose_move_by_uct",
    "ensure_node",
    "select_and_expand",
    "best_move",
    "child_statistics",
    "visit_counts",
]
