"""
Move selection after the search (competitive play).

Deterministic: the known child with the most simulations beneath it wins.
Ties go to the child recorded first.
"""

from __future__ import annotations

from typing import Dict, Hashable, List, Tuple, TYPE_CHECKING

from player_of_games.core.errors import BudgetExhausted
from player_of_games.core.types import Stats
from player_of_games.memory.aggregate import Memo, edge_stats
from player_of_games.memory.node_store import NodeStore

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


def child_statistics(store: NodeStore, position: "GameBase") -> List[Tuple[Hashable, Stats]]:
    """
    (move, stats) for every known child of `position`, in recorded order.

    Stats cover the child and everything beneath it, seen by the player choosing
    the move.
    """
    node = store.node(position)
    memo: Memo = {}
    return [(move, edge_stats(store, child, memo)) for move, child in node.children.items()]


def best_move(store: NodeStore, position: "GameBase") -> Hashable:
    """
    Move leading to the child with the highest aggregate visit count.

    Raises BudgetExhausted if `position` is unknown or has no known children.
    """
    node = store.get(position)
    if node is None or not node.children:
        raise BudgetExhausted(
            f"No explored children for {position!r}; the search budget ran out "
            f"before any simulation expanded it"
        )

    moves = child_statistics(store, position)
    return max(moves, key=lambda m: m[1].visits)[0]


def visit_counts(store: NodeStore, position: "GameBase") -> Dict[Hashable, int]:
    """Aggregate visit count per known move."""
    return {move: stats.visits for move, stats in child_statistics(store, position)}
