"""
Upper-confidence move scoring during tree descent.

For each legal move from a node:
    - known child:  exploitation + exploration over the resulting subgraph,
                    seen by the player choosing the move
    - unknown:      +inf, so every untried move beats every tried one

The best score wins; ties go to the move enumerated first by the game.
"""

from __future__ import annotations

import math
from typing import Hashable, List, Optional, Tuple, TYPE_CHECKING

from player_of_games.core.errors import InvariantViolation
from player_of_games.core.types import UNEXPLORED_SCORE
from player_of_games.memory.aggregate import Memo, edge_stats, subtree_stats
from player_of_games.memory.node_store import NodeStore

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


def score_moves(
    store: NodeStore,
    position: "GameBase",
    c: float,
) -> List[Tuple[Hashable, float]]:
    """
    Score every legal move from `position` (which must be in the store).

    Returns (move, score) pairs in the game's enumeration order.
    """
    node = store.node(position)
    memo: Memo = {}
    parent_visits = subtree_stats(store, position, memo).visits

    scored = []
    for move in position.legal_moves(node.player):
        child = node.children.get(move)
        if child is None:
            score = UNEXPLORED_SCORE
        else:
            score = edge_stats(store, child, memo).uct_value(parent_visits, c)
        if math.isnan(score):
            raise InvariantViolation(f"NaN score for move {move!r} from {position!r}")
        scored.append((move, score))
    return scored


def choose_move_by_uct(store: NodeStore, position: "GameBase", c: float) -> Optional[Hashable]:
    """Highest-scoring legal move, first one on ties. None if there are no legal moves."""
    best_move = None
    best_score = -math.inf
    for move, score in score_moves(store, position, c):
        if best_move is None or score > best_score:
            best_move, best_score = move, score
    return best_move
