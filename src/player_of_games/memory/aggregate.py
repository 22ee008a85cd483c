"""
Lazy subtree statistics.

Rollout counters live only on the node a rollout was launched from.
Aggregates are computed at read time by walking the known subgraph and are
never written back.

Perspective alternates per ply: a child's loss is its parent's win. For a
node N, tree_perspectives(N) maps every descendant D (excluding N) to a
parity flag: True if D is an odd number of plies below N, in which case
D's local losses are N's wins. Descendants reachable through several
paths (transpositions) are counted once.

The walk is a pure function of the graph. Pass the same `memo` dict to
several queries to share work while the graph is not being mutated.
"""

from __future__ import annotations

from typing import Dict, Optional, TYPE_CHECKING

from player_of_games.core.types import Stats
from player_of_games.memory.node_store import NodeStore

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

Perspectives = Dict["GameBase", bool]
Memo = Dict["GameBase", Optional[Perspectives]]


def tree_perspectives(store: NodeStore, position: "GameBase", memo: Optional[Memo] = None) -> Perspectives:
    """Descendants of `position` mapped to their odd-ply flag."""
    if memo is None:
        memo = {}
    if position in memo:
        cached = memo[position]
        # None marks a node still being walked: a cycle back to an ancestor
        # adds nothing the ancestor does not already count.
        return cached if cached is not None else {}

    memo[position] = None
    node = store.node(position)

    result: Perspectives = {}
    for child in node.children.values():
        for descendant, odd in tree_perspectives(store, child, memo).items():
            result[descendant] = not odd
        result[child] = True

    result.pop(position, None)
    memo[position] = result
    return result


def subtree_stats(store: NodeStore, position: "GameBase", memo: Optional[Memo] = None) -> Stats:
    """
    Aggregate visits, wins and losses beneath `position`, excluding itself,
    from the perspective of the player to move at `position`.
    """
    visits = wins = losses = 0
    for descendant, odd in tree_perspectives(store, position, memo).items():
        node = store.node(descendant)
        visits += node.local_visits
        if odd:
            wins += node.local_losses
            losses += node.local_wins
        else:
            wins += node.local_wins
            losses += node.local_losses
    return Stats(visits, wins, losses)


def edge_stats(store: NodeStore, child: "GameBase", memo: Optional[Memo] = None) -> Stats:
    """
    Statistics of moving into `child`, from the perspective of the player
    choosing that move.

    Covers the whole resulting subgraph: the child's own rollouts plus its
    aggregate. A terminal child has no descendants, so its own rollouts are
    all there is to count.
    """
    node = store.node(child)
    return (node.local_stats + subtree_stats(store, child, memo)).flipped()
