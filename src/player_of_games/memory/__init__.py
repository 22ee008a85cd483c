"""
Memory module - the exploration graph.

- NodeStore: content-addressed table of Node records with move-labelled edges
- aggregate: lazy subtree statistics with alternating perspective
- pruning: deletion of positions the real game can no longer reach
"""

from player_of_games.memory.node import Node
from player_of_games.memory.node_store import NodeStore
from player_of_games.memory.aggregate import subtree_stats, edge_stats, tree_perspectives
from player_of_games.memory.pruning import prune, remove_tree

__all__ = [
    "Node",
    "NodeStore",
    "subtree_stats",
    "edge_stats",
    "tree_perspectives",
    "prune",
    "remove_tree",
]
