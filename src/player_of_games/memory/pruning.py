"""
Pruning of positions made unreachable by the real game.

Once a move is played for real, the position it was played from can never
recur, and neither can the siblings of the realized child unless another
known path still leads to them (transposition). Orphans are deleted with
their now-orphaned descendants.
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional, TYPE_CHECKING

from player_of_games.memory.node_store import NodeStore

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

logger = logging.getLogger(__name__)


def remove_tree(store: NodeStore, position: "GameBase", keep: Optional["GameBase"] = None) -> int:
    """
    Delete `position`, detach it from the graph, and cascade into every
    child left without parents. Returns the number of nodes deleted.

    `keep` is never deleted even if the cascade orphans it (the live root).
    """
    if position not in store or position == keep:
        return 0

    removed = 0
    stack = [position]
    while stack:
        current = stack.pop()
        if current not in store:
            continue

        node = store.remove(current)
        store.detach(current, node)
        removed += 1

        for child in node.children.values():
            child_node = store.get(child)
            if child_node is not None and not child_node.parents and child != keep:
                stack.append(child)

    logger.debug("Removed %d node(s) rooted at %r", removed, position)
    return removed


def prune(
    store: NodeStore,
    previous: Optional["GameBase"],
    move: Hashable,
    realized: Optional["GameBase"] = None,
) -> int:
    """
    Forget `previous` after `move` was played from it.

    `realized` is the position the move led to; it is worked out from
    `previous` when not given. It is kept even if it is now parentless, and
    also when the search only knew it through a longer transposed path.
    Every other child is deleted if it became an orphan; one that still has
    parents stays and is reported.

    Returns the number of nodes deleted. Pruning twice in a row is a no-op
    the second time.
    """
    if previous is None or previous not in store:
        return 0

    node = store.remove(previous)
    store.detach(previous, node)
    removed = 1

    if realized is None:
        realized = node.children.get(move)
    if realized is None:
        realized = previous.clone()
        realized.apply_move(move, node.player)

    for child_move, child in node.children.items():
        if child_move == move:
            continue
        child_node = store.get(child)
        if child_node is None:
            continue  # taken by an earlier sibling's cascade
        if not child_node.parents:
            removed += remove_tree(store, child, keep=realized)
        else:
            logger.warning(
                "Unrealized child %r is not an orphan (%d parent(s) left): %r",
                child, len(child_node.parents), child_node,
            )

    logger.info(
        "Pruned %d node(s) after %s; %d node(s) remain", removed, move, len(store)
    )
    return removed
