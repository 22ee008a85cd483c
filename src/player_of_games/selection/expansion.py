"""
Selection and expansion: descend from the root to this iteration's leaf.

Starting from the root position:
    1) Make a node for the current position if required, and record the
       edge from the position we came from (merging transpositions).
    2) A leaf that was never simulated from is the expansion target.
    3) Otherwise pick a legal move by UCT score and step into it.
    4) No legal moves: the position itself is the target (terminal).
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional, Tuple, TYPE_CHECKING

from player_of_games.agent.agent import Player
from player_of_games.core.errors import InvariantViolation
from player_of_games.memory.node import Node
from player_of_games.memory.node_store import NodeStore
from player_of_games.selection.uct import choose_move_by_uct

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

logger = logging.getLogger(__name__)


def ensure_node(
    store: NodeStore,
    position: "GameBase",
    player: Player,
    parent: Optional[Tuple[Hashable, "GameBase"]] = None,
) -> Node:
    """
    Fetch or create the node for `position`, then link it below `parent`
    (a (move, parent_position) pair) if one is given.
    """
    node = store.get(position)
    if node is None:
        node = Node(player=Player(player))
        store.insert(position, node)

    if parent is not None:
        move, parent_position = parent
        store.link(parent_position, move, position)
    return node


def select_and_expand(
    store: NodeStore,
    root: "GameBase",
    player: Player,
    c: float,
) -> "GameBase":
    """
    Walk down from `root` (with `player` to move) and return the position
    to simulate from. The returned position is the key stored in `store`.

    `root` itself is never mutated; each step works on a clone.
    """
    current_parent: Optional[Tuple[Hashable, "GameBase"]] = None
    current = root.clone()
    current_player = Player(player)
    depth = 0

    while True:
        node = ensure_node(store, current, current_player, current_parent)
        if node.player != current_player:
            raise InvariantViolation(
                f"{current!r} reached with player {int(current_player)} to move, "
                f"but its node says player {int(node.player)}"
            )

        if node.is_leaf() and node.local_visits == 0:
            logger.debug("Expanding %r at depth %d", current, depth)
            return current

        chosen = choose_move_by_uct(store, current, c)
        if chosen is None:
            logger.debug("Terminal leaf %r at depth %d", current, depth)
            return current

        # Got a new move, iterate down
        current_parent = (chosen, current)
        current = current.clone()
        current.apply_move(chosen, current_player)
        current_player = current_player.other()
        depth += 1
