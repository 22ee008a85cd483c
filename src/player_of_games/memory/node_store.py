"""
Content-addressed node table.

Positions are keyed by value (GameBase.__eq__ / __hash__), so two move
sequences reaching the same position share one Node (transposition).
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Optional, Tuple, TYPE_CHECKING

from player_of_games.core.errors import InvariantViolation
from player_of_games.memory.node import Node

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


class NodeStore:
    """
    Hash table from position to Node.

    The store owns its keys: callers hand over positions they will not
    mutate afterwards (clone before inserting).
    """

    def __init__(self):
        self._nodes: Dict["GameBase", Node] = {}

    # -------------------------------------------------------------------------
    # Table operations
    # -------------------------------------------------------------------------

    def get(self, position: "GameBase") -> Optional[Node]:
        return self._nodes.get(position)

    def node(self, position: "GameBase") -> Node:
        """Like get(), for positions referenced by an edge. Missing is fatal."""
        try:
            return self._nodes[position]
        except KeyError:
            raise InvariantViolation(f"Dangling pointer: no node for {position!r}") from None

    def insert(self, position: "GameBase", node: Node) -> None:
        if position in self._nodes:
            raise InvariantViolation(f"Duplicate node for {position!r}")
        self._nodes[position] = node

    def remove(self, position: "GameBase") -> Node:
        """Drop the record for `position`. Edges are left to the caller."""
        try:
            return self._nodes.pop(position)
        except KeyError:
            raise InvariantViolation(f"Cannot remove unknown position {position!r}") from None

    def contains(self, position: "GameBase") -> bool:
        return position in self._nodes

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator["GameBase"]:
        return iter(self._nodes)

    def items(self) -> Iterator[Tuple["GameBase", Node]]:
        return iter(self._nodes.items())

    def clear(self) -> None:
        self._nodes.clear()

    # -------------------------------------------------------------------------
    # Edge bookkeeping
    # -------------------------------------------------------------------------

    def link(self, parent: "GameBase", move: Hashable, child: "GameBase") -> None:
        """Record `parent --move--> child` on both ends."""
        parent_node, child_node = self.node(parent), self.node(child)
        parent_node.children[move] = child
        child_node.parents[move] = parent

    def detach(self, position: "GameBase", node: Node) -> None:
        """
        Remove every edge between an already-removed `node` and the rest of
        the graph. The node's own maps are left intact for the caller.
        """
        for move, parent in node.parents.items():
            self.node(parent).children.pop(move, None)
        for move, child in node.children.items():
            self.node(child).parents.pop(move, None)

    # -------------------------------------------------------------------------
    # Invariant checks
    # -------------------------------------------------------------------------

    def audit(self) -> None:
        """
        Check that:
        - every known parent / known child edge is mutual
        - every position referenced by an edge has a node

        Raises InvariantViolation on the first broken edge.
        """
        for position, node in self._nodes.items():
            for move, parent in node.parents.items():
                parent_node = self.node(parent)
                if parent_node.children.get(move) != position:
                    raise InvariantViolation(
                        f"{position!r} lists parent {parent!r} via {move!r}, "
                        f"but the parent does not list it as a child"
                    )
            for move, child in node.children.items():
                child_node = self.node(child)
                if child_node.parents.get(move) != position:
                    raise InvariantViolation(
                        f"{position!r} lists child {child!r} via {move!r}, "
                        f"but the child does not list it as a parent"
                    )

    def orphans(self) -> List["GameBase"]:
        """Positions with no known parent."""
        return [p for p, n in self._nodes.items() if not n.parents]
