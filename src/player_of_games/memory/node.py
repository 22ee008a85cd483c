"""
Node - exploration record for one position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, TYPE_CHECKING

from player_of_games.agent.agent import Player, State
from player_of_games.core.types import Stats

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


@dataclass
class Node:
    """
    Statistics and known edges for one position.

    The local counters only count rollouts launched from this exact node.
    They are never propagated to ancestors; see memory.aggregate.

    Edges are keyed by move and point at positions, never at other Node
    objects. All navigation goes through the NodeStore.
    """

    player: Player  # Player to move at this position
    local_visits: int = 0
    local_wins: int = 0
    local_losses: int = 0
    children: Dict[Hashable, "GameBase"] = field(default_factory=dict)
    parents: Dict[Hashable, "GameBase"] = field(default_factory=dict)

    @property
    def local_stats(self) -> Stats:
        return Stats(self.local_visits, self.local_wins, self.local_losses)

    def is_leaf(self) -> bool:
        return not self.children

    def record(self, result: State) -> None:
        """Count one finished rollout, `result` seen by self.player."""
        self.local_visits += 1
        if result == State.WIN:
            self.local_wins += 1
        elif result == State.LOSS:
            self.local_losses += 1

    def __repr__(self) -> str:
        return (
            f"Node(player={int(self.player)}, visits={self.local_visits}, "
            f"wins={self.local_wins}, losses={self.local_losses}, "
            f"children={len(self.children)}, parents={len(self.parents)})"
        )
