"""
The search loop: select, expand, simulate, record.

One decision is a sequential run of iterations over a persistent node
store. Each iteration descends to a leaf, plays one random game from it
and counts the result on that leaf only; aggregation happens lazily at
read time (memory.aggregate).
"""

from __future__ import annotations

import logging
import random
from typing import Hashable, Optional, TYPE_CHECKING

from player_of_games.agent.agent import Conclusion, Player, State
from player_of_games.core.types import DEFAULT_EXPLORATION
from player_of_games.memory.node import Node
from player_of_games.memory.node_store import NodeStore
from player_of_games.memory.pruning import prune
from player_of_games.selection.decision import best_move
from player_of_games.selection.expansion import select_and_expand
from player_of_games.simulation.budget import SearchBudget
from player_of_games.simulation.rollout import rollout

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

logger = logging.getLogger(__name__)


def record(node: Node, conclusion: Optional[Conclusion]) -> State:
    """
    Count a finished rollout on `node`, seen by the player to move there.

    Draws, and rollouts cut off without a conclusion, add a visit only.
    """
    result = State.NEUTRAL if conclusion is None else conclusion.result_for(node.player)
    node.record(result)
    return result


class MonteCarloTreeSearch:
    """
    Search engine bound to one player and one persistent node store.

    Args:
        player: The side this engine decides for.
        c: Exploration constant of the UCT score.
        rng: Random source for rollouts (seed it for reproducible play).
        max_rollout_steps: Optional cap on moves per rollout.
        audit: If True, check graph invariants after every mutation.
    """

    def __init__(
        self,
        player: Player,
        c: float = DEFAULT_EXPLORATION,
        rng: Optional[random.Random] = None,
        max_rollout_steps: Optional[int] = None,
        audit: bool = False,
        store: Optional[NodeStore] = None,
    ):
        if c < 0:
            raise ValueError(f"Exploration constant must be >= 0, got {c}")
        self.player = Player(player)
        self.c = c
        self.rng = rng or random.Random()
        self.max_rollout_steps = max_rollout_steps
        self.audit = audit
        self.store = store if store is not None else NodeStore()

    def iterate(self, root: "GameBase", player: Optional[Player] = None) -> "GameBase":
        """
        Run one select/expand/simulate/record iteration below `root`.

        Returns the position that was simulated from.
        """
        player = self.player if player is None else Player(player)

        leaf = select_and_expand(self.store, root, player, self.c)
        if self.audit:
            self.store.audit()

        node = self.store.node(leaf)
        conclusion = rollout(leaf, node.player, self.rng, self.max_rollout_steps)
        result = record(node, conclusion)
        logger.debug("Rollout from %r: %s -> %s", leaf, conclusion, result.name)
        return leaf

    def run(self, root: "GameBase", budget: SearchBudget) -> int:
        """Iterate below `root` until `budget` is exhausted. Returns the iteration count."""
        budget.start()
        iterations = 0
        while not budget.exhausted(iterations):
            self.iterate(root)
            iterations += 1
        return iterations

    def decide(self, root: "GameBase", budget: SearchBudget) -> Hashable:
        """
        Search below `root`, then return the most-simulated move.

        Raises BudgetExhausted if no child of the root was discovered.
        """
        iterations = self.run(root, budget)
        move = best_move(self.store, root)
        logger.info(
            "Player %d chose %s after %d iteration(s); %d node(s) known",
            int(self.player), move, iterations, len(self.store),
        )
        return move

    def advance(
        self,
        previous: Optional["GameBase"],
        move: Hashable,
        realized: Optional["GameBase"] = None,
    ) -> int:
        """Prune the graph after `move` was really played from `previous`."""
        removed = prune(self.store, previous, move, realized)
        if self.audit:
            self.store.audit()
        return removed
