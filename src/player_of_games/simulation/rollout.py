"""
Random playouts from a leaf to the end of the game.

Rollouts work on a private clone and never touch the node store.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, TypeVar, TYPE_CHECKING

from player_of_games.agent.agent import Conclusion, Player
from player_of_games.core.errors import InvariantViolation

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


def random_sample(items: Iterable[T], rng: Optional[random.Random] = None) -> Optional[T]:
    """
    Uniform draw from an iterable in one pass. Returns None only if it is empty.

    The k-th item (1-based) replaces the current pick with probability 1/k.
    It survives to the end with probability 1/k * k/(k+1) * ... * (N-1)/N = 1/N,
    so the draw is fair without knowing N up front.
    """
    rng = rng or random
    chosen = None
    for k, item in enumerate(items, start=1):
        if rng.random() < 1.0 / k:
            chosen = item
    return chosen


def rollout(
    position: "GameBase",
    player: Player,
    rng: Optional[random.Random] = None,
    max_steps: Optional[int] = None,
) -> Optional[Conclusion]:
    """
    Play uniformly random moves from `position` (`player` to move) until
    the game concludes.

    Returns the conclusion, or None if `max_steps` moves were played
    without reaching one.
    """
    state = position.clone()
    current = Player(player)
    steps = 0

    while True:
        conclusion = state.try_conclude(current)
        if conclusion is not None:
            return conclusion

        if max_steps is not None and steps >= max_steps:
            logger.warning("Rollout from %r hit the %d-step cap", position, max_steps)
            return None

        move = random_sample(state.legal_moves(current), rng)
        if move is None:
            raise InvariantViolation(
                f"No legal moves for player {int(current)} in {state!r}, "
                f"yet the game has not concluded"
            )

        state.apply_move(move, current)
        current = current.other()
        steps += 1
