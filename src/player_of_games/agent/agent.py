"""
Player identities, game conclusions and the agent interface.

Every game in this package is strictly alternating between two players:
each ply flips the acting player, there is no pass move.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


class Player(IntEnum):
    """One of the two sides. Values double as board markers (1 and 2)."""

    ONE = 1
    TWO = 2

    def other(self) -> "Player":
        return Player(3 - self.value)  # Toggle 1↔2


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


@dataclass(frozen=True)
class Conclusion:
    """Final result of a game: a winner, or a draw when winner is None."""

    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "Conclusion":
        return cls(Player(player))

    @classmethod
    def draw(cls) -> "Conclusion":
        return cls(None)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def result_for(self, player: Player) -> State:
        """Result of this conclusion as seen by `player`."""
        if self.winner is None:
            return State.TIE
        return State.WIN if self.winner == player else State.LOSS

    def __str__(self) -> str:
        if self.winner is None:
            return "Draw"
        return f"Win(Player {int(self.winner)})"


class Agent(ABC):
    """
    Anything that can take a seat at the table.

    The turn-taking driver asks the acting agent for a move, then informs
    every agent (including the one that moved) of the move actually played.
    """

    player: Player

    @abstractmethod
    def choose_move(self, position: "GameBase") -> Any:
        """Return a legal move for `position`; the position must not be mutated."""
        pass

    def inform_of_move_played(self, new_position: "GameBase", move: Any) -> None:
        """Notification hook called after every ply, by either player."""
        pass
