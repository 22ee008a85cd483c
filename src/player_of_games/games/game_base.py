"""
GameBase - abstract base class for all board games.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterator, Optional

from player_of_games.agent.agent import Conclusion, Player
from player_of_games.core.hashing import hash_board
from player_of_games.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for all board games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - A game instance IS a position. The search engine keys its node store
      on game instances, so equality and hashing are by value.
    - The engine never mutates a position it has stored; it clones first.
    - Moves are small hashable values (NamedTuples). A move together with
      the position it leads to must identify the position it came from.
    """

    state: GameState

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used heavily for simulation and expansion.
        """
        pass

    def get_state(self) -> GameState:
        """Return the current game state."""
        return self.state

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    def current_player(self) -> Player:
        """Return the player to act."""
        return Player(self.state.current_player)

    @abstractmethod
    def legal_moves(self, player: Player) -> Iterator[Hashable]:
        """
        Lazily yield every legal move for `player`.

        Finite and restartable. A game that has already been won yields
        nothing.
        """
        pass

    @abstractmethod
    def apply_move(self, move: Hashable, player: Player) -> None:
        """
        Apply a move for `player`. Mutates internal state.

        Raises ValueError if the move is not legal here.
        """
        pass

    @abstractmethod
    def try_conclude(self, next_player: Player) -> Optional[Conclusion]:
        """Return the conclusion if the game is over, None if it continues."""
        pass

    @abstractmethod
    def parse_move(self, text: str, player: Player) -> Hashable:
        """Parse a human-entered move (comma-separated integers)."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass

    def short_id(self) -> str:
        """Stable short digest naming this position in logs."""
        return hash_board(self.state.board, self.state.current_player)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameBase):
            return NotImplemented
        return type(self) is type(other) and self.state == other.state

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.state))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.short_id()})"
