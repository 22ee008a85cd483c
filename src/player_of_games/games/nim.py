"""
Single-pile Nim (subtraction game).

Players alternately remove 1..max_take stones; whoever takes the last
stone wins. Different move orders constantly reach the same pile size, so
this is a cheap source of transpositions.

Board encoding (int8, shape (1,)):
    board[0] = stones left
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

import numpy as np

from player_of_games.agent.agent import Conclusion, Player
from player_of_games.games.game_base import GameBase
from player_of_games.games.game_state import GameState


class NimMove(NamedTuple):
    """Remove `take` stones from the pile."""

    take: int

    def __str__(self) -> str:
        return f"take {self.take}"


class Nim(GameBase):
    """Subtraction game on one pile."""

    __slots__ = ('state', 'max_take')

    DEFAULT_STONES = 10
    DEFAULT_MAX_TAKE = 3

    def __init__(self, stones: int = DEFAULT_STONES, max_take: int = DEFAULT_MAX_TAKE):
        if not 0 <= stones <= np.iinfo(np.int8).max:
            raise ValueError(f"stones must be in [0, 127], got {stones}")
        if max_take < 1:
            raise ValueError(f"max_take must be >= 1, got {max_take}")
        self.state = GameState(self._initial_board(stones), current_player=Player.ONE)
        self.max_take = max_take

    @staticmethod
    def _initial_board(stones: int = DEFAULT_STONES) -> np.ndarray:
        return np.array([stones], dtype=np.int8)

    @property
    def stones(self) -> int:
        return int(self.state.board[0])

    def game_id(self) -> str:
        return "nim"

    def clone(self) -> "Nim":
        g = Nim.__new__(Nim)
        g.state = self.state.copy()
        g.max_take = self.max_take
        return g

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def legal_moves(self, player: Player) -> Iterator[NimMove]:
        if player != self.state.current_player:
            return
        for take in range(1, min(self.max_take, self.stones) + 1):
            yield NimMove(take)

    def apply_move(self, move: NimMove, player: Player) -> None:
        take = int(move.take)
        if player != self.state.current_player:
            raise ValueError(f"Player {int(player)} playing out of turn")
        if not 1 <= take <= min(self.max_take, self.stones):
            raise ValueError(f"Cannot take {take} from {self.stones} (max {self.max_take})")

        self.state.board[0] -= take
        self.state.current_player = Player(player).other()

    def try_conclude(self, next_player: Player) -> Optional[Conclusion]:
        if self.stones == 0:
            # Whoever moved last took the last stone
            return Conclusion.win(Player(next_player).other())
        return None

    def parse_move(self, text: str, player: Player) -> NimMove:
        try:
            return NimMove(int(text.strip()))
        except ValueError as e:
            raise ValueError(f"Expected a number of stones, got {text!r}") from e

    def state_string(self) -> str:
        return f"[{'o' * self.stones}] {self.stones} left, take 1-{self.max_take}"
