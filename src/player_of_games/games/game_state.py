"""
GameState - board plus side to move, with value semantics.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    The numpy board of a position and the player to move there.

    Boards are small int8 arrays (0 = empty, 1 / 2 = the players' pieces).
    Two states are equal when dtype, shape, contents and side to move all
    match; the hash is consistent with that, so states can key a dict.
    """
    __slots__ = ('board', 'current_player')

    def __init__(self, board: np.ndarray, current_player: int):
        self.board = board
        self.current_player = current_player

    def copy(self) -> "GameState":
        """Independent copy; the board array is not shared."""
        return GameState(np.array(self.board, copy=True), self.current_player)

    def key(self) -> tuple:
        board = self.board
        return (board.dtype.str, board.shape, board.tobytes(), int(self.current_player))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        return f"GameState(board={self.board.tolist()}, current_player={int(self.current_player)})"
