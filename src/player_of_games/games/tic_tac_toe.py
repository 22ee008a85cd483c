"""
Tic-tac-toe on a 3x3 int8 board.

Cell values:
    0 = empty
    1 = Player.ONE's mark (X)
    2 = Player.TWO's mark (O)
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

import numpy as np

from player_of_games.agent.agent import Conclusion, Player
from player_of_games.games.game_base import GameBase
from player_of_games.games.game_state import GameState

MARKS = {0: " ", 1: "X", 2: "O"}

# Every line of three, as flat indices: rows, columns, then both diagonals
LINES = np.array(
    [[r * 3, r * 3 + 1, r * 3 + 2] for r in range(3)]
    + [[c, c + 3, c + 6] for c in range(3)]
    + [[0, 4, 8], [2, 4, 6]],
    dtype=np.intp,
)


def line_owner(board: np.ndarray) -> int:
    """Marker value owning a full line, or 0 if nobody does."""
    cells = board.ravel()[LINES]
    full = (cells[:, 0] != 0) & (cells[:, 0] == cells[:, 1]) & (cells[:, 1] == cells[:, 2])
    hits = np.flatnonzero(full)
    return int(cells[hits[0], 0]) if hits.size else 0


class TicTacToeMove(NamedTuple):
    """Place `player`'s mark at (row, col)."""

    row: int
    col: int
    player: Player

    def __str__(self) -> str:
        return f"{MARKS[int(self.player)]}@{self.row},{self.col}"


class TicTacToe(GameBase):
    """Classic 3x3 game; X moves first."""

    __slots__ = ('state', 'winner')

    def __init__(self):
        self.state = GameState(np.zeros((3, 3), dtype=np.int8), current_player=Player.ONE)
        self.winner = 0

    def game_id(self) -> str:
        return "tic_tac_toe"

    def clone(self) -> "TicTacToe":
        twin = object.__new__(TicTacToe)
        twin.state = self.state.copy()
        twin.winner = self.winner
        return twin

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state
        self.winner = line_owner(game_state.board)

    def legal_moves(self, player: Player) -> Iterator[TicTacToeMove]:
        """Empty cells in row-major order, for the player whose turn it is."""
        if self.winner or player != self.state.current_player:
            return
        for r, c in np.argwhere(self.state.board == 0):
            yield TicTacToeMove(int(r), int(c), Player(player))

    def apply_move(self, move: TicTacToeMove, player: Player) -> None:
        r, c = int(move.row), int(move.col)

        if move.player != player:
            raise ValueError(f"Player {int(player)} tried to place {MARKS[int(move.player)]}")
        if player != self.state.current_player:
            raise ValueError(f"Player {int(player)} playing out of turn")
        if not (0 <= r < 3 and 0 <= c < 3):
            raise ValueError(f"Cell ({r},{c}) is out of bounds")
        if self.state.board[r, c]:
            raise ValueError(f"Cell ({r},{c}) is already taken")
        if self.winner:
            raise ValueError("Game is already won")

        self.state.board[r, c] = int(player)
        self.winner = line_owner(self.state.board)
        self.state.current_player = Player(player).other()

    def try_conclude(self, next_player: Player) -> Optional[Conclusion]:
        if self.winner:
            return Conclusion.win(Player(self.winner))
        # Board full
        if next(self.legal_moves(next_player), None) is None:
            return Conclusion.draw()
        return None

    def parse_move(self, text: str, player: Player) -> TicTacToeMove:
        try:
            r, c = (int(x.strip()) for x in text.split(","))
        except ValueError as e:
            raise ValueError(f"Expected 'row,col' (e.g. 1,1), got {text!r}") from e
        return TicTacToeMove(r, c, Player(player))

    def state_string(self) -> str:
        rows = [
            "│ " + " │ ".join(MARKS[int(v)] for v in row) + " │"
            for row in self.state.board
        ]
        divider = "\n├───┼───┼───┤\n"
        return "╭───┬───┬───╮\n" + divider.join(rows) + "\n╰───┴───┴───╯"
