"""
Games module - board game implementations.
"""

from player_of_games.games.game_state import GameState
from player_of_games.games.game_base import GameBase
from player_of_games.games.tic_tac_toe import TicTacToe, TicTacToeMove
from player_of_games.games.nim import Nim, NimMove

__all__ = [
    "GameState",
    "GameBase",
    "TicTacToe",
    "TicTacToeMove",
    "Nim",
    "NimMove",
]
