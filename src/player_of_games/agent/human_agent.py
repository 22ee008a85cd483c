"""
Terminal-driven agent.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

from player_of_games.agent.agent import Agent, Player

if TYPE_CHECKING:
    from player_of_games.games.game_base import GameBase


class HumanAgent(Agent):
    """Prompts for a move until a legal one is entered."""

    def __init__(self, player: Player, input_fn: Callable[[str], str] = input):
        self.player = Player(player)
        self._input = input_fn

    def choose_move(self, position: "GameBase") -> Any:
        legal = list(position.legal_moves(self.player))
        if legal:
            print(f"\nYour turn (Player {int(self.player)})")
            print(f"Legal moves: {', '.join(str(m) for m in legal)}")

        while True:
            raw = self._input("Move: ").strip()
            try:
                move = position.parse_move(raw, self.player)
            except ValueError as e:
                print(f"Invalid input: {e}")
                continue
            if move not in legal:
                print(f"Illegal move: {move}")
                continue
            return move
