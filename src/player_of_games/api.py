"""
Public API for playing games between agents.

Usage:
    from player_of_games import MonteCarloTreeSearchAgent, RandomAgent, Player, play_game
    from player_of_games.games import TicTacToe

    agents = {
        Player.ONE: MonteCarloTreeSearchAgent(Player.ONE),
        Player.TWO: RandomAgent(Player.TWO),
    }
    conclusion = play_game(TicTacToe(), agents)
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Optional, TYPE_CHECKING

from player_of_games.agent.agent import Conclusion, Player
from player_of_games.agent.mcts_agent import MonteCarloTreeSearchAgent
from player_of_games.agent.random_agent import RandomAgent

if TYPE_CHECKING:
    from player_of_games.agent.agent import Agent
    from player_of_games.games.game_base import GameBase

logger = logging.getLogger(__name__)


class Adjudicator:
    """
    Turn-taking driver: owns the real position and alternates the agents.

    The first turn belongs to whoever is to move in `game`.
    """

    def __init__(self, game: "GameBase", agents: Dict[Player, "Agent"]):
        missing = [int(p) for p in Player if p not in agents]
        if missing:
            raise ValueError(f"No agent for player(s) {missing}")

        self.game = game
        self.agents = agents
        self.current_turn = game.current_player()
        self.plies = 0
        self._conclusion: Optional[Conclusion] = game.try_conclude(self.current_turn)

    @property
    def conclusion(self) -> Optional[Conclusion]:
        return self._conclusion

    def progress_one_turn(self) -> Hashable:
        """Play one ply. Returns the move played."""
        if self._conclusion is not None:
            raise RuntimeError(f"Game already concluded: {self._conclusion}")

        player = self.current_turn
        move = self.agents[player].choose_move(self.game.clone())
        self.game.apply_move(move, player)
        self.plies += 1
        logger.debug("Ply %d: player %d played %s", self.plies, int(player), move)

        for agent in self.agents.values():
            agent.inform_of_move_played(self.game.clone(), move)

        next_player = player.other()
        self._conclusion = self.game.try_conclude(next_player)
        if self._conclusion is None:
            self.current_turn = next_player
        else:
            logger.info("Game over after %d plies: %s", self.plies, self._conclusion)
        return move


def play_game(game: "GameBase", agents: Dict[Player, "Agent"], verbose: bool = False) -> Conclusion:
    """Play `game` to the end and return the conclusion."""
    adjudicator = Adjudicator(game, agents)
    while adjudicator.conclusion is None:
        player = adjudicator.current_turn
        move = adjudicator.progress_one_turn()
        if verbose:
            print(f"\nPlayer {int(player)} played: {move}")
            print(game.state_string())
    return adjudicator.conclusion


def start_match(game: "GameBase", agents: Dict[Player, "Agent"]) -> Optional[Conclusion]:
    """
    Main entry point: play one game with progress printed to the terminal.

    Returns the conclusion, or None if interrupted.
    """
    kinds = ", ".join(f"P{int(p)}={type(a).__name__}" for p, a in sorted(agents.items()))
    print(f"Starting {game.game_id()} ({kinds})")
    print(game.state_string())

    try:
        conclusion = play_game(game, agents, verbose=True)
    except KeyboardInterrupt:
        print("\nInterrupted - shutting down...")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    print("\n" + "=" * 40)
    print(f"GAME OVER: {conclusion}")
    print("=" * 40)

    for agent in agents.values():
        if isinstance(agent, MonteCarloTreeSearchAgent):
            print(f"Player {int(agent.player)} kept {len(agent.store)} nodes")
    return conclusion


__all__ = [
    "Adjudicator",
    "play_game",
    "start_match",
    "MonteCarloTreeSearchAgent",
    "RandomAgent",
]
