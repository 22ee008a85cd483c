"""
Factory functions for creating games and agents.
"""

from typing import Dict, Iterable, Optional

from player_of_games.agent.agent import Agent, Player
from player_of_games.agent.human_agent import HumanAgent
from player_of_games.agent.mcts_agent import MonteCarloTreeSearchAgent
from player_of_games.agent.random_agent import RandomAgent
from player_of_games.games.game_base import GameBase
from player_of_games.games.game_state import GameState
from player_of_games.utils.config import Config, GAMES, INITIAL_STATES

AGENT_KINDS = ("mcts", "random", "human")


def create_game(game_name: str) -> GameBase:
    """
    Create a game instance with its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        Configured game instance
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    game_class = GAMES[game_name]
    initial_state: GameState = INITIAL_STATES[game_name]

    game = game_class()
    game.set_state(initial_state.copy())

    return game


def create_agent(kind: str, player: Player, config: Config) -> Agent:
    """
    Create one agent.

    Args:
        kind: "mcts", "random" or "human"
        player: Seat the agent plays
        config: Search settings (used by "mcts" and for seeding)
    """
    player = Player(player)
    if kind == "mcts":
        return MonteCarloTreeSearchAgent(
            player,
            c=config.exploration,
            budget=config.budget(),
            rng=config.rng(int(player)),
            max_rollout_steps=config.max_rollout_steps,
            fallback_random=config.fallback_random,
            audit=config.audit,
            show_stats=config.show_stats,
        )
    if kind == "random":
        return RandomAgent(player, rng=config.rng(int(player)))
    if kind == "human":
        return HumanAgent(player)
    raise ValueError(f"Unknown agent kind: {kind}. Available: {', '.join(AGENT_KINDS)}")


def create_agents(
    config: Config,
    human_players: Optional[Iterable[int]] = None,
    opponent: str = "mcts",
) -> Dict[Player, Agent]:
    """
    One agent per seat: humans where requested, otherwise the search agent
    for player 1 and `opponent` ("mcts" or "random") for player 2.
    """
    humans = {Player(p) for p in (human_players or [])}
    agents: Dict[Player, Agent] = {}
    for player in Player:
        if player in humans:
            kind = "human"
        elif player == Player.ONE:
            kind = "mcts"
        else:
            kind = opponent
        agents[player] = create_agent(kind, player, config)
    return agents
