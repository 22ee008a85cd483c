"""
Command-line interface for playing games against the search agent.
"""

import argparse
import logging
from typing import List, Optional

from player_of_games.agent.agent import Player
from player_of_games.api import start_match
from player_of_games.core.types import DEFAULT_EXPLORATION
from player_of_games.utils.config import Config, GAMES
from player_of_games.utils.factory import create_game, create_agents


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player games with a Monte Carlo tree search agent"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Registered game to load (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--iterations", "-i",
        type=int,
        default=100,
        help="Search iterations per move (default: 100)",
    )
    parser.add_argument(
        "--deadline", "-d",
        type=float,
        default=None,
        help="Seconds of search per move; overrides --iterations",
    )
    parser.add_argument(
        "--exploration", "-c",
        type=float,
        default=DEFAULT_EXPLORATION,
        help="UCT exploration constant (default: sqrt(2))",
    )
    parser.add_argument(
        "--max-rollout-steps",
        type=int,
        default=None,
        help="Cap on moves per random rollout (default: no cap)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="No humans: search agents take every seat",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Human seats, e.g. '2' or '1,2'; wins over --self-play",
    )
    parser.add_argument(
        "--opponent",
        choices=["mcts", "random"],
        default="mcts",
        help="Agent for player 2 when not human (default: mcts)",
    )
    parser.add_argument(
        "--fallback-random",
        action="store_true",
        help="Play a random move instead of failing when the search finds nothing",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for every random source in the match",
    )
    parser.add_argument(
        "--audit",
        action="store_true",
        help="Check exploration-graph invariants after every change (slow)",
    )
    parser.add_argument(
        "--show-stats",
        action="store_true",
        help="Print the search statistics behind every AI move",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Root logger level (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: Optional[str], self_play: bool) -> List[int]:
    """Which player numbers are driven from the terminal."""
    if players_str is None:
        return [] if self_play else [int(Player.ONE)]

    tokens = [t.strip() for t in players_str.split(",") if t.strip()]
    try:
        seats = {int(t) for t in tokens}
    except ValueError as e:
        raise ValueError(f"Invalid --players format: {players_str!r} (want e.g. '1' or '1,2')") from e

    known = [int(p) for p in Player]
    if not seats <= set(known):
        raise ValueError(f"No such player in {sorted(seats - set(known))}. Only players {known} exist.")
    return sorted(seats)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        game_name=args.game,
        iterations=args.iterations,
        deadline=args.deadline,
        exploration=args.exploration,
        max_rollout_steps=args.max_rollout_steps,
        fallback_random=args.fallback_random,
        audit=args.audit,
        show_stats=args.show_stats,
        seed=args.seed,
    )

    game = create_game(config.game_name)
    human_players = parse_human_players(args.players, args.self_play)
    agents = create_agents(config, human_players, opponent=args.opponent)

    start_match(game, agents)


if __name__ == "__main__":
    main()
