#!/usr/bin/env python3
"""
Match Benchmark
===============

Location: src/player_of_games/scripts/benchmarks.py

Plays a series of games between two agent kinds and reports the result
split and the time spent per move. Useful for checking that a change to
the search did not make it weaker or slower.

USAGE
-----
    python -m player_of_games.scripts.benchmarks [game] [num_games] [options]

ARGUMENTS
---------
    game        Game to play: "tic_tac_toe" or "nim" (default: tic_tac_toe)
    num_games   Number of games (default: 20)

OPTIONS
-------
    --p1 KIND         Agent for player 1: mcts or random (default: mcts)
    --p2 KIND         Agent for player 2: mcts or random (default: random)
    --iterations N    Search iterations per move (default: 100)
    --seed N          Base seed; game i uses seed + i

EXAMPLES
--------
    # MCTS against the random baseline
    python -m player_of_games.scripts.benchmarks

    # MCTS self-play on Nim, more iterations
    python -m player_of_games.scripts.benchmarks nim 50 --p2 mcts --iterations 300

INTERPRETING RESULTS
--------------------
Against the random baseline at 100 iterations, the search agent should
almost never lose tic-tac-toe. MCTS self-play on tic-tac-toe should
mostly draw.
"""

import argparse
import time
from collections import Counter
from typing import Dict, List, Optional

from player_of_games.agent.agent import Player
from player_of_games.api import Adjudicator
from player_of_games.utils.config import Config, GAMES
from player_of_games.utils.factory import create_agent, create_game


def run_benchmark(
    game_name: str = "tic_tac_toe",
    num_games: int = 20,
    p1: str = "mcts",
    p2: str = "random",
    iterations: int = 100,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Play `num_games` games and return a summary:
    wins per player, draws, mean seconds per move.
    """
    results: Counter = Counter()
    move_times: List[float] = []

    for i in range(num_games):
        config = Config(
            game_name=game_name,
            iterations=iterations,
            seed=None if seed is None else seed + i * 10,
        )
        agents = {
            Player.ONE: create_agent(p1, Player.ONE, config),
            Player.TWO: create_agent(p2, Player.TWO, config),
        }
        adjudicator = Adjudicator(create_game(game_name), agents)

        while adjudicator.conclusion is None:
            t0 = time.perf_counter()
            adjudicator.progress_one_turn()
            move_times.append(time.perf_counter() - t0)

        conclusion = adjudicator.conclusion
        results["draw" if conclusion.is_draw else f"p{int(conclusion.winner)}"] += 1

    return {
        "games": num_games,
        "p1_wins": results["p1"],
        "p2_wins": results["p2"],
        "draws": results["draw"],
        "mean_move_seconds": sum(move_times) / len(move_times) if move_times else 0.0,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark agents against each other")
    parser.add_argument("game", nargs="?", default="tic_tac_toe", choices=list(GAMES.keys()))
    parser.add_argument("num_games", nargs="?", type=int, default=20)
    parser.add_argument("--p1", choices=["mcts", "random"], default="mcts")
    parser.add_argument("--p2", choices=["mcts", "random"], default="random")
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    print(f"\n{'═' * 60}")
    print(f"  {args.game}: P1={args.p1} vs P2={args.p2}, "
          f"{args.num_games} games, {args.iterations} iterations/move")
    print(f"{'═' * 60}")

    summary = run_benchmark(
        args.game, args.num_games, args.p1, args.p2, args.iterations, args.seed,
    )

    n = summary["games"] or 1
    print(f"  P1 wins: {summary['p1_wins']:>4}  ({summary['p1_wins'] / n:6.1%})")
    print(f"  P2 wins: {summary['p2_wins']:>4}  ({summary['p2_wins'] / n:6.1%})")
    print(f"  Draws:   {summary['draws']:>4}  ({summary['draws'] / n:6.1%})")
    print(f"  Mean time per move: {summary['mean_move_seconds'] * 1000:.2f} ms")


if __name__ == "__main__":
    main()
