"""
Shared test fixtures for player_of_games tests.

Design principles:
- Positions built from small literal descriptions
- Graphs built by hand where the search would be nondeterministic
- Seeded random sources everywhere else
"""

import random
from typing import Callable, Optional

import numpy as np
import pytest

from player_of_games.agent.agent import Player
from player_of_games.core.types import Stats
from player_of_games.games.game_base import GameBase
from player_of_games.games.game_state import GameState
from player_of_games.games.nim import Nim
from player_of_games.games.tic_tac_toe import TicTacToe
from player_of_games.memory.node import Node
from player_of_games.memory.node_store import NodeStore


# =============================================================================
# Stats Fixtures
# =============================================================================

@pytest.fixture
def zero_stats() -> Stats:
    return Stats(0, 0, 0)


@pytest.fixture
def winning_stats() -> Stats:
    return Stats(100, 70, 10)


@pytest.fixture
def losing_stats() -> Stats:
    return Stats(100, 10, 70)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def tic_tac_toe() -> TicTacToe:
    """Empty board, X to move."""
    return TicTacToe()


@pytest.fixture
def nim() -> Nim:
    """Five stones, take one or two."""
    return Nim(stones=5, max_take=2)


_MARKS = {".": 0, "X": 1, "O": 2}


def _tic_tac_toe_at(rows: str, player: Player = Player.ONE) -> TicTacToe:
    """Position from three '/'-separated rows of 'X', 'O' and '.'."""
    board = np.array(
        [[_MARKS[ch] for ch in row] for row in rows.split("/")],
        dtype=np.int8,
    )
    game = TicTacToe()
    game.set_state(GameState(board, Player(player)))
    return game


def _nim_at(stones: int, player: Player = Player.ONE, max_take: int = 2) -> Nim:
    game = Nim(stones=stones, max_take=max_take)
    game.state.current_player = Player(player)
    return game


@pytest.fixture
def ttt_at() -> Callable[..., TicTacToe]:
    return _tic_tac_toe_at


@pytest.fixture
def nim_at() -> Callable[..., Nim]:
    return _nim_at


@pytest.fixture
def forced_win() -> TicTacToe:
    """
    X to move with one empty cell; filling it completes the top row.

        X X .
        O O X
        X O O
    """
    return _tic_tac_toe_at("XX./OOX/XOO", Player.ONE)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def store() -> NodeStore:
    return NodeStore()


class GraphBuilder:
    """Adds nodes and edges to a store by hand."""

    def __init__(self, store: NodeStore):
        self.store = store

    def node(
        self,
        position: GameBase,
        visits: int = 0,
        wins: int = 0,
        losses: int = 0,
        player: Optional[Player] = None,
    ) -> Node:
        node = self.store.get(position)
        if node is None:
            node = Node(player=Player(player or position.current_player()))
            self.store.insert(position, node)
        node.local_visits = visits
        node.local_wins = wins
        node.local_losses = losses
        return node

    def edge(self, parent: GameBase, move, child: GameBase) -> None:
        self.store.link(parent, move, child)


@pytest.fixture
def builder(store: NodeStore) -> GraphBuilder:
    return GraphBuilder(store)
