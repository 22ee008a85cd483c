"""
Tests for player_of_games.simulation.search

Tests the select/expand/simulate/record loop end to end.
"""

import random

import pytest

from player_of_games.agent.agent import Conclusion, Player, State
from player_of_games.core.errors import BudgetExhausted
from player_of_games.core.types import Stats
from player_of_games.games.nim import Nim, NimMove
from player_of_games.games.tic_tac_toe import TicTacToeMove
from player_of_games.memory.aggregate import subtree_stats
from player_of_games.memory.node import Node
from player_of_games.simulation.budget import IterationBudget
from player_of_games.simulation.search import MonteCarloTreeSearch, record


@pytest.fixture
def search(rng) -> MonteCarloTreeSearch:
    return MonteCarloTreeSearch(Player.ONE, rng=rng, audit=True)


class TestRecord:
    """Counting one rollout on a node."""

    def test_win_for_node_player(self):
        """A win by the player to move is a local win."""
        node = Node(player=Player.ONE)
        assert record(node, Conclusion.win(Player.ONE)) is State.WIN
        assert node.local_stats == Stats(1, 1, 0)

    def test_win_for_opponent(self):
        """A win by the other player is a local loss."""
        node = Node(player=Player.ONE)
        assert record(node, Conclusion.win(Player.TWO)) is State.LOSS
        assert node.local_stats == Stats(1, 0, 1)

    def test_draw_and_cutoff_are_visits_only(self):
        """Draws and capped rollouts add a visit and nothing else."""
        node = Node(player=Player.TWO)
        assert record(node, Conclusion.draw()) is State.TIE
        assert record(node, None) is State.NEUTRAL
        assert node.local_stats == Stats(2, 0, 0)


class TestConstruction:

    def test_negative_exploration_rejected(self):
        """c must be non-negative."""
        with pytest.raises(ValueError):
            MonteCarloTreeSearch(Player.ONE, c=-0.5)


class TestForcedWin:
    """One empty cell, and filling it wins."""

    def test_first_iteration_counts_win_on_root(self, search, forced_win):
        """The root's rollout is a certain win for the player to move."""
        leaf = search.iterate(forced_win)
        assert leaf == forced_win
        node = search.store.node(forced_win)
        assert node.local_wins == node.local_visits == 1

    def test_decision_returns_sole_move(self, search, forced_win):
        """Two iterations are enough to expand and choose the only move."""
        move = search.decide(forced_win, IterationBudget(2))
        assert move == TicTacToeMove(0, 2, Player.ONE)

    def test_child_sees_the_loss(self, search, forced_win):
        """The expanded child records the loss from its own side."""
        search.run(forced_win, IterationBudget(2))
        child = search.store.node(forced_win).children[TicTacToeMove(0, 2, Player.ONE)]
        assert search.store.node(child).local_stats == Stats(1, 0, 1)


class TestBudgetExhausted:
    """Not enough search to choose."""

    def test_zero_iterations(self, search, forced_win):
        """No iterations, no candidate."""
        with pytest.raises(BudgetExhausted):
            search.decide(forced_win, IterationBudget(0))

    def test_one_iteration(self, search, tic_tac_toe):
        """One iteration only simulates the root."""
        with pytest.raises(BudgetExhausted):
            search.decide(tic_tac_toe, IterationBudget(1))


class TestRun:
    """Longer searches."""

    def test_iteration_count(self, search, tic_tac_toe):
        """run reports the number of iterations performed."""
        assert search.run(tic_tac_toe, IterationBudget(25)) == 25

    def test_every_rollout_accounted_for(self, search, tic_tac_toe):
        """Root aggregate plus root local visits equals iterations run."""
        search.run(tic_tac_toe, IterationBudget(200))
        total = subtree_stats(search.store, tic_tac_toe).visits
        total += search.store.node(tic_tac_toe).local_visits
        assert total == 200

    def test_graph_stays_consistent(self, search, tic_tac_toe):
        """Audit passes after a long search; every node is reachable from the root."""
        search.run(tic_tac_toe, IterationBudget(300))
        search.store.audit()
        assert search.store.orphans() == [tic_tac_toe]

    def test_finds_immediate_win(self, ttt_at):
        """Among three moves, the winning one gets the most simulations."""
        position = ttt_at("XX./OO./XO.", Player.ONE)
        search = MonteCarloTreeSearch(Player.ONE, rng=random.Random(3))
        assert search.decide(position, IterationBudget(200)) == TicTacToeMove(0, 2, Player.ONE)

    def test_nim_take_the_last_stones(self):
        """With two stones left, taking both wins."""
        search = MonteCarloTreeSearch(Player.ONE, rng=random.Random(3))
        position = Nim(stones=2, max_take=2)
        assert search.decide(position, IterationBudget(50)) == NimMove(2)


class TestAdvance:
    """Pruning between decisions."""

    def test_prunes_previous_root(self, search, nim):
        """After a real move only the realized subgraph remains."""
        move = search.decide(nim, IterationBudget(60))
        after = nim.clone()
        after.apply_move(move, Player.ONE)

        removed = search.advance(nim, move)

        assert removed >= 1
        assert nim not in search.store
        assert after in search.store
        assert search.store.node(after).parents == {}

    def test_advance_from_nothing(self, search, nim):
        """No previous position: nothing to prune."""
        assert search.advance(None, NimMove(1)) == 0
