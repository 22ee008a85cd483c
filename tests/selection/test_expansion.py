"""
Tests for player_of_games.selection.expansion

Tests descent from the root to the position simulated next.
"""

import pytest

from player_of_games.agent.agent import Player
from player_of_games.core.errors import InvariantViolation
from player_of_games.games.nim import NimMove
from player_of_games.games.tic_tac_toe import TicTacToeMove
from player_of_games.memory.node import Node
from player_of_games.selection.expansion import ensure_node, select_and_expand


class TestEnsureNode:
    """Node creation and linking."""

    def test_creates_node(self, store, nim_at):
        """A new position gets a fresh node for the given player."""
        node = ensure_node(store, nim_at(5), Player.ONE)
        assert node.player is Player.ONE
        assert node.local_visits == 0
        assert len(store) == 1

    def test_existing_node_reused(self, store, nim_at):
        """An equal position returns the stored node."""
        first = ensure_node(store, nim_at(5), Player.ONE)
        assert ensure_node(store, nim_at(5), Player.ONE) is first
        assert len(store) == 1

    def test_links_parent(self, store, nim_at):
        """Passing a parent records the edge both ways."""
        root, child = nim_at(5), nim_at(4, Player.TWO)
        ensure_node(store, root, Player.ONE)
        ensure_node(store, child, Player.TWO, parent=(NimMove(1), root))
        assert store.node(root).children == {NimMove(1): child}
        assert store.node(child).parents == {NimMove(1): root}

    def test_transposition_gains_second_parent(self, store, nim_at):
        """Reaching a known position another way adds a parent, not a node."""
        a, b, shared = nim_at(4, Player.TWO), nim_at(3, Player.TWO), nim_at(2)
        ensure_node(store, a, Player.TWO)
        ensure_node(store, b, Player.TWO)
        ensure_node(store, shared, Player.ONE, parent=(NimMove(2), a))
        ensure_node(store, shared, Player.ONE, parent=(NimMove(1), b))
        assert len(store) == 3
        assert store.node(shared).parents == {NimMove(2): a, NimMove(1): b}
        store.audit()


class TestSelectAndExpand:
    """One descent."""

    def test_empty_store_returns_root(self, store, nim):
        """The first iteration simulates from the root itself."""
        leaf = select_and_expand(store, nim, Player.ONE, 1.0)
        assert leaf == nim
        assert store.node(nim).player is Player.ONE

    def test_visited_root_expands_first_move(self, builder, nim, nim_at):
        """A root seen once expands its first untried move."""
        builder.node(nim, visits=1)
        leaf = select_and_expand(builder.store, nim, Player.ONE, 1.0)
        assert leaf == nim_at(4, Player.TWO)
        assert builder.store.node(nim).children == {NimMove(1): leaf}
        assert builder.store.node(leaf).player is Player.TWO

    def test_root_not_mutated(self, builder, tic_tac_toe):
        """Descent works on clones."""
        builder.node(tic_tac_toe, visits=1)
        before = tic_tac_toe.clone()
        select_and_expand(builder.store, tic_tac_toe, Player.ONE, 1.0)
        assert tic_tac_toe == before

    def test_terminal_leaf_returned(self, builder, forced_win, ttt_at):
        """Descending into a finished game stops there."""
        done = ttt_at("XXX/OOX/XOO", Player.TWO)
        builder.node(forced_win, visits=1)
        builder.node(done, visits=1, losses=1)
        builder.edge(forced_win, TicTacToeMove(0, 2, Player.ONE), done)

        assert select_and_expand(builder.store, forced_win, Player.ONE, 1.0) == done
        assert len(builder.store) == 2

    def test_player_mismatch_is_fatal(self, store, nim):
        """A stored node disagreeing on the side to move is an invariant violation."""
        store.insert(nim, Node(player=Player.TWO))
        with pytest.raises(InvariantViolation):
            select_and_expand(store, nim, Player.ONE, 1.0)
