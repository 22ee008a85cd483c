"""
Tests for player_of_games.utils.factory

Tests factory functions for creating games and agents.
"""

import pytest

from player_of_games.agent.agent import Player
from player_of_games.agent.human_agent import HumanAgent
from player_of_games.agent.mcts_agent import MonteCarloTreeSearchAgent
from player_of_games.agent.random_agent import RandomAgent
from player_of_games.games.game_base import GameBase
from player_of_games.utils.config import GAMES, INITIAL_STATES, Config
from player_of_games.utils.factory import create_agent, create_agents, create_game


class TestCreateGame:
    """create_game function tests."""

    @pytest.mark.parametrize("name", list(GAMES))
    def test_creates_each_game(self, name):
        """Each registered game is created in its initial state."""
        game = create_game(name)
        assert isinstance(game, GameBase)
        assert game.get_state() == INITIAL_STATES[name]

    def test_state_not_shared_with_registry(self):
        """Playing a created game leaves the registry state untouched."""
        game = create_game("nim")
        move = next(game.legal_moves(Player.ONE))
        game.apply_move(move, Player.ONE)
        assert game.get_state() != INITIAL_STATES["nim"]

    def test_unknown_game(self):
        """Unknown names list what is available."""
        with pytest.raises(ValueError, match="Available"):
            create_game("go")


class TestCreateAgent:
    """create_agent function tests."""

    def test_mcts_uses_config(self):
        """The search agent is configured from Config."""
        config = Config(iterations=12, exploration=0.5, fallback_random=True)
        agent = create_agent("mcts", Player.TWO, config)
        assert isinstance(agent, MonteCarloTreeSearchAgent)
        assert agent.player is Player.TWO
        assert agent.budget.iterations == 12
        assert agent.search.c == 0.5
        assert agent.fallback_random

    def test_random_and_human(self):
        """Other kinds map to their classes."""
        assert isinstance(create_agent("random", 1, Config()), RandomAgent)
        assert isinstance(create_agent("human", 2, Config()), HumanAgent)

    def test_unknown_kind(self):
        """Unknown kinds are rejected."""
        with pytest.raises(ValueError):
            create_agent("oracle", Player.ONE, Config())


class TestCreateAgents:
    """create_agents function tests."""

    def test_default_is_search_self_play(self):
        """Without humans both seats get search agents."""
        agents = create_agents(Config())
        assert set(agents) == {Player.ONE, Player.TWO}
        assert all(isinstance(a, MonteCarloTreeSearchAgent) for a in agents.values())
        assert agents[Player.ONE] is not agents[Player.TWO]

    def test_human_seat(self):
        """Requested human seats get human agents."""
        agents = create_agents(Config(), human_players=[2])
        assert isinstance(agents[Player.ONE], MonteCarloTreeSearchAgent)
        assert isinstance(agents[Player.TWO], HumanAgent)

    def test_random_opponent(self):
        """Player 2 can be the random baseline."""
        agents = create_agents(Config(), opponent="random")
        assert isinstance(agents[Player.TWO], RandomAgent)
