"""Shared pytest fixtures and markers for all tests."""

import random

import pytest

BOBOZAN_ENV_VARS = (
    "BOBOZAN_RULESET",
    "BOBOZAN_OPPONENT",
    "BOBOZAN_SEED",
    "BOBOZAN_INITIAL_ENERGY",
    "BOBOZAN_LOG_LEVEL",
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "statistical: marks seeded sampling tests of the opponent policy"
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without BOBOZAN_* settings from the outer environment."""
    for name in BOBOZAN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return random.Random(20240601)


@pytest.fixture
def sample_player_state():
    """Provide a default player state for testing."""
    from bobozan.models.state import PlayerState
    return PlayerState()


@pytest.fixture
def classic_game():
    """Classic match against an opponent that only charges."""
    from bobozan.engine.game_engine import GameEngine
    from bobozan.models.actions import Ruleset
    from bobozan.opponents.base import get_opponent_by_type
    return GameEngine(Ruleset.CLASSIC, opponent=get_opponent_by_type("charger"))


@pytest.fixture
def tri_phase_game():
    """Tri-Phase match against an opponent that only charges."""
    from bobozan.engine.game_engine import GameEngine
    from bobozan.models.actions import Ruleset
    from bobozan.opponents.base import get_opponent_by_type
    return GameEngine(Ruleset.TRI_PHASE, opponent=get_opponent_by_type("charger"))
