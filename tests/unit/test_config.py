"""Unit tests for environment configuration."""

import logging

import pytest

from bobozan import config
from bobozan.models.actions import Ruleset


class TestRuleset:
    def test_default(self):
        assert config.get_ruleset() == Ruleset.CLASSIC

    @pytest.mark.parametrize("value", ["tri_phase", "Tri-Phase", "triphase", "TRI PHASE"])
    def test_tri_phase_spellings(self, monkeypatch, value):
        monkeypatch.setenv("BOBOZAN_RULESET", value)
        assert config.get_ruleset() == Ruleset.TRI_PHASE

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_RULESET", "chess")
        with pytest.raises(ValueError, match="BOBOZAN_RULESET"):
            config.get_ruleset()


class TestOpponentAndSeed:
    def test_default_opponent(self):
        assert config.get_opponent_type() == "random"

    def test_opponent_override(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_OPPONENT", "turtle")
        assert config.get_opponent_type() == "turtle"

    def test_seed_unset(self):
        assert config.get_random_seed() is None

    def test_seed_blank(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_SEED", "  ")
        assert config.get_random_seed() is None

    def test_seed_value(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_SEED", "42")
        assert config.get_random_seed() == 42

    def test_seed_invalid(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_SEED", "forty-two")
        with pytest.raises(ValueError, match="BOBOZAN_SEED"):
            config.get_random_seed()


class TestInitialEnergy:
    def test_default(self):
        assert config.get_initial_energy() == 1

    def test_override(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_INITIAL_ENERGY", "3")
        assert config.get_initial_energy() == 3

    @pytest.mark.parametrize("value", ["-1", "lots"])
    def test_invalid(self, monkeypatch, value):
        monkeypatch.setenv("BOBOZAN_INITIAL_ENERGY", value)
        with pytest.raises(ValueError, match="BOBOZAN_INITIAL_ENERGY"):
            config.get_initial_energy()


class TestLogging:
    def test_default_level(self):
        assert config.get_log_level() == logging.WARNING

    def test_named_level(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_LOG_LEVEL", "debug")
        assert config.get_log_level() == logging.DEBUG

    def test_numeric_level(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_LOG_LEVEL", "15")
        assert config.get_log_level() == 15

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("BOBOZAN_LOG_LEVEL", "loud")
        with pytest.raises(ValueError, match="BOBOZAN_LOG_LEVEL"):
            config.get_log_level()
