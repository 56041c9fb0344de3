"""Integration tests for the turn controller.

Tests cover:
- Match setup and restart
- Energy bookkeeping (costs, charge gain, floor at zero)
- Terminal outcomes leave energy untouched
- Rejected submissions (unaffordable, foreign moves, finished match)
- Battle log contents
- Full matches against the random policy
"""

import pytest

from bobozan.engine.game_engine import GameEngine, apply_energy_delta
from bobozan.models.actions import ActionId, InvalidActionError, Ruleset, lookup
from bobozan.models.state import GameStatus, RoundResult
from bobozan.opponents.base import RandomPolicyOpponent, ScriptedOpponent


# =============================================================================
# Setup
# =============================================================================


class TestSetup:
    """Tests for a fresh match."""

    def test_initial_state(self, classic_game):
        assert classic_game.round == 1
        assert classic_game.status == GameStatus.PLAYING
        assert classic_game.get_state("player").energy == 1
        assert classic_game.get_state("opponent").energy == 1
        assert classic_game.get_history() == []

    def test_default_opponent_is_random_policy(self):
        game = GameEngine(Ruleset.TRI_PHASE, random_seed=4)
        assert isinstance(game.opponent, RandomPolicyOpponent)

    def test_ruleset_from_string(self):
        assert GameEngine("tri_phase").ruleset == Ruleset.TRI_PHASE

    def test_negative_initial_energy(self):
        with pytest.raises(ValueError):
            GameEngine(initial_energy=-2)

    def test_available_actions_follow_energy(self, classic_game):
        assert classic_game.get_available_actions("player") == [
            ActionId.CHARGE,
            ActionId.DEFEND,
            ActionId.ATTACK_SMALL,
        ]

    def test_get_state_returns_copy(self, classic_game):
        state = classic_game.get_state("player")
        state.energy = 9
        assert classic_game.get_state("player").energy == 1


# =============================================================================
# Energy
# =============================================================================


class TestEnergy:
    """Energy bookkeeping after non-decisive rounds."""

    def test_both_charge(self, classic_game):
        result = classic_game.submit_actions(ActionId.CHARGE, ActionId.CHARGE)
        assert result.success
        assert classic_game.get_state("player").energy == 2
        assert classic_game.get_state("opponent").energy == 2
        assert classic_game.round == 2

    def test_costs_are_paid(self):
        game = GameEngine(Ruleset.CLASSIC, initial_energy=3)
        result = game.submit_actions(ActionId.MAGIC_DEFEND, ActionId.ATTACK_BIG)
        assert result.resolution.result == RoundResult.CONTINUE
        assert game.get_state("player").energy == 1
        assert game.get_state("opponent").energy == 0

    def test_defend_is_free(self, classic_game):
        classic_game.submit_actions(ActionId.DEFEND, ActionId.ATTACK_SMALL)
        assert classic_game.get_state("player").energy == 1
        assert classic_game.get_state("opponent").energy == 0

    def test_last_action_recorded(self, tri_phase_game):
        tri_phase_game.submit_actions(ActionId.ICE_DEF_ELE, ActionId.CHARGE)
        assert tri_phase_game.get_state("player").last_action == ActionId.ICE_DEF_ELE
        assert tri_phase_game.get_state("opponent").last_action == ActionId.CHARGE

    def test_energy_delta_floors_at_zero(self):
        assert apply_energy_delta(0, ActionId.ATTACK_BIG) == 0
        assert apply_energy_delta(0, ActionId.CHARGE) == 1
        assert apply_energy_delta(3, ActionId.ICE_ULT) == 0


# =============================================================================
# Terminal Outcomes
# =============================================================================


class TestTerminalOutcomes:
    """A decisive round ends the match."""

    def test_victory(self, classic_game):
        result = classic_game.submit_action(ActionId.ATTACK_SMALL)
        assert result.success
        assert result.opponent_action == ActionId.CHARGE
        assert result.status == GameStatus.VICTORY
        assert classic_game.is_game_over()

    def test_defeat(self):
        game = GameEngine(Ruleset.CLASSIC, opponent=ScriptedOpponent([ActionId.ATTACK_SMALL]))
        result = game.submit_action(ActionId.CHARGE)
        assert result.status == GameStatus.DEFEAT

    def test_energy_untouched_on_decisive_round(self, classic_game):
        classic_game.submit_actions(ActionId.ATTACK_SMALL, ActionId.CHARGE)
        assert classic_game.get_state("player").energy == 1
        assert classic_game.get_state("opponent").energy == 1
        assert classic_game.round == 1

    def test_no_rounds_after_game_over(self, classic_game):
        classic_game.submit_action(ActionId.ATTACK_SMALL)
        result = classic_game.submit_action(ActionId.CHARGE)
        assert not result.success
        assert "Restart" in result.error
        assert len(classic_game.get_history()) == 1

    def test_restart(self, classic_game):
        classic_game.submit_action(ActionId.CHARGE)
        classic_game.submit_action(ActionId.ATTACK_SMALL)
        classic_game.restart()
        assert classic_game.status == GameStatus.PLAYING
        assert classic_game.round == 1
        assert classic_game.get_state("player").energy == 1
        assert classic_game.get_history() == []


# =============================================================================
# Rejected Submissions
# =============================================================================


class TestRejections:
    """Moves the controller refuses to play."""

    def test_unaffordable_player_action(self, classic_game):
        result = classic_game.submit_action(ActionId.ATTACK_BIG)
        assert not result.success
        assert "cannot afford Big Wave" in result.error
        assert result.rejected_side == "player"
        assert classic_game.round == 1
        assert classic_game.get_history() == []

    def test_unaffordable_opponent_action(self):
        game = GameEngine(Ruleset.CLASSIC, opponent=ScriptedOpponent([ActionId.ATTACK_BIG]))
        result = game.submit_action(ActionId.CHARGE)
        assert not result.success
        assert result.error.startswith("Opponent cannot afford")
        assert result.rejected_side == "opponent"

    def test_finished_match_names_no_side(self, classic_game):
        classic_game.submit_action(ActionId.ATTACK_SMALL)
        assert classic_game.submit_action(ActionId.CHARGE).rejected_side is None

    def test_foreign_move_raises(self, classic_game):
        with pytest.raises(InvalidActionError):
            classic_game.submit_action(ActionId.ICE_ATK_T1)

    def test_tri_phase_menu_never_offers_defend(self):
        game = GameEngine(Ruleset.TRI_PHASE, initial_energy=3)
        available = game.get_available_actions("player")
        assert ActionId.DEFEND not in available
        assert len(available) == 13

    def test_defend_cannot_be_played_in_tri_phase(self, tri_phase_game):
        with pytest.raises(InvalidActionError, match="not a tri_phase action"):
            tri_phase_game.submit_action(ActionId.DEFEND)
        with pytest.raises(InvalidActionError):
            tri_phase_game.submit_actions(ActionId.CHARGE, ActionId.DEFEND)
        assert tri_phase_game.get_history() == []

    def test_rejected_message(self, classic_game):
        result = classic_game.submit_action(ActionId.MAGIC_DEFEND)
        assert result.message == result.error


# =============================================================================
# Battle Log
# =============================================================================


class TestBattleLog:
    """Every played round is appended to the log."""

    def test_log_entry_fields(self, tri_phase_game):
        tri_phase_game.submit_action(ActionId.CHARGE)
        tri_phase_game.submit_action(ActionId.PEGASUS_ATK_T2)
        history = tri_phase_game.get_history()

        assert [e.round for e in history] == [1, 2]
        assert history[0].player_action == ActionId.CHARGE
        assert history[0].ai_action == ActionId.CHARGE
        assert history[0].result == RoundResult.CONTINUE
        assert history[1].result == RoundResult.PLAYER_WINS
        assert history[1].result_message == "You struck the opponent mid-charge!"

    def test_history_is_a_copy(self, classic_game):
        classic_game.submit_action(ActionId.CHARGE)
        classic_game.get_history().clear()
        assert len(classic_game.get_history()) == 1


# =============================================================================
# Full Matches
# =============================================================================


class TestFullMatches:
    """Matches against the real policy stay within the rules."""

    @pytest.mark.parametrize("ruleset", list(Ruleset))
    @pytest.mark.parametrize("seed", range(10))
    def test_random_match_respects_budget(self, ruleset, seed):
        game = GameEngine(ruleset, random_seed=seed)
        for _ in range(200):
            if game.is_game_over():
                break
            before = game.get_state("opponent").energy
            result = game.submit_action(ActionId.CHARGE)
            assert result.success
            assert lookup(result.opponent_action).min_energy <= before
            assert game.get_state("player").energy >= 0
            assert game.get_state("opponent").energy >= 0
        assert game.is_game_over()
        assert game.status == GameStatus.DEFEAT
