"""Unit tests for Classic resolution.

Tests cover:
1. Every decisive pairing from both perspectives
2. Neutral and clash outcomes
3. Symmetry and reflexivity over the whole vocabulary
4. Invalid input
"""

import itertools

import pytest

from bobozan.engine.classic import CLASSIC_CASES, resolve_classic
from bobozan.models.actions import CLASSIC_ACTIONS, ActionId, InvalidActionError
from bobozan.models.state import MessageClass, RoundResult

A = ActionId


class TestDecisivePairs:
    """Each case of the table, seen from the player's side."""

    @pytest.mark.parametrize(
        "player,opponent,expected",
        [
            (A.ATTACK_SMALL, A.CHARGE, RoundResult.PLAYER_WINS),
            (A.CHARGE, A.ATTACK_SMALL, RoundResult.AI_WINS),
            (A.ATTACK_BIG, A.CHARGE, RoundResult.PLAYER_WINS),
            (A.CHARGE, A.ATTACK_BIG, RoundResult.AI_WINS),
            (A.ATTACK_BIG, A.DEFEND, RoundResult.PLAYER_WINS),
            (A.DEFEND, A.ATTACK_BIG, RoundResult.AI_WINS),
            (A.ATTACK_BIG, A.ATTACK_SMALL, RoundResult.PLAYER_WINS),
            (A.ATTACK_SMALL, A.ATTACK_BIG, RoundResult.AI_WINS),
        ],
    )
    def test_decisive(self, player, opponent, expected):
        assert resolve_classic(player, opponent).result == expected

    @pytest.mark.parametrize(
        "player,opponent",
        [
            (A.ATTACK_SMALL, A.DEFEND),
            (A.DEFEND, A.ATTACK_SMALL),
            (A.ATTACK_SMALL, A.MAGIC_DEFEND),
            (A.MAGIC_DEFEND, A.ATTACK_SMALL),
            (A.ATTACK_BIG, A.MAGIC_DEFEND),
            (A.MAGIC_DEFEND, A.ATTACK_BIG),
        ],
    )
    def test_blocked_attacks_continue(self, player, opponent):
        resolution = resolve_classic(player, opponent)
        assert resolution.result == RoundResult.CONTINUE
        assert resolution.message_class == MessageClass.PERFECT_DEFENSE

    def test_big_wave_pierces_defend_is_a_failed_defense(self):
        resolution = resolve_classic(A.DEFEND, A.ATTACK_BIG)
        assert resolution.message_class == MessageClass.DEFENSE_FAILED
        assert resolution.rule == "big_pierces_defend"
        assert "cannot stop" in resolution.message

    def test_messages_follow_perspective(self):
        """The same case reads differently from each side."""
        attacking = resolve_classic(A.ATTACK_SMALL, A.CHARGE)
        charging = resolve_classic(A.CHARGE, A.ATTACK_SMALL)
        assert attacking.rule == charging.rule == "small_hits_charge"
        assert attacking.message != charging.message


class TestNeutralOutcomes:
    """Pairings with no decisive case."""

    def test_identical_attacks_clash(self):
        for attack in (A.ATTACK_SMALL, A.ATTACK_BIG):
            resolution = resolve_classic(attack, attack)
            assert resolution.result == RoundResult.CONTINUE
            assert resolution.message_class == MessageClass.CLASH

    def test_both_charge(self):
        resolution = resolve_classic(A.CHARGE, A.CHARGE)
        assert resolution.result == RoundResult.CONTINUE
        assert resolution.message_class == MessageClass.NEUTRAL

    @pytest.mark.parametrize(
        "player,opponent",
        [
            (A.CHARGE, A.DEFEND),
            (A.DEFEND, A.MAGIC_DEFEND),
            (A.MAGIC_DEFEND, A.CHARGE),
            (A.DEFEND, A.DEFEND),
        ],
    )
    def test_no_attack_means_probing(self, player, opponent):
        resolution = resolve_classic(player, opponent)
        assert resolution.result == RoundResult.CONTINUE
        assert resolution.message_class == MessageClass.NEUTRAL


class TestInvariants:
    """Properties that hold over the whole Classic vocabulary."""

    @pytest.mark.parametrize("a,b", list(itertools.product(CLASSIC_ACTIONS, repeat=2)))
    def test_symmetry(self, a, b):
        """Swapping the sides mirrors the outcome."""
        assert resolve_classic(a, b).result == resolve_classic(b, a).result.mirrored()

    @pytest.mark.parametrize("action", CLASSIC_ACTIONS)
    def test_reflexivity(self, action):
        assert resolve_classic(action, action).result == RoundResult.CONTINUE

    def test_never_draws(self):
        for a, b in itertools.product(CLASSIC_ACTIONS, repeat=2):
            assert resolve_classic(a, b).result != RoundResult.DRAW_GAME

    def test_case_table_lists_attacker_first(self):
        from bobozan.models.actions import lookup

        for attacker, _ in CLASSIC_CASES:
            assert lookup(attacker).is_attack


class TestInvalidInput:
    """Moves outside the Classic vocabulary are rejected."""

    def test_tri_phase_move_rejected(self):
        with pytest.raises(InvalidActionError):
            resolve_classic(A.ICE_ATK_T1, A.CHARGE)

    def test_unknown_opponent_move_rejected(self):
        with pytest.raises(InvalidActionError):
            resolve_classic(A.CHARGE, "LASER")
