"""Stateless weighted-random opponent policy.

The policy sees only the opponent's current energy and the active ruleset.
It never remembers earlier rounds and never returns a move whose min_energy
exceeds the energy it was given.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from bobozan.models.actions import (
    ELEMENTAL_DEFENSES,
    TRI_PHASE_ACTIONS,
    ActionId,
    Ruleset,
    lookup,
    validate_action_affordability,
)
from bobozan.parameters import (
    CLASSIC_ATTACK_BIAS,
    CLASSIC_ZERO_ENERGY_DEFEND_THRESHOLD,
    TRI_PHASE_DEFENSE_REPEATS,
    TRI_PHASE_ZERO_ENERGY_CHARGE_PROBABILITY,
)

logger = logging.getLogger(__name__)


CLASSIC_POLICY_MOVES: tuple[ActionId, ...] = (
    ActionId.CHARGE,
    ActionId.DEFEND,
    ActionId.MAGIC_DEFEND,
    ActionId.ATTACK_SMALL,
    ActionId.ATTACK_BIG,
)

# Charge plus the faction moves, the same set a Tri-Phase player is offered.
TRI_PHASE_POLICY_MOVES: tuple[ActionId, ...] = TRI_PHASE_ACTIONS


def classic_move_pool(energy: int) -> list[ActionId]:
    """Affordable Classic moves in policy order."""
    return [a for a in CLASSIC_POLICY_MOVES if validate_action_affordability(a, energy)]


def tri_phase_move_pool(energy: int) -> list[ActionId]:
    """Tri-Phase draw pool for a positive energy level.

    Affordable moves followed by the elemental guards again. The guards are
    always affordable, so they appear 1 + TRI_PHASE_DEFENSE_REPEATS times and
    are drawn proportionally more often.
    """
    pool = [a for a in TRI_PHASE_POLICY_MOVES if validate_action_affordability(a, energy)]
    for _ in range(TRI_PHASE_DEFENSE_REPEATS):
        pool.extend(ELEMENTAL_DEFENSES)
    return pool


def choose_opponent_action(
    energy: int,
    ruleset: Ruleset,
    rng: Optional[random.Random] = None,
) -> ActionId:
    """Pick the opponent's action for this round.

    Args:
        energy: The opponent's current energy
        ruleset: Active ruleset
        rng: Random source (module-level random if None)

    Returns:
        An action the opponent can afford

    Raises:
        ValueError: If energy is negative
    """
    if energy < 0:
        raise ValueError(f"energy cannot be negative, got {energy}")
    # The random module exposes the same random()/choice() interface.
    source = rng if rng is not None else random

    if Ruleset(ruleset) == Ruleset.CLASSIC:
        action = _choose_classic(energy, source)
    else:
        action = _choose_tri_phase(energy, source)

    logger.debug(f"opponent policy ({Ruleset(ruleset).value}, energy={energy}) -> {action.value}")
    return action


def _choose_classic(energy: int, rng) -> ActionId:
    possible = classic_move_pool(energy)

    if energy == 0:
        if rng.random() > CLASSIC_ZERO_ENERGY_DEFEND_THRESHOLD:
            return ActionId.CHARGE
        return ActionId.DEFEND

    roll = rng.random()
    attacks = [a for a in possible if lookup(a).is_attack]
    if attacks and roll < CLASSIC_ATTACK_BIAS:
        return rng.choice(attacks)
    return rng.choice(possible)


def _choose_tri_phase(energy: int, rng) -> ActionId:
    if energy == 0:
        if rng.random() < TRI_PHASE_ZERO_ENERGY_CHARGE_PROBABILITY:
            return ActionId.CHARGE
        return rng.choice(ELEMENTAL_DEFENSES)

    return rng.choice(tri_phase_move_pool(energy))
