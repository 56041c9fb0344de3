"""Game balance parameters for Bobozan.

This module is the single source of truth for tunable game constants used by
the turn controller and the opponent policy.

Usage:
    from bobozan.parameters import INITIAL_ENERGY, CLASSIC_ATTACK_BIAS
"""

# =============================================================================
# MATCH SETUP
# =============================================================================

INITIAL_ENERGY = 1
"""Energy each side holds at the start of a match.

Current: 1

Analysis:
    One energy lets either side open with a T1 attack, so round 1 is already
    a guessing game between charging and attacking.
"""

CHARGE_ENERGY_GAIN = 1
"""Energy gained by playing Charge."""

INITIAL_HEALTH = 1
"""Health of each side. Not read by the rules; one decisive hit ends a match."""


# =============================================================================
# CLASSIC OPPONENT POLICY
# =============================================================================

CLASSIC_ZERO_ENERGY_DEFEND_THRESHOLD = 0.3
"""Roll threshold for the Classic opponent with no energy.

The opponent charges when a uniform roll is strictly above this threshold,
so it charges 70% of the time and defends 30% of the time.
"""

CLASSIC_ATTACK_BIAS = 0.5
"""Probability that the Classic opponent restricts itself to attacks.

When the roll falls below this value and at least one attack is affordable,
the opponent picks uniformly among affordable attacks. Otherwise it picks
uniformly among every affordable move, attacks included.
"""


# =============================================================================
# TRI-PHASE OPPONENT POLICY
# =============================================================================

TRI_PHASE_ZERO_ENERGY_CHARGE_PROBABILITY = 0.5
"""Probability that the Tri-Phase opponent charges when it has no energy.

Otherwise it picks one of the three elemental guards uniformly.
"""

TRI_PHASE_DEFENSE_REPEATS = 1
"""Extra copies of the three elemental guards appended to the Tri-Phase pool.

Current: 1

Analysis:
    The guards are already affordable at any energy, so each extra copy
    raises their share of the uniform draw. With 3 energy the pool is
    Charge + 12 faction moves + 3 guards = 16 entries, so each guard is
    drawn with probability 2/16 and each attack with 1/16.
"""


# =============================================================================
# SIMULATION
# =============================================================================

DEFAULT_MAX_ROUNDS = 100
"""Round cap for headless simulated matches. Interactive matches are uncapped."""
