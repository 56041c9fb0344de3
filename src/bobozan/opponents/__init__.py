"""Opponent implementations for Bobozan.

1. Random policy opponent - stateless weighted-random choice under an energy budget
2. Scripted opponents - fixed action sequences for tests and simulations
3. Turtle opponent - charges and guards, never attacks

All opponents implement the Opponent base class interface.
"""

from bobozan.opponents.base import (
    Opponent,
    OpponentType,
    RandomPolicyOpponent,
    ScriptedOpponent,
    TurtleOpponent,
    get_opponent_by_type,
    list_opponent_types,
)
from bobozan.opponents.policy import (
    choose_opponent_action,
    classic_move_pool,
    tri_phase_move_pool,
)

__all__ = [
    # Base classes and types
    "Opponent",
    "OpponentType",
    "RandomPolicyOpponent",
    "ScriptedOpponent",
    "TurtleOpponent",
    # Factory functions
    "get_opponent_by_type",
    "list_opponent_types",
    # Policy
    "choose_opponent_action",
    "classic_move_pool",
    "tri_phase_move_pool",
]
