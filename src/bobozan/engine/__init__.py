"""Game engine module for Bobozan.

This module contains the core game logic:
- classic: Classic ruleset resolution (5 moves)
- tri_phase: Tri-Phase ruleset resolution (faction moves, ordered rule list)
- game_engine: Turn controller, energy bookkeeping and battle log

Usage:
    from bobozan.engine import GameEngine
    from bobozan.models import ActionId, Ruleset

    game = GameEngine(Ruleset.TRI_PHASE, random_seed=7)

    print(game.get_available_actions("player"))
    result = game.submit_action(ActionId.CHARGE)
    print(result.message)

    if game.is_game_over():
        print(f"Game over: {game.status.value}")
"""

from bobozan.engine.classic import CLASSIC_CASES, ClassicCase, resolve_classic
from bobozan.engine.game_engine import (
    RESOLVERS,
    GameEngine,
    TurnResult,
    apply_energy_delta,
)
from bobozan.engine.tri_phase import (
    DEFENSE_TARGETS,
    FACTION_ADVANTAGE,
    TRI_PHASE_RULES,
    Matchup,
    TriPhaseRule,
    resolve_tri_phase,
)

__all__ = [
    # Resolution
    "resolve_classic",
    "resolve_tri_phase",
    "CLASSIC_CASES",
    "ClassicCase",
    "TRI_PHASE_RULES",
    "TriPhaseRule",
    "Matchup",
    "FACTION_ADVANTAGE",
    "DEFENSE_TARGETS",
    # Turn controller
    "GameEngine",
    "TurnResult",
    "RESOLVERS",
    "apply_energy_delta",
]
