"""Bobozan game models.

This module exports the action catalog and the state data structures.
"""

from .actions import (
    ACTION_DETAILS,
    CLASSIC_ACTIONS,
    ELEMENTAL_DEFENSES,
    TRI_PHASE_ACTIONS,
    TRI_PHASE_RESOLVABLE_ACTIONS,
    ActionDetails,
    ActionId,
    ActionKind,
    Faction,
    InvalidActionError,
    Ruleset,
    format_action_for_display,
    get_action_by_name,
    get_action_faction,
    get_action_tier,
    get_affordable_actions,
    get_ruleset_actions,
    is_in_ruleset,
    lookup,
    validate_action_affordability,
    validate_action_for_ruleset,
)
from .state import (
    GameStatus,
    LogEntry,
    MessageClass,
    PlayerState,
    Resolution,
    RoundResult,
)

__all__ = [
    # Enums
    "ActionId",
    "ActionKind",
    "Faction",
    "Ruleset",
    "RoundResult",
    "GameStatus",
    "MessageClass",
    # Models
    "ActionDetails",
    "PlayerState",
    "LogEntry",
    "Resolution",
    # Errors
    "InvalidActionError",
    # Catalog
    "ACTION_DETAILS",
    "CLASSIC_ACTIONS",
    "TRI_PHASE_ACTIONS",
    "TRI_PHASE_RESOLVABLE_ACTIONS",
    "ELEMENTAL_DEFENSES",
    # Catalog functions
    "format_action_for_display",
    "get_action_by_name",
    "get_action_faction",
    "get_action_tier",
    "get_affordable_actions",
    "get_ruleset_actions",
    "is_in_ruleset",
    "lookup",
    "validate_action_affordability",
    "validate_action_for_ruleset",
]
