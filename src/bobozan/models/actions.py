"""Action catalog for Bobozan.

This module defines every playable move, the static metadata attached to it
(cost, minimum energy, kind, faction) and the vocabularies of the two rulesets.
Metadata is looked up by identifier and never stored per round; the catalog is
built once at import time and never mutated afterwards.

Tier is derived, not stored:
- Charge: -1
- Any defense (basic, magic or elemental): 0
- Attacks: equal to the attack's cost (1, 2 or 3)
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class InvalidActionError(ValueError):
    """Raised when an action is unknown or outside the active ruleset."""


class Ruleset(str, Enum):
    """The two resolution rulesets.

    Inherits from str for proper JSON serialization.
    """

    CLASSIC = "classic"
    TRI_PHASE = "tri_phase"


class Faction(str, Enum):
    """Elemental affiliation of Tri-Phase moves."""

    PEGASUS = "pegasus"
    ICE = "ice"
    COTTON = "cotton"


class ActionKind(Enum):
    """Broad family of an action, used to derive its tier."""

    CHARGE = "charge"
    DEFENSE = "defense"
    ATTACK = "attack"


class ActionId(str, Enum):
    """Identifier naming one playable move."""

    # Shared
    CHARGE = "CHARGE"
    DEFEND = "DEFEND"

    # Classic
    MAGIC_DEFEND = "MAGIC_DEFEND"
    ATTACK_SMALL = "ATTACK_SMALL"
    ATTACK_BIG = "ATTACK_BIG"

    # Tri-Phase: Pegasus
    PEGASUS_ATK_T1 = "PEGASUS_ATK_T1"
    PEGASUS_ATK_T2 = "PEGASUS_ATK_T2"
    PEGASUS_DEF_ELE = "PEGASUS_DEF_ELE"
    PEGASUS_ULT = "PEGASUS_ULT"

    # Tri-Phase: Ice
    ICE_ATK_T1 = "ICE_ATK_T1"
    ICE_ATK_T2 = "ICE_ATK_T2"
    ICE_DEF_ELE = "ICE_DEF_ELE"
    ICE_ULT = "ICE_ULT"

    # Tri-Phase: Cotton
    COTTON_ATK_T1 = "COTTON_ATK_T1"
    COTTON_ATK_T2 = "COTTON_ATK_T2"
    COTTON_DEF_ELE = "COTTON_DEF_ELE"
    COTTON_ULT = "COTTON_ULT"


class ActionDetails(BaseModel):
    """Static metadata for one action.

    Attributes:
        label: Display name
        cost: Energy consumed when the action is played
        min_energy: Energy required to play the action at all
        kind: Charge, defense or attack
        description: Short rules text
        faction: Elemental faction (Tri-Phase moves only)
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    cost: int = Field(..., ge=0)
    min_energy: int = Field(..., ge=0)
    kind: ActionKind
    description: str = Field(default="")
    faction: Optional[Faction] = Field(default=None)

    @property
    def tier(self) -> int:
        """Power level: -1 for charge, 0 for defenses, cost for attacks."""
        if self.kind == ActionKind.CHARGE:
            return -1
        if self.kind == ActionKind.DEFENSE:
            return 0
        return self.cost

    @property
    def is_attack(self) -> bool:
        return self.kind == ActionKind.ATTACK

    @property
    def is_defense(self) -> bool:
        return self.kind == ActionKind.DEFENSE

    @property
    def is_elemental_defense(self) -> bool:
        """True for faction defenses (they carry a faction, basic ones don't)."""
        return self.kind == ActionKind.DEFENSE and self.faction is not None


# =============================================================================
# Catalog
# =============================================================================

# Insertion order is meaningful: menus and the opponent policy enumerate
# actions in this order.
ACTION_DETAILS: Mapping[ActionId, ActionDetails] = MappingProxyType({
    # Shared
    ActionId.CHARGE: ActionDetails(
        label="Charge", cost=0, min_energy=0, kind=ActionKind.CHARGE,
        description="Gather one energy.",
    ),
    ActionId.DEFEND: ActionDetails(
        label="Defend", cost=0, min_energy=0, kind=ActionKind.DEFENSE,
        description="Blocks 1-cost attacks.",
    ),
    # Classic
    ActionId.MAGIC_DEFEND: ActionDetails(
        label="Magic Defend", cost=2, min_energy=2, kind=ActionKind.DEFENSE,
        description="Absorbs every attack.",
    ),
    ActionId.ATTACK_SMALL: ActionDetails(
        label="Small Wave", cost=1, min_energy=1, kind=ActionKind.ATTACK,
        description="Punishes a charging opponent.",
    ),
    ActionId.ATTACK_BIG: ActionDetails(
        label="Big Wave", cost=3, min_energy=3, kind=ActionKind.ATTACK,
        description="Heavy attack. Pierces a basic defense.",
    ),
    # Pegasus
    ActionId.PEGASUS_ATK_T1: ActionDetails(
        label="Pegasus Strike", cost=1, min_energy=1, kind=ActionKind.ATTACK,
        description="Basic attack.", faction=Faction.PEGASUS,
    ),
    ActionId.PEGASUS_ATK_T2: ActionDetails(
        label="Pegasus Punch", cost=2, min_energy=2, kind=ActionKind.ATTACK,
        description="Heavy attack. King of clashes, shatters Ice Arrow.",
        faction=Faction.PEGASUS,
    ),
    ActionId.PEGASUS_DEF_ELE: ActionDetails(
        label="Pegasus Guard", cost=0, min_energy=0, kind=ActionKind.DEFENSE,
        description="Blocks every T1. Counters Ice (blocks T2-T3).",
        faction=Faction.PEGASUS,
    ),
    ActionId.PEGASUS_ULT: ActionDetails(
        label="Pegasus Meteor Fist", cost=3, min_energy=3, kind=ActionKind.ATTACK,
        description="Ultimate attack.", faction=Faction.PEGASUS,
    ),
    # Ice
    ActionId.ICE_ATK_T1: ActionDetails(
        label="Ice Strike", cost=1, min_energy=1, kind=ActionKind.ATTACK,
        description="Basic attack.", faction=Faction.ICE,
    ),
    ActionId.ICE_ATK_T2: ActionDetails(
        label="Ice Arrow", cost=2, min_energy=2, kind=ActionKind.ATTACK,
        description="Heavy attack.", faction=Faction.ICE,
    ),
    ActionId.ICE_DEF_ELE: ActionDetails(
        label="Ice Guard", cost=0, min_energy=0, kind=ActionKind.DEFENSE,
        description="Blocks every T1. Counters Cotton (blocks T2-T3).",
        faction=Faction.ICE,
    ),
    ActionId.ICE_ULT: ActionDetails(
        label="Glacier Burst", cost=3, min_energy=3, kind=ActionKind.ATTACK,
        description="Ultimate attack.", faction=Faction.ICE,
    ),
    # Cotton
    ActionId.COTTON_ATK_T1: ActionDetails(
        label="Cotton Strike", cost=1, min_energy=1, kind=ActionKind.ATTACK,
        description="Basic attack.", faction=Faction.COTTON,
    ),
    ActionId.COTTON_ATK_T2: ActionDetails(
        label="Cotton Palm", cost=2, min_energy=2, kind=ActionKind.ATTACK,
        description="Heavy attack.", faction=Faction.COTTON,
    ),
    ActionId.COTTON_DEF_ELE: ActionDetails(
        label="Cotton Guard", cost=0, min_energy=0, kind=ActionKind.DEFENSE,
        description="Blocks every T1. Counters Pegasus (blocks T2-T3).",
        faction=Faction.COTTON,
    ),
    ActionId.COTTON_ULT: ActionDetails(
        label="Heartpiercer Fist", cost=3, min_energy=3, kind=ActionKind.ATTACK,
        description="Ultimate attack.", faction=Faction.COTTON,
    ),
})


# =============================================================================
# Ruleset Vocabularies
# =============================================================================

CLASSIC_ACTIONS: tuple[ActionId, ...] = (
    ActionId.CHARGE,
    ActionId.DEFEND,
    ActionId.MAGIC_DEFEND,
    ActionId.ATTACK_SMALL,
    ActionId.ATTACK_BIG,
)

# Charge plus the twelve faction moves: everything a Tri-Phase side may play.
TRI_PHASE_ACTIONS: tuple[ActionId, ...] = (ActionId.CHARGE,) + tuple(
    action for action, details in ACTION_DETAILS.items() if details.faction is not None
)

# The Tri-Phase engine also resolves the basic Defend (it blocks T1 only),
# but neither side is ever offered it.
TRI_PHASE_RESOLVABLE_ACTIONS: tuple[ActionId, ...] = TRI_PHASE_ACTIONS + (ActionId.DEFEND,)

ELEMENTAL_DEFENSES: tuple[ActionId, ...] = (
    ActionId.PEGASUS_DEF_ELE,
    ActionId.ICE_DEF_ELE,
    ActionId.COTTON_DEF_ELE,
)

_VOCABULARIES: dict[Ruleset, frozenset[ActionId]] = {
    Ruleset.CLASSIC: frozenset(CLASSIC_ACTIONS),
    Ruleset.TRI_PHASE: frozenset(TRI_PHASE_ACTIONS),
}

_RESOLVABLE: dict[Ruleset, frozenset[ActionId]] = {
    Ruleset.CLASSIC: frozenset(CLASSIC_ACTIONS),
    Ruleset.TRI_PHASE: frozenset(TRI_PHASE_RESOLVABLE_ACTIONS),
}


# =============================================================================
# Lookup Helpers
# =============================================================================


def lookup(action: ActionId | str) -> ActionDetails:
    """Return the catalog entry for an action.

    Args:
        action: ActionId or its string value

    Returns:
        ActionDetails for the action

    Raises:
        InvalidActionError: If the identifier is not in the catalog
    """
    try:
        return ACTION_DETAILS[ActionId(action)]
    except (KeyError, ValueError) as e:
        raise InvalidActionError(f"Unknown action: {action!r}") from e


def get_action_tier(action: ActionId) -> int:
    """Return the derived tier of an action (-1 charge, 0 defense, 1-3 attack)."""
    return lookup(action).tier


def get_action_faction(action: ActionId) -> Optional[Faction]:
    """Return the faction of an action, or None for factionless moves."""
    return lookup(action).faction


def get_ruleset_actions(ruleset: Ruleset) -> list[ActionId]:
    """Return a ruleset's vocabulary in catalog order."""
    vocabulary = _VOCABULARIES[Ruleset(ruleset)]
    return [action for action in ACTION_DETAILS if action in vocabulary]


def is_in_ruleset(action: ActionId, ruleset: Ruleset) -> bool:
    """Check whether an action belongs to a ruleset's vocabulary."""
    return action in _VOCABULARIES[Ruleset(ruleset)]


def validate_action_for_ruleset(
    action: ActionId | str, ruleset: Ruleset, resolvable: bool = False
) -> ActionId:
    """Coerce an identifier and ensure it belongs to the ruleset.

    Args:
        action: Identifier or its string value
        ruleset: Ruleset the action is played under
        resolvable: Accept every move the ruleset's engine can resolve rather
            than only the moves a side may choose

    Raises:
        InvalidActionError: If the action is unknown or not part of the ruleset
    """
    details = lookup(action)  # raises on unknown identifiers
    action_id = ActionId(action)
    allowed = _RESOLVABLE if resolvable else _VOCABULARIES
    if action_id not in allowed[Ruleset(ruleset)]:
        raise InvalidActionError(
            f"{details.label} ({action_id.value}) is not a {Ruleset(ruleset).value} action"
        )
    return action_id


def validate_action_affordability(action: ActionId, energy: int) -> bool:
    """Check if a side with the given energy may play the action."""
    return energy >= lookup(action).min_energy


def get_affordable_actions(ruleset: Ruleset, energy: int) -> list[ActionId]:
    """Return the ruleset's actions playable at the given energy, in catalog order."""
    return [
        action
        for action in get_ruleset_actions(ruleset)
        if validate_action_affordability(action, energy)
    ]


def get_action_by_name(name: str) -> Optional[ActionId]:
    """Look up an action by identifier or label (case-insensitive).

    Args:
        name: Identifier (e.g. "ice_atk_t2") or label (e.g. "Ice Arrow")

    Returns:
        ActionId if found, None otherwise
    """
    name_lower = name.lower().strip()

    for action, details in ACTION_DETAILS.items():
        if action.value.lower() == name_lower or details.label.lower() == name_lower:
            return action

    return None


# =============================================================================
# Action Summary for Display
# =============================================================================


def format_action_for_display(action: ActionId, index: int) -> str:
    """Format an action for the terminal menu.

    Args:
        action: The action to format
        index: Display index (for selection)

    Returns:
        Formatted string for display
    """
    details = lookup(action)
    if details.kind == ActionKind.CHARGE:
        tier_str = "+1 energy"
    elif details.kind == ActionKind.DEFENSE:
        tier_str = "Defense"
    else:
        tier_str = f"T{details.tier}"
    faction_str = f" ({details.faction.value.title()})" if details.faction else ""
    cost_str = f" (costs {details.cost})" if details.cost > 0 else ""

    return f"{index}. {details.label}{faction_str} - {tier_str}{cost_str}"
