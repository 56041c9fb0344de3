"""Tri-Phase ruleset resolution.

Twelve faction moves (three factions, four moves each) plus Charge. The basic
Defend is never offered to either side but still resolves. Resolution is an
ordered list of guarded rules evaluated top to bottom; the first rule that
applies decides the round:

1. exact_match          - identical moves always continue
2. charge_involvement   - a charging side loses to any attack, survives a defense
3. basic_defense        - basic Defend blocks T1 only
   elemental_defense    - faction guards block every T1, and T2/T3 only
                          from the faction they counter
   defense_fallback     - any other defense facing an attack fails
4. pegasus_punch_override - Pegasus Punch beats Ice Arrow unconditionally
   higher_tier          - the higher tier wins outright
   faction_advantage    - same tier: the advantaged faction wins
   evenly_matched       - same tier, no advantage
5. fallback             - neutral continue

Faction cycle: PEGASUS > ICE > COTTON > PEGASUS.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from bobozan.models.actions import (
    ActionDetails,
    ActionId,
    Faction,
    Ruleset,
    lookup,
    validate_action_for_ruleset,
)
from bobozan.models.state import MessageClass, Resolution, RoundResult

logger = logging.getLogger(__name__)


# Offensive relation: an attack of the key faction beats a same-tier attack
# of the value faction.
FACTION_ADVANTAGE: Mapping[Faction, Faction] = MappingProxyType(
    {
        Faction.PEGASUS: Faction.ICE,
        Faction.ICE: Faction.COTTON,
        Faction.COTTON: Faction.PEGASUS,
    }
)

# Defensive relation: the key faction's guard fully neutralizes attacks of
# the value faction. Numerically equal to FACTION_ADVANTAGE today but tuned
# independently.
DEFENSE_TARGETS: Mapping[Faction, Faction] = MappingProxyType(
    {
        Faction.PEGASUS: Faction.ICE,
        Faction.ICE: Faction.COTTON,
        Faction.COTTON: Faction.PEGASUS,
    }
)


@dataclass(frozen=True)
class Matchup:
    """Both committed actions with their catalog entries."""

    player_action: ActionId
    opponent_action: ActionId
    player: ActionDetails
    opponent: ActionDetails


@dataclass(frozen=True)
class TriPhaseRule:
    """A named guarded rule. `apply` returns None when the guard does not match."""

    name: str
    apply: Callable[[Matchup], Optional[Resolution]]


def _side_wins(player_side: bool) -> RoundResult:
    return RoundResult.PLAYER_WINS if player_side else RoundResult.AI_WINS


def _defense_and_attack(
    m: Matchup,
) -> Optional[tuple[ActionId, ActionDetails, ActionDetails, bool]]:
    """Return (defense_action, defense, attack, player_defends) when exactly
    one side defends and the other attacks."""
    if m.player.tier == 0 and m.opponent.tier > 0:
        return m.player_action, m.player, m.opponent, True
    if m.opponent.tier == 0 and m.player.tier > 0:
        return m.opponent_action, m.opponent, m.player, False
    return None


# =============================================================================
# Rules
# =============================================================================


def _exact_match(m: Matchup) -> Optional[Resolution]:
    if m.player_action != m.opponent_action:
        return None
    if m.player_action == ActionId.CHARGE:
        return Resolution(
            RoundResult.CONTINUE,
            "Both sides are gathering momentum...",
            MessageClass.NEUTRAL,
            "exact_match",
        )
    return Resolution(
        RoundResult.CONTINUE,
        "Identical moves cancel each other out!",
        MessageClass.CLASH,
        "exact_match",
    )


def _charge_involvement(m: Matchup) -> Optional[Resolution]:
    if m.player_action == ActionId.CHARGE:
        if m.opponent.tier > 0:
            return Resolution(
                RoundResult.AI_WINS,
                "You were hit while charging!",
                MessageClass.ATTACK_SUCCESS,
                "charge_involvement",
            )
        return Resolution(
            RoundResult.CONTINUE,
            "You charge while the opponent stays on guard.",
            MessageClass.NEUTRAL,
            "charge_involvement",
        )
    if m.opponent_action == ActionId.CHARGE:
        if m.player.tier > 0:
            return Resolution(
                RoundResult.PLAYER_WINS,
                "You struck the opponent mid-charge!",
                MessageClass.ATTACK_SUCCESS,
                "charge_involvement",
            )
        return Resolution(
            RoundResult.CONTINUE,
            "The opponent charges while you stay on guard.",
            MessageClass.NEUTRAL,
            "charge_involvement",
        )
    return None


def _basic_defense(m: Matchup) -> Optional[Resolution]:
    sides = _defense_and_attack(m)
    if sides is None:
        return None
    defense_action, _, attack, player_defends = sides
    if defense_action != ActionId.DEFEND:
        return None

    if attack.tier == 1:
        message = (
            "Your basic defense stopped the basic attack."
            if player_defends
            else "Your attack was stopped by a basic defense."
        )
        return Resolution(
            RoundResult.CONTINUE, message, MessageClass.PERFECT_DEFENSE, "basic_defense"
        )

    message = (
        "A basic defense cannot stop a heavy attack!"
        if player_defends
        else "Your attack pierced the basic defense!"
    )
    return Resolution(
        _side_wins(not player_defends), message, MessageClass.DEFENSE_FAILED, "basic_defense"
    )


def _elemental_defense(m: Matchup) -> Optional[Resolution]:
    sides = _defense_and_attack(m)
    if sides is None:
        return None
    _, defense, attack, player_defends = sides
    if not defense.is_elemental_defense or attack.faction is None:
        return None

    is_counter = DEFENSE_TARGETS[defense.faction] == attack.faction

    if is_counter:
        if player_defends:
            verb = "easily stopped" if attack.tier == 1 else "neutralized"
            message = f"Perfect defense! Your {defense.label} {verb} the {attack.label}."
        else:
            message = f"No effect! The opponent's {defense.label} perfectly countered you."
        return Resolution(
            RoundResult.CONTINUE, message, MessageClass.PERFECT_DEFENSE, "elemental_defense"
        )

    if attack.tier == 1:
        if player_defends:
            message = f"Blocked! Your {defense.label} barely held off the {attack.label}."
        else:
            message = f"Blocked! The opponent's {defense.label} barely held off your T1 attack."
        return Resolution(
            RoundResult.CONTINUE, message, MessageClass.PARTIAL_DEFENSE, "elemental_defense"
        )

    if player_defends:
        message = f"Wrong element! Your {defense.label} cannot withstand a T{attack.tier} attack!"
    else:
        message = "Wrong element! Your heavy attack broke through the opponent's defense!"
    return Resolution(
        _side_wins(not player_defends), message, MessageClass.DEFENSE_FAILED, "elemental_defense"
    )


def _defense_fallback(m: Matchup) -> Optional[Resolution]:
    sides = _defense_and_attack(m)
    if sides is None:
        return None
    _, _, _, player_defends = sides
    message = "Your defense failed." if player_defends else "The opponent's defense failed!"
    return Resolution(
        _side_wins(not player_defends), message, MessageClass.DEFENSE_FAILED, "defense_fallback"
    )


def _pegasus_punch_override(m: Matchup) -> Optional[Resolution]:
    if m.player_action == ActionId.PEGASUS_ATK_T2 and m.opponent_action == ActionId.ICE_ATK_T2:
        return Resolution(
            RoundResult.PLAYER_WINS,
            f"King of clashes! Your {m.player.label} shattered the {m.opponent.label}!",
            MessageClass.ATTACK_SUCCESS,
            "pegasus_punch_override",
        )
    if m.opponent_action == ActionId.PEGASUS_ATK_T2 and m.player_action == ActionId.ICE_ATK_T2:
        return Resolution(
            RoundResult.AI_WINS,
            f"Clash lost! Your {m.player.label} was shattered by the {m.opponent.label}!",
            MessageClass.ATTACK_SUCCESS,
            "pegasus_punch_override",
        )
    return None


def _higher_tier(m: Matchup) -> Optional[Resolution]:
    if m.player.tier <= 0 or m.opponent.tier <= 0 or m.player.tier == m.opponent.tier:
        return None
    if m.player.tier > m.opponent.tier:
        return Resolution(
            RoundResult.PLAYER_WINS,
            "Your move overpowers the opponent's!",
            MessageClass.ATTACK_SUCCESS,
            "higher_tier",
        )
    return Resolution(
        RoundResult.AI_WINS,
        "The opponent's move is stronger!",
        MessageClass.ATTACK_SUCCESS,
        "higher_tier",
    )


def _faction_advantage(m: Matchup) -> Optional[Resolution]:
    if m.player.tier <= 0 or m.opponent.tier != m.player.tier:
        return None
    if m.player.faction is None or m.opponent.faction is None:
        return None
    if FACTION_ADVANTAGE[m.player.faction] == m.opponent.faction:
        return Resolution(
            RoundResult.PLAYER_WINS,
            "Elemental advantage! Your faction counters the opponent's.",
            MessageClass.ATTACK_SUCCESS,
            "faction_advantage",
        )
    if FACTION_ADVANTAGE[m.opponent.faction] == m.player.faction:
        return Resolution(
            RoundResult.AI_WINS,
            "Elemental disadvantage! The opponent's faction counters yours.",
            MessageClass.ATTACK_SUCCESS,
            "faction_advantage",
        )
    return None


def _evenly_matched(m: Matchup) -> Optional[Resolution]:
    if m.player.tier <= 0 or m.opponent.tier <= 0:
        return None
    return Resolution(
        RoundResult.CONTINUE,
        "Evenly matched. Neither side gives ground.",
        MessageClass.CLASH,
        "evenly_matched",
    )


def _fallback(m: Matchup) -> Optional[Resolution]:
    return Resolution(
        RoundResult.CONTINUE, "Both sides are probing...", MessageClass.NEUTRAL, "fallback"
    )


TRI_PHASE_RULES: tuple[TriPhaseRule, ...] = (
    TriPhaseRule("exact_match", _exact_match),
    TriPhaseRule("charge_involvement", _charge_involvement),
    TriPhaseRule("basic_defense", _basic_defense),
    TriPhaseRule("elemental_defense", _elemental_defense),
    TriPhaseRule("defense_fallback", _defense_fallback),
    TriPhaseRule("pegasus_punch_override", _pegasus_punch_override),
    TriPhaseRule("higher_tier", _higher_tier),
    TriPhaseRule("faction_advantage", _faction_advantage),
    TriPhaseRule("evenly_matched", _evenly_matched),
    TriPhaseRule("fallback", _fallback),
)


def resolve_tri_phase(player_action: ActionId, opponent_action: ActionId) -> Resolution:
    """Resolve one Tri-Phase round.

    Args:
        player_action: The human player's committed action
        opponent_action: The opponent's committed action

    Returns:
        Resolution from the player's point of view

    Raises:
        InvalidActionError: If either action is not a Tri-Phase move
    """
    player_action = validate_action_for_ruleset(player_action, Ruleset.TRI_PHASE, resolvable=True)
    opponent_action = validate_action_for_ruleset(opponent_action, Ruleset.TRI_PHASE, resolvable=True)

    matchup = Matchup(
        player_action=player_action,
        opponent_action=opponent_action,
        player=lookup(player_action),
        opponent=lookup(opponent_action),
    )

    for rule in TRI_PHASE_RULES:
        resolution = rule.apply(matchup)
        if resolution is not None:
            logger.debug(
                f"tri_phase {player_action.value} vs {opponent_action.value}: "
                f"{resolution.result.value} ({rule.name})"
            )
            return resolution

    raise RuntimeError(f"No Tri-Phase rule matched {player_action.value} vs {opponent_action.value}")
