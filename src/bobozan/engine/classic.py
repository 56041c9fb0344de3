"""Classic ruleset resolution.

Five moves: Charge, Defend, Magic Defend, Small Wave (1 energy) and
Big Wave (3 energy). Each decisive pairing is written once, with the attacking
move first; the reverse ordering is derived by mirroring the result, so the
table cannot drift out of symmetry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bobozan.models.actions import ActionId, Ruleset, lookup, validate_action_for_ruleset
from bobozan.models.state import MessageClass, Resolution, RoundResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassicCase:
    """One entry of the Classic case table.

    Attributes:
        name: Case identifier reported in Resolution.rule
        result: Outcome when the player holds the first action of the key
        message_class: Presentation class (same for both orderings)
        message: Text when the player holds the first action of the key
        mirrored_message: Text when the opponent holds the first action
    """

    name: str
    result: RoundResult
    message_class: MessageClass
    message: str
    mirrored_message: str


CLASSIC_CASES: dict[tuple[ActionId, ActionId], ClassicCase] = {
    # Small Wave
    (ActionId.ATTACK_SMALL, ActionId.CHARGE): ClassicCase(
        name="small_hits_charge",
        result=RoundResult.PLAYER_WINS,
        message_class=MessageClass.ATTACK_SUCCESS,
        message="Your Small Wave hit the opponent mid-charge!",
        mirrored_message="You were hit by a Small Wave while charging!",
    ),
    (ActionId.ATTACK_SMALL, ActionId.DEFEND): ClassicCase(
        name="defend_blocks_small",
        result=RoundResult.CONTINUE,
        message_class=MessageClass.PERFECT_DEFENSE,
        message="The opponent blocked your Small Wave!",
        mirrored_message="You blocked the Small Wave.",
    ),
    (ActionId.ATTACK_SMALL, ActionId.MAGIC_DEFEND): ClassicCase(
        name="magic_absorbs_small",
        result=RoundResult.CONTINUE,
        message_class=MessageClass.PERFECT_DEFENSE,
        message="Your Small Wave was absorbed by the opponent's Magic Defend!",
        mirrored_message="Your Magic Defend absorbed the Small Wave.",
    ),
    # Big Wave
    (ActionId.ATTACK_BIG, ActionId.CHARGE): ClassicCase(
        name="big_hits_charge",
        result=RoundResult.PLAYER_WINS,
        message_class=MessageClass.ATTACK_SUCCESS,
        message="Your Big Wave swallowed the opponent mid-charge!",
        mirrored_message="You were swallowed by a Big Wave while charging!",
    ),
    (ActionId.ATTACK_BIG, ActionId.DEFEND): ClassicCase(
        name="big_pierces_defend",
        result=RoundResult.PLAYER_WINS,
        message_class=MessageClass.DEFENSE_FAILED,
        message="Your Big Wave pierced the opponent's basic defense!",
        mirrored_message="A basic defense cannot stop a Big Wave!",
    ),
    (ActionId.ATTACK_BIG, ActionId.ATTACK_SMALL): ClassicCase(
        name="big_overwhelms_small",
        result=RoundResult.PLAYER_WINS,
        message_class=MessageClass.ATTACK_SUCCESS,
        message="Your Big Wave overwhelmed the opponent's Small Wave!",
        mirrored_message="The opponent's Big Wave overwhelmed your Small Wave!",
    ),
    (ActionId.ATTACK_BIG, ActionId.MAGIC_DEFEND): ClassicCase(
        name="magic_absorbs_big",
        result=RoundResult.CONTINUE,
        message_class=MessageClass.PERFECT_DEFENSE,
        message="Your Big Wave was stopped by the opponent's Magic Defend!",
        mirrored_message="Your Magic Defend withstood the Big Wave!",
    ),
}


def resolve_classic(player_action: ActionId, opponent_action: ActionId) -> Resolution:
    """Resolve one Classic round.

    Args:
        player_action: The human player's committed action
        opponent_action: The opponent's committed action

    Returns:
        Resolution from the player's point of view

    Raises:
        InvalidActionError: If either action is not a Classic move
    """
    player_action = validate_action_for_ruleset(player_action, Ruleset.CLASSIC, resolvable=True)
    opponent_action = validate_action_for_ruleset(opponent_action, Ruleset.CLASSIC, resolvable=True)

    resolution = _resolve_pair(player_action, opponent_action)
    logger.debug(
        f"classic {player_action.value} vs {opponent_action.value}: "
        f"{resolution.result.value} ({resolution.rule})"
    )
    return resolution


def _resolve_pair(player_action: ActionId, opponent_action: ActionId) -> Resolution:
    if player_action == opponent_action:
        if lookup(player_action).is_attack:
            return Resolution(
                RoundResult.CONTINUE,
                "Wave met wave! They cancel each other out.",
                MessageClass.CLASH,
                "identical_attacks",
            )
        if player_action == ActionId.CHARGE:
            return Resolution(
                RoundResult.CONTINUE,
                "Both sides are charging...",
                MessageClass.NEUTRAL,
                "both_charge",
            )
        return Resolution(
            RoundResult.CONTINUE, "A standoff.", MessageClass.NEUTRAL, "identical_moves"
        )

    case = CLASSIC_CASES.get((player_action, opponent_action))
    if case is not None:
        return Resolution(case.result, case.message, case.message_class, case.name)

    case = CLASSIC_CASES.get((opponent_action, player_action))
    if case is not None:
        return Resolution(
            case.result.mirrored(), case.mirrored_message, case.message_class, case.name
        )

    return Resolution(
        RoundResult.CONTINUE, "Both sides are probing...", MessageClass.NEUTRAL, "probing"
    )
