"""Round and match state models for Bobozan.

PlayerState is owned and mutated by the turn controller only. Resolution
engines and the opponent policy receive it (or just its energy) read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from bobozan.models.actions import ActionId


class RoundResult(str, Enum):
    """Outcome of resolving one action pair.

    DRAW_GAME is reserved; neither engine produces it.
    """

    CONTINUE = "CONTINUE"
    PLAYER_WINS = "PLAYER_WINS"
    AI_WINS = "AI_WINS"
    DRAW_GAME = "DRAW_GAME"

    def mirrored(self) -> RoundResult:
        """Return the same outcome seen from the other side of the table."""
        if self == RoundResult.PLAYER_WINS:
            return RoundResult.AI_WINS
        if self == RoundResult.AI_WINS:
            return RoundResult.PLAYER_WINS
        return self


class GameStatus(str, Enum):
    """Match status driven by the turn controller."""

    IDLE = "IDLE"
    PLAYING = "PLAYING"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    DRAW = "DRAW"


class MessageClass(str, Enum):
    """Presentation class of a resolution message.

    Lets callers tell a perfect defense from one that barely held (or failed)
    without matching on message text.
    """

    NEUTRAL = "neutral"  # probing, charging, mutual caution
    CLASH = "clash"  # attacks cancel or are evenly matched
    PERFECT_DEFENSE = "perfect_defense"
    PARTIAL_DEFENSE = "partial_defense"
    DEFENSE_FAILED = "defense_failed"
    ATTACK_SUCCESS = "attack_success"


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a (player action, opponent action) pair.

    Attributes:
        result: Round outcome
        message: Human-readable description from the player's point of view
        message_class: Presentation class of the message
        rule: Name of the case or rule that produced the outcome
    """

    result: RoundResult
    message: str
    message_class: MessageClass
    rule: str


class PlayerState(BaseModel):
    """Per-side state in a match.

    Attributes:
        energy: Current energy (never negative)
        last_action: Last action played (display only, None before round 1)
        health: Unused by the rules; always 1
    """

    energy: int = Field(default=1, ge=0)
    last_action: Optional[ActionId] = Field(default=None)
    health: int = Field(default=1)


class LogEntry(BaseModel):
    """One line of the in-memory battle log."""

    round: int = Field(..., ge=1)
    player_action: ActionId
    ai_action: ActionId
    result_message: str
    result: Optional[RoundResult] = Field(default=None)
