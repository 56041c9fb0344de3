"""Turn controller for Bobozan.

The GameEngine owns both sides' state and drives one round at a time:

1. DECISION - Collect the player's action and ask the opponent for its own
2. VALIDATION - Both actions must belong to the ruleset and be affordable
3. RESOLUTION - Resolve the pair with the ruleset's engine
4. LOG - Append the round to the in-memory battle log
5. STATUS - A decisive result ends the match (energy is left untouched)
6. STATE UPDATE - Otherwise pay costs, add charge gains, floor at 0
7. ADVANCE - Increment the round counter
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from bobozan.engine.classic import resolve_classic
from bobozan.engine.tri_phase import resolve_tri_phase
from bobozan.models.actions import (
    ActionId,
    Ruleset,
    get_affordable_actions,
    lookup,
    validate_action_affordability,
    validate_action_for_ruleset,
)
from bobozan.models.state import (
    GameStatus,
    LogEntry,
    PlayerState,
    Resolution,
    RoundResult,
)
from bobozan.opponents.base import Opponent, RandomPolicyOpponent
from bobozan.parameters import CHARGE_ENERGY_GAIN, INITIAL_ENERGY, INITIAL_HEALTH

logger = logging.getLogger(__name__)

Side = Literal["player", "opponent"]

RESOLVERS: dict[Ruleset, Callable[[ActionId, ActionId], Resolution]] = {
    Ruleset.CLASSIC: resolve_classic,
    Ruleset.TRI_PHASE: resolve_tri_phase,
}

_TERMINAL_STATUS: dict[RoundResult, GameStatus] = {
    RoundResult.PLAYER_WINS: GameStatus.VICTORY,
    RoundResult.AI_WINS: GameStatus.DEFEAT,
    RoundResult.DRAW_GAME: GameStatus.DRAW,
}


@dataclass
class TurnResult:
    """Result of submitting actions for a round.

    Attributes:
        success: Whether the round was played
        round: Round number the actions were submitted for
        player_action: Player's action (None if rejected before the opponent chose)
        opponent_action: Opponent's action
        resolution: Resolution of the pair (None if failed)
        status: Match status after the round
        error: Error message if success=False
        rejected_side: Side whose action was refused (None if the match was over)
    """

    success: bool
    round: int
    player_action: Optional[ActionId] = None
    opponent_action: Optional[ActionId] = None
    resolution: Optional[Resolution] = None
    status: GameStatus = GameStatus.PLAYING
    error: Optional[str] = None
    rejected_side: Optional[Side] = None

    @property
    def message(self) -> str:
        if self.resolution is not None:
            return self.resolution.message
        return self.error or ""


def apply_energy_delta(energy: int, action: ActionId) -> int:
    """Energy after playing an action: pay its cost, gain on Charge, floor at 0."""
    new_energy = energy - lookup(action).cost
    if action == ActionId.CHARGE:
        new_energy += CHARGE_ENERGY_GAIN
    return max(0, new_energy)


class GameEngine:
    """Match controller for one human player against one opponent.

    Attributes:
        ruleset: Active ruleset
        opponent: Opponent choosing the AI side's actions
        player_state: Human player's state
        opponent_state: Opponent's state
        round: Current round number (1-indexed)
        status: Match status
        history: Battle log, oldest first
    """

    def __init__(
        self,
        ruleset: Ruleset | str = Ruleset.CLASSIC,
        opponent: Optional[Opponent] = None,
        initial_energy: int = INITIAL_ENERGY,
        random_seed: Optional[int] = None,
    ) -> None:
        """Initialize the engine and start a match.

        Args:
            ruleset: Ruleset to play
            opponent: Opponent instance (default: RandomPolicyOpponent)
            initial_energy: Starting energy for both sides
            random_seed: Seed for the default opponent (ignored if opponent given)

        Raises:
            ValueError: If the ruleset is unknown or initial_energy is negative
        """
        if initial_energy < 0:
            raise ValueError(f"initial_energy cannot be negative, got {initial_energy}")

        self.ruleset = Ruleset(ruleset)
        self.opponent = opponent or RandomPolicyOpponent(random_seed=random_seed)
        self.initial_energy = initial_energy
        self._resolve = RESOLVERS[self.ruleset]
        self.restart()

    def restart(self) -> None:
        """Reset both sides and start a new match with the same settings."""
        self.player_state = PlayerState(energy=self.initial_energy, health=INITIAL_HEALTH)
        self.opponent_state = PlayerState(energy=self.initial_energy, health=INITIAL_HEALTH)
        self.round = 1
        self.status = GameStatus.PLAYING
        self.history: list[LogEntry] = []
        self.opponent.reset()
        logger.info(f"New {self.ruleset.value} match against {self.opponent.name}")

    # =========================================================================
    # Queries
    # =========================================================================

    def get_state(self, side: Side) -> PlayerState:
        """Return a copy of one side's state."""
        state = self.player_state if side == "player" else self.opponent_state
        return state.model_copy()

    def get_available_actions(self, side: Side) -> list[ActionId]:
        """Return the ruleset's actions the side can currently afford."""
        return get_affordable_actions(self.ruleset, self.get_state(side).energy)

    def get_history(self) -> list[LogEntry]:
        """Return the battle log, oldest first."""
        return list(self.history)

    def is_game_over(self) -> bool:
        return self.status in (GameStatus.VICTORY, GameStatus.DEFEAT, GameStatus.DRAW)

    # =========================================================================
    # Turn Processing
    # =========================================================================

    def submit_action(self, player_action: ActionId | str) -> TurnResult:
        """Play a round: the opponent chooses, then the pair is resolved.

        Raises:
            InvalidActionError: If the action is not part of the ruleset
        """
        if self.is_game_over():
            return self._rejected("Match is over. Restart to play again.")

        player_action = validate_action_for_ruleset(player_action, self.ruleset)
        if not validate_action_affordability(player_action, self.player_state.energy):
            return self._rejected(
                self._unaffordable_message("You", player_action, self.player_state.energy),
                player_action=player_action,
                rejected_side="player",
            )

        opponent_action = self.opponent.choose_action(self.get_state("opponent"), self.ruleset)
        return self.submit_actions(player_action, opponent_action)

    def submit_actions(
        self,
        player_action: ActionId | str,
        opponent_action: ActionId | str,
    ) -> TurnResult:
        """Resolve an explicit action pair and apply its consequences.

        Raises:
            InvalidActionError: If either action is not part of the ruleset
        """
        if self.is_game_over():
            return self._rejected("Match is over. Restart to play again.")

        player_action = validate_action_for_ruleset(player_action, self.ruleset)
        opponent_action = validate_action_for_ruleset(opponent_action, self.ruleset)

        if not validate_action_affordability(player_action, self.player_state.energy):
            return self._rejected(
                self._unaffordable_message("You", player_action, self.player_state.energy),
                player_action=player_action,
                rejected_side="player",
            )
        if not validate_action_affordability(opponent_action, self.opponent_state.energy):
            return self._rejected(
                self._unaffordable_message(
                    "Opponent", opponent_action, self.opponent_state.energy
                ),
                player_action=player_action,
                opponent_action=opponent_action,
                rejected_side="opponent",
            )

        round_number = self.round
        resolution = self._resolve(player_action, opponent_action)

        self.history.append(
            LogEntry(
                round=round_number,
                player_action=player_action,
                ai_action=opponent_action,
                result_message=resolution.message,
                result=resolution.result,
            )
        )
        logger.debug(
            f"Round {round_number}: {player_action.value} vs {opponent_action.value} "
            f"-> {resolution.result.value}"
        )

        if resolution.result in _TERMINAL_STATUS:
            self.status = _TERMINAL_STATUS[resolution.result]
            logger.info(f"Match over after {round_number} rounds: {self.status.value}")
        else:
            self._update_state(player_action, opponent_action)

        return TurnResult(
            success=True,
            round=round_number,
            player_action=player_action,
            opponent_action=opponent_action,
            resolution=resolution,
            status=self.status,
        )

    def _update_state(self, player_action: ActionId, opponent_action: ActionId) -> None:
        self.player_state = PlayerState(
            energy=apply_energy_delta(self.player_state.energy, player_action),
            last_action=player_action,
            health=self.player_state.health,
        )
        self.opponent_state = PlayerState(
            energy=apply_energy_delta(self.opponent_state.energy, opponent_action),
            last_action=opponent_action,
            health=self.opponent_state.health,
        )
        self.round += 1

    def _rejected(
        self,
        error: str,
        player_action: Optional[ActionId] = None,
        opponent_action: Optional[ActionId] = None,
        rejected_side: Optional[Side] = None,
    ) -> TurnResult:
        logger.warning(f"Round {self.round} rejected: {error}")
        return TurnResult(
            success=False,
            round=self.round,
            player_action=player_action,
            opponent_action=opponent_action,
            status=self.status,
            error=error,
            rejected_side=rejected_side,
        )

    @staticmethod
    def _unaffordable_message(who: str, action: ActionId, energy: int) -> str:
        details = lookup(action)
        return f"{who} cannot afford {details.label}. Need {details.min_energy} energy, have {energy}"
