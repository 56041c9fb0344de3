"""Base opponent interface for Bobozan.

This module defines the abstract base class for all opponent types, the
built-in opponents and the factory functions used by the CLI and the
simulation runner.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, Literal, Optional

from bobozan.models.actions import ActionId, Ruleset, get_action_by_name
from bobozan.models.state import PlayerState
from bobozan.opponents.policy import choose_opponent_action


class Opponent(ABC):
    """Abstract base class for all opponent types.

    Opponents only read their own state; the turn controller owns and mutates it.
    """

    def __init__(self, name: str = "Opponent"):
        """Initialize opponent.

        Args:
            name: Display name for the opponent
        """
        self.name = name

    @abstractmethod
    def choose_action(self, state: PlayerState, ruleset: Ruleset) -> ActionId:
        """Choose this round's action.

        Args:
            state: The opponent's own state (read-only)
            ruleset: Active ruleset

        Returns:
            The chosen action
        """
        pass

    def reset(self) -> None:
        """Return to the start-of-match state. Stateless opponents do nothing."""


class RandomPolicyOpponent(Opponent):
    """Weighted-random opponent driven by the energy-budget policy."""

    def __init__(self, random_seed: Optional[int] = None, name: str = "Sparring Partner"):
        super().__init__(name=name)
        self._random = random.Random(random_seed)

    def choose_action(self, state: PlayerState, ruleset: Ruleset) -> ActionId:
        return choose_opponent_action(state.energy, ruleset, rng=self._random)


class ScriptedOpponent(Opponent):
    """Replays a fixed sequence of actions, wrapping around at the end.

    Entries may be identifiers ("ICE_ATK_T2") or labels ("Ice Arrow"). The
    script is trusted: affordability is checked by the turn controller.
    """

    def __init__(self, actions: Iterable[ActionId | str], name: str = "Scripted"):
        super().__init__(name=name)
        self.actions: list[ActionId] = []
        for entry in actions:
            action = get_action_by_name(entry)
            if action is None:
                raise ValueError(f"Unknown action in script: {entry!r}")
            self.actions.append(action)
        if not self.actions:
            raise ValueError("ScriptedOpponent needs at least one action")
        self._index = 0

    def choose_action(self, state: PlayerState, ruleset: Ruleset) -> ActionId:
        action = self.actions[self._index % len(self.actions)]
        self._index += 1
        return action

    def reset(self) -> None:
        self._index = 0


class TurtleOpponent(Opponent):
    """Alternates Charge with the ruleset's free guard and never attacks."""

    GUARDS: dict[Ruleset, ActionId] = {
        Ruleset.CLASSIC: ActionId.DEFEND,
        Ruleset.TRI_PHASE: ActionId.ICE_DEF_ELE,
    }

    def __init__(self, name: str = "Turtle"):
        super().__init__(name=name)
        self._charging = True

    def choose_action(self, state: PlayerState, ruleset: Ruleset) -> ActionId:
        action = ActionId.CHARGE if self._charging else self.GUARDS[Ruleset(ruleset)]
        self._charging = not self._charging
        return action

    def reset(self) -> None:
        self._charging = True


# Type alias for opponent types
OpponentType = Literal["random", "charger", "turtle"]


def get_opponent_by_type(
    opponent_type: OpponentType | str,
    random_seed: Optional[int] = None,
) -> Opponent:
    """Create opponent by type name.

    Args:
        opponent_type: Type of opponent to create
        random_seed: Seed for opponents that use randomness

    Returns:
        Opponent instance

    Raises:
        ValueError: If opponent type is unknown
    """
    type_name = opponent_type.lower().replace("-", "_").replace(" ", "_")

    if type_name in ("random", "random_policy", "policy"):
        return RandomPolicyOpponent(random_seed=random_seed)
    if type_name == "charger":
        return ScriptedOpponent([ActionId.CHARGE], name="Charger")
    if type_name == "turtle":
        return TurtleOpponent()

    raise ValueError(
        f"Unknown opponent type: {opponent_type}. "
        f"Valid types: {list_opponent_types()}"
    )


def list_opponent_types() -> list[str]:
    """List all available opponent type names."""
    return ["random", "charger", "turtle"]
