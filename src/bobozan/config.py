"""Runtime configuration for Bobozan.

Settings come from environment variables with module-level defaults. Invalid
values raise ValueError naming the offending variable.
"""

import logging
import os
from typing import Optional

from bobozan.models.actions import Ruleset
from bobozan.parameters import INITIAL_ENERGY

# Default configuration (can be overridden via environment variables)
DEFAULT_RULESET = Ruleset.CLASSIC
DEFAULT_OPPONENT = "random"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_ruleset() -> Ruleset:
    """Get configured ruleset from BOBOZAN_RULESET (classic or tri_phase)."""
    value = os.environ.get("BOBOZAN_RULESET", DEFAULT_RULESET.value)
    normalized = value.lower().replace("-", "_").replace(" ", "_")
    if normalized == "triphase":
        normalized = Ruleset.TRI_PHASE.value
    try:
        return Ruleset(normalized)
    except ValueError:
        raise ValueError(
            f"BOBOZAN_RULESET must be one of {[r.value for r in Ruleset]}, got {value!r}"
        ) from None


def get_opponent_type() -> str:
    """Get configured opponent type from BOBOZAN_OPPONENT."""
    return os.environ.get("BOBOZAN_OPPONENT", DEFAULT_OPPONENT)


def get_random_seed() -> Optional[int]:
    """Get configured random seed from BOBOZAN_SEED (unset means unseeded)."""
    value = os.environ.get("BOBOZAN_SEED")
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"BOBOZAN_SEED must be an integer, got {value!r}") from None


def get_initial_energy() -> int:
    """Get configured starting energy from BOBOZAN_INITIAL_ENERGY."""
    value = os.environ.get("BOBOZAN_INITIAL_ENERGY")
    if value is None:
        return INITIAL_ENERGY
    try:
        energy = int(value)
    except ValueError:
        raise ValueError(f"BOBOZAN_INITIAL_ENERGY must be an integer, got {value!r}") from None
    if energy < 0:
        raise ValueError(f"BOBOZAN_INITIAL_ENERGY cannot be negative, got {energy}")
    return energy


def get_log_level() -> int:
    """Get configured log level from BOBOZAN_LOG_LEVEL (name or number)."""
    value = os.environ.get("BOBOZAN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"BOBOZAN_LOG_LEVEL is not a logging level: {value!r}")
    return level


def configure_logging(level: Optional[int] = None) -> None:
    """Install a root logging handler at the configured level."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
    )
