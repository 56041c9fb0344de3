"""Simulation tools for Bobozan.

Usage:
    from bobozan.testing import run_batch

    summary = run_batch("tri_phase", "random", "random", num_games=500, seed=1)
    print(summary.to_dict())
"""

from .game_runner import BatchSummary, GameResult, GameRunner, run_batch

__all__ = [
    "BatchSummary",
    "GameResult",
    "GameRunner",
    "run_batch",
]
