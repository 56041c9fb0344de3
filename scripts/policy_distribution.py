#!/usr/bin/env python3
"""
Opponent Policy Distribution for Bobozan

Samples the opponent policy at each energy level and prints how often each
action is chosen, then runs a batch of random-vs-random matches per ruleset.

Usage:
    python scripts/policy_distribution.py
    python scripts/policy_distribution.py --samples 20000 --max-energy 4 --seed 7
    python scripts/policy_distribution.py --ruleset tri_phase --games 1000
"""

import argparse
import random
from collections import Counter

from bobozan.models.actions import Ruleset, lookup
from bobozan.opponents.policy import choose_opponent_action
from bobozan.testing import run_batch


def sample_distribution(ruleset: Ruleset, energy: int, samples: int, rng: random.Random) -> Counter:
    """Count opponent choices at a fixed energy level."""
    return Counter(choose_opponent_action(energy, ruleset, rng) for _ in range(samples))


def print_distribution(ruleset: Ruleset, max_energy: int, samples: int, rng: random.Random):
    print(f"\n{'=' * 60}")
    print(f"POLICY DISTRIBUTION: {ruleset.value} ({samples} samples per level)")
    print("=" * 60)

    for energy in range(max_energy + 1):
        counts = sample_distribution(ruleset, energy, samples, rng)
        print(f"\nEnergy {energy}:")
        for action, count in counts.most_common():
            print(f"  {lookup(action).label:<20} {count / samples * 100:6.2f}%")


def print_batch(ruleset: Ruleset, games: int, seed):
    summary = run_batch(ruleset, "random", "random", num_games=games, seed=seed)
    print(f"\nRandom vs random ({ruleset.value}, {games} games):")
    print(f"  Player wins:   {summary.player_wins} ({summary.player_win_rate * 100:.1f}%)")
    print(f"  Opponent wins: {summary.opponent_wins} ({summary.opponent_win_rate * 100:.1f}%)")
    print(f"  Draws:         {summary.draws}")
    print(f"  Unfinished:    {summary.unfinished}")
    print(f"  Rounds: mean {summary.mean_rounds:.1f}, median {summary.median_rounds}")


def main():
    """Print policy distributions and batch results."""
    parser = argparse.ArgumentParser(description="Sample the opponent policy")
    parser.add_argument("--ruleset", choices=[r.value for r in Ruleset], default=None,
                        help="Only sample one ruleset (default: both)")
    parser.add_argument("--samples", type=int, default=10000,
                        help="Samples per energy level (default: 10000)")
    parser.add_argument("--max-energy", type=int, default=3,
                        help="Highest energy level to sample (default: 3)")
    parser.add_argument("--games", type=int, default=500,
                        help="Random-vs-random matches per ruleset (default: 500)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducibility")
    args = parser.parse_args()

    rulesets = [Ruleset(args.ruleset)] if args.ruleset else list(Ruleset)
    rng = random.Random(args.seed)

    for ruleset in rulesets:
        print_distribution(ruleset, args.max_energy, args.samples, rng)
        if args.games > 0:
            print_batch(ruleset, args.games, args.seed)


if __name__ == "__main__":
    main()
