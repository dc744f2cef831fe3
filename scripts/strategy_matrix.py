#!/usr/bin/env python3
# /// script
# requires-python = ">=3.10"
# dependencies = ["numpy", "python-dotenv"]
# ///
"""
Strategy Matrix for Flagship Duel

Plays every registered command center against every other one (both
seats, since "you" always fire first) and prints the matrix of win
ratios. Row = your side, column = enemy side.
"""

import argparse
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from flagship_duel.command import create_command_center, list_command_centers
from flagship_duel.engine import MatchEngine
from flagship_duel.report import classify_ratio
from flagship_duel.rng import RandomSource
from flagship_duel.trials import TrialRunner


def build_matrix(names, trials, seed=None):
    """Win ratio of each (you, enemy) pairing as a square array."""
    rng = RandomSource(seed)
    engine = MatchEngine(rng=rng)
    ratios = np.zeros((len(names), len(names)))

    for i, you in enumerate(names):
        for j, enemy in enumerate(names):
            runner = TrialRunner(
                create_command_center(you, rng),
                create_command_center(enemy, rng),
                engine=engine,
            )
            ratios[i, j] = runner.run(trials)

    return ratios


def main():
    parser = argparse.ArgumentParser(description="Round-robin win ratio matrix")
    parser.add_argument("--trials", type=int, default=20000, help="Matches per pairing")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    names = list_command_centers()
    ratios = build_matrix(names, args.trials, args.seed)

    width = max(len(n) for n in names) + 2
    print("=" * 70)
    print(f"WIN RATIO MATRIX ({args.trials} trials per pairing)")
    print("=" * 70)
    print(" " * width + "".join(f"{n:>{width}}" for n in names))
    for i, you in enumerate(names):
        print(f"{you:<{width}}" + "".join(f"{r:>{width}.3f}" for r in ratios[i]))

    # Average ratio per strategy when seated as "you"
    print("\nMean ratio as your side:")
    means = np.nanmean(np.where(np.isinf(ratios), np.nan, ratios), axis=1)
    for name, mean in sorted(zip(names, means), key=lambda x: -x[1]):
        print(f"  {name:<{width}} {mean:.3f}  ({classify_ratio(mean).value})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
