#!/usr/bin/env python3
"""
Run a flagship duel between two command centers.

Usage:
    flagship-duel
    flagship-duel --trials 50000 --you baseline --enemy hidden_flagship
    flagship-duel --seed 42 --record recordings/duel.json --verbose
"""

import argparse
import sys
from typing import List, Optional

from .command import create_command_center, list_command_centers
from .config import load_config
from .engine import MatchEngine
from .recorder import MatchRecorder
from .report import format_details, format_report
from .rng import RandomSource
from .trials import TrialRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate flagship duels and compare two command centers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    flagship-duel --trials 100000
    flagship-duel --you baseline --enemy baseline --seed 7
    flagship-duel --config duel.json --record recordings/duel.json
        """,
    )

    # Matchup
    parser.add_argument(
        "--you",
        choices=list_command_centers(),
        default=None,
        help="Command center for your side (default: counter_fire)",
    )
    parser.add_argument(
        "--enemy",
        choices=list_command_centers(),
        default=None,
        help="Command center for the enemy side (default: hidden_flagship)",
    )

    # Run settings
    parser.add_argument(
        "--trials",
        type=int,
        default=None,
        help="Number of matches to simulate (default: 100000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file",
    )

    # Output
    parser.add_argument(
        "--record",
        default=None,
        help="Write a JSON recording of sampled matches to this path",
    )
    parser.add_argument(
        "--record-max-matches",
        type=int,
        default=None,
        help="Matches kept in the recording (default: 100)",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=None,
        help="Print progress every N trials in verbose mode",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available command centers and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print matchup details and win breakdown",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for name in list_command_centers():
            print(f"  {name:<18} {create_command_center(name).name}")
        return 0

    try:
        config = load_config(args.config).override(
            trials=args.trials,
            seed=args.seed,
            your_command_center=args.you,
            enemy_command_center=args.enemy,
            record_path=args.record,
            record_max_matches=args.record_max_matches,
            progress_interval=args.progress_interval,
        )
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    rng = RandomSource(config.seed)
    your_cc = create_command_center(config.your_command_center, rng)
    enemy_cc = create_command_center(config.enemy_command_center, rng)
    engine = MatchEngine(rng=rng)

    recorder = None
    if config.record_path:
        recorder = MatchRecorder(max_matches=config.record_max_matches)
        recorder.start_recording(your_cc.name, enemy_cc.name, config.trials, config.seed)
        recorder.attach(engine)

    def report_progress(done: int, total: int) -> None:
        print(f"  ... {done}/{total} trials")

    runner = TrialRunner(
        your_cc,
        enemy_cc,
        engine=engine,
        progress_callback=report_progress if args.verbose else None,
        progress_interval=config.progress_interval,
    )

    if args.verbose:
        print(f"Your command center:  {your_cc.name}")
        print(f"Enemy command center: {enemy_cc.name}")
        print(f"Trials: {config.trials}" + (f" (seed {config.seed})" if config.seed is not None else ""))

    runner.run(config.trials)
    summary = runner.summary()

    for line in format_report(summary):
        print(line)
    if args.verbose:
        for line in format_details(summary):
            print(line)

    if recorder:
        recorder.end_recording(summary)
        path = recorder.save(config.record_path)
        print(f"Recording saved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
