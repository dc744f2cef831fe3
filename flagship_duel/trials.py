#!/usr/bin/env python3
"""
Trial Runner for the Flagship Duel simulator.

Plays many independent matches between the same two command centers and
tallies how often each side hit the other's flagship.

Usage:
    runner = TrialRunner(your_cc, enemy_cc)
    ratio = runner.run(100_000)
    summary = runner.summary()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .command import CommandCenter
from .engine import MatchEngine, MatchOutcome
from .report import OutcomeTier, classify_ratio, win_ratio


DEFAULT_TRIALS = 100_000


# =============================================================================
# TRIAL SUMMARY
# =============================================================================

@dataclass(frozen=True)
class TrialSummary:
    """
    Aggregated result of a run.

    Attributes:
        your_command_center: Name of your command center.
        enemy_command_center: Name of the enemy command center.
        trials: Matches played.
        your_wins: Matches where your torpedo hit the enemy flagship.
        enemy_wins: Matches where the enemy torpedo hit your flagship.
        mutual_hits: Matches where both flagships were hit.
        no_hits: Matches where neither flagship was hit.
    """
    your_command_center: str
    enemy_command_center: str
    trials: int
    your_wins: int
    enemy_wins: int
    mutual_hits: int
    no_hits: int

    @property
    def ratio(self) -> float:
        return win_ratio(self.your_wins, self.enemy_wins)

    @property
    def tier(self) -> OutcomeTier:
        return classify_ratio(self.ratio)

    @property
    def your_win_rate(self) -> float:
        return self.your_wins / self.trials if self.trials > 0 else 0.0

    @property
    def enemy_win_rate(self) -> float:
        return self.enemy_wins / self.trials if self.trials > 0 else 0.0

    def to_dict(self) -> dict:
        return {
            "your_command_center": self.your_command_center,
            "enemy_command_center": self.enemy_command_center,
            "trials": self.trials,
            "your_wins": self.your_wins,
            "enemy_wins": self.enemy_wins,
            "mutual_hits": self.mutual_hits,
            "no_hits": self.no_hits,
            # inf/nan are not valid JSON numbers
            "ratio": str(self.ratio),
            "tier": self.tier.value,
        }


# =============================================================================
# TRIAL RUNNER
# =============================================================================

class TrialRunner:
    """
    Runs repeated matches and keeps the win counters.

    The two command centers are reused for every match, so any state
    they keep carries across trials. Flagships are placed afresh each
    match by the engine.
    """

    def __init__(
        self,
        your_cc: CommandCenter,
        enemy_cc: CommandCenter,
        engine: Optional[MatchEngine] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
        progress_interval: int = 0
    ) -> None:
        """
        Initialize the trial runner.

        Args:
            your_cc: Command center for your side.
            enemy_cc: Command center for the enemy side.
            engine: Match engine (a default engine is created if None).
            progress_callback: Function(trials_done, trials_total) called
                every progress_interval trials.
            progress_interval: Trials between progress callbacks (0 = off).
        """
        self.your_cc = your_cc
        self.enemy_cc = enemy_cc
        self.engine = engine or MatchEngine()
        self.progress_callback = progress_callback
        self.progress_interval = progress_interval
        self.reset()

    def reset(self) -> None:
        """Zero all counters."""
        self.trials_run = 0
        self.your_wins = 0
        self.enemy_wins = 0
        self.mutual_hits = 0
        self.no_hits = 0

    def run(self, n: int) -> float:
        """
        Play n matches and return your wins divided by the enemy's wins.

        Args:
            n: Number of matches, a positive integer.

        Returns:
            The win ratio (inf if the enemy never won, nan if nobody did).
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise ValueError(f"Trial count must be a positive integer, got {n!r}")

        self.reset()
        for _ in range(n):
            self._record(self.engine.play(self.your_cc, self.enemy_cc))

            if (self.progress_callback and self.progress_interval > 0
                    and self.trials_run % self.progress_interval == 0):
                self.progress_callback(self.trials_run, n)

        return self.ratio

    def _record(self, outcome: MatchOutcome) -> None:
        """Tally one match outcome."""
        self.trials_run += 1
        if outcome.you_won:
            self.your_wins += 1
        if outcome.enemy_won:
            self.enemy_wins += 1
        if outcome.you_won and outcome.enemy_won:
            self.mutual_hits += 1
        elif not outcome.you_won and not outcome.enemy_won:
            self.no_hits += 1

    @property
    def ratio(self) -> float:
        return win_ratio(self.your_wins, self.enemy_wins)

    def summary(self) -> TrialSummary:
        """Snapshot of the counters as a TrialSummary."""
        return TrialSummary(
            your_command_center=self.your_cc.name,
            enemy_command_center=self.enemy_cc.name,
            trials=self.trials_run,
            your_wins=self.your_wins,
            enemy_wins=self.enemy_wins,
            mutual_hits=self.mutual_hits,
            no_hits=self.no_hits,
        )


def run_matchup(
    your_cc: CommandCenter,
    enemy_cc: CommandCenter,
    trials: int = DEFAULT_TRIALS,
    engine: Optional[MatchEngine] = None
) -> TrialSummary:
    """
    Run a full matchup and return its summary.

    Args:
        your_cc: Command center for your side.
        enemy_cc: Command center for the enemy side.
        trials: Number of matches.
        engine: Match engine to use.

    Returns:
        TrialSummary of the run.
    """
    runner = TrialRunner(your_cc, enemy_cc, engine=engine)
    runner.run(trials)
    return runner.summary()
