"""
Outcome classification and reporting for duel runs.

A run is judged on the ratio of your wins to the enemy's wins:
- below 1.0: lost
- 1.0 up to (not including) 1.25: won by a small margin
- 1.25 and above: decisive victory
"""

import math
from enum import Enum
from typing import Any, List

LOST_THRESHOLD = 1.0
DECISIVE_THRESHOLD = 1.25


class OutcomeTier(Enum):
    """Tiers a win ratio falls into."""
    LOST = "lost"
    MARGINAL_WIN = "marginal_win"
    DECISIVE_WIN = "decisive_win"

    @property
    def message(self) -> str:
        return TIER_MESSAGES[self]


TIER_MESSAGES = {
    OutcomeTier.LOST: "You lost! Improve your battle logic!",
    OutcomeTier.MARGINAL_WIN: "You won by a small margin! Can you do better?",
    OutcomeTier.DECISIVE_WIN: "Congratulations! Your victory is undeniable. Good job!",
}


def win_ratio(your_wins: int, enemy_wins: int) -> float:
    """
    Ratio of your wins to the enemy's wins.

    An enemy without wins gives inf, or nan when neither side won.
    """
    if enemy_wins == 0:
        return math.inf if your_wins > 0 else math.nan
    return your_wins / enemy_wins


def classify_ratio(ratio: float) -> OutcomeTier:
    """
    Classify a win ratio into a tier.

    nan (no wins on either side) fails both threshold comparisons and
    falls through to a decisive win.
    """
    if ratio < LOST_THRESHOLD:
        return OutcomeTier.LOST
    if ratio < DECISIVE_THRESHOLD:
        return OutcomeTier.MARGINAL_WIN
    return OutcomeTier.DECISIVE_WIN


def format_ratio_line(ratio: float) -> str:
    return f"Your wins to enemy's wins ratio is {ratio}"


def format_report(summary: Any) -> List[str]:
    """
    Human-readable lines for a finished run.

    Args:
        summary: TrialSummary of the run

    Returns:
        The ratio line followed by the tier message
    """
    return [format_ratio_line(summary.ratio), summary.tier.message]


def format_details(summary: Any) -> List[str]:
    """Verbose breakdown of a run's counters."""
    return [
        f"  Trials:          {summary.trials}",
        f"  Your wins:       {summary.your_wins} ({summary.your_win_rate * 100:.2f}%)",
        f"  Enemy wins:      {summary.enemy_wins} ({summary.enemy_win_rate * 100:.2f}%)",
        f"  Both hit:        {summary.mutual_hits}",
        f"  No hits:         {summary.no_hits}",
    ]
