"""
Unit tests for win ratio classification and report formatting.

Run with: python -m pytest tests/test_report.py -v
"""

import math

import pytest

from flagship_duel.report import (
    DECISIVE_THRESHOLD,
    LOST_THRESHOLD,
    OutcomeTier,
    classify_ratio,
    format_details,
    format_ratio_line,
    format_report,
    win_ratio,
)
from flagship_duel.trials import TrialSummary


@pytest.fixture
def summary() -> TrialSummary:
    return TrialSummary(
        your_command_center="Counter-Fire Command Center",
        enemy_command_center="Hidden Flagship Command Center",
        trials=1000,
        your_wins=270,
        enemy_wins=200,
        mutual_hits=50,
        no_hits=580,
    )


class TestClassifyRatio:
    """Tests for tier boundaries."""

    @pytest.mark.parametrize("ratio,tier", [
        (0.0, OutcomeTier.LOST),
        (0.5, OutcomeTier.LOST),
        (0.999999, OutcomeTier.LOST),
        (1.0, OutcomeTier.MARGINAL_WIN),
        (1.1, OutcomeTier.MARGINAL_WIN),
        (1.249999, OutcomeTier.MARGINAL_WIN),
        (1.25, OutcomeTier.DECISIVE_WIN),
        (3.0, OutcomeTier.DECISIVE_WIN),
        (math.inf, OutcomeTier.DECISIVE_WIN),
    ])
    def test_boundaries(self, ratio, tier):
        assert classify_ratio(ratio) == tier

    def test_thresholds(self):
        assert LOST_THRESHOLD == 1.0
        assert DECISIVE_THRESHOLD == 1.25

    def test_nan_falls_through_to_decisive_win(self):
        # No wins on either side: nan fails both threshold comparisons
        assert classify_ratio(math.nan) == OutcomeTier.DECISIVE_WIN
        assert classify_ratio(win_ratio(0, 0)) == OutcomeTier.DECISIVE_WIN

    def test_tier_messages(self):
        assert OutcomeTier.LOST.message == "You lost! Improve your battle logic!"
        assert OutcomeTier.MARGINAL_WIN.message == "You won by a small margin! Can you do better?"
        assert OutcomeTier.DECISIVE_WIN.message == (
            "Congratulations! Your victory is undeniable. Good job!"
        )


class TestWinRatio:
    """Tests for the ratio of win counts."""

    def test_plain_division(self):
        assert win_ratio(5, 4) == pytest.approx(1.25)

    def test_zero_your_wins(self):
        assert win_ratio(0, 10) == 0.0

    def test_zero_enemy_wins(self):
        assert win_ratio(3, 0) == math.inf

    def test_no_wins_at_all(self):
        assert math.isnan(win_ratio(0, 0))


class TestFormatting:
    """Tests for report lines."""

    def test_ratio_line(self):
        assert format_ratio_line(1.35) == "Your wins to enemy's wins ratio is 1.35"

    def test_infinite_ratio_line(self):
        assert format_ratio_line(math.inf) == "Your wins to enemy's wins ratio is inf"

    def test_report(self, summary):
        assert format_report(summary) == [
            "Your wins to enemy's wins ratio is 1.35",
            "Congratulations! Your victory is undeniable. Good job!",
        ]

    def test_details(self, summary):
        details = format_details(summary)
        assert any("1000" in line for line in details)
        assert any("270 (27.00%)" in line for line in details)
        assert any("200 (20.00%)" in line for line in details)
