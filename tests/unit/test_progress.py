"""
Unit tests for goal progress and the week summary.
"""

from datetime import date

import pytest

from domain.models import Entry, Goals
from domain.services import goal_progress, last_n_dates, week_summary


@pytest.mark.unit
class TestGoalProgress:
    """Tests for goal_progress."""

    @pytest.mark.parametrize(
        "value,target,expected",
        [
            (0, 20, 0),
            (5, 20, 25),
            (20, 20, 100),
            (45, 20, 100),
            (1, 3, 33),
            (21, 40, 53),  # 52.5 rounds up
            (5, 0, 0),
            (5, -1, 0),
        ],
    )
    def test_progress_values(self, value, target, expected):
        assert goal_progress(value, target) == expected


@pytest.mark.unit
class TestWeekSummary:
    """Tests for last_n_dates and week_summary."""

    def test_last_n_dates_oldest_first(self):
        assert last_n_dates(3, date(2024, 3, 1)) == ["2024-02-28", "2024-02-29", "2024-03-01"]

    def test_summary_covers_every_day(self):
        goals = Goals(pushups=20, situps=10, run_m=1000)
        entries = [
            Entry(id="e2", date="2024-01-07", pushups=10, situps=10, run_m=250),
            Entry(id="e1", date="2024-01-03", pushups=40),
        ]

        summary = week_summary(entries, goals, date(2024, 1, 7))

        assert [s.date for s in summary][0] == "2024-01-01"
        assert [s.date for s in summary][-1] == "2024-01-07"
        assert len(summary) == 7

        today = summary[-1]
        assert today.entry.id == "e2"
        assert today.progress == {"pushups": 50, "situps": 100, "run_m": 25}

        jan3 = summary[2]
        assert jan3.progress["pushups"] == 100

        empty = summary[1]
        assert empty.has_entry is False
        assert empty.progress == {"pushups": 0, "situps": 0, "run_m": 0}

    def test_custom_window(self):
        summary = week_summary([], Goals(), date(2024, 1, 7), days=3)
        assert [s.date for s in summary] == ["2024-01-05", "2024-01-06", "2024-01-07"]
