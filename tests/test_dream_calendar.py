"""Tests for the month calendar."""

from datetime import date

import pytest

from dreamlog.core.analysis.dream_calendar import render_month
from dreamlog.core.models import DayStatus

from conftest import make_dream


class TestRenderMonth:
    """Tests for day tagging and month boundaries."""

    def test_empty_month_all_no_entry(self):
        calendar = render_month([], 2024, 2)
        assert len(calendar.days) == 29
        assert all(day.status == DayStatus.NO_ENTRY for day in calendar.days)

    def test_lucid_takes_precedence(self, january_dreams):
        """Day 1 has a lucid dream among three; day 2 only a regular dream."""
        calendar = render_month(january_dreams, 2024, 1)
        assert calendar.days[0].status == DayStatus.LUCID
        assert calendar.days[0].dream_count == 3
        assert calendar.days[1].status == DayStatus.DREAM
        assert calendar.days[2].status == DayStatus.NO_ENTRY

    def test_one_entry_per_day_no_padding(self):
        calendar = render_month([], 2023, 4)
        assert [d.date for d in calendar.days] == [date(2023, 4, day) for day in range(1, 31)]
        # 1 April 2023 was a Saturday
        assert calendar.first_weekday == 5

    def test_other_months_ignored(self):
        dreams = [
            make_dream(1, date(2024, 1, 31), lucid=True),
            make_dream(2, date(2024, 3, 1)),
            make_dream(3, date(2023, 2, 10)),
        ]
        calendar = render_month(dreams, 2024, 2)
        assert all(day.status == DayStatus.NO_ENTRY for day in calendar.days)

    @pytest.mark.parametrize("month,days", [(1, 31), (2, 28), (4, 30), (12, 31)])
    def test_month_lengths(self, month, days):
        assert len(render_month([], 2023, month).days) == days
