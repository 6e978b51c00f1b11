"""Tests for sleep statistics and the quality / lucidity breakdown."""

import random
from datetime import date

import pytest

from dreamlog.core.analysis.sleep_metrics import (
    calculate_sleep_statistics,
    quality_lucidity_breakdown,
    sleep_duration_hours,
)

from conftest import make_dream, make_log


class TestSleepDuration:
    """Tests for per-night duration."""

    def test_across_midnight(self):
        """23:00 to 07:00 is eight hours."""
        assert sleep_duration_hours(make_log(date(2024, 2, 1), "23:00", "07:00")) == 8.0

    def test_same_day(self):
        assert sleep_duration_hours(make_log(date(2024, 2, 1), "01:15", "09:45")) == 8.5

    def test_equal_times(self):
        assert sleep_duration_hours(make_log(date(2024, 2, 1), "22:00", "22:00")) == 0.0


class TestSleepStatistics:
    """Tests for averages over the daily logs."""

    def test_empty_logs_report_no_data(self):
        stats = calculate_sleep_statistics([], [])
        assert stats.logged_nights == 0
        assert stats.lucid_night_rate is None
        assert stats.average_duration_hours is None
        assert stats.average_quality is None
        assert stats.min_duration_hours is None
        assert stats.nightly_durations == []
        assert len(stats.quality_vs_lucidity) == 5
        assert all(b.lucidity_rate is None for b in stats.quality_vs_lucidity)

    def test_averages(self):
        logs = [
            make_log(date(2024, 2, 1), "23:00", "07:00", quality=4),
            make_log(date(2024, 2, 2), "00:00", "06:00", quality=2),
        ]
        stats = calculate_sleep_statistics(logs)
        assert stats.logged_nights == 2
        assert stats.average_duration_hours == 7.0
        assert stats.min_duration_hours == 6.0
        assert stats.max_duration_hours == 8.0
        assert stats.average_quality == 3.0

    def test_nightly_durations_sorted_by_date(self):
        logs = [
            make_log(date(2024, 2, 3), "22:00", "06:00"),
            make_log(date(2024, 2, 1), "23:30", "07:00"),
        ]
        stats = calculate_sleep_statistics(logs)
        assert [n.date for n in stats.nightly_durations] == [date(2024, 2, 1), date(2024, 2, 3)]
        assert stats.nightly_durations[0].duration_hours == 7.5

    def test_average_invariant_under_reordering(self):
        """Shuffling the logs never changes the averages."""
        rng = random.Random(7)
        logs = [
            make_log(date(2024, 3, day), f"{rng.randint(20, 23):02d}:{rng.randint(0, 59):02d}",
                     f"{rng.randint(5, 9):02d}:{rng.randint(0, 59):02d}", quality=rng.randint(1, 5))
            for day in range(1, 29)
        ]
        expected = calculate_sleep_statistics(logs)
        for _ in range(5):
            shuffled = list(logs)
            rng.shuffle(shuffled)
            stats = calculate_sleep_statistics(shuffled)
            assert stats.average_duration_hours == expected.average_duration_hours
            assert stats.average_quality == expected.average_quality

    def test_lucid_nights(self):
        logs = [
            make_log(date(2024, 2, 1), quality=5),
            make_log(date(2024, 2, 2), quality=3),
            make_log(date(2024, 2, 3), quality=1),
        ]
        dreams = [
            make_dream(1, date(2024, 2, 1), lucid=True),
            make_dream(2, date(2024, 2, 2), lucid=True),
            make_dream(3, date(2024, 2, 3)),
        ]
        stats = calculate_sleep_statistics(logs, dreams)
        assert stats.lucid_nights == 2
        assert stats.lucid_night_rate == pytest.approx(2 / 3)
        assert stats.average_quality_on_lucid_nights == 4.0

    def test_no_lucid_nights(self):
        stats = calculate_sleep_statistics([make_log(date(2024, 2, 1))], [make_dream(1, date(2024, 2, 1))])
        assert stats.lucid_nights == 0
        assert stats.lucid_night_rate == 0.0
        assert stats.average_quality_on_lucid_nights is None


class TestQualityLucidityBreakdown:
    """Tests for the bucketed quality vs lucidity table."""

    def test_buckets(self):
        logs = [
            make_log(date(2024, 4, 1), quality=5),
            make_log(date(2024, 4, 2), quality=5),
            make_log(date(2024, 4, 3), quality=2),
            make_log(date(2024, 4, 4), quality=4),
        ]
        dreams = [
            make_dream(1, date(2024, 4, 1), lucid=True),
            make_dream(2, date(2024, 4, 1)),
            make_dream(3, date(2024, 4, 2)),
            make_dream(4, date(2024, 4, 3)),
            # no log on this date, so it is not observed
            make_dream(5, date(2024, 4, 9), lucid=True),
        ]
        buckets = {b.quality: b for b in quality_lucidity_breakdown(logs, dreams)}

        assert list(buckets) == [1, 2, 3, 4, 5]
        assert (buckets[5].dream_days, buckets[5].lucid_days, buckets[5].lucidity_rate) == (2, 1, 0.5)
        assert (buckets[2].dream_days, buckets[2].lucid_days, buckets[2].lucidity_rate) == (1, 0, 0.0)
        # a log without dreams is not a dream-day
        assert buckets[4].dream_days == 0
        assert buckets[4].lucidity_rate is None
        assert buckets[1].lucidity_rate is None

    def test_rate_bounded(self):
        logs = [make_log(date(2024, 4, d), quality=(d % 5) + 1) for d in range(1, 11)]
        dreams = [make_dream(d, date(2024, 4, d), lucid=d % 2 == 0) for d in range(1, 11)]
        for bucket in quality_lucidity_breakdown(logs, dreams):
            assert bucket.lucidity_rate == pytest.approx(bucket.lucid_days / bucket.dream_days)
            assert 0.0 <= bucket.lucidity_rate <= 1.0
