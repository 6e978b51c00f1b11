"""Tests for technique effectiveness."""

from datetime import date

import pytest
from pydantic import ValidationError

from dreamlog.core.analysis.technique_metrics import (
    calculate_technique_effectiveness,
    rank_techniques,
    recommend,
)
from dreamlog.core.models import TechniqueOutcome, TechniquePractice


def practice(technique, day, outcome, level=None, minutes=10):
    return TechniquePractice(
        technique=technique,
        date=date(2024, 6, day),
        duration_minutes=minutes,
        outcome=outcome,
        control_level=level,
    )


class TestTechniqueEffectiveness:
    """Tests for per-technique aggregation."""

    def test_success_rate_counts_partial_and_full(self):
        practices = [
            practice("MILD", 1, TechniqueOutcome.FAILED),
            practice("MILD", 2, TechniqueOutcome.PARTIAL_LUCID),
            practice("MILD", 3, TechniqueOutcome.FULL_LUCID, level=4),
            practice("MILD", 4, TechniqueOutcome.UNATTEMPTED),
        ]
        [stats] = calculate_technique_effectiveness(practices)
        assert stats.technique == "MILD"
        assert stats.attempts == 4
        assert stats.successes == 2
        assert stats.success_rate == 50.0
        assert stats.average_control_level == 4.0
        assert stats.total_minutes == 40
        assert stats.recommendation == "Combine with another technique"

    def test_last_practiced_is_latest(self):
        practices = [
            practice("wbtb", 9, TechniqueOutcome.FAILED),
            practice("WBTB", 2, TechniqueOutcome.FAILED),
        ]
        [stats] = calculate_technique_effectiveness(practices)
        assert stats.technique == "WBTB"
        assert stats.last_practiced == date(2024, 6, 9)
        assert stats.average_control_level is None

    def test_order_of_first_practice(self):
        practices = [
            practice("RC", 1, TechniqueOutcome.FAILED),
            practice("FILD", 2, TechniqueOutcome.FULL_LUCID),
            practice("RC", 3, TechniqueOutcome.FAILED),
        ]
        assert [s.technique for s in calculate_technique_effectiveness(practices)] == ["RC", "FILD"]

    def test_empty(self):
        assert calculate_technique_effectiveness([]) == []


class TestRecommendation:

    @pytest.mark.parametrize("rate,message", [
        (100.0, "Continue using as primary technique"),
        (70.1, "Continue using as primary technique"),
        (70.0, "Combine with another technique"),
        (40.5, "Combine with another technique"),
        (40.0, "Try modifying approach or switch techniques"),
        (0.0, "Try modifying approach or switch techniques"),
    ])
    def test_thresholds(self, rate, message):
        assert recommend(rate) == message


class TestRankTechniques:

    def test_best_and_worst(self):
        practices = [
            practice("MILD", 1, TechniqueOutcome.FAILED),
            practice("WBTB", 2, TechniqueOutcome.FULL_LUCID),
            practice("RC", 3, TechniqueOutcome.PARTIAL_LUCID),
            practice("RC", 4, TechniqueOutcome.FAILED),
        ]
        assert rank_techniques(calculate_technique_effectiveness(practices)) == ("WBTB", "MILD")

    def test_single_technique(self):
        stats = calculate_technique_effectiveness([practice("MILD", 1, TechniqueOutcome.FAILED)])
        assert rank_techniques(stats) == (None, None)


class TestTechniquePracticeModel:

    def test_control_level_only_for_full_lucid(self):
        with pytest.raises(ValidationError):
            practice("MILD", 1, TechniqueOutcome.FAILED, level=3)

    def test_control_level_range(self):
        with pytest.raises(ValidationError):
            practice("MILD", 1, TechniqueOutcome.FULL_LUCID, level=6)
