"""
Module for measuring how well each lucid dreaming technique works.
"""

from dreamlog.core.models.data_models import TechniqueOutcome
from dreamlog.core.models.output_models import TechniqueStats
from dreamlog.utils.constants import fallback_technique_recommendation, technique_recommendations

SUCCESSFUL_OUTCOMES = (TechniqueOutcome.PARTIAL_LUCID, TechniqueOutcome.FULL_LUCID)


def recommend(success_rate):
    """Advice for a technique given its success rate in percent."""
    for threshold, message in technique_recommendations:
        if success_rate > threshold:
            return message
    return fallback_technique_recommendation


def calculate_technique_effectiveness(practices):
    """
    Aggregate practice sessions per technique.

    A partial or full lucid outcome counts as a success.

    Args:
        practices: Sequence of TechniquePractice

    Returns:
        list: TechniqueStats in order of each technique's first practice
    """
    grouped = {}
    for practice in practices:
        grouped.setdefault(practice.technique, []).append(practice)

    results = []
    for technique, sessions in grouped.items():
        attempts = len(sessions)
        successes = sum(1 for p in sessions if p.outcome in SUCCESSFUL_OUTCOMES)
        levels = [
            p.control_level for p in sessions
            if p.outcome == TechniqueOutcome.FULL_LUCID and p.control_level is not None
        ]
        success_rate = successes / attempts * 100

        results.append(TechniqueStats(
            technique=technique,
            attempts=attempts,
            successes=successes,
            success_rate=success_rate,
            last_practiced=max(p.date for p in sessions),
            average_control_level=sum(levels) / len(levels) if levels else None,
            total_minutes=sum(p.duration_minutes for p in sessions),
            recommendation=recommend(success_rate),
        ))
    return results


def rank_techniques(stats):
    """
    Pick the most and least effective techniques.

    Returns:
        tuple: (best, worst) technique names, (None, None) with fewer than two
    """
    if len(stats) < 2:
        return None, None
    ordered = sorted(stats, key=lambda s: -s.success_rate)
    return ordered[0].technique, ordered[-1].technique
