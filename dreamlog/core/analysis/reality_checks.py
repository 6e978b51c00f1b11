"""
Module for aggregating daily reality check counts.
"""

import pandas as pd

from dreamlog.core.analysis.streaks import longest_streak
from dreamlog.core.models.output_models import DayCount, RealityCheckSummary


def aggregate_reality_checks(daily_logs):
    """
    Sum reality checks and find the most and least active logged days.

    Only days with a daily log are considered; ties go to the earliest date.

    Args:
        daily_logs: Sequence of DailyLog

    Returns:
        RealityCheckSummary: Zero totals and no active days when empty
    """
    if len(daily_logs) == 0:
        return RealityCheckSummary()

    data = pd.DataFrame({
        'date': [log.date for log in daily_logs],
        'count': [int(log.reality_checks) for log in daily_logs],
    }).sort_values('date', kind='mergesort').reset_index(drop=True)

    total = int(data['count'].sum())
    logged_days = len(data)

    # idxmax / idxmin return the first occurrence, which is the earliest date
    best_idx = data['count'].idxmax()
    worst_idx = data['count'].idxmin()

    return RealityCheckSummary(
        total=total,
        logged_days=logged_days,
        average_per_day=total / logged_days,
        most_active=DayCount(date=data.loc[best_idx, 'date'], count=int(data.loc[best_idx, 'count'])),
        least_active=DayCount(date=data.loc[worst_idx, 'date'], count=int(data.loc[worst_idx, 'count'])),
        longest_streak=longest_streak(log.date for log in daily_logs if log.reality_checks > 0),
    )
