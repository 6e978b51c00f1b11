"""
Module for calculating dream statistics over the journal.
"""

import logging
from datetime import timedelta

import pandas as pd

from dreamlog.core.analysis.streaks import longest_streak
from dreamlog.core.analysis.text_analysis import rank_frequencies
from dreamlog.core.models.output_models import DreamStatistics, PeriodCount, RecentDreamSummary
from dreamlog.utils.constants import default_values

logger = logging.getLogger(__name__)


def _dreams_frame(dreams):
    """Build a DataFrame with one row per dream, keyed by creation date."""
    return pd.DataFrame({
        'day': pd.to_datetime([d.created_at.date() for d in dreams]),
        'is_lucid': [bool(d.is_lucid) for d in dreams],
        'words': [len(d.content.split()) for d in dreams],
    })


def _period_counts(data, keys):
    """Count total and lucid dreams per period key, in chronological order."""
    grouped = data.groupby(keys, sort=True)['is_lucid'].agg(['size', 'sum'])
    return [
        PeriodCount(period=str(period), total=int(row['size']), lucid=int(row['sum']))
        for period, row in grouped.iterrows()
    ]


def lucid_percentage(total, lucid):
    """Percentage of lucid dreams, 0 when there are no dreams."""
    if total == 0:
        return 0.0
    return lucid / total * 100


def common_dream_signs(dreams, top_n=None):
    """Rank dream signs recorded on lucid dreams."""
    signs = [
        d.dream_sign.strip().lower()
        for d in dreams
        if d.is_lucid and d.dream_sign and d.dream_sign.strip()
    ]
    return rank_frequencies(signs, top_n)


def calculate_dream_statistics(dreams, top_n=None):
    """
    Calculate key dream metrics for the journal.

    Args:
        dreams: Sequence of DreamRecord
        top_n: Number of dream signs to rank

    Returns:
        DreamStatistics: Totals, lucidity, per-period counts and dream signs
    """
    top_n = default_values['top_n'] if top_n is None else top_n

    if len(dreams) == 0:
        return DreamStatistics()

    data = _dreams_frame(dreams)

    total = len(data)
    lucid = int(data['is_lucid'].sum())

    # Dream-days: calendar days with at least one dream
    per_day = data.groupby('day')['is_lucid'].any()
    dream_days = len(per_day)
    lucid_days = int(per_day.sum())

    total_words = int(data['words'].sum())

    iso = data['day'].dt.isocalendar()
    week_keys = [f"{int(y)}-W{int(w):02d}" for y, w in zip(iso['year'], iso['week'])]

    stats = DreamStatistics(
        total_dreams=total,
        lucid_dreams=lucid,
        lucid_percentage=lucid_percentage(total, lucid),
        dream_days=dream_days,
        lucid_dream_days=lucid_days,
        lucidity_rate=lucid_days / dream_days,
        total_words=total_words,
        average_words_per_dream=total_words / total,
        daily_counts=_period_counts(data, data['day'].dt.strftime('%Y-%m-%d')),
        weekly_counts=_period_counts(data, pd.Series(week_keys, index=data.index)),
        monthly_counts=_period_counts(data, data['day'].dt.strftime('%Y-%m')),
        common_dream_signs=common_dream_signs(dreams, top_n),
        longest_journal_streak=longest_streak(d.created_at.date() for d in dreams),
    )

    logger.debug(f"Dream statistics: {total} dreams, {lucid} lucid over {dream_days} days")
    return stats


def summarize_recent_dreams(dreams, reference_date, days=None):
    """
    Summarize dreams logged in the days leading up to a reference date.

    The window covers `days` calendar days ending on reference_date inclusive.
    """
    days = default_values['recent_days'] if days is None else days
    start_date = reference_date - timedelta(days=days - 1)

    recent = [d for d in dreams if start_date <= d.created_at.date() <= reference_date]
    return RecentDreamSummary(
        start_date=start_date,
        end_date=reference_date,
        dream_count=len(recent),
        lucid_count=sum(1 for d in recent if d.is_lucid),
        total_words=sum(len(d.content.split()) for d in recent),
    )
