"""
Module for calculating sleep metrics and the sleep quality / lucidity breakdown.
"""

import logging

import pandas as pd

from dreamlog.core.models.output_models import NightlySleep, QualityLucidityBucket, SleepStatistics
from dreamlog.utils.constants import default_values

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_HOUR = 60 * 60


def _seconds_since_midnight(t):
    return t.hour * 3600 + t.minute * 60 + t.second


def sleep_duration_seconds(log):
    """Whole seconds between bedtime and wake time, wrapping past midnight."""
    return (_seconds_since_midnight(log.wake_time) - _seconds_since_midnight(log.bedtime)) % SECONDS_PER_DAY


def sleep_duration_hours(log):
    """Sleep duration of a daily log in fractional hours."""
    return sleep_duration_seconds(log) / SECONDS_PER_HOUR


def _logs_frame(daily_logs):
    return pd.DataFrame({
        'date': [log.date for log in daily_logs],
        'duration_seconds': [sleep_duration_seconds(log) for log in daily_logs],
        'quality': [int(log.quality) for log in daily_logs],
    })


def _dream_days_frame(dreams):
    """One row per dream-day with whether any dream of that day was lucid."""
    data = pd.DataFrame({
        'date': [d.created_at.date() for d in dreams],
        'is_lucid': [bool(d.is_lucid) for d in dreams],
    })
    return data.groupby('date', as_index=False)['is_lucid'].any()


def quality_lucidity_breakdown(daily_logs, dreams):
    """
    Bucket dream-days by the sleep quality logged for that night.

    A dream-day counts when the date has both a daily log and at least one
    dream; it is a lucid day when any of its dreams was lucid.

    Returns:
        list: One QualityLucidityBucket per quality level, lowest first.
              Buckets without observations report lucidity_rate None.
    """
    levels = range(default_values['min_quality'], default_values['max_quality'] + 1)

    if len(daily_logs) == 0 or len(dreams) == 0:
        return [QualityLucidityBucket(quality=q) for q in levels]

    merged = pd.merge(_logs_frame(daily_logs), _dream_days_frame(dreams), on='date', how='inner')
    grouped = merged.groupby('quality')['is_lucid'].agg(['size', 'sum'])

    buckets = []
    for quality in levels:
        if quality in grouped.index:
            dream_days = int(grouped.loc[quality, 'size'])
            lucid_days = int(grouped.loc[quality, 'sum'])
            rate = lucid_days / dream_days
        else:
            dream_days, lucid_days, rate = 0, 0, None
        buckets.append(QualityLucidityBucket(
            quality=quality,
            dream_days=dream_days,
            lucid_days=lucid_days,
            lucidity_rate=rate,
        ))
    return buckets


def calculate_sleep_statistics(daily_logs, dreams=()):
    """
    Calculate key sleep metrics over the daily logs.

    Averages are taken from integer sums so the result does not depend on
    the order of the logs.

    Args:
        daily_logs: Sequence of DailyLog
        dreams: Sequence of DreamRecord, used for the lucidity breakdown

    Returns:
        SleepStatistics: None marks metrics with no data
    """
    if len(daily_logs) == 0:
        return SleepStatistics(quality_vs_lucidity=quality_lucidity_breakdown(daily_logs, dreams))

    data = _logs_frame(daily_logs).sort_values('date', kind='mergesort')
    nights = len(data)

    metrics = {
        'logged_nights': nights,
        'average_duration_hours': int(data['duration_seconds'].sum()) / nights / SECONDS_PER_HOUR,
        'min_duration_hours': int(data['duration_seconds'].min()) / SECONDS_PER_HOUR,
        'max_duration_hours': int(data['duration_seconds'].max()) / SECONDS_PER_HOUR,
        'average_quality': int(data['quality'].sum()) / nights,
        'nightly_durations': [
            NightlySleep(
                date=row.date,
                duration_hours=int(row.duration_seconds) / SECONDS_PER_HOUR,
                quality=int(row.quality),
            )
            for row in data.itertuples(index=False)
        ],
        'quality_vs_lucidity': quality_lucidity_breakdown(daily_logs, dreams),
    }

    # Nights followed by at least one lucid dream
    lucid_dates = {d.created_at.date() for d in dreams if d.is_lucid}
    lucid_nights = data[data['date'].isin(lucid_dates)]
    metrics['lucid_nights'] = len(lucid_nights)
    metrics['lucid_night_rate'] = len(lucid_nights) / nights
    if len(lucid_nights) > 0:
        metrics['average_quality_on_lucid_nights'] = int(lucid_nights['quality'].sum()) / len(lucid_nights)

    logger.debug(f"Sleep statistics over {nights} nights")
    return SleepStatistics(**metrics)
