"""
Module for mapping dream activity onto a month grid.
"""

import calendar
from collections import defaultdict
from datetime import date

from dreamlog.core.models.output_models import CalendarDay, DayStatus, MonthCalendar


def day_status(dreams_on_day):
    """Tag a day from its dreams; a single lucid dream makes it a lucid day."""
    if not dreams_on_day:
        return DayStatus.NO_ENTRY
    if any(d.is_lucid for d in dreams_on_day):
        return DayStatus.LUCID
    return DayStatus.DREAM


def render_month(dreams, year, month):
    """
    Build the day-by-day dream calendar for one month.

    Args:
        dreams: Sequence of DreamRecord
        year: Calendar year
        month: Calendar month, 1-12

    Returns:
        MonthCalendar: One CalendarDay per day of the month, no padding
    """
    first_weekday, days_in_month = calendar.monthrange(year, month)

    by_day = defaultdict(list)
    for dream in dreams:
        day = dream.created_at.date()
        if day.year == year and day.month == month:
            by_day[day.day].append(dream)

    days = [
        CalendarDay(
            date=date(year, month, day),
            status=day_status(by_day[day]),
            dream_count=len(by_day[day]),
        )
        for day in range(1, days_in_month + 1)
    ]
    return MonthCalendar(year=year, month=month, first_weekday=first_weekday, days=days)
