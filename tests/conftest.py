"""
Pytest fixtures for dream journal analytics tests.
"""

from datetime import date, datetime, time

import matplotlib
import pytest

from dreamlog.core.models import DailyLog, DreamRecord, JournalSnapshot

matplotlib.use("Agg")


def make_dream(id, day, content="", lucid=False, sign=None, title="", hour=7, tags=()):
    """Build a DreamRecord; lucid dreams get a default dream sign."""
    if lucid and sign is None:
        sign = "flying"
    return DreamRecord(
        id=id,
        created_at=datetime.combine(day, time(hour, 0)),
        title=title,
        content=content,
        tags=tags,
        is_lucid=lucid,
        dream_sign=sign,
    )


def make_log(day, bedtime="23:00", wake="07:00", quality=3, checks=0):
    """Build a DailyLog from HH:MM strings."""
    return DailyLog(
        date=day,
        bedtime=time.fromisoformat(bedtime),
        wake_time=time.fromisoformat(wake),
        quality=quality,
        reality_checks=checks,
    )


@pytest.fixture
def january_dreams():
    """Three dreams on 2024-01-01 (one lucid), one non-lucid on 2024-01-02."""
    return (
        make_dream(1, date(2024, 1, 1), "A red house by the sea"),
        make_dream(2, date(2024, 1, 1), "Flying over the red house", lucid=True, sign="Flying"),
        make_dream(3, date(2024, 1, 1), "Teeth falling out"),
        make_dream(4, date(2024, 1, 2), "Lost in a school hallway"),
    )


@pytest.fixture
def empty_snapshot():
    return JournalSnapshot()


@pytest.fixture
def january_snapshot(january_dreams):
    logs = (
        make_log(date(2024, 1, 1), quality=5, checks=4),
        make_log(date(2024, 1, 2), bedtime="00:30", wake="06:30", quality=2, checks=1),
        make_log(date(2024, 1, 3), quality=4, checks=0),
    )
    return JournalSnapshot(dreams=january_dreams, daily_logs=logs)
