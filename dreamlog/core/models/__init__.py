"""
Record and report models for the analytics engine.
"""

from dreamlog.core.models.data_models import (
    DailyLog, DreamRecord, JournalSnapshot, TechniqueOutcome, TechniquePractice,
)
from dreamlog.core.models.output_models import DayStatus, StatisticsReport

__all__ = [
    'DailyLog', 'DreamRecord', 'JournalSnapshot', 'TechniqueOutcome',
    'TechniquePractice', 'DayStatus', 'StatisticsReport',
]
