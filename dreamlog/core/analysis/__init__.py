"""
Analysis module for dream journal insights.

This module contains the functions that derive statistics from a journal
snapshot and generate visualizations.
"""

from dreamlog.core.analysis.dream_calendar import render_month
from dreamlog.core.analysis.dream_metrics import calculate_dream_statistics, summarize_recent_dreams
from dreamlog.core.analysis.reality_checks import aggregate_reality_checks
from dreamlog.core.analysis.sleep_metrics import calculate_sleep_statistics
from dreamlog.core.analysis.technique_metrics import calculate_technique_effectiveness
from dreamlog.core.analysis.text_analysis import word_frequencies

__all__ = [
    'render_month', 'calculate_dream_statistics', 'summarize_recent_dreams',
    'aggregate_reality_checks', 'calculate_sleep_statistics',
    'calculate_technique_effectiveness', 'word_frequencies',
]
