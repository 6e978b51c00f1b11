"""
Module for assembling the combined statistics report from a journal snapshot.
"""

import logging
from collections.abc import Mapping

from dreamlog.config.config_manager import ReportConfig
from dreamlog.core.analysis.dream_calendar import render_month
from dreamlog.core.analysis.dream_metrics import calculate_dream_statistics, summarize_recent_dreams
from dreamlog.core.analysis.reality_checks import aggregate_reality_checks
from dreamlog.core.analysis.sleep_metrics import calculate_sleep_statistics
from dreamlog.core.analysis.technique_metrics import calculate_technique_effectiveness, rank_techniques
from dreamlog.core.analysis.text_analysis import word_frequencies
from dreamlog.core.exceptions import ConfigurationError
from dreamlog.core.models.output_models import StatisticsReport
from dreamlog.utils.data_validation import validate_snapshot

logger = logging.getLogger(__name__)


def resolve_config(config=None):
    """Accept a ReportConfig, a mapping of options or None for defaults."""
    if config is None:
        return ReportConfig()
    if isinstance(config, ReportConfig):
        return config
    if isinstance(config, Mapping):
        return ReportConfig.from_options(**config)
    raise ConfigurationError(f"Unsupported configuration type: {type(config).__name__}")


def generate_statistics_report(snapshot, config=None):
    """
    Compute every statistic for one journal snapshot.

    The configuration is checked first, then the snapshot; nothing is
    computed if either is rejected. Every calculator reads the same
    snapshot object and nothing is mutated, so the function can be
    called repeatedly or concurrently.

    Args:
        snapshot: JournalSnapshot to analyse
        config: ReportConfig, mapping of options, or None

    Returns:
        StatisticsReport: Freshly built report

    Raises:
        ConfigurationError: Invalid configuration
        MalformedInputError: A record breaks a journal invariant
    """
    config = resolve_config(config)
    validate_snapshot(snapshot)

    reference_date = config.resolve_reference_date()
    year, month = config.resolve_period()
    dreams = snapshot.dreams
    daily_logs = snapshot.daily_logs

    logger.info(
        f"Generating report for {len(dreams)} dreams and {len(daily_logs)} daily logs "
        f"(calendar {year}-{month:02d}, reference {reference_date.isoformat()})"
    )

    techniques = calculate_technique_effectiveness(snapshot.technique_practices)
    best_technique, worst_technique = rank_techniques(techniques)

    return StatisticsReport(
        reference_date=reference_date,
        top_n=config.top_n,
        dream_statistics=calculate_dream_statistics(dreams, config.top_n),
        word_frequencies=word_frequencies(
            dreams,
            top_n=config.top_n,
            stop_words=config.stop_words,
            include_titles=config.include_titles,
            min_length=config.min_word_length,
        ),
        recent_dreams=summarize_recent_dreams(dreams, reference_date, config.recent_days),
        sleep_statistics=calculate_sleep_statistics(daily_logs, dreams),
        reality_checks=aggregate_reality_checks(daily_logs),
        calendar=render_month(dreams, year, month),
        technique_effectiveness=techniques,
        best_technique=best_technique,
        worst_technique=worst_technique,
    )
