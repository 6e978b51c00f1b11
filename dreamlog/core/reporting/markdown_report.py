"""
Module for writing a statistics report as Markdown.
"""

import os

from dreamlog.core.models.output_models import DayStatus
from dreamlog.utils.constants import technique_descriptions

NO_DATA = "no data"

_CALENDAR_MARKS = {
    DayStatus.NO_ENTRY: '·',
    DayStatus.DREAM: 'D',
    DayStatus.LUCID: 'L',
}


def _format_metrics_for_display(report):
    """Format metrics for display in the report."""
    dreams = report.dream_statistics
    sleep = report.sleep_statistics
    checks = report.reality_checks

    def hours(value):
        return NO_DATA if value is None else f"{value:.1f} hours"

    return {
        'total_dreams': str(dreams.total_dreams),
        'lucid_dreams': f"{dreams.lucid_dreams} ({dreams.lucid_percentage:.1f}%)",
        'lucidity_rate': NO_DATA if dreams.lucidity_rate is None else f"{dreams.lucidity_rate * 100:.1f}% of dream-days",
        'avg_words': NO_DATA if dreams.average_words_per_dream is None else f"{dreams.average_words_per_dream:.1f}",
        'avg_sleep_duration': hours(sleep.average_duration_hours),
        'shortest_night': hours(sleep.min_duration_hours),
        'longest_night': hours(sleep.max_duration_hours),
        'avg_sleep_quality': NO_DATA if sleep.average_quality is None else f"{sleep.average_quality:.1f}/5",
        'lucid_nights': NO_DATA if sleep.lucid_night_rate is None else f"{sleep.lucid_nights} ({sleep.lucid_night_rate * 100:.1f}% of tracked nights)",
        'total_reality_checks': str(checks.total),
        'avg_reality_checks': f"{checks.average_per_day:.1f}",
        'most_active': NO_DATA if checks.most_active is None else f"{checks.most_active.date.isoformat()} ({checks.most_active.count})",
        'least_active': NO_DATA if checks.least_active is None else f"{checks.least_active.date.isoformat()} ({checks.least_active.count})",
    }


def _calendar_lines(calendar):
    """Month grid with Monday-first weeks; padding is added here only."""
    lines = ["| Mon | Tue | Wed | Thu | Fri | Sat | Sun |", "|---|---|---|---|---|---|---|"]
    cells = [' '] * calendar.first_weekday
    for day in calendar.days:
        cells.append(f"{day.date.day} {_CALENDAR_MARKS[day.status]}")
    while len(cells) % 7:
        cells.append(' ')
    for start in range(0, len(cells), 7):
        lines.append("| " + " | ".join(cells[start:start + 7]) + " |")
    return lines


def render_markdown(report):
    """Render a StatisticsReport as a Markdown document."""
    metrics = _format_metrics_for_display(report)
    recent = report.recent_dreams

    lines = [
        "# Dream Journal Report",
        "",
        f"**Reference date:** {report.reference_date.isoformat()}",
        "",
        "## Dream Summary",
        "",
        f"- **Total dreams:** {metrics['total_dreams']}",
        f"- **Lucid dreams:** {metrics['lucid_dreams']}",
        f"- **Lucidity rate:** {metrics['lucidity_rate']}",
        f"- **Average words per dream:** {metrics['avg_words']}",
        f"- **Longest journaling streak:** {report.dream_statistics.longest_journal_streak} days",
        "",
        f"### Last {(recent.end_date - recent.start_date).days + 1} days",
        "",
        f"{recent.dream_count} dreams ({recent.lucid_count} lucid), {recent.total_words} words "
        f"between {recent.start_date.isoformat()} and {recent.end_date.isoformat()}.",
        "",
        f"### Top {report.top_n} words",
        "",
    ]
    if report.word_frequencies:
        lines += [f"{i}. {entry.term} ({entry.count})" for i, entry in enumerate(report.word_frequencies, 1)]
    else:
        lines.append(f"_{NO_DATA}_")

    lines += ["", "### Common dream signs", ""]
    if report.dream_statistics.common_dream_signs:
        lines += [f"- {entry.term} ({entry.count})" for entry in report.dream_statistics.common_dream_signs]
    else:
        lines.append(f"_{NO_DATA}_")

    lines += [
        "",
        "## Sleep",
        "",
        f"- **Average duration:** {metrics['avg_sleep_duration']}",
        f"- **Shortest night:** {metrics['shortest_night']}",
        f"- **Longest night:** {metrics['longest_night']}",
        f"- **Average quality:** {metrics['avg_sleep_quality']}",
        f"- **Lucid nights:** {metrics['lucid_nights']}",
        "",
        "| Quality | Dream-days | Lucid days | Lucidity rate |",
        "|---|---|---|---|",
    ]
    for bucket in report.sleep_statistics.quality_vs_lucidity:
        rate = NO_DATA if bucket.lucidity_rate is None else f"{bucket.lucidity_rate * 100:.0f}%"
        lines.append(f"| {bucket.quality} | {bucket.dream_days} | {bucket.lucid_days} | {rate} |")

    lines += [
        "",
        "## Reality Checks",
        "",
        f"- **Total:** {metrics['total_reality_checks']}",
        f"- **Average per logged day:** {metrics['avg_reality_checks']}",
        f"- **Most active day:** {metrics['most_active']}",
        f"- **Least active day:** {metrics['least_active']}",
        f"- **Longest streak:** {report.reality_checks.longest_streak} days",
        "",
        f"## Calendar {report.calendar.year}-{report.calendar.month:02d}",
        "",
    ]
    lines += _calendar_lines(report.calendar)
    lines += ["", "D = dream logged, L = lucid dream", ""]

    if report.technique_effectiveness:
        lines += ["## Technique Effectiveness", ""]
        for stats in report.technique_effectiveness:
            lines += [
                f"### {stats.technique}",
                technique_descriptions.get(stats.technique, ""),
                "",
                f"- Success rate: {stats.success_rate:.1f}% ({stats.successes}/{stats.attempts})",
                f"- Last practiced: {stats.last_practiced.isoformat()}",
                f"- Recommendation: {stats.recommendation}",
                "",
            ]
        if report.best_technique is not None:
            lines += [
                f"Most effective: {report.best_technique}. Least effective: {report.worst_technique}.",
                "",
            ]

    return "\n".join(lines)


def create_markdown_report(report, output_dir, filename='dream_report.md'):
    """Write the Markdown version of the report and return its path."""
    report_path = os.path.join(output_dir, filename)
    os.makedirs(output_dir, exist_ok=True)

    with open(report_path, 'w', encoding='utf-8') as f:
        f.write(render_markdown(report))

    return report_path
