"""
Reporting module for dream journal statistics.

This module assembles the statistics report and writes it out
for presentation (Markdown).
"""

from dreamlog.core.reporting.report_generator import generate_statistics_report
from dreamlog.core.reporting.markdown_report import create_markdown_report, render_markdown

__all__ = ['generate_statistics_report', 'create_markdown_report', 'render_markdown']
