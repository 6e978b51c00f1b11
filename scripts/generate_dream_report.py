#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dream Journal Report Script

This script loads the journal files, computes the statistics report and
writes it out as Markdown (and optionally JSON and charts).

Usage:
    python scripts/generate_dream_report.py [--data-dir DIR] [--config FILE]
        [--month YYYY-MM] [--top-n N] [--output-dir DIR] [--json] [--no-charts]
"""

import argparse
import logging
import os
import sys

from dreamlog.config.config_manager import ConfigManager, ReportConfig
from dreamlog.core.analysis.dream_visualization import generate_dream_visualizations
from dreamlog.core.data.repository import JournalRepository
from dreamlog.core.exceptions import ConfigurationError, DreamlogError
from dreamlog.core.reporting import create_markdown_report, generate_statistics_report

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)

logger = logging.getLogger(__name__)


def parse_month(value):
    """Parse a YYYY-MM argument into (year, month)"""
    try:
        year, month = value.split('-')
        return int(year), int(month)
    except ValueError:
        raise ConfigurationError(f"Invalid month '{value}', expected YYYY-MM") from None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate dream journal statistics')
    parser.add_argument('--data-dir', default='.', help='Directory holding the journal JSON files')
    parser.add_argument('--config', default=None, help='YAML configuration file')
    parser.add_argument('--month', default=None, help='Calendar month to render (YYYY-MM)')
    parser.add_argument('--top-n', type=int, default=None, help='Number of ranked words and dream signs')
    parser.add_argument('--output-dir', default=None, help='Directory for the report files')
    parser.add_argument('--json', action='store_true', help='Also write the report as JSON')
    parser.add_argument('--no-charts', action='store_true', help='Skip chart generation')
    return parser.parse_args(argv)


def main(argv=None):
    """Generate the dream journal report"""
    args = parse_args(argv)

    try:
        year, month = parse_month(args.month) if args.month else (None, None)

        if args.config:
            config_manager = ConfigManager(args.config)
            report_config = config_manager.report_config(top_n=args.top_n, year=year, month=month)
            repository = JournalRepository(args.data_dir, config_manager.get('data', {}))
            output_dir = args.output_dir or config_manager.get('output.report_dir', 'reports')
            charts = config_manager.get('output.visualizations', True) and not args.no_charts
        else:
            options = {'top_n': args.top_n, 'year': year, 'month': month}
            report_config = ReportConfig.from_options(**{k: v for k, v in options.items() if v is not None})
            repository = JournalRepository(args.data_dir)
            output_dir = args.output_dir or 'reports'
            charts = not args.no_charts

        snapshot = repository.load_snapshot()
        report = generate_statistics_report(snapshot, report_config)
    except DreamlogError as e:
        logger.error(str(e))
        return 1

    report_path = create_markdown_report(report, output_dir)
    logger.info(f"Report written to {report_path}")

    if args.json:
        json_path = os.path.join(output_dir, 'dream_report.json')
        with open(json_path, 'w', encoding='utf-8') as f:
            f.write(report.model_dump_json(indent=2))
        logger.info(f"JSON report written to {json_path}")

    if charts:
        generate_dream_visualizations(report, os.path.join(output_dir, 'charts'))

    return 0


if __name__ == "__main__":
    sys.exit(main())
