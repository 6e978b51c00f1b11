"""
Module for generating dream and sleep charts from a statistics report.
"""

import logging
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

logger = logging.getLogger(__name__)


def generate_dream_visualizations(report, output_dir):
    """
    Generate charts for a statistics report.

    Charts without data are skipped.

    Args:
        report: StatisticsReport
        output_dir: Directory to save the images

    Returns:
        dict: Chart name -> saved file path
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = {}

    # 1. Dreams per month, lucid vs non-lucid
    monthly = report.dream_statistics.monthly_counts
    if monthly:
        periods = [p.period for p in monthly]
        lucid = np.array([p.lucid for p in monthly])
        other = np.array([p.total - p.lucid for p in monthly])

        plt.figure(figsize=(12, 6))
        plt.bar(periods, other, color='slateblue', label='Dreams')
        plt.bar(periods, lucid, bottom=other, color='gold', label='Lucid dreams')
        plt.title('Dreams per Month')
        plt.xlabel('Month')
        plt.ylabel('Dreams')
        plt.legend()
        plt.grid(True, axis='y', alpha=0.3)
        plt.tight_layout()
        paths['dreams_per_month'] = os.path.join(output_dir, 'dreams_per_month.png')
        plt.savefig(paths['dreams_per_month'])
        plt.close()

    # 2. Sleep duration over time
    nights = report.sleep_statistics.nightly_durations
    if nights:
        data = pd.DataFrame({
            'date': pd.to_datetime([n.date for n in nights]),
            'duration': [n.duration_hours for n in nights],
        })
        plt.figure(figsize=(12, 6))
        plt.plot(data['date'], data['duration'], 'o-', color='purple')
        plt.axhline(y=8, color='green', linestyle='--', alpha=0.7, label='Ideal (8h)')
        plt.axhline(y=6, color='orange', linestyle='--', alpha=0.7, label='Minimum (6h)')
        plt.title('Sleep Duration Over Time')
        plt.xlabel('Date')
        plt.ylabel('Sleep Duration (hours)')
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()
        paths['sleep_duration_trend'] = os.path.join(output_dir, 'sleep_duration_trend.png')
        plt.savefig(paths['sleep_duration_trend'])
        plt.close()

    # 3. Lucidity rate by sleep quality
    buckets = [b for b in report.sleep_statistics.quality_vs_lucidity if b.lucidity_rate is not None]
    if buckets:
        data = pd.DataFrame({
            'quality': [str(b.quality) for b in buckets],
            'lucidity_rate': [b.lucidity_rate * 100 for b in buckets],
        })
        plt.figure(figsize=(10, 6))
        sns.barplot(x='quality', y='lucidity_rate', data=data, color='teal')
        plt.title('Lucid Dream-Days by Sleep Quality')
        plt.xlabel('Sleep Quality (1-5)')
        plt.ylabel('Lucidity Rate (%)')
        plt.ylim(0, 100)
        plt.tight_layout()
        paths['quality_vs_lucidity'] = os.path.join(output_dir, 'quality_vs_lucidity.png')
        plt.savefig(paths['quality_vs_lucidity'])
        plt.close()

    # 4. Most frequent dream words
    words = report.word_frequencies
    if words:
        data = pd.DataFrame({
            'word': [w.term for w in words],
            'count': [w.count for w in words],
        })
        plt.figure(figsize=(10, 6))
        sns.barplot(x='count', y='word', data=data, color='steelblue')
        plt.title('Most Frequent Dream Words')
        plt.xlabel('Occurrences')
        plt.ylabel('')
        plt.tight_layout()
        paths['word_frequencies'] = os.path.join(output_dir, 'word_frequencies.png')
        plt.savefig(paths['word_frequencies'])
        plt.close()

    logger.info(f"Saved {len(paths)} charts to {output_dir}")
    return paths
