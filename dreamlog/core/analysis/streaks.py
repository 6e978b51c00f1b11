"""
Helpers for finding runs of consecutive calendar days.
"""

from datetime import timedelta


def longest_streak(dates):
    """Length of the longest run of consecutive days in an iterable of dates."""
    ordered = sorted(set(dates))
    if not ordered:
        return 0

    best = current = 1
    for previous, day in zip(ordered, ordered[1:]):
        if day - previous == timedelta(days=1):
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best
