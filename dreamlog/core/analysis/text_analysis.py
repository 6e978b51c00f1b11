"""
Module for tokenizing dream text and ranking word frequencies.
"""

from collections import Counter

from dreamlog.core.models.output_models import FrequencyEntry
from dreamlog.utils.constants import STOP_WORDS, default_values


def _trim(token):
    """Strip every non-alphanumeric character from both ends."""
    start, end = 0, len(token)
    while start < end and not token[start].isalnum():
        start += 1
    while end > start and not token[end - 1].isalnum():
        end -= 1
    return token[start:end]


def tokenize(text):
    """
    Split text into normalized word tokens.

    Tokens are lowercased and stripped of leading and trailing
    non-alphanumeric characters, so inner apostrophes and hyphens survive ("don't", "half-lit").

    Args:
        text: Free text, may be empty or None

    Returns:
        list: Tokens in the order they appear
    """
    if not text:
        return []
    tokens = []
    for raw in text.lower().split():
        token = _trim(raw)
        if token:
            tokens.append(token)
    return tokens


def filter_tokens(tokens, stop_words=None, min_length=None):
    """Drop stop-words and tokens shorter than min_length."""
    stop_words = STOP_WORDS if stop_words is None else stop_words
    min_length = default_values['min_word_length'] if min_length is None else min_length
    return [t for t in tokens if len(t) >= min_length and t not in stop_words]


def rank_frequencies(items, top_n=None):
    """
    Count items and rank them by frequency.

    Ties keep first-seen order: the sort key is (-count, first index).

    Args:
        items: Iterable of hashable terms
        top_n: Number of entries to keep, None for all

    Returns:
        list: FrequencyEntry values, most frequent first
    """
    counts = Counter()
    first_seen = {}
    for index, item in enumerate(items):
        counts[item] += 1
        first_seen.setdefault(item, index)

    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], first_seen[kv[0]]))
    if top_n is not None:
        ranked = ranked[:top_n]
    return [FrequencyEntry(term=term, count=count) for term, count in ranked]


def dream_text(dream, include_titles=False):
    """Text analysed for one dream: the title (optionally) then the content."""
    if include_titles and dream.title:
        return f"{dream.title}\n{dream.content}"
    return dream.content


def word_frequencies(dreams, top_n=None, stop_words=None, include_titles=False, min_length=None):
    """
    Rank the most frequent meaningful words across all dreams.

    Args:
        dreams: Ordered sequence of DreamRecord
        top_n: Number of words to return (default from constants)
        stop_words: Words to exclude (default built-in list)
        include_titles: Whether dream titles are analysed too
        min_length: Minimum token length kept

    Returns:
        list: FrequencyEntry values, empty for an empty collection
    """
    top_n = default_values['top_n'] if top_n is None else top_n
    tokens = []
    for dream in dreams:
        tokens.extend(filter_tokens(tokenize(dream_text(dream, include_titles)), stop_words, min_length))
    return rank_frequencies(tokens, top_n)
