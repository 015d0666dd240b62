"""
Bigram frequency mappings.

A FrequencyMapping maps every token to a Counter of the tokens that directly
follow it in the corpus. Counting happens once at build time; nothing is
normalized here (confidences are computed per query in search).
"""

from __future__ import annotations
from collections import Counter, defaultdict
from typing import Dict, Sequence

from .models import FrequencyMapping


def build_frequency_mapping(tokens: Sequence[str]) -> FrequencyMapping:
    """
    Count every adjacent pair (tokens[i], tokens[i+1]).

    Successors are kept in the order they were first seen, which is what the
    query side relies on to break ties between equal counts.

    Examples:
        >>> m = build_frequency_mapping(["the", "cat", "sat", "the", "cat"])
        >>> dict(m["the"])
        {'cat': 2}
        >>> build_frequency_mapping(["alone"])
        {}
    """
    mapping: Dict[str, Counter] = defaultdict(Counter)
    for current, nxt in zip(tokens, tokens[1:]):
        mapping[current][nxt] += 1
    # plain dict so lookups of unknown contexts don't grow the mapping
    return dict(mapping)


def word_frequencies(mapping: FrequencyMapping) -> Dict[str, int]:
    """
    Total bigram occurrences per token: times it leads a pair plus times it
    follows one. A token that is its own successor is counted on both sides.
    """
    totals: Counter = Counter()
    for current, successors in mapping.items():
        totals[current] += sum(successors.values())
        totals.update(successors)
    return dict(totals)
