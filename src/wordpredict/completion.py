from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, List, Set

from .models import CompletionIndex


def build_completion_index(unique_words: Iterable[str]) -> CompletionIndex:
    """
    /* ~~~ Map every prefix (length 1..len(word)) of every word to the
       sorted list of words that start with it.
       - duplicates in the input are ignored
       - lists are filled first and sorted once at the end ~~~ */
    """
    buckets: Dict[str, List[str]] = defaultdict(list)
    seen: Set[str] = set()
    for word in unique_words:
        if not word or word in seen:
            continue
        seen.add(word)
        for i in range(1, len(word) + 1):
            # a distinct word is appended to each of its prefixes exactly once
            buckets[word[:i]].append(word)

    for words in buckets.values():
        words.sort()
    return dict(buckets)
