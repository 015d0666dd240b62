from __future__ import annotations
from collections import Counter
from typing import List

from . import config as CFG
from .models import CompletionResult, ModelData, PredictionResult
from .normalize import normalize_query

# Query functions over a ready ModelData snapshot. Misses are empty results,
# never errors; the caller is responsible for only passing ready data.


def _clamp01(x: float) -> float:
    return min(1.0, max(0.0, x))

def _ranked(successors: Counter, limit: int) -> list[tuple[str, int]]:
    """Successors by descending count; equal counts keep first-seen order."""
    # most_common sorts stably, so ties stay in insertion order
    return successors.most_common(limit)

def predict_next(data: ModelData, context: str, *, limit: int = CFG.MAX_RESULTS) -> List[str]:
    successors = data.sentence_predictions.get(normalize_query(context))
    if not successors:
        return []
    return [word for word, _ in _ranked(successors, limit)]

def predict_next_with_confidence(data: ModelData, context: str, *,
                                 limit: int = CFG.MAX_RESULTS) -> List[PredictionResult]:
    """
    Same candidates as predict_next, with confidence = count / total count
    for the context (total over all successors, not only the returned ones).
    Each confidence is rounded on its own, so the sum may be off 1.0 slightly.
    """
    successors = data.sentence_predictions.get(normalize_query(context))
    if not successors:
        return []
    total = sum(successors.values())
    return [
        PredictionResult(word=word, confidence=round(freq / total, 2), frequency=freq)
        for word, freq in _ranked(successors, limit)
    ]

def complete(data: ModelData, prefix: str, *, limit: int = CFG.MAX_RESULTS) -> List[str]:
    # index lists are already sorted lexicographically
    return data.completions.get(normalize_query(prefix), [])[:limit]

# ---- completion scoring ----

def word_frequency(data: ModelData, word: str) -> int:
    """Occurrences of `word` on either side of a bigram in the word corpus."""
    return data.word_frequencies.get(word, 0)

def length_factor(word: str) -> float:
    """1.0 up to LENGTH_PIVOT chars, then linear decay to 0 over LENGTH_SPAN chars."""
    return _clamp01(1 - (len(word) - CFG.LENGTH_PIVOT) / CFG.LENGTH_SPAN)

def frequency_factor(frequency: int) -> float:
    return min(1.0, frequency / CFG.FREQUENCY_CEILING)

def score_completion(data: ModelData, prefix: str, word: str) -> CompletionResult:
    """
    confidence = 0.4 * prefix_match + 0.4 * frequency_factor + 0.2 * length_factor
    where prefix_match is the typed share of the word.
    """
    prefix_match = round(len(prefix) / len(word), 2)
    confidence = (
        CFG.PREFIX_WEIGHT * prefix_match
        + CFG.FREQUENCY_WEIGHT * frequency_factor(word_frequency(data, word))
        + CFG.LENGTH_WEIGHT * length_factor(word)
    )
    return CompletionResult(word=word, confidence=round(_clamp01(confidence), 2),
                            prefix_match=prefix_match)

def complete_with_confidence(data: ModelData, prefix: str, *,
                             limit: int = CFG.MAX_RESULTS) -> List[CompletionResult]:
    clean = normalize_query(prefix)
    results = [score_completion(data, clean, word) for word in complete(data, clean, limit=limit)]
    # stable: equal confidences stay in lexicographic order
    results.sort(key=lambda r: -r.confidence)
    return results
