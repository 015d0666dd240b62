# src/wordpredict/models.py
"""
Data models for the prediction model.

- FrequencyMapping / CompletionIndex: the raw lookup structures.
- ModelData: the complete, read-only snapshot a ready model answers from.
- PredictionResult / CompletionResult: scored query results.
- Metrics: informational timings, sizes and counts.

These classes carry no business logic; building and scoring live in
mapping, completion and search.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List

# context token -> successor token -> occurrences (successors in first-seen order)
FrequencyMapping = Dict[str, Counter]

# prefix -> full words sharing it, sorted ascending
CompletionIndex = Dict[str, List[str]]


class ModelState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass(frozen=True)
class ModelData:
    """
    Everything a ready model needs to answer queries.

    Attributes
    ----------
    sentence_predictions : FrequencyMapping
        Bigram counts over the free-text (paragraphs) corpus. Backs predict_next.
    word_predictions : FrequencyMapping
        Bigram counts over the word-list corpus. Only used for frequency
        scoring of completions; never merged with sentence_predictions.
    completions : CompletionIndex
        Every prefix of every unique word -> sorted list of those words.
    unique_words : FrozenSet[str]
        Distinct tokens of the word corpus.
    word_frequencies : Dict[str, int]
        Per word: its own successor total plus the times it occurs as a
        successor in word_predictions.
    """
    sentence_predictions: FrequencyMapping
    word_predictions: FrequencyMapping
    completions: CompletionIndex
    unique_words: FrozenSet[str]
    word_frequencies: Dict[str, int]


@dataclass(frozen=True)
class PredictionResult:
    word: str
    confidence: float   # count / total count for the context, 2 decimals
    frequency: int      # raw bigram count


@dataclass(frozen=True)
class CompletionResult:
    word: str
    confidence: float   # weighted prefix/frequency/length score, 2 decimals
    prefix_match: float # share of the word already typed (0-1)

    def to_json(self) -> dict:
        return {"word": self.word, "confidence": self.confidence, "prefixMatch": self.prefix_match}


@dataclass
class PreprocessingTimes:
    sentences: float = 0.0
    words: float = 0.0
    completions: float = 0.0


@dataclass
class MemoryUsage:
    word_predictions: int = 0
    sentence_predictions: int = 0
    word_completions: int = 0
    unique_words: int = 0
    total: int = 0


@dataclass
class DataStats:
    unique_words_count: int = 0
    word_predictions_count: int = 0
    sentence_predictions_count: int = 0
    completion_prefixes_count: int = 0


@dataclass
class Metrics:
    """Timings are milliseconds, memory figures are estimated bytes."""
    initialization_time: float = 0.0
    preprocessing_times: PreprocessingTimes = field(default_factory=PreprocessingTimes)
    memory_usage: MemoryUsage = field(default_factory=MemoryUsage)
    data_stats: DataStats = field(default_factory=DataStats)
