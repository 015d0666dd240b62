"""Rough memory estimates and the debug performance report."""
from __future__ import annotations
import json
import logging
from typing import Any

from . import config as CFG
from .models import Metrics, ModelData

log = logging.getLogger(__name__)

_UNITS = ["Bytes", "KB", "MB", "GB"]


def estimate_size(obj: Any) -> int:
    """Size in bytes of the UTF-8 JSON encoding of obj (Counters serialize as dicts)."""
    return len(json.dumps(obj, ensure_ascii=False, separators=(",", ":")).encode("utf-8"))


def format_bytes(size: int) -> str:
    """
    Human readable byte count, two decimals at most.

    >>> format_bytes(0)
    '0 Bytes'
    >>> format_bytes(1536)
    '1.5 KB'
    """
    if size <= 0:
        return "0 Bytes"
    value, i = float(size), 0
    while value >= 1024 and i < len(_UNITS) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {_UNITS[i]}"


def calculate_memory_usage(metrics: Metrics, data: ModelData) -> None:
    mem = metrics.memory_usage
    mem.word_predictions = estimate_size(data.word_predictions)
    mem.sentence_predictions = estimate_size(data.sentence_predictions)
    mem.word_completions = estimate_size(data.completions)
    mem.unique_words = len(data.unique_words) * CFG.UNIQUE_WORD_BYTES
    mem.total = (mem.word_predictions + mem.sentence_predictions
                 + mem.word_completions + mem.unique_words)


def log_performance_metrics(metrics: Metrics) -> None:
    t, mem, stats = metrics.preprocessing_times, metrics.memory_usage, metrics.data_stats
    log.debug("=== PERFORMANCE METRICS ===")
    log.debug("Total initialization time: %.2fms", metrics.initialization_time)
    log.debug("Processing times: sentences=%.2fms words=%.2fms completions=%.2fms",
              t.sentences, t.words, t.completions)
    log.debug("Memory: word predictions=%s sentence predictions=%s completions=%s unique words=%s total=%s",
              format_bytes(mem.word_predictions), format_bytes(mem.sentence_predictions),
              format_bytes(mem.word_completions), format_bytes(mem.unique_words),
              format_bytes(mem.total))
    log.debug("Data: unique words=%s word prediction entries=%s sentence prediction entries=%s "
              "completion prefixes=%s",
              f"{stats.unique_words_count:,}", f"{stats.word_predictions_count:,}",
              f"{stats.sentence_predictions_count:,}", f"{stats.completion_prefixes_count:,}")
