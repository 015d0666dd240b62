# src/wordpredict/engine.py
from __future__ import annotations

import copy
import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator, List, Optional

from . import config as CFG
from . import search
from .completion import build_completion_index
from .errors import InitializationError, NotInitializedError
from .loader import CorpusLoader, load_corpus, load_language_pack
from .mapping import build_frequency_mapping, word_frequencies
from .metrics import calculate_memory_usage, format_bytes, log_performance_metrics
from .models import (
    CompletionResult,
    FrequencyMapping,
    Metrics,
    ModelData,
    ModelState,
    PredictionResult,
)
from .normalize import tokenize

log = logging.getLogger(__name__)


def _ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@contextmanager
def _stage(name: str) -> Iterator[None]:
    """Re-raise anything that escapes the block as InitializationError(name)."""
    try:
        yield
    except InitializationError:
        raise
    except Exception as exc:
        raise InitializationError(name, f"{type(exc).__name__}: {exc}") from exc


class PredictionModel:
    """
    Next-word prediction and word completion over a language pack.

    Lifecycle:
      * PredictionModel(...)   -> UNINITIALIZED, every query raises NotInitializedError
      * initialize(language)   -> loads paragraphs.txt + words.txt, builds all
                                  mappings, then publishes them at once (READY)
      * reset()                -> back to UNINITIALIZED, can be initialized again

    Queries (READY only):
      * predict_next / predict_next_with_confidence  (sentence corpus bigrams)
      * complete / complete_with_confidence          (word corpus prefixes)

    A failed initialize() leaves nothing behind: the model is UNINITIALIZED
    and the error names the stage (and file, for load errors).
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        root: Optional[str | os.PathLike] = None,   # dir holding language-pack/<lang>/
        language: Optional[str] = None,
        debug: Optional[bool] = None,
        loader: CorpusLoader = load_corpus,         # (language, filename, root=...) -> text
    ) -> None:
        self.root = root
        self.language: str = language or CFG.LANGUAGE
        self.debug: bool = CFG.DEBUG if debug is None else debug
        self._loader = loader
        self._state = ModelState.UNINITIALIZED
        self._data: Optional[ModelData] = None
        self._metrics = Metrics()

        if self.debug:
            logging.basicConfig(level=logging.DEBUG)
            log.debug("PredictionModel debug mode enabled")

    # /* ~~~ Load both corpora and build every lookup structure ~~~ */
    def initialize(self, language: Optional[str] = None) -> None:
        start = time.perf_counter()
        if language:
            self.language = language

        self._data = None
        self._metrics = Metrics()
        self._state = ModelState.INITIALIZING
        log.info("Initializing prediction model (language=%s)", self.language)

        try:
            metrics = Metrics()
            data = self._build(metrics)
            metrics.initialization_time = _ms(start)
            if self.debug:
                with _stage("metrics"):
                    calculate_memory_usage(metrics, data)
                    log_performance_metrics(metrics)
        except BaseException as exc:
            # nothing was published; interrupts roll back too
            self._state = ModelState.UNINITIALIZED
            if isinstance(exc, InitializationError):
                log.error("%s", exc)
            raise

        # publish in one step; queries never see a half-built model
        self._metrics = metrics
        self._data = data
        self._state = ModelState.READY
        log.info("Prediction model ready: words=%d contexts=%d prefixes=%d (%.2fms)",
                 len(data.unique_words), len(data.sentence_predictions),
                 len(data.completions), metrics.initialization_time)

    def reset(self) -> None:
        """Drop all preprocessed data. Safe to call in any state, any number of times."""
        log.debug("Resetting PredictionModel")
        self._data = None
        self._metrics = Metrics()
        self._state = ModelState.UNINITIALIZED

    # ------------- state -------------

    @property
    def state(self) -> ModelState:
        return self._state

    def is_initialized(self) -> bool:
        return self._state is ModelState.READY

    def get_language(self) -> str:
        return self.language

    def get_metrics(self) -> Metrics:
        """Copy of the current metrics; changing it does not affect the model."""
        return copy.deepcopy(self._metrics)

    # ------------- query -------------

    def predict_next(self, text: str) -> List[str]:
        data = self._ready()
        t0 = time.perf_counter()
        results = search.predict_next(data, text)
        log.debug('Prediction for "%s" - %d results (%.0fus)', text, len(results), _ms(t0) * 1000)
        return results

    def predict_next_with_confidence(self, text: str) -> List[PredictionResult]:
        data = self._ready()
        t0 = time.perf_counter()
        results = search.predict_next_with_confidence(data, text)
        if self.debug:
            log.debug('Prediction with confidence for "%s" - %d results (%.0fus)',
                      text, len(results), _ms(t0) * 1000)
            if results:
                log.debug("   Top 3: %s", ", ".join(f"{r.word} ({r.confidence * 100:.1f}%)" for r in results[:3]))
        return results

    def complete(self, prefix: str) -> List[str]:
        data = self._ready()
        t0 = time.perf_counter()
        results = search.complete(data, prefix)
        log.debug('Completion for "%s" - %d results (%.0fus)', prefix, len(results), _ms(t0) * 1000)
        return results

    def complete_with_confidence(self, prefix: str) -> List[CompletionResult]:
        data = self._ready()
        t0 = time.perf_counter()
        results = search.complete_with_confidence(data, prefix)
        if self.debug:
            log.debug('Completion with confidence for "%s" - %d results (%.0fus)',
                      prefix, len(results), _ms(t0) * 1000)
            if results:
                log.debug("   Top 3: %s", ", ".join(f"{r.word} ({r.confidence * 100:.1f}%)" for r in results[:3]))
        return results

    # ------------- internals -------------

    def _ready(self) -> ModelData:
        data = self._data
        if data is None or self._state is not ModelState.READY:
            raise NotInitializedError()
        return data

    def _build(self, metrics: Metrics) -> ModelData:
        t0 = time.perf_counter()
        with _stage("load"):
            paragraphs, words = load_language_pack(self.language, root=self.root, load=self._loader)
            if self.debug:
                log.debug("File loading time: %.2fms", _ms(t0))
                log.debug("Paragraphs data size: %s", format_bytes(len(paragraphs.encode("utf-8"))))
                log.debug("Words data size: %s", format_bytes(len(words.encode("utf-8"))))

        with _stage("sentences"):
            sentence_predictions = self._preprocess_sentences(paragraphs, metrics)
        with _stage("words"):
            return self._preprocess_words(words, sentence_predictions, metrics)

    def _preprocess_sentences(self, text: str, metrics: Metrics) -> FrequencyMapping:
        t0 = time.perf_counter()
        tokens = tokenize(text)
        log.debug("Processing %d sentence tokens...", len(tokens))

        mapping = build_frequency_mapping(tokens)

        metrics.preprocessing_times.sentences = _ms(t0)
        metrics.data_stats.sentence_predictions_count = len(mapping)
        log.debug("Sentence preprocessing completed in %.2fms (%d contexts)",
                  metrics.preprocessing_times.sentences, len(mapping))
        return mapping

    def _preprocess_words(self, text: str, sentence_predictions: FrequencyMapping,
                          metrics: Metrics) -> ModelData:
        t0 = time.perf_counter()
        tokens = tokenize(text)
        log.debug("Processing %d word tokens...", len(tokens))

        unique_words = frozenset(tokens)
        metrics.data_stats.unique_words_count = len(unique_words)

        t1 = time.perf_counter()
        with _stage("completions"):
            # sorted input keeps the build independent of set iteration order
            completions = build_completion_index(sorted(unique_words))
        metrics.preprocessing_times.completions = _ms(t1)
        metrics.data_stats.completion_prefixes_count = len(completions)

        word_predictions = build_frequency_mapping(tokens)

        metrics.preprocessing_times.words = _ms(t0)
        metrics.data_stats.word_predictions_count = len(word_predictions)
        log.debug("Word preprocessing completed in %.2fms (unique=%d, contexts=%d, completions %.2fms)",
                  metrics.preprocessing_times.words, len(unique_words), len(word_predictions),
                  metrics.preprocessing_times.completions)

        return ModelData(
            sentence_predictions=sentence_predictions,
            word_predictions=word_predictions,
            completions=completions,
            unique_words=unique_words,
            word_frequencies=word_frequencies(word_predictions),
        )
