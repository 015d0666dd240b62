"""
Word Prediction Engine

Lightweight next-word prediction and word completion trained on the static
corpus files of a language pack (paragraphs.txt + words.txt). Everything runs
offline and in memory; the model is rebuilt on every initialize().

Example Usage:
    from wordpredict import PredictionModel

    model = PredictionModel()
    model.initialize("en")

    model.predict_next("the")              # most frequent followers first
    model.complete_with_confidence("wor")  # scored CompletionResult list
"""

# src/wordpredict/__init__.py
from .engine import PredictionModel  # re-export
from .errors import CorpusLoadError, InitializationError, NotInitializedError, PredictionModelError
from .models import CompletionResult, Metrics, ModelState, PredictionResult

__version__ = "1.0.0"
__all__ = [
    "PredictionModel",
    "PredictionResult",
    "CompletionResult",
    "Metrics",
    "ModelState",
    "PredictionModelError",
    "NotInitializedError",
    "InitializationError",
    "CorpusLoadError",
]
