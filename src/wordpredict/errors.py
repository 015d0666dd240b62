"""Exceptions raised by the prediction model."""
from __future__ import annotations
from typing import Optional


class PredictionModelError(Exception):
    """Base class for every error the model raises."""


class NotInitializedError(PredictionModelError, RuntimeError):
    """A query was made before initialize() completed successfully."""

    def __init__(self, message: str = "Prediction model not initialized. Call initialize() first.") -> None:
        super().__init__(message)


class InitializationError(PredictionModelError, RuntimeError):
    """
    initialize() failed. `stage` names the step that broke
    ("load", "sentences", "words", "completions" or "metrics"); the original
    exception is chained as __cause__.
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"Failed to initialize prediction model ({stage}): {message}")
        self.stage = stage


class CorpusLoadError(InitializationError):
    """A corpus file could not be read."""

    def __init__(self, filename: str, reason: str, path: Optional[str] = None) -> None:
        super().__init__("load", f"error loading language file {filename}: {reason}")
        self.filename = filename
        self.path = path
