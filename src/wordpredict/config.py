from __future__ import annotations
import os
from pathlib import Path

# package dir: ships a small English language pack under language-pack/en
PACKAGE_ROOT = Path(__file__).resolve().parent

# where language packs live (<DATA_ROOT>/<LANGUAGE_PACK_DIR>/<language>/)
DATA_ROOT: Path = Path(os.environ.get("WORDPREDICT_ROOT", PACKAGE_ROOT))
LANGUAGE_PACK_DIR: str = "language-pack"
LANGUAGE: str = os.environ.get("WORDPREDICT_LANGUAGE", "en")

# fixed corpus files per language
SENTENCE_CORPUS: str = "paragraphs.txt"
WORD_CORPUS: str = "words.txt"
ENCODING: str = "utf-8"

# Debug logging + memory estimation (set WORDPREDICT_DEBUG=1 to enable)
DEBUG: bool = os.environ.get("WORDPREDICT_DEBUG") == "1"

# the two corpora are read concurrently
LOAD_WORKERS: int = 2

# /* ~~~ query caps and scoring weights ~~~ */
MAX_RESULTS: int = 15

PREFIX_WEIGHT: float = 0.4
FREQUENCY_WEIGHT: float = 0.4
LENGTH_WEIGHT: float = 0.2

LENGTH_PIVOT: int = 5          # words this long or shorter get the full length factor
LENGTH_SPAN: int = 10          # factor reaches 0 at LENGTH_PIVOT + LENGTH_SPAN
FREQUENCY_CEILING: int = 100   # occurrences that saturate the frequency factor

# rough per-string size used for the unique word set estimate
UNIQUE_WORD_BYTES: int = 50
