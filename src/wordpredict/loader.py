from __future__ import annotations
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Tuple

from . import config as CFG
from .errors import CorpusLoadError

log = logging.getLogger(__name__)

CorpusLoader = Callable[..., str]

def _language_file(language: str, filename: str, root: str | os.PathLike | None) -> Path:
    """<root>/language-pack/<language>/<filename>"""
    base = Path(root) if root is not None else CFG.DATA_ROOT
    return base / CFG.LANGUAGE_PACK_DIR / language / filename

def load_corpus(language: str, filename: str, *, root: str | os.PathLike | None = None) -> str:
    """
    Read one corpus file of a language pack in full.
    Any I/O or decoding failure is raised as CorpusLoadError naming the file.
    """
    path = _language_file(language, filename, root)
    try:
        with open(path, "r", encoding=CFG.ENCODING) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusLoadError(filename, str(exc), path=str(path)) from exc
    log.debug("Loaded %s (%d chars)", path, len(text))
    return text

def load_language_pack(language: str,
                       *,
                       root: str | os.PathLike | None = None,
                       load: CorpusLoader = load_corpus) -> Tuple[str, str]:
    """
    Load (sentence corpus, word corpus) for a language.
    The two files are independent, so they are read in parallel; both must
    finish before this returns. The first failure propagates.
    """
    with ThreadPoolExecutor(max_workers=CFG.LOAD_WORKERS) as ex:
        sentences = ex.submit(load, language, CFG.SENTENCE_CORPUS, root=root)
        words = ex.submit(load, language, CFG.WORD_CORPUS, root=root)
        return sentences.result(), words.result()
