from __future__ import annotations
from pathlib import Path
import pytest

PARAGRAPHS = "The cat sat\nthe cat ran\n"
WORDS = "cat\ndog\ncar\ndog\ncart\n"


def seed_language_pack(root: Path, language: str = "en",
                       paragraphs: str | None = PARAGRAPHS,
                       words: str | None = WORDS) -> str:
    pack = root / "language-pack" / language
    pack.mkdir(parents=True, exist_ok=True)
    if paragraphs is not None:
        (pack / "paragraphs.txt").write_text(paragraphs, encoding="utf-8")
    if words is not None:
        (pack / "words.txt").write_text(words, encoding="utf-8")
    return str(root)


@pytest.fixture
def pack_root(tmp_path: Path) -> str:
    return seed_language_pack(tmp_path)
