from __future__ import annotations
from typing import List

def tokenize(text: str) -> List[str]:
    """
    Split corpus text into lowercase tokens.
    Rules:
      * lowercase everything
      * newlines become single spaces
      * split on single spaces, trim each fragment, drop empty ones
      * punctuation is kept as part of the token
    """
    fragments = text.lower().replace("\n", " ").split(" ")
    return [frag.strip() for frag in fragments if frag.strip()]

def normalize_query(text: str) -> str:
    """Lookup key for a context or prefix: lowercased and trimmed."""
    return text.lower().strip()
