# phrase_trie/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Word/sentence normalization for corpus ingestion
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Deterministic word normalization (strip every non-alphabetic
      character, then lowercase) and sentence cleaning over ASCII
      whitespace.
Returns: normalize_word(), clean_sentence(), split_ascii_whitespace().
Used by: token.split (split_corpus) and therefore trie ingestion.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "ASCII_WHITESPACE",
    "is_alphabetic",
    "split_ascii_whitespace",
    "normalize_word",
    "clean_sentence",
]

# Space, tab, line feed, form feed, carriage return (no vertical tab, no Unicode spaces)
ASCII_WHITESPACE = " \t\n\f\r"
_ASCII_WS_RE = re.compile(r"[ \t\n\f\r]+")


def split_ascii_whitespace(text: str) -> list[str]:
    """
    Does: Split on runs of ASCII whitespace, dropping empty pieces.
    Returns: Ordered list of non-empty pieces.
    """
    if not isinstance(text, str):
        return []
    return [piece for piece in _ASCII_WS_RE.split(text) if piece]


def is_alphabetic(ch: str) -> bool:
    """
    Does: Letters (L*) plus letter numbers (Nl, e.g. Roman numerals).
          Other_Alphabetic combining marks (e.g. U+0345) are not covered.
    """
    return ch.isalpha() or unicodedata.category(ch) == "Nl"


def normalize_word(word: str) -> str:
    """
    Does: Keep only alphabetic characters, then lowercase.
    Returns: Normalized word; "" when nothing alphabetic remains ("3," → "").
    """
    if not isinstance(word, str):
        return ""
    return "".join(ch for ch in word if is_alphabetic(ch)).lower()


def clean_sentence(sentence: str) -> str:
    """
    Does: Normalize each whitespace-separated word and rejoin with single spaces.
          Words that normalize to "" leave an empty slot ("e , f" → "e  f");
          split_sentence() drops those later.
    Returns: Cleaned sentence.
    """
    return " ".join(normalize_word(w) for w in split_ascii_whitespace(sentence))
