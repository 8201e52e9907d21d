# phrase_trie/token/split.py

"""
split.py.

Does: Corpus → sentences → word tokens → suffixes, under fixed rules:
      sentences end at any of ". ! ? ;", words are separated by ASCII
      whitespace, and every contiguous suffix of a sentence is a phrase.
Returns: split_corpus(), split_sentence(), suffixes().
Used by: TrieNode.from_corpus.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import TypeVar

from .normalize import clean_sentence, split_ascii_whitespace

__all__ = [
    "SENTENCE_DELIMITERS",
    "split_corpus",
    "split_sentence",
    "suffixes",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

SENTENCE_DELIMITERS = ".!?;"
_SENTENCE_END_RE = re.compile("[" + re.escape(SENTENCE_DELIMITERS) + "]")

T = TypeVar("T")


def split_corpus(corpus: str) -> list[str]:
    """
    Does: Split `corpus` on sentence delimiters and clean every sentence.
          A final delimiter does not open a trailing sentence. Empty segments
          are dropped before trimming, so a whitespace-only segment yields "".
    Returns: Cleaned sentences in corpus order.
    """
    if not isinstance(corpus, str):
        return []
    segments = _SENTENCE_END_RE.split(corpus)
    if segments and segments[-1] == "":
        segments.pop()
    sentences = [clean_sentence(seg.strip()) for seg in segments if seg]
    log.debug("split_corpus: %d sentence(s) from %d char(s)", len(sentences), len(corpus))
    return sentences


def split_sentence(sentence: str) -> list[str]:
    """Does: Split a cleaned sentence on ASCII whitespace. Returns: tokens."""
    return split_ascii_whitespace(sentence)


def suffixes(tokens: Sequence[T]) -> list[list[T]]:
    """
    Does: Every contiguous tail of `tokens`, longest first.
    Returns: [[a, b, c], [b, c], [c]] for [a, b, c]; [] for an empty sequence.
    """
    return [list(tokens[i:]) for i in range(len(tokens))]
