# phrase_trie/token/__init__.py
"""
token.
=====

Does: Provide the corpus tokenizer and suffix generator.
Exports: normalize_word, clean_sentence, split_ascii_whitespace,
         split_corpus, split_sentence, suffixes
Used by: Phrase trie ingestion (TrieNode.from_corpus).
"""

from __future__ import annotations

from .normalize import (
    clean_sentence,
    normalize_word,
    split_ascii_whitespace,
)
from .split import (
    SENTENCE_DELIMITERS,
    split_corpus,
    split_sentence,
    suffixes,
)

__all__ = [
    # normalize
    "normalize_word",
    "clean_sentence",
    "split_ascii_whitespace",
    # split
    "SENTENCE_DELIMITERS",
    "split_corpus",
    "split_sentence",
    "suffixes",
]
