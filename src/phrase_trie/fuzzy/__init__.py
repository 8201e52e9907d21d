# src/phrase_trie/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing the token-level fuzzy helpers used by tolerant
trie lookups.

Returns: Edit-shape checks and safe best-match against a known token set.
Used by: trie.lookup.
"""

from __future__ import annotations

from .fuzzy_core import (
    collapse_duplicates,
    fuzzy_match_token_safe,
    is_single_edit,
    is_single_substitution,
    is_single_transposition,
)

__all__ = [
    "fuzzy_match_token_safe",
    "collapse_duplicates",
    "is_single_transposition",
    "is_single_substitution",
    "is_single_edit",
]

__docformat__ = "google"
