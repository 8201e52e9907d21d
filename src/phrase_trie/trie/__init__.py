# phrase_trie/trie/__init__.py
"""
trie.
====

Does: Expose the phrase trie and its tolerant lookups.
Exports: ROOT_NAME, TrieNode, resolve_path, fuzzy_names_at_path
Used by: Corpus indexing and prefix-continuation queries.
"""

from __future__ import annotations

from .lookup import fuzzy_names_at_path, resolve_path
from .node import ROOT_NAME, TrieNode

__all__ = [
    "ROOT_NAME",
    "TrieNode",
    "resolve_path",
    "fuzzy_names_at_path",
]
