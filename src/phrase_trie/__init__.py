"""
phrase_trie
===========

Does: Root package initializer for the phrase trie project.
Returns: Exposes the main entry points (TrieNode, tokenizer helpers,
         diagonal index enumerator) through a stable namespace.
Used by: All higher-level imports starting from `phrase_trie.*`.
"""

from .indices import index_array, order_by_distance
from .token import split_corpus, split_sentence, suffixes
from .trie import TrieNode, fuzzy_names_at_path

__all__: list[str] = [
    "TrieNode",
    "fuzzy_names_at_path",
    "split_corpus",
    "split_sentence",
    "suffixes",
    "index_array",
    "order_by_distance",
]
__docformat__ = "google"
