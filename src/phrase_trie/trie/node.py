# phrase_trie/trie/node.py

"""
node.py.

Does: Phrase trie over word tokens. Every contiguous suffix of every
      sentence is stored as a root-to-node path, so a prefix that starts
      anywhere inside a sentence can be continued by a lookup.
Returns: TrieNode with ingestion (add_phrase, from_corpus), lookup
         (step_down, names_at_path) and analytics (span_map, depth_map).
Used by: trie.lookup (tolerant lookups), callers building phrase indexes.

Notes:
- Children are owned exclusively: no parent pointers, no shared subtrees.
- span_map is one level deep; depth_map measures the whole subtree.
- Traversals in depth() are iterative, so long sentences never hit the
  interpreter recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from phrase_trie.token import split_corpus, split_sentence, suffixes
from phrase_trie.utils.log import debug

__all__ = ["ROOT_NAME", "TrieNode"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

ROOT_NAME = "root"


class TrieNode:
    __slots__ = ("name", "children")

    def __init__(self, name: str):
        self.name = name
        self.children: dict[str, TrieNode] = {}

    # ── Construction ─────────────────────────────────────────────────────────
    @classmethod
    def new(cls, name: str) -> TrieNode:
        """Does: Childless node named `name`."""
        return cls(name)

    @classmethod
    def default(cls) -> TrieNode:
        """Does: Childless root node named ROOT_NAME."""
        return cls(ROOT_NAME)

    @classmethod
    def from_corpus(cls, corpus: str) -> TrieNode:
        """
        Does: Build a fresh root and ingest every suffix of every sentence.
              Phrases never cross a sentence boundary.
        Returns: The root node.
        """
        root = cls.default()
        n_sentences = n_phrases = 0
        for sentence in split_corpus(corpus):
            n_sentences += 1
            for phrase in suffixes(split_sentence(sentence)):
                root.add_phrase(phrase)
                n_phrases += 1
        log.debug(
            "from_corpus: %d sentence(s), %d phrase(s), %d top-level token(s)",
            n_sentences,
            n_phrases,
            len(root.children),
        )
        debug(f"ingested {n_phrases} phrases from {n_sentences} sentences", topic="trie")
        return root

    def add_phrase(self, path: Iterable[str]) -> None:
        """
        Does: Walk from self, following or creating one child per token.
              Re-adding a known path creates nothing; an empty path is a no-op.
        """
        node = self
        for token in path:
            child = node.children.get(token)
            if child is None:
                child = TrieNode(token)
                node.children[token] = child
            node = child

    # ── Lookup ───────────────────────────────────────────────────────────────
    def children_names(self) -> list[str]:
        """Does: Immediate child tokens. Order is not significant."""
        return list(self.children)

    def step_down(self, token: str) -> TrieNode | None:
        """Does: Child named `token`, or None. Never mutates."""
        return self.children.get(token)

    def names_at_path(self, path: Sequence[str]) -> list[str] | None:
        """
        Does: Follow step_down once per token of `path`.
        Returns: children_names() of the node reached, or None on the first
                 missing token. An empty path gives this node's own children.
        """
        node = self
        for token in path:
            child = node.step_down(token)
            if child is None:
                return None
            node = child
        return node.children_names()

    # ── Analytics ────────────────────────────────────────────────────────────
    def depth(self) -> int:
        """
        Does: Length of the longest token chain below this node
              (0 for a leaf, else 1 + the deepest child).
        """
        deepest = 0
        stack: list[tuple[TrieNode, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if level > deepest:
                deepest = level
            stack.extend((child, level + 1) for child in node.children.values())
        return deepest

    def span_map(self) -> dict[str, int]:
        """Does: child name → number of that child's own immediate children."""
        return {name: len(child.children) for name, child in self.children.items()}

    def depth_map(self) -> dict[str, int]:
        """Does: child name → depth() of that child's whole subtree."""
        return {name: child.depth() for name, child in self.children.items()}

    # ── Dunder helpers ───────────────────────────────────────────────────────
    def __contains__(self, token: object) -> bool:
        return token in self.children

    def __len__(self) -> int:
        return len(self.children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self.name == other.name and self.children == other.children

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TrieNode(name={self.name!r}, children={sorted(self.children)!r})"
