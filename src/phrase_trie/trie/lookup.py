# phrase_trie/trie/lookup.py
from __future__ import annotations

"""
lookup.py

Does: Tolerant prefix queries over a phrase trie. Each path token is
      matched exactly when possible, otherwise against the children of
      the current node with fuzzy_match_token_safe.
Returns: resolve_path(), fuzzy_names_at_path().
Used by: Callers answering "what follows this prefix?" for typed input.
"""

import logging
from collections.abc import Sequence

from phrase_trie.fuzzy import fuzzy_match_token_safe
from phrase_trie.utils.log import debug

from .node import TrieNode

__all__ = ["resolve_path", "fuzzy_names_at_path"]

log = logging.getLogger(__name__)


def resolve_path(
    node: TrieNode,
    path: Sequence[str],
    threshold: int | None = None,
) -> list[str] | None:
    """
    Does: Map every token of `path` to an existing child name, walking down.
    Returns: The resolved token list, or None when some token has neither
             an exact nor a fuzzy match at its position.
    """
    resolved: list[str] = []
    current = node
    for token in path:
        child = current.step_down(token)
        if child is None:
            match = fuzzy_match_token_safe(token, current.children_names(), threshold)
            if match is None:
                log.debug("resolve_path: no match for %r after %r", token, resolved)
                return None
            debug(f"resolved {token!r} → {match!r}", topic="lookup")
            child = current.children[match]
        resolved.append(child.name)
        current = child
    return resolved


def fuzzy_names_at_path(
    node: TrieNode,
    path: Sequence[str],
    threshold: int | None = None,
) -> list[str] | None:
    """Does: names_at_path() on the resolved path. Returns: names or None."""
    resolved = resolve_path(node, path, threshold)
    if resolved is None:
        return None
    return node.names_at_path(resolved)
