# src/phrase_trie/fuzzy/fuzzy_core.py
from __future__ import annotations

"""
fuzzy_core.py

Does: Edit-shape checks and a safe best-match of one raw token against a
      known token set (typically the children of a trie node).
Returns: collapse_duplicates, is_single_transposition, is_single_substitution,
         is_single_edit, fuzzy_match_token_safe.
Used by: trie.lookup for tolerant prefix queries.
"""

import logging
import re
from collections.abc import Callable, Iterable

from rapidfuzz import fuzz

from phrase_trie.token import normalize_word
from phrase_trie.utils.settings import get_settings

__all__ = [
    "collapse_duplicates",
    "is_single_transposition",
    "is_single_substitution",
    "is_single_edit",
    "fuzzy_match_token_safe",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
MIN_EDIT_LEN = 3


# ─────────────────────────────────────────────────────────────────────────────
# Edit-shape helpers
# ─────────────────────────────────────────────────────────────────────────────
def collapse_duplicates(s: str) -> str:
    """
    Does: Collapse repeated chars (e.g., 'cooool'→'col').
    Returns: String.
    """
    return re.sub(r"(.)\1+", r"\1", s)


def is_single_transposition(a: str, b: str) -> bool:
    """
    Does: Check one adjacent swap between equal-length strings.
    Returns: Boolean.
    """
    if len(a) != len(b):
        return False
    diffs = [i for i in range(len(a)) if a[i] != b[i]]
    return (
        len(diffs) == 2
        and diffs[1] == diffs[0] + 1
        and a[diffs[0]] == b[diffs[1]]
        and a[diffs[1]] == b[diffs[0]]
    )


def is_single_substitution(a: str, b: str) -> bool:
    """
    Does: Check exactly one differing position between equal-length strings.
    Returns: Boolean.
    """
    if len(a) != len(b):
        return False
    return sum(1 for x, y in zip(a, b) if x != y) == 1


def is_single_edit(a: str, b: str) -> bool:
    """Does: True iff `b` is `a` with one char inserted or deleted."""
    if abs(len(a) - len(b)) != 1:
        return False
    short, long_ = (a, b) if len(a) < len(b) else (b, a)
    return any(long_[:i] + long_[i + 1:] == short for i in range(len(long_)))


def _long_enough(a: str, b: str) -> bool:
    # one-char edits are meaningless on very short words
    return min(len(a), len(b)) >= MIN_EDIT_LEN


# Strongest first
_EDIT_RULES: tuple[tuple[str, Callable[[str, str], bool]], ...] = (
    ("SWAP", is_single_transposition),
    ("DEDUP", lambda a, b: collapse_duplicates(a) == collapse_duplicates(b)),
    (
        "SUB",
        lambda a, b: _long_enough(a, b)
        and is_single_substitution(collapse_duplicates(a), collapse_duplicates(b)),
    ),
    ("INS/DEL", lambda a, b: _long_enough(a, b) and is_single_edit(a, b)),
)


# ─────────────────────────────────────────────────────────────────────────────
# Safe best-match against a known token set
# ─────────────────────────────────────────────────────────────────────────────
def fuzzy_match_token_safe(
    raw_token: str,
    known_tokens: Iterable[str],
    threshold: int | None = None,
    *,
    length_delta_skip: int | None = None,
) -> str | None:
    """
    Does: Best known token for `raw_token`: exact → transposition →
          duplicate-collapse → substitution → insertion/deletion →
          rapidfuzz ratio ≥ threshold. `raw_token` is normalized like a
          corpus word first. Each rule is tried on every candidate before
          the next one; within a rule, candidates are scanned in sorted
          order, so ties keep the alphabetically first candidate.
    Returns: A member of `known_tokens`, or None.
    """
    if threshold is None or length_delta_skip is None:
        settings = get_settings()
        threshold = settings.fuzzy_threshold if threshold is None else threshold
        if length_delta_skip is None:
            length_delta_skip = settings.length_delta_skip

    raw = normalize_word(raw_token) if isinstance(raw_token, str) else ""
    if not raw:
        return None
    candidates = sorted(t for t in known_tokens if isinstance(t, str) and t)
    if raw in candidates:
        return raw

    candidates = [c for c in candidates if abs(len(c) - len(raw)) <= length_delta_skip]

    # each rule is tried on every candidate before the next, weaker rule
    for tag, rule in _EDIT_RULES:
        for cand in candidates:
            if rule(raw, cand):
                log.debug("[%s] %r → %r", tag, raw, cand)
                return cand

    best_match, best_score = None, 0.0
    for cand in candidates:
        score = fuzz.ratio(raw, cand)
        if score > best_score:
            best_score, best_match = score, cand

    if best_match is not None and best_score >= threshold:
        log.debug("[FUZZY≥%d] %r → %r (%.1f)", threshold, raw, best_match, best_score)
        return best_match
    return None
