"""
log.py.

Does: Lightweight debug logger controlled by PHRASE_TRIE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used across trie/token/tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "topic_enabled"]

_ENV_VAR = "PHRASE_TRIE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PHRASE_TRIE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    """Does: True iff `topic` (or 'all') is listed in PHRASE_TRIE_DEBUG_TOPICS."""
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "trie",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via PHRASE_TRIE_DEBUG_TOPICS. Silent when the variable is unset.
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    topic_key = topic.lower().strip()
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
