"""
settings.py.

Does: Load the tunables used by tolerant (fuzzy) trie lookups from
      <data>/trie_settings.json and expose them as a frozen TrieSettings.
Returns: TrieSettings, load_settings(), get_settings(), reset_settings().
Used by: fuzzy.fuzzy_core and trie.lookup when no explicit threshold is passed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from .load_config import load_config

__all__ = [
    "SETTINGS_FILE",
    "TrieSettings",
    "load_settings",
    "get_settings",
    "reset_settings",
]

log = logging.getLogger(__name__)

SETTINGS_FILE = "trie_settings"


@dataclass(frozen=True)
class TrieSettings:
    fuzzy_threshold: int = 82
    length_delta_skip: int = 2


def _validate_settings(raw: dict[str, Any]) -> dict[str, Any]:
    """Does: Check known keys for type and range; unknown keys are dropped."""
    out: dict[str, Any] = {}
    if "fuzzy_threshold" in raw:
        v = raw["fuzzy_threshold"]
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 100:
            raise ValueError(f"fuzzy_threshold must be an int in [0, 100], got {v!r}")
        out["fuzzy_threshold"] = v
    if "length_delta_skip" in raw:
        v = raw["length_delta_skip"]
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise ValueError(f"length_delta_skip must be a non-negative int, got {v!r}")
        out["length_delta_skip"] = v
    ignored = sorted(set(raw) - set(out))
    if ignored:
        log.debug("Ignoring unknown settings keys: %s", ", ".join(ignored))
    return out


def load_settings(base_dir: Path | None = None) -> TrieSettings:
    """
    Does: Read and validate trie_settings.json (missing keys keep defaults).
          Without `base_dir` the shipped phrase_trie/data/ is used unless
          PHRASE_TRIE_DATA_DIR points elsewhere; the generic DATA_DIR is ignored.
    """
    data = load_config(SETTINGS_FILE, base_dir=base_dir, validator=_validate_settings)
    return TrieSettings(**data)


@lru_cache(maxsize=1)
def get_settings() -> TrieSettings:
    """Does: Cached load_settings() for the discovered data dir."""
    return load_settings()


def reset_settings() -> None:
    """Does: Drop the cached settings so the next get_settings() re-reads disk."""
    get_settings.cache_clear()
