# phrase_trie/utils/__init__.py
"""

Does: Provide config loading, trie settings and lightweight debug logging utilities.
Returns: Public API via load_config/clear_config_cache, get_settings and debug/reload_topics.
Used by: Fuzzy lookups, trie ingestion logging, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)
from .settings import (
    TrieSettings,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "TrieSettings",
    "load_settings",
    "get_settings",
    "reset_settings",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
