# src/phrase_trie/utils/load_config.py

"""Load JSON object configs from a <data/> directory with mtime-keyed caching.

The parsed object is cached per (path, mtime, encoding); an optional validator
runs on a fresh copy at every call, so validated output never leaks into the
cache.

Data dir resolution: explicit `base_dir` > PHRASE_TRIE_DATA_DIR > the first
'data'/'Data' directory found walking up from this module (the package ships
phrase_trie/data/).

Used by the settings loader (trie lookup tunables) and tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "DATA_DIR_ENV_VAR",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VAR = "PHRASE_TRIE_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data'/'Data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / name).resolve() for p in [start, *start.parents] for name in ("data", "Data")]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from PHRASE_TRIE_DATA_DIR if set."""
    v = os.environ.get(DATA_DIR_ENV_VAR)
    return Path(os.path.expanduser(v)).resolve() if v else None


def _resolve_config_path(file: str | os.PathLike[str], data_dir: Path) -> Path:
    """Map `file` to <data_dir>/<file>.json, refusing anything outside data_dir."""
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json_object(path: Path, encoding: str) -> dict[str, Any]:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, cache the parse, then apply `validator`."""
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = Path(base_dir).resolve()
    path = _resolve_config_path(file, data_dir)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)
    with _CACHE_LOCK:
        data = _CONFIG_CACHE.get(cache_key)
    if data is None:
        data = _read_json_object(path, encoding)
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    else:
        log.debug("Config cache HIT: %s", path.name)

    result = dict(data)
    if validator is None:
        return result
    try:
        return validator(result)
    except Exception as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
