"""
Configuration Loader (``currency_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into the typed
``currency_config.schema`` dataclasses.  Runtime callers go through
``currency_config.load_config()`` / ``build_factory()`` rather than using
this module directly.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass from ``schema.py``.
* Unknown backends and log levels are rejected, never defaulted.
* An ``sql`` cache backend must name a ``database_url``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError``.
* Invalid values  -> ``ValueError`` with a descriptive message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from currency_config.schema import (
    CacheBackend,
    CacheSettings,
    KernelConfig,
    LoggingSettings,
)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(data).__name__}")
    return data


def parse_cache(data: dict[str, Any]) -> CacheSettings:
    """Parse the ``cache`` section."""
    raw_backend = data.get("backend", CacheBackend.MEMORY.value)
    try:
        backend = CacheBackend(str(raw_backend).lower())
    except ValueError:
        allowed = ", ".join(b.value for b in CacheBackend)
        raise ValueError(f"Unknown cache backend {raw_backend!r} (expected one of: {allowed})") from None

    max_entries = data.get("max_entries")
    if max_entries is not None:
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 1:
            raise ValueError(f"cache.max_entries must be a positive integer, got {max_entries!r}")

    database_url = data.get("database_url")
    if backend is CacheBackend.SQL:
        if "database_url" not in data:
            raise KeyError("cache.database_url is required for the sql backend")
        if not isinstance(database_url, str) or not database_url.strip():
            raise ValueError("cache.database_url must be a non-empty string")

    return CacheSettings(
        backend=backend,
        max_entries=max_entries,
        database_url=database_url,
        create_tables=bool(data.get("create_tables", True)),
    )


def parse_logging(data: dict[str, Any]) -> LoggingSettings:
    """Parse the ``logging`` section."""
    level = str(data.get("level", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level {level!r}")
    return LoggingSettings(level=level)


def parse_config(data: dict[str, Any], source: str | None = None) -> KernelConfig:
    """Parse a whole configuration document."""
    return KernelConfig(
        cache=parse_cache(data.get("cache") or {}),
        logging=parse_logging(data.get("logging") or {}),
        source=source,
    )


def load_config_file(path: Path) -> KernelConfig:
    """Load and parse one YAML configuration file."""
    return parse_config(load_yaml_file(path), source=str(path))
