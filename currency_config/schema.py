"""
Currency kernel configuration schema.

YAML files under ``currency_config/sets/`` are parsed into these frozen
dataclasses by the loader; ``build_factory()`` turns a KernelConfig into a
wired CurrencyFactory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class CacheBackend(str, Enum):
    """Which CurrencyCache adapter the factory is wired with."""

    NONE = "none"
    MEMORY = "memory"
    SQL = "sql"


@dataclass(frozen=True)
class CacheSettings:
    """Cache collaborator selection."""

    backend: CacheBackend = CacheBackend.MEMORY
    max_entries: int | None = None  # memory only
    database_url: str | None = None  # sql only
    create_tables: bool = True  # sql only


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KernelConfig:
    """Complete configuration for one currency kernel instance."""

    cache: CacheSettings = field(default_factory=CacheSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    source: str | None = None  # path the config was loaded from
