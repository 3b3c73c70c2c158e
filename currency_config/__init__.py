"""
currency_config -- YAML-driven wiring for the currency kernel.

Responsibility:
    Loads a KernelConfig from YAML and turns it into a ready CurrencyFactory:
    picks the cache adapter, initializes the database for the SQL adapter,
    and configures kernel logging.

Architecture position:
    Sits above ``currency_kernel``.  The kernel MUST NEVER import from
    ``currency_config``; dependencies point one way only.

Failure modes:
    - ``FileNotFoundError`` -- config file does not exist.
    - ``yaml.YAMLError`` -- config file is not valid YAML.
    - ``KeyError`` / ``ValueError`` -- missing or invalid settings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from currency_config.loader import load_config_file
from currency_config.schema import CacheBackend, CacheSettings, KernelConfig, LoggingSettings
from currency_kernel.cache import InMemoryCurrencyCache, SqlCurrencyCache
from currency_kernel.db.engine import create_tables, init_engine_from_url
from currency_kernel.domain.factory import CurrencyCache, CurrencyFactory
from currency_kernel.domain.registry import CurrencyRegistry
from currency_kernel.logging_config import LogContext, configure_logging

_logger = logging.getLogger("currency_kernel.config")

# Default configuration sets directory
_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets"
DEFAULT_CONFIG_PATH = _DEFAULT_CONFIG_DIR / "default.yaml"

__all__ = [
    "CacheBackend",
    "CacheSettings",
    "DEFAULT_CONFIG_PATH",
    "KernelConfig",
    "LoggingSettings",
    "build_cache",
    "build_factory",
    "load_config",
]


def load_config(path: Path | str | None = None) -> KernelConfig:
    """
    Load a KernelConfig from ``path`` (default: ``sets/default.yaml``).

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        KeyError, ValueError: If a setting is missing or invalid.
    """
    return load_config_file(Path(path) if path is not None else DEFAULT_CONFIG_PATH)


def build_cache(settings: CacheSettings) -> CurrencyCache | None:
    """
    Instantiate the cache adapter named by ``settings``.

    Returns None for the ``none`` backend, so the factory rebuilds on
    every call.
    """
    if settings.backend is CacheBackend.NONE:
        return None
    if settings.backend is CacheBackend.MEMORY:
        return InMemoryCurrencyCache(max_entries=settings.max_entries)
    if settings.backend is CacheBackend.SQL:
        init_engine_from_url(settings.database_url)
        if settings.create_tables:
            create_tables()
        return SqlCurrencyCache()
    raise ValueError(f"Unsupported cache backend: {settings.backend!r}")


def build_factory(
    config: KernelConfig | None = None,
    registry: CurrencyRegistry | None = None,
) -> CurrencyFactory:
    """
    Wire a CurrencyFactory from ``config`` (default config when omitted).

    Logging is configured first so engine initialization is captured.
    Records emitted while wiring carry ``config_source``.
    """
    config = config if config is not None else load_config()

    configure_logging(level=config.logging.level)

    with LogContext.bind(config_source=config.source):
        factory = CurrencyFactory(registry=registry, cache=build_cache(config.cache))
        _logger.info(
            "CURRENCY_CONFIG_TRACE",
            extra={
                "cache_backend": config.cache.backend.value,
                "log_level": config.logging.level,
            },
        )
    return factory
