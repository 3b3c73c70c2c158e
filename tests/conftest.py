"""
Pytest fixtures for the currency kernel test suite.

Provides:
- Registry / factory / cache fixtures over the real ISO 4217 table
- An isolated in-memory SQLite session factory for the SQL cache
- Structured log capture
"""

import json
import logging
from io import StringIO

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from currency_kernel.cache.memory import InMemoryCurrencyCache
from currency_kernel.db.base import Base
from currency_kernel.db import models  # noqa: F401
from currency_kernel.db.engine import reset_engine
from currency_kernel.domain.factory import CurrencyFactory
from currency_kernel.domain.registry import CurrencyRegistry
from currency_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)

# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture currency_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, factory):
            factory.from_numeric_code(840)
            logs = captured_logs()
            assert any(r["message"] == "currency_cache_stored" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("currency_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def registry() -> CurrencyRegistry:
    return CurrencyRegistry()


@pytest.fixture
def memory_cache() -> InMemoryCurrencyCache:
    return InMemoryCurrencyCache()


@pytest.fixture
def factory(registry, memory_cache) -> CurrencyFactory:
    """Factory over the real table with a fresh in-memory cache."""
    return CurrencyFactory(registry=registry, cache=memory_cache)


@pytest.fixture
def uncached_factory(registry) -> CurrencyFactory:
    return CurrencyFactory(registry=registry)


# =============================================================================
# Database fixtures
# =============================================================================


@pytest.fixture
def sql_session_factory():
    """Session factory bound to a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def clean_engine():
    """Reset the module-level engine around tests that initialize it."""
    reset_engine()
    yield
    reset_engine()
