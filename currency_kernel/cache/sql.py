"""
Module: currency_kernel.cache.sql
Responsibility: CurrencyCache adapter persisting serialized currencies in a
    SQL table through SQLAlchemy, so a warm cache survives process restarts
    and can be shared between processes.
Architecture position: Kernel > Cache.  May import from db/ and
    domain/values.py.

Invariants enforced:
    - Each get()/set() runs in its own short transaction (session_scope).
    - Stored payload is Currency.serialize(); reads go through
      Currency.deserialize(), so a row decodes to a field-equal Currency.

Failure modes:
    - get() returns None for a missing key and never raises for a miss.
    - DeserializationError from get() when a stored payload is corrupt.
    - sqlalchemy.exc.SQLAlchemyError from either call on database failure.
"""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from currency_kernel.db.engine import get_session_factory, session_scope
from currency_kernel.db.models import CachedCurrency
from currency_kernel.domain.values import Currency
from currency_kernel.logging_config import get_logger

logger = get_logger("cache.sql")


class SqlCurrencyCache:
    """Currency cache stored in the ``currency_cache`` table."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None):
        self._session_factory = (
            session_factory if session_factory is not None else get_session_factory()
        )

    def get(self, key: str) -> Currency | None:
        with session_scope(self._session_factory) as session:
            payload = session.scalar(
                select(CachedCurrency.payload).where(CachedCurrency.cache_key == key)
            )
        if payload is None:
            return None
        return Currency.deserialize(payload)

    def set(self, key: str, value: Currency) -> None:
        payload = value.serialize()
        with session_scope(self._session_factory) as session:
            session.merge(CachedCurrency(cache_key=key, payload=payload))
        logger.debug("currency_cache_row_written", extra={"cache_key": key})

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether a row was deleted."""
        with session_scope(self._session_factory) as session:
            result = session.execute(
                delete(CachedCurrency).where(CachedCurrency.cache_key == key)
            )
            return result.rowcount > 0

    def clear(self) -> None:
        with session_scope(self._session_factory) as session:
            session.execute(delete(CachedCurrency))

    def __len__(self) -> int:
        with session_scope(self._session_factory) as session:
            return session.scalar(select(func.count()).select_from(CachedCurrency)) or 0
