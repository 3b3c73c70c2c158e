"""
Tests for SqlCurrencyCache on in-memory SQLite.

- Rows round-trip through Currency.serialize()/deserialize().
- A miss returns None; a corrupt row raises DeserializationError.
- The factory reads through the SQL cache like any other adapter.
"""

from unittest.mock import MagicMock

import pytest

from currency_kernel.cache.sql import SqlCurrencyCache
from currency_kernel.db.engine import create_tables, get_session_factory, init_engine_from_url
from currency_kernel.db.models import CachedCurrency
from currency_kernel.domain.factory import CurrencyCache, CurrencyFactory, cache_key
from currency_kernel.domain.values import Currency
from currency_kernel.exceptions import DeserializationError


@pytest.fixture
def sql_cache(sql_session_factory) -> SqlCurrencyCache:
    return SqlCurrencyCache(sql_session_factory)


class TestSqlCurrencyCache:
    def test_satisfies_protocol(self, sql_cache):
        assert isinstance(sql_cache, CurrencyCache)

    def test_miss_returns_none(self, sql_cache):
        assert sql_cache.get("iso4217.currency.840") is None

    def test_set_then_get(self, sql_cache):
        eur = Currency.of(978, "Euro", 2, "EUR", "€")
        sql_cache.set("k", eur)
        restored = sql_cache.get("k")
        assert restored == eur
        assert restored.symbol == "€"

    def test_set_upserts(self, sql_cache):
        sql_cache.set("k", Currency.of(1, "First", 2, "AAA"))
        sql_cache.set("k", Currency.of(2, "Second", 0, "BBB"))
        assert sql_cache.get("k").numeric_code == 2
        assert len(sql_cache) == 1

    def test_delete_and_clear(self, sql_cache):
        sql_cache.set("a", Currency.of(1, "First", 2, "AAA"))
        sql_cache.set("b", Currency.of(2, "Second", 0, "BBB"))
        assert sql_cache.delete("a") is True
        assert sql_cache.delete("a") is False
        sql_cache.clear()
        assert len(sql_cache) == 0

    def test_corrupt_row_raises(self, sql_cache, sql_session_factory):
        with sql_session_factory() as session:
            session.add(CachedCurrency(cache_key="bad", payload="hello"))
            session.commit()
        with pytest.raises(DeserializationError):
            sql_cache.get("bad")

    def test_stored_payload_is_wire_format(self, sql_cache, sql_session_factory):
        usd = Currency.of(840, "US Dollar", 2, "USD", "$")
        sql_cache.set("usd", usd)
        with sql_session_factory() as session:
            row = session.get(CachedCurrency, "usd")
            assert row.payload == usd.serialize()


class TestFactoryOverSql:
    def test_second_call_served_from_table(self, sql_cache, registry):
        spy = MagicMock(wraps=registry)
        factory = CurrencyFactory(registry=spy, cache=sql_cache)

        first = factory.from_alpha_code("rub")
        second = factory.from_numeric_code(643)

        assert first == second
        assert second.symbol == ""
        assert spy.get_metadata.call_count == 1
        assert sql_cache.get(cache_key(643)) == first


class TestModuleEngine:
    """SqlCurrencyCache defaults to the module-level session factory."""

    def test_default_session_factory(self, clean_engine):
        init_engine_from_url("sqlite:///:memory:")
        create_tables()
        cache = SqlCurrencyCache()
        usd = Currency.of(840, "US Dollar", 2, "USD", "$")
        cache.set("usd", usd)
        assert SqlCurrencyCache(get_session_factory()).get("usd") == usd

    def test_uninitialized_engine_rejected(self, clean_engine):
        with pytest.raises(RuntimeError, match="Engine not initialized"):
            SqlCurrencyCache()
