"""Cache adapters satisfying the CurrencyCache protocol."""

from currency_kernel.cache.memory import InMemoryCurrencyCache, NullCurrencyCache
from currency_kernel.cache.sql import SqlCurrencyCache

__all__ = [
    "InMemoryCurrencyCache",
    "NullCurrencyCache",
    "SqlCurrencyCache",
]
