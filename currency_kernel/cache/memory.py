"""
In-process cache adapters for CurrencyFactory.

InMemoryCurrencyCache keeps entries in a lock-guarded dict with an optional
LRU bound.  NullCurrencyCache stores nothing, so every factory call rebuilds.
"""

from __future__ import annotations

import threading
from collections import OrderedDict

from currency_kernel.domain.values import Currency


class InMemoryCurrencyCache:
    """
    Dict-backed currency cache.

    Guarantees:
        - get()/set() are individually atomic (one lock per call).
        - With max_entries set, the least recently used key is evicted
          once the bound is exceeded.
    """

    def __init__(self, max_entries: int | None = None):
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[str, Currency] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get(self, key: str) -> Currency | None:
        with self._lock:
            value = self._entries.get(key)
            if value is not None:
                self._entries.move_to_end(key)
            return value

    def set(self, key: str, value: Currency) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    self._entries.popitem(last=False)

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class NullCurrencyCache:
    """Cache that never holds anything."""

    def get(self, key: str) -> Currency | None:
        return None

    def set(self, key: str, value: Currency) -> None:
        pass
