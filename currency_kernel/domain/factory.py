"""
Module: currency_kernel.domain.factory
Responsibility: Build Currency value objects from a numeric or alpha code,
    optionally reading through a pluggable cache so a warm cache yields at
    most one registry lookup per numeric code.
Architecture position: Kernel > Domain.  May import from domain/registry.py,
    domain/values.py and logging_config.  Cache adapters live in
    currency_kernel.cache and are injected, never imported here.

Invariants enforced:
    - Cache key is a pure function of the canonical int code (cache_key()
      over coerce_numeric_code()), so 840, " 840", "0840" and 840.0 share
      one entry.
    - A non-None cache entry is returned as-is: no re-validation and no
      registry call.  Cached entries are trusted.
    - Registry errors propagate unchanged and never populate the cache.
    - from_alpha_code() does not touch the cache before the alpha code
      resolves.
    - Log records emitted during a lookup carry the raw input as
      ``lookup_code`` (bound through LogContext).

Failure modes:
    - UnknownNumericCodeError from from_numeric_code().  Input that cannot
      be a code is rejected before the cache or registry is touched.
    - UnknownAlphaCodeError from from_alpha_code().
    - Whatever the injected cache raises from get()/set() propagates.

Concurrency:
    The get-miss -> build -> set sequence is NOT atomic.  Two threads asking
    for the same cold code may both build and both store; the last write
    wins.  Deduplication is best-effort.  Callers that need a strict
    single-build guarantee must wrap the factory with a per-key lock or use a
    cache with an add-if-absent primitive.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from currency_kernel.domain.registry import CurrencyRegistry, coerce_numeric_code
from currency_kernel.domain.values import Currency
from currency_kernel.exceptions import UnknownNumericCodeError
from currency_kernel.logging_config import LogContext, get_logger

logger = get_logger("domain.factory")

CACHE_KEY_PREFIX = "iso4217.currency."


@runtime_checkable
class CurrencyCache(Protocol):
    """
    Protocol for the cache collaborator consumed by CurrencyFactory.

    Any object with these two methods qualifies: in-memory maps, SQL or
    network-backed stores, or a no-op.
    """

    def get(self, key: str) -> Currency | None:
        """Return the cached currency, or None on a miss. Must not raise on a miss."""
        ...

    def set(self, key: str, value: Currency) -> None:
        """Store ``value`` under ``key``."""
        ...


def cache_key(numeric_code: int) -> str:
    """Namespaced cache key for a numeric code."""
    return f"{CACHE_KEY_PREFIX}{numeric_code}"


class CurrencyFactory:
    """Constructs Currency objects via a CurrencyRegistry."""

    def __init__(
        self,
        registry: CurrencyRegistry | None = None,
        cache: CurrencyCache | None = None,
    ):
        self._registry = registry if registry is not None else CurrencyRegistry()
        self._cache = cache

    @property
    def registry(self) -> CurrencyRegistry:
        return self._registry

    @property
    def cache(self) -> CurrencyCache | None:
        return self._cache

    def from_numeric_code(self, numeric_code: int) -> Currency:
        """
        Build (or fetch from cache) the Currency for a numeric code.

        Input is coerced to its canonical int before the cache is consulted,
        using the same rule as CurrencyRegistry.validate_numeric_code().

        Raises:
            UnknownNumericCodeError: If the code is not defined.
        """
        with LogContext.bind(lookup_code=numeric_code):
            return self._build(numeric_code)

    def from_alpha_code(self, alpha_code: str) -> Currency:
        """
        Build (or fetch from cache) the Currency for an alphabetic code.

        Raises:
            UnknownAlphaCodeError: If the code is not defined.
        """
        with LogContext.bind(lookup_code=alpha_code):
            return self._build(self._registry.to_numeric_code(alpha_code))

    def _build(self, numeric_code: int) -> Currency:
        code = coerce_numeric_code(numeric_code)
        if code is None:
            raise UnknownNumericCodeError(str(numeric_code))

        key = cache_key(code)
        if self._cache is not None:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("currency_cache_hit", extra={"cache_key": key})
                return cached

        metadata = self._registry.get_metadata(code)
        currency = Currency(numeric_code=code, metadata=metadata)

        if self._cache is not None:
            self._cache.set(key, currency)
            logger.debug("currency_cache_stored", extra={"cache_key": key})

        return currency

