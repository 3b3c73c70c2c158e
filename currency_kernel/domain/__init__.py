"""
Currency kernel domain layer.

Pure lookup and construction logic over the compiled-in ISO 4217 table.
No I/O happens here; caches are injected into CurrencyFactory.
"""

from currency_kernel.domain.code_table import ISO4217_TABLE, CodeTable
from currency_kernel.domain.factory import CurrencyCache, CurrencyFactory, cache_key
from currency_kernel.domain.iso4217_data import NumericCode
from currency_kernel.domain.registry import CurrencyRegistry
from currency_kernel.domain.values import CodeEntry, Currency, Metadata

__all__ = [
    "CodeEntry",
    "CodeTable",
    "Currency",
    "CurrencyCache",
    "CurrencyFactory",
    "CurrencyRegistry",
    "ISO4217_TABLE",
    "Metadata",
    "NumericCode",
    "cache_key",
]
