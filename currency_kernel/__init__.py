"""
Currency Kernel - ISO 4217 reference data

Lookup library for ISO 4217 currency codes:
- Bidirectional numeric <-> alphabetic code translation
- Descriptive metadata (description, minor units, symbol)
- Immutable Currency value objects with a JSON wire format
- Read-through caching factory with pluggable cache adapters
"""

__version__ = "0.1.0"
