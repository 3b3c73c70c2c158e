"""
Module: currency_kernel.domain.code_table
Responsibility: Index the ISO 4217 dataset into the three read-only mappings
    every lookup is served from: alpha -> numeric, numeric -> alpha and
    numeric -> Metadata.
Architecture position: Kernel > Domain.  May import from domain/values.py and
    domain/iso4217_data.py only.

Invariants enforced:
    - Numeric codes and alpha codes are each unique across the table.
    - alpha_to_numeric and numeric_to_alpha are mutual inverses.
    - Alpha keys are canonical (stripped, uppercase).
    - Mappings are MappingProxyType views over private dicts; nothing outside
      this module holds a mutable reference.

Failure modes:
    - ValueError at construction on duplicate or malformed entries.  The
      module-level ISO4217_TABLE is built at import, so a broken dataset
      fails the import rather than a later lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from currency_kernel.domain.iso4217_data import ISO4217_ENTRIES
from currency_kernel.domain.values import CodeEntry, Metadata


class CodeTable:
    """
    Immutable index over a set of ISO 4217 code entries.

    Contract:
        Built once from an iterable of CodeEntry; exposes read access only.
        There are no lookup errors at this level -- callers use
        ``Mapping.get`` / ``in`` and the registry turns misses into typed
        errors.
    """

    __slots__ = ("_entries", "_alpha_to_numeric", "_numeric_to_alpha", "_numeric_to_metadata")

    def __init__(self, entries: Iterable[CodeEntry]):
        alpha_to_numeric: dict[str, int] = {}
        numeric_to_alpha: dict[int, str] = {}
        numeric_to_metadata: dict[int, Metadata] = {}

        ordered = tuple(entries)
        for entry in ordered:
            _check_entry(entry)
            if entry.numeric_code in numeric_to_alpha:
                raise ValueError(f"Duplicate numeric code: {entry.numeric_code}")
            if entry.alpha_code in alpha_to_numeric:
                raise ValueError(f"Duplicate alpha code: {entry.alpha_code}")
            alpha_to_numeric[entry.alpha_code] = entry.numeric_code
            numeric_to_alpha[entry.numeric_code] = entry.alpha_code
            numeric_to_metadata[entry.numeric_code] = entry.metadata

        self._entries = ordered
        self._alpha_to_numeric = MappingProxyType(alpha_to_numeric)
        self._numeric_to_alpha = MappingProxyType(numeric_to_alpha)
        self._numeric_to_metadata = MappingProxyType(numeric_to_metadata)

    @property
    def alpha_to_numeric(self) -> Mapping[str, int]:
        return self._alpha_to_numeric

    @property
    def numeric_to_alpha(self) -> Mapping[int, str]:
        return self._numeric_to_alpha

    @property
    def numeric_to_metadata(self) -> Mapping[int, Metadata]:
        return self._numeric_to_metadata

    @property
    def entries(self) -> tuple[CodeEntry, ...]:
        """All entries in the order the table was built from."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CodeEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CodeTable({len(self)} entries)"


def _check_entry(entry: CodeEntry) -> None:
    if not isinstance(entry.numeric_code, int) or not 1 <= entry.numeric_code <= 999:
        raise ValueError(f"Numeric code out of range: {entry.numeric_code!r}")
    alpha = entry.alpha_code
    if not (isinstance(alpha, str) and len(alpha) == 3 and alpha.isascii()
            and alpha.isalpha() and alpha.isupper()):
        raise ValueError(f"Alpha code must be 3 uppercase ASCII letters: {alpha!r}")
    if not entry.description:
        raise ValueError(f"Empty description for {alpha}")
    if entry.minor_units < 0:
        raise ValueError(f"Negative minor units for {alpha}: {entry.minor_units}")


# Process-wide dataset, built once at import
ISO4217_TABLE = CodeTable(ISO4217_ENTRIES)
