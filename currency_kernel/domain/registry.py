"""Registry -- validated translation between ISO 4217 code forms."""

from __future__ import annotations

from currency_kernel.domain.code_table import ISO4217_TABLE, CodeTable
from currency_kernel.domain.values import CodeEntry, Metadata
from currency_kernel.exceptions import UnknownAlphaCodeError, UnknownNumericCodeError


class CurrencyRegistry:
    """
    Lookup and validation operations over a CodeTable.

    Contract:
        Pure functions over an immutable table.  Every numeric path goes
        through validate_numeric_code(); every miss raises a typed error
        carrying the caller's input.

    Non-goals:
        - No caching (the table is already an index)
        - No logging or fallback values on a miss
    """

    __slots__ = ("_table",)

    def __init__(self, table: CodeTable = ISO4217_TABLE):
        self._table = table

    @property
    def table(self) -> CodeTable:
        return self._table

    def to_numeric_code(self, alpha_code: str) -> int:
        """
        Translate an alphabetic code to its numeric code.

        The input is stripped and uppercased before lookup.

        Raises:
            UnknownAlphaCodeError: If the normalized code is not defined.
                The error carries the original, untrimmed input.
        """
        numeric_code = self._table.alpha_to_numeric.get(_normalize_alpha(alpha_code))
        if numeric_code is None:
            raise UnknownAlphaCodeError(alpha_code)
        return numeric_code

    def to_alpha_code(self, numeric_code: int) -> str:
        """
        Translate a numeric code to its alphabetic code.

        Only ints are accepted (IntEnum members included).  Strings, floats
        and booleans are not coerced and raise, even when they would
        compare equal to a defined code.

        Raises:
            UnknownNumericCodeError: If the code is not defined.
        """
        alpha_code = None
        if isinstance(numeric_code, int) and not isinstance(numeric_code, bool):
            alpha_code = self._table.numeric_to_alpha.get(numeric_code)
        if alpha_code is None:
            raise UnknownNumericCodeError(str(numeric_code))
        return alpha_code

    def validate_numeric_code(self, numeric_code: int | str) -> int:
        """
        Coerce ``numeric_code`` to int and confirm it is defined.

        Strings are stripped and must then be ASCII digits ("840", " 048 ").
        Anything else, booleans and non-integral floats included, is an
        unknown code.

        Returns:
            The canonical integer code.

        Raises:
            UnknownNumericCodeError: If the input is not a defined code.
        """
        code = coerce_numeric_code(numeric_code)
        if code is None or code not in self._table.numeric_to_alpha:
            raise UnknownNumericCodeError(str(numeric_code))
        return code

    def get_metadata(self, numeric_code: int | str) -> Metadata:
        """
        Return the Metadata for a numeric code.

        Raises:
            UnknownNumericCodeError: Propagated from validate_numeric_code().
        """
        return self._table.numeric_to_metadata[self.validate_numeric_code(numeric_code)]

    def is_known_alpha_code(self, alpha_code: str) -> bool:
        return _normalize_alpha(alpha_code) in self._table.alpha_to_numeric

    def is_known_numeric_code(self, numeric_code: int | str) -> bool:
        code = coerce_numeric_code(numeric_code)
        return code is not None and code in self._table.numeric_to_alpha

    def all_alpha_codes(self) -> frozenset[str]:
        return frozenset(self._table.alpha_to_numeric)

    def all_numeric_codes(self) -> frozenset[int]:
        return frozenset(self._table.numeric_to_alpha)

    def entries(self) -> tuple[CodeEntry, ...]:
        """All code entries, ordered by numeric code."""
        return tuple(sorted(self._table.entries, key=lambda e: e.numeric_code))


def _normalize_alpha(alpha_code: str) -> str | None:
    if not isinstance(alpha_code, str):
        return None
    return alpha_code.strip().upper()


def coerce_numeric_code(value: int | str) -> int | None:
    """
    Canonical int for a numeric code input, or None if it cannot be one.

    No table lookup happens here; CurrencyFactory uses this to key its cache
    before the registry is consulted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        digits = value.strip()
        if digits.isascii() and digits.isdigit():
            return int(digits)
        return None
    return None
