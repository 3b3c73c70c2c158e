"""
Values -- Immutable currency value objects and their wire codec.

Responsibility:
    Provides the record types shared by every layer of the kernel: CodeEntry
    (one row of the ISO 4217 table), Metadata (the descriptive part of a row)
    and Currency (a resolved numeric code plus its Metadata).  Currency also
    owns its serialized form.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by code_table, registry, factory and the cache adapters.
    No outward dependencies except currency_kernel.exceptions.

Invariants enforced:
    - All three types are frozen; there is no mutation after construction.
    - Deserialization builds a NEW Currency in one step (never a partial
      overwrite of an existing instance).
    - Round trip: Currency.deserialize(c.serialize()) == c for every
      validly constructed Currency c.

Failure modes:
    - SerializationError when a field cannot be JSON-encoded.
    - DeserializationError when a blob is not UTF-8, not JSON, not an object,
      is missing a required field, or carries a field of the wrong type.

Wire format:
    A JSON object with keys in fixed order:
        numeric_code, description, minor_units, alpha_code, symbol
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

from currency_kernel.exceptions import DeserializationError, SerializationError

# Field order of the serialized record
WIRE_FIELDS: tuple[str, ...] = (
    "numeric_code",
    "description",
    "minor_units",
    "alpha_code",
    "symbol",
)

_REQUIRED_FIELDS: frozenset[str] = frozenset(WIRE_FIELDS) - {"symbol"}

# Bound on how much of a rejected blob is kept on the exception
_PAYLOAD_PREVIEW = 200


@dataclass(frozen=True, slots=True)
class CodeEntry:
    """One ISO 4217 code: both keys plus descriptive fields."""

    numeric_code: int
    alpha_code: str
    description: str
    minor_units: int
    symbol: str = ""

    @property
    def metadata(self) -> Metadata:
        return Metadata(
            description=self.description,
            minor_units=self.minor_units,
            alpha_code=self.alpha_code,
            symbol=self.symbol,
        )


@dataclass(frozen=True, slots=True)
class Metadata:
    """
    Descriptive fields of an ISO 4217 code, excluding the numeric code.

    Guarantees:
        - symbol is a string; "" when the currency defines no symbol.
          "No symbol defined" and "explicitly empty" are not distinguished.
    """

    description: str
    minor_units: int
    alpha_code: str
    symbol: str = ""


@dataclass(frozen=True, slots=True)
class Currency:
    """
    Resolved ISO 4217 currency.

    Contract:
        Holds the numeric code and composes the Metadata it was resolved
        with.  Exposes every field as a flat read-only property, so callers
        never reach into ``metadata`` for ordinary reads.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - Field equality: two currencies built for the same code compare equal
          regardless of whether they came from the numeric or alpha path.

    Non-goals:
        - Does NOT validate against the ISO 4217 table (the factory does that
          before construction; deserialized values are trusted).
        - Does NOT do arithmetic, conversion or formatting.
    """

    numeric_code: int
    metadata: Metadata

    @classmethod
    def of(
        cls,
        numeric_code: int,
        description: str,
        minor_units: int,
        alpha_code: str,
        symbol: str = "",
    ) -> Currency:
        """Build a Currency from flat fields in wire order."""
        return cls(
            numeric_code=numeric_code,
            metadata=Metadata(
                description=description,
                minor_units=minor_units,
                alpha_code=alpha_code,
                symbol=symbol,
            ),
        )

    @property
    def alpha_code(self) -> str:
        return self.metadata.alpha_code

    @property
    def minor_units(self) -> int:
        return self.metadata.minor_units

    @property
    def description(self) -> str:
        return self.metadata.description

    @property
    def symbol(self) -> str:
        return self.metadata.symbol

    def to_dict(self) -> dict[str, Any]:
        """Return all five fields as a dict in wire order."""
        return {
            "numeric_code": self.numeric_code,
            "description": self.description,
            "minor_units": self.minor_units,
            "alpha_code": self.alpha_code,
            "symbol": self.symbol,
        }

    def serialize(self) -> str:
        """
        Encode this currency as a JSON object in wire field order.

        Raises:
            SerializationError: If a field is not JSON-encodable.
        """
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e

    @classmethod
    def deserialize(cls, blob: str | bytes) -> Currency:
        """
        Decode a blob produced by serialize() into a new Currency.

        Integer fields are parsed leniently: ints pass through, floats are
        truncated, numeric strings are parsed.  String fields must be
        strings; only ``symbol`` may be absent (or null), and then it is "".

        Raises:
            DeserializationError: If the blob is not a valid currency record.
        """
        if isinstance(blob, (bytes, bytearray)):
            try:
                text = bytes(blob).decode("utf-8")
            except UnicodeDecodeError as e:
                raise DeserializationError(
                    "payload is not valid UTF-8",
                    bytes(blob[:_PAYLOAD_PREVIEW]).decode("utf-8", errors="replace"),
                ) from e
        elif isinstance(blob, str):
            text = blob
        else:
            raise DeserializationError(
                f"expected str or bytes, got {type(blob).__name__}"
            )

        preview = text[:_PAYLOAD_PREVIEW]
        try:
            data = json.loads(text)
        except ValueError as e:
            raise DeserializationError(f"payload is not valid JSON: {e}", preview) from e

        if not isinstance(data, dict):
            raise DeserializationError(
                f"payload must be a JSON object, got {type(data).__name__}", preview
            )

        missing = sorted(_REQUIRED_FIELDS - data.keys(), key=WIRE_FIELDS.index)
        if missing:
            raise DeserializationError(
                f"missing required fields: {', '.join(missing)}", preview
            )

        return cls.of(
            numeric_code=_coerce_int("numeric_code", data["numeric_code"], preview),
            description=_coerce_str("description", data["description"], preview),
            minor_units=_coerce_int("minor_units", data["minor_units"], preview),
            alpha_code=_coerce_str("alpha_code", data["alpha_code"], preview),
            symbol=_coerce_str("symbol", data.get("symbol"), preview, optional=True),
        )

    def __str__(self) -> str:
        return self.alpha_code

    def __repr__(self) -> str:
        return f"Currency({self.numeric_code!r}, {self.alpha_code!r})"


def _coerce_int(name: str, value: Any, preview: str) -> int:
    if isinstance(value, bool):
        raise DeserializationError(f"{name} must be an integer, got bool", preview)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise DeserializationError(f"{name} must be finite, got {value!r}", preview)
        return int(value)
    if isinstance(value, str):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            return int(float(stripped))
        except (ValueError, OverflowError) as e:
            raise DeserializationError(
                f"{name} is not a number: {value!r}", preview
            ) from e
    raise DeserializationError(
        f"{name} must be an integer, got {type(value).__name__}", preview
    )


def _coerce_str(name: str, value: Any, preview: str, optional: bool = False) -> str:
    if value is None and optional:
        return ""
    if isinstance(value, str):
        return value
    raise DeserializationError(
        f"{name} must be a string, got {type(value).__name__}", preview
    )
