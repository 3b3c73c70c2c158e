"""
Typed Exception Hierarchy for the Currency Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers must be able to tell "unknown currency" apart from a successful
lookup without parsing message text.  There is no sentinel "unknown
currency" value; every miss is an exception with:
  1. A TYPED class (catch by type, not message)
  2. A CODE class attribute (machine-readable, API-safe)
  3. Structured DATA attributes (the offending input)

Example - RIGHT way:
    try:
        currency = factory.from_alpha_code(user_input)
    except UnknownAlphaCodeError as e:
        api_response(code=e.code, alpha_code=e.alpha_code)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    CurrencyKernelError (base)
    |
    +-- CurrencyLookupError
    |   +-- UnknownAlphaCodeError
    |   +-- UnknownNumericCodeError
    |
    +-- CurrencyCodecError
        +-- SerializationError
        +-- DeserializationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Lookup          | UNKNOWN_ALPHA_CODE          | Normalized alpha code not in the table
                | UNKNOWN_NUMERIC_CODE        | Numeric code (or coerced string) not in table
----------------|-----------------------------|-----------------------------------------
Codec           | SERIALIZATION_FAILED        | Currency could not be encoded
                | DESERIALIZATION_FAILED      | Blob is not a valid currency record

===============================================================================
PROPAGATION
===============================================================================

Lookup errors travel unchanged from CurrencyRegistry through CurrencyFactory
to the caller.  Nothing in the kernel catches, converts or retries them.
"""


class CurrencyKernelError(Exception):
    """
    Base exception for all currency kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "CURRENCY_KERNEL_ERROR"


# Lookup exceptions


class CurrencyLookupError(CurrencyKernelError):
    """Base exception for failed code lookups."""

    code: str = "CURRENCY_LOOKUP_ERROR"


class UnknownAlphaCodeError(CurrencyLookupError):
    """Alphabetic code is not defined by ISO 4217 (after normalization)."""

    code: str = "UNKNOWN_ALPHA_CODE"

    def __init__(self, alpha_code: str):
        # Original input, before trimming and uppercasing
        self.alpha_code = alpha_code
        super().__init__(f"Unknown alpha code: {alpha_code}")


class UnknownNumericCodeError(CurrencyLookupError):
    """Numeric code is not defined by ISO 4217."""

    code: str = "UNKNOWN_NUMERIC_CODE"

    def __init__(self, numeric_code: str):
        self.numeric_code = numeric_code
        super().__init__(f"Unknown numeric code: {numeric_code}")


# Codec exceptions


class CurrencyCodecError(CurrencyKernelError):
    """Base exception for currency serialization errors."""

    code: str = "CURRENCY_CODEC_ERROR"


class SerializationError(CurrencyCodecError):
    """Currency could not be encoded."""

    code: str = "SERIALIZATION_FAILED"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Cannot serialize currency: {reason}")


class DeserializationError(CurrencyCodecError):
    """Blob is not a validly encoded currency record."""

    code: str = "DESERIALIZATION_FAILED"

    def __init__(self, reason: str, payload: str | None = None):
        self.reason = reason
        self.payload = payload
        super().__init__(f"Cannot deserialize currency: {reason}")
