"""
Base Formatter Core Constants
=============================

Defaults shared by the conversion engine and the string layer. Decimal is
only used for the exponent logarithm and for decoding; digit expansion runs
on integers and fractions.
"""

# ---------------------------------------------------------------------------
# Conversion defaults
# ---------------------------------------------------------------------------

#: Smallest meaningful positional base.
MIN_BASE: int = 2

#: Default number of significant digits kept by the engine.
DEFAULT_PRECISION: int = 32


# ---------------------------------------------------------------------------
# Decimal context used for logarithms and decoding
# ---------------------------------------------------------------------------

#: Significant digits of the local Decimal context used by `Decimal.ln` when
#: computing exponents. Exponents at exact powers of the base depend on it.
DEFAULT_DECIMAL_PRECISION: int = 28

#: Extra digits granted on top of the mantissa width when decoding needs a
#: Decimal division.
DECODE_GUARD_DIGITS: int = 4


# ---------------------------------------------------------------------------
# Digit pools for presets
# ---------------------------------------------------------------------------

NUMBERS: str = "0123456789"
ASCII_UPPERCASE: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ASCII_LOWERCASE: str = "abcdefghijklmnopqrstuvwxyz"

#: Pool sliced by `by_base`; its length is the largest base it can cover.
ALL_DIGITS: str = NUMBERS + ASCII_UPPERCASE + ASCII_LOWERCASE


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "MIN_BASE",
    "DEFAULT_PRECISION",
    "DEFAULT_DECIMAL_PRECISION",
    "DECODE_GUARD_DIGITS",
    "NUMBERS",
    "ASCII_UPPERCASE",
    "ASCII_LOWERCASE",
    "ALL_DIGITS",
]
