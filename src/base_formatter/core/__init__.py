"""
Base Formatter Core
===================

Unified exports for the alphabet-free conversion engine: exponent
calculation, radix expansion, rounding and decoding over plain digit values.
Digit expansion runs on ints and Fractions; Decimal is used for the exponent
logarithm and for decoded results.
"""

# NOTE:
#   The `core` package never deals with digit symbols. Everything here speaks
#   NumeralOutput (sign, integer digits, fraction digits, exponent); the string
#   layer lives in `base_formatter.formatter`.

# Defaults
from .constants import (
    MIN_BASE,
    DEFAULT_PRECISION,
    DEFAULT_DECIMAL_PRECISION,
    ALL_DIGITS,
)

# Datatypes and configuration
from .datatypes import (
    RoundingMode,
    Notation,
    NumeralOutput,
    ConversionConfig,
    to_decimal,
)

# Engine steps
from .exponent import calculate_exponent
from .radix import integer_to_base, fraction_to_base
from .rounding import ROUNDING_DECISIONS, should_round_up, round_digits
from .decoding import decode_digits

# Core exceptions
from .exc import (
    BaseFormatterError,
    NumeralDomainError,
    DigitNotFound,
    DigitsUndefined,
    MaximumBaseExceeded,
    InvariantViolation,
)

__all__ = [
    # constants
    "MIN_BASE",
    "DEFAULT_PRECISION",
    "DEFAULT_DECIMAL_PRECISION",
    "ALL_DIGITS",
    # datatypes
    "RoundingMode",
    "Notation",
    "NumeralOutput",
    "ConversionConfig",
    "to_decimal",
    # engine
    "calculate_exponent",
    "integer_to_base",
    "fraction_to_base",
    "ROUNDING_DECISIONS",
    "should_round_up",
    "round_digits",
    "decode_digits",
    # exceptions
    "BaseFormatterError",
    "NumeralDomainError",
    "DigitNotFound",
    "DigitsUndefined",
    "MaximumBaseExceeded",
    "InvariantViolation",
]
