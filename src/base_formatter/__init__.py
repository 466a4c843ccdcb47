# Top-level API for base_formatter.
"""
Top-level API for base_formatter.

This module exposes the stable interface:
  - BaseConverter: numbers <-> NumeralOutput digit arrays in any base >= 2
  - BaseFormatter: NumeralOutput <-> strings over a digit alphabet
  - presets: named alphabets (dozenal, base58, cuneiform, domino, ...)
  - encode_datetime: date/time patterns rendered in a base

The engine (exponent, expansion, rounding, decoding) lives in
`base_formatter.core`. pandas helpers live in `base_formatter.frames` and are
not imported here.
"""

# NOTE:
#   `base_formatter.frames` pulls in pandas; import it explicitly when needed.

from __future__ import annotations


from .converter import BaseConverter
from .formatter import BaseFormatter, FormatOptions
from .datetime_fmt import encode_datetime
from .presets import (
    PRESETS,
    by_base,
    binary,
    octal,
    decimal,
    hexadecimal,
    duodecimal,
    dozenal,
    dozenal_initials,
    dozenal_roman,
    vigesimal,
    base57,
    base58,
    sexagesimal,
    base62,
    cuneiform,
    domino,
)

from .core import (
    ConversionConfig,
    NumeralOutput,
    Notation,
    RoundingMode,
    BaseFormatterError,
    NumeralDomainError,
    DigitNotFound,
    DigitsUndefined,
    MaximumBaseExceeded,
)

__all__ = [
    # conversion and formatting
    "BaseConverter",
    "BaseFormatter",
    "FormatOptions",
    "encode_datetime",
    # presets
    "PRESETS",
    "by_base",
    "binary",
    "octal",
    "decimal",
    "hexadecimal",
    "duodecimal",
    "dozenal",
    "dozenal_initials",
    "dozenal_roman",
    "vigesimal",
    "base57",
    "base58",
    "sexagesimal",
    "base62",
    "cuneiform",
    "domino",
    # core data types
    "ConversionConfig",
    "NumeralOutput",
    "Notation",
    "RoundingMode",
    # errors
    "BaseFormatterError",
    "NumeralDomainError",
    "DigitNotFound",
    "DigitsUndefined",
    "MaximumBaseExceeded",
]
