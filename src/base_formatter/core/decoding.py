"""
Decoding of a NumeralOutput back to a Decimal.

The digits are folded into one integer mantissa (Horner's scheme), then
scaled by base ** (exponent - len(fraction)). Integral results are exact;
fractional results use a Decimal division in a context wide enough for the
mantissa.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from .constants import DECODE_GUARD_DIGITS, DEFAULT_DECIMAL_PRECISION, MIN_BASE
from .datatypes import NumeralOutput
from .exc import NumeralDomainError

# Debug printing control
DEBUG_DECODING = False

def _dbg(msg: str) -> None:
    if DEBUG_DECODING:
        print(msg)


def decode_digits(numeral: NumeralOutput, base: int) -> Decimal:
    """Return the signed value of `numeral` read in `base`."""
    if base < MIN_BASE:
        raise NumeralDomainError(f"base must be >= {MIN_BASE} (got {base})")
    mantissa = 0
    for d in numeral.digits():
        if d >= base:
            raise NumeralDomainError(f"digit value {d} is not valid in base {base}")
        mantissa = mantissa * base + d
    scale = numeral.exponent - len(numeral.fraction)
    _dbg(f"decode_digits: mantissa={mantissa}, base={base}, scale={scale}")
    if scale >= 0:
        value = Decimal(mantissa * base ** scale)
    else:
        with localcontext() as ctx:
            ctx.prec = max(DEFAULT_DECIMAL_PRECISION, len(str(mantissa)) + DECODE_GUARD_DIGITS)
            value = Decimal(mantissa) / Decimal(base ** -scale)
    return value.copy_negate() if numeral.is_negative else value


__all__ = [
    "decode_digits",
]
