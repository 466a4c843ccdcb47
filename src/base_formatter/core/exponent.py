"""
Exponent calculation for scientific and engineering notation.

The exponent is floor(ln(value) / ln(base)), or the same over ln(base**3)
times three for engineering notation. Logarithms run in a local Decimal
context of DEFAULT_DECIMAL_PRECISION digits.

Alignment notes:
- At exact powers of the base the quotient of two rounded logarithms may land
  just below the integer (e.g. 2.999...), giving an exponent one smaller.
  This is left as is; callers still get a consistent (digits, exponent) pair.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_FLOOR, localcontext

from .constants import DEFAULT_DECIMAL_PRECISION, MIN_BASE
from .exc import NumeralDomainError

# Debug printing control
DEBUG_EXPONENT = False

def _dbg(msg: str) -> None:
    if DEBUG_EXPONENT:
        print(msg)


def calculate_exponent(
    value: Decimal,
    base: int,
    engineering: bool = False,
    *,
    context_precision: int = DEFAULT_DECIMAL_PRECISION,
) -> int:
    """Return the integer exponent that brings `value` into [1, base).

    For engineering notation the exponent is a multiple of three and the
    scaled value lands in [1, base**3).
    """
    if base < MIN_BASE:
        raise NumeralDomainError(f"base must be >= {MIN_BASE} (got {base})")
    if value < 0:
        raise NumeralDomainError("calculate_exponent expects a non-negative value")
    if value == 0:
        return 0
    step = 3 if engineering else 1
    with localcontext() as ctx:
        ctx.prec = context_precision
        ln_base = Decimal(base ** step).ln()
        q = value.ln() / ln_base
        e = int(q.to_integral_value(rounding=ROUND_FLOOR)) * step
    _dbg(f"calculate_exponent: value={value}, base={base}, engineering={engineering}, q={q}, e={e}")
    return e


__all__ = [
    "calculate_exponent",
]
