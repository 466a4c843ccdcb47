"""
Radix conversion: integer and fraction parts to digit values in a base.

Both expansions work on exact integers/rationals. No rounding happens here;
the fraction expansion simply stops after `maximum_length` digits or when the
remainder becomes exactly zero.
"""

from __future__ import annotations

from fractions import Fraction
from typing import List

from .constants import MIN_BASE
from .exc import NumeralDomainError


def _check_base(base: int) -> None:
    if base < MIN_BASE:
        raise NumeralDomainError(f"base must be >= {MIN_BASE} (got {base})")


def integer_to_base(value: int, base: int) -> List[int]:
    """Digits of a non-negative integer, most significant first.

    Zero yields a single [0] digit.
    """
    _check_base(base)
    if value < 0:
        raise NumeralDomainError("integer_to_base expects a non-negative integer")
    digits: List[int] = []
    while value >= base:
        value, r = divmod(value, base)
        digits.append(r)
    digits.append(value)
    digits.reverse()
    return digits


def fraction_to_base(value: Fraction, base: int, maximum_length: int) -> List[int]:
    """Truncated expansion of a fraction in [0, 1), most significant first.

    Stops early once the remainder is zero (a terminating expansion, e.g. 1/2
    in base 2 gives [1]).
    """
    _check_base(base)
    if value < 0 or value >= 1:
        raise NumeralDomainError(f"fraction_to_base expects a value in [0, 1) (got {value})")
    digits: List[int] = []
    for _ in range(max(maximum_length, 0)):
        if value == 0:
            break
        value *= base
        digit = value.numerator // value.denominator
        value -= digit
        digits.append(digit)
    return digits


__all__ = [
    "integer_to_base",
    "fraction_to_base",
]
