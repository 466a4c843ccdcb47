"""
Core datatypes used by the conversion engine.

These datatypes are intentionally minimal and immutable so that encoding,
rounding and decoding stay deterministic and testable.

Notes:
- `NumeralOutput` is alphabet-free: digit values are plain ints in [0, base).
- `ConversionConfig` carries the engine defaults; per-call overrides produce a
  new instance via `with_options` and never mutate the original.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Sequence, Tuple, Type, TypeVar, Union

from .constants import DEFAULT_PRECISION, MIN_BASE
from .exc import NumeralDomainError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RoundingMode(Enum):
    """Tie-break/direction policies applied to discarded digits.

    - CEIL: towards positive infinity.
    - FLOOR: towards negative infinity.
    - EXPAND: away from zero.
    - TRUNC: towards zero.
    - HALF_CEIL / HALF_FLOOR: nearest, ties towards +/- infinity.
    - HALF_EXPAND / HALF_TRUNC: nearest, ties away from / towards zero.
    - HALF_EVEN / HALF_ODD: nearest, ties to the even / odd kept digit.
    """
    CEIL = "ceil"
    FLOOR = "floor"
    EXPAND = "expand"
    TRUNC = "trunc"
    HALF_CEIL = "half_ceil"
    HALF_FLOOR = "half_floor"
    HALF_EXPAND = "half_expand"
    HALF_TRUNC = "half_trunc"
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"


class Notation(Enum):
    """Exponent policy: none, one integer digit, or exponents divisible by three."""
    STANDARD = "standard"
    SCIENTIFIC = "scientific"
    ENGINEERING = "engineering"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_type: Type[E], value: Union[E, str], name: str) -> E:
    """Accept an enum member or its string value; reject anything else."""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_type)
        raise NumeralDomainError(f"{name} must be one of: {allowed} (got {value!r})") from exc


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------

Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Bridge supported inputs to a finite Decimal.

    Floats go through their shortest repr, so `0.1` becomes Decimal("0.1")
    rather than the exact binary expansion.
    """
    if isinstance(value, bool):
        raise NumeralDomainError("bool is not a numeric input")
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        d = Decimal(repr(float(value)))
    elif isinstance(value, str):
        try:
            d = Decimal(value.strip())
        except InvalidOperation as exc:
            raise NumeralDomainError(f"not a number: {value!r}") from exc
    else:
        raise NumeralDomainError(f"unsupported numeric input type: {type(value).__name__}")
    if d.is_nan() or d.is_infinite():
        raise NumeralDomainError(f"value must be finite (got {value!r})")
    return d


# ---------------------------------------------------------------------------
# NumeralOutput
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumeralOutput:
    """Signed positional representation of a number in some base.

    Fields:
    - is_negative: sign flag; a rounding-induced zero is never negative.
    - integer: most-significant-first integer digits, never empty.
    - fraction: most-significant-first fraction digits, possibly empty.
    - exponent: power of the base to scale by; 0 in standard notation.
    """

    is_negative: bool
    integer: Tuple[int, ...]
    fraction: Tuple[int, ...] = ()
    exponent: int = 0

    def __post_init__(self):
        object.__setattr__(self, "integer", tuple(self.integer))
        object.__setattr__(self, "fraction", tuple(self.fraction))
        if not self.integer:
            raise NumeralDomainError("NumeralOutput.integer must hold at least one digit")
        for d in self.integer + self.fraction:
            if isinstance(d, bool) or not isinstance(d, int) or d < 0:
                raise NumeralDomainError(f"digit values must be non-negative ints (got {d!r})")

    def is_zero(self) -> bool:
        return not any(self.integer) and not any(self.fraction)

    def digits(self) -> Tuple[int, ...]:
        """Concatenated integer and fraction digits."""
        return self.integer + self.fraction


# ---------------------------------------------------------------------------
# ConversionConfig
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConversionConfig:
    """Immutable engine configuration.

    Fields:
    - base: number of digit values, >= 2.
    - rounding_mode: policy for discarded digits.
    - precision: maximum significant digits; also caps the fraction length.
    - maximum_fraction_length: hard cap on fraction digits, None for no cap
      beyond precision.
    - notation: standard, scientific or engineering.
    """

    base: int
    rounding_mode: RoundingMode = RoundingMode.HALF_EXPAND
    precision: int = DEFAULT_PRECISION
    maximum_fraction_length: Optional[int] = None
    notation: Notation = Notation.STANDARD

    def __post_init__(self):
        if isinstance(self.base, bool) or not isinstance(self.base, int) or self.base < MIN_BASE:
            raise NumeralDomainError(f"base must be an int >= {MIN_BASE} (got {self.base!r})")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 1:
            raise NumeralDomainError(f"precision must be a positive int (got {self.precision!r})")
        mfl = self.maximum_fraction_length
        if mfl is not None and (isinstance(mfl, bool) or not isinstance(mfl, int) or mfl < 0):
            raise NumeralDomainError(f"maximum_fraction_length must be None or an int >= 0 (got {mfl!r})")
        object.__setattr__(self, "rounding_mode", coerce_enum(RoundingMode, self.rounding_mode, "rounding_mode"))
        object.__setattr__(self, "notation", coerce_enum(Notation, self.notation, "notation"))

    def with_options(self, **options) -> "ConversionConfig":
        """Return a copy with per-call overrides applied (unknown names raise TypeError)."""
        if not options:
            return self
        return replace(self, **options)

    def fraction_cap(self, exponent: int) -> int:
        """Fraction length allowed by precision once `exponent` has been applied."""
        if exponent > 0:
            return max(self.precision - exponent, 0)
        return self.precision

    def rounding_length(self, exponent: int) -> int:
        """Number of fraction digits kept by the rounding pass."""
        cap = self.fraction_cap(exponent)
        if self.maximum_fraction_length is None:
            return cap
        return min(self.maximum_fraction_length, cap)


CONVERSION_FIELDS: Sequence[str] = (
    "rounding_mode",
    "precision",
    "maximum_fraction_length",
    "notation",
)


__all__ = [
    "RoundingMode",
    "Notation",
    "coerce_enum",
    "Number",
    "to_decimal",
    "NumeralOutput",
    "ConversionConfig",
    "CONVERSION_FIELDS",
]
