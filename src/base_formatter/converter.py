"""
BaseConverter: numbers to NumeralOutput in an arbitrary base, and back.

Pipeline of `encode`:
  value -> exponent (non-standard notation only) -> exact scaling by
  base ** -exponent -> integer/fraction split -> digit expansion ->
  working array [*integer, None, *fraction] -> rounding -> NumeralOutput.

The converter is stateless apart from its immutable `ConversionConfig`;
per-call keyword overrides build a new config for that call only.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from .core.datatypes import ConversionConfig, Notation, Number, NumeralOutput, to_decimal
from .core.decoding import decode_digits
from .core.exc import NumeralDomainError
from .core.exponent import calculate_exponent
from .core.radix import fraction_to_base, integer_to_base
from .core.rounding import round_digits

# Debug printing control
DEBUG_CONVERTER = False

def _dbg(msg: str) -> None:
    if DEBUG_CONVERTER:
        print(msg)


#: Integer width per notation; a carry overflow past it moves the exponent by
#: the same amount.
_RENORMALISE_WIDTH = {
    Notation.SCIENTIFIC: 1,
    Notation.ENGINEERING: 3,
}


class BaseConverter:
    """Encode numbers to `NumeralOutput` objects in a fixed base.

    Options are the non-base fields of `ConversionConfig`
    (rounding_mode, precision, maximum_fraction_length, notation) and may be
    given at construction as defaults or per call as overrides.
    """

    def __init__(self, base: int, **options):
        self.config = ConversionConfig(base=base, **options)

    @property
    def base(self) -> int:
        return self.config.base

    def resolve(self, **options) -> ConversionConfig:
        """Merge per-call overrides into the instance defaults."""
        if "base" in options:
            raise NumeralDomainError("base is fixed per converter; create a new instance instead")
        return self.config.with_options(**options)

    def encode(self, value: Number, **options) -> NumeralOutput:
        """Encode `value` according to the instance base and options."""
        return self.encode_with(value, self.resolve(**options))

    def encode_with(self, value: Number, cfg: ConversionConfig) -> NumeralOutput:
        """Encode `value` under an already resolved config for this base."""
        if cfg.base != self.base:
            raise NumeralDomainError(f"config base {cfg.base} does not match converter base {self.base}")
        base = cfg.base

        dec = to_decimal(value)
        is_negative = dec.is_signed()
        abs_value = dec.copy_abs()

        exponent = 0
        if cfg.notation is not Notation.STANDARD:
            exponent = calculate_exponent(abs_value, base, cfg.notation is Notation.ENGINEERING)

        scaled = Fraction(abs_value)
        if exponent:
            scaled /= Fraction(base) ** exponent
        int_value = scaled.numerator // scaled.denominator

        integer = integer_to_base(int_value, base)
        fraction = fraction_to_base(scaled - int_value, base, cfg.fraction_cap(exponent))
        _dbg(f"encode: value={dec}, exponent={exponent}, raw integer={integer}, raw fraction={fraction}")

        work = [*integer, None, *fraction]
        rounding_index = len(integer) + cfg.rounding_length(exponent)
        is_negative, int_digits, frac_digits = round_digits(
            work, rounding_index, is_negative, base, cfg.rounding_mode, input_is_zero=dec.is_zero()
        )

        width = _RENORMALISE_WIDTH.get(cfg.notation)
        if width is not None and len(int_digits) > len(integer) and len(int_digits) > width:
            # Carry overflow left a 1 followed by zeros; fold it into the exponent.
            exponent += width
            int_digits = int_digits[: len(int_digits) - width]
            _dbg(f"encode: renormalised after carry, exponent={exponent}")

        return NumeralOutput(
            is_negative=is_negative,
            integer=int_digits,
            fraction=frac_digits,
            exponent=exponent,
        )

    def decode(self, numeral: NumeralOutput) -> Decimal:
        """Decode a `NumeralOutput` in the instance base back to a Decimal."""
        if not isinstance(numeral, NumeralOutput):
            raise NumeralDomainError("decode() expects a NumeralOutput")
        return decode_digits(numeral, self.base)

    def __repr__(self) -> str:
        return f"BaseConverter(base={self.base}, config={self.config!r})"


__all__ = [
    "BaseConverter",
]
