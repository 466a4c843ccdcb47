"""
BaseFormatter: render numbers as strings over a digit alphabet, and parse them.

The numeric work is delegated to `BaseConverter`; this module only maps digit
values to symbols and lays out sign, padding, grouping, the radix character
and the exponent suffix.

Notes:
- Digits may be given as a string (one symbol per character), as a sequence
  of symbols (multi-character symbols allowed), or as a bare int base. A bare
  base gives a numeral-only formatter: `encode_to_digits` works, string
  operations raise `DigitsUndefined`.
- Options are split per call between the conversion config (rounding_mode,
  precision, maximum_fraction_length, notation) and `FormatOptions`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import Dict, Iterable, List, Literal, Optional, Pattern, Sequence, Tuple, Union

from .converter import BaseConverter
from .core.datatypes import CONVERSION_FIELDS, ConversionConfig, Notation, Number, NumeralOutput
from .core.exc import DigitNotFound, DigitsUndefined, NumeralDomainError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


RadixDisplay = Literal["auto", "always"]
SignDisplay = Literal["auto", "always", "except_zero", "negative", "never"]
UseGrouping = Union[bool, Literal["always", "min2"]]

_RADIX_DISPLAYS = ("auto", "always")
_SIGN_DISPLAYS = ("auto", "always", "except_zero", "negative", "never")
_GROUPINGS = (False, True, "always", "min2")


# ---------------------------------------------------------------------------
# Formatting options
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatOptions:
    """String layout options.

    Fields:
    - radix_character: separator between integer and fraction, e.g. "." in 0.5.
    - negative_sign / positive_sign: sign symbols.
    - grouping_separator / grouping_length: e.g. "," every 3 digits.
    - digit_separator: placed between digits that get no grouping separator.
    - scientific_notation_character: the "e" in 1.342e3.
    - integer_pad_character / fraction_pad_character: None means the zero digit.
    - minimum_fraction_length: right-pad the fraction (bounded by the
      maximum fraction length of the conversion).
    - minimum_integer_length: left-pad the integer.
    - radix_display: "auto" shows the radix character only with a fraction.
    - sign_display: "auto" (negatives, including -0), "always",
      "except_zero", "negative" (negatives, excluding zero), "never".
    - use_grouping: False, True/"always", or "min2" (only when the leading
      group has at least two digits).
    """

    radix_character: str = "."
    negative_sign: str = "-"
    positive_sign: str = "+"
    grouping_separator: str = ","
    grouping_length: int = 3
    digit_separator: str = ""
    scientific_notation_character: str = "e"
    integer_pad_character: Optional[str] = None
    fraction_pad_character: Optional[str] = None
    minimum_fraction_length: int = 0
    minimum_integer_length: int = 0
    radix_display: RadixDisplay = "auto"
    sign_display: SignDisplay = "auto"
    use_grouping: UseGrouping = False

    def __post_init__(self):
        if self.radix_display not in _RADIX_DISPLAYS:
            raise NumeralDomainError(f"radix_display must be one of {_RADIX_DISPLAYS} (got {self.radix_display!r})")
        if self.sign_display not in _SIGN_DISPLAYS:
            raise NumeralDomainError(f"sign_display must be one of {_SIGN_DISPLAYS} (got {self.sign_display!r})")
        if not (isinstance(self.use_grouping, bool) or self.use_grouping in ("always", "min2")):
            raise NumeralDomainError(f"use_grouping must be one of {_GROUPINGS} (got {self.use_grouping!r})")
        if isinstance(self.grouping_length, bool) or not isinstance(self.grouping_length, int) or self.grouping_length < 1:
            raise NumeralDomainError(f"grouping_length must be a positive int (got {self.grouping_length!r})")
        for name in ("minimum_fraction_length", "minimum_integer_length"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise NumeralDomainError(f"{name} must be an int >= 0 (got {v!r})")

    def with_options(self, **options) -> "FormatOptions":
        if not options:
            return self
        return replace(self, **options)


FORMAT_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(FormatOptions))


def split_options(options: Dict[str, object]) -> Tuple[Dict[str, object], Dict[str, object]]:
    """Split keyword options into (conversion overrides, format overrides)."""
    conversion: Dict[str, object] = {}
    formatting: Dict[str, object] = {}
    for key, value in options.items():
        if key in CONVERSION_FIELDS:
            conversion[key] = value
        elif key in FORMAT_FIELDS:
            formatting[key] = value
        else:
            raise TypeError(f"unknown option: {key!r}")
    return conversion, formatting


def _alternation(items: Iterable[str]) -> str:
    # Longest first so multi-character symbols win over their prefixes.
    return "|".join(re.escape(s) for s in sorted(set(items), key=len, reverse=True))


# ---------------------------------------------------------------------------
# BaseFormatter
# ---------------------------------------------------------------------------

class BaseFormatter:
    """Encode numbers to strings in the base given by a digit alphabet."""

    def __init__(self, digits: Union[int, str, Sequence[str]], **options):
        conversion, formatting = split_options(options)
        if isinstance(digits, bool):
            raise NumeralDomainError("digits must be an int base, a string or a sequence of symbols")
        if isinstance(digits, int):
            self.digits: Optional[Tuple[str, ...]] = None
            base = digits
        else:
            symbols = tuple(digits)
            if any(not isinstance(s, str) or not s for s in symbols):
                raise NumeralDomainError("every digit symbol must be a non-empty string")
            if len(set(symbols)) != len(symbols):
                raise NumeralDomainError("digit symbols must be unique")
            self.digits = symbols
            base = len(symbols)

        self.converter = BaseConverter(base, **conversion)
        self.options = FormatOptions(**formatting)

        self._lookup: Dict[str, int] = {}
        self._max_symbol_length = 0
        self._re_valid: Optional[Pattern[str]] = None
        if self.digits is not None:
            self._lookup = {s: i for i, s in enumerate(self.digits)}
            self._max_symbol_length = max(len(s) for s in self.digits)
            self._re_valid = self._build_pattern(self.options)

    # ------------- properties -------------

    @property
    def base(self) -> int:
        return self.converter.base

    @property
    def config(self) -> ConversionConfig:
        return self.converter.config

    def _require_digits(self) -> Tuple[str, ...]:
        if self.digits is None:
            raise DigitsUndefined(f"no digits defined for this base-{self.base} formatter; use encode_to_digits()")
        return self.digits

    # ------------- single digits -------------

    def encode_digit(self, value: int) -> str:
        """Return the symbol for a digit value."""
        digits = self._require_digits()
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < len(digits):
            raise DigitNotFound(f"No digit found for number specified: {value!r}", digit=value)
        return digits[value]

    def decode_digit(self, symbol: str) -> int:
        """Return the digit value of a symbol."""
        self._require_digits()
        value = self._lookup.get(symbol)
        if value is None:
            raise DigitNotFound(f"String value not found in digits: {symbol!r}", digit=symbol)
        return value

    # ------------- encoding -------------

    def encode_to_digits(self, value: Number, **options) -> NumeralOutput:
        """Encode to a `NumeralOutput`; format options are accepted and ignored."""
        conversion, _ = split_options(options)
        return self.converter.encode(value, **conversion)

    def encode(self, value: Number, **options) -> str:
        """Encode `value` to a string using the instance digits and options."""
        self._require_digits()
        conversion, formatting = split_options(options)
        cfg = self.converter.resolve(**conversion)
        opts = self.options.with_options(**formatting)
        numeral = self.converter.encode_with(value, cfg)
        return self._render(numeral, cfg, opts)

    def _render(self, numeral: NumeralOutput, cfg: ConversionConfig, opts: FormatOptions) -> str:
        zero = self.encode_digit(0)
        int_pad = opts.integer_pad_character if opts.integer_pad_character is not None else zero
        frac_pad = opts.fraction_pad_character if opts.fraction_pad_character is not None else zero

        min_fraction = opts.minimum_fraction_length
        if cfg.maximum_fraction_length is not None:
            min_fraction = min(min_fraction, cfg.maximum_fraction_length)

        integer = [self.encode_digit(d) for d in numeral.integer]
        if opts.minimum_integer_length > len(integer):
            integer = [int_pad] * (opts.minimum_integer_length - len(integer)) + integer

        fraction = [self.encode_digit(d) for d in numeral.fraction]
        if min_fraction > len(fraction):
            fraction += [frac_pad] * (min_fraction - len(fraction))
        fraction_text = "".join(fraction)

        radix = opts.radix_character if fraction_text or opts.radix_display == "always" else ""

        exponent_text = ""
        if cfg.notation is not Notation.STANDARD and numeral.exponent != 0:
            exponent_text = opts.scientific_notation_character + self._render_exponent(numeral.exponent, cfg, opts)

        out = self._sign_symbol(numeral, opts) + self._join_integer(integer, opts) + radix + fraction_text + exponent_text
        _dbg(f"_render: {numeral} -> {out!r}")
        return out

    def _render_exponent(self, exponent: int, cfg: ConversionConfig, opts: FormatOptions) -> str:
        exp_cfg = cfg.with_options(notation=Notation.STANDARD, maximum_fraction_length=0)
        # The exponent sign is part of the value, so only "always" carries over.
        exp_opts = opts.with_options(
            minimum_fraction_length=0,
            minimum_integer_length=0,
            sign_display="always" if opts.sign_display == "always" else "auto",
        )
        # Standard notation never renders a suffix, so this recursion stops at depth one.
        assert exp_cfg.notation is Notation.STANDARD
        return self._render(self.converter.encode_with(exponent, exp_cfg), exp_cfg, exp_opts)

    @staticmethod
    def _sign_symbol(numeral: NumeralOutput, opts: FormatOptions) -> str:
        symbol = opts.negative_sign if numeral.is_negative else opts.positive_sign
        mode = opts.sign_display
        if mode == "always":
            return symbol
        if mode == "never":
            return ""
        if mode == "except_zero":
            return "" if numeral.is_zero() else symbol
        if mode == "negative":
            return symbol if numeral.is_negative and not numeral.is_zero() else ""
        return opts.negative_sign if numeral.is_negative else ""

    @staticmethod
    def _join_integer(symbols: List[str], opts: FormatOptions) -> str:
        """Join integer symbols, placing separators counted from the radix point."""
        reversed_symbols = symbols[::-1]
        n = len(reversed_symbols)
        out: List[str] = []
        for i, sym in enumerate(reversed_symbols):
            if i > 0:
                if (
                    opts.use_grouping
                    and i % opts.grouping_length == 0
                    and (opts.use_grouping != "min2" or n > i + 1)
                ):
                    out.append(opts.grouping_separator)
                else:
                    out.append(opts.digit_separator)
            out.append(sym)
        return "".join(reversed(out))

    # ------------- decoding -------------

    def parse(self, text: str, **options) -> NumeralOutput:
        """Parse a formatted string into a `NumeralOutput` (sign, digits, exponent)."""
        self._require_digits()
        _, formatting = split_options(options)
        return self._parse(text, self.options.with_options(**formatting), allow_exponent=True)

    def decode(self, text: str, **options) -> Decimal:
        """Decode a formatted string back to a Decimal."""
        return self.converter.decode(self.parse(text, **options))

    def _parse(self, text: str, opts: FormatOptions, allow_exponent: bool) -> NumeralOutput:
        trimmed = text.strip()
        is_negative = bool(opts.negative_sign) and trimmed.startswith(opts.negative_sign)

        body = trimmed
        exponent = 0
        sci = opts.scientific_notation_character
        if allow_exponent and sci and sci not in self._lookup:
            idx = trimmed.find(sci)
            if idx >= 0:
                suffix = self._parse(trimmed[idx + len(sci):], opts, allow_exponent=False)
                exp_value = self.converter.decode(suffix)
                if exp_value != exp_value.to_integral_value():
                    raise NumeralDomainError(f"exponent must be integral (got {exp_value})")
                exponent = int(exp_value)
                body = trimmed[:idx]

        for token in (opts.positive_sign, opts.negative_sign, opts.grouping_separator, opts.digit_separator):
            if token:
                body = body.replace(token, "")

        radix = opts.radix_character
        idx = body.find(radix) if radix else -1
        if idx >= 0:
            int_text, frac_text = body[:idx], body[idx + len(radix):]
        else:
            int_text, frac_text = body, ""

        integer = self._tokenize(int_text)
        fraction = self._tokenize(frac_text)
        if not integer and not fraction:
            raise NumeralDomainError(f"no digits to decode in {text!r}")
        return NumeralOutput(
            is_negative=is_negative,
            integer=integer or [0],
            fraction=fraction,
            exponent=exponent,
        )

    def _tokenize(self, text: str) -> List[int]:
        """Split `text` into digit values, longest symbol first."""
        values: List[int] = []
        pos = 0
        while pos < len(text):
            for size in range(min(self._max_symbol_length, len(text) - pos), 0, -1):
                value = self._lookup.get(text[pos:pos + size])
                if value is not None:
                    values.append(value)
                    pos += size
                    break
            else:
                raise DigitNotFound(f"String value not found in digits: {text[pos]!r}", digit=text[pos])
        return values

    # ------------- validation -------------

    def _build_pattern(self, opts: FormatOptions) -> Pattern[str]:
        digits = self._require_digits()
        digit = "(?:" + _alternation(digits) + ")"
        signs = [s for s in (opts.negative_sign, opts.positive_sign) if s]
        sign = "(?:" + _alternation(signs) + ")?" if signs else ""
        separators = [s for s in (opts.digit_separator, opts.grouping_separator) if s]
        pattern = sign + "(?:" + _alternation(list(digits) + separators) + ")+"
        if opts.radix_character:
            pattern += "(?:" + re.escape(opts.radix_character) + digit + "*)?"
        if opts.scientific_notation_character:
            pattern += "(?:" + re.escape(opts.scientific_notation_character) + sign + digit + "+)?"
        return re.compile(pattern)

    def is_valid(self, text: str, **options) -> bool:
        """Check whether `text` has the shape of a number in this alphabet."""
        self._require_digits()
        _, formatting = split_options(options)
        pattern = self._re_valid if not formatting else self._build_pattern(self.options.with_options(**formatting))
        return pattern.fullmatch(text) is not None

    def __repr__(self) -> str:
        shown = "".join(self.digits) if self.digits is not None else None
        return f"BaseFormatter(base={self.base}, digits={shown!r})"


__all__ = [
    "FormatOptions",
    "FORMAT_FIELDS",
    "split_options",
    "BaseFormatter",
]
