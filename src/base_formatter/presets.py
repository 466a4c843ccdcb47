"""
Preset formatters
=================

Named digit alphabets, each returned as a fresh `BaseFormatter`. Every preset
accepts the usual conversion and formatting options as keyword overrides.

Glyph alphabets:
- dozenal: Pitman digits ↊ (ten) and ↋ (eleven), ";" as radix.
- cuneiform: Babylonian base 60; each digit is a tens glyph followed by a
  ones glyph, with an empty tens glyph below ten.
- domino: base 98 from the horizontal and vertical domino tiles; the domino
  backs act as radix character and negative sign.
"""

from __future__ import annotations

from typing import List

from .core.constants import ALL_DIGITS
from .core.exc import MaximumBaseExceeded, NumeralDomainError
from .formatter import BaseFormatter


# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------

DOZENAL_DIGITS = "0123456789↊↋"
DOZENAL_INITIALS_DIGITS = "0123456789TE"
DOZENAL_ROMAN_DIGITS = "0123456789XE"
VIGESIMAL_DIGITS = "0123456789ABCDEFGHJK"


def _without(chars: str) -> str:
    return "".join(c for c in ALL_DIGITS if c not in chars)


BASE57_DIGITS = _without("Il1O0")
BASE58_DIGITS = _without("IlO0")
SEXAGESIMAL_DIGITS = _without("lO")


def _cuneiform_digits() -> List[str]:
    # ones: a placeholder glyph for 0, then U+12415..U+1241D for 1..9
    ones = [chr(0x1244A)] + [chr(cp) for cp in range(0x12415, 0x1241E)]
    tens = ["", chr(0x1230B), chr(0x12471), chr(0x1230D), chr(0x1240F), chr(0x12410)]
    return [t + o for t in tens for o in ones]


def _domino_digits() -> List[str]:
    # Seven rows of seven vertical tiles (from U+1F063) then seven horizontal ones (from U+1F031).
    digits: List[str] = []
    for row in range(7):
        digits += [chr(0x1F063 + 7 * row + j) for j in range(7)]
        digits += [chr(0x1F031 + 7 * row + j) for j in range(7)]
    return digits


CUNEIFORM_DIGITS = _cuneiform_digits()
DOMINO_DIGITS = _domino_digits()
DOMINO_RADIX = chr(0x1F062)
DOMINO_NEGATIVE = chr(0x1F030)

assert len(CUNEIFORM_DIGITS) == 60
assert len(DOMINO_DIGITS) == 98


# ---------------------------------------------------------------------------
# Preset constructors
# ---------------------------------------------------------------------------

def by_base(base: int, **options) -> BaseFormatter:
    """Formatter over the first `base` symbols of 0-9, A-Z, a-z."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise NumeralDomainError(f"base must be an int (got {base!r})")
    if base > len(ALL_DIGITS):
        raise MaximumBaseExceeded(base, len(ALL_DIGITS))
    return BaseFormatter(ALL_DIGITS[:base], **options)


def binary(**options) -> BaseFormatter:
    return by_base(2, **options)


def octal(**options) -> BaseFormatter:
    return by_base(8, **options)


def decimal(**options) -> BaseFormatter:
    return by_base(10, **options)


def hexadecimal(**options) -> BaseFormatter:
    return by_base(16, **options)


def duodecimal(**options) -> BaseFormatter:
    return by_base(12, **options)


def _with_defaults(digits, defaults, options) -> BaseFormatter:
    merged = dict(defaults)
    merged.update(options)
    return BaseFormatter(digits, **merged)


def dozenal(**options) -> BaseFormatter:
    """Base 12 with ↊ and ↋ for ten and eleven."""
    return _with_defaults(DOZENAL_DIGITS, {"radix_character": ";"}, options)


def dozenal_initials(**options) -> BaseFormatter:
    return _with_defaults(DOZENAL_INITIALS_DIGITS, {"radix_character": ";"}, options)


def dozenal_roman(**options) -> BaseFormatter:
    return _with_defaults(DOZENAL_ROMAN_DIGITS, {"radix_character": ";"}, options)


def vigesimal(**options) -> BaseFormatter:
    """Base 20, skipping I."""
    return BaseFormatter(VIGESIMAL_DIGITS, **options)


def base57(**options) -> BaseFormatter:
    return BaseFormatter(BASE57_DIGITS, **options)


def base58(**options) -> BaseFormatter:
    return BaseFormatter(BASE58_DIGITS, **options)


def sexagesimal(**options) -> BaseFormatter:
    return BaseFormatter(SEXAGESIMAL_DIGITS, **options)


def base62(**options) -> BaseFormatter:
    return by_base(62, **options)


def cuneiform(**options) -> BaseFormatter:
    defaults = {
        "radix_character": ";",
        "integer_pad_character": " ",
        "fraction_pad_character": " ",
    }
    return _with_defaults(CUNEIFORM_DIGITS, defaults, options)


def domino(**options) -> BaseFormatter:
    defaults = {
        "radix_character": DOMINO_RADIX,
        "negative_sign": DOMINO_NEGATIVE,
    }
    return _with_defaults(DOMINO_DIGITS, defaults, options)


#: name -> constructor, used by the command line.
PRESETS = {
    "binary": binary,
    "octal": octal,
    "decimal": decimal,
    "hexadecimal": hexadecimal,
    "duodecimal": duodecimal,
    "dozenal": dozenal,
    "dozenal_initials": dozenal_initials,
    "dozenal_roman": dozenal_roman,
    "vigesimal": vigesimal,
    "base57": base57,
    "base58": base58,
    "sexagesimal": sexagesimal,
    "base62": base62,
    "cuneiform": cuneiform,
    "domino": domino,
}


__all__ = [
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
    "PRESETS",
    "DOZENAL_DIGITS",
    "CUNEIFORM_DIGITS",
    "DOMINO_DIGITS",
]
