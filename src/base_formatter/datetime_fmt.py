"""
Date/time rendering in an arbitrary base.

`encode_datetime` replaces tokens in a pattern with numbers rendered by a
`BaseFormatter`. Repeating a token sets the minimum integer length, so with
the dozenal preset `YYYY-MM-DD` on 2023-12-25 gives `1207-10-21`.

Tokens (calendar values only, no localised names):
    Y  year                     y  year, keeping the last n digits
    M  month                    D  day of month
    d  day of year              j  ISO week number
    W  ISO weekday, 1-7         w  weekday, 0-6 from Monday
    H  hour 0-23                h  hour 1-12
    K  hour 1-24                k  hour 0-11
    i  minutes                  s  seconds
    S  fraction of a second, n digits
    A  A / AM / A.M.            a  a / am / a.m.
    Z  UTC offset hours, signed T  UTC offset minutes
    Q  quarter 1-4              u  Unix timestamp (seconds)

Text inside `[...]` is copied verbatim. Naive datetimes are treated as UTC.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Callable, Dict

from .formatter import BaseFormatter

# Debug printing control
DEBUG_DATETIME = False

def _dbg(msg: str) -> None:
    if DEBUG_DATETIME:
        print(msg)


_TOKENS = "YyMDdjWwHhKkisSAaZTQu"
_RE_TOKEN = re.compile(r"\[(.+?)\]|(" + "|".join(re.escape(t) + "+" for t in _TOKENS) + ")")

_MERIDIEM = {
    "A": (("A", "AM", "A.M."), ("P", "PM", "P.M.")),
    "a": (("a", "am", "a.m."), ("p", "pm", "p.m.")),
}


def _utc_offset_minutes(moment: datetime) -> int:
    offset = moment.utcoffset()
    if offset is None:
        return 0
    return int(offset.total_seconds() // 60)


def _unix_seconds(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return math.floor(moment.timestamp())


_FIELDS: Dict[str, Callable[[datetime], int]] = {
    "Y": lambda m: m.year,
    "M": lambda m: m.month,
    "D": lambda m: m.day,
    "d": lambda m: m.timetuple().tm_yday,
    "j": lambda m: m.isocalendar()[1],
    "W": lambda m: m.isoweekday(),
    "w": lambda m: m.weekday(),
    "H": lambda m: m.hour,
    "h": lambda m: (m.hour % 12) or 12,
    "K": lambda m: m.hour or 24,
    "k": lambda m: m.hour % 12,
    "i": lambda m: m.minute,
    "s": lambda m: m.second,
    "Z": lambda m: math.trunc(_utc_offset_minutes(m) / 60),
    "T": lambda m: abs(_utc_offset_minutes(m)) % 60,
    "Q": lambda m: (m.month - 1) // 3 + 1,
    "u": _unix_seconds,
}


def _render_token(formatter: BaseFormatter, moment: datetime, token: str, length: int, options) -> str:
    if token in _MERIDIEM:
        am, pm = _MERIDIEM[token]
        return (am if moment.hour < 12 else pm)[min(length, 3) - 1]

    if token == "S":
        # Truncate so the fraction never carries into a whole second.
        text = formatter.encode(
            moment.microsecond / 1_000_000,
            **{
                **options,
                "notation": "standard",
                "rounding_mode": "trunc",
                "maximum_fraction_length": length,
                "minimum_fraction_length": length,
                "radix_display": "always",
            },
        )
        radix = options.get("radix_character", formatter.options.radix_character)
        return text.partition(radix)[2]

    if token == "y":
        value = moment.year % formatter.base ** length
    else:
        value = _FIELDS[token](moment)

    return formatter.encode(
        value,
        **{
            **options,
            "notation": "standard",
            "minimum_integer_length": length,
            "sign_display": "always" if token == "Z" else "auto",
        },
    )


def encode_datetime(formatter: BaseFormatter, moment: datetime, pattern: str, **options) -> str:
    """Render `moment` through `pattern`, numbers encoded by `formatter`.

    `options` are per-call formatter overrides applied to every number.
    """
    if not isinstance(moment, datetime):
        raise TypeError(f"moment must be a datetime (got {type(moment).__name__})")

    def substitute(match: "re.Match[str]") -> str:
        escaped, tokens = match.group(1), match.group(2)
        if escaped is not None:
            return escaped
        out = _render_token(formatter, moment, tokens[0], len(tokens), options)
        _dbg(f"encode_datetime: {tokens} -> {out!r}")
        return out

    return _RE_TOKEN.sub(substitute, pattern)


__all__ = [
    "encode_datetime",
]
