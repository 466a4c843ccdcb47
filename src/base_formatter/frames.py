"""
pandas helpers: apply a BaseFormatter to Series and DataFrame columns.

Index and name are preserved; missing entries (None, NaN, NA) stay missing
and come back as None.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import numpy as np
import pandas as pd

from .formatter import BaseFormatter


def _scalar(value):
    # numpy scalars -> plain Python numbers
    if isinstance(value, np.generic):
        return value.item()
    return value


def encode_series(formatter: BaseFormatter, series: pd.Series, **options) -> pd.Series:
    """Encode every non-missing entry of `series` to a string."""

    def encode_one(value) -> Optional[str]:
        if pd.isna(value):
            return None
        return formatter.encode(_scalar(value), **options)

    return series.map(encode_one).astype(object)


def decode_series(formatter: BaseFormatter, series: pd.Series, **options) -> pd.Series:
    """Decode every non-missing string of `series` to a Decimal."""

    def decode_one(value) -> Optional[Decimal]:
        if pd.isna(value):
            return None
        return formatter.decode(str(value), **options)

    return series.map(decode_one).astype(object)


def convert_frame(
    frame: pd.DataFrame,
    column: str,
    formatter: BaseFormatter,
    target: Optional[str] = None,
    **options,
) -> pd.DataFrame:
    """Return a copy of `frame` with `column` encoded into `target`.

    `target` defaults to "<column>_base<base>".
    """
    if column not in frame.columns:
        raise KeyError(f"column not found: {column!r}")
    out = frame.copy()
    name = target if target is not None else f"{column}_base{formatter.base}"
    out[name] = encode_series(formatter, frame[column], **options)
    return out


__all__ = [
    "encode_series",
    "decode_series",
    "convert_frame",
]
