import pytest
from decimal import Decimal

import numpy as np
import pandas as pd

from base_formatter.frames import convert_frame, decode_series, encode_series


def test_encode_series_keeps_index_name_and_missing(dozenal_fmt):
    print("[encode_series] dozenal [144.5, NaN, 288] -> ['100;6', missing, '200']")
    s = pd.Series([144.5, np.nan, 288.0], index=["a", "b", "c"], name="price")
    out = encode_series(dozenal_fmt, s)
    print(out)
    assert list(out.index) == ["a", "b", "c"]
    assert out.name == "price"
    assert out["a"] == "100;6"
    assert pd.isna(out["b"])
    assert out["c"] == "200"


def test_encode_series_integer_dtype_and_options(decimal_fmt):
    print("[encode_series] int64 column with grouping -> '1,234'")
    s = pd.Series([1234, 5], dtype="int64")
    out = encode_series(decimal_fmt, s, use_grouping=True)
    assert list(out) == ["1,234", "5"]


def test_decode_series_returns_decimals(dozenal_fmt):
    print("[decode_series] ['100;6', None, '↋↋;9'] -> [144.5, missing, 143.75]")
    s = pd.Series(["100;6", None, "↋↋;9"])
    out = decode_series(dozenal_fmt, s)
    assert out[0] == Decimal("144.5")
    assert pd.isna(out[1])
    assert out[2] == Decimal("143.75")


def test_convert_frame_adds_column_on_copy(decimal_fmt):
    print("[convert_frame] adds '<column>_base10' without touching the input frame")
    frame = pd.DataFrame({"qty": [0.5, 99.6], "tag": ["x", "y"]})
    out = convert_frame(frame, "qty", decimal_fmt, maximum_fraction_length=0)
    assert "qty_base10" not in frame.columns
    assert list(out["qty_base10"]) == ["1", "100"]
    named = convert_frame(frame, "qty", decimal_fmt, target="rounded")
    assert list(named["rounded"]) == ["0.5", "99.6"]


def test_convert_frame_missing_column(decimal_fmt):
    print("[convert_frame] unknown column -> KeyError")
    with pytest.raises(KeyError):
        convert_frame(pd.DataFrame({"a": [1]}), "b", decimal_fmt)
