from __future__ import annotations
from typing import List

import pytest

# Import project primitives
from base_formatter import BaseConverter, BaseFormatter, by_base, dozenal, domino

# -----------------------------
# Test helpers (pure functions)
# -----------------------------

#: The electron charge in coulombs, used by the scientific notation cases.
E_VAL = 1.6021766208e-19

ROUNDING_VALUES_WIDE: List[float] = [5.5, 2.5, 1.75, 1.25, 1.0, -1.0, -1.25, -1.75, -2.5, -5.5]
ROUNDING_VALUES_NARROW: List[float] = [1.8, 1.5, 1.2, 0.8, 0.5, 0.2, -0.2, -0.5, -0.8, -1.2, -1.5, -1.8]

# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def decimal_fmt() -> BaseFormatter:
    return by_base(10)

@pytest.fixture()
def dozenal_fmt() -> BaseFormatter:
    return dozenal()

@pytest.fixture()
def domino_fmt() -> BaseFormatter:
    return domino()

@pytest.fixture()
def base120() -> BaseFormatter:
    # Numeral-only formatter: no alphabet covers 120 digits.
    return BaseFormatter(120)

@pytest.fixture()
def decimal_converter() -> BaseConverter:
    return BaseConverter(10)
