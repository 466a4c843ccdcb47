import pytest
from decimal import Decimal

from base_formatter.core.exponent import calculate_exponent
from base_formatter.core.exc import NumeralDomainError


@pytest.mark.parametrize(
    "value,base,engineering,expected",
    [
        ("123456789", 10, False, 8),
        ("123456789", 10, True, 6),
        ("1.6021766208e-19", 10, False, -19),
        ("1.6021766208e-19", 10, True, -21),
        ("0.5", 10, False, -1),
        ("7", 10, False, 0),
        ("346355345633", 120, False, 5),
        ("255", 16, False, 1),
    ],
)
def test_calculate_exponent_away_from_boundaries(value, base, engineering, expected):
    print(f"[calculate_exponent] {value} base {base} engineering={engineering} -> expect {expected}")
    e = calculate_exponent(Decimal(value), base, engineering)
    print("exponent ->", e)
    assert e == expected


def test_calculate_exponent_zero_is_zero():
    print("[calculate_exponent] zero -> 0 (no logarithm taken)")
    assert calculate_exponent(Decimal(0), 10) == 0
    assert calculate_exponent(Decimal(0), 10, True) == 0


def test_calculate_exponent_exact_power_is_within_one():
    print("[calculate_exponent] exact power 1000 may land on 2 or 3 depending on logarithm rounding")
    e = calculate_exponent(Decimal(1000), 10)
    print("exponent ->", e)
    assert e in (2, 3)


def test_calculate_exponent_engineering_is_multiple_of_three():
    print("[calculate_exponent] engineering exponents are multiples of 3")
    for v in ("0.00042", "12", "98765", "4.2e10"):
        e = calculate_exponent(Decimal(v), 10, True)
        print(v, "->", e)
        assert e % 3 == 0


def test_calculate_exponent_rejects_negative_and_bad_base():
    print("[calculate_exponent] negative value or base < 2 should raise NumeralDomainError")
    with pytest.raises(NumeralDomainError):
        calculate_exponent(Decimal(-5), 10)
    with pytest.raises(NumeralDomainError):
        calculate_exponent(Decimal(5), 1)
