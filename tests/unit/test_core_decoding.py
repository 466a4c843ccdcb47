import pytest
from decimal import Decimal

from base_formatter.core.datatypes import NumeralOutput
from base_formatter.core.decoding import decode_digits
from base_formatter.core.exc import NumeralDomainError


@pytest.mark.parametrize(
    "numeral,base,expected",
    [
        (NumeralOutput(False, (1, 0, 0), (6,)), 12, Decimal("144.5")),
        (NumeralOutput(True, (12, 0), (60,)), 120, Decimal("-1440.5")),
        (NumeralOutput(False, (8, 4), (4, 10), 6), 12, Decimal("299801088")),
        (NumeralOutput(False, (1,), (), -2), 10, Decimal("0.01")),
        (NumeralOutput(False, (0,), (1,)), 2, Decimal("0.5")),
        (NumeralOutput(False, (1, 2), (3,), 3), 10, Decimal("12300")),
    ],
)
def test_decode_digits_values(numeral, base, expected):
    print(f"[decode_digits] {numeral} base {base} -> expect {expected}")
    value = decode_digits(numeral, base)
    print("value ->", value)
    assert value == expected


def test_decode_digits_integral_results_are_exact():
    print("[decode_digits] 31 digits in base 10 decode without context rounding")
    digits = tuple(int(c) for c in "1234567890123456789012345678901")
    value = decode_digits(NumeralOutput(False, digits), 10)
    assert value == Decimal("1234567890123456789012345678901")


def test_decode_digits_negative_zero():
    print("[decode_digits] is_negative zero keeps the Decimal sign")
    value = decode_digits(NumeralOutput(True, (0,)), 10)
    assert value == 0
    assert value.is_signed()


def test_decode_digits_rejects_digit_out_of_base():
    print("[decode_digits] digit 12 in base 12 -> expect NumeralDomainError")
    with pytest.raises(NumeralDomainError):
        decode_digits(NumeralOutput(False, (12,)), 12)


def test_numeral_output_validation():
    print("[NumeralOutput] empty integer part or negative digit -> NumeralDomainError")
    with pytest.raises(NumeralDomainError):
        NumeralOutput(False, ())
    with pytest.raises(NumeralDomainError):
        NumeralOutput(False, (1, -1))
    n = NumeralOutput(False, [1, 2], [3])
    assert n.integer == (1, 2)
    assert n.fraction == (3,)
    assert n.digits() == (1, 2, 3)
