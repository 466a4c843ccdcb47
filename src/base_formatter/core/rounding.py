"""
Rounding of a working digit array to a fixed number of fraction digits.

The working array holds the integer digits, one `None` marking the radix
point, then the fraction digits. `round_digits` takes ownership of it and
mutates it in place:

- The rounding decision is made once, for the first discarded digit (the one
  right after the last kept position), from the table below.
- Discarded positions are dropped, then a single backward pass adds the carry
  (if any) to the last kept digit, ripples it leftwards through digits that
  reach the base, and drops trailing zero fraction digits.
- A carry out of the most significant digit prepends a new leading 1.
- A non-zero input that rounds to zero is never reported as negative.

Decision table (B = base, d = first discarded digit, "tail" = d and every
digit after it):

    expand      tail > 0
    trunc       never
    ceil        not negative and tail > 0
    floor       negative and tail > 0
    half_expand d >= B/2
    half_trunc  d > B/2
    half_ceil   d > B/2, or d == B/2 and not negative
    half_floor  d > B/2, or d == B/2 and negative
    half_even   d > B/2, or d == B/2 and the adjacent kept digit is odd
    half_odd    d > B/2, or d == B/2 and the adjacent kept digit is even

The half modes look at d alone, so 0.51 to zero digits is a tie. In odd bases
no digit equals B/2 and the tie rules never apply.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .datatypes import RoundingMode
from .exc import InvariantViolation

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


WorkingDigits = List[Optional[int]]
Decision = Callable[[int, bool, int, Sequence[Optional[int]], int], bool]


# ----------------------------
# Tail inspection helpers
# ----------------------------

def _tail_nonzero(digits: Sequence[Optional[int]], index: int) -> bool:
    return any(digits[index:])


def _compare_half(digit: int, base: int) -> int:
    """Compare the first discarded digit against B/2; returns -1, 0 or 1."""
    lhs = 2 * digit
    return (lhs > base) - (lhs < base)


def _adjacent_digit(digits: Sequence[Optional[int]], index: int) -> Optional[int]:
    """Nearest kept digit to the left of `index`, skipping the radix marker."""
    prev = digits[index - 1]
    if prev is None:
        prev = digits[index - 2] if index >= 2 else None
    return prev


# ----------------------------
# Decision functions
# ----------------------------

def _expand(digit, is_negative, index, digits, base) -> bool:
    return _tail_nonzero(digits, index)


def _trunc(digit, is_negative, index, digits, base) -> bool:
    return False


def _ceil(digit, is_negative, index, digits, base) -> bool:
    return not is_negative and _tail_nonzero(digits, index)


def _floor(digit, is_negative, index, digits, base) -> bool:
    return is_negative and _tail_nonzero(digits, index)


def _half_expand(digit, is_negative, index, digits, base) -> bool:
    return _compare_half(digit, base) >= 0


def _half_trunc(digit, is_negative, index, digits, base) -> bool:
    return _compare_half(digit, base) > 0


def _half_ceil(digit, is_negative, index, digits, base) -> bool:
    c = _compare_half(digit, base)
    return c > 0 or (c == 0 and not is_negative)


def _half_floor(digit, is_negative, index, digits, base) -> bool:
    c = _compare_half(digit, base)
    return c > 0 or (c == 0 and is_negative)


def _half_parity(want_odd: bool) -> Decision:
    def decide(digit, is_negative, index, digits, base) -> bool:
        c = _compare_half(digit, base)
        if c == 0:
            adjacent = _adjacent_digit(digits, index)
            if adjacent is not None:
                return (adjacent % 2 == 1) == want_odd
        return c > 0
    return decide


ROUNDING_DECISIONS: Dict[RoundingMode, Decision] = {
    RoundingMode.EXPAND: _expand,
    RoundingMode.TRUNC: _trunc,
    RoundingMode.CEIL: _ceil,
    RoundingMode.FLOOR: _floor,
    RoundingMode.HALF_EXPAND: _half_expand,
    RoundingMode.HALF_TRUNC: _half_trunc,
    RoundingMode.HALF_CEIL: _half_ceil,
    RoundingMode.HALF_FLOOR: _half_floor,
    RoundingMode.HALF_EVEN: _half_parity(want_odd=True),
    RoundingMode.HALF_ODD: _half_parity(want_odd=False),
}

assert set(ROUNDING_DECISIONS) == set(RoundingMode), "every rounding mode needs a decision"


def should_round_up(
    mode: RoundingMode,
    digits: Sequence[Optional[int]],
    index: int,
    is_negative: bool,
    base: int,
) -> bool:
    """Evaluate the decision for the first discarded digit at `index`."""
    return ROUNDING_DECISIONS[mode](digits[index], is_negative, index, digits, base)


# ----------------------------
# Rounding pass
# ----------------------------

def round_digits(
    work: WorkingDigits,
    rounding_index: int,
    is_negative: bool,
    base: int,
    mode: RoundingMode,
    *,
    input_is_zero: bool,
) -> Tuple[bool, List[int], List[int]]:
    """Round the working array in place and split it at the radix marker.

    `rounding_index` is the array position of the last kept digit
    (integer length + kept fraction length). `input_is_zero` describes the
    value being converted, not the working array, which may already have
    lost its significant digits to the fraction cap. Returns
    (is_negative, integer_digits, fraction_digits).
    """
    try:
        point = work.index(None)
    except ValueError:
        raise InvariantViolation("working digit array has no radix marker") from None
    if rounding_index < point:
        raise InvariantViolation(f"rounding_index={rounding_index} falls inside the integer part (point={point})")

    cut = rounding_index + 1
    carry = False
    if cut < len(work):
        carry = should_round_up(mode, work, cut, is_negative, base)
        _dbg(f"round_digits: mode={mode.value}, discarded={work[cut:]}, carry={carry}")
        del work[cut:]

    only_zeros = True
    for i in range(len(work) - 1, -1, -1):
        value = work[i]
        if value is None:
            continue
        if carry:
            value += 1
            carry = value >= base
            if carry:
                value = 0
        work[i] = value
        if value != 0:
            only_zeros = False
        if only_zeros and i > point:
            work.pop()
        elif not carry:
            break
    if carry:
        work.insert(0, 1)
        point += 1
        _dbg(f"round_digits: carry overflow, integer length now {point}")

    integer = list(work[:point])
    fraction = list(work[point + 1:])

    if not input_is_zero and not any(integer) and not any(fraction):
        is_negative = False

    return is_negative, integer, fraction


__all__ = [
    "ROUNDING_DECISIONS",
    "should_round_up",
    "round_digits",
]
