"""
rounding.py — Rational to integer, under an explicit rounding policy

Rounding happens in exactly one place: when an exact rational result has to
become an integer number of minor (or major) units. The engine works on the
value's position on the number line, so repeating values like 1/3 round just
as well as terminating ones.

All computation is integer divmod on the magnitude; no float is involved.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import Union

from .rational import ExactRational


class RoundingMode(Enum):
    """
    Rounding strategies.

    Directional:
    - DOWN: toward zero (truncation)          2.7 -> 2,  -2.7 -> -2
    - UP: away from zero                      2.1 -> 3,  -2.1 -> -3
    - FLOOR: toward -infinity                 2.7 -> 2,  -2.1 -> -3
    - CEILING: toward +infinity               2.1 -> 3,  -2.7 -> -2

    Nearest integer, differing only on exact halves:
    - HALF_UP: half away from zero            2.5 -> 3,  -2.5 -> -3
    - HALF_DOWN: half toward zero             2.5 -> 2,  -2.5 -> -2
    - HALF_EVEN: half to even (banker's)      2.5 -> 2,   3.5 -> 4

    The HALF_* modes are symmetric: -x rounds to -(x rounded).
    """
    DOWN = "down"
    UP = "up"
    FLOOR = "floor"
    CEILING = "ceiling"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"


def round_rational(
    value: Union[ExactRational, Fraction, int],
    mode: RoundingMode,
) -> int:
    """
    Round an exact rational to an integer.

    Total for every rational and every mode; integers come back unchanged.
    """

    # Each strategy decides whether the truncated magnitude moves one step
    # away from zero. Only called when the remainder is non-zero.

    def _down(whole: int, rest: int, den: int, negative: bool) -> bool:
        return False

    def _up(whole: int, rest: int, den: int, negative: bool) -> bool:
        return True

    def _floor(whole: int, rest: int, den: int, negative: bool) -> bool:
        return negative

    def _ceiling(whole: int, rest: int, den: int, negative: bool) -> bool:
        return not negative

    def _half_up(whole: int, rest: int, den: int, negative: bool) -> bool:
        return 2 * rest >= den

    def _half_down(whole: int, rest: int, den: int, negative: bool) -> bool:
        return 2 * rest > den

    def _half_even(whole: int, rest: int, den: int, negative: bool) -> bool:
        twice = 2 * rest
        return twice > den or (twice == den and whole % 2 == 1)

    strategies = {
        RoundingMode.DOWN: _down,
        RoundingMode.UP: _up,
        RoundingMode.FLOOR: _floor,
        RoundingMode.CEILING: _ceiling,
        RoundingMode.HALF_UP: _half_up,
        RoundingMode.HALF_DOWN: _half_down,
        RoundingMode.HALF_EVEN: _half_even,
    }

    strategy = strategies.get(mode)
    if strategy is None:
        raise ValueError(f"Unknown rounding mode: {mode}")

    if isinstance(value, bool):
        raise TypeError("cannot round bool")
    if isinstance(value, int):
        return value
    if not isinstance(value, (ExactRational, Fraction)):
        raise TypeError(f"cannot round {type(value).__name__}, exact rational required")

    numerator, denominator = value.numerator, value.denominator
    negative = numerator < 0
    whole, rest = divmod(abs(numerator), denominator)

    if rest and strategy(whole, rest, denominator, negative):
        whole += 1

    return -whole if negative else whole
