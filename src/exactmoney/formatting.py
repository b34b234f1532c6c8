"""
formatting.py — Minor-unit integers to human-readable major-unit text

A Formatter is pure configuration:

    Formatter(group_sep=",", dec_sep=".", group_size=group_size_three, min_decimals=2)

    12345678 minor units, scale 2   ->  "123,456.78"
    -12 minor units, scale 2        ->  "-0.12"
    1230 minor units, scale 2       ->  "12.30"   (min_decimals pads)

Trailing zero fraction digits are dropped unless min_decimals asks for them,
so the canonical formatter writes "12.3", not "12.30".

group_size(i) gives the width of the i-th digit group counted from the
decimal point (i starts at 0). Grouping stops at the first value <= 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


GroupSize = Callable[[int], int]


def group_size_none(index: int) -> int:
    """No grouping."""
    return 0


def group_size_three(index: int) -> int:
    """Thousands: 1,234,567."""
    return 3


def group_size_indian(index: int) -> int:
    """Indian numbering: first group 3, then 2s. 1,23,45,678."""
    if index == 0:
        return 3
    return 2


def _group_digits(digits: str, group_sep: str, group_size: GroupSize) -> str:
    index = 0
    boundary = len(digits)
    while True:
        size = group_size(index)
        if size <= 0:
            break
        index += 1
        boundary -= size
        if boundary <= 0:
            break
        digits = digits[:boundary] + group_sep + digits[boundary:]
    return digits


@dataclass(frozen=True, slots=True)
class Formatter:
    group_sep: str = ""
    dec_sep: str = "."
    group_size: GroupSize = group_size_none
    min_decimals: int = 0

    def __post_init__(self) -> None:
        if self.min_decimals < 0:
            raise ValueError(f"min_decimals cannot be negative, is {self.min_decimals}")

    def format_minor(self, minor_units: int, scale: int) -> str:
        """Render an integer amount of minor units with `scale` decimals."""
        negative = minor_units < 0
        digits = str(abs(minor_units))

        if scale == 0:
            integer_part, fraction_part = digits, ""
        else:
            digits = digits.rjust(scale + 1, "0")
            integer_part = digits[:-scale]
            fraction_part = digits[-scale:].rstrip("0")

        if len(fraction_part) < self.min_decimals:
            fraction_part = fraction_part.ljust(self.min_decimals, "0")

        integer_part = _group_digits(integer_part, self.group_sep, self.group_size)

        text = integer_part
        if fraction_part:
            text += self.dec_sep + fraction_part
        if negative:
            text = "-" + text
        return text


# No grouping, "." separator, no padding; the inverse of the default parser.
CANONICAL = Formatter("", ".", group_size_none, 0)

# Used by Money.debug_string() and repr().
DEBUG = Formatter(",", ".", group_size_three, 0)
