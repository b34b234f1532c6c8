"""
rational.py — Exact rational numbers with a terminating-decimal check

================================================================================
WHY NOT float, WHY NOT decimal.Decimal
================================================================================

float cannot hold 0.1. decimal.Decimal can, but it rounds silently as soon as
a result exceeds the context precision, and 1/3 becomes 0.3333... without any
warning.

ExactRational keeps numerator and denominator as Python ints (arbitrary
precision), always in lowest terms with a positive denominator. Nothing is
ever rounded here. Rounding is an explicit, separate step (see rounding.py).

A rational is "finite-decimal" when its reduced denominator has no prime
factors other than 2 and 5: 1/8 = 0.125 is, 1/3 is not. Only finite-decimal
values can be turned into a fixed number of minor units.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Union

from .errors import DivisionByZeroError, DomainError, ParseError, PrecisionError


RationalLike = Union["ExactRational", Fraction, int]


def _split_decimal_factors(denominator: int) -> tuple[int, int, int]:
    """Return (powers of 2, powers of 5, remaining factor) of denominator."""
    twos = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    fives = 0
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    return twos, fives, denominator


def _as_fraction(value: object) -> Fraction | None:
    if isinstance(value, ExactRational):
        return value._value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    return None


@dataclass(frozen=True, slots=True, eq=False)
class ExactRational:
    """
    Immutable exact rational number.

    INVARIANTS:
    1. gcd(|numerator|, denominator) == 1
    2. denominator > 0
    3. every operation returns a new instance

    The default instance ExactRational() is zero.
    """
    _value: Fraction = Fraction(0)
    _original: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self._value, Fraction):
            raise TypeError(
                f"ExactRational holds a Fraction, not {type(self._value).__name__}; "
                f"use from_int, from_fraction or from_string"
            )
        if not isinstance(self._original, str):
            raise TypeError(f"original text must be str, not {type(self._original).__name__}")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> ExactRational:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"ExactRational.from_int requires int, not {type(value).__name__}"
            )
        return cls(Fraction(value), str(value))

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int = 1) -> ExactRational:
        """Build numerator/denominator, reduced. Zero denominator is rejected."""
        for part in (numerator, denominator):
            if isinstance(part, bool) or not isinstance(part, int):
                raise TypeError(
                    f"numerator and denominator must be int, not {type(part).__name__}"
                )
        if denominator == 0:
            raise DivisionByZeroError()
        return cls(Fraction(numerator, denominator))

    @classmethod
    def from_string(cls, text: str) -> ExactRational:
        """Parse a bounded decimal text; see parser.parse_decimal."""
        from .parser import parse_decimal

        return parse_decimal(text)

    @classmethod
    def from_rational_text(cls, text: str) -> ExactRational:
        """
        Parse any exact rational text: "1/3", "-1.9", "2e3".

        Unlike from_string, repeating values such as "1/3" are accepted; they
        are only usable as factors, never stored as an amount.
        """
        if not isinstance(text, str):
            raise TypeError(f"rational text must be str, not {type(text).__name__}")
        try:
            value = Fraction(text)
        except (ValueError, ZeroDivisionError) as exc:
            raise ParseError(f"{text} is not a valid rational amount") from exc
        return cls(value, text)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    @property
    def original(self) -> str:
        """Text this value was parsed from, or "" when computed."""
        return self._original

    def to_fraction(self) -> Fraction:
        return self._value

    def sign(self) -> int:
        return (self._value > 0) - (self._value < 0)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_integer(self) -> bool:
        return self._value.denominator == 1

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _operand(self, other: object) -> Fraction:
        value = _as_fraction(other)
        if value is None:
            raise TypeError(
                f"unsupported operand for ExactRational: {type(other).__name__}"
            )
        return value

    def add(self, other: RationalLike) -> ExactRational:
        return ExactRational(self._value + self._operand(other))

    def subtract(self, other: RationalLike) -> ExactRational:
        return ExactRational(self._value - self._operand(other))

    def multiply(self, other: RationalLike) -> ExactRational:
        return ExactRational(self._value * self._operand(other))

    def divide(self, other: RationalLike) -> ExactRational:
        divisor = self._operand(other)
        if divisor == 0:
            raise DivisionByZeroError()
        return ExactRational(self._value / divisor)

    def negate(self) -> ExactRational:
        return ExactRational(-self._value)

    def absolute(self) -> ExactRational:
        return ExactRational(abs(self._value))

    def compare(self, other: RationalLike) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other."""
        value = self._operand(other)
        return (self._value > value) - (self._value < value)

    def __add__(self, other: object) -> ExactRational:
        if _as_fraction(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> ExactRational:
        if _as_fraction(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> ExactRational:
        if _as_fraction(other) is None:
            return NotImplemented
        return ExactRational(_as_fraction(other) - self._value)

    def __mul__(self, other: object) -> ExactRational:
        if _as_fraction(other) is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ExactRational:
        if _as_fraction(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> ExactRational:
        if _as_fraction(other) is None:
            return NotImplemented
        return ExactRational(_as_fraction(other)).divide(self)

    def __neg__(self) -> ExactRational:
        return self.negate()

    def __abs__(self) -> ExactRational:
        return self.absolute()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        value = _as_fraction(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: RationalLike) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: RationalLike) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: RationalLike) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: RationalLike) -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Decimal representation
    # -------------------------------------------------------------------------

    def is_finite_decimal(self) -> bool:
        """True iff the value terminates in base 10."""
        return _split_decimal_factors(self.denominator)[2] == 1

    def fraction_digit_count(self) -> int:
        """
        Digits needed after the decimal point: 0 for 7, 1 for 0.5, 3 for -1.125.

        Raises:
            PrecisionError: value is repeating (1/3)
        """
        twos, fives, rest = _split_decimal_factors(self.denominator)
        if rest != 1:
            raise PrecisionError(f"rational {self._ratio_text()} is repeating")
        return max(twos, fives)

    def to_scaled_integer(self, scale: int) -> int:
        """
        Move the decimal point `scale` places right and return the exact int.

        ExactRational.from_string("-0.246").to_scaled_integer(3) == -246

        Raises:
            DomainError: scale < 0
            PrecisionError: value needs more than `scale` fractional digits,
                or is repeating
        """
        if scale < 0:
            raise DomainError(f"cannot scale to negative decimal count {scale}")
        digits = self.fraction_digit_count()
        if digits > scale:
            label = self._original or str(self)
            raise PrecisionError(
                f"{label} has {digits} decimals, only {scale} allowed"
            )
        scaled = self._value * 10 ** scale
        # denominator divides 10**digits, which divides 10**scale
        return scaled.numerator

    def _ratio_text(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        if not self.is_finite_decimal():
            return self._ratio_text()
        digits = self.fraction_digit_count()
        magnitude = str(abs(self.numerator) * 10 ** digits // self.denominator)
        sign = "-" if self.numerator < 0 else ""
        if digits == 0:
            return sign + magnitude
        magnitude = magnitude.rjust(digits + 1, "0")
        return f"{sign}{magnitude[:-digits]}.{magnitude[-digits:]}"

    def __repr__(self) -> str:
        return f"ExactRational('{self}')"
