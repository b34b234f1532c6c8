"""
errors.py — Exception taxonomy for exactmoney

Every error derives from MoneyError and from the closest built-in exception,
so callers can catch either the domain class or the familiar ValueError /
TypeError they would catch around int() or Fraction().

    MoneyError
    ├── ParseError (ValueError)          malformed decimal text
    │   ├── LengthError                  integer/fraction part too long
    │   └── SeparatorError               misused group/decimal separators
    ├── PrecisionError (ValueError)      too many decimals, repeating value
    ├── CurrencyMismatchError (TypeError)
    └── DomainError (ValueError)         bad split count, empty ratios, min > max
        └── DivisionByZeroError (ZeroDivisionError)
"""

from __future__ import annotations

from typing import Any


class MoneyError(Exception):
    """Base class for every error raised by exactmoney."""


class ParseError(MoneyError, ValueError):
    """Text is not a valid decimal (or rational) amount."""


class LengthError(ParseError):
    """Integer or fractional part of a decimal exceeds the digit limit."""

    def __init__(self, message: str, length: int, limit: int):
        super().__init__(message)
        self.length = length
        self.limit = limit


class SeparatorError(ParseError):
    """Group/decimal separators are equal, repeated or misplaced."""


class PrecisionError(MoneyError, ValueError):
    """Value needs more fractional digits than allowed, or never terminates."""


class CurrencyMismatchError(MoneyError, TypeError):
    """Two Money operands carry different currencies."""

    def __init__(self, left: Any, right: Any):
        super().__init__(f"currencies {left} and {right} don't match")
        self.left = left
        self.right = right


class DomainError(MoneyError, ValueError):
    """Argument outside the domain of the operation."""


class DivisionByZeroError(DomainError, ZeroDivisionError):
    def __init__(self, message: str = "division by zero"):
        super().__init__(message)
