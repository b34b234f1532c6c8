"""
parser.py — Bounded decimal text to ExactRational

================================================================================
GRAMMAR
================================================================================

    ["("] ["-"] digit+ ["." digit+] [("e" | "E") ["+" | "-"] digit+] [")"]

- A matching pair of parentheses means negative: "(12.5)" == "-12.5".
  A lone "(" or ")" is rejected.
- Leading zeros are plain zeros ("0012" == 12, never octal).
- Only ASCII digits are accepted.
- "" is zero.

================================================================================
LENGTH LIMITS
================================================================================

Checked on the text, before any big number is built, so "1e1000000" is
rejected without computing 10**1000000:

    integer length  = len(integer digits) + exponent   (exponent >= 0)
    fraction length = len(fraction digits) + |exponent| (exponent < 0)

Both must be <= 200.

================================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from .errors import LengthError, ParseError
from .rational import ExactRational

logger = logging.getLogger(__name__)


MAX_INTEGER_DIGITS = 200
MAX_FRACTION_DIGITS = 200

# int() refuses digit strings above ~4300 characters
_MAX_EXPONENT_TEXT = 4000

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class ParsedDecimal:
    """Pieces of a decimal text, as written. Transient."""
    sign: str            # "" or "-"
    integer: str         # one or more digits
    fraction: str        # "" or digits
    exponent_sign: str   # "", "+" or "-"
    exponent: str        # "" or digits

    @property
    def exponent_value(self) -> int:
        if not self.exponent:
            return 0
        # leading zeros would count against int()'s digit limit
        return int(self.exponent.lstrip("0") or "0")

    @property
    def negative_exponent(self) -> bool:
        return self.exponent_sign == "-"

    def integer_length(self) -> int:
        if self.negative_exponent:
            return len(self.integer)
        return len(self.integer) + self.exponent_value

    def fraction_length(self) -> int:
        if self.negative_exponent:
            return len(self.fraction) + self.exponent_value
        return len(self.fraction)

    def to_fraction(self) -> Fraction:
        digits = int(self.integer + self.fraction)
        value = Fraction(digits, 10 ** len(self.fraction))
        if self.negative_exponent:
            value /= 10 ** self.exponent_value
        else:
            value *= 10 ** self.exponent_value
        return -value if self.sign == "-" else value

    def __str__(self) -> str:
        text = f"{self.sign}{self.integer}"
        if self.fraction:
            text += f".{self.fraction}"
        if self.exponent:
            text += f"e{self.exponent_sign}{self.exponent}"
        return text


def _read_digits(text: str, pos: int, end: int) -> int:
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    return pos


def scan_decimal(text: str) -> Optional[ParsedDecimal]:
    """
    Split text into ParsedDecimal, or return None if it does not match the
    grammar. Does not check lengths.
    """
    pos, end = 0, len(text)

    open_paren = pos < end and text[pos] == "("
    if open_paren:
        pos += 1
    close_paren = end > pos and text[end - 1] == ")"
    if close_paren:
        end -= 1
    if open_paren != close_paren:
        return None

    sign = ""
    if pos < end and text[pos] == "-":
        sign = "-"
        pos += 1

    stop = _read_digits(text, pos, end)
    if stop == pos:
        return None
    integer, pos = text[pos:stop], stop

    fraction = ""
    if pos < end and text[pos] == ".":
        stop = _read_digits(text, pos + 1, end)
        if stop == pos + 1:
            return None
        fraction, pos = text[pos + 1:stop], stop

    exponent_sign = exponent = ""
    if pos < end and text[pos] in "eE":
        pos += 1
        if pos < end and text[pos] in "+-":
            exponent_sign = text[pos]
            pos += 1
        stop = _read_digits(text, pos, end)
        if stop == pos:
            return None
        exponent, pos = text[pos:stop], stop

    if pos != end:
        return None

    if open_paren:
        sign = "-"

    return ParsedDecimal(sign, integer, fraction, exponent_sign, exponent)


def _check_lengths(text: str, parsed: ParsedDecimal) -> None:
    significant = parsed.exponent.lstrip("0")
    if len(significant) > _MAX_EXPONENT_TEXT:
        raise LengthError(
            f"exponent of {text[:32]}... has {len(significant)} digits, "
            f"allowed {_MAX_EXPONENT_TEXT}",
            length=len(significant),
            limit=_MAX_EXPONENT_TEXT,
        )

    integer_length = parsed.integer_length()
    if integer_length > MAX_INTEGER_DIGITS:
        raise LengthError(
            f"decimal length {integer_length} bigger than allowed {MAX_INTEGER_DIGITS}",
            length=integer_length,
            limit=MAX_INTEGER_DIGITS,
        )

    fraction_length = parsed.fraction_length()
    if fraction_length > MAX_FRACTION_DIGITS:
        raise LengthError(
            f"fractional length {fraction_length} bigger than allowed {MAX_FRACTION_DIGITS}",
            length=fraction_length,
            limit=MAX_FRACTION_DIGITS,
        )


def parse_decimal(text: str) -> ExactRational:
    """
    Parse decimal text into an exact value.

    parse_decimal("-12.3e-2") == ExactRational.from_fraction(-123, 1000)

    Raises:
        ParseError: text does not match the grammar
        LengthError: integer or fractional part longer than 200 digits
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal text must be str, not {type(text).__name__}")

    if text == "":
        return ExactRational(Fraction(0), text)

    parsed = scan_decimal(text)
    if parsed is None:
        logger.debug(f"Rejected decimal text {text[:64]!r}: grammar mismatch")
        raise ParseError(f"{text} is not a valid decimal amount")

    try:
        _check_lengths(text, parsed)
    except LengthError as exc:
        logger.debug(f"Rejected decimal text {text[:64]!r}: {exc}")
        raise

    return ExactRational(parsed.to_fraction(), text)
