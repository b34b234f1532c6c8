"""
codec.py — Human major-unit text (and minor-unit text) to Money

================================================================================
MAJOR UNITS
================================================================================

    from_major_text("1.234,56", EUR, group_sep=".", dec_sep=",")  -> 123456 cents

Steps:
1. group_sep and dec_sep must differ.
2. dec_sep may occur at most once.
3. Everything right of dec_sep is the decimal part; group_sep must not occur
   there ("1,500.00" with dec_sep="," is rejected, it was written with the
   separators the other way round).
4. Group separators are removed, dec_sep becomes ".".
5. More effective decimals than currency.scale is an error, unless
   allow_extra_zeroes is set and every extra digit is "0" ("123.400000" -> 123.40).
   An exponent shifts the count: "1.5e1" has none, "1.5e-1" has two.
6. The canonical text goes through parse_decimal and is scaled to minor units
   exactly. Nothing is rounded.

================================================================================
MINOR UNITS
================================================================================

    from_minor_text("12345", EUR)  -> 12345 cents
    from_minor_text("1.5", EUR)    -> PrecisionError ("1.5 has 1 decimals, only 0 allowed")

================================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .core import Currency, Money
from .errors import PrecisionError, SeparatorError
from .parser import parse_decimal

logger = logging.getLogger(__name__)


_DIGITS = frozenset("0123456789")


def _leading_digits(text: str) -> str:
    end = 0
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[:end]


def _exponent_of(rest: str) -> int:
    """
    Exponent written after the decimal digits ("e1", "E-3", "e+2)"), else 0.

    Malformed or oversized exponents count as 0; parse_decimal rejects them.
    """
    body = rest[:-1] if rest.endswith(")") else rest
    if len(body) < 2 or body[0] not in "eE":
        return 0
    sign = body[1] if body[1] in "+-" else ""
    digits = body[1 + len(sign):].lstrip("0") or "0"
    if len(digits) > 6 or not set(digits) <= _DIGITS:
        return 0
    return -int(digits) if sign == "-" else int(digits)


def normalize_major_text(
    text: str,
    scale: int,
    group_sep: str = ",",
    dec_sep: str = ".",
    allow_extra_zeroes: bool = False,
) -> str:
    """
    Strip group separators, turn dec_sep into "." and enforce `scale` decimals.

    Returns text in the decimal grammar of parser.py (not yet validated by it).

    Raises:
        SeparatorError: equal separators, repeated dec_sep, group_sep in the
            decimal part
        PrecisionError: more than `scale` decimal digits
    """
    if group_sep == dec_sep:
        raise SeparatorError(
            f'group and decimal separator cannot be the same, are "{group_sep}" and "{dec_sep}"'
        )
    if not dec_sep:
        raise SeparatorError("decimal separator cannot be empty")

    count = text.count(dec_sep)
    if count > 1:
        raise SeparatorError(
            f'number "{text}" has too many decimal separators "{dec_sep}", max is 1, has {count}'
        )

    if count == 0:
        integer_part, decimal_part = text, None
    else:
        integer_part, decimal_part = text.split(dec_sep)
        if group_sep and group_sep in decimal_part:
            raise SeparatorError(
                f'number "{text}" has group separator "{group_sep}" in decimal part ("{decimal_part}")'
            )

    if group_sep:
        integer_part = integer_part.replace(group_sep, "")

    if decimal_part is None:
        return integer_part

    digits = _leading_digits(decimal_part)
    rest = decimal_part[len(digits):]

    decimals = max(len(digits) - _exponent_of(rest), 0)
    if decimals > scale:
        excess = decimals - scale
        extra = digits[len(digits) - excess:] if excess <= len(digits) else None
        if not (allow_extra_zeroes and extra is not None and extra.strip("0") == ""):
            raise PrecisionError(
                f'number "{text}" has too many decimals - only {scale} allowed, '
                f'has {decimals} ("{decimal_part}")'
            )
        digits = digits[:len(digits) - excess]
        if not digits:
            # "12.000" in a zero-scale currency
            return integer_part + rest

    return f"{integer_part}.{digits}{rest}"


@dataclass(frozen=True, slots=True)
class MajorUnitParser:
    """
    Reusable major-unit parsing configuration.

        parser = MajorUnitParser(EUR, group_sep=".", dec_sep=",")
        parser.parse("1.234,56")  # 1234.56 EUR
    """
    currency: Currency = Currency()
    group_sep: str = ","
    dec_sep: str = "."
    allow_extra_zeroes: bool = False

    def parse(self, text: str) -> Money:
        try:
            canonical = normalize_major_text(
                text,
                self.currency.scale,
                self.group_sep,
                self.dec_sep,
                self.allow_extra_zeroes,
            )
        except (SeparatorError, PrecisionError) as exc:
            logger.debug(f"Rejected major-unit text for {self.currency.code}: {exc}")
            raise
        return Money.from_major_rational(parse_decimal(canonical), self.currency)


def from_major_text(
    text: str,
    currency: Currency,
    group_sep: str = ",",
    dec_sep: str = ".",
    allow_extra_zeroes: bool = False,
) -> Money:
    """
    Parse human major-unit text ("1,234.56") into Money.

    Raises:
        SeparatorError, PrecisionError, ParseError, LengthError
    """
    return MajorUnitParser(currency, group_sep, dec_sep, allow_extra_zeroes).parse(text)


def from_minor_text(text: str, currency: Currency) -> Money:
    """
    Parse minor-unit text ("12345", "-1e3", "(500)") into Money.

    Inverse of Money.to_minor().
    """
    value = parse_decimal(text)
    return Money.of_minor(value.to_scaled_integer(0), currency)


def from_major_int(value: int, currency: Currency) -> Money:
    return Money.of(value, currency)


def from_minor_int(value: int, currency: Currency) -> Money:
    return Money.of_minor(value, currency)
