"""
exactmoney — Exact decimal and money arithmetic

Arbitrary-precision money that never touches binary floating point: parse
human-entered amounts exactly, compute with currency safety, round only when
asked to and with an explicit policy, split without losing a cent.

================================================================================
QUICK START
================================================================================

Basic usage:

    from exactmoney import Money, Currency, RoundingMode, from_major_text

    php = Currency("PHP", 2)

    paid = from_major_text("-25.33", php)
    total = paid.multiply_rat("12345.4567", RoundingMode.HALF_UP)
    total.round_to_major(RoundingMode.FLOOR).to_major()       # "-312711"

Splitting (sum ALWAYS equals original):

    parts = Money.of(100, php).split(3)         # [33.34, 33.33, 33.33]
    shares = Money.of_minor(100, php).allocate([2, 1])   # [0.67, 0.33]

Formatting:

    from exactmoney import Formatter, group_size_indian

    f = Formatter(group_sep=",", dec_sep=".", group_size=group_size_indian, min_decimals=2)
    Money.of_minor(-123456789000, php).format_major(f)        # "-1,23,45,67,890.00"

================================================================================
"""

from .allocation import allocate, split
from .codec import (
    MajorUnitParser,
    from_major_int,
    from_major_text,
    from_minor_int,
    from_minor_text,
    normalize_major_text,
)
from .core import (
    BTC,
    EUR,
    GBP,
    JPY,
    KWD,
    USD,
    Currency,
    Money,
)
from .errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    DomainError,
    LengthError,
    MoneyError,
    ParseError,
    PrecisionError,
    SeparatorError,
)
from .formatting import (
    CANONICAL,
    DEBUG,
    Formatter,
    group_size_indian,
    group_size_none,
    group_size_three,
)
from .parser import MAX_FRACTION_DIGITS, MAX_INTEGER_DIGITS, ParsedDecimal, parse_decimal
from .rational import ExactRational
from .rounding import RoundingMode, round_rational

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Values
    "ExactRational",
    "Currency",
    "Money",
    "EUR",
    "USD",
    "GBP",
    "JPY",
    "KWD",
    "BTC",
    # Parsing
    "ParsedDecimal",
    "parse_decimal",
    "MAX_INTEGER_DIGITS",
    "MAX_FRACTION_DIGITS",
    "MajorUnitParser",
    "normalize_major_text",
    "from_major_text",
    "from_minor_text",
    "from_major_int",
    "from_minor_int",
    # Rounding
    "RoundingMode",
    "round_rational",
    # Allocation
    "split",
    "allocate",
    # Formatting
    "Formatter",
    "group_size_none",
    "group_size_three",
    "group_size_indian",
    "CANONICAL",
    "DEBUG",
    # Errors
    "MoneyError",
    "ParseError",
    "LengthError",
    "SeparatorError",
    "PrecisionError",
    "CurrencyMismatchError",
    "DomainError",
    "DivisionByZeroError",
]
