"""
core.py — Money domain primitive

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   Python int of minor units (cents for EUR, fils for KWD, ...).
   Arbitrary precision, never floating point.

2. CURRENCY SAFETY
   Every binary operation checks that both operands carry the same Currency
   (compared by value: name and scale). A mismatch raises
   CurrencyMismatchError naming both currencies, left operand first.

3. IMMUTABILITY
   Frozen dataclasses. Every operation returns a new instance; operands are
   never touched, so values are safe to share between threads.

4. DEFAULT IS ZERO
   Money() is a valid zero amount in the unknown currency. No None checks.

5. EXPLICIT ROUNDING
   The only operations that can produce a fractional number of minor units
   (multiply/divide by a rational, round_to_major) take a RoundingMode.
   There is no implicit default.

6. VERIFIABLE INVARIANTS
   split(n) and allocate(ratios) always return parts summing to the original
   (see allocation.py).

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence, Union

from .errors import CurrencyMismatchError, DivisionByZeroError, DomainError
from .formatting import CANONICAL, DEBUG, Formatter
from .rational import ExactRational
from .rounding import RoundingMode, round_rational


UNKNOWN_CURRENCY = "UNKNOWN_CURRENCY"


# ==============================================================================
# CURRENCY
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Currency:
    """
    Name plus scale (number of minor-unit digits).

    Opaque metadata: two currencies are the same iff name and scale match.
    Currency() is the unknown currency with scale 0.
    """
    name: str = ""
    scale: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise TypeError(f"scale must be int, not {type(self.scale).__name__}")
        if self.scale < 0:
            raise DomainError(f"scale cannot be negative, is {self.scale}")

    @property
    def code(self) -> str:
        """Name for display, UNKNOWN_CURRENCY when empty."""
        return self.name or UNKNOWN_CURRENCY

    @property
    def multiplier(self) -> int:
        """Minor units per major unit."""
        return 10 ** self.scale

    def __str__(self) -> str:
        return f"{self.code} with {self.scale} decimals"


EUR = Currency("EUR", 2)   # 1 EUR = 100 cents
USD = Currency("USD", 2)   # 1 USD = 100 cents
GBP = Currency("GBP", 2)   # 1 GBP = 100 pence
JPY = Currency("JPY", 0)   # no minor unit
KWD = Currency("KWD", 3)   # 1 KWD = 1000 fils
BTC = Currency("BTC", 8)   # 1 BTC = 100,000,000 satoshi


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be int, not {type(value).__name__}")
    return value


def _whole_field(value: object, what: str) -> int:
    # JSON decoded by serialization.loads() carries numbers as ExactRational
    if isinstance(value, ExactRational):
        return value.to_scaled_integer(0)
    return _require_int(value, what)


def _require_rational(value: object) -> ExactRational:
    if value is None:
        raise DomainError("rational is not set")
    if isinstance(value, ExactRational):
        return value
    if isinstance(value, Fraction):
        return ExactRational(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return ExactRational.from_int(value)
    raise TypeError(
        f"Money can only be scaled by an exact rational, not {type(value).__name__}"
    )


# ==============================================================================
# MONEY
# ==============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class Money:
    """
    Integer amount of minor units paired with a Currency.

    INVARIANTS:
    1. _minor_units is always int (never float)
    2. binary operations require equal currencies
    3. split(n) / allocate(ratios) sum exactly to self

    USAGE:
        price = Money.of_minor(1999, EUR)         # 19.99 EUR
        total = price * 3                         # 59.97 EUR
        parts = total.split(2)                    # [29.99, 29.98] EUR

    SERIALIZATION:
        to_dict() / from_dict(): {"minor_units": int, "currency": str, "scale": int}
        Never as float.
    """
    _minor_units: int = 0
    _currency: Currency = Currency()

    def __post_init__(self) -> None:
        _require_int(self._minor_units, "minor units")
        if not isinstance(self._currency, Currency):
            raise TypeError(
                f"currency must be Currency, not {type(self._currency).__name__}"
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, major_units: int, currency: Currency) -> Money:
        """From a whole number of major units (euros, dollars, ...)."""
        _require_int(major_units, "major units")
        return cls(major_units * currency.multiplier, currency)

    @classmethod
    def of_minor(cls, minor_units: int, currency: Currency) -> Money:
        """From minor units (cents, ...). No conversion."""
        return cls(minor_units, currency)

    @classmethod
    def from_major_rational(cls, value: ExactRational, currency: Currency) -> Money:
        """
        From an exact value in major units.

        Raises:
            PrecisionError: value has more decimals than currency.scale
        """
        return cls(value.to_scaled_integer(currency.scale), currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Zero in a currency. Handy as start value for sum()."""
        return cls(0, currency)

    @classmethod
    def euro(cls, value: int) -> Money:
        return cls.of(value, EUR)

    @classmethod
    def euro_cents(cls, cents: int) -> Money:
        return cls.of_minor(cents, EUR)

    @classmethod
    def usd(cls, value: int) -> Money:
        return cls.of(value, USD)

    @classmethod
    def usd_cents(cls, cents: int) -> Money:
        return cls.of_minor(cents, USD)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def minor_units(self) -> int:
        return self._minor_units

    @property
    def currency(self) -> Currency:
        return self._currency

    def to_rational(self) -> ExactRational:
        """Exact value in major units."""
        return ExactRational(Fraction(self._minor_units, self._currency.multiplier))

    def is_zero(self) -> bool:
        return self._minor_units == 0

    def is_positive(self) -> bool:
        return self._minor_units > 0

    def is_negative(self) -> bool:
        return self._minor_units < 0

    # -------------------------------------------------------------------------
    # Currency-checked comparison
    # -------------------------------------------------------------------------

    def same_currency(self, other: Money) -> bool:
        return self._currency == other._currency

    def _check_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed between Money and {type(other).__name__}"
            )
        if self._currency != other._currency:
            raise CurrencyMismatchError(self._currency, other._currency)

    def _compare(self, other: Money) -> int:
        self._check_same_currency(other)
        return (self._minor_units > other._minor_units) - (
            self._minor_units < other._minor_units
        )

    def equals(self, other: Money) -> bool:
        return self._compare(other) == 0

    def more(self, other: Money) -> bool:
        return self._compare(other) > 0

    def more_equal(self, other: Money) -> bool:
        return self._compare(other) >= 0

    def less(self, other: Money) -> bool:
        return self._compare(other) < 0

    def less_equal(self, other: Money) -> bool:
        return self._compare(other) <= 0

    def between(self, minimum: Money, maximum: Money) -> bool:
        """
        minimum <= self <= maximum, both ends inclusive.

        Raises:
            CurrencyMismatchError: any two of the three currencies differ
            DomainError: minimum > maximum
        """
        if not minimum.less_equal(maximum):
            raise DomainError("minimal is bigger than maximal")
        return self.more_equal(minimum) and self.less_equal(maximum)

    # Comparisons against plain ints never fail on currency grounds: the int
    # is read in self's currency.

    def less_major(self, value: int) -> bool:
        return self.less(Money.of(value, self._currency))

    def more_major(self, value: int) -> bool:
        return self.more(Money.of(value, self._currency))

    def less_equal_major(self, value: int) -> bool:
        return self.less_equal(Money.of(value, self._currency))

    def more_equal_major(self, value: int) -> bool:
        return self.more_equal(Money.of(value, self._currency))

    def between_major(self, minimum: int, maximum: int) -> bool:
        return self.between(
            Money.of(minimum, self._currency), Money.of(maximum, self._currency)
        )

    def less_minor(self, value: int) -> bool:
        return self.less(Money.of_minor(value, self._currency))

    def more_minor(self, value: int) -> bool:
        return self.more(Money.of_minor(value, self._currency))

    def less_equal_minor(self, value: int) -> bool:
        return self.less_equal(Money.of_minor(value, self._currency))

    def more_equal_minor(self, value: int) -> bool:
        return self.more_equal(Money.of_minor(value, self._currency))

    def between_minor(self, minimum: int, maximum: int) -> bool:
        return self.between(
            Money.of_minor(minimum, self._currency),
            Money.of_minor(maximum, self._currency),
        )

    def __eq__(self, other: object) -> bool:
        # Structural: 100 EUR != 100 USD, no exception. Use equals() for the
        # currency-checked version.
        if isinstance(other, Money):
            return (
                self._minor_units == other._minor_units
                and self._currency == other._currency
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._minor_units, self._currency))

    def __lt__(self, other: Money) -> bool:
        return self.less(other)

    def __le__(self, other: Money) -> bool:
        return self.less_equal(other)

    def __gt__(self, other: Money) -> bool:
        return self.more(other)

    def __ge__(self, other: Money) -> bool:
        return self.more_equal(other)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._check_same_currency(other)
        return Money(self._minor_units + other._minor_units, self._currency)

    def subtract(self, other: Money) -> Money:
        self._check_same_currency(other)
        return Money(self._minor_units - other._minor_units, self._currency)

    def absolute(self) -> Money:
        return Money(abs(self._minor_units), self._currency)

    def negative(self) -> Money:
        return Money(-self._minor_units, self._currency)

    def multiply(self, factor: int) -> Money:
        """
        Multiply by an integer quantity.

        For fractional factors use multiply_by_rational(), which makes the
        rounding explicit.
        """
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(
                f"Money can only be multiplied by int, not {type(factor).__name__}. "
                f"Use multiply_by_rational() for fractional factors."
            )
        return Money(self._minor_units * factor, self._currency)

    def multiply_by_rational(
        self,
        factor: Union[ExactRational, Fraction, int],
        rounding: RoundingMode,
    ) -> Money:
        """Multiply by an exact rational, then round to whole minor units."""
        factor = _require_rational(factor)
        exact = ExactRational.from_int(self._minor_units).multiply(factor)
        return Money(round_rational(exact, rounding), self._currency)

    def multiply_rat(self, factor_text: str, rounding: RoundingMode) -> Money:
        """multiply_by_rational() with the factor given as text: "1/3", "-1.9"."""
        return self.multiply_by_rational(
            ExactRational.from_rational_text(factor_text), rounding
        )

    def divide(self, divisor: int, rounding: RoundingMode) -> Money:
        """
        Divide by an integer and round. Usually split() is what you want:
        divide() loses the remainder, split() distributes it.
        """
        divisor = _require_int(divisor, "divisor")
        if divisor == 0:
            raise DivisionByZeroError()
        return self.multiply_by_rational(ExactRational.from_fraction(1, divisor), rounding)

    def divide_by_rational(
        self,
        divisor: Union[ExactRational, Fraction, int],
        rounding: RoundingMode,
    ) -> Money:
        divisor = _require_rational(divisor)
        if divisor.is_zero():
            raise DivisionByZeroError()
        exact = ExactRational.from_int(self._minor_units).divide(divisor)
        return Money(round_rational(exact, rounding), self._currency)

    def divide_rat(self, divisor_text: str, rounding: RoundingMode) -> Money:
        """divide_by_rational() with the divisor given as text."""
        return self.divide_by_rational(
            ExactRational.from_rational_text(divisor_text), rounding
        )

    def round_to_major(self, rounding: RoundingMode) -> Money:
        """Round to a whole number of major units, e.g. 12.34 EUR -> 12.00 EUR."""
        multiplier = self._currency.multiplier
        if multiplier == 1:
            return self
        major = round_rational(Fraction(self._minor_units, multiplier), rounding)
        return Money(major * multiplier, self._currency)

    def has_cents(self) -> bool:
        """True iff the amount is not a whole number of major units."""
        return self != self.round_to_major(RoundingMode.DOWN)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money + {type(other).__name__}. "
                f"Use Money.of() or Money.of_minor() to convert."
            )
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Operation not allowed: Money - {type(other).__name__}.")
        return self.subtract(other)

    def __neg__(self) -> Money:
        return self.negative()

    def __abs__(self) -> Money:
        return self.absolute()

    def __mul__(self, factor: int) -> Money:
        return self.multiply(factor)

    def __rmul__(self, factor: int) -> Money:
        return self.multiply(factor)

    # -------------------------------------------------------------------------
    # Allocation
    # -------------------------------------------------------------------------

    def split(self, n: int) -> list[Money]:
        """n parts summing to self; leftover minor units go to the first parts."""
        from .allocation import split

        return split(self, n)

    def allocate(self, ratios: Sequence[int]) -> list[Money]:
        """Parts proportional to integer ratios, summing to self."""
        from .allocation import allocate

        return allocate(self, ratios)

    # -------------------------------------------------------------------------
    # Text output
    # -------------------------------------------------------------------------

    def to_minor(self) -> str:
        """Integer minor units as text: "12345"."""
        return str(self._minor_units)

    def to_major(self) -> str:
        """Major units, no grouping, "." separator: "123.45", "12345" for JPY."""
        return self.format_major(CANONICAL)

    def format_major(self, formatter: Formatter) -> str:
        return formatter.format_minor(self._minor_units, self._currency.scale)

    def debug_string(self) -> str:
        """Grouped major units plus currency: "12,345.67 EUR"."""
        return f"{self.format_major(DEBUG)} {self._currency.code}"

    def __repr__(self) -> str:
        return self.debug_string()

    def __str__(self) -> str:
        return self.debug_string()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        {"minor_units": int, "currency": str, "scale": int}

        NOTE: never serialize as float. minor_units is always int.
        """
        return {
            "minor_units": self._minor_units,
            "currency": self._currency.name,
            "scale": self._currency.scale,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Money:
        currency = Currency(data.get("currency", ""), _whole_field(data.get("scale", 0), "scale"))
        return cls.of_minor(_whole_field(data["minor_units"], "minor_units"), currency)
