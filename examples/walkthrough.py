#!/usr/bin/env python3
"""
walkthrough.py — exactmoney from text to text

================================================================================
THE BUG
================================================================================

    >>> 0.1 + 0.2
    0.30000000000000004

    >>> 2026.0 / 12 * 12
    2025.9999999999998

Binary floating point cannot hold most decimal fractions. Money written by
humans is decimal. Every float in a money path is a rounding error waiting
to be summed.

================================================================================
THE PIPELINE
================================================================================

    text --parse--> ExactRational --scale--> Money (int minor units)
         --operate (explicit rounding)--> Money --format--> text

No step goes through float. Rounding happens only where the caller asks for
it, with the policy the caller names.

================================================================================
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exactmoney import (
    Currency,
    CurrencyMismatchError,
    Formatter,
    Money,
    PrecisionError,
    RoundingMode,
    SeparatorError,
    from_major_text,
    group_size_indian,
)
from exactmoney.serialization import dumps, loads


php = Currency("PHP", 2)
vnd = Currency("VND", 0)


def demonstrate_pipeline():
    """Parse, multiply by a rational, round, format."""
    print("=" * 60)
    print("THE PIPELINE")
    print("=" * 60)
    print()

    paid = from_major_text("-25.33", php)
    print(f"Parsed:      {paid}")

    multiplied = paid.multiply_rat("12345.4567", RoundingMode.HALF_UP)
    print(f"× 12345.4567 (HALF_UP): {multiplied}")

    rounded = multiplied.round_to_major(RoundingMode.FLOOR)
    print(f"Floor to major:         {rounded}")

    indian = Formatter(group_sep=" ", dec_sep=",", group_size=group_size_indian, min_decimals=1)
    print(f"Indian grouping:        {rounded.format_major(indian)}")   # -3 12 711,0
    print()


def demonstrate_split():
    """Split without losing a cent."""
    print("=" * 60)
    print("SPLIT AND ALLOCATE")
    print("=" * 60)
    print()

    budget = Money.euro(2026)
    monthly = budget.split(12)
    print(f"Budget: {budget}")
    for i, m in enumerate(monthly, 1):
        print(f"  Month {i:2d}: {m}")

    total = sum(monthly, Money.zero(budget.currency))
    print(f"Sum of parts: {total}  (equal: {total == budget})")
    print()

    shares = Money.of_minor(100, php).allocate([2, 1])
    print(f"1.00 PHP allocated 2:1 -> {shares}")
    print()


def demonstrate_rejections():
    """Errors are explicit, never approximated."""
    print("=" * 60)
    print("REJECTIONS")
    print("=" * 60)
    print()

    attempts = [
        lambda: from_major_text("1,500.00", php, group_sep=".", dec_sep=","),
        lambda: from_major_text("123.456", php),
        lambda: from_major_text("1.5", vnd),
        lambda: Money.of(1, php) + Money.of(1, vnd),
    ]
    for attempt in attempts:
        try:
            attempt()
        except (SeparatorError, PrecisionError, CurrencyMismatchError) as e:
            print(f"{type(e).__name__}: {e}")
    print()


def demonstrate_serialization():
    """JSON without float."""
    print("=" * 60)
    print("SERIALIZATION")
    print("=" * 60)
    print()

    original = from_major_text("1,234,567.89", php)
    text = dumps(original)
    print(f"Serialized: {text}")

    restored = Money.from_dict(loads(text))
    print(f"Restored:   {restored}  (equal: {restored == original})")
    print()


def main():
    demonstrate_pipeline()
    demonstrate_split()
    demonstrate_rejections()
    demonstrate_serialization()


if __name__ == "__main__":
    main()
