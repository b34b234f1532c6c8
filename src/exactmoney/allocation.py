"""
allocation.py — Lossless split and ratio allocation of Money

================================================================================
INVARIANT
================================================================================

For every Money m:

    sum(split(m, n))          == m
    sum(allocate(m, ratios))  == m

No minor unit is lost or invented. Amounts that do not divide evenly leave a
remainder of whole minor units, handed out one at a time to the parts in
order, so earlier parts may get one unit more than later ones:

    split(1.00 EUR, 3)          -> [0.34, 0.33, 0.33]
    allocate(1.00 EUR, [2, 1])  -> [0.67, 0.33]

Negative amounts are processed on their magnitude and every part is negated
at the end, so split(-1.00 EUR, 3) -> [-0.34, -0.33, -0.33].

All arithmetic is on Python ints: no bound on amounts, ratios or leftovers.

================================================================================
"""

from __future__ import annotations

from typing import Sequence

from .core import Money
from .errors import DomainError


def _distribute_leftover(amounts: list[int], leftover: int) -> None:
    # One unit per part, in order, wrapping around until nothing is left.
    index = 0
    while leftover > 0:
        amounts[index % len(amounts)] += 1
        leftover -= 1
        index += 1


def _to_parts(money: Money, amounts: list[int], negative: bool) -> list[Money]:
    if negative:
        amounts = [-amount for amount in amounts]
    return [Money.of_minor(amount, money.currency) for amount in amounts]


def split(money: Money, n: int) -> list[Money]:
    """
    Split into n parts that differ by at most one minor unit.

    Raises:
        DomainError: n < 1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"split count must be int, not {type(n).__name__}")
    if n <= 0:
        raise DomainError(f"split must be higher than zero, is {n}")

    total = abs(money.minor_units)
    quotient, remainder = divmod(total, n)

    amounts = [quotient] * n
    _distribute_leftover(amounts, remainder)

    return _to_parts(money, amounts, money.is_negative())


def allocate(money: Money, ratios: Sequence[int]) -> list[Money]:
    """
    Allocate proportionally to positive integer ratios.

    Each part gets floor(total * ratio / sum(ratios)) first; the few minor
    units lost to flooring then go round-robin from the first ratio on.

    Raises:
        DomainError: no ratios, or a ratio <= 0
    """
    ratios = list(ratios)
    if not ratios:
        raise DomainError("no ratios specified")
    for ratio in ratios:
        if isinstance(ratio, bool) or not isinstance(ratio, int):
            raise TypeError(f"ratios must be int, not {type(ratio).__name__}")
        if ratio <= 0:
            raise DomainError(f"ratios must be positive, got {ratio}")

    total = abs(money.minor_units)
    ratio_sum = sum(ratios)

    amounts = [total * ratio // ratio_sum for ratio in ratios]
    _distribute_leftover(amounts, total - sum(amounts))

    return _to_parts(money, amounts, money.is_negative())
