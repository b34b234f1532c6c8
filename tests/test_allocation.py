"""
test_allocation.py — Tests for split() and allocate()

The invariant under test everywhere: the parts sum EXACTLY to the original.
"""

import pytest
from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exactmoney import (
    BTC,
    EUR,
    Currency,
    DomainError,
    Money,
    allocate,
    split,
)


php = Currency("PHP", 2)


def minor(parts):
    return [p.minor_units for p in parts]


def total(parts, currency):
    return sum(parts, Money.zero(currency))


# ==============================================================================
# SPLIT
# ==============================================================================

class TestSplit:

    def test_with_remainder(self):
        parts = split(Money.of_minor(100, php), 3)
        assert minor(parts) == [34, 33, 33]
        assert total(parts, php) == Money.of_minor(100, php)

    def test_negative(self):
        parts = split(Money.of_minor(-100, php), 3)
        assert minor(parts) == [-34, -33, -33]

    def test_method_form(self):
        assert Money.of_minor(100, php).split(3) == split(Money.of_minor(100, php), 3)

    def test_two_thousand_twenty_six_over_twelve(self):
        budget = Money.euro(2026)
        parts = budget.split(12)
        assert len(parts) == 12
        assert total(parts, EUR) == budget
        assert minor(parts)[:4] == [16884, 16884, 16884, 16884]
        assert minor(parts)[4:] == [16883] * 8

    def test_equal_distribution(self):
        assert minor(Money.euro(120).split(12)) == [1000] * 12

    def test_one_part(self):
        m = Money.of_minor(12345, php)
        assert m.split(1) == [m]

    def test_more_parts_than_cents(self):
        parts = Money.euro_cents(5).split(10)
        assert minor(parts) == [1] * 5 + [0] * 5

    def test_zero(self):
        parts = Money.zero(EUR).split(5)
        assert all(p.is_zero() for p in parts)
        assert all(p.currency == EUR for p in parts)

    def test_default_money(self):
        assert Money().split(2) == [Money(), Money()]

    def test_invalid_n(self):
        with pytest.raises(DomainError) as exc_info:
            Money.euro(100).split(0)
        assert str(exc_info.value) == "split must be higher than zero, is 0"
        with pytest.raises(DomainError):
            Money.euro(100).split(-1)

    def test_non_int_n(self):
        with pytest.raises(TypeError):
            Money.euro(100).split(2.0)

    def test_very_large_amount(self):
        huge = Money.of_minor(10 ** 40 + 7, php)
        parts = huge.split(1000)
        assert total(parts, php) == huge

    def test_btc(self):
        btc = Money.of_minor(100_000_000, BTC)
        assert total(btc.split(3), BTC) == btc

    def test_original_untouched(self):
        m = Money.of_minor(100, php)
        m.split(3)
        assert m == Money.of_minor(100, php)


# ==============================================================================
# ALLOCATE
# ==============================================================================

class TestAllocate:

    def test_two_to_one(self):
        assert minor(allocate(Money.of_minor(100, php), [2, 1])) == [67, 33]

    def test_two_to_one_negative(self):
        assert minor(allocate(Money.of_minor(-100, php), [2, 1])) == [-67, -33]

    def test_method_form(self):
        assert minor(Money.of_minor(100, php).allocate([70, 30])) == [70, 30]

    def test_equal_ratios(self):
        assert minor(Money.of_minor(100, php).allocate([1, 1, 1])) == [34, 33, 33]

    def test_leftover_goes_to_first_listed(self):
        parts = Money.of_minor(5, php).allocate([1, 1, 1, 1, 1, 1, 1])
        assert minor(parts) == [1, 1, 1, 1, 1, 0, 0]

    def test_single_ratio(self):
        m = Money.of_minor(12345, php)
        assert m.allocate([7]) == [m]

    def test_zero(self):
        assert minor(Money.zero(php).allocate([1, 2, 3])) == [0, 0, 0]

    def test_accepts_tuple(self):
        assert minor(Money.of_minor(100, php).allocate((2, 1))) == [67, 33]

    def test_no_ratios(self):
        with pytest.raises(DomainError) as exc_info:
            Money.of_minor(100, php).allocate([])
        assert str(exc_info.value) == "no ratios specified"

    def test_non_positive_ratio(self):
        with pytest.raises(DomainError):
            Money.of_minor(100, php).allocate([1, 0])
        with pytest.raises(DomainError):
            Money.of_minor(100, php).allocate([1, -1])

    def test_float_ratio(self):
        with pytest.raises(TypeError):
            Money.of_minor(100, php).allocate([0.5, 0.5])

    def test_huge_ratios(self):
        m = Money.of_minor(10 ** 30 + 1, php)
        parts = m.allocate([10 ** 20, 10 ** 20 + 1, 3])
        assert total(parts, php) == m


# ==============================================================================
# PROPERTY-BASED TESTS (Hypothesis)
# ==============================================================================

amounts = st.integers(min_value=-10 ** 18, max_value=10 ** 18)


class TestSplitProperties:

    @given(amount=amounts, n=st.integers(min_value=1, max_value=100))
    @settings(max_examples=1000, suppress_health_check=[HealthCheck.too_slow])
    def test_sum_equals_original(self, amount, n):
        """
        PROPERTY: for any Money m and n > 0:
            sum(m.split(n)) == m
        """
        money = Money.of_minor(amount, php)
        parts = money.split(n)
        assert len(parts) == n
        assert total(parts, php) == money

    @given(amount=amounts, n=st.integers(min_value=1, max_value=100))
    @settings(max_examples=500)
    def test_parts_differ_by_at_most_one(self, amount, n):
        """PROPERTY: parts are as equal as possible, larger ones first."""
        values = [abs(v) for v in minor(Money.of_minor(amount, php).split(n))]
        assert max(values) - min(values) <= 1
        assert values == sorted(values, reverse=True)


class TestAllocateProperties:

    @given(
        amount=amounts,
        ratios=st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=20),
    )
    @settings(max_examples=1000, suppress_health_check=[HealthCheck.too_slow])
    def test_sum_equals_original(self, amount, ratios):
        """PROPERTY: sum(m.allocate(ratios)) == m"""
        money = Money.of_minor(amount, php)
        parts = money.allocate(ratios)
        assert len(parts) == len(ratios)
        assert total(parts, php) == money

    @given(
        amount=amounts,
        ratios=st.lists(st.integers(min_value=1, max_value=1000), min_size=1, max_size=20),
    )
    @settings(max_examples=500)
    def test_proportional_within_one_unit(self, amount, ratios):
        """PROPERTY: each part is within one minor unit of its exact share."""
        magnitude = abs(amount)
        ratio_sum = sum(ratios)
        parts = Money.of_minor(amount, php).allocate(ratios)
        for part, ratio in zip(parts, ratios):
            exact_times_sum = magnitude * ratio
            assert abs(abs(part.minor_units) * ratio_sum - exact_times_sum) <= ratio_sum

    def test_exact_share_can_still_take_leftover(self):
        # 2 split 2:1:1 -> exact shares [1, 0.5, 0.5]; the leftover unit goes
        # to the first ratio even though its share was already whole
        assert minor(Money.of_minor(2, php).allocate([2, 1, 1])) == [2, 0, 0]
