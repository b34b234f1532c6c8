"""
test_formatting.py — Tests for Formatter and the group-size functions
"""

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from exactmoney import (
    CANONICAL,
    Currency,
    Formatter,
    Money,
    group_size_indian,
    group_size_none,
    group_size_three,
)


php = Currency("PHP", 2)
vnd = Currency("VND", 0)


class TestFormatMajor:

    def test_default_money(self):
        f = Formatter(",", ".", group_size_indian, 2)
        assert Money().format_major(f) == "0.00"

    def test_three_grouping_wide_separator(self):
        f = Formatter("  ", ",", group_size_three, 2)
        assert Money.of_minor(-123456789012, php).format_major(f) == "-1  234  567  890,12"

    def test_short_amount(self):
        f = Formatter("_", ".", group_size_three, 2)
        assert Money.of_minor(-12, php).format_major(f) == "-0.12"

    def test_indian_grouping(self):
        f = Formatter(",", "..", group_size_indian, 2)
        assert Money.of_minor(-123456789000, php).format_major(f) == "-1,23,45,67,890..00"

    def test_indian_grouping_min_one_decimal(self):
        f = Formatter(" ", ",", group_size_indian, 1)
        assert Money.of_minor(-31271100, php).format_major(f) == "-3 12 711,0"

    def test_exact_group_boundary(self):
        f = Formatter(",", ".", group_size_three, 0)
        assert Money.of_minor(123456, vnd).format_major(f) == "123,456"
        assert Money.of_minor(1234, vnd).format_major(f) == "1,234"
        assert Money.of_minor(123, vnd).format_major(f) == "123"

    def test_trailing_zeroes_trimmed(self):
        assert Money.of_minor(1230, php).format_major(CANONICAL) == "12.3"
        assert Money.of_minor(1200, php).format_major(CANONICAL) == "12"

    def test_min_decimals_beyond_scale(self):
        f = Formatter("", ".", group_size_none, 4)
        assert Money.of_minor(1234, php).format_major(f) == "12.3400"
        assert Money.of_minor(5, vnd).format_major(f) == "5.0000"

    def test_no_grouping(self):
        assert Money.of_minor(123456789, php).format_major(CANONICAL) == "1234567.89"

    def test_custom_group_size(self):
        # groups of 4 once, then stop
        f = Formatter("'", ".", lambda i: 4 if i == 0 else 0, 0)
        assert Money.of_minor(123456789, vnd).format_major(f) == "12345'6789"

    def test_immutable_value_type(self):
        f = Formatter(",", ".", group_size_three, 2)
        assert not hasattr(f, "__dict__")
        with pytest.raises(AttributeError):
            f.min_decimals = 3

    def test_negative_min_decimals_rejected(self):
        with pytest.raises(ValueError):
            Formatter(",", ".", group_size_three, -1)


class TestGroupSizes:

    def test_none(self):
        assert group_size_none(0) == 0

    def test_three(self):
        assert [group_size_three(i) for i in range(4)] == [3, 3, 3, 3]

    def test_indian(self):
        assert [group_size_indian(i) for i in range(4)] == [3, 2, 2, 2]


class TestFormatMinor:

    def test_format_minor_directly(self):
        f = Formatter(",", ".", group_size_three, 2)
        assert f.format_minor(100000, 2) == "1,000.00"
        assert f.format_minor(-1, 3) == "-0.001"
