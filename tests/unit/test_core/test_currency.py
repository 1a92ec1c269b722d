#!/usr/bin/env python3
"""Tests for core currency utilities."""

from decimal import Decimal

import pytest

from fleet_finances.core.currency import (
    AmountParseError,
    apply_rate,
    cents_to_amount_str,
    cents_to_decimal,
    format_cents,
    is_valid_amount,
    parse_amount,
    parse_amount_to_cents,
    try_parse_cents,
)


class TestParseAmount:
    """Test loose amount parsing."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "raw,expected_cents",
        [
            ("100.00", 10000),
            ("50.50", 5050),
            ("12", 1200),
            ("12.5", 1250),
            (".75", 75),
            ("AED 45.99", 4599),
            ("1,234.56", 123456),
            ("1.2.3", 120),
            ("0", 0),
        ],
        ids=["plain", "two_places", "integer", "one_place", "leading_point", "labelled", "commas", "two_points", "zero"],
    )
    def test_string_amounts(self, raw, expected_cents):
        """Test sanitising and parsing of amount strings."""
        assert parse_amount_to_cents(raw) == expected_cents

    @pytest.mark.currency
    def test_integer_part_truncated_to_five_digits(self):
        """Test the integer part keeps only its first five digits."""
        assert parse_amount_to_cents("1234567") == 1234500
        assert parse_amount_to_cents("123456.78") == 1234578

    @pytest.mark.currency
    def test_digit_cap_can_be_lifted(self):
        """Test stored amounts keep every integer digit when the cap is off."""
        assert parse_amount_to_cents("1234567", max_integer_digits=None) == 123456700
        assert parse_amount_to_cents(120000, max_integer_digits=None) == 12000000
        assert parse_amount("120000.5", max_integer_digits=None) == Decimal("120000.50")
        assert try_parse_cents("250000", max_integer_digits=None) == 25000000
        assert is_valid_amount("999999.99", max_integer_digits=None)

    @pytest.mark.currency
    def test_extra_fraction_digits_truncated(self):
        """Test fractional digits beyond two are dropped, not rounded."""
        assert parse_amount_to_cents("10.999") == 1099

    @pytest.mark.currency
    @pytest.mark.parametrize("raw,expected_cents", [(50, 5000), (50.5, 5050), (Decimal("7.25"), 725)])
    def test_numeric_amounts(self, raw, expected_cents):
        """Test numbers from JSON bodies parse the same way as strings."""
        assert parse_amount_to_cents(raw) == expected_cents

    @pytest.mark.currency
    @pytest.mark.parametrize("raw", ["-5", "-10.00", "abc", "", ".", "   ", -3, -0.5, float("nan"), True])
    def test_invalid_amounts_raise(self, raw):
        """Test negative, empty and non-numeric amounts are rejected."""
        with pytest.raises(AmountParseError):
            parse_amount_to_cents(raw)

    @pytest.mark.currency
    def test_parse_amount_returns_two_place_decimal(self):
        """Test Decimal result keeps two fractional digits."""
        assert parse_amount("150.5") == Decimal("150.50")
        assert str(parse_amount("3")) == "3.00"

    @pytest.mark.currency
    def test_parse_error_is_value_error(self):
        """Test the parse error carries the raw input."""
        with pytest.raises(ValueError) as excinfo:
            parse_amount("abc")
        assert excinfo.value.raw == "abc"


class TestAmountValidity:
    """Test validity helpers used by the filter and aggregator."""

    @pytest.mark.currency
    def test_try_parse_cents(self):
        assert try_parse_cents("1.00") == 100
        assert try_parse_cents("nope") is None
        assert try_parse_cents(None) is None

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "raw,expected",
        [("0.01", True), ("100", True), ("0", False), ("0.00", False), ("-5", False), ("abc", False), (None, False)],
    )
    def test_is_valid_amount(self, raw, expected):
        """Test only strictly positive parsable amounts are valid."""
        assert is_valid_amount(raw) is expected


class TestCurrencyFormatting:
    """Test formatting helpers."""

    @pytest.mark.currency
    def test_cents_to_amount_str(self):
        assert cents_to_amount_str(4599) == "45.99"
        assert cents_to_amount_str(5) == "0.05"
        assert cents_to_amount_str(0) == "0.00"
        assert cents_to_amount_str(-4599) == "-45.99"

    @pytest.mark.currency
    def test_format_cents(self):
        assert format_cents(15050) == "AED 150.50"
        assert format_cents(100, "USD") == "USD 1.00"

    @pytest.mark.currency
    def test_cents_to_decimal(self):
        assert cents_to_decimal(15050) == Decimal("150.50")
        assert str(cents_to_decimal(0)) == "0.00"

    @pytest.mark.currency
    def test_apply_rate_rounds_half_up(self):
        """Test rate application rounds to the nearest cent."""
        assert apply_rate(10050, Decimal("0.3")) == 3015
        assert apply_rate(5, Decimal("0.3")) == 2  # 1.5 -> 2
        assert apply_rate(0, Decimal("0.3")) == 0
