"""
Unit tests for the amount codec (mt940_tags.codecs.amounts).

Tests debit/credit signing, reversal/expected prefixes, truncation to
cents and rejection of malformed marks and amount strings.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from mt940_tags.codecs.amounts import parse_amount
from mt940_tags.exceptions import FieldValueError


class TestParseAmountSign:
    """Sign handling driven by the mark."""

    def test_debit_is_negative(self):
        assert parse_amount("D", "150,00") == Decimal("-150.00")

    def test_credit_is_positive(self):
        assert parse_amount("C", "150,00") == Decimal("150.00")

    def test_reversed_debit_is_positive(self):
        """R flips the sign of the debit mark."""
        assert parse_amount("RD", "150,00") == Decimal("150.00")

    def test_reversed_credit_is_negative(self):
        assert parse_amount("RC", "150,00") == Decimal("-150.00")

    def test_expected_debit_keeps_sign(self):
        """E marks an expected entry and does not flip the sign."""
        assert parse_amount("ED", "150,00") == Decimal("-150.00")

    def test_expected_credit_keeps_sign(self):
        assert parse_amount("EC", "150,00") == Decimal("150.00")


class TestParseAmountDigits:
    """Parsing and truncation of the digit string."""

    def test_truncates_instead_of_rounding(self):
        assert parse_amount("C", "10,005") == Decimal("10.00")
        assert parse_amount("C", "10,009") == Decimal("10.00")

    def test_truncates_toward_zero_for_debits(self):
        assert parse_amount("D", "10,009") == Decimal("-10.00")

    def test_result_has_two_places(self):
        result = parse_amount("C", "7,5")
        assert result == Decimal("7.50")
        assert result.as_tuple().exponent == -2

    def test_trailing_comma(self):
        """SWIFT allows '250,' for a whole amount."""
        assert parse_amount("C", "250,") == Decimal("250.00")

    def test_no_separator(self):
        assert parse_amount("D", "42") == Decimal("-42.00")

    def test_decimal_point_accepted(self):
        assert parse_amount("C", "1.25") == Decimal("1.25")

    def test_returns_decimal(self):
        assert isinstance(parse_amount("C", "1,00"), Decimal)


class TestParseAmountErrors:
    """Malformed marks and amounts raise FieldValueError."""

    def test_wrong_debit_credit_mark(self):
        with pytest.raises(FieldValueError, match="Wrong debit/credit mark"):
            parse_amount("X", "150,00")

    def test_invalid_reversal_mark(self):
        with pytest.raises(FieldValueError, match="Not a reversal/expected mark"):
            parse_amount("QD", "150,00")

    def test_valid_prefix_with_wrong_dc(self):
        with pytest.raises(FieldValueError, match="Wrong debit/credit mark"):
            parse_amount("RX", "150,00")

    def test_negative_literal_rejected(self):
        with pytest.raises(FieldValueError, match="Positive amount string expected"):
            parse_amount("C", "-150,00")

    def test_empty_amount_rejected(self):
        with pytest.raises(FieldValueError, match="cannot be parsed"):
            parse_amount("C", "")

    def test_two_separators_rejected(self):
        """Only the first comma becomes a decimal point."""
        with pytest.raises(FieldValueError, match="cannot be parsed"):
            parse_amount("C", "1,000,00")

    def test_nan_rejected(self):
        with pytest.raises(FieldValueError, match="cannot be parsed"):
            parse_amount("C", "NaN")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_amount("X", "1,00")

    def test_too_many_digits_rejected(self):
        """More digits than Decimal precision can hold at cent scale."""
        with pytest.raises(FieldValueError, match="cannot be parsed"):
            parse_amount("C", "9" * 30)

    @pytest.mark.parametrize("amount", ["1_000", "1e3", "1 000", "0x10", "Infinity"])
    def test_non_swift_number_syntax_rejected(self, amount):
        with pytest.raises(FieldValueError, match="cannot be parsed"):
            parse_amount("C", amount)

    def test_plus_sign_rejected(self):
        with pytest.raises(FieldValueError, match="Positive amount string expected"):
            parse_amount("C", "+150,00")
