"""Tests for interactive input validation."""

import pytest
from datetime import date
from decimal import Decimal

from src.models.transaction import TransactionKind
from src.validation import InputValidator, InvalidInputError


@pytest.fixture
def validator() -> InputValidator:
    return InputValidator()


class TestDateInput:
    """Tests for InputValidator.parse_date."""

    def test_valid_date(self, validator):
        assert validator.parse_date("2024-07-15") == date(2024, 7, 15)

    def test_surrounding_whitespace_trimmed(self, validator):
        assert validator.parse_date("  2024-07-15 ") == date(2024, 7, 15)

    def test_empty_date(self, validator):
        """Test that an empty answer is reported as missing."""
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_date("   ")
        assert exc_info.value.issue.field == "date"
        assert exc_info.value.issue.issue_type == "missing"

    @pytest.mark.parametrize("text", ["15/07/2024", "2024-7-15", "2024-02-30", "20240715", "today"])
    def test_invalid_date(self, validator, text):
        """Test that non-ISO and impossible dates are rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_date(text)
        assert exc_info.value.issue.issue_type == "invalid_format"
        assert "YYYY-MM-DD" in exc_info.value.issue.message


class TestKindInput:
    """Tests for InputValidator.parse_kind."""

    @pytest.mark.parametrize("text,expected", [
        ("income", TransactionKind.INCOME),
        ("INCOME", TransactionKind.INCOME),
        (" Expense ", TransactionKind.EXPENSE),
    ])
    def test_valid_kind(self, validator, text, expected):
        assert validator.parse_kind(text) == expected

    def test_unknown_kind(self, validator):
        """Test the message shown for an unknown type."""
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_kind("transfer")
        issue = exc_info.value.issue
        assert issue.field == "kind"
        assert issue.issue_type == "invalid_value"
        assert issue.message == "'transfer' is not a type. Enter income or expense."


class TestCategoryAndNoteInput:
    """Tests for free-text fields."""

    def test_category_trimmed(self, validator):
        assert validator.parse_category("  Food ") == "Food"

    def test_empty_category(self, validator):
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_category("")
        assert exc_info.value.issue.issue_type == "missing"

    def test_note_may_be_empty(self, validator):
        assert validator.parse_note("") == ""
        assert validator.parse_note(" lunch ") == "lunch"


class TestAmountInput:
    """Tests for InputValidator.parse_amount."""

    @pytest.mark.parametrize("text,expected", [
        ("42.50", Decimal("42.50")),
        (" 42.50 ", Decimal("42.50")),
        ("-12", Decimal("-12")),
        (".5", Decimal("0.5")),
    ])
    def test_valid_amount(self, validator, text, expected):
        assert validator.parse_amount(text) == expected

    def test_empty_amount(self, validator):
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_amount("")
        assert exc_info.value.issue.issue_type == "missing"

    @pytest.mark.parametrize("text", ["abc", "1,000.00", "42,50", "NaN", "$5", "\u0664\u0662.50"])
    def test_invalid_amount(self, validator, text):
        """Test that locale formats and non-numbers are rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_amount(text)
        assert exc_info.value.issue.field == "amount"
        assert exc_info.value.issue.issue_type == "invalid_format"

    @pytest.mark.parametrize("text", ["1e100000000", "12345678901234567", "1e-20"])
    def test_amount_out_of_range(self, validator, text):
        """Test that huge or tiny magnitudes are explained separately."""
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_amount(text)
        assert exc_info.value.issue.issue_type == "out_of_range"


class TestPeriodInput:
    """Tests for InputValidator.parse_period."""

    def test_valid_period(self, validator):
        assert validator.parse_period("2024-07") == (2024, 7)

    def test_single_digit_month(self, validator):
        assert validator.parse_period("2024-7") == (2024, 7)

    def test_non_ascii_digits_rejected(self, validator):
        with pytest.raises(InvalidInputError):
            validator.parse_period("\u0662\u0660\u0662\u0664-07")

    @pytest.mark.parametrize("text", ["2024-00", "2024-13"])
    def test_month_out_of_range(self, validator, text):
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_period(text)
        assert exc_info.value.issue.issue_type == "out_of_range"

    @pytest.mark.parametrize("text", ["July", "07-2024", "2024/07", "2024-07-15", ""])
    def test_invalid_period(self, validator, text):
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_period(text)
        assert exc_info.value.issue.field == "period"
        assert exc_info.value.issue.issue_type == "invalid_format"

    def test_error_is_a_value_error(self, validator):
        with pytest.raises(ValueError):
            validator.parse_period("July")
