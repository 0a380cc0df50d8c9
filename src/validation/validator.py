"""
Interactive Input Validation

Raw text typed by a user is parsed one field at a time. A field that does
not parse raises InvalidInputError carrying a ValidationIssue, so the caller
can show the message and ask again. The Transaction is only constructed once
every field has parsed, so bad input never reaches the ledger.

Validation NEVER silently fixes input beyond trimming surrounding
whitespace.
"""

import datetime
import re
from decimal import Decimal

from src.models.transaction import (
    DECIMAL_PATTERN,
    MAX_AMOUNT_EXPONENT,
    TransactionKind,
    ValidationIssue,
    parse_decimal,
    parse_iso_date,
)


PERIOD_PATTERN = re.compile(r"([0-9]{4})-([0-9]{1,2})")


class InvalidInputError(ValueError):
    """User input for a single field was rejected."""

    def __init__(self, issue: ValidationIssue):
        self.issue = issue
        super().__init__(issue.message)


class InputValidator:
    """
    Parses interactive field input for the add and summary flows.

    Each parse_* method returns the typed value or raises
    InvalidInputError.
    """

    def parse_date(self, text: str) -> datetime.date:
        candidate = text.strip()
        if not candidate:
            raise self._error("date", "missing", "A date is required (YYYY-MM-DD)")
        try:
            return parse_iso_date(candidate)
        except ValueError:
            raise self._error(
                "date",
                "invalid_format",
                f"'{candidate}' is not a valid date. Use YYYY-MM-DD.",
            )

    def parse_kind(self, text: str) -> TransactionKind:
        candidate = text.strip().upper()
        try:
            return TransactionKind(candidate)
        except ValueError:
            raise self._error(
                "kind",
                "invalid_value",
                f"'{text.strip()}' is not a type. Enter income or expense.",
            )

    def parse_category(self, text: str) -> str:
        candidate = text.strip()
        if not candidate:
            raise self._error("category", "missing", "A category is required")
        return candidate

    def parse_amount(self, text: str) -> Decimal:
        candidate = text.strip()
        if not candidate:
            raise self._error("amount", "missing", "An amount is required")
        try:
            return parse_decimal(candidate)
        except ValueError:
            if DECIMAL_PATTERN.fullmatch(candidate):
                raise self._error(
                    "amount",
                    "out_of_range",
                    f"'{candidate}' is too large or too small (limit 1e{MAX_AMOUNT_EXPONENT}).",
                )
            raise self._error(
                "amount",
                "invalid_format",
                f"'{candidate}' is not a number. Use digits with an optional '.' (e.g. 42.50).",
            )

    def parse_note(self, text: str) -> str:
        return text.strip()

    def parse_period(self, text: str) -> tuple[int, int]:
        """Parse YYYY-MM into (year, month)."""
        candidate = text.strip()
        match = PERIOD_PATTERN.fullmatch(candidate)
        if not match:
            raise self._error(
                "period",
                "invalid_format",
                f"'{candidate}' is not a month. Use YYYY-MM.",
            )
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise self._error(
                "period",
                "out_of_range",
                f"Month must be between 01 and 12, got {month:02d}",
            )
        return year, month

    @staticmethod
    def _error(field: str, issue_type: str, message: str) -> InvalidInputError:
        return InvalidInputError(ValidationIssue(
            field=field,
            issue_type=issue_type,
            message=message,
        ))
