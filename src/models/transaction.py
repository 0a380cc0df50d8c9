"""
Core Data Models for the Personal Ledger

These models define the schemas for every record flowing through the ledger:
1. Transaction - one dated income/expense entry and its one-line encoding
2. MonthlySummary - the derived monthly report
3. LoadResult - the outcome of a bulk decode
4. ValidationIssue - a rejected piece of interactive input

Transactions are frozen pydantic models. Edits are expressed as
"remove and re-add" at the ledger level, never by mutating a record.
"""

import datetime
import re
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)


FIELD_SEPARATOR = ","
MAX_FIELDS = 5
MIN_FIELDS = 4

# Strict calendar date, e.g. 2024-07-15. date.fromisoformat alone also
# accepts compact and week forms.
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Plain ASCII decimal with an optional sign and exponent. No grouping
# separators.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Largest accepted decimal exponent, in either direction, of an amount.
# Keeps the plain notation written by encode() short.
MAX_AMOUNT_EXPONENT = 15


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """
    Income/expense classification of a transaction.

    The value is the uppercase name, which is also the persisted form.
    """
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


# =============================================================================
# ERRORS
# =============================================================================

class MalformedRecord(ValueError):
    """A single persisted line could not be decoded into a Transaction."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Bad record ({reason}): {line}")


def parse_iso_date(text: str) -> datetime.date:
    """Parse a strict YYYY-MM-DD date. Raises ValueError otherwise."""
    if not ISO_DATE_PATTERN.fullmatch(text):
        raise ValueError(f"'{text}' is not a YYYY-MM-DD date")
    return datetime.date.fromisoformat(text)


def parse_decimal(text: str) -> Decimal:
    """
    Parse a locale-independent decimal number.

    Surrounding whitespace is tolerated. Grouping separators, non-ASCII
    digits, NaN and Infinity are rejected, as are magnitudes outside
    MAX_AMOUNT_EXPONENT.
    """
    candidate = text.strip()
    if not DECIMAL_PATTERN.fullmatch(candidate):
        raise ValueError(f"'{text}' is not a decimal number")
    try:
        value = Decimal(candidate)
    except InvalidOperation as e:
        raise ValueError(f"'{text}' is not a decimal number") from e
    return check_magnitude(value)


def check_magnitude(value: Decimal) -> Decimal:
    """Raise ValueError if the decimal exponent of value is out of range."""
    if abs(value.adjusted()) > MAX_AMOUNT_EXPONENT:
        raise ValueError(
            f"'{value}' is out of range (exponent limit {MAX_AMOUNT_EXPONENT})"
        )
    return value


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    One dated income or expense entry.

    The amount sign is not implied by the kind: negative amounts are
    accepted for either kind.
    """
    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(
        ...,
        description="Calendar date of the entry"
    )
    kind: TransactionKind = Field(
        ...,
        description="INCOME or EXPENSE"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Free-form label, e.g. Salary or Food"
    )
    amount: Decimal = Field(
        ...,
        description="Any finite decimal amount"
    )
    note: str = Field(
        default="",
        description="Optional free text"
    )

    @field_validator('amount')
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        """Reject NaN, infinities and out-of-range magnitudes."""
        if not v.is_finite():
            raise ValueError("Amount must be a finite number")
        return check_magnitude(v)

    @property
    def composite_key(self) -> str:
        """Grouping key used by the monthly breakdown."""
        return f"{self.kind.value} / {self.category}"

    def encode(self) -> str:
        """
        Encode as a single line of five comma-separated fields:

            date,kind,category,amount,note

        Commas in the note are replaced by spaces. The category is written
        verbatim.
        """
        return FIELD_SEPARATOR.join([
            self.date.isoformat(),
            self.kind.value,
            self.category,
            format(self.amount, "f"),
            self.note.replace(FIELD_SEPARATOR, " "),
        ])

    @classmethod
    def decode(cls, line: str) -> "Transaction":
        """
        Decode one encoded line.

        The line is split into at most five fields, so a note may still
        contain commas here even though encode() strips them.

        Raises:
            MalformedRecord: If the line cannot be decoded
        """
        parts = line.split(FIELD_SEPARATOR, MAX_FIELDS - 1)
        if len(parts) < MIN_FIELDS:
            raise MalformedRecord(
                line, f"expected at least {MIN_FIELDS} fields, got {len(parts)}"
            )

        date_text, kind_text, category, amount_text = parts[:MIN_FIELDS]
        note = parts[4] if len(parts) == MAX_FIELDS else ""

        try:
            entry_date = parse_iso_date(date_text)
        except ValueError as e:
            raise MalformedRecord(line, f"invalid date: {e}") from e

        try:
            kind = TransactionKind(kind_text.upper())
        except ValueError as e:
            raise MalformedRecord(line, f"unknown kind '{kind_text}'") from e

        try:
            amount = parse_decimal(amount_text)
        except ValueError as e:
            raise MalformedRecord(line, f"invalid amount: {e}") from e

        try:
            return cls(
                date=entry_date,
                kind=kind,
                category=category,
                amount=amount,
                note=note,
            )
        except ValidationError as e:
            raise MalformedRecord(line, f"invalid fields: {e.error_count()} error(s)") from e


# =============================================================================
# LEDGER RESULT MODELS
# =============================================================================

class MonthlySummary(BaseModel):
    """
    Aggregate report for one calendar month.

    breakdown maps "<KIND> / <category>" to the summed amount and is
    ordered lexicographically by key.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    breakdown: dict[str, Decimal] = Field(default_factory=dict)
    transaction_count: int = Field(default=0, ge=0)

    @property
    def net(self) -> Decimal:
        """Income minus expense."""
        return self.total_income - self.total_expense

    @property
    def period(self) -> str:
        """The month as YYYY-MM."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0


class RejectedRecord(BaseModel):
    """A raw line that failed to decode, with the reason."""

    line: str
    reason: str


class LoadResult(BaseModel):
    """Outcome of decoding a batch of lines into the ledger."""

    loaded_count: int = Field(default=0, ge=0)
    rejections: list[RejectedRecord] = Field(default_factory=list)

    @property
    def rejected_lines(self) -> list[str]:
        """Verbatim rejected lines in original order."""
        return [rejection.line for rejection in self.rejections]

    @property
    def rejected_count(self) -> int:
        return len(self.rejections)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in user-supplied input."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'out_of_range')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
