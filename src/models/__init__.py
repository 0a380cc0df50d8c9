"""
Data Models Package

This package contains all Pydantic models used by the Personal Ledger.
Every record flowing through the system conforms to these schemas.
"""

from src.models.transaction import (
    LoadResult,
    MalformedRecord,
    MonthlySummary,
    RejectedRecord,
    Transaction,
    TransactionKind,
    ValidationIssue,
    parse_decimal,
    parse_iso_date,
)
from src.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LoadResult",
    "MalformedRecord",
    "MonthlySummary",
    "RejectedRecord",
    "Transaction",
    "TransactionKind",
    "ValidationIssue",
    "parse_decimal",
    "parse_iso_date",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
