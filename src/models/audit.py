"""
Audit Models for the Personal Ledger

Every significant ledger operation produces an audit event:
1. Loading a ledger file (and each rejected line)
2. Adding a transaction
3. Generating a monthly summary
4. Saving the ledger (or failing to)

Audit events are append-only records. They are never modified once built.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    LEDGER_LOADED = "ledger_loaded"
    LOAD_FAILED = "load_failed"
    RECORD_REJECTED = "record_rejected"
    LEDGER_SAVED = "ledger_saved"
    SAVE_FAILED = "save_failed"

    # Ledger operations
    TRANSACTION_ADDED = "transaction_added"
    SUMMARY_GENERATED = "summary_generated"

    # User input
    INPUT_REJECTED = "input_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'ledger', 'transaction', 'summary')"
    )

    # Correlation - one id per shell session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events in one session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.ledger_loaded("ledger.csv", 12, 1, correlation_id)
        event = AuditEventBuilder.save_failed("out.csv", "Permission denied", correlation_id)
    """

    @staticmethod
    def ledger_loaded(
        source: str,
        loaded_count: int,
        rejected_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            severity=AuditSeverity.WARNING if rejected_count else AuditSeverity.INFO,
            entity_type="ledger",
            correlation_id=correlation_id,
            description=f"Loaded {loaded_count} transactions from {source}",
            details={
                "source": source,
                "loaded_count": loaded_count,
                "rejected_count": rejected_count,
            },
        )

    @staticmethod
    def load_failed(
        source: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="ledger",
            correlation_id=correlation_id,
            description=f"Could not load ledger from {source}",
            details={
                "source": source,
            },
            error_message=error_message,
        )

    @staticmethod
    def record_rejected(
        source: str,
        line: str,
        reason: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RECORD_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="record",
            correlation_id=correlation_id,
            description=f"Skipped malformed record from {source}",
            details={
                "source": source,
                "line": line,
                "reason": reason,
            },
        )

    @staticmethod
    def transaction_added(
        date: str,
        kind: str,
        category: str,
        amount: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            correlation_id=correlation_id,
            description=f"Transaction added: {kind} / {category} {amount}",
            details={
                "date": date,
                "kind": kind,
                "category": category,
                "amount": amount,
            },
            is_user_action=True,
        )

    @staticmethod
    def summary_generated(
        period: str,
        transaction_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SUMMARY_GENERATED,
            entity_type="summary",
            correlation_id=correlation_id,
            description=f"Summary for {period} covered {transaction_count} transactions",
            details={
                "period": period,
                "transaction_count": transaction_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def ledger_saved(
        destination: str,
        record_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            entity_type="ledger",
            correlation_id=correlation_id,
            description=f"Saved {record_count} transactions to {destination}",
            details={
                "destination": destination,
                "record_count": record_count,
            },
        )

    @staticmethod
    def save_failed(
        destination: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="ledger",
            correlation_id=correlation_id,
            description=f"Could not save ledger to {destination}",
            details={
                "destination": destination,
            },
            error_message=error_message,
        )

    @staticmethod
    def input_rejected(
        field: str,
        message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_REJECTED,
            severity=AuditSeverity.DEBUG,
            entity_type="input",
            correlation_id=correlation_id,
            description=f"Rejected input for {field}",
            details={
                "field": field,
                "message": message,
            },
            is_user_action=True,
        )
