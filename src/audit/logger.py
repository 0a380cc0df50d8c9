"""
Audit Logger

Every significant ledger operation is logged as a structured audit event:
1. Loading a file (and each rejected line)
2. Adding a transaction
3. Generating a summary
4. Saving, successfully or not

Events go through structlog into the standard library logging tree, so the
level and destination are controlled by configure_logging(). Logs are
written to stderr and never mix with the interactive menu on stdout.
"""

import logging
import sys
from typing import Optional, TextIO
from uuid import UUID, uuid4

import structlog

from src.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from src.models.transaction import Transaction


def _build_processors(renderer: str) -> list:
    final = (
        structlog.dev.ConsoleRenderer(colors=False)
        if renderer == "console"
        else structlog.processors.JSONRenderer()
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        final,
    ]


_handler: Optional[logging.Handler] = None


def configure_logging(
    level: str = "WARNING",
    renderer: str = "json",
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Configure stdlib logging and structlog for the process.

    Intended to be called once by the entry point. Calling it again
    replaces the handler installed by the previous call.

    Args:
        level: Standard level name, e.g. "INFO"
        renderer: "json" or "console"
        stream: Output stream; defaults to the current sys.stderr

    Returns:
        The installed handler
    """
    global _handler
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(level)

    structlog.configure(
        processors=_build_processors(renderer),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return _handler


# Library default until an entry point calls configure_logging().
structlog.configure(
    processors=_build_processors("json"),
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=False,
)


class AuditLogger:
    """
    Central audit logging service.

    Every event is emitted through structlog at the level matching its
    severity. A correlation id ties together all events of one session.
    """

    def __init__(self, correlation_id: Optional[UUID] = None):
        """
        Initialize audit logger.

        Args:
            correlation_id: Id attached to every event from this logger.
                            A new one is created when omitted.
        """
        self._correlation_id = correlation_id or create_correlation_id()
        self._logger = structlog.get_logger("ledger.audit")

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    def log(self, event: AuditEvent) -> None:
        """Emit an audit event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_ledger_loaded(
        self,
        source: str,
        loaded_count: int,
        rejected_count: int,
    ) -> None:
        """Log a completed bulk load."""
        self.log(AuditEventBuilder.ledger_loaded(
            source=source,
            loaded_count=loaded_count,
            rejected_count=rejected_count,
            correlation_id=self._correlation_id,
        ))

    def log_load_failed(self, source: str, error_message: str) -> None:
        """Log a source that could not be opened or read."""
        self.log(AuditEventBuilder.load_failed(
            source=source,
            error_message=error_message,
            correlation_id=self._correlation_id,
        ))

    def log_record_rejected(self, source: str, line: str, reason: str) -> None:
        """Log one skipped line."""
        self.log(AuditEventBuilder.record_rejected(
            source=source,
            line=line,
            reason=reason,
            correlation_id=self._correlation_id,
        ))

    def log_transaction_added(self, transaction: Transaction) -> None:
        """Log a newly appended transaction."""
        self.log(AuditEventBuilder.transaction_added(
            date=transaction.date.isoformat(),
            kind=transaction.kind.value,
            category=transaction.category,
            amount=format(transaction.amount, "f"),
            correlation_id=self._correlation_id,
        ))

    def log_summary_generated(self, period: str, transaction_count: int) -> None:
        """Log a monthly summary request."""
        self.log(AuditEventBuilder.summary_generated(
            period=period,
            transaction_count=transaction_count,
            correlation_id=self._correlation_id,
        ))

    def log_ledger_saved(self, destination: str, record_count: int) -> None:
        """Log a successful save."""
        self.log(AuditEventBuilder.ledger_saved(
            destination=destination,
            record_count=record_count,
            correlation_id=self._correlation_id,
        ))

    def log_save_failed(self, destination: str, error_message: str) -> None:
        """Log a failed save."""
        self.log(AuditEventBuilder.save_failed(
            destination=destination,
            error_message=error_message,
            correlation_id=self._correlation_id,
        ))

    def log_input_rejected(self, field: str, message: str) -> None:
        """Log interactive input that failed validation."""
        self.log(AuditEventBuilder.input_rejected(
            field=field,
            message=message,
            correlation_id=self._correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a session and pass it to the AuditLogger.
    """
    return uuid4()
