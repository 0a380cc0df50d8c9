"""
Main Orchestrator for the Personal Ledger

Ties the ledger, the storage adapter and the audit logger together and
defines the end-to-end flows the shell drives:
1. Load (file → lines → ledger, skipping malformed lines)
2. Add (validated transaction → ledger)
3. Summarize (ledger → monthly summary)
4. Save (ledger → encoded lines → file)

The session owns the single Ledger instance. Storage only borrows the
encoded lines for the duration of one call. Every step is audited.
"""

from typing import Optional

from src.audit import AuditLogger
from src.config import Settings, get_settings
from src.ledger import Ledger
from src.models.transaction import LoadResult, MonthlySummary, Transaction
from src.services.storage import (
    LedgerStorageInterface,
    PersistenceError,
    Resource,
    TextFileStore,
    describe_resource,
)


class LedgerSession:
    """
    One interactive session over one ledger.

    Load and save failures are audited and re-raised as PersistenceError.
    The ledger is left exactly as it was before the failing call.
    """

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        store: Optional[LedgerStorageInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._ledger = ledger if ledger is not None else Ledger()
        self._store = store or TextFileStore()
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    def load(self, source: Resource) -> LoadResult:
        """
        Load every decodable line from source into the ledger.

        Raises:
            PersistenceError: If the source cannot be opened or read. The
                ledger is unchanged in that case.
        """
        name = describe_resource(source)
        try:
            lines = self._store.load(source)
        except PersistenceError as e:
            self._audit_logger.log_load_failed(source=name, error_message=str(e))
            raise

        result = self._ledger.load_all(lines)

        for rejection in result.rejections:
            self._audit_logger.log_record_rejected(
                source=name,
                line=rejection.line,
                reason=rejection.reason,
            )
        self._audit_logger.log_ledger_loaded(
            source=name,
            loaded_count=result.loaded_count,
            rejected_count=result.rejected_count,
        )
        return result

    def add(self, transaction: Transaction) -> None:
        """Append a transaction to the ledger."""
        self._ledger.add(transaction)
        self._audit_logger.log_transaction_added(transaction)

    def summarize(self, year: int, month: int) -> MonthlySummary:
        """Summarize one calendar month."""
        summary = self._ledger.summarize(year, month)
        self._audit_logger.log_summary_generated(
            period=summary.period,
            transaction_count=summary.transaction_count,
        )
        return summary

    def save(self, destination: Resource) -> int:
        """
        Overwrite destination with the encoded ledger.

        Returns:
            Number of records written

        Raises:
            PersistenceError: If the destination cannot be opened or
                written. The in-memory ledger is unaffected.
        """
        name = describe_resource(destination)
        try:
            count = self._store.save(self._ledger.encode_all(), destination)
        except PersistenceError as e:
            self._audit_logger.log_save_failed(destination=name, error_message=str(e))
            raise

        self._audit_logger.log_ledger_saved(destination=name, record_count=count)
        return count


def create_session(settings: Optional[Settings] = None) -> LedgerSession:
    """
    Factory function to create the default session wiring.

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        A session with an empty ledger, a text file store and a fresh
        audit logger.
    """
    settings = settings or get_settings()
    return LedgerSession(
        ledger=Ledger(),
        store=TextFileStore(encoding=settings.storage.encoding),
        audit_logger=AuditLogger(),
    )
