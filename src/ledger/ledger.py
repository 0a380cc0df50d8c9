"""
In-Memory Ledger

The ledger is an ordered, append-only sequence of transactions. Order
reflects entry order, not date order. Duplicates are allowed and each one
is a distinct entry.

Aggregation is DETERMINISTIC: summarize() only ever reports sums over the
stored transactions, and a month with no entries yields zero totals rather
than an error.
"""

from collections.abc import Iterable, Iterator
from decimal import Decimal

import structlog

from src.models.transaction import (
    LoadResult,
    MalformedRecord,
    MonthlySummary,
    RejectedRecord,
    Transaction,
    TransactionKind,
)


logger = structlog.get_logger(__name__)


class Ledger:
    """
    Ordered collection of transactions for the current session.

    There is no deletion primitive. A future extension that needs one
    should give each entry a stable identifier instead of relying on
    positions.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: list[Transaction] = list(transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only view in entry order."""
        return tuple(self._transactions)

    def add(self, transaction: Transaction) -> None:
        """Append a transaction. Validation already happened at construction."""
        self._transactions.append(transaction)

    def load_all(self, lines: Iterable[str]) -> LoadResult:
        """
        Decode each line and append the ones that decode cleanly.

        A line that fails to decode is recorded as rejected and processing
        continues with the next one. There is no rollback: lines decoded
        before a rejection stay loaded.

        Returns:
            LoadResult with the number of loaded transactions and the
            rejected raw lines in their original order
        """
        loaded_count = 0
        rejections: list[RejectedRecord] = []

        for line in lines:
            try:
                transaction = Transaction.decode(line)
            except MalformedRecord as e:
                logger.debug("record_skipped", reason=e.reason)
                rejections.append(RejectedRecord(line=line, reason=e.reason))
                continue

            self._transactions.append(transaction)
            loaded_count += 1

        return LoadResult(loaded_count=loaded_count, rejections=rejections)

    def summarize(self, year: int, month: int) -> MonthlySummary:
        """
        Aggregate the transactions dated in the given calendar month.

        Only the year and month of each date are compared; the day is
        ignored.
        """
        total_income = Decimal("0")
        total_expense = Decimal("0")
        totals: dict[str, Decimal] = {}
        count = 0

        for transaction in self._transactions:
            if transaction.date.year != year or transaction.date.month != month:
                continue

            count += 1
            if transaction.kind == TransactionKind.INCOME:
                total_income += transaction.amount
            else:
                total_expense += transaction.amount

            key = transaction.composite_key
            totals[key] = totals.get(key, Decimal("0")) + transaction.amount

        return MonthlySummary(
            year=year,
            month=month,
            total_income=total_income,
            total_expense=total_expense,
            breakdown=dict(sorted(totals.items())),
            transaction_count=count,
        )

    def encode_all(self) -> list[str]:
        """Encode every transaction, in ledger order."""
        return [transaction.encode() for transaction in self._transactions]
