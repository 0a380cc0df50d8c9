"""
Abstract Storage Interface

The ledger only needs two operations from a backing store: write a sequence
of encoded lines, and read them back in order.

There is no locking or append mode. save always fully overwrites.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from os import PathLike
from typing import Optional, TextIO, Union


# A named resource: a filesystem path or an already-open text stream.
Resource = Union[str, PathLike, TextIO]


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger persistence.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def save(self, lines: Iterable[str], destination: Resource) -> int:
        """
        Write each line followed by a line terminator, overwriting any
        existing content.

        Args:
            lines: Encoded records in ledger order
            destination: Where to write them

        Returns:
            Number of lines written

        Raises:
            PersistenceError: If the destination cannot be opened or written
        """
        pass

    @abstractmethod
    def load(self, source: Resource) -> list[str]:
        """
        Read the resource line by line, preserving order.

        Args:
            source: Where to read from

        Returns:
            The lines without their terminators

        Raises:
            PersistenceError: If the source cannot be opened or read
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class PersistenceError(StorageError):
    """
    The backing resource could not be opened, read or written.

    The underlying I/O error is kept on ``cause`` (and chained as
    ``__cause__``).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
