"""
Storage Services Package

Provides the abstract storage interface and the flat text file
implementation used to persist the ledger.
"""

from src.services.storage.interface import (
    LedgerStorageInterface,
    PersistenceError,
    Resource,
    StorageError,
)
from src.services.storage.text_store import (
    TextFileStore,
    describe_resource,
)

__all__ = [
    # Interfaces
    "LedgerStorageInterface",
    "Resource",
    # Exceptions
    "PersistenceError",
    "StorageError",
    # Text file implementation
    "TextFileStore",
    "describe_resource",
]
