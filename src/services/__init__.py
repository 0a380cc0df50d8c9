"""Services package."""

from src.services.storage import (
    LedgerStorageInterface,
    PersistenceError,
    StorageError,
    TextFileStore,
)

__all__ = [
    # Storage services
    "LedgerStorageInterface",
    "PersistenceError",
    "StorageError",
    "TextFileStore",
]
