"""
Flat Text File Storage Implementation

One record per line, UTF-8 by default, "\\n" line terminator:

    2024-07-15,INCOME,Salary,5000.00,July salary

File handles are opened immediately before the read or write and closed on
every exit path. A caller-provided stream is used as-is and left open.

If a write fails part-way, the target file's state is undefined. The
in-memory ledger is never touched by this module.
"""

import os
from collections.abc import Iterable
from typing import Optional

from src.config import get_settings
from src.services.storage.interface import (
    LedgerStorageInterface,
    PersistenceError,
    Resource,
)


LINE_TERMINATOR = "\n"


def describe_resource(resource: Resource) -> str:
    """Human-readable name for a path or stream."""
    if isinstance(resource, (str, os.PathLike)):
        return os.fspath(resource)
    return getattr(resource, "name", None) or type(resource).__name__


class TextFileStore(LedgerStorageInterface):
    """
    Line-oriented persistence for encoded ledger records.

    Paths are opened with the configured encoding. Streams (anything with
    write()/read methods) are used directly.
    """

    def __init__(self, encoding: Optional[str] = None):
        self._encoding = encoding or get_settings().storage.encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def save(self, lines: Iterable[str], destination: Resource) -> int:
        """Overwrite the destination with one line per record."""
        name = describe_resource(destination)
        try:
            if isinstance(destination, (str, os.PathLike)):
                with open(destination, "w", encoding=self._encoding, newline="") as handle:
                    return self._write_lines(handle, lines)
            return self._write_lines(destination, lines)
        except (OSError, UnicodeError) as e:
            raise PersistenceError(f"Failed to save ledger to {name}: {e}", cause=e) from e

    def load(self, source: Resource) -> list[str]:
        """Read all lines in order, without terminators."""
        name = describe_resource(source)
        try:
            if isinstance(source, (str, os.PathLike)):
                with open(source, "r", encoding=self._encoding) as handle:
                    return self._read_lines(handle)
            return self._read_lines(source)
        except (OSError, UnicodeError) as e:
            raise PersistenceError(f"Failed to load ledger from {name}: {e}", cause=e) from e

    @staticmethod
    def _write_lines(handle, lines: Iterable[str]) -> int:
        count = 0
        for line in lines:
            handle.write(line)
            handle.write(LINE_TERMINATOR)
            count += 1
        handle.flush()
        return count

    @staticmethod
    def _read_lines(handle) -> list[str]:
        # Universal newlines have already folded \r\n and \r into \n for
        # files; streams may still carry them.
        return [line.rstrip("\r\n") for line in handle]
