"""
Personal Ledger - Source Package

A small personal finance ledger: record dated income and expense entries,
keep them in a flat text file, and view monthly summaries.

DESIGN PRINCIPLES:
1. Transactions are immutable once built
2. Bad records are skipped and reported, never fatal
3. No silent corrections
4. Every step is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Personal Ledger Team"
