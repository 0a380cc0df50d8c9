"""Report rendering package."""

from src.reports.summary import format_amount, format_monthly_summary

__all__ = ["format_amount", "format_monthly_summary"]
