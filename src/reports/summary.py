"""Console rendering of monthly summaries."""

from decimal import ROUND_HALF_UP, Decimal

from src.models.transaction import MonthlySummary


KEY_WIDTH = 20
CENTS = Decimal("0.01")


def format_amount(value: Decimal) -> str:
    """Two-decimal rendering used throughout the reports, halves rounded away from zero."""
    return format(value.quantize(CENTS, rounding=ROUND_HALF_UP), "f")


def format_monthly_summary(summary: MonthlySummary) -> list[str]:
    """
    Render a summary as report lines:

        Summary for 2024-07:
          Total Income : 5000.00
          Total Expense: 42.50
          Net Balance  : 4957.50

          Breakdown by category:
            EXPENSE / Food       : 42.50
    """
    lines = [
        f"Summary for {summary.period}:",
        f"  Total Income : {format_amount(summary.total_income)}",
        f"  Total Expense: {format_amount(summary.total_expense)}",
        f"  Net Balance  : {format_amount(summary.net)}",
        "",
        "  Breakdown by category:",
    ]
    for key, amount in summary.breakdown.items():
        lines.append(f"    {key:<{KEY_WIDTH}} : {format_amount(amount)}")
    return lines
