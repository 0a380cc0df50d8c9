"""
Console Shell for the Personal Ledger

This is the interactive front end a user runs from a terminal:

    personal-ledger [LEDGER_FILE]

DESIGN PRINCIPLES:
1. Simple numbered menu
2. Invalid input is explained and asked again, never a crash
3. Nothing is written to disk until the user picks "Save & Exit"
4. Exit proceeds even when the save fails; the message is advisory

The shell owns the LedgerSession and only talks to the ledger through it.
"""

import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Optional, TypeVar

import typer

from src.audit import configure_logging
from src.config import get_settings
from src.models.transaction import Transaction
from src.orchestrator import LedgerSession, create_session
from src.reports import format_monthly_summary
from src.services.storage import PersistenceError
from src.validation import InputValidator, InvalidInputError


T = TypeVar("T")

MENU = "1) Add Transaction   2) Monthly Summary   3) Save & Exit"


class MenuAction(str, Enum):
    """The complete set of menu commands."""
    ADD_TRANSACTION = "1"
    MONTHLY_SUMMARY = "2"
    SAVE_AND_EXIT = "3"


def _print_err(message: str) -> None:
    print(message, file=sys.stderr)


class LedgerShell:
    """
    Menu loop over a LedgerSession.

    Dispatch is a mapping from MenuAction value to handler. Each handler
    returns True to keep the loop running and False to stop.
    """

    def __init__(
        self,
        session: LedgerSession,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], Any] = print,
        echo_err: Callable[[str], Any] = _print_err,
        validator: Optional[InputValidator] = None,
    ):
        self._session = session
        self._prompt = prompt
        self._echo = echo
        self._echo_err = echo_err
        self._validator = validator or InputValidator()
        self._loaded_from: Optional[str] = None
        self._handlers: dict[str, Callable[[], bool]] = {
            MenuAction.ADD_TRANSACTION.value: self.add_transaction,
            MenuAction.MONTHLY_SUMMARY.value: self.show_monthly_summary,
            MenuAction.SAVE_AND_EXIT.value: self.save_and_exit,
        }

    def load_startup_file(self, path: str) -> None:
        """Load a ledger file, reporting rejected lines and load failures."""
        try:
            result = self._session.load(path)
        except PersistenceError as e:
            self._echo_err(f"Could not load file: {e.cause or e}")
            return

        for line in result.rejected_lines:
            self._echo_err(f"Skipping bad line: {line}")
        self._loaded_from = path
        self._echo(f"Loaded {result.loaded_count} transactions from {path}")

    def run(self) -> None:
        """Show the menu until the user saves and exits or input ends."""
        try:
            while True:
                self._echo("")
                self._echo(MENU)
                choice = self._prompt("Choose an option: ").strip()
                handler = self._handlers.get(choice, self._unknown_choice)
                if not handler():
                    return
        except EOFError:
            self._echo("")
            self._echo("Input closed; exiting without saving.")

    def add_transaction(self) -> bool:
        entry_date = self._ask("Enter date (YYYY-MM-DD): ", self._validator.parse_date)
        kind = self._ask("Type (income/expense): ", self._validator.parse_kind)
        category = self._ask(
            "Category (e.g. Salary, Food, Rent, Travel): ",
            self._validator.parse_category,
        )
        amount = self._ask("Amount: ", self._validator.parse_amount)
        note = self._ask("Note (optional): ", self._validator.parse_note)

        self._session.add(Transaction(
            date=entry_date,
            kind=kind,
            category=category,
            amount=amount,
            note=note,
        ))
        self._echo("✅ Added!")
        return True

    def show_monthly_summary(self) -> bool:
        year, month = self._ask(
            "Enter month to view (YYYY-MM): ",
            self._validator.parse_period,
        )
        summary = self._session.summarize(year, month)
        self._echo("")
        for line in format_monthly_summary(summary):
            self._echo(line)
        return True

    def save_and_exit(self) -> bool:
        fname = self._prompt("Enter filename to save CSV to: ").strip()
        if not fname and self._loaded_from:
            fname = self._loaded_from
        try:
            self._session.save(fname)
        except PersistenceError as e:
            self._echo_err(f"❌ Error saving: {e.cause or e}")
        else:
            self._echo(f"✅ Saved to {fname}")
        return False

    def _unknown_choice(self) -> bool:
        self._echo("Invalid, try again.")
        return True

    def _ask(self, label: str, parse: Callable[[str], T]) -> T:
        """Prompt until parse accepts the answer."""
        while True:
            raw = self._prompt(label)
            try:
                return parse(raw)
            except InvalidInputError as e:
                self._session.audit_logger.log_input_rejected(
                    field=e.issue.field,
                    message=e.issue.message,
                )
                self._echo(f"⚠️ {e.issue.message}")


cli = typer.Typer(
    add_completion=False,
    help="Record income and expenses and view monthly summaries.",
)


@cli.command()
def main(
    ledger_file: Annotated[
        Optional[Path],
        typer.Argument(help="Ledger file to load at startup."),
    ] = None,
) -> None:
    """Start the interactive ledger."""
    settings = get_settings()
    configure_logging(
        level=settings.effective_log_level,
        renderer=settings.logging.renderer,
    )

    session = create_session(settings)
    shell = LedgerShell(session)

    startup_file = str(ledger_file) if ledger_file else settings.storage.default_file
    if startup_file:
        shell.load_startup_file(startup_file)

    shell.run()


if __name__ == "__main__":
    cli()
