"""Month view - expands a calendar month into annotated day cells."""

import calendar
from datetime import date

from habitcal.dates import format_date
from habitcal.ledger import CompletionLedger
from habitcal.models import DayCell


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_days(reference_date: date, ledger: CompletionLedger) -> list[DayCell]:
    """One cell per day of the month containing reference_date.

    Built fresh on every call from the ledger's current state.
    """
    year, month = reference_date.year, reference_date.month
    cells = []
    for day in range(1, days_in_month(year, month) + 1):
        date_key = format_date(date(year, month, day))
        cells.append(DayCell(
            day_number=day,
            date_key=date_key,
            is_completed=ledger.is_completed(date_key),
            habit_count=ledger.count_for(date_key),
        ))
    return cells


def month_rows(cells: list[DayCell], columns: int = 7) -> list[list[DayCell]]:
    """Chunk cells into display rows. Day 1 always opens the first row."""
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")
    return [cells[i:i + columns] for i in range(0, len(cells), columns)]
