"""Plain-text rendering of the habit screen.

Each section renders independently so transports can send just the piece
a command asked for. Output is monospace-friendly: calendar cells are fixed
width so the grid lines up in a code block or terminal.
"""

from datetime import date

from habitcal import config
from habitcal.models import DayCell, WeekTotal
from habitcal.month_view import month_rows
from habitcal.screen import HabitScreen

DONE_MARK = "✅"
TODO_MARK = "⬜"


def render_header(screen: HabitScreen) -> str:
    return f"Habits completed: {screen.completed_count} / {screen.total}"


def render_habits(screen: HabitScreen) -> str:
    if not screen.habits:
        return "No habits yet. Send a name to add one."
    editing = screen.editing
    lines = []
    for i, habit in enumerate(screen.habits, start=1):
        mark = DONE_MARK if habit.is_completed else TODO_MARK
        suffix = "  ✏️ editing" if editing is not None and habit.id == editing.id else ""
        lines.append(f"{mark} {i}. {habit.name}{suffix}")
    return "\n".join(lines)


def _cell(cell: DayCell) -> str:
    # " 5*2 " - day, completed marker, count when non-zero
    mark = "*" if cell.is_completed else " "
    count = str(cell.habit_count) if cell.habit_count > 0 else ""
    return f"{cell.day_number:>2}{mark}{count:<2}"


def render_calendar(screen: HabitScreen, reference_date: date | None = None) -> str:
    cells = screen.month_days(reference_date)
    ref = reference_date or screen.store.ledger.today()
    title = ref.strftime("%B %Y")
    rows = month_rows(cells, config.CALENDAR_COLUMNS)
    body = "\n".join(" ".join(_cell(c) for c in row).rstrip() for row in rows)
    return f"{title}\n{body}"


def render_weekly(totals: list[WeekTotal]) -> str:
    lines = ["Weekly progress"]
    if not totals:
        lines.append("Nothing completed yet.")
    for week in totals:
        lines.append(f"{week.label}: {week.total} habits completed")
    return "\n".join(lines)


def render_screen(screen: HabitScreen, reference_date: date | None = None) -> str:
    """The whole screen, top to bottom, in display order."""
    parts = [
        render_header(screen),
        render_habits(screen),
        render_calendar(screen, reference_date),
        render_weekly(screen.weekly_totals()),
    ]
    return "\n\n".join(parts)
