"""Plain data types shared by the store, ledger and projections."""

from dataclasses import dataclass, field


@dataclass
class Habit:
    """A user-defined recurring task.

    `is_completed` is today's toggle only. `completed_dates` keeps the
    per-habit history of days it was checked off; aggregation never reads it.
    """
    id: int
    name: str
    is_completed: bool = False
    completed_dates: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DayCell:
    """One calendar day as the month grid shows it."""
    day_number: int
    date_key: str           # YYYY-MM-DD
    is_completed: bool = False
    habit_count: int = 0


@dataclass(frozen=True)
class WeekTotal:
    label: str              # "Week 1" .. "Week 4"
    total: int
