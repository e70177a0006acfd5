"""Weekly summary - folds per-date counts into day-of-month week buckets.

Buckets depend only on the day of month (1-7, 8-14, 15-21, 22+), never on
the real weekday or the month the date falls in.

weekly_totals() is a single linear scan in the mapping's own order, not a
group-by: consecutive entries in the same bucket are summed, but a bucket
that shows up again after a different one starts a new, separate total.
Callers that want merged weeks must pass counts already in date order.
"""

from typing import Mapping

from habitcal.dates import parse_date
from habitcal.models import WeekTotal


def week_label(day_of_month: int) -> str:
    if day_of_month <= 7:
        return "Week 1"
    if day_of_month <= 14:
        return "Week 2"
    if day_of_month <= 21:
        return "Week 3"
    return "Week 4"


def weekly_totals(counts: Mapping[str, int]) -> list[WeekTotal]:
    """Scan `counts` (YYYY-MM-DD → completions) into week totals.

    Weeks whose running total is zero are left out.
    """
    weeks: list[WeekTotal] = []
    current_week: str | None = None
    habits_in_week = 0

    for date_key, habit_count in counts.items():
        week = week_label(parse_date(date_key).day)
        if week != current_week:
            if habits_in_week > 0:
                weeks.append(WeekTotal(current_week, habits_in_week))
            current_week = week
            habits_in_week = habit_count
        else:
            habits_in_week += habit_count

    if habits_in_week > 0:
        weeks.append(WeekTotal(current_week, habits_in_week))

    return weeks
