"""Habit screen - the single-screen controller a UI binds to.

Holds the screen state that lives beside the store: the text in the input
box and which habit (if any) is being edited. Input events mirror the
screen's buttons; output projections are what it renders after each one.

The habit being edited is tracked by id, not position. Deleting it ends
edit mode; deleting some other habit leaves the edit pointed at the right
one.
"""

import logging
from datetime import date

from habitcal import config
from habitcal.ledger import CompletionLedger
from habitcal.models import DayCell, Habit, WeekTotal
from habitcal.month_view import month_days
from habitcal.store import HabitStore
from habitcal.weekly import weekly_totals

log = logging.getLogger(__name__)


class HabitScreen:

    def __init__(self, store: HabitStore | None = None) -> None:
        if store is None:
            store = HabitStore(CompletionLedger(
                keep_today_while_counted=config.KEEP_TODAY_WHILE_COUNTED,
            ))
        self.store = store
        self.input_text = ""
        self._editing_id: int | None = None
        self._unsubscribe = store.subscribe(self._on_store_change)

    def close(self) -> None:
        """Detach from the store."""
        self._unsubscribe()

    def _on_store_change(self, event: str, habit: Habit) -> None:
        if event == "deleted" and habit.id == self._editing_id:
            log.debug("Habit #%d deleted while being edited, leaving edit mode", habit.id)
            self._editing_id = None

    # ── input events ──────────────────────────────────────────

    def add_or_save_habit(self, text: str) -> Habit | None:
        """Submit the input box: rename the habit being edited, or add one."""
        self.input_text = text
        if not text:
            return None

        if self._editing_id is not None:
            index = self.store.index_of(self._editing_id)
            habit = self.store.edit(index, text)
            if habit is not None:
                self._editing_id = None
        else:
            habit = self.store.add(text)

        if habit is not None:
            self.input_text = ""
        return habit

    def toggle_habit(self, index: int, checked: bool) -> Habit:
        return self.store.set_completion(index, checked)

    def start_edit(self, index: int) -> Habit:
        habit = self.store.at(index)
        self.input_text = ""
        self._editing_id = habit.id
        return habit

    def cancel_edit(self) -> None:
        self._editing_id = None
        self.input_text = ""

    def delete_habit(self, index: int) -> Habit:
        return self.store.delete(index)

    # ── output projections ────────────────────────────────────

    @property
    def habits(self) -> tuple[Habit, ...]:
        return self.store.habits

    @property
    def completed_count(self) -> int:
        return self.store.completed_count

    @property
    def total(self) -> int:
        return self.store.total

    @property
    def editing(self) -> Habit | None:
        if self._editing_id is None:
            return None
        return self.store.get(self._editing_id)

    def month_days(self, reference_date: date | None = None) -> list[DayCell]:
        if reference_date is None:
            reference_date = self.store.ledger.today()
        return month_days(reference_date, self.store.ledger)

    def weekly_totals(self) -> list[WeekTotal]:
        return weekly_totals(self.store.ledger.counts)
