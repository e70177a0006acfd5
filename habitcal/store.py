"""Habit store - ordered habit list, sole writer of the completion ledger.

Habits are addressed by position (what a list UI shows) but each one also
carries a stable id, so callers holding on to a habit across other edits
can re-resolve its current position with index_of().

Listeners registered with subscribe() are called after every mutation that
actually changed state, as callback(event, habit). Events:
  "added" | "edited" | "deleted" | "completed" | "uncompleted"
"""

import itertools
import logging
from typing import Callable

from habitcal.errors import EmptyName, IndexOutOfRange, UnknownHabit
from habitcal.ledger import CompletionLedger
from habitcal.models import Habit

log = logging.getLogger(__name__)

Listener = Callable[[str, Habit], None]


def _is_blank(name: str | None) -> bool:
    return not name or not name.strip()


class HabitStore:

    def __init__(self, ledger: CompletionLedger | None = None) -> None:
        self.ledger = ledger if ledger is not None else CompletionLedger()
        self._habits: list[Habit] = []
        self._ids = itertools.count(1)
        self._listeners: list[Listener] = []

    # ── projections ───────────────────────────────────────────

    @property
    def habits(self) -> tuple[Habit, ...]:
        return tuple(self._habits)

    @property
    def total(self) -> int:
        return len(self._habits)

    @property
    def completed_count(self) -> int:
        return sum(1 for h in self._habits if h.is_completed)

    def __len__(self) -> int:
        return len(self._habits)

    def at(self, index: int) -> Habit:
        self._check_index(index)
        return self._habits[index]

    def get(self, habit_id: int) -> Habit:
        return self._habits[self.index_of(habit_id)]

    def index_of(self, habit_id: int) -> int:
        for i, habit in enumerate(self._habits):
            if habit.id == habit_id:
                return i
        raise UnknownHabit(habit_id)

    # ── subscription ──────────────────────────────────────────

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self, event: str, habit: Habit) -> None:
        for callback in list(self._listeners):
            try:
                callback(event, habit)
            except Exception as e:
                log.error("Store listener failed on %s: %s", event, e, exc_info=True)

    # ── mutations ─────────────────────────────────────────────

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or not 0 <= index < len(self._habits):
            raise IndexOutOfRange(index, len(self._habits))

    def add(self, name: str, strict: bool = False) -> Habit | None:
        """Append a new, not-yet-completed habit. Blank names are ignored."""
        if _is_blank(name):
            if strict:
                raise EmptyName()
            log.debug("Ignoring add with blank name")
            return None

        habit = Habit(id=next(self._ids), name=name)
        self._habits.append(habit)
        log.debug("Added habit #%d %r", habit.id, habit.name)
        self._notify("added", habit)
        return habit

    def edit(self, index: int, new_name: str, strict: bool = False) -> Habit | None:
        """Rename the habit at index, keeping its completion state."""
        if _is_blank(new_name):
            if strict:
                raise EmptyName()
            log.debug("Ignoring edit with blank name")
            return None
        self._check_index(index)

        habit = self._habits[index]
        habit.name = new_name
        log.debug("Renamed habit #%d to %r", habit.id, new_name)
        self._notify("edited", habit)
        return habit

    def delete(self, index: int) -> Habit:
        """Remove the habit at index. Later habits shift down by one.

        Ledger counts already recorded for the habit are left in place.
        """
        self._check_index(index)
        habit = self._habits.pop(index)
        log.debug("Deleted habit #%d %r", habit.id, habit.name)
        self._notify("deleted", habit)
        return habit

    def set_completion(self, index: int, completed: bool) -> Habit:
        """Set today's completion flag; the only path that writes the ledger.

        Setting the flag to the value it already has changes nothing.
        """
        self._check_index(index)
        habit = self._habits[index]
        completed = bool(completed)
        if habit.is_completed == completed:
            return habit

        habit.is_completed = completed
        if completed:
            date_key = self.ledger.record_today(1)
            if date_key not in habit.completed_dates:
                habit.completed_dates.append(date_key)
        else:
            date_key = self.ledger.record_today(-1)
            if date_key in habit.completed_dates:
                habit.completed_dates.remove(date_key)

        self._notify("completed" if completed else "uncompleted", habit)
        return habit
