"""Error taxonomy for the habit core.

Every error here is recoverable: it aborts a single operation and leaves
store and ledger state untouched. Callers at the command boundary catch
HabitError and turn it into a user-facing message.
"""


class HabitError(Exception):
    """Base class for all habit core errors."""


class ValidationError(HabitError):
    """Input rejected before any state was touched."""


class EmptyName(ValidationError):
    def __init__(self) -> None:
        super().__init__("Habit name must not be empty")


class IndexOutOfRange(HabitError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"No habit at position {index} (have {size})")
        self.index = index
        self.size = size


class UnknownHabit(HabitError):
    def __init__(self, habit_id: int) -> None:
        super().__init__(f"Unknown habit id {habit_id}")
        self.habit_id = habit_id


class InconsistentState(HabitError):
    """Ledger asked to go below zero for a date."""

    def __init__(self, date_key: str, current: int, delta: int) -> None:
        super().__init__(
            f"Ledger count for {date_key} would drop below zero "
            f"({current} {delta:+d})"
        )
        self.date_key = date_key
        self.current = current
        self.delta = delta
