"""Completion ledger - per-date completion counts and the completed-dates set.

Only the habit store writes here. Entries keep insertion order because the
weekly summary scans them in that order.

Counts never go negative and a date whose count reaches zero is dropped,
so `counts` never holds a zero entry.
"""

import logging
from datetime import date
from types import MappingProxyType
from typing import Callable, Mapping

from habitcal.dates import format_date, local_today
from habitcal.errors import InconsistentState

log = logging.getLogger(__name__)


class CompletionLedger:
    """Mapping of YYYY-MM-DD → completions recorded that day."""

    def __init__(
        self,
        clock: Callable[[], date] = local_today,
        keep_today_while_counted: bool = False,
    ) -> None:
        self._clock = clock
        self._keep_while_counted = keep_today_while_counted
        self._counts: dict[str, int] = {}
        self._completed_dates: set[str] = set()

    # ── read side ─────────────────────────────────────────────

    @property
    def counts(self) -> Mapping[str, int]:
        """Read-only live view, in insertion order."""
        return MappingProxyType(self._counts)

    @property
    def completed_dates(self) -> frozenset[str]:
        return frozenset(self._completed_dates)

    def count_for(self, date_key: str) -> int:
        return self._counts.get(date_key, 0)

    def is_completed(self, date_key: str) -> bool:
        return date_key in self._completed_dates

    def today(self) -> date:
        return self._clock()

    def today_key(self) -> str:
        return format_date(self._clock())

    # ── write side ────────────────────────────────────────────

    def record_today(self, delta: int) -> str:
        """Record one completion (+1) or un-completion (-1) against today.

        Returns the date key that was touched.
        """
        date_key = self.today_key()
        self.record(date_key, delta)
        return date_key

    def record(self, date_key: str, delta: int, strict: bool = False) -> None:
        if delta not in (1, -1):
            raise ValueError(f"delta must be +1 or -1, got {delta!r}")

        if delta == 1:
            self._completed_dates.add(date_key)
            self._counts[date_key] = self._counts.get(date_key, 0) + 1
            log.debug("Ledger %s → %d", date_key, self._counts[date_key])
            return

        current = self._counts.get(date_key, 0)
        if current <= 0:
            if strict:
                raise InconsistentState(date_key, current, delta)
            log.warning(
                "Ledger for %s already at %d, clamping decrement to zero",
                date_key, current,
            )

        remaining = current - 1
        if remaining > 0:
            self._counts[date_key] = remaining
        else:
            self._counts.pop(date_key, None)

        if not self._keep_while_counted or remaining <= 0:
            self._completed_dates.discard(date_key)

        log.debug("Ledger %s → %d", date_key, max(remaining, 0))

    def clear(self) -> None:
        self._counts.clear()
        self._completed_dates.clear()
