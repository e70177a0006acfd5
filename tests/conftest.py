"""Shared fixtures: a store whose "today" is pinned."""

from datetime import date

import pytest

from habitcal.ledger import CompletionLedger
from habitcal.screen import HabitScreen
from habitcal.store import HabitStore

TODAY = date(2024, 3, 5)
TODAY_KEY = "2024-03-05"


@pytest.fixture
def ledger():
    return CompletionLedger(clock=lambda: TODAY)


@pytest.fixture
def store(ledger):
    return HabitStore(ledger)


@pytest.fixture
def screen(store):
    s = HabitScreen(store)
    yield s
    s.close()
