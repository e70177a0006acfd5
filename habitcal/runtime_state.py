"""Runtime state - in-memory habit screens, one per chat.

Not persisted. Resets on restart.
"""

import logging
from threading import Lock

from habitcal.screen import HabitScreen

log = logging.getLogger(__name__)

_lock = Lock()
_screens: dict[int, HabitScreen] = {}


def get_screen(chat_id: int) -> HabitScreen:
    """Return the chat's screen, creating an empty one on first use."""
    with _lock:
        screen = _screens.get(chat_id)
        if screen is None:
            screen = HabitScreen()
            _screens[chat_id] = screen
            log.info("New habit screen for chat %d", chat_id)
        return screen


def drop_screen(chat_id: int) -> None:
    with _lock:
        screen = _screens.pop(chat_id, None)
    if screen is not None:
        screen.close()


def clear_all() -> None:
    with _lock:
        screens = list(_screens.values())
        _screens.clear()
    for screen in screens:
        screen.close()
