"""Chat commands - turns message text into screen input events.

Any transport can feed text here; the reply is plain text ready to send.
Habit numbers in commands are the 1-based positions shown by /list.

    plain text, /add <name>   add a habit (or save the pending edit)
    /done <n>, /undo <n>      check / uncheck habit n for today
    /edit <n>                 next text renames habit n
    /cancel                   leave edit mode
    /delete <n>               remove habit n
    /list                     the whole screen
    /calendar                 this month's grid
    /week                     weekly progress
"""

import logging
from dataclasses import dataclass

from habitcal.errors import HabitError, IndexOutOfRange
from habitcal.render import render_calendar, render_screen, render_weekly
from habitcal.screen import HabitScreen

log = logging.getLogger(__name__)

HELP_TEXT = (
    "Send any text to add it as a habit.\n\n"
    "Commands:\n"
    "/list - Habits, calendar and weekly progress\n"
    "/done <n> - Mark habit n done today\n"
    "/undo <n> - Unmark habit n\n"
    "/edit <n> - Rename habit n (send the new name next)\n"
    "/cancel - Stop editing\n"
    "/delete <n> - Remove habit n\n"
    "/calendar - This month\n"
    "/week - Weekly progress"
)


@dataclass
class CommandResult:
    """Reply text plus whether the command did what was asked."""
    output: str = ""
    success: bool = True


def _split(text: str) -> tuple[str, str]:
    """'/done@MyBot 2' → ('done', '2'); plain text → ('', text)."""
    text = text.strip()
    if not text.startswith("/"):
        return "", text
    head, _, rest = text.partition(" ")
    name = head[1:].split("@", 1)[0].lower()
    return name, rest.strip()


def _position(arg: str) -> int | None:
    """1-based habit number → 0-based index, or None if not a number."""
    try:
        return int(arg) - 1
    except ValueError:
        return None


def dispatch(screen: HabitScreen, text: str) -> CommandResult:
    """Run one message against the screen and render the reply."""
    name, arg = _split(text or "")
    log.debug("Command %r arg=%r", name or "text", arg)
    try:
        return _run(screen, name, arg)
    except IndexOutOfRange as e:
        return CommandResult(output=f"No habit #{e.index + 1}. Send /list to see the numbers.", success=False)
    except HabitError as e:
        log.info("Command %s rejected: %s", name or "text", e)
        return CommandResult(output=str(e), success=False)


def _run(screen: HabitScreen, name: str, arg: str) -> CommandResult:
    if name in ("", "add"):
        if not arg.strip():
            return CommandResult(output="Need a habit name.", success=False)
        was_editing = screen.editing is not None
        habit = screen.add_or_save_habit(arg)
        verb = "Renamed to" if was_editing else "Added"
        return CommandResult(output=f"{verb}: {habit.name}\n\n{render_screen(screen)}")

    if name in ("list", "start"):
        return CommandResult(output=render_screen(screen))

    if name == "help":
        return CommandResult(output=HELP_TEXT)

    if name == "calendar":
        return CommandResult(output=render_calendar(screen))

    if name == "week":
        return CommandResult(output=render_weekly(screen.weekly_totals()))

    if name == "cancel":
        screen.cancel_edit()
        return CommandResult(output="Edit cancelled.")

    if name in ("done", "undo", "edit", "delete"):
        index = _position(arg)
        if index is None:
            return CommandResult(output=f"Need a habit number, e.g. /{name} 1", success=False)

        if name == "edit":
            habit = screen.start_edit(index)
            return CommandResult(output=f"Editing {index + 1}. {habit.name} - send the new name.")

        if name == "delete":
            habit = screen.delete_habit(index)
            return CommandResult(output=f"Deleted: {habit.name}\n\n{render_screen(screen)}")

        screen.toggle_habit(index, name == "done")
        return CommandResult(output=render_screen(screen))

    return CommandResult(output=f"Unknown command: /{name}\n\n{HELP_TEXT}", success=False)
