"""Tests for chat command dispatch and text rendering."""

from datetime import date

import pytest

from habitcal.commands import HELP_TEXT, dispatch
from habitcal.render import render_calendar, render_header, render_screen, render_weekly
from habitcal.models import WeekTotal


class TestDispatch:
    def test_plain_text_adds(self, screen):
        result = dispatch(screen, "Drink water")
        assert result.success
        assert "Added: Drink water" in result.output
        assert screen.habits[0].name == "Drink water"

    def test_add_command(self, screen):
        result = dispatch(screen, "/add Read 10 min")
        assert result.success
        assert screen.habits[0].name == "Read 10 min"

    def test_add_without_name(self, screen):
        result = dispatch(screen, "/add")
        assert not result.success
        assert screen.total == 0

    def test_done_and_undo(self, screen):
        dispatch(screen, "Walk")
        result = dispatch(screen, "/done 1")
        assert result.success
        assert screen.habits[0].is_completed
        assert "Habits completed: 1 / 1" in result.output

        dispatch(screen, "/undo 1")
        assert not screen.habits[0].is_completed

    def test_bot_suffix_stripped(self, screen):
        dispatch(screen, "Walk")
        dispatch(screen, "/done@HabitBot 1")
        assert screen.habits[0].is_completed

    def test_out_of_range(self, screen):
        dispatch(screen, "Walk")
        result = dispatch(screen, "/done 2")
        assert not result.success
        assert "No habit #2" in result.output
        assert screen.completed_count == 0

    def test_zero_is_out_of_range(self, screen):
        dispatch(screen, "Walk")
        result = dispatch(screen, "/delete 0")
        assert not result.success
        assert screen.total == 1

    def test_non_numeric_position(self, screen):
        dispatch(screen, "Walk")
        result = dispatch(screen, "/delete first")
        assert not result.success
        assert "Need a habit number" in result.output

    def test_edit_flow(self, screen):
        dispatch(screen, "Raed")
        result = dispatch(screen, "/edit 1")
        assert "Editing 1. Raed" in result.output
        result = dispatch(screen, "Read")
        assert "Renamed to: Read" in result.output
        assert [h.name for h in screen.habits] == ["Read"]

    def test_cancel(self, screen):
        dispatch(screen, "A")
        dispatch(screen, "/edit 1")
        dispatch(screen, "/cancel")
        dispatch(screen, "B")
        assert [h.name for h in screen.habits] == ["A", "B"]

    def test_delete(self, screen):
        dispatch(screen, "A")
        dispatch(screen, "B")
        result = dispatch(screen, "/delete 1")
        assert "Deleted: A" in result.output
        assert [h.name for h in screen.habits] == ["B"]

    def test_week(self, screen):
        dispatch(screen, "A")
        dispatch(screen, "/done 1")
        result = dispatch(screen, "/week")
        assert "Week 1: 1 habits completed" in result.output

    def test_help_and_unknown(self, screen):
        assert dispatch(screen, "/help").output == HELP_TEXT
        result = dispatch(screen, "/frobnicate")
        assert not result.success
        assert "Unknown command" in result.output

    def test_list_on_empty(self, screen):
        result = dispatch(screen, "/list")
        assert "Habits completed: 0 / 0" in result.output
        assert "No habits yet" in result.output


class TestRender:
    def test_header(self, screen):
        dispatch(screen, "A")
        dispatch(screen, "B")
        dispatch(screen, "/done 2")
        assert render_header(screen) == "Habits completed: 1 / 2"

    def test_calendar_grid(self, screen):
        dispatch(screen, "A")
        dispatch(screen, "B")
        dispatch(screen, "/done 1")
        dispatch(screen, "/done 2")
        text = render_calendar(screen, date(2024, 3, 1))
        lines = text.splitlines()
        assert lines[0] == "March 2024"
        assert len(lines) == 1 + 5
        # day 5 of the first row is marked done with a count of 2
        assert " 5*2" in lines[1]
        assert lines[1].startswith(" 1")

    def test_weekly_empty(self):
        assert "Nothing completed yet." in render_weekly([])

    def test_weekly_lines(self):
        text = render_weekly([WeekTotal("Week 1", 2), WeekTotal("Week 3", 3)])
        assert text.splitlines()[1:] == [
            "Week 1: 2 habits completed",
            "Week 3: 3 habits completed",
        ]

    def test_screen_marks_editing(self, screen):
        dispatch(screen, "A")
        dispatch(screen, "/edit 1")
        assert "editing" in render_screen(screen)
