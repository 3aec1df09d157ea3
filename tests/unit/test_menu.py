"""Unit tests for the interactive chore menu."""
import json
from datetime import date, timedelta

import pytest

from chore_tracker.interactive.menu import ChoreMenu
from chore_tracker.repositories.file import FileChoreRepository
from chore_tracker.services.chore_service import ChoreService

TODAY = date(2026, 10, 19)


def scripted(answers):
    it = iter(answers)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


@pytest.fixture
def chores_file(tmp_path):
    return tmp_path / "chores.json"


def make_menu(chores_file, answers, output):
    service = ChoreService(FileChoreRepository(chores_file), today=lambda: TODAY)
    return ChoreMenu(service, input_fn=scripted(answers), output_fn=output.append)


def test_add_toggle_and_quit_saves(chores_file):
    output = []
    deadline = (TODAY + timedelta(days=1)).isoformat()
    menu = make_menu(chores_file, [
        "2", "Water plants", deadline,
        "3", "Water plants", deadline,
        "0",
    ], output)

    assert menu.run() == 0
    assert json.loads(chores_file.read_text(encoding="utf-8")) == [
        {"description": "Water plants", "done": True, "deadline": deadline}
    ]


def test_errors_are_reported_and_loop_continues(chores_file):
    output = []
    menu = make_menu(chores_file, [
        "4", "Nothing", TODAY.isoformat(),
        "9",
        "1", "",
        "q",
    ], output)

    assert menu.run() == 0
    assert "Error: Unable to remove a chore from an empty list" in output
    assert "Unknown option '9'" in output
    assert "No chores found." in output


def test_invalid_date_is_rejected(chores_file):
    output = []
    menu = make_menu(chores_file, ["2", "Chore", "someday", "0"], output)

    assert menu.run() == 0
    assert "Invalid date: 'someday'" in output
    assert any(line.startswith("Error: The deadline") for line in output)


def test_end_of_input_saves_and_exits(chores_file):
    output = []
    menu = make_menu(chores_file, [], output)

    assert menu.run() == 0
    assert json.loads(chores_file.read_text(encoding="utf-8")) == []


def test_failed_save_returns_one(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    output = []
    menu = make_menu(blocker / "chores.json", ["0"], output)

    assert menu.run() == 1
    assert "Could not save chores, see log for details" in output


def test_end_of_input_inside_prompt_saves_and_exits(chores_file):
    """Test that input ending mid-add still saves the chores entered so far."""
    output = []
    deadline = (TODAY + timedelta(days=1)).isoformat()
    menu = make_menu(chores_file, ["2", "Water", deadline, "2", "Second"], output)

    assert menu.run() == 0
    assert json.loads(chores_file.read_text(encoding="utf-8")) == [
        {"description": "Water", "done": False, "deadline": deadline}
    ]


def test_interrupt_inside_prompt_saves_and_exits(chores_file):
    """Test that Ctrl-C inside a prompt saves instead of raising."""
    deadline = (TODAY + timedelta(days=1)).isoformat()
    answers = iter(["2", "Water", deadline, "3"])

    def _input(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise KeyboardInterrupt

    service = ChoreService(FileChoreRepository(chores_file), today=lambda: TODAY)
    menu = ChoreMenu(service, input_fn=_input, output_fn=[].append)

    assert menu.run() == 0
    assert [c["description"] for c in json.loads(chores_file.read_text(encoding="utf-8"))] == ["Water"]
