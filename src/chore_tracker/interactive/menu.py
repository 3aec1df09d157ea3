"""
Interactive chore menu.

A numbered terminal menu over ChoreService. Input and output are injectable
so the loop can be driven by scripted answers.
"""

import logging
from datetime import date
from typing import Callable, Optional

from chore_tracker.domain.chore import ChoreFilter
from chore_tracker.exceptions import ChoreError
from chore_tracker.services.chore_service import ChoreService

logger = logging.getLogger(__name__)


MENU_OPTIONS = [
    ("1", "List chores"),
    ("2", "Add chore"),
    ("3", "Toggle chore"),
    ("4", "Delete chore"),
    ("5", "Save chores"),
    ("0", "Save and quit"),
]


class ChoreMenu:
    """Terminal menu loop for managing chores."""

    def __init__(
        self,
        service: ChoreService,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.service = service
        self.input_fn = input_fn
        self.output_fn = output_fn

    def _ask(self, prompt: str) -> str:
        return self.input_fn(prompt).strip()

    def _ask_deadline(self) -> Optional[date]:
        raw = self._ask("Deadline (YYYY-MM-DD): ")
        try:
            return date.fromisoformat(raw)
        except ValueError:
            self.output_fn(f"Invalid date: '{raw}'")
            return None

    def show_menu(self) -> str:
        self.output_fn("\nOptions:")
        for key, label in MENU_OPTIONS:
            self.output_fn(f"  [{key}] {label}")
        return self._ask("\nYour choice: ").lower()

    def _handle_list(self) -> None:
        raw = self._ask("Filter (all/completed/uncompleted) [all]: ").lower() or "all"
        try:
            chore_filter = ChoreFilter(raw)
        except ValueError:
            self.output_fn(f"Unknown filter '{raw}', showing all chores")
            chore_filter = ChoreFilter.ALL
        self.output_fn(self.service.format_chores(self.service.filter_chores(chore_filter)))

    def _handle_add(self) -> None:
        description = self._ask("Description: ")
        deadline = self._ask_deadline()
        chore = self.service.add_chore(description, deadline)
        self.output_fn(f"Added '{chore.description}'")

    def _handle_toggle(self) -> None:
        description = self._ask("Description: ")
        deadline = self._ask_deadline()
        chore = self.service.toggle_chore(description, deadline)
        self.output_fn(f"'{chore.description}' is now {'completed' if chore.done else 'pending'}")

    def _handle_delete(self) -> None:
        description = self._ask("Description: ")
        deadline = self._ask_deadline()
        self.service.delete_chore(description, deadline)
        self.output_fn(f"Deleted '{description}'")

    def _handle_save(self) -> bool:
        if self.service.save_chores():
            self.output_fn(f"Saved {len(self.service.chores)} chores")
            return True
        self.output_fn("Could not save chores, see log for details")
        return False

    def run(self) -> int:
        """
        Load chores and loop until the user quits.

        Returns:
            0 when the final save succeeded, 1 otherwise
        """
        self.service.load_chores()
        self.output_fn(f"Loaded {len(self.service.chores)} chores")

        handlers = {
            "1": self._handle_list,
            "2": self._handle_add,
            "3": self._handle_toggle,
            "4": self._handle_delete,
            "5": self._handle_save,
        }

        while True:
            try:
                choice = self.show_menu()
            except (EOFError, KeyboardInterrupt):
                choice = "0"

            if choice in ("0", "q"):
                return 0 if self._handle_save() else 1

            handler = handlers.get(choice)
            if handler is None:
                self.output_fn(f"Unknown option '{choice}'")
                continue

            try:
                handler()
            except ChoreError as e:
                logger.debug(f"Menu action {choice} rejected: {e}")
                self.output_fn(f"Error: {e}")
            except (EOFError, KeyboardInterrupt):
                logger.info(f"Input ended during menu action {choice}; saving and exiting")
                return 0 if self._handle_save() else 1
