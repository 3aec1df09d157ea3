"""
Chore service - in-memory chore operations on top of a repository.

Holds the working list of chores; nothing touches disk until load_chores()
or save_chores() is called.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from chore_tracker.domain.chore import Chore, ChoreFilter
from chore_tracker.exceptions import (
    ChoreNotFoundError,
    DuplicatedChoreError,
    EmptyChoreListError,
    InvalidDeadlineError,
    InvalidDescriptionError,
    ToggleChoreWithInvalidDeadlineError,
)
from chore_tracker.repositories.base import BaseChoreRepository
from chore_tracker.repositories.file import FileChoreRepository

logger = logging.getLogger(__name__)


class ChoreService:
    """Add, edit, toggle, delete and filter chores."""

    def __init__(
        self,
        repository: Optional[BaseChoreRepository] = None,
        today: Callable[[], date] = date.today,
    ):
        self.repository = repository if repository is not None else FileChoreRepository()
        self.today = today
        self.chores: List[Chore] = []

    def _validate_description(self, description: Optional[str]) -> None:
        if description is None or not description.strip():
            raise InvalidDescriptionError("The description cannot be null or empty")

    def _validate_deadline(self, deadline: Optional[date]) -> None:
        if deadline is None or deadline < self.today():
            raise InvalidDeadlineError("The deadline cannot be null or before the current date")

    def _find(self, description: str, deadline: date) -> Chore:
        for chore in self.chores:
            if chore.matches(description, deadline):
                return chore
        raise ChoreNotFoundError("The given chore does not exist.")

    def _exists(self, description: str, deadline: date) -> bool:
        return any(chore.matches(description, deadline) for chore in self.chores)

    def add_chore(self, description: str, deadline: date) -> Chore:
        """
        Append a new pending chore.

        Raises:
            InvalidDescriptionError: Blank description
            InvalidDeadlineError: Missing deadline or one in the past
            DuplicatedChoreError: Same description and deadline already listed
        """
        self._validate_description(description)
        self._validate_deadline(deadline)
        if self._exists(description, deadline):
            raise DuplicatedChoreError("The given chore already exists.")

        chore = Chore(description=description, done=False, deadline=deadline)
        self.chores.append(chore)
        logger.debug(f"Added chore '{description}' due {deadline}")
        return chore

    def delete_chore(self, description: str, deadline: date) -> None:
        if not self.chores:
            raise EmptyChoreListError("Unable to remove a chore from an empty list")
        chore = self._find(description, deadline)
        self.chores.remove(chore)
        logger.debug(f"Deleted chore '{description}' due {deadline}")

    def toggle_chore(self, description: str, deadline: date) -> Chore:
        """
        Flip the completion flag of a chore.

        A completed chore whose deadline has passed cannot be reopened.
        """
        chore = self._find(description, deadline)
        if chore.done and chore.deadline < self.today():
            raise ToggleChoreWithInvalidDeadlineError(
                "Unable to toggle a completed chore with a past deadline"
            )
        chore.done = not chore.done
        return chore

    def edit_chore(
        self,
        description: str,
        deadline: date,
        new_description: Optional[str] = None,
        new_deadline: Optional[date] = None,
    ) -> Chore:
        chore = self._find(description, deadline)

        target_description = description if new_description is None else new_description
        target_deadline = deadline if new_deadline is None else new_deadline
        if new_description is not None:
            self._validate_description(new_description)
        if new_deadline is not None:
            self._validate_deadline(new_deadline)

        if (target_description, target_deadline) != (description, deadline) and self._exists(
            target_description, target_deadline
        ):
            raise DuplicatedChoreError("The given chore already exists.")

        chore.description = target_description
        chore.deadline = target_deadline
        return chore

    def filter_chores(self, chore_filter: ChoreFilter = ChoreFilter.ALL) -> List[Chore]:
        if chore_filter == ChoreFilter.COMPLETED:
            return [c for c in self.chores if c.done]
        if chore_filter == ChoreFilter.UNCOMPLETED:
            return [c for c in self.chores if not c.done]
        return list(self.chores)

    def format_chores(self, chores: Optional[List[Chore]] = None) -> str:
        chores = self.chores if chores is None else chores
        if not chores:
            return "No chores found."
        return "\n".join(
            f"Description: {c.description} "
            f"Deadline: {c.deadline.strftime('%d/%m/%Y')} "
            f"Status: {'Completed' if c.done else 'Pending'}"
            for c in chores
        )

    def load_chores(self) -> List[Chore]:
        self.chores = self.repository.load()
        return self.chores

    def save_chores(self) -> bool:
        return self.repository.save(self.chores)
