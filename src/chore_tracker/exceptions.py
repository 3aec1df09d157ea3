"""Errors raised by the chore service and repository layers."""


class ChoreError(Exception):
    """Base class for chore-related failures the caller is expected to handle."""


class EmptyChoreListError(ChoreError):
    pass


class InvalidDescriptionError(ChoreError):
    pass


class InvalidDeadlineError(ChoreError):
    pass


class DuplicatedChoreError(ChoreError):
    pass


class ChoreNotFoundError(ChoreError):
    pass


class ToggleChoreWithInvalidDeadlineError(ChoreError):
    pass
