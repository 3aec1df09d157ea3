"""
Chore domain model.

A chore has no identifier of its own: the service layer tells chores apart
by their (description, deadline) pair, and the file keeps them in insertion
order.
"""

from datetime import date
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Chore(BaseModel):
    """A single task with a completion flag and a calendar deadline."""

    # no coercion of "yes"/1 into booleans when reading the chore file
    model_config = ConfigDict(strict=True)

    description: str = Field(..., description="What needs to be done")
    done: bool = Field(..., description="Completion flag")
    deadline: date = Field(..., description="Due date (YYYY-MM-DD on disk)")

    def matches(self, description: str, deadline: date) -> bool:
        return self.description == description and self.deadline == deadline


class ChoreFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    UNCOMPLETED = "uncompleted"


# JSON array <-> List[Chore]
CHORE_LIST_ADAPTER = TypeAdapter(List[Chore])
