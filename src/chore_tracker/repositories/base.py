"""
Base Repository - Abstract interface for chore persistence

This defines the contract that all repository implementations must follow.
Callers never pass a storage location: each implementation owns its own.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from chore_tracker.domain.chore import Chore


class BaseChoreRepository(ABC):
    """Abstract base class for chore repositories"""

    @abstractmethod
    def load(self) -> List[Chore]:
        """
        Read every stored chore.

        Returns:
            Chores in storage order; an empty list when nothing usable is stored.
            Never raises.
        """
        pass

    @abstractmethod
    def save(self, chores: Optional[Sequence[Chore]]) -> bool:
        """
        Replace the stored chores with the given collection.

        Args:
            chores: Complete collection to persist. An empty sequence is valid.

        Returns:
            True when the write completed, False on an I/O fault.

        Raises:
            EmptyChoreListError: If chores is None.
        """
        pass
