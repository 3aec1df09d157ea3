"""
Chore repositories - Data access abstraction layer

Provides a clean interface for chore persistence that can be swapped
between the local JSON file (current) and another backend.

Pattern: Repository Pattern
"""

from chore_tracker.repositories.base import BaseChoreRepository
from chore_tracker.repositories.file import FileChoreRepository

__all__ = ["BaseChoreRepository", "FileChoreRepository"]
