"""I/O utilities for reading and writing the chore file."""

from . import readers
from . import writers

__all__ = ["readers", "writers"]
