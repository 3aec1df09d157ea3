"""
File Chore Repository - JSON file implementation

Stores chores as a flat JSON array in a single file. The location comes from
settings (APP_CHORES_PATH, default chores.json) unless injected.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import ValidationError

from chore_tracker.domain.chore import CHORE_LIST_ADAPTER, Chore
from chore_tracker.exceptions import EmptyChoreListError
from chore_tracker.io import readers, writers
from chore_tracker.repositories.base import BaseChoreRepository
from chore_tracker.settings import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parsed:
    chores: List[Chore] = field(default_factory=list)


@dataclass(frozen=True)
class NotFound:
    reason: str


@dataclass(frozen=True)
class Malformed:
    reason: str


LoadOutcome = Union[Parsed, NotFound, Malformed]


class FileChoreRepository(BaseChoreRepository):
    """Repository implementation backed by a local JSON file"""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_settings().chores_path
        logger.debug(f"FileChoreRepository using {self.path}")

    def read(self) -> LoadOutcome:
        """Read the file and classify the result without collapsing failures."""
        try:
            content = readers.read_text(self.path)
        except FileNotFoundError as e:
            return NotFound(str(e))
        except UnicodeDecodeError as e:
            return Malformed(f"{self.path} is not valid UTF-8: {e}")
        except OSError as e:
            return NotFound(f"cannot read {self.path}: {e}")

        try:
            return Parsed(CHORE_LIST_ADAPTER.validate_json(content))
        except ValidationError as e:
            return Malformed(f"{self.path} does not hold a chore array: {e.error_count()} error(s)")

    def load(self) -> List[Chore]:
        outcome = self.read()
        if isinstance(outcome, Parsed):
            logger.info(f"Loaded {len(outcome.chores)} chores from {self.path}")
            return list(outcome.chores)
        if isinstance(outcome, NotFound):
            logger.info(f"No chore file yet ({outcome.reason}); starting empty")
        else:
            logger.warning(f"Ignoring chore file: {outcome.reason}")
        return []

    def save(self, chores: Optional[Sequence[Chore]]) -> bool:
        if chores is None:
            raise EmptyChoreListError("The chore list cannot be null")

        chores = list(chores)
        payload = CHORE_LIST_ADAPTER.dump_json(chores, indent=2)
        try:
            writers.atomic_write_bytes(payload, self.path)
        except OSError as e:
            logger.error(f"Failed to save chores to {self.path}: {e}")
            return False

        logger.info(f"Saved {len(chores)} chores to {self.path}")
        return True
