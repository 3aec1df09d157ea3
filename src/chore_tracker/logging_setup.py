import logging
from typing import Optional

from chore_tracker.settings import get_settings

def setup_logging(level: Optional[str] = None) -> None:
    """
    Console logging for the chores CLI.
    - Falls back to the configured APP_LOG_LEVEL when level is None.
    - Unknown level names resolve to INFO.
    """
    level_name = (level or get_settings().log_level).upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
