from pathlib import Path
from typing import Literal, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- storage ----
    data_root: Path = Path(".")
    chores_path: Optional[Path] = None  # defaults to data_root / "chores.json"

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_DATA_ROOT, APP_CHORES_PATH, APP_LOG_LEVEL
        extra = "ignore"
    )

    @model_validator(mode="after")
    def _default_chores_path(self) -> "Settings":
        if self.chores_path is None:
            self.chores_path = self.data_root / "chores.json"
        return self


def get_settings() -> Settings:
    """Build settings from the environment and .env on every call."""
    return Settings()
