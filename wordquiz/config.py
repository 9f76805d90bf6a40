"""
Configuration for the word quiz server.
Values come from environment variables or a local .env file.
"""
from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WORD_LIST = Path(__file__).resolve().parent / 'data' / 'words.txt'


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Plain-text word list used when nothing has been saved yet
    word_list_path: Optional[Path] = Field(default=DEFAULT_WORD_LIST, validation_alias="WORD_LIST_PATH")

    # JSON file standing in for browser local storage; unset keeps changes in memory
    storage_path: Optional[Path] = Field(default=None, validation_alias="STORAGE_PATH")

    # Whether the player's check also requires the 3-letter Arabic format.
    # Adding words always requires it.
    enforce_format_on_check: bool = Field(default=False, validation_alias="ENFORCE_FORMAT_ON_CHECK")

    allowed_origins: str = Field(default="*", validation_alias="ALLOWED_ORIGINS")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
