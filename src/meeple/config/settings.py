"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support,
e.g. ``MEEPLE_DEBUG=true`` or ``MEEPLE_PLAYFIELD__SCALE=3``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlayfieldSettings(BaseModel):
    """Playfield geometry and frame rate."""

    width: int = Field(default=340, gt=0)
    height: int = Field(default=560, gt=0)
    fps: int = Field(default=60, gt=0)

    # Window pixels per playfield pixel
    scale: int = Field(default=2, ge=1)


class StorageSettings(BaseModel):
    """Where the high score lives."""

    highscore_path: Path = Field(
        default_factory=lambda: Path.home() / ".meeple_catcher" / "highscore.json"
    )
    highscore_key: str = "meepleHS"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MEEPLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    title: str = "Meeple Catcher"

    # Fixed seed for reproducible runs; None draws from the OS
    seed: Optional[int] = None

    playfield: PlayfieldSettings = Field(default_factory=PlayfieldSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
