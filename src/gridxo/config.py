"""
Configuration management using pydantic-settings.

Loads settings from environment variables (prefix ``GRIDXO_``) and a ``.env`` file.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server and gameplay settings."""

    model_config = SettingsConfigDict(
        env_prefix="GRIDXO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = False
    log_level: str = "INFO"
    computer_seed: Optional[int] = Field(
        default=None,
        description="Seed for the computer player's RNG; unset means unpredictable play",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
