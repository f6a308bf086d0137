"""
Farkle - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and sets up logging for the console application.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from src.engine.base import NUM_DICE

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Match
    players: list[str] = ["Charlie", "Maggie"]
    target_score: int = 10_000
    num_dice: int = NUM_DICE

    # Dice
    seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("num_dice")
    @classmethod
    def _fixed_pool_size(cls, value: int) -> int:
        if value != NUM_DICE:
            raise ValueError(f"The scoring table is fixed to {NUM_DICE} dice, got {value}.")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=settings.effective_log_level, format=LOG_FORMAT)
