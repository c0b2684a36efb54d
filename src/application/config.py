"""Runtime settings loaded from the environment."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

DEFAULT_SOLUTIONS_DIR = Path.home() / "CodeforcesSolutions"


class Settings(BaseModel):
    """Crawler settings."""

    solutions_dir: Path = DEFAULT_SOLUTIONS_DIR
    rate_limit: float = Field(default=5.0, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"

    @field_validator("solutions_dir", mode="after")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables and an optional .env file."""
        load_dotenv()

        values = {
            "solutions_dir": os.getenv("CF_SOLUTIONS_DIR"),
            "rate_limit": os.getenv("CF_RATE_LIMIT"),
            "request_timeout": os.getenv("CF_REQUEST_TIMEOUT"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in values.items() if value})


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
