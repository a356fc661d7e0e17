"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from book_catalog.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


def parse_log_level(name: str) -> int:
    """Translate a logging level name, raise error if unknown."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.data_file: Optional[str] = os.getenv("BOOK_CATALOG_DATA_FILE") or None
        self.prompt: str = self._get_env("BOOK_CATALOG_PROMPT", "> ")
        self.log_level: int = parse_log_level(
            self._get_env("BOOK_CATALOG_LOG_LEVEL", "WARNING")
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)


# Global settings instance
settings = Settings()
