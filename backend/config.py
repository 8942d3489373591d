"""
PathStore backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "PathStore API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]
    LOG_LEVEL: str = "INFO"

    # Storage: one embedded engine rooted at PATHSTORE_DATA_DIR
    PATHSTORE_DATA_DIR: Path
    PATHSTORE_ENGINE_TIMEOUT: float = 30.0

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        if self.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            self.LOG_LEVEL = "INFO"
        data_dir = os.environ.get("PATHSTORE_DATA_DIR", "data")
        self.PATHSTORE_DATA_DIR = Path(data_dir)
        try:
            timeout = float(os.environ.get("PATHSTORE_ENGINE_TIMEOUT") or 30.0)
        except ValueError:
            timeout = 30.0
        self.PATHSTORE_ENGINE_TIMEOUT = timeout if timeout > 0 else 30.0
