# File: tutorrec/core/config_manager.py
"""
Centralized configuration management for TutorRec.
Loads settings from environment variables and an optional .env file.
"""

import os
from pathlib import Path
from typing import List

import pytz
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "true") -> bool:
    """Interpret common truthy spellings of an environment flag."""
    return os.getenv(name, default).strip().lower() in ['1', 'true', 'yes', 'y', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from tutorrec/core/
    LOGS_DIR = Path(os.getenv("TUTORREC_LOGS_DIR", str(BASE_DIR / "logs")))

    # Logging
    LOG_LEVEL = os.getenv("TUTORREC_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = _env_flag("TUTORREC_LOG_TO_FILE")

    # Scheduling
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "Europe/Amsterdam")

    # Person names at or above this similarity ratio are reported as near duplicates
    NEAR_DUPLICATE_THRESHOLD = float(os.getenv("TUTORREC_NEAR_DUPLICATE_THRESHOLD", "0.8"))

    @classmethod
    def errors(cls) -> List[str]:
        """Collect every configuration problem as a readable message."""
        errors = []

        try:
            pytz.timezone(cls.TARGET_TIMEZONE)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown timezone: {cls.TARGET_TIMEZONE}")

        if not 0.0 < cls.NEAR_DUPLICATE_THRESHOLD <= 1.0:
            errors.append(
                f"TUTORREC_NEAR_DUPLICATE_THRESHOLD must be in (0, 1], got {cls.NEAR_DUPLICATE_THRESHOLD}"
            )

        if cls.LOG_LEVEL not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            errors.append(f"Unknown log level: {cls.LOG_LEVEL}")

        return errors

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = cls.errors()

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
