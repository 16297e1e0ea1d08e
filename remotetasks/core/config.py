"""
Core configuration - environment driven settings for the demo app view-models.
Values are read once at import; accessor functions re-read where tests need it.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Settings store configuration
SETTINGS_DB_PATH = os.getenv("SETTINGS_DB_PATH", "./data/settings.db")
SETTINGS_BACKEND = os.getenv("SETTINGS_BACKEND", "sqlite")  # sqlite|memory

# Key under which WeatherWiz keeps its favorite city names
FAVORITES_KEY = os.getenv("FAVORITES_KEY", "locations")

# StudyHive chat
DEFAULT_SENDER = os.getenv("DEFAULT_SENDER", "Your User")

# WeatherWiz forecast strip sizes
HOURLY_SLOTS = int(os.getenv("HOURLY_SLOTS", "8"))
DAILY_SLOTS = int(os.getenv("DAILY_SLOTS", "5"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

VERSION = "0.3.0"


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def get_settings_db_path() -> str:
    """Current settings database path (honours late environment changes)."""
    return os.getenv("SETTINGS_DB_PATH", SETTINGS_DB_PATH)


def ensure_db_directory(db_path: str = None):
    """Ensure the settings database directory exists."""
    Path(db_path or get_settings_db_path()).parent.mkdir(parents=True, exist_ok=True)


def get_settings_store():
    """Get the configured settings store implementation."""
    backend = os.getenv("SETTINGS_BACKEND", SETTINGS_BACKEND)

    if backend == "memory":
        from .settings_store import InMemorySettingsStore
        return InMemorySettingsStore()

    # Unknown backends fall back to SQLite
    from .settings_store import SQLiteSettingsStore
    return SQLiteSettingsStore(get_settings_db_path())


def validate_config():
    """Validate configuration and return any issues."""
    issues = []

    if SETTINGS_BACKEND not in ["sqlite", "memory"]:
        issues.append(f"Invalid SETTINGS_BACKEND: {SETTINGS_BACKEND}")

    if not FAVORITES_KEY.strip():
        issues.append("FAVORITES_KEY must not be empty")

    if HOURLY_SLOTS < 1:
        issues.append("HOURLY_SLOTS must be >= 1")

    if DAILY_SLOTS < 1:
        issues.append("DAILY_SLOTS must be >= 1")

    if LOG_LEVEL not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        issues.append(f"Invalid LOG_LEVEL: {LOG_LEVEL}")

    return issues
