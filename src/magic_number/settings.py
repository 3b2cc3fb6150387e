"""
Settings persistence.

Settings are stored as a small JSON document:

    {
      "schema_version": 1,
      "settings": {"max_number": 63, "number_layout": "ASCENDING"}
    }

The file location is, in order of precedence:
    1. The path passed to SettingsRepository
    2. The MAGIC_NUMBER_SETTINGS environment variable (.env files are honoured)
    3. ~/.magic_number/settings.json

A missing, corrupt or invalid file never blocks a game: load() logs a warning
and falls back to defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .types import NumberLayout, Settings, validate_max_number

logger = logging.getLogger(__name__)

# Schema version for compatibility checking
SETTINGS_SCHEMA_VERSION = 1

SETTINGS_PATH_ENV = "MAGIC_NUMBER_SETTINGS"
DEFAULT_SETTINGS_PATH = Path.home() / ".magic_number" / "settings.json"


def get_settings_path() -> Path:
    """Resolve the settings file path from the environment or the default."""
    load_dotenv()

    env_path = os.environ.get(SETTINGS_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_SETTINGS_PATH


class SettingsRepository:
    """Loads and persists Settings as JSON.

    Instances are callable and return the current settings, so a repository
    can be handed directly to GameSession as its settings provider.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else get_settings_path()

    def __call__(self) -> Settings:
        return self.load()

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored settings, or defaults if the file is missing or invalid

        Raises:
            ValueError: If the file was written by a newer schema version
        """
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}, using defaults")
            return Settings()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings from {self.path}: {e}. Using defaults.")
            return Settings()

        if not isinstance(data, dict):
            logger.warning(f"Settings file {self.path} is not a JSON object. Using defaults.")
            return Settings()

        schema_version = data.get("schema_version", 1)
        if isinstance(schema_version, int) and schema_version > SETTINGS_SCHEMA_VERSION:
            raise ValueError(
                f"Settings schema version {schema_version} "
                f"is newer than supported version {SETTINGS_SCHEMA_VERSION}. "
                "Please update the software."
            )

        stored = data.get("settings", {})
        if not isinstance(stored, dict):
            logger.warning(f"Invalid settings in {self.path}: expected an object. Using defaults.")
            return Settings()

        try:
            return Settings.from_dict(stored)
        except ValueError as e:
            logger.warning(f"Invalid settings in {self.path}: {e}. Using defaults.")
            return Settings()

    def save(self, settings: Settings) -> Path:
        """Write settings to disk, creating the parent directory if needed.

        Returns:
            Path the settings were written to
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "schema_version": SETTINGS_SCHEMA_VERSION,
            "settings": settings.to_dict(),
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.debug(f"Saved settings to {self.path}: {settings.to_dict()}")
        return self.path

    def update_max_number(self, max_number: int) -> Settings:
        """Change the range ceiling and persist immediately.

        Raises:
            InvalidRangeError: If max_number is not supported
        """
        validate_max_number(max_number)
        settings = self.load().with_max_number(max_number)
        self.save(settings)
        return settings

    def update_number_layout(self, layout: Union[NumberLayout, str]) -> Settings:
        """Change the number layout and persist immediately.

        Raises:
            ValueError: If layout is not a known layout name
        """
        settings = self.load().with_number_layout(layout)
        self.save(settings)
        return settings


__all__ = [
    'SETTINGS_SCHEMA_VERSION',
    'SETTINGS_PATH_ENV',
    'DEFAULT_SETTINGS_PATH',
    'get_settings_path',
    'SettingsRepository',
]
