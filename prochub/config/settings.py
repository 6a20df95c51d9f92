"""Application settings — persistence via JSON."""

import json
import logging
import os
from dataclasses import dataclass, asdict

from prochub.branding import AppBranding

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.join(os.path.expanduser('~'), '.prochub')


@dataclass
class AppSettings:
    """Persistent application settings."""
    # Paths
    data_dir: str = ""

    # Appearance
    locale: str = "zh"

    # Updates
    auto_check_updates: bool = True
    auto_check_delay_ms: int = 5000     # Delay after startup before the silent check
    update_api_url: str = ""            # '' = AppBranding.UPDATE_API_URL
    request_timeout: float = 10         # seconds

    def __post_init__(self):
        if not self.data_dir:
            self.data_dir = DEFAULT_DATA_DIR
        if not self.update_api_url:
            self.update_api_url = AppBranding.UPDATE_API_URL
        if self.auto_check_delay_ms < 0:
            self.auto_check_delay_ms = 0

    @staticmethod
    def load(path: str | None = None) -> 'AppSettings':
        """Load settings from JSON. Returns defaults if file doesn't exist."""
        if path is None:
            path = os.path.join(DEFAULT_DATA_DIR, 'settings.json')

        if not os.path.isfile(path):
            logger.info("No settings file, using defaults")
            return AppSettings()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            settings = AppSettings(**{k: v for k, v in data.items()
                                      if k in AppSettings.__dataclass_fields__})
            logger.info("Loaded settings from %s", path)
            return settings
        except Exception as e:
            logger.warning("Failed to load settings: %s", e)
            return AppSettings()

    def save(self, path: str | None = None):
        """Save settings to JSON."""
        if path is None:
            path = os.path.join(self.data_dir, 'settings.json')

        os.makedirs(os.path.dirname(path), exist_ok=True)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self), f, indent=2, ensure_ascii=False)
            logger.info("Saved settings to %s", path)
        except Exception as e:
            logger.warning("Failed to save settings: %s", e)

    def ensure_dirs(self):
        """Create data directories if they don't exist."""
        os.makedirs(self.data_dir, exist_ok=True)
        os.makedirs(os.path.join(self.data_dir, 'logs'), exist_ok=True)
