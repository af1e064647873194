"""Checker settings — persistence via JSON."""

import json
import logging
import os
from dataclasses import dataclass, asdict

from appfresh.core.catalog import DEFAULT_LOOKUP_URL

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.join(
    os.environ.get('LOCALAPPDATA', os.path.expanduser('~')), 'AppFresh'
)


def _coerce_timeout(value) -> float | None:
    """Seconds as float, or None for the transport default."""
    if value is None:
        return None
    if not isinstance(value, bool):
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            seconds = None
        if seconds is not None and seconds > 0:
            return seconds
    logger.warning("Ignoring invalid timeout %r, using transport default", value)
    return None


@dataclass
class AppSettings:
    """Persistent checker settings. Fetched listings are never stored here."""
    # Host application
    bundle_id: str = ""
    app_version: str = ""

    # Catalog
    country_code: str = "us"
    lookup_url: str = DEFAULT_LOOKUP_URL
    timeout: float | None = None        # None = transport default

    # Paths
    data_dir: str = ""

    def __post_init__(self):
        if not self.data_dir:
            self.data_dir = DEFAULT_DATA_DIR
        if not self.country_code:
            self.country_code = "us"
        self.timeout = _coerce_timeout(self.timeout)

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
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load settings: %s", e)
            return AppSettings()

    def save(self, path: str | None = None):
        """Save settings to JSON."""
        if path is None:
            path = os.path.join(self.data_dir, 'settings.json')

        try:
            os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self), f, indent=2)
            logger.info("Saved settings to %s", path)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)
