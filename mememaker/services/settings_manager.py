"""Settings manager for application preferences."""

from pathlib import Path
from typing import Any, Optional

from PySide6.QtCore import QSettings

from mememaker.utils.config import APP_NAME, DEFAULT_ATTRIBUTES_DIR, ORG_NAME


class SettingsManager:
    """Wrapper around QSettings for type-safe preference management."""

    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings if settings is not None else QSettings(ORG_NAME, APP_NAME)

    # ---------------------------------------------------- Storage Settings

    def get_attributes_dir(self) -> Path:
        """Get the directory holding caption style documents."""
        path = self._settings.value("storage/attributes_dir", "", str)
        return Path(path) if path else DEFAULT_ATTRIBUTES_DIR

    def set_attributes_dir(self, path: Optional[Path]) -> None:
        """Set the caption style directory (None for the default)."""
        self._settings.setValue("storage/attributes_dir", str(path) if path else "")

    # ---------------------------------------------------- General Methods

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        self._settings.clear()

    def sync(self) -> None:
        """Force synchronization of settings to disk."""
        self._settings.sync()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by key."""
        return self._settings.value(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by key."""
        self._settings.setValue(key, value)
