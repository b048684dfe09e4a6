"""Storage path helpers."""

from __future__ import annotations

from pathlib import Path

from mememaker.utils.config import ATTRIBUTES_EXTENSION


def get_attributes_dir() -> Path:
    """Return the caption style directory, creating it if needed.

    Lazy import to keep Qt out of plain model imports.
    """
    from mememaker.services.settings_manager import SettingsManager
    attributes_dir = SettingsManager().get_attributes_dir()
    attributes_dir.mkdir(parents=True, exist_ok=True)
    return attributes_dir


def documents_path_for_file_name(name: str) -> Path:
    """Return the absolute path of the style document stored under *name*."""
    if not name or "/" in name or "\\" in name or name in (".", ".."):
        raise ValueError(f"Invalid storage key: {name!r}")
    return get_attributes_dir() / f"{name}{ATTRIBUTES_EXTENSION}"
