"""Tests for SettingsManager and storage paths."""

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from mememaker.services.settings_manager import SettingsManager
from mememaker.utils import paths
from mememaker.utils.config import DEFAULT_ATTRIBUTES_DIR


@pytest.fixture
def settings_manager(tmp_path):
    """SettingsManager backed by a throwaway INI file."""
    settings = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return SettingsManager(settings)


def test_attributes_dir_default(settings_manager):
    assert settings_manager.get_attributes_dir() == DEFAULT_ATTRIBUTES_DIR


def test_attributes_dir_roundtrip(settings_manager, tmp_path):
    settings_manager.set_attributes_dir(tmp_path / "styles")
    assert settings_manager.get_attributes_dir() == tmp_path / "styles"

    settings_manager.set_attributes_dir(None)
    assert settings_manager.get_attributes_dir() == DEFAULT_ATTRIBUTES_DIR


def test_reset_to_defaults(settings_manager, tmp_path):
    settings_manager.set_attributes_dir(tmp_path / "styles")
    settings_manager.reset_to_defaults()
    assert settings_manager.get_attributes_dir() == DEFAULT_ATTRIBUTES_DIR


def test_generic_get_set(settings_manager):
    settings_manager.set("storage/custom", "value")
    settings_manager.sync()
    assert settings_manager.get("storage/custom") == "value"
    assert settings_manager.get("storage/missing", "fallback") == "fallback"


def test_documents_path_uses_configured_dir(monkeypatch, tmp_path):
    target = tmp_path / "configured"
    monkeypatch.setattr(SettingsManager, "get_attributes_dir", lambda self: target)

    path = paths.documents_path_for_file_name("topAttr")

    assert path == target / "topAttr.json"
    assert target.is_dir()


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
def test_documents_path_rejects_bad_keys(name):
    with pytest.raises(ValueError):
        paths.documents_path_for_file_name(name)
