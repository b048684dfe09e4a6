"""Shared fixtures."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """QGuiApplication instance for tests that build fonts."""
    from PySide6.QtGui import QGuiApplication
    return QGuiApplication.instance() or QGuiApplication([])


@pytest.fixture
def style_dir(tmp_path):
    """Directory for caption style documents."""
    d = tmp_path / "attributes"
    d.mkdir()
    return d


@pytest.fixture
def store(style_dir):
    """TextStyleStore writing into a temporary directory."""
    from mememaker.services.text_style_store import TextStyleStore
    return TextStyleStore(lambda name: style_dir / f"{name}.json")
