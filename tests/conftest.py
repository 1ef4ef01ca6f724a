"""
Shared pytest configuration for Livshjulet tests.

Qt runs on the offscreen platform so the suite works without a display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from lifewheel.core.settings import Settings


@pytest.fixture(scope="session")
def qapp():
    """Application instance shared by every Qt-dependent test."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path, monkeypatch, qapp):
    """Fresh settings singleton stored in a temporary config directory."""
    monkeypatch.setattr(
        "lifewheel.core.settings.get_settings_dir",
        lambda: tmp_path / "config" / "lifewheel",
    )
    Settings.reset_instance()
    instance = Settings.instance()
    yield instance
    Settings.reset_instance()
