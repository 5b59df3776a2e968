"""
Pytest configuration and fixtures for the QuadMark test suite.

Qt runs on the offscreen platform so widget and painting tests work without
a display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication

from quadmark.services.config_service import ConfigService


BACKGROUND_COLOR = QColor(10, 20, 30)


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication for every Qt test."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def background(qapp):
    """Solid-colour background, smaller than the canvas so it gets stretched."""
    image = QImage(200, 150, QImage.Format.Format_ARGB32)
    image.fill(BACKGROUND_COLOR)
    return image


@pytest.fixture
def config(tmp_path):
    """Config service backed by a temporary file and save folder."""
    service = ConfigService(tmp_path / "config.json")
    service.set("default_save_folder", str(tmp_path / "exports"))
    return service
