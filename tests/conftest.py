"""Shared test fixtures."""

import os

import pytest

# Run Qt headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtGui import QGuiApplication

from filekit.utils.logging import set_logging_enabled


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Image plugins and fonts are located through the application instance."""
    app = QGuiApplication.instance() or QGuiApplication([])
    yield app


@pytest.fixture(autouse=True)
def logging_enabled():
    set_logging_enabled(True)
    yield
    set_logging_enabled(True)
