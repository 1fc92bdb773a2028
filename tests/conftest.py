"""Shared pytest fixtures for RedFlash tests.

Qt is imported inside the fixtures that need it, so the pure engine and
formatting tests run without loading PyQt6.
"""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from redflash.timer.engine import TimerEngine

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every test at a settings file that does not exist yet."""
    monkeypatch.setattr("redflash.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("redflash.settings.SETTINGS_PATH", tmp_path / "settings.json")
    yield tmp_path / "settings.json"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    """Fresh TimerEngine on a synthetic clock, base duration 300 s."""
    return TimerEngine(300, clock=clock)


@pytest.fixture
def controller(qapp, engine):
    """TimerController whose QTimer is never started; tests tick by hand."""
    from redflash.timer.controller import TimerController

    return TimerController(engine, parent=None)
