import os

# Qt tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from action_history import settings_store


@pytest.fixture(autouse=True)
def default_settings():
    settings_store.reset_settings()
    yield
    settings_store.reset_settings()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
