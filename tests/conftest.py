import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QCoreApplication for the whole run (no event loop is started)."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
