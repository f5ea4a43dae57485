"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_qt_test(request: pytest.FixtureRequest) -> bool:
    parts = Path(str(request.node.fspath)).parts
    return "ui" in parts or parts[-1] == "test_qt_bridge.py"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _process_qt_events(request: pytest.FixtureRequest) -> Iterator[None]:
    """Flush queued Qt events so one test's timers don't leak into the next."""
    if not _is_qt_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    app.processEvents()


