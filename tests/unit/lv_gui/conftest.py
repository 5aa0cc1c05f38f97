"""Pytest configuration for lv_gui tests."""

from pathlib import Path

import pytest

from tests.helpers.optional_imports import missing_modules

HAS_PYSIDE6 = not missing_modules("PySide6")

# Skip collection of test files if GUI deps are missing.
if not HAS_PYSIDE6:
    collect_ignore = [
        path.name
        for path in Path(__file__).parent.glob("test_*.py")
        if path.name != "test_dependencies.py"
    ]


@pytest.fixture
def qapp():
    """Shared QApplication for widget tests."""
    from tests.helpers.qt import ensure_qapp

    return ensure_qapp()
