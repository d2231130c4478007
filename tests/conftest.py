"""
Shared pytest fixtures for the hypercomplex tests.

This module provides:
- Settings isolation, so environment overrides never leak between tests
- A closeness assertion that works across every numeric kind
- Unit quaternions
"""

import pytest

from hypercomplex import Quaternion
from hypercomplex.core.config import get_settings

_SETTING_NAMES = (
    "ABS_POLICY",
    "DIVISION_POLICY",
    "COMPARE_TOLERANCE",
    "COMPARE_MODE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear HYPERCOMPLEX_* variables and the settings cache around each test."""
    for name in _SETTING_NAMES:
        monkeypatch.delenv(f"HYPERCOMPLEX_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def use_settings(monkeypatch):
    """Apply setting overrides through the environment."""
    def _use(**overrides):
        for name, value in overrides.items():
            monkeypatch.setenv(f"HYPERCOMPLEX_{name}", str(value))
        get_settings.cache_clear()
        return get_settings()
    return _use


@pytest.fixture
def assert_close():
    """Assert ``|actual - expected| <= tolerance`` for any pair of numbers."""
    def _assert_close(actual, expected, tolerance=1e-9):
        distance = abs(actual - expected)
        assert distance <= tolerance, f"{actual!r} != {expected!r} (distance {distance})"
    return _assert_close


@pytest.fixture
def units():
    """The quaternion units I, J, K."""
    return Quaternion(0, 1, 0, 0), Quaternion(0, 0, 1, 0), Quaternion(0, 0, 0, 1)
