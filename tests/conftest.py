"""Pytest configuration and shared fixtures for tagbook tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


class RecordingRegistry:
    """Registry fake that keeps every notification, including repeats."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def register_if_absent(self, normalized_name: str) -> None:
        self.calls.append(normalized_name)


@pytest.fixture
def recording_registry() -> RecordingRegistry:
    """Return a fresh registry fake per test."""
    return RecordingRegistry()
