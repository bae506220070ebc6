"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

# Qt widgets are created without a display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingController:
    """Controller stub that records every action call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object, tuple]] = []

    def save(self, subject, *args) -> None:
        self.calls.append(("save", subject, args))

    def rename(self, subject, *args) -> None:
        self.calls.append(("rename", subject, args))


@pytest.fixture
def controller() -> RecordingController:
    return RecordingController()
