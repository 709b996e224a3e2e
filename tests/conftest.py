"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from layerunlock.core.document import Document
from layerunlock.io.memory_host import MemoryHost
from layerunlock.unlock.progress import ProgressReporter


class RecordingReporter(ProgressReporter):
    """Progress reporter that remembers every call."""

    def __init__(self) -> None:
        self.title = ""
        self.texts: list[str] = []
        self.values: list[int] = []
        self.reports: list[tuple[int, int, int]] = []
        self.refreshes = 0
        self.closed = 0

    def show(self, title: str) -> None:
        self.title = title

    def set_text(self, text: str) -> None:
        self.texts.append(text)

    def set_value(self, percent: int) -> None:
        self.values.append(percent)

    def report(self, current: int, total: int, percent: int) -> None:
        self.reports.append((current, total, percent))
        super().report(current, total, percent)

    def refresh(self, pause_ms: int = 0) -> None:
        self.refreshes += 1

    def close(self) -> None:
        self.closed += 1


@pytest.fixture()
def document() -> Document:
    """Create an empty Document."""
    return Document("Test")


@pytest.fixture()
def host(document: Document) -> MemoryHost:
    """Wrap the document fixture in a MemoryHost."""
    return MemoryHost(document)


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()
