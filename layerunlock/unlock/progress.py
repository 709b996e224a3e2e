"""Progress reporting interface used by the unlock run."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

log = logging.getLogger(__name__)


class ProgressReporter(ABC):
    """Receives progress from an :class:`~layerunlock.unlock.orchestrator.UnlockRun`.

    Values are percentages in ``0..100``.  :meth:`refresh` is the run's only
    yield point; implementations backed by a UI repaint there.
    """

    @abstractmethod
    def show(self, title: str) -> None:
        """Make the reporter visible."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the status message."""

    @abstractmethod
    def set_value(self, percent: int) -> None:
        """Move the progress indicator."""

    def report(self, current: int, total: int, percent: int) -> None:
        """Record that *current* of *total* layers are done."""
        self.set_value(percent)

    def refresh(self, pause_ms: int = 0) -> None:
        """Let the presentation catch up, then wait *pause_ms*."""

    @abstractmethod
    def close(self) -> None:
        """Release the reporter.  Called once on every exit path."""


class NullProgressReporter(ProgressReporter):
    """Discard all progress."""

    def show(self, title: str) -> None:
        pass

    def set_text(self, text: str) -> None:
        pass

    def set_value(self, percent: int) -> None:
        pass

    def close(self) -> None:
        pass


class LoggingProgressReporter(ProgressReporter):
    """Write progress to the module logger."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def show(self, title: str) -> None:
        log.log(self._level, "%s", title)

    def set_text(self, text: str) -> None:
        log.log(self._level, "%s", text)

    def set_value(self, percent: int) -> None:
        log.debug("Progress %d%%", percent)

    def report(self, current: int, total: int, percent: int) -> None:
        log.log(self._level, "Unlocked %d / %d (%d%%)", current, total, percent)

    def close(self) -> None:
        log.debug("Progress closed")
