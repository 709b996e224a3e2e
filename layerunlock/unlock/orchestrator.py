"""UnlockRun — sequence normalization, collection, scanning and unlocking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from layerunlock.config.constants import (
    EMPTY_PAUSE_MS,
    FINISH_PAUSE_MS,
    MSG_ERROR,
    MSG_FINISHED,
    MSG_NOTHING_LOCKED,
    PROGRESS_MAX,
    PROGRESS_MIN,
    PROGRESS_TITLE,
    REFRESH_PAUSE_MS,
    TEXT_DONE,
    TEXT_NOTHING_LOCKED,
    TEXT_PREPARING,
    TEXT_SCANNING,
    TEXT_UNLOCKING,
    TEXT_UNLOCKING_START,
    UI_UPDATE_EVERY,
)
from layerunlock.io.host_base import HostDocument
from layerunlock.unlock.collector import collect_layers
from layerunlock.unlock.executor import unlock_layer
from layerunlock.unlock.inspector import LockInspector
from layerunlock.unlock.normalizer import normalize_background
from layerunlock.unlock.progress import NullProgressReporter, ProgressReporter

log = logging.getLogger(__name__)


class RunState(Enum):
    INIT = auto()
    NORMALIZING = auto()
    COLLECTING = auto()
    SCANNING = auto()
    EMPTY_DONE = auto()
    UNLOCKING = auto()
    DONE = auto()
    ERROR = auto()
    CLOSED = auto()


@dataclass
class RunResult:
    """Outcome of one :meth:`UnlockRun.run`."""

    outcome: RunState = RunState.INIT
    message: str = ""
    layer_count: int = 0
    targets: list[Any] = field(default_factory=list)
    background_converted: bool = False
    error: Exception | None = None

    @property
    def target_count(self) -> int:
        return len(self.targets)

    @property
    def ok(self) -> bool:
        return self.outcome in (RunState.EMPTY_DONE, RunState.DONE)


def percent_of(done: int, total: int) -> int:
    """Whole percentage of *done* over *total*, halves rounded up, capped at 100."""
    if total <= 0:
        return PROGRESS_MAX
    return min(PROGRESS_MAX, int(done * 100 / total + 0.5))


class UnlockRun:
    """Unlock every locked layer of a host document.

    The run is not one reversible step: layers are unlocked one at a time
    so progress can be repainted in between, and an interrupted run leaves
    the layers it already reached unlocked.
    """

    def __init__(
        self,
        host: HostDocument,
        reporter: ProgressReporter | None = None,
        inspector: LockInspector | None = None,
        update_every: int = UI_UPDATE_EVERY,
        pause_ms: int = REFRESH_PAUSE_MS,
    ) -> None:
        if update_every < 1:
            raise ValueError("update_every must be at least 1")
        self._host = host
        self._reporter = reporter if reporter is not None else NullProgressReporter()
        self._inspector = inspector if inspector is not None else LockInspector(host)
        self._update_every = update_every
        self._pause_ms = pause_ms
        self._state = RunState.INIT
        self._history: list[RunState] = [RunState.INIT]

    # --- queries ---

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def history(self) -> list[RunState]:
        """Every state entered so far, in order."""
        return list(self._history)

    # --- public API ---

    def run(self) -> RunResult:
        """Execute the run.  Never raises; failures end in ``RunState.ERROR``."""
        result = RunResult()
        try:
            self._execute(result)
        except Exception as exc:
            log.exception("Unlock run failed")
            self._enter(RunState.ERROR)
            result.outcome = RunState.ERROR
            result.message = MSG_ERROR.format(error=exc)
            result.error = exc
        finally:
            try:
                self._reporter.close()
            except Exception:
                log.warning("Could not close the progress reporter", exc_info=True)
            self._enter(RunState.CLOSED)
        return result

    # --- internal ---

    def _execute(self, result: RunResult) -> None:
        reporter = self._reporter
        reporter.show(PROGRESS_TITLE)
        reporter.set_text(TEXT_PREPARING)
        reporter.refresh(self._pause_ms)

        self._enter(RunState.NORMALIZING)
        result.background_converted = normalize_background(self._host)

        self._enter(RunState.COLLECTING)
        layers = collect_layers(self._host)
        result.layer_count = len(layers)

        self._enter(RunState.SCANNING)
        reporter.set_text(TEXT_SCANNING)
        reporter.refresh(self._pause_ms)
        self._host.refresh()
        result.targets = self._scan(layers)
        log.info("%d of %d layers need unlocking", result.target_count, result.layer_count)

        if not result.targets:
            self._enter(RunState.EMPTY_DONE)
            reporter.set_value(PROGRESS_MAX)
            reporter.set_text(TEXT_NOTHING_LOCKED)
            reporter.refresh(EMPTY_PAUSE_MS)
            result.outcome = RunState.EMPTY_DONE
            result.message = MSG_NOTHING_LOCKED
            return

        self._enter(RunState.UNLOCKING)
        self._unlock_all(result.targets)

        self._enter(RunState.DONE)
        reporter.set_value(PROGRESS_MAX)
        reporter.set_text(TEXT_DONE)
        reporter.refresh(FINISH_PAUSE_MS)
        result.outcome = RunState.DONE
        result.message = MSG_FINISHED

    def _scan(self, layers: list[Any]) -> list[Any]:
        targets: list[Any] = []
        for layer in layers:
            try:
                if self._inspector.needs_unlock(layer):
                    targets.append(layer)
            except Exception:
                log.warning("Skipping layer %r: inspection failed", layer, exc_info=True)
        return targets

    def _unlock_all(self, targets: list[Any]) -> None:
        reporter = self._reporter
        total = len(targets)
        reporter.set_value(PROGRESS_MIN)
        reporter.set_text(TEXT_UNLOCKING_START.format(total=total))
        reporter.refresh(self._pause_ms)

        for done, layer in enumerate(targets, start=1):
            unlock_layer(self._host, layer)
            if done % self._update_every == 0 or done == total:
                reporter.report(done, total, percent_of(done, total))
                reporter.set_text(TEXT_UNLOCKING.format(done=done, total=total))
                reporter.refresh(self._pause_ms)
                self._host.refresh()

    def _enter(self, state: RunState) -> None:
        log.debug("%s -> %s", self._state.name, state.name)
        self._state = state
        self._history.append(state)
