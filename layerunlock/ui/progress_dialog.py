"""UnlockProgressDialog — small panel showing unlock progress."""

from __future__ import annotations

import time

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QDialog, QLabel, QProgressBar, QVBoxLayout, QWidget

from layerunlock.config.constants import (
    PROGRESS_BAR_HEIGHT,
    PROGRESS_BAR_WIDTH,
    PROGRESS_LABEL_CHARS,
    PROGRESS_MAX,
    PROGRESS_MIN,
    PROGRESS_TITLE,
    TEXT_PREPARING,
)
from layerunlock.unlock.progress import ProgressReporter


class UnlockProgressDialog(QDialog):
    """Non-closable panel with a status label and a 0-100 progress bar."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._finished = False
        self.setWindowTitle(PROGRESS_TITLE)
        # Title bar without a close button
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
        )

        layout = QVBoxLayout(self)

        self._message_label = QLabel(TEXT_PREPARING)
        self._message_label.setMinimumWidth(
            self._message_label.fontMetrics().averageCharWidth() * PROGRESS_LABEL_CHARS
        )
        layout.addWidget(self._message_label)

        self._bar = QProgressBar()
        self._bar.setRange(PROGRESS_MIN, PROGRESS_MAX)
        self._bar.setValue(PROGRESS_MIN)
        self._bar.setTextVisible(False)
        self._bar.setFixedSize(PROGRESS_BAR_WIDTH, PROGRESS_BAR_HEIGHT)
        layout.addWidget(self._bar)

    @property
    def message(self) -> str:
        return self._message_label.text()

    @property
    def value(self) -> int:
        return self._bar.value()

    def set_message(self, text: str) -> None:
        self._message_label.setText(text)

    def set_value(self, percent: int) -> None:
        self._bar.setValue(max(PROGRESS_MIN, min(PROGRESS_MAX, percent)))

    @property
    def finished(self) -> bool:
        return self._finished

    def finish(self) -> None:
        """Close the panel.  The only way it can be closed."""
        self._finished = True
        self.close()

    def reject(self) -> None:
        # Escape and the window manager's close request land here
        if self._finished:
            super().reject()


class QtProgressReporter(ProgressReporter):
    """Drive an :class:`UnlockProgressDialog` from an unlock run."""

    def __init__(self, dialog: UnlockProgressDialog | None = None) -> None:
        self._dialog = dialog if dialog is not None else UnlockProgressDialog()

    @property
    def dialog(self) -> UnlockProgressDialog:
        return self._dialog

    def show(self, title: str) -> None:
        self._dialog.setWindowTitle(title)
        self._dialog.show()

    def set_text(self, text: str) -> None:
        self._dialog.set_message(text)

    def set_value(self, percent: int) -> None:
        self._dialog.set_value(percent)

    def refresh(self, pause_ms: int = 0) -> None:
        self._dialog.repaint()
        QApplication.processEvents()
        if pause_ms > 0:
            time.sleep(pause_ms / 1000)

    def close(self) -> None:
        self._dialog.finish()
