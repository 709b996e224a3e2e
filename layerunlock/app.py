"""Command-line entry point: unlock every layer of Photoshop's active document."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from PyQt6.QtWidgets import QApplication, QMessageBox

from layerunlock.config.constants import (
    APP_NAME,
    APP_VERSION,
    MSG_ERROR,
    MSG_NO_DOCUMENT,
    ORG_NAME,
    REFRESH_PAUSE_MS,
    UI_UPDATE_EVERY,
)
from layerunlock.core.errors import NoDocumentError
from layerunlock.io.host_base import HostDocument
from layerunlock.io.photoshop_host import PhotoshopHost
from layerunlock.ui.progress_dialog import QtProgressReporter
from layerunlock.unlock.orchestrator import UnlockRun

log = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="layerunlock",
        description="Unlock every locked layer and group in the active Photoshop document.",
    )
    parser.add_argument(
        "--update-every",
        type=int,
        default=UI_UPDATE_EVERY,
        help="Repaint progress after this many unlocked layers",
    )
    parser.add_argument(
        "--pause-ms",
        type=int,
        default=REFRESH_PAUSE_MS,
        help="Pause after each progress repaint, in milliseconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    args = parser.parse_args(argv)
    if args.update_every < 1:
        parser.error("--update-every must be at least 1")
    if args.pause_ms < 0:
        parser.error("--pause-ms cannot be negative")
    return args


def main(
    argv: Sequence[str] | None = None,
    connect: Callable[[], HostDocument] = PhotoshopHost.connect,
) -> int:
    """Run the tool and return a process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORG_NAME)

    try:
        host = connect()
    except NoDocumentError:
        QMessageBox.warning(None, APP_NAME, MSG_NO_DOCUMENT)
        return 1
    except Exception as e:
        log.exception("Could not connect to the host application")
        QMessageBox.critical(None, APP_NAME, MSG_ERROR.format(error=e))
        return 1

    unlock_run = UnlockRun(
        host,
        QtProgressReporter(),
        update_every=args.update_every,
        pause_ms=args.pause_ms,
    )
    result = unlock_run.run()
    if result.ok:
        QMessageBox.information(None, APP_NAME, result.message)
        return 0
    QMessageBox.critical(None, APP_NAME, result.message)
    return 1


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())
