"""Clear every protection on a single layer."""

from __future__ import annotations

import logging
from typing import Any

from layerunlock.core.lock_state import LockDimension
from layerunlock.io.host_base import HostDocument

log = logging.getLogger(__name__)


def unlock_layer(host: HostDocument, layer: Any) -> None:
    """Set all four lock dimensions of *layer* to unlocked.

    Each dimension is attempted on its own; one the layer does not support
    is skipped without affecting the others.
    """
    for dimension in LockDimension:
        try:
            host.write_lock(layer, dimension, False)
        except Exception as exc:  # noqa: BLE001
            log.debug("Skipping %s lock on %r: %s", dimension.value, layer, exc)
