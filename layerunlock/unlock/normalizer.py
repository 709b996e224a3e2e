"""Turn the background layer into a regular layer."""

from __future__ import annotations

import logging

from layerunlock.io.host_base import HostDocument

log = logging.getLogger(__name__)


def normalize_background(host: HostDocument) -> bool:
    """Convert the bottom background layer of *host*, if there is one.

    Returns ``True`` when a conversion took place.  Failure leaves the
    background as it was; it carries no lock flags, so skipping it hides
    nothing.
    """
    try:
        layers = host.layers
        if not layers:
            return False
        bottom = layers[-1]
        if not host.is_background(bottom):
            return False
        host.make_active(bottom)
        host.convert_active_to_layer()
    except Exception:
        log.warning("Could not convert the background layer", exc_info=True)
        return False
    log.info("Converted background layer to a regular layer")
    return True
