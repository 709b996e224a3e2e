"""LockInspector — decide whether a layer carries any protection."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from layerunlock.config.constants import DESCRIPTOR_LOCKING
from layerunlock.core.lock_state import DESCRIPTOR_LOCK_KEYS, LockDimension
from layerunlock.io.host_base import HostDocument

log = logging.getLogger(__name__)


class LockProbe(ABC):
    """One way of observing a layer's protection.

    :meth:`probe` returns ``True`` if the layer is locked, ``False`` if it
    is positively unlocked and ``None`` when this probe cannot tell.
    """

    @abstractmethod
    def probe(self, host: HostDocument, layer: Any) -> bool | None: ...


class AttributeProbe(LockProbe):
    """Read the four high-level lock attributes, each independently."""

    def probe(self, host: HostDocument, layer: Any) -> bool | None:
        conclusive = True
        for dimension in LockDimension:
            try:
                if host.read_lock(layer, dimension):
                    return True
            except Exception as exc:  # noqa: BLE001
                log.debug("Cannot read %s lock on %r: %s", dimension.value, layer, exc)
                conclusive = False
        return False if conclusive else None


class DescriptorProbe(LockProbe):
    """Query the layer's low-level descriptor for its locking object.

    The layer is addressed by id when the host provides one, otherwise by
    the host's current target.  Missing descriptor, locking object or keys
    all read as unset.
    """

    def probe(self, host: HostDocument, layer: Any) -> bool | None:
        try:
            layer_id = host.layer_id(layer)
        except Exception:  # noqa: BLE001
            layer_id = None
        if not isinstance(layer_id, int):
            layer_id = None

        try:
            desc = host.layer_descriptor(layer_id)
        except Exception as exc:  # noqa: BLE001
            log.debug("Descriptor query failed for %r: %s", layer, exc)
            return None
        if not desc:
            return None
        locking = desc.get(DESCRIPTOR_LOCKING)
        if not locking:
            return None

        return any(bool(locking.get(key, False)) for key in DESCRIPTOR_LOCK_KEYS.values())


DEFAULT_PROBES: tuple[LockProbe, ...] = (AttributeProbe(), DescriptorProbe())


class LockInspector:
    """Combine probes in order; the first positive answer wins.

    An inconclusive or failing probe never counts against the layer, it
    just hands over to the next probe.
    """

    def __init__(self, host: HostDocument, probes: Sequence[LockProbe] = DEFAULT_PROBES) -> None:
        self._host = host
        self._probes = tuple(probes)

    @property
    def probes(self) -> tuple[LockProbe, ...]:
        return self._probes

    def needs_unlock(self, layer: Any) -> bool:
        for probe in self._probes:
            try:
                if probe.probe(self._host, layer):
                    return True
            except Exception:  # noqa: BLE001
                log.debug("%s failed on %r", type(probe).__name__, layer, exc_info=True)
        return False
