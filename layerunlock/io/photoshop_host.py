"""PhotoshopHost — HostDocument over Photoshop's COM automation interface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from layerunlock.config.constants import (
    ACTION_CONVERT_TO_LAYER,
    DESCRIPTOR_LOCKING,
    MSG_NO_DOCUMENT,
)
from layerunlock.core.errors import NoDocumentError
from layerunlock.core.lock_state import DESCRIPTOR_LOCK_KEYS, LockDimension
from layerunlock.io.host_base import HostDocument

log = logging.getLogger(__name__)

PROG_ID = "Photoshop.Application"
ACTION_REFERENCE_PROG_ID = "Photoshop.ActionReference"
ACTION_DESCRIPTOR_PROG_ID = "Photoshop.ActionDescriptor"

# DialogModes.NO
DIALOG_MODE_NO = 3
LAYER_SET_TYPENAME = "LayerSet"


class PhotoshopHost(HostDocument):
    """Drive the active document of a running Photoshop instance.

    *app* is the ``Photoshop.Application`` dispatch object and *dispatch*
    creates further automation objects (action references and descriptors)
    by ProgID.  Both are injected so the adapter can be exercised without a
    Photoshop install.
    """

    lock_attributes: ClassVar[Mapping[LockDimension, str]] = {
        LockDimension.ALL: "AllLocked",
        LockDimension.PIXELS: "PixelsLocked",
        LockDimension.POSITION: "PositionLocked",
        LockDimension.TRANSPARENCY: "TransparentPixelsLocked",
    }

    def __init__(self, app: Any, dispatch: Callable[[str], Any]) -> None:
        self._app = app
        self._dispatch = dispatch
        self._doc = app.ActiveDocument

    @classmethod
    def connect(cls, prog_id: str = PROG_ID) -> PhotoshopHost:
        """Attach to Photoshop and its active document.

        Raises :class:`NoDocumentError` when no document is open.
        """
        from win32com.client import Dispatch

        log.info("Attempting to Dispatch(%r)", prog_id)
        app = Dispatch(prog_id)
        if not app.Documents.Count:
            raise NoDocumentError(MSG_NO_DOCUMENT)
        return cls(app, Dispatch)

    # --- tree ---

    @property
    def layers(self) -> list[Any]:
        return _items(self._doc.Layers)

    def is_container(self, layer: Any) -> bool:
        return getattr(layer, "typename", "") == LAYER_SET_TYPENAME

    def children(self, layer: Any) -> list[Any]:
        return _items(layer.Layers)

    def is_background(self, layer: Any) -> bool:
        if self.is_container(layer):
            return False
        return bool(layer.IsBackgroundLayer)

    def layer_id(self, layer: Any) -> int | None:
        value = getattr(layer, "id", None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    # --- selection / conversion ---

    def make_active(self, layer: Any) -> None:
        self._doc.ActiveLayer = layer

    def convert_active_to_layer(self) -> None:
        self._app.ExecuteAction(
            self._type_id(ACTION_CONVERT_TO_LAYER),
            self._dispatch(ACTION_DESCRIPTOR_PROG_ID),
            DIALOG_MODE_NO,
        )

    # --- low-level query ---

    def layer_descriptor(self, layer_id: int | None) -> dict[str, Any]:
        ref = self._dispatch(ACTION_REFERENCE_PROG_ID)
        if layer_id is not None:
            # By id, so the selection is left alone
            ref.PutIdentifier(self._type_id("layer"), layer_id)
        else:
            ref.PutEnumerated(
                self._type_id("layer"), self._type_id("ordinal"), self._type_id("targetEnum")
            )
        desc = self._app.ExecuteActionGet(ref)

        result: dict[str, Any] = {}
        locking_key = self._type_id(DESCRIPTOR_LOCKING)
        if desc.HasKey(locking_key):
            lock = desc.GetObjectValue(locking_key)
            flags: dict[str, bool] = {}
            for key in DESCRIPTOR_LOCK_KEYS.values():
                type_id = self._type_id(key)
                if lock.HasKey(type_id):
                    flags[key] = bool(lock.GetBoolean(type_id))
            result[DESCRIPTOR_LOCKING] = flags
        return result

    def refresh(self) -> None:
        self._app.Refresh()

    # --- internal ---

    def _type_id(self, string_id: str) -> int:
        return self._app.StringIDToTypeID(string_id)


def _items(collection: Any) -> list[Any]:
    """Materialise a 1-based COM collection into a list."""
    return [collection.Item(i) for i in range(1, collection.Count + 1)]
