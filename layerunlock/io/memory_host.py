"""MemoryHost — HostDocument over an in-process :class:`Document`."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from layerunlock.core.document import Document
from layerunlock.core.layer import Layer
from layerunlock.core.lock_state import LAYER_LOCK_ATTRIBUTES, LockDimension
from layerunlock.io.host_base import HostDocument


class MemoryHost(HostDocument):
    """Expose a :class:`Document` to the unlock engine."""

    lock_attributes: ClassVar[Mapping[LockDimension, str]] = LAYER_LOCK_ATTRIBUTES

    def __init__(self, document: Document) -> None:
        self._doc = document

    @property
    def layers(self) -> list[Layer]:
        return self._doc.layers

    def is_container(self, layer: Layer) -> bool:
        return layer.is_container

    def children(self, layer: Layer) -> list[Layer]:
        return list(layer.children)

    def is_background(self, layer: Layer) -> bool:
        return layer.is_background

    def layer_id(self, layer: Layer) -> int | None:
        return layer.layer_id

    def make_active(self, layer: Layer) -> None:
        if layer.layer_id is not None:
            self._doc.set_active(layer.layer_id)

    def convert_active_to_layer(self) -> None:
        self._doc.convert_background_to_layer()

    def layer_descriptor(self, layer_id: int | None) -> dict[str, Any]:
        return self._doc.layer_descriptor(layer_id)

    def write_lock(self, layer: Layer, dimension: LockDimension, value: bool) -> None:
        # Through the document so only real changes are signalled
        if layer.layer_id is None or self._doc.layer_by_id(layer.layer_id) is not layer:
            super().write_lock(layer, dimension, value)
        else:
            self._doc.set_lock(layer.layer_id, dimension, value)
