"""Document — owns the layer tree and emits change signals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from layerunlock.config.constants import (
    DESCRIPTOR_LAYER_ID,
    DESCRIPTOR_LOCKING,
    DESCRIPTOR_NAME,
)
from layerunlock.core.layer import Layer, LayerKind
from layerunlock.core.lock_state import DESCRIPTOR_LOCK_KEYS, LockDimension


class Document(QObject):
    """Ordered tree of :class:`Layer` objects.

    Top-level layers are indexed top-to-bottom: index 0 is the topmost
    layer and the background, if any, is always the last entry.  Every
    layer gets a stable numeric id when it is added.

    Signals
    -------
    layer_lock_changed(int, str, bool)
        Emitted with the layer id, the dimension value and the new state,
        only when the state actually changes.
    background_converted(int)
        Emitted with the id of the former background layer.
    """

    layer_lock_changed = pyqtSignal(int, str, bool)
    background_converted = pyqtSignal(int)

    def __init__(self, name: str = "Untitled", parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.name = name
        self._layers: list[Layer] = []
        self._active_id: int | None = None
        self._next_id = 1

    # --- queries ---

    @property
    def layers(self) -> list[Layer]:
        """Return the top-level layers (top-to-bottom)."""
        return list(self._layers)

    @property
    def count(self) -> int:
        """Number of layers in the whole tree."""
        return sum(1 for _ in self.walk())

    @property
    def background_layer(self) -> Layer | None:
        if self._layers and self._layers[-1].is_background:
            return self._layers[-1]
        return None

    @property
    def active_layer(self) -> Layer | None:
        if self._active_id is None:
            return None
        return self.layer_by_id(self._active_id)

    @property
    def active_layer_id(self) -> int | None:
        return self._active_id

    def walk(self) -> Iterator[Layer]:
        """Yield every layer, each group before its contents."""
        stack = list(reversed(self._layers))
        while stack:
            layer = stack.pop()
            yield layer
            stack.extend(reversed(layer.children))

    def layer_by_id(self, layer_id: int) -> Layer | None:
        for layer in self.walk():
            if layer.layer_id == layer_id:
                return layer
        return None

    def layer_descriptor(self, layer_id: int | None = None) -> dict[str, Any]:
        """Return the low-level property descriptor of a layer.

        With *layer_id* ``None`` the active layer is described.  Raises
        :class:`KeyError` when the reference resolves to nothing.  The
        locking object is omitted for the background layer.
        """
        layer = self.active_layer if layer_id is None else self.layer_by_id(layer_id)
        if layer is None:
            raise KeyError(f"no layer for reference {layer_id!r}")
        desc: dict[str, Any] = {
            DESCRIPTOR_LAYER_ID: layer.layer_id,
            DESCRIPTOR_NAME: layer.name,
        }
        if not layer.is_background:
            desc[DESCRIPTOR_LOCKING] = {
                key: dimension in layer.protection
                for dimension, key in DESCRIPTOR_LOCK_KEYS.items()
            }
        return desc

    # --- mutations ---

    def add_layer(
        self,
        name: str | None = None,
        parent: Layer | None = None,
        index: int | None = None,
        locks: Iterable[LockDimension] = (),
    ) -> Layer:
        """Create and insert a new pixel layer. Returns the new layer."""
        if name is None:
            name = f"Layer {self.count + 1}"
        return self._insert(Layer(name=name, protection=set(locks)), parent, index)

    def add_group(
        self,
        name: str | None = None,
        parent: Layer | None = None,
        index: int | None = None,
        locks: Iterable[LockDimension] = (),
    ) -> Layer:
        """Create and insert a new, empty group. Returns the new group."""
        if name is None:
            name = f"Group {self.count + 1}"
        group = Layer(name=name, kind=LayerKind.CONTAINER, protection=set(locks))
        return self._insert(group, parent, index)

    def add_background(self, name: str = "Background") -> Layer:
        """Append the background layer at the bottom of the stack."""
        if self.background_layer is not None:
            raise ValueError("document already has a background layer")
        layer = Layer(name=name, kind=LayerKind.BACKGROUND)
        return self._insert(layer, None, len(self._layers))

    def set_active(self, layer_id: int) -> None:
        """Make the layer with *layer_id* the active layer."""
        if self.layer_by_id(layer_id) is None:
            return
        self._active_id = layer_id

    def set_lock(self, layer_id: int, dimension: LockDimension, locked: bool) -> None:
        layer = self.layer_by_id(layer_id)
        if layer is not None:
            if layer.is_locked(dimension) == locked:
                return
            layer.set_locked(dimension, locked)
            self.layer_lock_changed.emit(layer_id, dimension.value, locked)

    def convert_background_to_layer(self) -> Layer:
        """Turn the active background layer into a regular layer in place."""
        layer = self.active_layer
        if layer is None or not layer.is_background:
            raise ValueError("the active layer is not a background layer")
        layer.kind = LayerKind.LEAF
        if layer.layer_id is not None:
            self.background_converted.emit(layer.layer_id)
        return layer

    # --- internal ---

    def _insert(self, layer: Layer, parent: Layer | None, index: int | None) -> Layer:
        if parent is not None and not parent.is_container:
            raise ValueError(f"layer {parent.name!r} cannot hold other layers")
        siblings = self._layers if parent is None else parent.children
        if index is None:
            # New layers go above the background
            index = len(siblings)
            if parent is None and self.background_layer is not None:
                index -= 1
        layer.layer_id = self._next_id
        self._next_id += 1
        siblings.insert(index, layer)
        if self._active_id is None:
            self._active_id = layer.layer_id
        return layer
