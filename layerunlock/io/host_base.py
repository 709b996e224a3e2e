"""HostDocument — abstract view of a layered document in a host application."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from layerunlock.core.lock_state import LockDimension


class HostDocument(ABC):
    """Adapter between the unlock engine and a host's document object model.

    Layers are opaque handles owned by the host.  The engine only reaches
    them through this interface, so any call here may raise whatever the
    host raises for an unsupported operation.
    """

    #: Attribute name of each protection dimension on the host's layer objects.
    lock_attributes: ClassVar[Mapping[LockDimension, str]]

    # --- tree ---

    @property
    @abstractmethod
    def layers(self) -> Sequence[Any]:
        """Top-level layers, top-to-bottom."""

    @abstractmethod
    def is_container(self, layer: Any) -> bool:
        """Return ``True`` if *layer* is a group holding other layers."""

    @abstractmethod
    def children(self, layer: Any) -> Sequence[Any]:
        """Return the direct children of a group."""

    @abstractmethod
    def is_background(self, layer: Any) -> bool:
        """Return ``True`` if *layer* is the special background layer."""

    @abstractmethod
    def layer_id(self, layer: Any) -> int | None:
        """Stable numeric id of *layer*, or ``None`` if the host has none."""

    # --- selection / conversion ---

    @abstractmethod
    def make_active(self, layer: Any) -> None:
        """Make *layer* the document's active layer."""

    @abstractmethod
    def convert_active_to_layer(self) -> None:
        """Convert the active background layer into a regular layer."""

    # --- low-level query ---

    @abstractmethod
    def layer_descriptor(self, layer_id: int | None) -> Mapping[str, Any] | None:
        """Fetch the property descriptor of a layer.

        *layer_id* ``None`` targets the host's current layer.  The result
        holds the locking state under ``"layerLocking"`` when the host
        reports one.
        """

    # --- protection attributes ---

    def read_lock(self, layer: Any, dimension: LockDimension) -> bool:
        return bool(getattr(layer, self.lock_attributes[dimension]))

    def write_lock(self, layer: Any, dimension: LockDimension, value: bool) -> None:
        setattr(layer, self.lock_attributes[dimension], value)

    def refresh(self) -> None:
        """Ask the host to redraw.  No-op by default."""
