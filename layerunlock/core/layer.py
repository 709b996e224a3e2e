"""Layer data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from layerunlock.core.errors import LockUnsupportedError
from layerunlock.core.lock_state import LockDimension


class LayerKind(Enum):
    LEAF = "leaf"
    CONTAINER = "container"
    BACKGROUND = "background"


# Which protections each kind of layer exposes.
LOCK_CAPABILITIES: dict[LayerKind, frozenset[LockDimension]] = {
    LayerKind.LEAF: frozenset(LockDimension),
    LayerKind.CONTAINER: frozenset({LockDimension.ALL, LockDimension.POSITION}),
    LayerKind.BACKGROUND: frozenset(),
}


@dataclass(eq=False)
class Layer:
    """A layer or group in a :class:`~layerunlock.core.document.Document`.

    Protection is stored as a set of :class:`LockDimension` values.  The four
    ``*_locked`` properties are the high-level view of that set; touching a
    dimension the layer's kind does not support raises
    :class:`LockUnsupportedError`, just as the host application refuses
    the command.
    """

    name: str
    kind: LayerKind = LayerKind.LEAF
    layer_id: int | None = None
    visible: bool = True
    children: list[Layer] = field(default_factory=list)
    protection: set[LockDimension] = field(default_factory=set)

    def __post_init__(self) -> None:
        for dimension in self.protection:
            self._require(dimension)

    # --- kind ---

    @property
    def is_container(self) -> bool:
        return self.kind is LayerKind.CONTAINER

    @property
    def is_background(self) -> bool:
        return self.kind is LayerKind.BACKGROUND

    def supports(self, dimension: LockDimension) -> bool:
        return dimension in LOCK_CAPABILITIES[self.kind]

    # --- protection ---

    def lock(self, *dimensions: LockDimension) -> None:
        """Add *dimensions* to this layer's protection."""
        for dimension in dimensions:
            self._require(dimension)
        self.protection.update(dimensions)

    def is_locked(self, dimension: LockDimension) -> bool:
        self._require(dimension)
        return dimension in self.protection

    def set_locked(self, dimension: LockDimension, locked: bool) -> None:
        self._require(dimension)
        if locked:
            self.protection.add(dimension)
        else:
            self.protection.discard(dimension)

    @property
    def all_locked(self) -> bool:
        return self.is_locked(LockDimension.ALL)

    @all_locked.setter
    def all_locked(self, value: bool) -> None:
        self.set_locked(LockDimension.ALL, value)

    @property
    def pixels_locked(self) -> bool:
        return self.is_locked(LockDimension.PIXELS)

    @pixels_locked.setter
    def pixels_locked(self, value: bool) -> None:
        self.set_locked(LockDimension.PIXELS, value)

    @property
    def position_locked(self) -> bool:
        return self.is_locked(LockDimension.POSITION)

    @position_locked.setter
    def position_locked(self, value: bool) -> None:
        self.set_locked(LockDimension.POSITION, value)

    @property
    def transparent_pixels_locked(self) -> bool:
        return self.is_locked(LockDimension.TRANSPARENCY)

    @transparent_pixels_locked.setter
    def transparent_pixels_locked(self, value: bool) -> None:
        self.set_locked(LockDimension.TRANSPARENCY, value)

    # --- internal ---

    def _require(self, dimension: LockDimension) -> None:
        if not self.supports(dimension):
            raise LockUnsupportedError(
                f"{dimension.value} lock is not available for {self.kind.value} layer {self.name!r}"
            )
