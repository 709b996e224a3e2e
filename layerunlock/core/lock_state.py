"""Lock dimensions and the names they go by in each view of a layer."""

from __future__ import annotations

from enum import Enum


class LockDimension(Enum):
    """One of the four independent protections a layer can carry."""

    ALL = "all"
    PIXELS = "pixels"
    POSITION = "position"
    TRANSPARENCY = "transparency"


# Keys inside the descriptor's locking object, in probe order.
DESCRIPTOR_LOCK_KEYS: dict[LockDimension, str] = {
    LockDimension.ALL: "protectAll",
    LockDimension.PIXELS: "protectComposite",
    LockDimension.POSITION: "protectPosition",
    LockDimension.TRANSPARENCY: "protectTransparency",
}

# Python attribute names on the in-memory layer model.
LAYER_LOCK_ATTRIBUTES: dict[LockDimension, str] = {
    LockDimension.ALL: "all_locked",
    LockDimension.PIXELS: "pixels_locked",
    LockDimension.POSITION: "position_locked",
    LockDimension.TRANSPARENCY: "transparent_pixels_locked",
}
