"""Flatten a document's layer tree into one ordered list."""

from __future__ import annotations

from collections import deque
from typing import Any

from layerunlock.io.host_base import HostDocument


def collect_layers(host: HostDocument) -> list[Any]:
    """Return every layer in *host*, breadth-first.

    Top-level layers come first, then the contents of each group in the
    order the groups were reached.  A layer handle seen twice is emitted
    only once, so traversal stops after the last distinct layer.
    """
    out: list[Any] = []
    seen: set[int] = set()
    queue: deque[Any] = deque(host.layers)
    while queue:
        layer = queue.popleft()
        if id(layer) in seen:
            continue
        seen.add(id(layer))
        out.append(layer)
        if host.is_container(layer):
            queue.extend(host.children(layer))
    return out
