"""Tests for unlock_layer."""

from __future__ import annotations

from typing import Any

from layerunlock.core.document import Document
from layerunlock.core.lock_state import LockDimension
from layerunlock.io.memory_host import MemoryHost
from layerunlock.unlock.executor import unlock_layer
from layerunlock.unlock.inspector import LockInspector


def test_clears_every_dimension(document: Document, host: MemoryHost) -> None:
    layer = document.add_layer("A", locks=list(LockDimension))
    unlock_layer(host, layer)
    assert layer.protection == set()
    assert LockInspector(host).needs_unlock(layer) is False


def test_group_unsupported_dimensions_skipped(document: Document, host: MemoryHost) -> None:
    group = document.add_group("G", locks=[LockDimension.ALL, LockDimension.POSITION])
    unlock_layer(host, group)
    assert group.protection == set()


def test_background_is_a_no_op(document: Document, host: MemoryHost) -> None:
    bg = document.add_background()
    unlock_layer(host, bg)
    assert bg.is_background


def test_failing_write_does_not_stop_the_rest(document: Document) -> None:
    class StubbornHost(MemoryHost):
        def write_lock(self, layer: Any, dimension: LockDimension, value: bool) -> None:
            if dimension is LockDimension.ALL:
                raise RuntimeError("command set is not available")
            super().write_lock(layer, dimension, value)

    layer = document.add_layer("A", locks=[LockDimension.ALL, LockDimension.TRANSPARENCY])
    unlock_layer(StubbornHost(document), layer)
    assert layer.protection == {LockDimension.ALL}


def test_lock_changes_are_signalled(document: Document, host: MemoryHost) -> None:
    layer = document.add_layer("A", locks=[LockDimension.PIXELS])
    seen: list[tuple[int, str, bool]] = []
    document.layer_lock_changed.connect(lambda i, d, v: seen.append((i, d, v)))
    unlock_layer(host, layer)
    assert seen == [(layer.layer_id, "pixels", False)]
