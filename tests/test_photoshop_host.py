"""Tests for PhotoshopHost against fake automation objects."""

from __future__ import annotations

from typing import Any

import pytest

from layerunlock.core.errors import NoDocumentError
from layerunlock.core.lock_state import LockDimension
from layerunlock.io.photoshop_host import DIALOG_MODE_NO, PhotoshopHost
from layerunlock.unlock.collector import collect_layers
from layerunlock.unlock.inspector import LockInspector
from layerunlock.unlock.orchestrator import RunState, UnlockRun


class FakeCollection:
    """1-based COM collection."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items

    @property
    def Count(self) -> int:  # noqa: N802
        return len(self._items)

    def Item(self, index: int) -> Any:  # noqa: N802
        return self._items[index - 1]


class FakeArtLayer:
    typename = "ArtLayer"

    def __init__(self, layer_id: int, name: str, background: bool = False) -> None:
        self.id = layer_id
        self.Name = name
        self.IsBackgroundLayer = background
        self.AllLocked = False
        self.PixelsLocked = False
        self.PositionLocked = False
        self.TransparentPixelsLocked = False


class FakeLayerSet:
    typename = "LayerSet"

    def __init__(self, layer_id: int, name: str, children: list[Any]) -> None:
        self.id = layer_id
        self.Name = name
        self.Layers = FakeCollection(children)
        self.AllLocked = False

    @property
    def PixelsLocked(self) -> bool:  # noqa: N802
        raise AttributeError("PixelsLocked")

    @PixelsLocked.setter
    def PixelsLocked(self, value: bool) -> None:  # noqa: N802
        raise AttributeError("PixelsLocked")


class FakeDescriptor:
    def __init__(self, values: dict[int, Any]) -> None:
        self._values = values

    def HasKey(self, key: int) -> bool:  # noqa: N802
        return key in self._values

    def GetObjectValue(self, key: int) -> Any:  # noqa: N802
        return self._values[key]

    def GetBoolean(self, key: int) -> bool:  # noqa: N802
        return self._values[key]


class FakeReference:
    def __init__(self) -> None:
        self.identifier: tuple[int, int] | None = None
        self.enumerated: tuple[int, int, int] | None = None

    def PutIdentifier(self, cls: int, value: int) -> None:  # noqa: N802
        self.identifier = (cls, value)

    def PutEnumerated(self, cls: int, kind: int, value: int) -> None:  # noqa: N802
        self.enumerated = (cls, kind, value)


class FakeDocument:
    def __init__(self, layers: list[Any]) -> None:
        self.Layers = FakeCollection(layers)
        self.ActiveLayer: Any = layers[0] if layers else None


class FakeApp:
    def __init__(self, doc: FakeDocument | None, locking: dict[int, dict[str, bool]] | None = None) -> None:
        self.ActiveDocument = doc
        self.Documents = FakeCollection([doc] if doc else [])
        self.locking = locking or {}
        self.type_ids: dict[str, int] = {}
        self.actions: list[tuple[int, Any, int]] = []
        self.refreshes = 0
        self.references: list[FakeReference] = []

    def StringIDToTypeID(self, name: str) -> int:  # noqa: N802
        return self.type_ids.setdefault(name, len(self.type_ids) + 1000)

    def ExecuteAction(self, event: int, desc: Any, mode: int) -> None:  # noqa: N802
        self.actions.append((event, desc, mode))
        self.ActiveDocument.ActiveLayer.IsBackgroundLayer = False

    def ExecuteActionGet(self, ref: FakeReference) -> FakeDescriptor:  # noqa: N802
        self.references.append(ref)
        if ref.identifier is None:
            layer_id = self.ActiveDocument.ActiveLayer.id
        else:
            layer_id = ref.identifier[1]
        flags = self.locking.get(layer_id)
        if flags is None:
            return FakeDescriptor({})
        lock = FakeDescriptor({self.StringIDToTypeID(k): v for k, v in flags.items()})
        return FakeDescriptor({self.StringIDToTypeID("layerLocking"): lock})

    def Refresh(self) -> None:  # noqa: N802
        self.refreshes += 1


def fake_dispatch(prog_id: str) -> Any:
    if prog_id == "Photoshop.ActionReference":
        return FakeReference()
    return object()


@pytest.fixture()
def tree() -> dict[str, Any]:
    leaf = FakeArtLayer(3, "Leaf")
    group = FakeLayerSet(2, "Group", [leaf])
    top = FakeArtLayer(1, "Top")
    bg = FakeArtLayer(4, "Background", background=True)
    return {"top": top, "group": group, "leaf": leaf, "bg": bg}


def make_host(tree: dict[str, Any], **kwargs: Any) -> tuple[PhotoshopHost, FakeApp]:
    doc = FakeDocument([tree["top"], tree["group"], tree["bg"]])
    app = FakeApp(doc, **kwargs)
    return PhotoshopHost(app, fake_dispatch), app


def test_tree_queries(tree: dict[str, Any]) -> None:
    host, _ = make_host(tree)
    assert host.layers == [tree["top"], tree["group"], tree["bg"]]
    assert host.is_container(tree["group"])
    assert not host.is_container(tree["leaf"])
    assert host.children(tree["group"]) == [tree["leaf"]]
    assert host.is_background(tree["bg"])
    assert not host.is_background(tree["group"])
    assert host.layer_id(tree["leaf"]) == 3  # noqa: PLR2004
    assert collect_layers(host) == [tree["top"], tree["group"], tree["bg"], tree["leaf"]]


def test_layer_id_must_be_numeric(tree: dict[str, Any]) -> None:
    host, _ = make_host(tree)
    tree["top"].id = "abc"
    assert host.layer_id(tree["top"]) is None
    tree["top"].id = True
    assert host.layer_id(tree["top"]) is None


def test_lock_attributes_are_com_properties(tree: dict[str, Any]) -> None:
    host, _ = make_host(tree)
    tree["leaf"].TransparentPixelsLocked = True
    assert host.read_lock(tree["leaf"], LockDimension.TRANSPARENCY) is True
    host.write_lock(tree["leaf"], LockDimension.TRANSPARENCY, False)
    assert tree["leaf"].TransparentPixelsLocked is False


def test_convert_runs_action_without_dialogs(tree: dict[str, Any]) -> None:
    host, app = make_host(tree)
    host.make_active(tree["bg"])
    host.convert_active_to_layer()
    event, _, mode = app.actions[0]
    assert event == app.StringIDToTypeID("convertToLayer")
    assert mode == DIALOG_MODE_NO
    assert tree["bg"].IsBackgroundLayer is False


def test_descriptor_by_id(tree: dict[str, Any]) -> None:
    host, app = make_host(tree, locking={2: {"protectPosition": True, "protectAll": False}})
    desc = host.layer_descriptor(2)
    assert desc == {"layerLocking": {"protectAll": False, "protectPosition": True}}
    assert app.references[-1].identifier == (app.StringIDToTypeID("layer"), 2)


def test_descriptor_by_target(tree: dict[str, Any]) -> None:
    host, app = make_host(tree, locking={1: {"protectComposite": True}})
    desc = host.layer_descriptor(None)
    assert desc == {"layerLocking": {"protectComposite": True}}
    assert app.references[-1].enumerated == (
        app.StringIDToTypeID("layer"),
        app.StringIDToTypeID("ordinal"),
        app.StringIDToTypeID("targetEnum"),
    )


def test_descriptor_without_locking(tree: dict[str, Any]) -> None:
    host, _ = make_host(tree)
    assert host.layer_descriptor(4) == {}


def test_group_lock_seen_only_through_descriptor(tree: dict[str, Any]) -> None:
    host, _ = make_host(tree, locking={2: {"protectPosition": True}})
    assert LockInspector(host).needs_unlock(tree["group"]) is True


def test_full_run(tree: dict[str, Any]) -> None:
    tree["top"].AllLocked = True
    tree["leaf"].PixelsLocked = True
    host, app = make_host(tree)

    result = UnlockRun(host).run()

    assert result.outcome is RunState.DONE
    assert result.background_converted is True
    assert result.targets == [tree["top"], tree["leaf"]]
    assert tree["top"].AllLocked is False
    assert tree["leaf"].PixelsLocked is False
    assert app.refreshes >= 2  # noqa: PLR2004


def test_connect_without_documents(monkeypatch: pytest.MonkeyPatch) -> None:
    client = pytest.importorskip("win32com.client")
    monkeypatch.setattr(client, "Dispatch", lambda prog_id: FakeApp(None))
    with pytest.raises(NoDocumentError):
        PhotoshopHost.connect()
