import logging

import pytest

from raytrace.entity import (
    Entity,
    Registry,
    SceneFormatError,
    read_float,
    read_vector,
)
from raytrace.vector import Vector3


class _Box(Entity):
    def __init__(self):
        self.size = None
        self.seen = []

    def process_property(self, tokens, name):
        self.seen.append(name)
        if name == "size":
            self.size = read_float(tokens)
        else:
            super().process_property(tokens, name)


def test_read_float():
    tokens = iter(["2.5", "rest"])
    assert read_float(tokens) == 2.5
    assert next(tokens) == "rest"


def test_read_float_rejects_word():
    with pytest.raises(SceneFormatError):
        read_float(iter(["abc"]))


def test_read_float_at_end():
    with pytest.raises(SceneFormatError):
        read_float(iter([]))


def test_read_vector():
    tokens = iter(["1", "-2", "3.5", "next"])
    assert read_vector(tokens) == Vector3(1.0, -2.0, 3.5)
    assert next(tokens) == "next"


def test_read_vector_short():
    with pytest.raises(SceneFormatError):
        read_vector(iter(["1", "2"]))


def test_load_properties_stops_at_brace():
    box = _Box()
    tokens = iter(["size", "4", "}", "Sphere"])
    Entity.load_properties(box, tokens)
    assert box.size == 4.0
    assert next(tokens) == "Sphere"


def test_load_properties_accepts_list():
    box = _Box()
    Entity.load_properties(box, ["size", "3", "}"])
    assert box.size == 3.0


def test_load_properties_missing_brace():
    with pytest.raises(SceneFormatError):
        Entity.load_properties(_Box(), ["size", "1"])


def test_unknown_property_is_reported_and_not_consumed(caplog):
    box = _Box()
    with caplog.at_level(logging.WARNING, logger="raytrace"):
        Entity.load_properties(box, ["bogus", "size", "2", "}"])
    assert "bogus is not a valid property" in caplog.text
    assert box.seen == ["bogus", "size"]
    assert box.size == 2.0


def test_registry_create():
    registry = Registry()
    registry.register("Box", _Box)
    made = registry.create("Box")
    assert isinstance(made, _Box)
    assert "Box" in registry
    assert list(registry) == ["Box"]


def test_registry_creates_new_instances():
    registry = Registry()
    registry.register("Box", _Box)
    assert registry.create("Box") is not registry.create("Box")
    assert registry.create("Box").size is None


def test_registry_reregister_replaces():
    registry = Registry()
    registry.register("thing", lambda: "first")
    registry.register("thing", lambda: "second")
    assert registry.create("thing") == "second"


def test_registry_unknown_name():
    with pytest.raises(KeyError):
        Registry().create("Cone")