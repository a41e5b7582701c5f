import logging

import pytest

from raytrace.camera import Camera
from raytrace.entity import SceneFormatError
from raytrace.vector import Vector3


def test_load_all_properties():
    cam = Camera()
    script = "eye 0 1 -5 lookAt 0 0 0 worldUp 0 1 0 fov 45 fstop 8 }"
    cam.load_properties(script.split())
    assert cam.eye == Vector3(0, 1, -5)
    assert cam.look_at == Vector3(0, 0, 0)
    assert cam.world_up == Vector3(0, 1, 0)
    assert cam.fov == 45.0
    assert cam.fstop == 8.0


def test_later_value_overrides():
    cam = Camera()
    cam.load_properties("fov 30 fov 90 }".split())
    assert cam.fov == 90.0


def test_loading_is_logged(caplog):
    cam = Camera()
    with caplog.at_level(logging.INFO, logger="raytrace"):
        cam.load_properties("eye 1 2 3 fov 45 }".split())
    assert "Camera::eye was loaded as <1, 2, 3>" in caplog.text
    assert "Camera::fov was loaded as 45" in caplog.text


def test_unknown_property_warns(caplog):
    cam = Camera()
    with caplog.at_level(logging.WARNING, logger="raytrace"):
        cam.load_properties("zoom }".split())
    assert "zoom is not a valid property" in caplog.text
    assert cam == Camera()


def test_bad_number_raises():
    with pytest.raises(SceneFormatError):
        Camera().load_properties("fov wide }".split())


def test_fields_are_settable():
    cam = Camera()
    cam.eye = Vector3(4, 5, 6)
    cam.fov = 70.0
    assert cam.eye == Vector3(4, 5, 6)
    assert cam.fov == 70.0