"""Pytest configuration and shared fixtures."""

import math

import pytest

from voxeltrace.camera.camera import Camera
from voxeltrace.core.color import Color
from voxeltrace.core.light import Light
from voxeltrace.core.vector import Vector3
from voxeltrace.geometry.cube import Cube
from voxeltrace.materials.presets import MaterialPresets


@pytest.fixture
def unit_cube():
    """Unit cube centered at the origin."""
    return Cube(Vector3(0, 0, 0), 1.0, MaterialPresets.stone())


@pytest.fixture
def light():
    return Light(Vector3(10, 15, 10), Color.white(), 1.5)


@pytest.fixture
def camera():
    return Camera(
        eye=Vector3(0, 5, 15),
        center=Vector3(0, 2, 0),
        up=Vector3(0, 1, 0),
        fov=math.radians(45),
        aspect_ratio=4 / 3,
    )
