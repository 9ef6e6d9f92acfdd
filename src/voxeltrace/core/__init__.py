from voxeltrace.core.vector import Vector3
from voxeltrace.core.color import Color
from voxeltrace.core.ray import Ray
from voxeltrace.core.light import Light

__all__ = ["Vector3", "Color", "Ray", "Light"]
