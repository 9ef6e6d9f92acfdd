"""
Recursive ray tracer for scenes built from axis-aligned cubes.
"""
from voxeltrace.core import Color, Light, Ray, Vector3
from voxeltrace.materials import Material, MaterialPresets, get_material
from voxeltrace.geometry import Cube, HitRecord, Scene, create_diorama, scatter_decorations
from voxeltrace.camera import Camera, default_camera
from voxeltrace.renderer import Framebuffer, Renderer, cast_ray

__version__ = "0.1.0"

__all__ = [
    "Color",
    "Light",
    "Ray",
    "Vector3",
    "Material",
    "MaterialPresets",
    "get_material",
    "Cube",
    "HitRecord",
    "Scene",
    "create_diorama",
    "scatter_decorations",
    "Camera",
    "default_camera",
    "Framebuffer",
    "Renderer",
    "cast_ray",
]
