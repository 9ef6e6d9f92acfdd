from voxeltrace.geometry.hittable import Hittable, HitRecord
from voxeltrace.geometry.cube import Cube
from voxeltrace.geometry.world import Scene
from voxeltrace.geometry.diorama import create_diorama, scatter_decorations

__all__ = [
    "Hittable",
    "HitRecord",
    "Cube",
    "Scene",
    "create_diorama",
    "scatter_decorations",
]
