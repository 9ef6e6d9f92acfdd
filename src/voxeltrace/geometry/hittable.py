# geometry/hittable.py
import math
from voxeltrace.core.vector import Vector3
from voxeltrace.core.ray import Ray
from voxeltrace.materials.presets import MaterialPresets

_MISS_MATERIAL = MaterialPresets.black()

class HitRecord:
    """
    Records details of a ray-object intersection.

    A miss is a HitRecord with is_intersecting False and an infinite
    distance, so closest-hit comparisons never prefer it.
    """
    __slots__ = ('is_intersecting', 'point', 'normal', 'distance', 'material')

    def __init__(self, point: Vector3, normal: Vector3, distance: float, material):
        self.is_intersecting = True
        self.point = point        # Intersection point
        self.normal = normal      # Outward unit normal at the hit
        self.distance = distance  # Ray parameter at the hit
        self.material = material

    @classmethod
    def empty(cls) -> "HitRecord":
        rec = cls(Vector3(0, 0, 0), Vector3(0, 0, 0), math.inf, _MISS_MATERIAL)
        rec.is_intersecting = False
        return rec

    def __repr__(self) -> str:
        if not self.is_intersecting:
            return "HitRecord(miss)"
        return f"HitRecord(point={self.point!r}, normal={self.normal!r}, distance={self.distance})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def ray_intersect(self, ray: Ray) -> HitRecord:
        raise NotImplementedError("ray_intersect() must be implemented by subclasses.")
