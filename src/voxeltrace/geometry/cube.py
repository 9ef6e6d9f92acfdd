# geometry/cube.py
from voxeltrace.core.vector import Vector3
from voxeltrace.core.ray import Ray
from voxeltrace.core.aabb import AABB
from voxeltrace.geometry.hittable import Hittable, HitRecord

# Distance from a face plane below which a point counts as lying on it
FACE_EPSILON = 1e-3

class Cube(Hittable):
    """
    Axis-aligned cube defined by its center, edge length and material.
    """
    def __init__(self, center: Vector3, size: float, material):
        if size <= 0:
            raise ValueError(f"Cube size must be positive, got {size}")
        self.center = center
        self.size = float(size)
        self.material = material
        half = self.size / 2.0
        offset = Vector3(half, half, half)
        self.box = AABB(center - offset, center + offset)

    @property
    def minimum(self) -> Vector3:
        return self.box.minimum

    @property
    def maximum(self) -> Vector3:
        return self.box.maximum

    def ray_intersect(self, ray: Ray) -> HitRecord:
        interval = self.box.slab_interval(ray)
        if interval is None:
            return HitRecord.empty()

        tmin, _ = interval
        # Box entirely behind the origin, or the origin is inside it
        if tmin < 0.0:
            return HitRecord.empty()

        point = ray.at(tmin)
        return HitRecord(point, self.normal_at(point), tmin, self.material)

    def normal_at(self, point: Vector3) -> Vector3:
        """
        Returns the outward normal of the face the point lies on.

        Faces are tested in +x, -x, +y, -y, +z, -z order and the first one
        within FACE_EPSILON wins, so edges and corners resolve to the x face
        first. A point on no face falls back to +y.
        """
        half = self.size / 2.0
        local = point - self.center

        if abs(local.x - half) < FACE_EPSILON:
            return Vector3(1.0, 0.0, 0.0)
        if abs(local.x + half) < FACE_EPSILON:
            return Vector3(-1.0, 0.0, 0.0)
        if abs(local.y - half) < FACE_EPSILON:
            return Vector3(0.0, 1.0, 0.0)
        if abs(local.y + half) < FACE_EPSILON:
            return Vector3(0.0, -1.0, 0.0)
        if abs(local.z - half) < FACE_EPSILON:
            return Vector3(0.0, 0.0, 1.0)
        if abs(local.z + half) < FACE_EPSILON:
            return Vector3(0.0, 0.0, -1.0)

        return Vector3(0.0, 1.0, 0.0)

    def __repr__(self) -> str:
        return f"Cube(center={self.center!r}, size={self.size})"
