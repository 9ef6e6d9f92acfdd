# core/ray.py
from voxeltrace.core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is expected to be unit length already; callers normalize
    before constructing. A zero direction is rejected.
    """
    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Vector3, direction: Vector3):
        if direction.dot(direction) == 0.0:
            raise ValueError("Ray direction must be non-zero")
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
