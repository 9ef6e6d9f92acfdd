# core/aabb.py
from typing import Optional, Tuple
from voxeltrace.core.vector import Vector3
from voxeltrace.core.utils import ieee_div

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def slab_interval(self, ray) -> Optional[Tuple[float, float]]:
        """
        Slab method: intersects the per-axis entry/exit intervals of the ray.

        Returns (tmin, tmax) or None once the intervals stop overlapping. A
        zero direction component yields infinite slab distances, which the
        comparisons below handle without a special case.
        """
        tmin, tmax = self._axis_interval(ray, 0)
        for axis in (1, 2):
            t0, t1 = self._axis_interval(ray, axis)
            if tmin > t1 or t0 > tmax:
                return None
            if t0 > tmin:
                tmin = t0
            if t1 < tmax:
                tmax = t1
        return tmin, tmax

    def _axis_interval(self, ray, axis: int) -> Tuple[float, float]:
        origin = ray.origin[axis]
        direction = ray.direction[axis]
        t0 = ieee_div(self.minimum[axis] - origin, direction)
        t1 = ieee_div(self.maximum[axis] - origin, direction)
        if t0 > t1:
            t0, t1 = t1, t0
        return t0, t1

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
