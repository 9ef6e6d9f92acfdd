# geometry/world.py
from typing import Iterable, Iterator, List
from voxeltrace.core.ray import Ray
from voxeltrace.geometry.hittable import Hittable, HitRecord

class Scene:
    """
    Ordered collection of Hittable objects, searched exhaustively.

    The insertion order is kept so fixtures are reproducible; the closest-hit
    result does not depend on it except for exact distance ties, where the
    earlier object wins.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def closest_hit(self, ray: Ray) -> HitRecord:
        closest = HitRecord.empty()
        zbuffer = closest.distance
        for obj in self.objects:
            rec = obj.ray_intersect(ray)
            if rec.is_intersecting and rec.distance < zbuffer:
                zbuffer = rec.distance
                closest = rec
        return closest
