# core/utils.py
import math
from voxeltrace.core.vector import Vector3

def ieee_div(numerator: float, denominator: float) -> float:
    """
    Float division with IEEE-754 results for a zero denominator.

    x / ±0 gives ±inf with the combined sign, and 0 / 0 gives NaN, instead of
    raising ZeroDivisionError. The slab test relies on this for rays that
    run parallel to a pair of faces.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(incident: Vector3, normal: Vector3, refractive_index: float) -> Vector3:
    """
    Refracts a unit incident direction through a surface with Snell's law.

    The normal is the outward surface normal. A ray leaving the medium
    (incident pointing along the normal) swaps the indices and uses the
    flipped normal. When k < 0 there is no transmitted direction and the
    mirror reflection about the effective normal is returned instead.
    """
    cosi = max(-1.0, min(1.0, -incident.dot(normal)))
    if cosi < 0:
        etai, etat = refractive_index, 1.0
        n = -normal
    else:
        etai, etat = 1.0, refractive_index
        n = normal

    eta = etai / etat
    k = 1.0 - eta * eta * (1.0 - cosi * cosi)
    if k < 0:
        return reflect(incident, n)
    return incident * eta + n * (eta * cosi - math.sqrt(k))

def offset_origin(point: Vector3, normal: Vector3, bias: float = 1e-3) -> Vector3:
    """
    Nudges a secondary ray origin off the surface it starts on.
    """
    return point + normal * bias
