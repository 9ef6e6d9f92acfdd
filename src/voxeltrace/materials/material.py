# materials/material.py
import math
from dataclasses import dataclass
from typing import Tuple
from voxeltrace.core.color import Color

@dataclass(frozen=True)
class Material:
    """
    Shading parameters for a surface. Materials carry no behaviour and are
    compared by value, so one instance can be shared by any number of cubes.

    Attributes:
        diffuse: Base color.
        specular: Phong exponent, >= 0.
        albedo: (diffuse_weight, specular_weight).
        refractive_index: > 0, 1.0 is vacuum.
        transparency: 0 is opaque, 1 is fully transmissive.
        reflectivity: 0 is matte, 1 is a perfect mirror.
    """
    diffuse: Color
    specular: float
    albedo: Tuple[float, float]
    refractive_index: float = 1.0
    transparency: float = 0.0
    reflectivity: float = 0.0

    def __post_init__(self):
        albedo = tuple(float(a) for a in self.albedo)
        if len(albedo) != 2:
            raise ValueError(f"albedo must be a (diffuse, specular) pair, got {self.albedo!r}")
        object.__setattr__(self, 'albedo', albedo)

        for name in ('specular', 'refractive_index', 'transparency', 'reflectivity'):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)
        if not all(math.isfinite(a) for a in albedo):
            raise ValueError(f"albedo must be finite, got {albedo}")

        if self.specular < 0:
            raise ValueError(f"specular exponent must be >= 0, got {self.specular}")
        if self.refractive_index <= 0:
            raise ValueError(f"refractive_index must be > 0, got {self.refractive_index}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {self.transparency}")
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"reflectivity must be in [0, 1], got {self.reflectivity}")
