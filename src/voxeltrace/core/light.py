# core/light.py
from voxeltrace.core.color import Color
from voxeltrace.core.vector import Vector3

class Light:
    """
    Single point light. Shading scales by intensity only; the color is kept
    for drivers that want to display or tint it.
    """
    __slots__ = ('position', 'color', 'intensity')

    def __init__(self, position: Vector3, color: Color, intensity: float):
        self.position = position
        self.color = color
        self.intensity = float(intensity)

    def __repr__(self) -> str:
        return f"Light({self.position!r}, {self.color!r}, {self.intensity})"
