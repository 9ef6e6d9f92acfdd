# core/color.py

def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)

class Color:
    """
    Linear RGB color with every channel clamped to [0, 1].

    All arithmetic returns a new Color, so the clamp is applied again after
    every operation. Colors are values: two colors with the same channels
    compare equal and hash the same.
    """
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r: float, g: float, b: float):
        self.r = _clamp01(float(r))
        self.g = _clamp01(float(g))
        self.b = _clamp01(float(b))

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def to_hex(self) -> int:
        """
        Packs the color as 0xRRGGBB, rounding each channel half up to 8 bits.
        """
        r = int(_clamp01(self.r) * 255 + 0.5) & 0xFF
        g = int(_clamp01(self.g) * 255 + 0.5) & 0xFF
        b = int(_clamp01(self.b) * 255 + 0.5) & 0xFF
        return (r << 16) | (g << 8) | b

    @staticmethod
    def from_hex(value: int) -> "Color":
        r = ((value >> 16) & 0xFF) / 255.0
        g = ((value >> 8) & 0xFF) / 255.0
        b = (value & 0xFF) / 255.0
        return Color(r, g, b)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __str__(self) -> str:
        return f"Color({self.r:.2f}, {self.g:.2f}, {self.b:.2f})"

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
