# renderer/framebuffer.py
import os
from typing import Sequence
import numpy as np
from PIL import Image
from voxeltrace.core.color import Color

class Framebuffer:
    """
    Pixel sink holding packed 0xRRGGBB values, row-major (height x width).
    """
    def __init__(self, width: int, height: int, background_color: Color = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Framebuffer dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width), dtype=np.uint32)
        self.background_color = background_color if background_color is not None else Color.black()

    def clear(self):
        self.buffer.fill(self.background_color.to_hex())

    def set_background_color(self, color: Color):
        self.background_color = color

    def point(self, x: int, y: int, color: Color):
        # Out-of-range writes are ignored
        if 0 <= x < self.width and 0 <= y < self.height:
            self.buffer[y, x] = color.to_hex()

    def set_row(self, y: int, pixels: Sequence[int]):
        if 0 <= y < self.height:
            self.buffer[y, :] = np.asarray(pixels, dtype=np.uint32)[:self.width]

    def get_pixel(self, x: int, y: int) -> Color:
        return Color.from_hex(int(self.buffer[y, x]))

    def get_buffer(self) -> np.ndarray:
        return self.buffer

    def to_rgb_array(self) -> np.ndarray:
        """Unpacks the buffer into a (height, width, 3) uint8 image."""
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (self.buffer >> 16) & 0xFF
        rgb[..., 1] = (self.buffer >> 8) & 0xFF
        rgb[..., 2] = self.buffer & 0xFF
        return rgb

    def save(self, image_path: str):
        """
        Writes the buffer to an image file; the format follows the extension.

        Raises:
            ValueError: If Pillow cannot write that format.
        """
        directory = os.path.dirname(image_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            Image.fromarray(self.to_rgb_array()).save(image_path)
        except (KeyError, ValueError) as e:
            raise ValueError(f"Error saving image {image_path}: {e}") from e
