from voxeltrace.renderer.framebuffer import Framebuffer
from voxeltrace.renderer.raytracer import Renderer, cast_ray, SKY_COLOR, MAX_DEPTH

__all__ = ["Framebuffer", "Renderer", "cast_ray", "SKY_COLOR", "MAX_DEPTH"]
