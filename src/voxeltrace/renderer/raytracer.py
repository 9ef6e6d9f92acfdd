# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Sequence, Tuple
from voxeltrace.camera.camera import Camera
from voxeltrace.config import RENDER_SETTINGS, SCENE_SETTINGS
from voxeltrace.core.color import Color
from voxeltrace.core.light import Light
from voxeltrace.core.ray import Ray
from voxeltrace.core.utils import offset_origin, reflect, refract
from voxeltrace.core.vector import Vector3
from voxeltrace.geometry.world import Scene
from voxeltrace.renderer.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

SKY_COLOR = Color(*SCENE_SETTINGS['sky_color'])
WHITE = Color.white()
MAX_DEPTH = RENDER_SETTINGS['max_depth']
ORIGIN_BIAS = RENDER_SETTINGS['origin_bias']

def cast_ray(ray: Ray, scene: Scene, light: Light, depth: int = 0) -> Color:
    """
    Traces one ray through the scene and returns its color.

    Local Phong shading (no shadow test) is blended with a mirror ray when
    the material reflects and with a refracted ray when it is transparent.
    Secondary rays recurse with depth + 1; past MAX_DEPTH the sky color is
    returned, so at most MAX_DEPTH + 1 levels are ever on the stack.
    """
    if depth > MAX_DEPTH:
        return SKY_COLOR

    intersect = scene.closest_hit(ray)
    if not intersect.is_intersecting:
        return SKY_COLOR

    material = intersect.material
    point = intersect.point
    normal = intersect.normal

    light_dir = (light.position - point).normalize()
    view_dir = (ray.origin - point).normalize()
    reflect_dir = reflect(-light_dir, normal)

    diffuse_intensity = max(0.0, normal.dot(light_dir))
    diffuse = material.diffuse * material.albedo[0] * diffuse_intensity

    specular_intensity = max(0.0, view_dir.dot(reflect_dir)) ** material.specular
    specular = WHITE * material.albedo[1] * specular_intensity

    color = (diffuse + specular) * light.intensity

    if material.reflectivity > 0.0:
        mirror_ray = Ray(offset_origin(point, normal, ORIGIN_BIAS), reflect(ray.direction, normal))
        reflect_color = cast_ray(mirror_ray, scene, light, depth + 1)
        color = color * (1.0 - material.reflectivity) + reflect_color * material.reflectivity

    if material.transparency > 0.0:
        refract_dir = refract(ray.direction, normal, material.refractive_index).normalize()
        refract_ray = Ray(offset_origin(point, -normal, ORIGIN_BIAS), refract_dir)
        refract_color = cast_ray(refract_ray, scene, light, depth + 1)
        color = color * (1.0 - material.transparency) + refract_color * material.transparency

    return color

def _trace_band(camera: Camera, scene: Scene, light: Light,
                width: int, height: int, rows: Sequence[int]) -> Tuple[Sequence[int], List[List[int]]]:
    """Worker entry point: traces whole rows and returns packed pixels."""
    renderer = Renderer()
    return rows, [renderer.trace_row(camera, scene, light, y, width, height) for y in rows]

class Renderer:
    """
    Sweeps every pixel of a framebuffer, one primary ray per pixel.

    Pixels are independent, so with workers > 1 the frame is split into
    interleaved row bands traced in separate processes. Each band works on
    pickled copies of camera, scene and light, which also keeps camera
    changes made during the sweep out of the frame.
    """
    def __init__(self, workers: int = RENDER_SETTINGS['workers']):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = workers
        self.last_frame_time = 0.0

    @staticmethod
    def pixel_direction(camera: Camera, x: int, y: int, width: int, height: int) -> Vector3:
        screen_x = (2.0 * x) / width - 1.0
        screen_y = -(2.0 * y) / height + 1.0
        return camera.basis_change(Vector3(screen_x, screen_y, -1.0)).normalize()

    def trace_pixel(self, camera: Camera, scene: Scene, light: Light,
                    x: int, y: int, width: int, height: int) -> Color:
        ray = Ray(camera.eye, self.pixel_direction(camera, x, y, width, height))
        return cast_ray(ray, scene, light, 0)

    def trace_row(self, camera: Camera, scene: Scene, light: Light,
                  y: int, width: int, height: int) -> List[int]:
        return [self.trace_pixel(camera, scene, light, x, y, width, height).to_hex()
                for x in range(width)]

    def render(self, framebuffer: Framebuffer, camera: Camera, scene: Scene, light: Light):
        width = framebuffer.width
        height = framebuffer.height
        camera = camera.snapshot()
        start_time = time.time()

        if self.workers == 1:
            for y in range(height):
                framebuffer.set_row(y, self.trace_row(camera, scene, light, y, width, height))
        else:
            bands = [range(start, height, self.workers) for start in range(self.workers)]
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                futures = [
                    executor.submit(_trace_band, camera, scene, light, width, height, band)
                    for band in bands if len(band) > 0
                ]
                for future in futures:
                    rows, pixels = future.result()
                    for y, row in zip(rows, pixels):
                        framebuffer.set_row(y, row)

        self.last_frame_time = time.time() - start_time
        logger.debug(
            "Rendered %dx%d frame (%d objects, %d workers) in %.3fs",
            width, height, len(scene), self.workers, self.last_frame_time
        )
        return framebuffer
