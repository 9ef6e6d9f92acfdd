"""Tests for the recursive tracer and the pixel sweep."""

import math

import pytest

from voxeltrace.core.color import Color
from voxeltrace.core.light import Light
from voxeltrace.core.ray import Ray
from voxeltrace.core.utils import offset_origin, reflect, refract
from voxeltrace.core.vector import Vector3
from voxeltrace.geometry.cube import Cube
from voxeltrace.geometry.diorama import create_diorama
from voxeltrace.geometry.world import Scene
from voxeltrace.materials.material import Material
from voxeltrace.materials.presets import MaterialPresets
from voxeltrace.renderer.framebuffer import Framebuffer
from voxeltrace.renderer.raytracer import MAX_DEPTH, SKY_COLOR, Renderer, cast_ray


class CountingCube(Cube):
    """Cube that records how many rays were tested against it."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = 0

    def ray_intersect(self, ray):
        self.calls += 1
        return super().ray_intersect(ray)


class RecordingScene(Scene):
    """Scene that keeps every ray handed to the closest-hit search."""

    def __init__(self, objects=()):
        super().__init__(objects)
        self.rays = []

    def closest_hit(self, ray):
        self.rays.append(ray)
        return super().closest_hit(ray)


def flat_material(reflectivity=0.0, transparency=0.0, refractive_index=1.0):
    return Material(Color(0.4, 0.2, 0.1), 10.0, (0.5, 0.25), refractive_index,
                    transparency, reflectivity)


@pytest.fixture
def head_on_light():
    return Light(Vector3(0, 0, 10), Color.white(), 1.0)


@pytest.fixture
def head_on_ray():
    return Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))


def channels(color):
    return (color.r, color.g, color.b)


class TestCastRay:

    def test_empty_scene_is_sky(self, light):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert cast_ray(ray, Scene(), light) == SKY_COLOR

    def test_past_depth_bound_is_sky(self, unit_cube, light, head_on_ray):
        assert cast_ray(head_on_ray, Scene([unit_cube]), light, MAX_DEPTH + 1) == SKY_COLOR

    def test_local_shading(self, head_on_light, head_on_ray):
        scene = Scene([Cube(Vector3(0, 0, 0), 1.0, flat_material())])
        color = cast_ray(head_on_ray, scene, head_on_light)
        # diffuse (0.4, 0.2, 0.1) * 0.5 plus white specular * 0.25
        assert channels(color) == pytest.approx((0.45, 0.35, 0.3))

    def test_light_intensity_scales_local_term(self, head_on_ray):
        scene = Scene([Cube(Vector3(0, 0, 0), 1.0, flat_material())])
        light = Light(Vector3(0, 0, 10), Color.white(), 2.0)
        assert channels(cast_ray(head_on_ray, scene, light)) == pytest.approx((0.9, 0.7, 0.6))

    def test_surface_facing_away_from_light_is_dark(self, head_on_ray):
        scene = Scene([Cube(Vector3(0, 0, 0), 1.0, flat_material())])
        behind = Light(Vector3(0, 0, -10), Color.white(), 1.0)
        assert cast_ray(head_on_ray, scene, behind) == Color.black()

    def test_reflection_blends_with_sky(self, head_on_light, head_on_ray):
        scene = Scene([Cube(Vector3(0, 0, 0), 1.0, flat_material(reflectivity=0.5))])
        color = cast_ray(head_on_ray, scene, head_on_light)
        assert channels(color) == pytest.approx((0.475, 0.525, 0.65))

    def test_refraction_blends_with_what_lies_behind(self, head_on_light, head_on_ray):
        scene = Scene([Cube(Vector3(0, 0, 0), 1.0, flat_material(transparency=0.5, refractive_index=1.33))])
        color = cast_ray(head_on_ray, scene, head_on_light)
        # The refracted ray starts inside the cube, so it only sees sky
        assert channels(color) == pytest.approx((0.475, 0.525, 0.65))

    def test_closest_hit_wins_regardless_of_order(self, head_on_light, head_on_ray):
        near = Cube(Vector3(0, 0, 0), 1.0, flat_material())
        far = Cube(Vector3(0, 0, -3), 1.0, MaterialPresets.grass())
        expected = cast_ray(head_on_ray, Scene([near]), head_on_light)

        for scene in (Scene([near, far]), Scene([far, near])):
            hit = scene.closest_hit(head_on_ray)
            assert hit.distance == pytest.approx(4.5)
            assert hit.material == near.material
            assert cast_ray(head_on_ray, scene, head_on_light) == expected

    def test_facing_mirrors_stop_at_depth_bound(self, light):
        mirror = Material(Color(0.9, 0.1, 0.1), 10.0, (0.5, 0.5), 1.0, 0.0, 1.0)
        back = CountingCube(Vector3(0, 0, -10), 10.0, mirror)
        front = CountingCube(Vector3(0, 0, 10), 10.0, mirror)
        scene = Scene([back, front])

        color = cast_ray(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, light)

        assert color == SKY_COLOR
        # One closest-hit scan per depth 0..MAX_DEPTH
        assert back.calls == MAX_DEPTH + 1
        assert front.calls == MAX_DEPTH + 1

    def test_ray_leaving_medium_is_refracted_with_unit_direction(self, light):
        # Enters the top face within FACE_EPSILON of the +x edge, so the hit
        # normal is +x and the ray is treated as leaving the medium
        direction = Vector3(0.8, -0.6, 0.0)
        scene = RecordingScene([Cube(Vector3(0, 0, 0), 1.0,
                                     flat_material(transparency=0.5, refractive_index=1.33))])
        cast_ray(Ray(Vector3(-3.5005, 3.5, 0.0), direction), scene, light)

        assert len(scene.rays) == 2
        normal = Vector3(1.0, 0.0, 0.0)
        bent = refract(direction, normal, 1.33)
        assert bent.length() > 1.5
        secondary = scene.rays[1].direction
        assert secondary.length() == pytest.approx(1.0)
        assert secondary.is_close(bent.normalize(), 1e-12)
        assert not secondary.is_close(reflect(direction, normal), 1e-3)

    def test_total_internal_reflection_traces_mirror_ray(self, light):
        direction = Vector3(0.6, -0.8, 0.0)
        primary = Ray(Vector3(-2.5005, 4.5, 0.0), direction)
        glass = flat_material(transparency=0.5, refractive_index=1.33)
        scene = RecordingScene([Cube(Vector3(0, 0, 0), 1.0, glass)])

        color = cast_ray(primary, scene, light)

        hit = Scene(scene.objects).closest_hit(primary)
        assert hit.normal == Vector3(1.0, 0.0, 0.0)
        mirror_dir = reflect(direction, hit.normal)
        assert scene.rays[1].direction.is_close(mirror_dir, 1e-12)

        local = cast_ray(primary, Scene([Cube(Vector3(0, 0, 0), 1.0, flat_material())]), light)
        mirror = Ray(offset_origin(hit.point, -hit.normal), mirror_dir)
        expected = local * 0.5 + cast_ray(mirror, Scene(scene.objects), light, 1) * 0.5
        assert channels(color) == pytest.approx(channels(expected))

    def test_water_at_grazing_angles_stays_finite(self, light):
        scene = Scene([Cube(Vector3(0, 0, 0), 1.0, MaterialPresets.water())])
        for dy in (-0.01, -0.05, -0.2, -1.0):
            ray = Ray(Vector3(-5, 0.52, 0.1), Vector3(1, dy, 0).normalize())
            color = cast_ray(ray, scene, light)
            for channel in channels(color):
                assert not math.isnan(channel)
                assert 0.0 <= channel <= 1.0


class TestRenderer:

    def test_center_pixel_looks_at_center(self, camera):
        direction = Renderer.pixel_direction(camera, 50, 30, 100, 60)
        expected = (camera.center - camera.eye).normalize()
        assert direction.is_close(expected, 1e-12)

    def test_top_left_pixel_maps_to_ndc_corner(self, camera):
        direction = Renderer.pixel_direction(camera, 0, 0, 100, 60)
        expected = camera.basis_change(Vector3(-1.0, 1.0, -1.0)).normalize()
        assert direction.is_close(expected, 1e-12)

    def test_render_fills_every_pixel(self, camera, light):
        framebuffer = Framebuffer(6, 4, Color(1.0, 0.0, 1.0))
        framebuffer.clear()
        Renderer().render(framebuffer, camera, Scene(), light)
        assert (framebuffer.get_buffer() == SKY_COLOR.to_hex()).all()

    def test_parallel_render_matches_sequential(self, camera, light):
        scene = create_diorama()
        sequential = Framebuffer(8, 6)
        parallel = Framebuffer(8, 6)

        Renderer(workers=1).render(sequential, camera, scene, light)
        Renderer(workers=3).render(parallel, camera, scene, light)

        assert (sequential.get_buffer() == parallel.get_buffer()).all()

    def test_orbit_changes_frame(self, camera, light):
        scene = create_diorama()
        before = Framebuffer(16, 12)
        Renderer().render(before, camera, scene, light)
        camera.orbit(1.0)
        after = Framebuffer(16, 12)
        Renderer().render(after, camera, scene, light)
        assert not (before.get_buffer() == after.get_buffer()).all()

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            Renderer(workers=0)
