# camera/camera.py
import math
import numpy as np
from voxeltrace.core.vector import Vector3
from voxeltrace.config import CAMERA_SETTINGS

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

class Camera:
    """
    Camera orbiting a fixed look-at center.

    The orbit state (radius, angle, height) is the only stored position; eye
    is derived from it on every access. The radius is measured in the
    horizontal plane, so the constructor's eye is reproduced exactly when it
    lies inside the clamp ranges.
    """
    MIN_RADIUS, MAX_RADIUS = CAMERA_SETTINGS['radius_range']
    MIN_HEIGHT, MAX_HEIGHT = CAMERA_SETTINGS['height_range']

    def __init__(self, eye: Vector3, center: Vector3, up: Vector3,
                 fov: float, aspect_ratio: float,
                 near: float = CAMERA_SETTINGS['near'], far: float = CAMERA_SETTINGS['far']):
        self.center = center
        self.up = up
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.near = near
        self.far = far

        dx = eye.x - center.x
        dz = eye.z - center.z
        self.orbit_radius = _clamp(math.hypot(dx, dz), self.MIN_RADIUS, self.MAX_RADIUS)
        self.orbit_angle = math.atan2(dx, dz)
        self.orbit_height = _clamp(eye.y, self.MIN_HEIGHT, self.MAX_HEIGHT)

    @property
    def eye(self) -> Vector3:
        return Vector3(
            self.center.x + self.orbit_radius * math.sin(self.orbit_angle),
            self.orbit_height,
            self.center.z + self.orbit_radius * math.cos(self.orbit_angle)
        )

    def orbit(self, delta_angle: float):
        """Rotates the eye around the center."""
        self.orbit_angle += delta_angle

    def zoom(self, delta: float):
        """Moves the eye towards (negative delta) or away from the center."""
        self.orbit_radius = _clamp(self.orbit_radius + delta, self.MIN_RADIUS, self.MAX_RADIUS)

    def change_height(self, delta: float):
        self.orbit_height = _clamp(self.orbit_height + delta, self.MIN_HEIGHT, self.MAX_HEIGHT)

    def basis_change(self, vector: Vector3) -> Vector3:
        """
        Maps a camera-space direction into world space.

        The basis is rebuilt from the current eye and center on every call,
        so orbit/zoom/height changes take effect immediately.
        """
        forward = (self.center - self.eye).normalize()
        right = forward.cross(self.up).normalize()
        up = right.cross(forward).normalize()

        return right * vector.x + up * vector.y + (-forward) * vector.z

    def view_matrix(self) -> np.ndarray:
        """Right-handed look-at matrix (world to camera)."""
        eye = self.eye
        f = (self.center - eye).normalize()
        s = f.cross(self.up).normalize()
        u = s.cross(f)
        return np.array([
            [s.x, s.y, s.z, -s.dot(eye)],
            [u.x, u.y, u.z, -u.dot(eye)],
            [-f.x, -f.y, -f.z, f.dot(eye)],
            [0.0, 0.0, 0.0, 1.0],
        ], dtype=np.float64)

    def projection_matrix(self) -> np.ndarray:
        """Right-handed perspective projection with clip-space z in [-1, 1]."""
        tan_half = math.tan(self.fov / 2.0)
        projection = np.zeros((4, 4), dtype=np.float64)
        projection[0, 0] = 1.0 / (self.aspect_ratio * tan_half)
        projection[1, 1] = 1.0 / tan_half
        projection[2, 2] = -(self.far + self.near) / (self.far - self.near)
        projection[2, 3] = -(2.0 * self.far * self.near) / (self.far - self.near)
        projection[3, 2] = -1.0
        return projection

    def snapshot(self) -> "Camera":
        """Independent copy for an in-flight frame."""
        copy = Camera.__new__(Camera)
        copy.__dict__.update(self.__dict__)
        return copy

    def __repr__(self) -> str:
        return (f"Camera(eye={self.eye!r}, center={self.center!r}, radius={self.orbit_radius:.3f}, "
                f"angle={self.orbit_angle:.3f}, height={self.orbit_height:.3f})")

def default_camera(aspect_ratio: float) -> Camera:
    return Camera(
        eye=Vector3(*CAMERA_SETTINGS['eye']),
        center=Vector3(*CAMERA_SETTINGS['center']),
        up=Vector3(*CAMERA_SETTINGS['up']),
        fov=CAMERA_SETTINGS['fov'],
        aspect_ratio=aspect_ratio,
    )
