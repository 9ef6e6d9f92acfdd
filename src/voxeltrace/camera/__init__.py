from voxeltrace.camera.camera import Camera, default_camera
from voxeltrace.camera.controls import apply_action, apply_actions

__all__ = ["Camera", "default_camera", "apply_action", "apply_actions"]
