# camera/controls.py
from typing import Callable, Dict, Iterable
from voxeltrace.camera.camera import Camera
from voxeltrace.config import CONTROL_SETTINGS

ORBIT_STEP = CONTROL_SETTINGS['orbit_step']
ZOOM_STEP = CONTROL_SETTINGS['zoom_step']
HEIGHT_STEP = CONTROL_SETTINGS['height_step']

# One control tick per action
ACTIONS: Dict[str, Callable[[Camera], None]] = {
    'orbit_left': lambda camera: camera.orbit(ORBIT_STEP),
    'orbit_right': lambda camera: camera.orbit(-ORBIT_STEP),
    'zoom_in': lambda camera: camera.zoom(-ZOOM_STEP),
    'zoom_out': lambda camera: camera.zoom(ZOOM_STEP),
    'raise': lambda camera: camera.change_height(HEIGHT_STEP),
    'lower': lambda camera: camera.change_height(-HEIGHT_STEP),
}

def apply_action(camera: Camera, action: str):
    try:
        handler = ACTIONS[action]
    except KeyError:
        raise ValueError(f"Unknown camera action {action!r}") from None
    handler(camera)

def apply_actions(camera: Camera, actions: Iterable[str]) -> Camera:
    """
    Replays a sequence of control ticks on the camera, in order.
    """
    for action in actions:
        apply_action(camera, action)
    return camera
