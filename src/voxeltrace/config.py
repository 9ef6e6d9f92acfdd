"""
Configuration settings for the diorama ray tracer
"""
import math

# Rendering settings
RENDER_SETTINGS = {
    'width': 200,
    'height': 150,
    'workers': 1,
    'max_depth': 3,        # extra bounces after the primary ray
    'origin_bias': 1e-3,   # offset for reflected/refracted ray origins
}

# Camera settings
CAMERA_SETTINGS = {
    'eye': (0.0, 5.0, 15.0),
    'center': (0.0, 2.0, 0.0),
    'up': (0.0, 1.0, 0.0),
    'fov': math.radians(45.0),
    'near': 0.1,
    'far': 1000.0,
    'radius_range': (2.0, 50.0),
    'height_range': (0.5, 30.0),
}

# Light settings
LIGHT_SETTINGS = {
    'position': (10.0, 15.0, 10.0),
    'color': (1.0, 1.0, 1.0),
    'intensity': 1.5,
}

# Scene settings
SCENE_SETTINGS = {
    'sky_color': (0.5, 0.7, 1.0),
    'background_color': (0.0, 0.0, 0.0),
    'decoration_seed': 7,
    'decoration_count': 0,
}

# Per control tick camera deltas
CONTROL_SETTINGS = {
    'orbit_step': 0.05,
    'zoom_step': 0.2,
    'height_step': 0.2,
    'target_fps': 60,
}

LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
