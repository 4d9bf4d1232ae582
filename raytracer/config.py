"""
Configuration settings for the ray tracer
"""
import math

# Rendering settings
RENDER_SETTINGS = {
    'width': 200,
    'height': 100,
    'fov': math.pi / 3,
    'max_depth': 5,  # reflection/refraction bounces per camera ray
}

# Output settings
OUTPUT_SETTINGS = {
    'output': 'render.ppm',
    'ppm_line_width': 70,
    'max_colour_value': 255,
}

# Scene settings
SCENE_SETTINGS = {
    'light_position': (-10.0, 10.0, -10.0),
    'light_colour': (1.0, 1.0, 1.0),
    'camera_from': (0.0, 1.5, -5.0),
    'camera_to': (0.0, 1.0, 0.0),
    'camera_up': (0.0, 1.0, 0.0),
}

MAX_DEPTH = RENDER_SETTINGS['max_depth']
