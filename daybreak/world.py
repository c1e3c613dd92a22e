"""
Daybreak World Integration - Values handed to the sky renderer.

This module handles:
- Photographic exposure for the renderer camera
- Sun disc shape parameters
- Sky material properties (light direction, color, intensity)

The renderer owns its materials and their lifetime; it only receives the
values computed here.
"""

import math

import numpy as np

from .core.vecmath import radians, saturate
from .models import LinearColor

# Sun illuminance in lux
SUN_LIGHT_INTENSITY = 100_000.0

# Camera settings
APERTURE = 16.0
SHUTTER_SPEED = 1.0 / 125.0
SENSITIVITY = 100.0

# Sun disc
SUN_ANGULAR_RADIUS = 2.2  # degrees
SUN_HALO_SIZE = 2.0
SUN_HALO_FALLOFF = 1.0


def exposure(aperture: float, shutter_speed: float, sensitivity: float) -> float:
    """
    Linear exposure scale for camera settings.

    Args:
        aperture: f-stop
        shutter_speed: Seconds
        sensitivity: ISO
    """
    e = (aperture * aperture) / shutter_speed * 100.0 / sensitivity
    return 1.0 / (1.2 * e)


def camera_exposure() -> float:
    """Exposure of the default sky camera."""
    return exposure(APERTURE, SHUTTER_SPEED, SENSITIVITY)


def compute_sun_disc(
    radius: float = radians(SUN_ANGULAR_RADIUS),
    halo_size: float = SUN_HALO_SIZE,
    halo_falloff: float = SUN_HALO_FALLOFF,
) -> np.ndarray:
    """Packed sun disc parameters: (cos r, sin r, 1 / (cos(r * halo) - cos r), falloff)."""
    return np.array([
        math.cos(radius),
        math.sin(radius),
        1.0 / (math.cos(radius * halo_size) - math.cos(radius)),
        halo_falloff,
    ])


def sun_light_intensity(direction) -> float:
    """Exposed sun intensity, dimmed as the sun nears the horizon."""
    height = max(float(direction[1]), 1e-3)
    return SUN_LIGHT_INTENSITY * float(saturate(height ** 0.6)) * camera_exposure()


def get_sky_properties(direction, color: LinearColor) -> dict:
    """
    Material parameters for the sky shader.

    Args:
        direction: Unit direction toward the sun
        color: Sun color from sky.sun_color

    Returns:
        Dictionary with light_direction, light_color, light_intensity and sun
    """
    return {
        'light_direction': np.asarray(direction, dtype=np.float64),
        'light_color': color.to_array(),
        'light_intensity': sun_light_intensity(direction),
        'sun': compute_sun_disc(),
    }
