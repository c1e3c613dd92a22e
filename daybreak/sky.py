"""
Daybreak Sky - Sun and sky colors from the scattering model.

Raw radiance from the atmosphere model is scaled by the exposure, brought
back into range by dividing by its brightest channel, then clamped.
"""

import numpy as np
from typing import Optional

from .core.model import AtmosphereModel, get_model
from .core.vecmath import max_component, normalize, saturate
from .models import LinearColor

# UI color used when the sun sits below the horizon
NIGHT_BLUE = LinearColor(0.011, 0.019, 0.063)

# Observer slightly above the ground, keeps the planet test away from the origin
UI_OBSERVER = np.array([10.0, 10.0, 10.0])

WHITE = np.ones(3)


def tone_map(radiance, exposure: float) -> np.ndarray:
    """
    Expose raw radiance, normalize by the max channel when above 1, clamp to [0, 1].

    An all-zero input stays zero.
    """
    color = np.asarray(radiance, dtype=np.float64) * exposure
    peak = max_component(color)
    color = color / np.asarray(np.maximum(peak, 1.0))[..., np.newaxis]
    return saturate(color)


def integrate_scattering_color(
    light_dir,
    ray_dir,
    ray_start=None,
    ray_length: float = np.inf,
    light_color=None,
    model: Optional[AtmosphereModel] = None,
) -> LinearColor:
    """
    Tone mapped color seen along one view ray.

    Args:
        light_dir: Unit direction toward the light
        ray_dir: Unit view direction
        ray_start: Ray origin, world origin if None
        ray_length: Distance to an occluder, np.inf for none
        light_color: Linear RGB light color, white if None
        model: Atmosphere model, shared Earth default if None
    """
    model = model or get_model()
    radiance = model.integrate_scattering(
        np.zeros(3) if ray_start is None else ray_start,
        ray_dir,
        ray_length,
        light_dir,
        WHITE if light_color is None else light_color,
    )
    return LinearColor.from_array(tone_map(radiance, model.params.exposure))


def sun_color(direction, model: Optional[AtmosphereModel] = None) -> LinearColor:
    """Color of the sun disc seen from the ground when looking straight at it."""
    return integrate_scattering_color(direction, direction, model=model)


def sun_ui_color(direction, color: LinearColor, model: Optional[AtmosphereModel] = None) -> LinearColor:
    """
    UI tint for a sun direction: NIGHT_BLUE when the planet hides the sun,
    the given sun color otherwise.
    """
    model = model or get_model()
    if model.planet_intersection(UI_OBSERVER, direction)[1] > 0.0:
        return NIGHT_BLUE
    return color


def sky_colors(view_dirs, sun_direction, model: Optional[AtmosphereModel] = None) -> np.ndarray:
    """
    Tone mapped sky colors for a batch of view directions.

    Args:
        view_dirs: View directions, shape (..., 3); normalized here
        sun_direction: Unit direction toward the sun
        model: Atmosphere model, shared Earth default if None

    Returns:
        Linear RGB colors in [0, 1], shape (..., 3)
    """
    model = model or get_model()
    view_dirs = normalize(view_dirs)
    radiance = model.integrate_scattering(np.zeros(3), view_dirs, np.inf, sun_direction, WHITE)
    return tone_map(radiance, model.params.exposure)
