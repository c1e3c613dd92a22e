"""
Daybreak Sky Tests - Sun color, UI color and sky colors.

Run with: python -m pytest tests/test_sky.py
"""

import numpy as np

from daybreak.core.model import AtmosphereModel
from daybreak.core.parameters import AtmosphereParameters
from daybreak.core.vecmath import normalize
from daybreak.models import LinearColor
from daybreak.sky import (
    NIGHT_BLUE,
    integrate_scattering_color,
    sky_colors,
    sun_color,
    sun_ui_color,
    tone_map,
)

ZENITH = np.array([0.0, 1.0, 0.0])
NEAR_HORIZON = normalize(np.array([1.0, 0.05, 0.0]))


def _channels(color: LinearColor):
    return np.array([color.r, color.g, color.b, color.a])


def test_tone_map():
    # Brightest channel above 1 is brought back to exactly 1
    assert np.allclose(tone_map(np.array([0.05, 0.025, 0.0]), 40.0), [1.0, 0.5, 0.0])
    # Already in range: left alone
    assert np.allclose(tone_map(np.array([0.01, 0.02, 0.005]), 40.0), [0.4, 0.8, 0.2])
    # No light at all stays black instead of dividing by zero
    black = tone_map(np.zeros(3), 40.0)
    assert np.all(black == 0.0)
    assert not np.any(np.isnan(black))


def test_sun_color_in_range():
    for direction in (ZENITH, NEAR_HORIZON, normalize(np.array([0.3, 0.4, -0.5]))):
        channels = _channels(sun_color(direction))
        assert np.all(channels >= 0.0)
        assert np.all(channels <= 1.0)
        assert channels[3] == 1.0

    print("✓ Sun color range test passed")


def test_sun_color_dims_toward_horizon():
    high = sun_color(ZENITH)
    low = sun_color(NEAR_HORIZON)

    assert np.sum(high.to_array()) > np.sum(low.to_array())
    assert high.luminance > low.luminance
    # Overhead the sun is exposed past 1 and normalized on its blue channel
    assert abs(high.b - 1.0) < 1e-9
    # Low sun loses its blue first
    assert low.r > low.b

    print("✓ Sun color horizon test passed")


def test_sun_ui_color():
    color = sun_color(ZENITH)

    below = normalize(np.array([0.2, -0.5, 0.4]))
    assert sun_ui_color(below, color) == NIGHT_BLUE
    assert sun_ui_color(np.array([0.0, -1.0, 0.0]), color) == NIGHT_BLUE

    above = normalize(np.array([0.5, 0.35, 0.5]))
    assert above[1] > 0.3
    assert sun_ui_color(above, color) is color
    assert sun_ui_color(ZENITH, color) is color

    for c in (NIGHT_BLUE, sun_ui_color(below, color)):
        assert np.all((_channels(c) >= 0.0) & (_channels(c) <= 1.0))

    print("✓ Sun UI color test passed")


def test_integrate_scattering_color_defaults():
    sun = normalize(np.array([0.0, 0.5, 1.0]))

    default = integrate_scattering_color(sun, ZENITH)
    explicit = integrate_scattering_color(
        sun, ZENITH, ray_start=np.zeros(3), ray_length=np.inf, light_color=np.ones(3)
    )
    assert default == explicit


def test_sky_colors():
    sun = normalize(np.array([0.0, 1.0, 1.0]))
    view_dirs = np.array([
        [0.0, 1.0, 0.0],
        [0.0, 0.2, 1.0],
        [1.0, 0.1, 0.0],
        [0.0, 0.5, -1.0],
    ])

    colors = sky_colors(view_dirs, sun)

    assert colors.shape == (4, 3)
    assert np.all((colors >= 0.0) & (colors <= 1.0))
    # Clear sky overhead is blue
    assert colors[0, 2] > colors[0, 0]

    # A single view direction gives the same answer as the service
    single = integrate_scattering_color(sun, normalize(view_dirs[1]))
    assert np.allclose(colors[1], single.to_array())


def test_custom_model():
    dim = AtmosphereModel(AtmosphereParameters.from_artistic_controls(exposure=0.0))
    assert sun_color(ZENITH, model=dim) == LinearColor(0.0, 0.0, 0.0, 1.0)


def test_shared_default_model():
    from concurrent.futures import ThreadPoolExecutor

    from daybreak.core.model import get_model

    with ThreadPoolExecutor(max_workers=8) as pool:
        models = list(pool.map(lambda _: get_model(), range(32)))

    assert all(model is models[0] for model in models)
    assert models[0].params.exposure == 40.0
