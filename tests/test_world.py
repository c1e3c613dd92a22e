"""
Daybreak World Tests - Renderer hand-off values.
"""

import math

import numpy as np

from daybreak import world
from daybreak.models import LinearColor


def test_exposure():
    # f/16, 1/125s, ISO 100
    ev = world.exposure(16.0, 1.0 / 125.0, 100.0)
    assert abs(ev - 1.0 / (1.2 * 32000.0)) < 1e-12
    assert world.camera_exposure() == ev

    # Doubling the sensitivity doubles the exposure
    assert abs(world.exposure(16.0, 1.0 / 125.0, 200.0) - 2.0 * ev) < 1e-12


def test_sun_disc():
    disc = world.compute_sun_disc()
    radius = math.radians(2.2)

    assert disc.shape == (4,)
    assert abs(disc[0] - math.cos(radius)) < 1e-12
    assert abs(disc[1] - math.sin(radius)) < 1e-12
    assert abs(disc[2] - 1.0 / (math.cos(2.0 * radius) - math.cos(radius))) < 1e-6
    assert disc[3] == 1.0


def test_sun_light_intensity():
    overhead = world.sun_light_intensity(np.array([0.0, 1.0, 0.0]))
    low = world.sun_light_intensity(np.array([0.0, 0.1, 0.995]))
    below = world.sun_light_intensity(np.array([0.0, -0.5, 0.866]))

    assert abs(overhead - 100000.0 * world.camera_exposure()) < 1e-9
    assert 0.0 < below < low < overhead


def test_get_sky_properties():
    direction = np.array([0.0, 0.6, 0.8])
    color = LinearColor(1.0, 0.8, 0.6)

    properties = world.get_sky_properties(direction, color)

    assert set(properties) == {'light_direction', 'light_color', 'light_intensity', 'sun'}
    assert np.array_equal(properties['light_direction'], direction)
    assert np.array_equal(properties['light_color'], [1.0, 0.8, 0.6])
    assert properties['light_intensity'] == world.sun_light_intensity(direction)
    assert np.array_equal(properties['sun'], world.compute_sun_disc())
