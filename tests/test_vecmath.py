"""
Daybreak Vector Math Tests
"""

import numpy as np
import pytest

from daybreak.core import vecmath


def test_constructors():
    assert np.array_equal(vecmath.float3(0.0), [0.0, 0.0, 0.0])
    assert np.array_equal(vecmath.float2(1.0, 2.0), [1.0, 2.0])
    assert np.array_equal(vecmath.float4(1.0), [1.0, 1.0, 1.0, 1.0])
    assert vecmath.float3(1, 2, 3).dtype == np.float64

    with pytest.raises(ValueError):
        vecmath.float3(1.0, 2.0)


def test_dot_length_distance():
    a = vecmath.float3(1.0, 2.0, 2.0)
    b = vecmath.float3(0.0, 1.0, 0.0)

    assert vecmath.dot(a, b) == 2.0
    assert vecmath.length(a) == 3.0
    assert vecmath.distance(a, b) == pytest.approx(np.sqrt(1.0 + 1.0 + 4.0))

    batch = np.array([[3.0, 4.0, 0.0], [0.0, 0.0, 2.0]])
    assert np.allclose(vecmath.length(batch), [5.0, 2.0])
    assert np.allclose(vecmath.length(vecmath.normalize(batch)), 1.0)


def test_scalar_helpers():
    assert vecmath.clamp(5.0, 0.0, 2.0) == 2.0
    assert vecmath.clamp(-5.0, 0.0, 2.0) == 0.0
    assert vecmath.saturate(0.25) == 0.25
    assert np.array_equal(vecmath.saturate(np.array([-1.0, 0.5, 3.0])), [0.0, 0.5, 1.0])
    assert vecmath.mix(2.0, 4.0, 0.5) == 3.0
    assert vecmath.fract(3.75) == 0.75
    assert vecmath.fract(-0.25) == 0.75
    assert vecmath.sqr(3.0) == 9.0
    assert vecmath.max_component(vecmath.float3(0.2, 0.9, 0.4)) == 0.9


def test_smoothstep():
    assert vecmath.smoothstep(0.0, 1.0, -1.0) == 0.0
    assert vecmath.smoothstep(0.0, 1.0, 0.5) == 0.5
    assert vecmath.smoothstep(0.0, 1.0, 2.0) == 1.0


@pytest.mark.parametrize("x", [0.0, 1.0, -37.5, 90.0, 1e-8, 12345.678, -720.0])
def test_angle_round_trip(x):
    assert vecmath.radians(vecmath.degrees(x)) == pytest.approx(x, rel=1e-12, abs=1e-15)
    assert vecmath.degrees(vecmath.radians(x)) == pytest.approx(x, rel=1e-12, abs=1e-15)


def test_angle_constants():
    assert vecmath.radians(180.0) == pytest.approx(vecmath.PI)
    assert vecmath.HALF_PI * 2.0 == vecmath.PI
    assert vecmath.INV_FOUR_PI * vecmath.FOUR_PI == pytest.approx(1.0)
