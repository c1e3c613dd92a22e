"""
Daybreak Vector Math - Small float vector and scalar helpers.

Vectors are plain NumPy float64 arrays whose last axis holds the components,
so every helper works on a single vector or on a batch of them.
"""

import numpy as np

PI = np.pi
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
FOUR_PI = PI * 4.0
INV_PI = 1.0 / PI
INV_TWO_PI = INV_PI * 0.5
INV_FOUR_PI = INV_PI * 0.25


def _vector(size: int, components) -> np.ndarray:
    if len(components) == 1:
        return np.full(size, components[0], dtype=np.float64)
    if len(components) != size:
        raise ValueError(f"Expected 1 or {size} components, got {len(components)}")
    return np.array(components, dtype=np.float64)


def float2(*components) -> np.ndarray:
    """Build a 2D vector from one splatted value or two components."""
    return _vector(2, components)


def float3(*components) -> np.ndarray:
    """Build a 3D vector from one splatted value or three components."""
    return _vector(3, components)


def float4(*components) -> np.ndarray:
    """Build a 4D vector from one splatted value or four components."""
    return _vector(4, components)


def dot(a, b):
    """Dot product over the last axis."""
    return np.sum(np.asarray(a) * np.asarray(b), axis=-1)


def length(v):
    return np.sqrt(dot(v, v))


def distance(a, b):
    return length(np.asarray(a) - np.asarray(b))


def normalize(v) -> np.ndarray:
    v = np.asarray(v, dtype=np.float64)
    return v / np.linalg.norm(v, axis=-1, keepdims=True)


def max_component(v):
    return np.max(v, axis=-1)


def clamp(x, lo, hi):
    return np.minimum(np.maximum(x, lo), hi)


def saturate(x):
    return clamp(x, 0.0, 1.0)


def mix(a, b, x):
    """Linear interpolation between a and b."""
    return a * (1.0 - x) + b * x


def degrees(v):
    return v * (180.0 * INV_PI)


def radians(v):
    return v * (PI / 180.0)


def fract(v):
    return v - np.floor(v)


def sqr(v):
    return v * v


def smoothstep(e0, e1, x):
    """Hermite interpolation between 0 and 1 for x in [e0, e1]."""
    t = clamp((x - e0) / (e1 - e0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
