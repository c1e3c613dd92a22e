"""
Daybreak Atmosphere Model - Single scattering through a layered atmosphere.

This module handles:
- Ray / sphere intersection against the planet and the atmosphere shell
- Rayleigh, Mie and ozone density profiles
- Optical depth integration toward the light
- Ray marched inscattering along a view ray

Every method accepts a single ray (arrays of shape (3,)) or a batch of rays
(shape (..., 3)); leading dimensions broadcast.
"""

import numpy as np
from typing import Optional, Sequence

from .parameters import AtmosphereParameters, DensityProfileLayer
from .vecmath import FOUR_PI, PI, distance, dot, saturate

NO_INTERSECTION = -1.0


def _expand(x) -> np.ndarray:
    """Append a component axis so per-ray scalars scale (..., 3) vectors."""
    return np.asarray(x)[..., np.newaxis]


def sphere_intersection(ray_start, ray_dir, sphere_center, sphere_radius: float) -> np.ndarray:
    """
    Intersect rays with a sphere.

    Returns:
        Array of shape (..., 2) holding the near and far ray parameters, or
        (-1, -1) where the discriminant is negative. A negative near value
        means the ray starts inside the sphere.
    """
    ray_start = np.asarray(ray_start, dtype=np.float64)
    ray_dir = np.asarray(ray_dir, dtype=np.float64)

    start = ray_start - sphere_center
    a = dot(ray_dir, ray_dir)
    b = 2.0 * dot(start, ray_dir)
    c = dot(start, start) - sphere_radius * sphere_radius
    d = b * b - 4.0 * a * c

    e = np.sqrt(np.maximum(d, 0.0))
    near = (-b - e) / (2.0 * a)
    far = (-b + e) / (2.0 * a)
    hit = d >= 0.0
    return np.stack([
        np.where(hit, near, NO_INTERSECTION),
        np.where(hit, far, NO_INTERSECTION),
    ], axis=-1)


def phase_rayleigh(costh):
    return 3.0 * (1.0 + costh * costh) / (16.0 * PI)


def phase_mie(costh, g: float = 0.85, g_max: float = 0.9381):
    """Henyey-Greenstein style Mie phase using the Schlick k approximation."""
    mg = min(g, g_max)
    k = 1.55 * g - 0.55 * mg * mg * mg
    kcosth = k * costh
    return (1.0 - k * k) / (FOUR_PI * (1.0 - kcosth) * (1.0 - kcosth))


class AtmosphereModel:
    """
    Single scattering atmosphere model.

    The model holds only immutable parameters, so one instance can be shared
    freely between callers.
    """

    def __init__(self, params: Optional[AtmosphereParameters] = None):
        """
        Initialize the atmosphere model.

        Args:
            params: Atmosphere parameters. Uses Earth defaults if None.
        """
        self.params = params or AtmosphereParameters.earth_default()
        self._planet_center = self.params.planet_center

        p = self.params
        # Extinction per (Rayleigh, Mie, ozone) optical depth component
        self._extinction = np.stack([
            p.rayleigh_scattering,
            p.mie_scattering * p.mie_absorption_factor,
            p.ozone_absorption,
        ])

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def planet_intersection(self, ray_start, ray_dir) -> np.ndarray:
        return sphere_intersection(ray_start, ray_dir, self._planet_center, self.params.planet_radius)

    def atmosphere_intersection(self, ray_start, ray_dir) -> np.ndarray:
        return sphere_intersection(ray_start, ray_dir, self._planet_center, self.params.top_radius)

    def atmosphere_height(self, position) -> np.ndarray:
        """Altitude above the planet surface of a world space position."""
        return distance(np.asarray(position, dtype=np.float64), self._planet_center) - self.params.planet_radius

    # ------------------------------------------------------------------
    # Density
    # ------------------------------------------------------------------

    def _get_profile_density(self, layers: Sequence[DensityProfileLayer], altitude) -> np.ndarray:
        """Get density at altitude for a density profile (multiple layers).
        Supports both scalar and array inputs."""
        altitude = np.asarray(altitude, dtype=np.float64)
        if not layers:
            return np.zeros_like(altitude)

        result = np.zeros_like(altitude)
        last = len(layers) - 1
        layer_bottom = 0.0
        for i, layer in enumerate(layers):
            # First layer extends below ground, top layer to infinity
            layer_mask = np.ones(altitude.shape, dtype=bool)
            if i > 0:
                layer_mask &= altitude >= layer_bottom
            if i < last:
                layer_mask &= altitude < layer_bottom + layer.width
            result = np.where(layer_mask, layer.get_density(altitude), result)
            layer_bottom += layer.width
        return result

    def atmosphere_density(self, altitude) -> np.ndarray:
        """Relative (Rayleigh, Mie, ozone) densities, shape (..., 3)."""
        p = self.params
        return np.stack([
            self._get_profile_density(p.rayleigh_density, altitude),
            self._get_profile_density(p.mie_density, altitude),
            self._get_profile_density(p.ozone_density, altitude),
        ], axis=-1)

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def integrate_optical_depth(self, ray_start, ray_dir) -> np.ndarray:
        """
        Integrate density from ray_start toward the edge of the atmosphere.

        Midpoint rule with a fixed number of equal steps.

        Returns:
            Optical depth per (Rayleigh, Mie, ozone), shape (..., 3)
        """
        ray_start = np.asarray(ray_start, dtype=np.float64)
        ray_dir = np.asarray(ray_dir, dtype=np.float64)

        ray_length = np.maximum(self.atmosphere_intersection(ray_start, ray_dir)[..., 1], 0.0)
        sample_count = self.params.optical_depth_sample_count
        step_size = ray_length / sample_count

        optical_depth = np.zeros(np.broadcast(ray_start, ray_dir).shape, dtype=np.float64)
        for i in range(sample_count):
            local_position = ray_start + ray_dir * _expand((i + 0.5) * step_size)
            local_height = self.atmosphere_height(local_position)
            optical_depth += self.atmosphere_density(local_height) * _expand(step_size)

        return optical_depth

    def absorb(self, optical_depth) -> np.ndarray:
        """Transmittance per RGB channel for a (Rayleigh, Mie, ozone) optical depth."""
        optical_depth = np.asarray(optical_depth, dtype=np.float64)
        absorption = optical_depth @ self._extinction
        return np.exp(-absorption * self.params.atmosphere_density)

    def integrate_scattering(
        self,
        ray_start,
        ray_dir,
        ray_length,
        light_dir,
        light_color,
    ) -> np.ndarray:
        """
        March a view ray through the atmosphere and accumulate inscattered light.

        Samples are distributed non uniformly, bunched near the observer when it
        stands close to the ground where density changes fastest.

        Args:
            ray_start: Ray origin(s) in world space
            ray_dir: Unit view direction(s)
            ray_length: Maximum ray length(s), np.inf for no occluder
            light_dir: Unit direction(s) toward the light
            light_color: Linear RGB light color(s)

        Returns:
            Raw linear radiance, shape (..., 3). The view ray transmittance is
            not applied.
        """
        p = self.params
        ray_start = np.asarray(ray_start, dtype=np.float64)
        ray_dir = np.asarray(ray_dir, dtype=np.float64)
        light_dir = np.asarray(light_dir, dtype=np.float64)
        light_color = np.asarray(light_color, dtype=np.float64)

        ray_height = self.atmosphere_height(ray_start)
        sample_distribution_exponent = 1.0 + saturate(1.0 - ray_height / p.atmosphere_height) * 8.0

        intersection = self.atmosphere_intersection(ray_start, ray_dir)
        entry = intersection[..., 0]
        length = np.minimum(ray_length, intersection[..., 1])
        outside = entry > 0.0
        start = ray_start + ray_dir * _expand(np.where(outside, entry, 0.0))
        length = np.where(outside, length - entry, length)
        # Rays missing the shell leave nothing to integrate
        length = np.maximum(length, 0.0)

        costh = dot(ray_dir, light_dir)
        phase_r = phase_rayleigh(costh)
        phase_m = phase_mie(costh, p.mie_phase_function_g, p.mie_phase_function_g_max)

        sample_count = p.scattering_sample_count
        shape = np.broadcast(start, ray_dir, light_dir).shape

        optical_depth = np.zeros(shape, dtype=np.float64)
        rayleigh = np.zeros(shape, dtype=np.float64)
        mie = np.zeros(shape, dtype=np.float64)

        prev_ray_time = np.zeros_like(length)

        for i in range(sample_count):
            ray_time = np.power(i / sample_count, sample_distribution_exponent) * length
            step_size = ray_time - prev_ray_time

            local_position = start + ray_dir * _expand(ray_time)
            local_height = self.atmosphere_height(local_position)
            local_density = self.atmosphere_density(local_height) * _expand(step_size)

            optical_depth += local_density

            optical_depth_light = self.integrate_optical_depth(local_position, light_dir)
            light_transmittance = self.absorb(optical_depth + optical_depth_light)

            rayleigh += light_transmittance * _expand(phase_r * local_density[..., 0])
            mie += light_transmittance * _expand(phase_m * local_density[..., 1])

            prev_ray_time = ray_time

        return (rayleigh * p.rayleigh_scattering + mie * p.mie_scattering) * light_color


# Built at import, read only afterwards
_default_model = AtmosphereModel()


def get_model() -> AtmosphereModel:
    """Get the shared Earth default model."""
    return _default_model
