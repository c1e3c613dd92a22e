"""
Daybreak Parameters - Atmosphere parameter structures.
"""

from dataclasses import dataclass, field
from typing import List
import numpy as np

from .constants import (
    PLANET_RADIUS,
    ATMOSPHERE_HEIGHT,
    ATMOSPHERE_DENSITY,
    RAYLEIGH_SCALE_HEIGHT,
    MIE_SCALE_HEIGHT,
    OZONE_CENTER_ALTITUDE,
    OZONE_WIDTH,
    RAYLEIGH_SCATTERING_COEFFICIENTS,
    MIE_SCATTERING_COEFFICIENTS,
    OZONE_ABSORPTION_COEFFICIENTS,
    MIE_ABSORPTION_FACTOR,
    MIE_PHASE_FUNCTION_G,
    MIE_PHASE_FUNCTION_G_MAX,
    MIE_PHASE_FUNCTION_G_LIMIT,
    SCATTERING_SAMPLE_COUNT,
    OPTICAL_DEPTH_SAMPLE_COUNT,
    EXPOSURE,
)


@dataclass(frozen=True)
class DensityProfileLayer:
    """
    An atmosphere layer whose density is defined as:
        exp_term * exp(exp_scale * h) + linear_term * h + constant_term
    clamped to [0, 1], where h is the altitude in meters.

    Attributes:
        width: Layer width in meters (ignored for top layer)
        exp_term: Exponential term coefficient (unitless)
        exp_scale: Exponential scale in m^-1
        linear_term: Linear term coefficient in m^-1
        constant_term: Constant term (unitless)
    """
    width: float = 0.0
    exp_term: float = 0.0
    exp_scale: float = 0.0
    linear_term: float = 0.0
    constant_term: float = 0.0

    def get_density(self, altitude):
        """Compute density at given altitude within this layer."""
        # Exponent capped at 0: the exponential part saturates at exp_term
        density = (
            self.exp_term * np.exp(np.minimum(self.exp_scale * altitude, 0.0)) +
            self.linear_term * altitude +
            self.constant_term
        )
        return np.clip(density, 0.0, 1.0)


def exponential_profile(scale_height: float) -> List[DensityProfileLayer]:
    """Single layer exp(-h / H), saturating at 1 below the surface."""
    return [DensityProfileLayer(exp_term=1.0, exp_scale=-1.0 / scale_height)]


def tent_profile(center: float, half_width: float) -> List[DensityProfileLayer]:
    """Two linear layers peaking at 1 at `center` and reaching 0 at center +/- half_width."""
    return [
        # Below the peak
        DensityProfileLayer(
            width=center,
            linear_term=1.0 / half_width,
            constant_term=1.0 - center / half_width,
        ),
        # Above the peak
        DensityProfileLayer(
            linear_term=-1.0 / half_width,
            constant_term=1.0 + center / half_width,
        ),
    ]


def _array_field(values: np.ndarray):
    return field(default_factory=lambda: values.copy())


@dataclass
class AtmosphereParameters:
    """
    Complete parameters for the single-scattering atmosphere.

    All spatial values are in meters, coefficients in m^-1 and ordered
    (R, G, B). The planet center sits at (0, -planet_radius, 0) so that
    the world origin lies on the ground.
    """

    # Planet geometry
    planet_radius: float = PLANET_RADIUS
    atmosphere_height: float = ATMOSPHERE_HEIGHT
    atmosphere_density: float = ATMOSPHERE_DENSITY

    # Density profiles
    rayleigh_density: List[DensityProfileLayer] = field(
        default_factory=lambda: exponential_profile(RAYLEIGH_SCALE_HEIGHT)
    )
    mie_density: List[DensityProfileLayer] = field(
        default_factory=lambda: exponential_profile(MIE_SCALE_HEIGHT)
    )
    ozone_density: List[DensityProfileLayer] = field(
        default_factory=lambda: tent_profile(OZONE_CENTER_ALTITUDE, OZONE_WIDTH)
    )

    # Scattering / absorption coefficients
    rayleigh_scattering: np.ndarray = _array_field(RAYLEIGH_SCATTERING_COEFFICIENTS)
    mie_scattering: np.ndarray = _array_field(MIE_SCATTERING_COEFFICIENTS)
    ozone_absorption: np.ndarray = _array_field(OZONE_ABSORPTION_COEFFICIENTS)
    mie_absorption_factor: float = MIE_ABSORPTION_FACTOR

    # Mie phase function asymmetry
    mie_phase_function_g: float = MIE_PHASE_FUNCTION_G
    mie_phase_function_g_max: float = MIE_PHASE_FUNCTION_G_MAX

    # Integration
    scattering_sample_count: int = SCATTERING_SAMPLE_COUNT
    optical_depth_sample_count: int = OPTICAL_DEPTH_SAMPLE_COUNT

    # Tone mapping
    exposure: float = EXPOSURE

    def __post_init__(self):
        """Ensure arrays are numpy arrays and the geometry makes sense."""
        self.rayleigh_scattering = np.asarray(self.rayleigh_scattering, dtype=np.float64)
        self.mie_scattering = np.asarray(self.mie_scattering, dtype=np.float64)
        self.ozone_absorption = np.asarray(self.ozone_absorption, dtype=np.float64)

        if self.planet_radius <= 0.0 or self.atmosphere_height <= 0.0:
            raise ValueError(
                f"Planet radius and atmosphere height must be positive, got "
                f"{self.planet_radius} and {self.atmosphere_height}"
            )
        if self.scattering_sample_count < 1 or self.optical_depth_sample_count < 1:
            raise ValueError("Sample counts must be at least 1")
        if abs(self.mie_phase_function_g) > MIE_PHASE_FUNCTION_G_LIMIT:
            raise ValueError(
                f"Mie phase asymmetry must lie within +/-{MIE_PHASE_FUNCTION_G_LIMIT}, "
                f"got {self.mie_phase_function_g}"
            )

    @property
    def top_radius(self) -> float:
        """Radius of the outer atmosphere shell."""
        return self.planet_radius + self.atmosphere_height

    @property
    def planet_center(self) -> np.ndarray:
        return np.array([0.0, -self.planet_radius, 0.0])

    @classmethod
    def earth_default(cls, use_ozone: bool = True) -> 'AtmosphereParameters':
        """Create default Earth atmosphere parameters."""
        params = cls()
        if not use_ozone:
            params.ozone_absorption = np.zeros(3, dtype=np.float64)
        return params

    @classmethod
    def from_artistic_controls(
        cls,
        rayleigh_density_scale: float = 1.0,
        mie_density_scale: float = 1.0,
        mie_phase_g: float = MIE_PHASE_FUNCTION_G,
        rayleigh_height: float = RAYLEIGH_SCALE_HEIGHT,
        mie_height: float = MIE_SCALE_HEIGHT,
        use_ozone: bool = True,
        ozone_density: float = 1.0,
        exposure: float = EXPOSURE,
    ) -> 'AtmosphereParameters':
        """
        Create atmosphere parameters from artistic control values.

        Args:
            rayleigh_density_scale: Multiplier for air molecule density
            mie_density_scale: Multiplier for aerosol density
            mie_phase_g: Mie phase function asymmetry parameter
            rayleigh_height: Scale height for air molecules (meters)
            mie_height: Scale height for aerosols (meters)
            use_ozone: Include ozone absorption layer
            ozone_density: Multiplier for ozone absorption (affects sunset colors)
            exposure: Linear exposure applied before tone mapping
        """
        if rayleigh_height <= 0.0 or mie_height <= 0.0:
            raise ValueError("Scale heights must be positive")

        params = cls(
            rayleigh_density=exponential_profile(rayleigh_height),
            mie_density=exponential_profile(mie_height),
            rayleigh_scattering=RAYLEIGH_SCATTERING_COEFFICIENTS * rayleigh_density_scale,
            mie_scattering=MIE_SCATTERING_COEFFICIENTS * mie_density_scale,
            mie_phase_function_g=float(np.clip(mie_phase_g, -MIE_PHASE_FUNCTION_G_LIMIT, MIE_PHASE_FUNCTION_G_LIMIT)),
            exposure=exposure,
        )

        if not use_ozone or ozone_density <= 0:
            params.ozone_absorption = np.zeros(3, dtype=np.float64)
        else:
            params.ozone_absorption = OZONE_ABSORPTION_COEFFICIENTS * ozone_density

        return params
