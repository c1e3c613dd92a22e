"""
Daybreak Constants - Physical and sampling constants for the atmosphere model.

Earth-like planet with the observer standing on the surface at the world origin.
All distances are in meters, scattering coefficients in m^-1.
"""

import numpy as np

# Sample counts
SCATTERING_SAMPLE_COUNT = 32
OPTICAL_DEPTH_SAMPLE_COUNT = 8

# Exposure applied to raw scattering before tone mapping
EXPOSURE = 40.0

# Planet geometry
PLANET_RADIUS = 6_371_000.0
ATMOSPHERE_HEIGHT = 100_000.0
ATMOSPHERE_DENSITY = 1.0

# Scale heights
RAYLEIGH_SCALE_HEIGHT = ATMOSPHERE_HEIGHT * 0.080  # 8 km
MIE_SCALE_HEIGHT = ATMOSPHERE_HEIGHT * 0.012       # 1.2 km

# Ozone layer (tent profile)
OZONE_CENTER_ALTITUDE = 25_000.0
OZONE_WIDTH = 15_000.0

# Per channel (R, G, B) coefficients
_EPS = 1e-6
RAYLEIGH_SCATTERING_COEFFICIENTS = np.array([5.802, 13.558, 33.100]) * _EPS
MIE_SCATTERING_COEFFICIENTS = np.array([3.996, 3.996, 3.996]) * _EPS
OZONE_ABSORPTION_COEFFICIENTS = np.array([0.650, 1.881, 0.085]) * _EPS

# Extra extinction applied to Mie when computing transmittance
MIE_ABSORPTION_FACTOR = 1.1

# Mie phase function
MIE_PHASE_FUNCTION_G = 0.85
MIE_PHASE_FUNCTION_G_MAX = 0.9381
# Largest |g| keeping the Schlick k below 1, where the phase stays positive
MIE_PHASE_FUNCTION_G_LIMIT = 0.93
