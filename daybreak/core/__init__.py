"""
Daybreak Core - Vector math and the single scattering atmosphere model.
"""

from .constants import *
from .parameters import AtmosphereParameters, DensityProfileLayer
from .model import (
    AtmosphereModel,
    get_model,
    phase_mie,
    phase_rayleigh,
    sphere_intersection,
)
from . import vecmath
