"""
Daybreak - Sun direction, sun color and sky color for a place and a local time.

Solar positions come from the NREL Solar Position Algorithm (pvlib); colors
come from a single scattering atmosphere (Rayleigh, Mie, ozone) integrated
along the view ray.
"""

__version__ = "1.0.0"

from . import core
from .models import GeoLocation, LinearColor, ObservationMoment, SunEvent
from .solar import sun_direction, sun_event_time, sunrise_time, sunset_time
from .sky import NIGHT_BLUE, sky_colors, sun_color, sun_ui_color
from .world import exposure, get_sky_properties
