"""
Daybreak Solar - Sun direction and sunrise/sunset times from the NREL SPA.

Solar positions come from pvlib's implementation of the Solar Position
Algorithm. Directions use a right handed, Y up frame where +Z points north
and +X east, so an azimuth of 90 degrees (east) maps to +X.
"""

from datetime import date, datetime
from typing import Optional, Tuple

import numpy as np
import pandas as pd
from pvlib import solarposition, spa

from .core.vecmath import HALF_PI, radians
from .models import GeoLocation, ObservationMoment, SunEvent

# Fixed delta T (seconds) for rise/set queries
SUN_EVENT_DELTA_T = 68.0


def direction_from_angles(zenith_deg: float, azimuth_deg: float) -> np.ndarray:
    """Convert a zenith/azimuth pair (degrees) to a unit direction toward the sun."""
    elevation = HALF_PI - radians(zenith_deg)
    azimuth = radians(azimuth_deg)
    return np.array([
        np.cos(elevation) * np.sin(azimuth),
        np.sin(elevation),
        np.cos(elevation) * np.cos(azimuth),
    ])


def sun_angles(location: GeoLocation, when: datetime) -> Tuple[float, float]:
    """
    Topocentric sun zenith and azimuth for a timezone aware timestamp.

    Args:
        location: Observer position, elevation in meters
        when: Timezone aware timestamp

    Returns:
        (zenith, azimuth) in degrees, without atmospheric refraction
    """
    delta_t = float(spa.calculate_deltat(when.year, when.month))
    position = solarposition.spa_python(
        time=pd.DatetimeIndex([when]),
        latitude=location.latitude,
        longitude=location.longitude,
        altitude=location.elevation,
        delta_t=delta_t,
    )
    return float(position['zenith'].iloc[0]), float(position['azimuth'].iloc[0])


def sun_direction(location: GeoLocation, moment: ObservationMoment) -> np.ndarray:
    """Unit vector pointing at the sun for a location and local clock time."""
    zenith, azimuth = sun_angles(location, moment.local_datetime())
    return direction_from_angles(zenith, azimuth)


def sun_event_time(
    location: GeoLocation,
    timezone: str,
    event: SunEvent,
    reference_date: Optional[date] = None,
) -> float:
    """
    Local clock time of sunrise or sunset as a fractional hour.

    When the sun does not rise or set on that day (polar day or night) a fixed
    time is returned instead: 6.5 for sunrise, 18.5 for sunset.

    pvlib solves the events for the UTC day carrying the reference date, not
    the calendar day of the zone. Far from UTC the event found may belong to
    the neighbouring local day, which moves the returned clock time by about
    a minute at most.

    Args:
        location: Observer position (elevation is ignored)
        timezone: IANA zone name the result is expressed in
        event: SunEvent.SUNRISE or SunEvent.SUNSET
        reference_date: Calendar day, the system date if None

    Returns:
        hour + minute / 60 in the given zone
    """
    midnight = ObservationMoment(0.0, timezone, reference_date).local_datetime()
    events = solarposition.sun_rise_set_transit_spa(
        pd.DatetimeIndex([midnight]),
        location.latitude,
        location.longitude,
        delta_t=SUN_EVENT_DELTA_T,
    )

    event_time = events[event.column].iloc[0]
    if pd.isna(event_time):
        print(f"[Daybreak] No {event.column} on {midnight.date()} at "
              f"({location.latitude}, {location.longitude}), using {event.fallback_hour:.2f}h")
        return event.fallback_hour

    local_time = pd.Timestamp(event_time).tz_convert(midnight.tzinfo)
    return local_time.hour + local_time.minute / 60.0


def sunrise_time(location: GeoLocation, timezone: str, reference_date: Optional[date] = None) -> float:
    return sun_event_time(location, timezone, SunEvent.SUNRISE, reference_date)


def sunset_time(location: GeoLocation, timezone: str, reference_date: Optional[date] = None) -> float:
    return sun_event_time(location, timezone, SunEvent.SUNSET, reference_date)
