"""
Daybreak Models - Value types passed between the solver, the sky service and callers.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo

import numpy as np

from .core.vecmath import fract


@dataclass(frozen=True)
class GeoLocation:
    """Observer position on the planet."""

    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive
    elevation: float = 0.0  # Meters above sea level


@dataclass(frozen=True)
class ObservationMoment:
    """A local wall clock time in a given time zone.

    Attributes:
        hour: Fractional hour of day in [0, 24); minutes come from the fraction
        timezone: IANA zone name ("Europe/Paris")
        reference_date: Calendar day the hour applies to, the system date if None
    """

    hour: float
    timezone: str
    reference_date: Optional[date] = None

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def local_date(self) -> date:
        """Calendar day of this moment, the system date when none is given."""
        if self.reference_date is not None:
            return self.reference_date
        return date.today()

    def local_datetime(self) -> datetime:
        """Timezone aware local timestamp for this moment.

        The hour is floored and the minute rounded from the fractional part;
        a minute rounding up to 60 carries into the next hour.
        """
        day = self.local_date()
        hours = math.floor(self.hour)
        minutes = round(fract(self.hour) * 60.0)
        midnight = datetime(day.year, day.month, day.day, tzinfo=self.tzinfo)
        return midnight + timedelta(hours=hours, minutes=minutes)


class SunEvent(Enum):
    """Daily sun events with the clock time used when the event does not occur."""

    SUNRISE = ("sunrise", 6.5)
    SUNSET = ("sunset", 18.5)

    def __init__(self, column: str, fallback_hour: float):
        self.column = column
        self.fallback_hour = fallback_hour


@dataclass(frozen=True)
class LinearColor:
    """RGBA color in the linear sRGB color space."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_array(cls, rgb, alpha: float = 1.0) -> 'LinearColor':
        r, g, b = (float(c) for c in np.asarray(rgb, dtype=np.float64)[:3])
        return cls(r, g, b, alpha)

    def to_array(self) -> np.ndarray:
        """RGB components as a float64 array (alpha dropped)."""
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    @property
    def luminance(self) -> float:
        """Rec. 709 relative luminance."""
        return 0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b
