"""
Daybreak Wake-up Calls - Alarm records and the sky state they display.

A WakeupCall is a plain mutable record. Interested parties (a UI card, a sky
view) register a listener and are told which field changed, then recompute
the sun direction and color themselves.
"""

from datetime import date
from typing import Callable, List, Optional

import numpy as np

from . import sky, solar
from .models import GeoLocation, LinearColor, ObservationMoment

Listener = Callable[['WakeupCall', str, object, object], None]

_UNSET = object()


class WakeupCall:
    """
    A wake-up call at a local time and place.

    Attributes:
        id: Stable identifier
        enabled: Whether the alarm is armed
        time: Local fractional hour of day
        location: Where the sky is computed
        timezone: IANA zone name
        name: Display name
    """

    OBSERVED_FIELDS = ('enabled', 'time', 'location', 'timezone', 'name')

    def __init__(
        self,
        id: int,
        enabled: bool,
        time: float,
        location: GeoLocation,
        timezone: str,
        name: str,
    ):
        object.__setattr__(self, '_listeners', [])
        self.id = id
        self.enabled = enabled
        self.time = time
        self.location = location
        self.timezone = timezone
        self.name = name

    def __setattr__(self, name, value):
        old = self.__dict__.get(name, _UNSET)
        super().__setattr__(name, value)
        if name in self.OBSERVED_FIELDS and old is not _UNSET and old != value:
            for listener in list(self._listeners):
                listener(self, name, old, value)

    def __repr__(self):
        return (f"WakeupCall(id={self.id}, name={self.name!r}, time={self.time:.2f}, "
                f"enabled={self.enabled})")

    def add_listener(self, listener: Listener) -> None:
        """Call listener(call, field, old, new) whenever an observed field changes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def moment(self, reference_date: Optional[date] = None) -> ObservationMoment:
        return ObservationMoment(self.time, self.timezone, reference_date)

    def sun_direction(self, reference_date: Optional[date] = None) -> np.ndarray:
        return solar.sun_direction(self.location, self.moment(reference_date))

    def sun_color(self, reference_date: Optional[date] = None) -> LinearColor:
        return sky.sun_color(self.sun_direction(reference_date))

    def sun_ui_color(self, reference_date: Optional[date] = None) -> LinearColor:
        direction = self.sun_direction(reference_date)
        return sky.sun_ui_color(direction, sky.sun_color(direction))


MOUNTAIN_VIEW = GeoLocation(37.45, -122.18, 10.0)
PARIS = GeoLocation(48.85, 2.35, 30.0)
REYKJAVIK = GeoLocation(64.15, -21.95, 60.0)


def default_wakeup_calls(reference_date: Optional[date] = None) -> List[WakeupCall]:
    """Sample wake-up calls, two of them pinned to the Paris sunset and sunrise."""
    paris_sunset = solar.sunset_time(PARIS, "Europe/Paris", reference_date)
    paris_sunrise = solar.sunrise_time(PARIS, "Europe/Paris", reference_date)

    return [
        WakeupCall(0, True, 10.50, MOUNTAIN_VIEW, "America/Los_Angeles", "Mountain View"),
        WakeupCall(2, True, paris_sunset - 0.3, PARIS, "Europe/Paris", "Paris"),
        WakeupCall(3, False, paris_sunrise + 1.5, PARIS, "Europe/Paris", "Paris"),
        WakeupCall(4, True, 5.84, REYKJAVIK, "Atlantic/Reykjavik", "Reykjavík"),
        WakeupCall(5, False, 15.75, MOUNTAIN_VIEW, "America/Los_Angeles", "Mountain View"),
    ]
