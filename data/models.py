# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Static record types for the route schedule, bait table and fish catalog

"""
Immutable records shared by the static tables and the core.

Nothing in here is ever mutated after import. The session and the catalog
filter only select and copy these values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TimeOfDay(Enum):
    """Time of day at a voyage stop"""

    DAY = "day"
    SUNSET = "sunset"
    NIGHT = "night"

    def __str__(self):
        return self.value

    @property
    def title(self):
        """Display form used in stop names (Day / Sunset / Night)"""
        return self.value[0].upper() + self.value[1:]


@dataclass(frozen=True)
class RouteStop:
    """One (location, time of day) stop of a voyage"""

    location: str
    time_of_day: TimeOfDay

    @property
    def display_name(self) -> str:
        return f"{self.location} ({self.time_of_day.title})"


Route = Tuple[RouteStop, ...]


@dataclass(frozen=True)
class BaitSet:
    """Default bait of a location plus its spectral bait per time of day"""

    default: str
    day: str
    sunset: str
    night: str

    def for_time(self, time_of_day: TimeOfDay) -> str:
        return getattr(self, time_of_day.value)


@dataclass(frozen=True)
class FishEntry:
    """
    A catalog fish.

    min_time / max_time are seconds since the cast (inclusive bounds).
    bait is only meaningful when is_bait_required is set.
    """

    name: str
    min_time: float
    max_time: float
    tug: int
    points: int
    max_dh: int = 1
    bait: Optional[str] = None
    is_bait_required: bool = False
    is_mooch: bool = False
    is_recommended: bool = True
    time_of_day: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class StopInfo:
    """Filtered view of one stop: display name, baits and ordered targets"""

    name: str
    bait: str
    spectral_bait: str
    targets: Tuple[FishEntry, ...]
