# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Voyage route patterns and the two-hour departure rotation

from datetime import datetime, timezone

from .models import RouteStop, TimeOfDay

DAY = TimeOfDay.DAY
SUNSET = TimeOfDay.SUNSET
NIGHT = TimeOfDay.NIGHT

GALADION_BAY = "Galadion Bay"
SOUTHERN_MERLTHOR = "Southern Merlthor"
NORTHERN_MERLTHOR = "Northern Merlthor"
RHOTANO_SEA = "Rhotano Sea"
CIELDALAES = "The Cieldalaes"
BLOODBRINE_SEA = "Bloodbrine Sea"
ROTHLYT_SOUND = "Rothlyt Sound"

LOCATIONS = (
    GALADION_BAY,
    SOUTHERN_MERLTHOR,
    NORTHERN_MERLTHOR,
    RHOTANO_SEA,
    CIELDALAES,
    BLOODBRINE_SEA,
    ROTHLYT_SOUND,
)

# Each voyage visits three stops; time of day advances one step per stop.
ROUTE_PATTERNS = {
    "merlthor_day": (
        RouteStop(GALADION_BAY, DAY),
        RouteStop(SOUTHERN_MERLTHOR, SUNSET),
        RouteStop(NORTHERN_MERLTHOR, NIGHT),
    ),
    "merlthor_sunset": (
        RouteStop(GALADION_BAY, SUNSET),
        RouteStop(SOUTHERN_MERLTHOR, NIGHT),
        RouteStop(NORTHERN_MERLTHOR, DAY),
    ),
    "merlthor_night": (
        RouteStop(GALADION_BAY, NIGHT),
        RouteStop(SOUTHERN_MERLTHOR, DAY),
        RouteStop(NORTHERN_MERLTHOR, SUNSET),
    ),
    "rhotano_day": (
        RouteStop(GALADION_BAY, DAY),
        RouteStop(SOUTHERN_MERLTHOR, SUNSET),
        RouteStop(RHOTANO_SEA, NIGHT),
    ),
    "rhotano_sunset": (
        RouteStop(GALADION_BAY, SUNSET),
        RouteStop(SOUTHERN_MERLTHOR, NIGHT),
        RouteStop(RHOTANO_SEA, DAY),
    ),
    "rhotano_night": (
        RouteStop(GALADION_BAY, NIGHT),
        RouteStop(SOUTHERN_MERLTHOR, DAY),
        RouteStop(RHOTANO_SEA, SUNSET),
    ),
    "bloodbrine_day": (
        RouteStop(CIELDALAES, DAY),
        RouteStop(NORTHERN_MERLTHOR, SUNSET),
        RouteStop(BLOODBRINE_SEA, NIGHT),
    ),
    "bloodbrine_sunset": (
        RouteStop(CIELDALAES, SUNSET),
        RouteStop(NORTHERN_MERLTHOR, NIGHT),
        RouteStop(BLOODBRINE_SEA, DAY),
    ),
    "bloodbrine_night": (
        RouteStop(CIELDALAES, NIGHT),
        RouteStop(NORTHERN_MERLTHOR, DAY),
        RouteStop(BLOODBRINE_SEA, SUNSET),
    ),
    "rothlyt_day": (
        RouteStop(CIELDALAES, DAY),
        RouteStop(RHOTANO_SEA, SUNSET),
        RouteStop(ROTHLYT_SOUND, NIGHT),
    ),
    "rothlyt_sunset": (
        RouteStop(CIELDALAES, SUNSET),
        RouteStop(RHOTANO_SEA, NIGHT),
        RouteStop(ROTHLYT_SOUND, DAY),
    ),
    "rothlyt_night": (
        RouteStop(CIELDALAES, NIGHT),
        RouteStop(RHOTANO_SEA, DAY),
        RouteStop(ROTHLYT_SOUND, SUNSET),
    ),
}

# Departure order, one entry per two-hour slot
ROUTE_SCHEDULE_KEYS = (
    "bloodbrine_day",
    "rothlyt_day",
    "merlthor_day",
    "rhotano_day",
    "bloodbrine_sunset",
    "rothlyt_sunset",
    "merlthor_sunset",
    "rhotano_sunset",
    "bloodbrine_night",
    "rothlyt_night",
    "merlthor_night",
    "rhotano_night",
)

ROUTE_SCHEDULE = tuple(ROUTE_PATTERNS[key] for key in ROUTE_SCHEDULE_KEYS)

# Departure slot that the anchor instant belongs to is ROUTE_ANCHOR_OFFSET
ROUTE_ANCHOR = datetime(2021, 11, 25, 0, 0, tzinfo=timezone.utc)
ROUTE_ANCHOR_OFFSET = 44
