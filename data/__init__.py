# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Static data tables: route schedule, bait table, fish catalog, zone IDs

from .models import TimeOfDay, RouteStop, Route, BaitSet, FishEntry, StopInfo
from .routes import (
    LOCATIONS,
    ROUTE_PATTERNS,
    ROUTE_SCHEDULE,
    ROUTE_ANCHOR,
    ROUTE_ANCHOR_OFFSET,
)
from .bait import BAIT_TABLE
from .fish import FISH_CATALOG, SCORERS, DEFAULT_SCORER, DEFAULT_SCORING_METHOD
from .zones import OCEAN_FISHING_ZONE_IDS

__all__ = [
    "TimeOfDay",
    "RouteStop",
    "Route",
    "BaitSet",
    "FishEntry",
    "StopInfo",
    "LOCATIONS",
    "ROUTE_PATTERNS",
    "ROUTE_SCHEDULE",
    "ROUTE_ANCHOR",
    "ROUTE_ANCHOR_OFFSET",
    "BAIT_TABLE",
    "FISH_CATALOG",
    "SCORERS",
    "DEFAULT_SCORER",
    "DEFAULT_SCORING_METHOD",
    "OCEAN_FISHING_ZONE_IDS",
]
