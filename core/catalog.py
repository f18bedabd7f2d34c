"""
Catalog Filter

Picks the fish worth showing at one stop for the current bait.

A fish is a target when it is recommended, can appear at this time of day,
and can actually be hooked: it is a mooch, or needs no specific bait, or
needs exactly the spectral bait of this stop. Targets are sorted by their
earliest bite time; ties keep catalog order (sorted() is stable).
"""

from typing import Iterable, List, Mapping, Sequence

from data import (
    BAIT_TABLE,
    FISH_CATALOG,
    LOCATIONS,
    BaitSet,
    FishEntry,
    RouteStop,
    StopInfo,
    TimeOfDay,
)
from core.exceptions import CatalogLookupError


def is_target(entry: FishEntry, time_of_day: TimeOfDay, spectral_bait: str) -> bool:
    """Eligibility rule for one catalog entry"""
    if not entry.is_recommended:
        return False
    if entry.time_of_day is not None and entry.time_of_day != time_of_day:
        return False
    return entry.is_mooch or not (entry.is_bait_required and entry.bait != spectral_bait)


def fish_targets(
    location: str,
    time_of_day: TimeOfDay,
    catalog: Mapping[str, Sequence[FishEntry]] = FISH_CATALOG,
    bait_table: Mapping[str, BaitSet] = BAIT_TABLE,
) -> StopInfo:
    """Build the filtered stop info for a location and time of day

    Raises:
        CatalogLookupError: location missing from the catalog or bait table
    """
    try:
        fish = catalog[location]
        baits = bait_table[location]
    except KeyError as e:
        raise CatalogLookupError(f"No catalog data for {location} ({time_of_day})") from e

    spectral_bait = baits.for_time(time_of_day)
    targets = [f for f in fish if is_target(f, time_of_day, spectral_bait)]

    return StopInfo(
        name=RouteStop(location, time_of_day).display_name,
        bait=baits.default,
        spectral_bait=spectral_bait,
        targets=tuple(sorted(targets, key=lambda f: f.min_time)),
    )


def route_stops_info(
    route: Iterable[RouteStop],
    catalog: Mapping[str, Sequence[FishEntry]] = FISH_CATALOG,
    bait_table: Mapping[str, BaitSet] = BAIT_TABLE,
) -> List[StopInfo]:
    """Stop info for every stop of a route, in voyage order"""
    return [
        fish_targets(stop.location, stop.time_of_day, catalog, bait_table)
        for stop in route
    ]


def all_stops_info(
    locations: Iterable[str] = LOCATIONS,
    catalog: Mapping[str, Sequence[FishEntry]] = FISH_CATALOG,
    bait_table: Mapping[str, BaitSet] = BAIT_TABLE,
) -> List[StopInfo]:
    """Every location at every time of day (debug view)"""
    return [
        fish_targets(location, time_of_day, catalog, bait_table)
        for location in locations
        for time_of_day in TimeOfDay
    ]
