"""
Route Scheduler

Voyages depart every two hours in a fixed rotation. The active route is a
pure function of wall-clock time:

    hours  = whole hours since the anchor (floored toward -inf)
    hours += 1 if hours is odd    # show the next route an hour early
    index  = (hours // 2 + anchor_offset) % len(patterns)

Flooring toward negative infinity keeps the odd-hour bump and the slot
division consistent for instants before the anchor; Python's modulo then
always yields a valid non-negative index.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from data import ROUTE_ANCHOR, ROUTE_ANCHOR_OFFSET, ROUTE_SCHEDULE, Route

SECONDS_PER_HOUR = 3600


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def whole_hours_between(now: datetime, anchor: datetime) -> int:
    """Whole hours from anchor to now, floored toward negative infinity"""
    delta = _as_utc(now) - _as_utc(anchor)
    return int(delta.total_seconds() // SECONDS_PER_HOUR)


def route_index(
    now: datetime,
    anchor: datetime = ROUTE_ANCHOR,
    anchor_offset: int = ROUTE_ANCHOR_OFFSET,
    pattern_count: int = len(ROUTE_SCHEDULE),
) -> int:
    """Index into the route rotation for the given instant"""
    hours = whole_hours_between(now, anchor)
    if hours % 2 == 1:
        hours += 1
    return (hours // 2 + anchor_offset) % pattern_count


def current_route(
    now: Optional[datetime] = None,
    anchor: datetime = ROUTE_ANCHOR,
    anchor_offset: int = ROUTE_ANCHOR_OFFSET,
    patterns: Sequence[Route] = ROUTE_SCHEDULE,
) -> Route:
    """Route shown for the given instant (defaults to now)"""
    if now is None:
        now = datetime.now(timezone.utc)
    return patterns[route_index(now, anchor, anchor_offset, len(patterns))]
