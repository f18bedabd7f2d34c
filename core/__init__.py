"""
Core Module - Ocean Fishing Session Logic

This module holds everything that decides WHAT the overlay shows, with no:
- GUI logic
- Log file reading
- Timers or threads of its own

Components:
    - events: classify_line() and the ordered pattern table
    - schedule: current_route() from wall-clock time
    - catalog: fish_targets() filter per stop
    - session: OceanFishingSession and the pure transition functions
    - snapshot: read-only SessionSnapshot for the renderer
    - state: CastPhase enum and SessionState value
    - exceptions: Custom exceptions

Usage:
    from core import OceanFishingSession, HostBridge

    session = OceanFishingSession(host)
    session.on_zone_change(zone_id)
    session.on_log_line(raw_line)

Design Principles:
    - Dependency injection only (host bridge, tables, scorer)
    - Pure transition functions, one dispatch point
    - Deterministic under a fake clock
"""

from core.state import CastPhase, SessionState
from core.exceptions import (
    OverlayException,
    CatalogLookupError,
    SessionStateError,
    LogSourceError,
)
from core.events import FishingEvent, classify_line
from core.schedule import current_route, route_index
from core.catalog import fish_targets, route_stops_info, all_stops_info
from core.snapshot import SessionSnapshot, TargetView, build_snapshot
from core.session import (
    HostBridge,
    OceanFishingSession,
    apply_event,
    tick,
    enter_zone,
    leave_zone,
)

__all__ = [
    'CastPhase',
    'SessionState',
    'OverlayException',
    'CatalogLookupError',
    'SessionStateError',
    'LogSourceError',
    'FishingEvent',
    'classify_line',
    'current_route',
    'route_index',
    'fish_targets',
    'route_stops_info',
    'all_stops_info',
    'SessionSnapshot',
    'TargetView',
    'build_snapshot',
    'HostBridge',
    'OceanFishingSession',
    'apply_event',
    'tick',
    'enter_zone',
    'leave_zone',
]
