"""
OceanFishingSession - Session State Machine

The session turns classified log events and zone changes into the live
snapshot the overlay paints.

Responsibilities:
    - Own the SessionState (cast phase, timer, route cursor, zone gate)
    - Derive the active route on entry into the activity
    - Run the elapsed-cast tick loop through the host's frame scheduler
    - Publish a snapshot after every state change

What it does NOT do:
    - Read log files or watch zones (host pushes them in)
    - Paint anything (host receives snapshots)
    - Own a clock or a timer thread (host supplies now() and frames)

Design:
    - All transitions go through apply_event() / tick() / enter_zone() /
      leave_zone(), pure functions of (state, input) -> state
    - One lock around every transition, so a notification is applied whole
    - The tick loop re-checks "casting AND active" on every frame and simply
      stops rescheduling once that fails; there is no cancel handle

Usage:
    session = OceanFishingSession(host)
    session.on_zone_change(900)
    session.on_log_line(raw_line)
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable, List, Optional

from data import (
    BAIT_TABLE,
    DEFAULT_SCORER,
    FISH_CATALOG,
    OCEAN_FISHING_ZONE_IDS,
    ROUTE_ANCHOR,
    ROUTE_ANCHOR_OFFSET,
    ROUTE_SCHEDULE,
    Route,
    StopInfo,
)
from core.catalog import route_stops_info
from core.events import FishingEvent, classify_line
from core.schedule import current_route
from core.snapshot import BITE_LEAD_BIAS, SessionSnapshot, build_snapshot
from core.state import CastPhase, SessionState


class HostBridge(ABC):
    """
    What the session needs from its host.

    now() is in seconds and only differences matter. request_frame()
    schedules one callback for the next display refresh.
    """

    @abstractmethod
    def now(self) -> float:
        ...

    @abstractmethod
    def request_frame(self, callback: Callable[[], None]) -> None:
        ...

    @abstractmethod
    def publish(self, snapshot: SessionSnapshot) -> None:
        ...


# ========== TRANSITIONS ==========


def _start_cast(state: SessionState, now: float, spectral: bool, mooch: bool) -> SessionState:
    return replace(
        state,
        cast_phase=CastPhase.CASTING,
        is_spectral=spectral,
        is_mooch=mooch,
        cast_start=now,
        elapsed=0.0,
    )


def apply_event(
    state: SessionState, event: Optional[FishingEvent], now: float
) -> SessionState:
    """Next state for one classified event (None leaves the state as is)"""
    if event is None:
        return state

    if event is FishingEvent.AREA_CHANGE:
        if not state.is_active:
            return state
        return replace(state, route_cursor=state.route_cursor + 1)

    if event is FishingEvent.CAST:
        return _start_cast(state, now, spectral=False, mooch=False)

    if event is FishingEvent.SPECTRAL_CAST:
        return _start_cast(state, now, spectral=True, mooch=False)

    if event is FishingEvent.MOOCH:
        return _start_cast(state, now, spectral=state.is_spectral, mooch=True)

    if event.ends_cast:
        # Timer stops; last elapsed value stays for display
        return replace(state, cast_phase=CastPhase.IDLE)

    return state


TENTH = Decimal("0.1")


def round_tenths(seconds: float) -> float:
    """Round to tenths with ties going up (2.25 -> 2.3)"""
    return float(Decimal(seconds).quantize(TENTH, rounding=ROUND_HALF_UP))


def tick(state: SessionState, now: float) -> SessionState:
    """Recompute elapsed cast time (tenths of a second, never decreasing)"""
    if not state.should_tick:
        return state
    elapsed = round_tenths(now - state.cast_start)
    return replace(state, elapsed=max(state.elapsed, elapsed))


def enter_zone(state: SessionState) -> SessionState:
    """Entering the activity resets the whole session"""
    return SessionState(is_active=True)


def leave_zone(state: SessionState) -> SessionState:
    """Leaving only drops the gate; cast state is left as is"""
    return replace(state, is_active=False)


# ========== SESSION ==========


class OceanFishingSession:
    """
    Stateful driver around the transition functions.

    Owns the SessionState, the active route and its filtered stops, and
    the tick loop. Everything external comes in through the HostBridge.
    """

    def __init__(
        self,
        host: HostBridge,
        zone_ids: Iterable[int] = OCEAN_FISHING_ZONE_IDS,
        anchor: datetime = ROUTE_ANCHOR,
        anchor_offset: int = ROUTE_ANCHOR_OFFSET,
        patterns=ROUTE_SCHEDULE,
        catalog=FISH_CATALOG,
        bait_table=BAIT_TABLE,
        scorer=DEFAULT_SCORER,
        lead_bias: float = BITE_LEAD_BIAS,
        wall_clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
        callbacks: Optional[dict] = None,
    ):
        """
        Initialize the session with its host and static tables.

        Args:
            host: HostBridge supplying clock, frames and snapshot sink
            zone_ids: Zone IDs that count as the ocean fishing activity
            anchor: Route rotation anchor instant
            anchor_offset: Rotation slot of the anchor instant
            patterns: Route rotation list
            catalog: Fish catalog per location
            bait_table: BaitSet per location
            scorer: Point scorer for target rows
            lead_bias: Seconds subtracted from bite window bounds
            wall_clock: Returns the current datetime (route selection)
            logger: Optional logger for session events
            callbacks: Optional dict of callbacks:
                - on_event: (event) -> None
                - on_zone_change: (zone_id, is_active) -> None
                - on_error: (exception) -> None
        """
        self._host = host
        self._zone_ids = frozenset(zone_ids)
        self._anchor = anchor
        self._anchor_offset = anchor_offset
        self._patterns = patterns
        self._catalog = catalog
        self._bait_table = bait_table
        self._scorer = scorer
        self._lead_bias = lead_bias
        self._wall_clock = wall_clock or (lambda: datetime.now(timezone.utc))
        self._logger = logger or logging.getLogger("OceanFishing")
        self._callbacks = callbacks or {}

        self._lock = threading.RLock()
        self._state = SessionState()
        self._tick_pending = False
        self._route: Route = ()
        self._stops: List[StopInfo] = []
        self._load_route()

    # ========== PUBLIC API ==========

    def on_log_line(self, raw_line: str) -> Optional[FishingEvent]:
        """
        Handle one raw log line.

        Returns:
            The classified event, or None for an ignored line
        """
        event = classify_line(raw_line)
        if event is None:
            return None

        with self._lock:
            old_state = self._state
            self._state = apply_event(old_state, event, self._host.now())
            if self._state == old_state:
                return event
            snapshot = self._build_snapshot()
            start_ticking = event.starts_cast and self._claim_tick()

        self._logger.debug(f"Event {event}: {old_state.cast_phase} -> {self._state.cast_phase}")
        self._run_callback("on_event", event)
        self._publish(snapshot)
        if start_ticking:
            self._host.request_frame(self._on_frame)
        return event

    def on_zone_change(self, zone_id: int):
        """Handle a zone transition (called for every zone, not just ours)"""
        is_ocean = zone_id in self._zone_ids

        with self._lock:
            if is_ocean and not self._state.is_active:
                self._load_route()
                self._state = enter_zone(self._state)
                self._logger.info(
                    f"Entered ocean fishing (zone {zone_id}): "
                    + " -> ".join(stop.name for stop in self._stops)
                )
            elif not is_ocean and self._state.is_active:
                self._state = leave_zone(self._state)
                self._logger.info(f"Left ocean fishing (zone {zone_id})")
            is_active = self._state.is_active
            snapshot = self._build_snapshot()

        self._run_callback("on_zone_change", zone_id, is_active)
        self._publish(snapshot)

    def start_cast(self, spectral: bool = True):
        """Start a cast without a log line (debug view)"""
        event = FishingEvent.SPECTRAL_CAST if spectral else FishingEvent.CAST
        with self._lock:
            self._state = apply_event(self._state, event, self._host.now())
            snapshot = self._build_snapshot()
            start_ticking = self._claim_tick()

        self._publish(snapshot)
        if start_ticking:
            self._host.request_frame(self._on_frame)

    def snapshot(self) -> SessionSnapshot:
        """Current snapshot (read-only)"""
        with self._lock:
            return self._build_snapshot()

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def route(self) -> Route:
        return self._route

    @property
    def stops(self) -> List[StopInfo]:
        return list(self._stops)

    @property
    def current_stop(self) -> StopInfo:
        """Stop selected by the route cursor (wraps past the last stop)"""
        with self._lock:
            return self._current_stop()

    @property
    def scorer(self):
        return self._scorer

    @property
    def lead_bias(self) -> float:
        return self._lead_bias

    # ========== INTERNAL ==========

    def _load_route(self):
        """Derive the route for the current wall-clock time"""
        self._route = current_route(
            self._wall_clock(), self._anchor, self._anchor_offset, self._patterns
        )
        self._stops = route_stops_info(self._route, self._catalog, self._bait_table)

    def _current_stop(self) -> StopInfo:
        return self._stops[self._state.route_cursor % len(self._stops)]

    def _build_snapshot(self) -> SessionSnapshot:
        """Must be called while holding _lock"""
        return build_snapshot(
            self._state, self._current_stop(), self._scorer, self._lead_bias
        )

    def _claim_tick(self) -> bool:
        """
        Mark a frame as pending if the loop should run and none is queued.

        Must be called while holding _lock.
        """
        if self._tick_pending or not self._state.should_tick:
            return False
        self._tick_pending = True
        return True

    def _on_frame(self):
        """Frame callback: tick, publish, reschedule while the guard holds"""
        with self._lock:
            self._tick_pending = False
            if not self._state.should_tick:
                return  # stale frame after a miss/bite/quit or zone exit
            self._state = tick(self._state, self._host.now())
            snapshot = self._build_snapshot()
            self._tick_pending = True

        self._publish(snapshot)
        self._host.request_frame(self._on_frame)

    def _publish(self, snapshot: SessionSnapshot):
        try:
            self._host.publish(snapshot)
        except Exception as e:
            self._logger.error(f"Snapshot publish error: {e}", exc_info=True)
            self._run_callback("on_error", e)

    def _run_callback(self, name: str, *args):
        if name not in self._callbacks:
            return
        try:
            self._callbacks[name](*args)
        except Exception as e:
            self._logger.error(f"Session callback '{name}' error: {e}")
