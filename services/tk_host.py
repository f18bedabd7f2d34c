# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Services Module - Tk host bridge for the session

"""
Connects an OceanFishingSession to a Tk main loop.

    now()            -> time.monotonic()
    request_frame()  -> root.after(frame_interval_ms, callback)
    publish()        -> renderer(snapshot)

pump() runs on the Tk thread every pump_interval_ms and feeds queued
tailer notifications to the session, so the session is only ever touched
from the GUI thread.
"""

import logging
import time
from typing import Callable, Optional

from core.session import HostBridge
from core.snapshot import SessionSnapshot
from services.log_tailer import LINE, ZONE

logger = logging.getLogger("OceanFishing")

# Upper bound per pump so a burst of log lines can't starve repaints
MAX_NOTIFICATIONS_PER_PUMP = 500


class TkHostBridge(HostBridge):
    """HostBridge backed by a Tk root's after() scheduler"""

    def __init__(
        self,
        root,
        renderer: Optional[Callable[[SessionSnapshot], None]] = None,
        tailer=None,
        frame_interval_ms: int = 16,
        pump_interval_ms: int = 50,
    ):
        self.root = root
        self.renderer = renderer
        self.tailer = tailer
        self.frame_interval_ms = frame_interval_ms
        self.pump_interval_ms = pump_interval_ms
        self.session = None
        self._pumping = False

    # ========== HostBridge ==========

    def now(self) -> float:
        return time.monotonic()

    def request_frame(self, callback: Callable[[], None]) -> None:
        self.root.after(self.frame_interval_ms, callback)

    def publish(self, snapshot: SessionSnapshot) -> None:
        if self.renderer is not None:
            self.renderer(snapshot)

    # ========== Notification pump ==========

    def attach(self, session):
        """Session that receives pumped notifications"""
        self.session = session

    def start_pump(self):
        if self._pumping:
            return
        self._pumping = True
        self.root.after(self.pump_interval_ms, self._pump)

    def stop_pump(self):
        self._pumping = False

    def dispatch(self, kind: str, payload) -> None:
        """Deliver one tailer notification to the session"""
        if self.session is None:
            return
        if kind == LINE:
            self.session.on_log_line(payload)
        elif kind == ZONE:
            self.session.on_zone_change(payload)
        else:
            logger.debug(f"Unknown notification kind: {kind}")

    def _pump(self):
        if not self._pumping:
            return
        if self.tailer is not None:
            for kind, payload in self.tailer.drain(MAX_NOTIFICATIONS_PER_PUMP):
                self.dispatch(kind, payload)
        self.root.after(self.pump_interval_ms, self._pump)
