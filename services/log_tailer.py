# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Services Module - Network Log Tailer

"""
Follows the newest ACT network log file and turns it into host notifications.

Only two record types are forwarded:
    00|<ts>|<actor id>|<actor name>|<message>|...   -> ("line", raw line)
    01|<ts>|<zone id, hex>|<zone name>|...          -> ("zone", decimal zone id)

The worker thread only reads and enqueues. Whoever owns the session (the
Tk host) drains the queue on its own thread, so every notification is
applied in file order on a single thread.
"""

import glob
import logging
import os
import queue
import threading
import time
from typing import List, Optional, Tuple

from core.exceptions import LogSourceError, SessionStateError
from utils.timing import interruptible_sleep

logger = logging.getLogger("OceanFishing")

LINE = "line"
ZONE = "zone"

DEFAULT_FILE_PATTERN = "Network_*.log"

# How far back to look for the last zone record when attaching to a file
ZONE_SCAN_BYTES = 1024 * 1024

# Seconds between checks for a newer log file (ACT rolls files daily)
ROLLOVER_CHECK_INTERVAL = 5.0


def parse_record(raw_line: str) -> Optional[Tuple[str, object]]:
    """Turn one log record into a notification, or None to skip it"""
    if raw_line.startswith("00|"):
        return (LINE, raw_line)
    if raw_line.startswith("01|"):
        fields = raw_line.split("|")
        if len(fields) < 3:
            return None
        try:
            return (ZONE, int(fields[2], 16))
        except ValueError:
            logger.debug(f"Unreadable zone record: {raw_line[:80]}")
            return None
    return None


def find_newest_log(log_dir: str, pattern: str = DEFAULT_FILE_PATTERN) -> Optional[str]:
    """Most recently modified log file in log_dir, or None"""
    candidates = glob.glob(os.path.join(log_dir, pattern))
    if not candidates:
        return None
    return max(candidates, key=os.path.getmtime)


def last_zone_in(path: str, scan_bytes: int = ZONE_SCAN_BYTES) -> Optional[int]:
    """Zone of the last zone record near the end of a log file"""
    try:
        with open(path, "rb") as f:
            f.seek(0, os.SEEK_END)
            size = f.tell()
            f.seek(max(0, size - scan_bytes))
            tail = f.read().decode("utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Cannot scan {path} for zone: {e}")
        return None

    for raw_line in reversed(tail.splitlines()):
        record = parse_record(raw_line)
        if record is not None and record[0] == ZONE:
            return record[1]
    return None


class LogTailer:
    """
    Background follower for the ACT network log.

    start() spawns a daemon thread, stop() clears the running flag and
    joins it.
    """

    def __init__(
        self,
        log_dir: str,
        poll_interval: float = 0.05,
        file_pattern: str = DEFAULT_FILE_PATTERN,
        notifications: Optional[queue.Queue] = None,
    ):
        self.log_dir = log_dir
        self.poll_interval = poll_interval
        self.file_pattern = file_pattern
        self.notifications = notifications or queue.Queue()

        self._worker_thread: Optional[threading.Thread] = None
        self._running = False
        self._running_lock = threading.Lock()
        self._current_path: Optional[str] = None
        self._position = 0
        self._partial = b""

    # ========== PUBLIC API ==========

    def start(self) -> bool:
        """Start following the log directory in a daemon thread

        Raises:
            SessionStateError: If the tailer is already running
            LogSourceError: If the log directory doesn't exist
        """
        with self._running_lock:
            if self._running:
                raise SessionStateError("LogTailer is already running")
            if not os.path.isdir(self.log_dir):
                raise LogSourceError(f"Log directory not found: {self.log_dir}")
            self._running = True

        self._worker_thread = threading.Thread(
            target=self._worker_loop,
            name="LogTailer-Worker",
            daemon=True,
        )
        self._worker_thread.start()
        logger.info(f"Following network logs in {self.log_dir}")
        return True

    def stop(self, timeout: float = 2.0) -> bool:
        """Stop the worker thread

        Returns:
            True if stopped cleanly, False on timeout
        """
        with self._running_lock:
            self._running = False

        if self._worker_thread and self._worker_thread.is_alive():
            self._worker_thread.join(timeout=timeout)
            if self._worker_thread.is_alive():
                logger.warning(f"LogTailer did not stop within {timeout}s (daemon, will die on exit)")
                return False

        self._worker_thread = None
        logger.info("LogTailer stopped")
        return True

    def is_running(self) -> bool:
        with self._running_lock:
            return self._running

    def drain(self, max_items: Optional[int] = None) -> List[Tuple[str, object]]:
        """Take queued notifications without blocking (oldest first)"""
        items = []
        while max_items is None or len(items) < max_items:
            try:
                items.append(self.notifications.get_nowait())
            except queue.Empty:
                break
        return items

    def attach(self, path: str, from_start: bool = False):
        """
        Start following a file.

        On startup the file is followed from its current end and the last
        zone record already in it is announced first, so an overlay started
        mid-voyage still knows where the player is. A file switched to on
        rollover is read from the start (from_start=True); its zone records
        then arrive in order with everything else.
        """
        self._current_path = path
        self._partial = b""
        if from_start:
            self._position = 0
        else:
            try:
                self._position = os.path.getsize(path)
            except OSError as e:
                logger.warning(f"Cannot open {path}: {e}")
                self._position = 0

            zone_id = last_zone_in(path)
            if zone_id is not None:
                self.notifications.put((ZONE, zone_id))
        logger.info(f"Attached to {os.path.basename(path)}")

    def read_new_records(self) -> int:
        """Read whatever was appended since the last call

        Returns:
            Number of notifications queued
        """
        if not self._current_path:
            return 0

        try:
            with open(self._current_path, "rb") as f:
                f.seek(self._position)
                chunk = f.read()
                self._position = f.tell()
        except OSError as e:
            logger.warning(f"Read error on {self._current_path}: {e}")
            return 0

        if not chunk:
            return 0

        data = self._partial + chunk
        lines = data.split(b"\n")
        # Last element is an unterminated line (or b"") kept for the next read
        self._partial = lines.pop()

        queued = 0
        for raw in lines:
            raw_line = raw.decode("utf-8", errors="replace").rstrip("\r")
            record = parse_record(raw_line)
            if record is not None:
                self.notifications.put(record)
                queued += 1
        return queued

    # ========== INTERNAL ==========

    def _check_rollover(self):
        newest = find_newest_log(self.log_dir, self.file_pattern)
        if newest and newest != self._current_path:
            if self._current_path:
                # Flush what the old file still had, then read the new one whole
                self.read_new_records()
                self.attach(newest, from_start=True)
            else:
                self.attach(newest)

    def _worker_loop(self):
        logger.info("LogTailer worker started")
        last_rollover_check = 0.0
        try:
            while self.is_running():
                now = time.monotonic()
                if now - last_rollover_check >= ROLLOVER_CHECK_INTERVAL or not self._current_path:
                    self._check_rollover()
                    last_rollover_check = now

                if self.read_new_records() == 0:
                    interruptible_sleep(self.poll_interval, self.is_running)
        except Exception as e:
            logger.error(f"LogTailer worker exception: {e}", exc_info=True)
        finally:
            with self._running_lock:
                self._running = False
            logger.info("LogTailer worker exited")
