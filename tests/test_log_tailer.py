"""
Test suite for services/log_tailer.py
=====================================
Tests for record parsing, file following and tailer lifecycle.
"""

import os
import tempfile
import time

import pytest
from core.exceptions import LogSourceError, SessionStateError
from services.log_tailer import (
    LINE,
    ZONE,
    LogTailer,
    find_newest_log,
    last_zone_in,
    parse_record,
)

CAST_LINE = "00|2021-11-25T12:00:00.0000000-08:00|0843||You cast your line.|5f2e1c0a"
ZONE_LINE = "01|2021-11-25T12:00:00.0000000-08:00|384|The Endeavor|3b0a1c"
OTHER_ZONE_LINE = "01|2021-11-25T11:00:00.0000000-08:00|81|Limsa Lominsa Lower Decks|aa01"
BITE_LINE = "00|2021-11-25T12:00:05.0000000-08:00|0843||Something bites!|7c1d2e3f"
AREA_LINE = "00|2021-11-25T11:59:00.0000000-08:00|0044|Foerzagyl|Weigh the anchors! Shove off!|9a8b"
ABILITY_LINE = "21|2021-11-25T12:00:01.0000000-08:00|10001234|Player|7A|Cast|"


@pytest.fixture
def log_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


def write_log(path, text, mode="w"):
    with open(path, mode, encoding="utf-8", newline="") as f:
        f.write(text)


class TestParseRecord:
    """Tests for parse_record"""

    def test_chat_line(self):
        assert parse_record(CAST_LINE) == (LINE, CAST_LINE)

    def test_zone_line_hex(self):
        # 0x384 == 900
        assert parse_record(ZONE_LINE) == (ZONE, 900)

    def test_other_zone(self):
        assert parse_record(OTHER_ZONE_LINE) == (ZONE, 0x81)

    def test_other_record_types_skipped(self):
        assert parse_record(ABILITY_LINE) is None
        assert parse_record("") is None

    def test_malformed_zone(self):
        assert parse_record("01|ts") is None
        assert parse_record("01|ts|zzz|Nowhere|") is None


class TestLogFiles:
    """Tests for find_newest_log and last_zone_in"""

    def test_no_logs(self, log_dir):
        assert find_newest_log(log_dir) is None

    def test_newest_by_mtime(self, log_dir):
        old = os.path.join(log_dir, "Network_20211124.log")
        new = os.path.join(log_dir, "Network_20211125.log")
        write_log(old, "")
        write_log(new, "")
        os.utime(old, (1000, 1000))
        os.utime(new, (2000, 2000))
        write_log(os.path.join(log_dir, "notes.txt"), "")

        assert find_newest_log(log_dir) == new

    def test_last_zone(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, "\n".join([OTHER_ZONE_LINE, CAST_LINE, ZONE_LINE, CAST_LINE]) + "\n")
        assert last_zone_in(path) == 900

    def test_last_zone_missing(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, CAST_LINE + "\n")
        assert last_zone_in(path) is None
        assert last_zone_in(os.path.join(log_dir, "absent.log")) is None


class TestReadNewRecords:
    """Tests for attach and incremental reads"""

    def test_attach_announces_last_zone(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, ZONE_LINE + "\n" + CAST_LINE + "\n")

        tailer = LogTailer(log_dir)
        tailer.attach(path)

        # Existing lines are skipped, only the zone is announced
        assert tailer.drain() == [(ZONE, 900)]
        assert tailer.read_new_records() == 0

    def test_appended_lines_in_order(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, "")
        tailer = LogTailer(log_dir)
        tailer.attach(path)

        write_log(path, "\n".join([ZONE_LINE, ABILITY_LINE, CAST_LINE]) + "\n", mode="a")

        assert tailer.read_new_records() == 2
        assert tailer.drain() == [(ZONE, 900), (LINE, CAST_LINE)]

    def test_partial_line_held_back(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, "")
        tailer = LogTailer(log_dir)
        tailer.attach(path)

        write_log(path, CAST_LINE[:20], mode="a")
        assert tailer.read_new_records() == 0

        write_log(path, CAST_LINE[20:] + "\n", mode="a")
        assert tailer.read_new_records() == 1
        assert tailer.drain() == [(LINE, CAST_LINE)]

    def test_crlf_stripped(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, "")
        tailer = LogTailer(log_dir)
        tailer.attach(path)

        write_log(path, CAST_LINE + "\r\n", mode="a")
        tailer.read_new_records()
        assert tailer.drain() == [(LINE, CAST_LINE)]

    def test_rollover_reads_new_file_from_start(self, log_dir):
        """Old file's unread tail, then every record of the new file, in order"""
        old = os.path.join(log_dir, "Network_1.log")
        write_log(old, "")
        os.utime(old, (1000, 1000))
        tailer = LogTailer(log_dir)
        tailer.attach(old)

        write_log(old, AREA_LINE + "\n", mode="a")
        os.utime(old, (1000, 1000))

        new = os.path.join(log_dir, "Network_2.log")
        write_log(new, "\n".join([ZONE_LINE, CAST_LINE, BITE_LINE]) + "\n")
        os.utime(new, (2000, 2000))

        tailer._check_rollover()
        tailer.read_new_records()

        assert tailer.drain() == [
            (LINE, AREA_LINE),
            (ZONE, 900),
            (LINE, CAST_LINE),
            (LINE, BITE_LINE),
        ]

    def test_rollover_keeps_following_new_file(self, log_dir):
        old = os.path.join(log_dir, "Network_1.log")
        write_log(old, ZONE_LINE + "\n")
        os.utime(old, (1000, 1000))
        tailer = LogTailer(log_dir)
        tailer._check_rollover()
        assert tailer.drain() == [(ZONE, 900)]

        new = os.path.join(log_dir, "Network_2.log")
        write_log(new, CAST_LINE + "\n")
        os.utime(new, (2000, 2000))
        tailer._check_rollover()
        tailer.read_new_records()
        assert tailer.drain() == [(LINE, CAST_LINE)]

        write_log(new, BITE_LINE + "\n", mode="a")
        tailer.read_new_records()
        assert tailer.drain() == [(LINE, BITE_LINE)]

    def test_not_attached(self, log_dir):
        assert LogTailer(log_dir).read_new_records() == 0

    def test_drain_limit(self, log_dir):
        tailer = LogTailer(log_dir)
        for zone_id in range(5):
            tailer.notifications.put((ZONE, zone_id))
        assert len(tailer.drain(max_items=3)) == 3
        assert len(tailer.drain()) == 2
        assert tailer.drain() == []


class TestTailerLifecycle:
    """Tests for start/stop of the worker thread"""

    def test_missing_directory(self, log_dir):
        tailer = LogTailer(os.path.join(log_dir, "missing"))
        with pytest.raises(LogSourceError):
            tailer.start()
        assert tailer.is_running() == False

    def test_start_stop(self, log_dir):
        tailer = LogTailer(log_dir, poll_interval=0.01)
        assert tailer.start() == True
        assert tailer.is_running() == True

        with pytest.raises(SessionStateError):
            tailer.start()

        assert tailer.stop() == True
        assert tailer.is_running() == False

    def test_worker_follows_file(self, log_dir):
        path = os.path.join(log_dir, "Network_1.log")
        write_log(path, ZONE_LINE + "\n")

        tailer = LogTailer(log_dir, poll_interval=0.01)
        tailer.start()
        try:
            deadline = time.monotonic() + 2.0
            items = []
            while time.monotonic() < deadline and not items:
                items = tailer.drain()
                time.sleep(0.01)
            assert items == [(ZONE, 900)]

            write_log(path, CAST_LINE + "\n", mode="a")
            deadline = time.monotonic() + 2.0
            items = []
            while time.monotonic() < deadline and not items:
                items = tailer.drain()
                time.sleep(0.01)
            assert items == [(LINE, CAST_LINE)]
        finally:
            tailer.stop()
