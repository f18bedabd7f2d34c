"""
Test suite for services/logging_service.py and utils/timing.py
===============================================================
Tests for logger setup and the interruptible sleep helper.
"""

import logging
import os
import time

from services.logging_service import LoggingService, LOGGER_NAME
from utils.timing import interruptible_sleep


class TestLoggingService:
    """Tests for LoggingService"""

    def test_logger_name(self, tmp_path):
        service = LoggingService(os.path.join(tmp_path, "overlay.log"))
        assert service.get_logger().name == LOGGER_NAME
        assert service.get_logger() is logging.getLogger("OceanFishing")

    def test_set_level(self, tmp_path):
        service = LoggingService(os.path.join(tmp_path, "overlay.log"), logging.INFO)
        service.set_level(logging.DEBUG)
        assert service.get_logger().level == logging.DEBUG
        service.set_level(logging.INFO)
        assert service.get_logger().level == logging.INFO

    def test_debug_level_lets_event_logs_through(self, tmp_path, caplog):
        service = LoggingService(os.path.join(tmp_path, "overlay.log"))
        service.set_level(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            logging.getLogger("OceanFishing").debug("Classified cast")
        assert "Classified cast" in caplog.text
        service.set_level(logging.INFO)


class TestInterruptibleSleep:
    """Tests for interruptible_sleep"""

    def test_completes(self):
        assert interruptible_sleep(0.02, lambda: True, step=0.01) == True

    def test_interrupted(self):
        start = time.monotonic()
        assert interruptible_sleep(5.0, lambda: False) == False
        assert time.monotonic() - start < 1.0
