# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Services Module - Logging Service

import logging
import os

from utils.path_helpers import get_app_dir

LOGGER_NAME = 'OceanFishing'
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(message)s'


class LoggingService:
    """
    Centralized logging service

    Every module logs through logging.getLogger('OceanFishing'); this
    class wires that logger to a file and the console once at startup.
    """

    def __init__(self, log_file: str = None, log_level: int = logging.INFO):
        """
        Initialize logging service

        Args:
            log_file: Path to log file (default: ocean_fishing.log in the app dir)
            log_level: Logging level (default: INFO)
        """
        if log_file is None:
            log_file = os.path.join(get_app_dir(), 'ocean_fishing.log')

        self.log_file = log_file
        self.log_level = log_level
        self.logger = None
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging with file and console handlers"""
        logging.basicConfig(
            level=self.log_level,
            format=LOG_FORMAT,
            handlers=[
                logging.FileHandler(self.log_file, encoding='utf-8'),
                logging.StreamHandler()
            ]
        )
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(self.log_level)

    def get_logger(self):
        """Get the logger instance"""
        return self.logger

    def set_level(self, log_level: int):
        """Change the overlay logger level (e.g. DEBUG for event tracing)"""
        self.log_level = log_level
        if self.logger:
            self.logger.setLevel(log_level)
