# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Services Module - Public Interface

from .logging_service import LoggingService
from .log_tailer import LogTailer
from .tk_host import TkHostBridge

__all__ = [
    "LoggingService",
    "LogTailer",
    "TkHostBridge",
]
