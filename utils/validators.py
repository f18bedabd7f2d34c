# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Validation utilities for overlay settings

import logging
from datetime import datetime

logger = logging.getLogger('OceanFishing')

# Keys pynput reports for function keys, plus single printable characters
FUNCTION_KEYS = {f"f{i}" for i in range(1, 13)}

# Seconds
MAX_LEAD_BIAS = 1.0


def validate_zone_ids(zone_ids):
    """Validate a non-empty list of positive integer zone IDs"""
    if not zone_ids or not isinstance(zone_ids, (list, tuple)):
        return False
    for zone_id in zone_ids:
        if isinstance(zone_id, bool) or not isinstance(zone_id, int):
            logger.warning(f"Invalid zone ID: {zone_id!r} is not an integer")
            return False
        if zone_id <= 0:
            logger.warning(f"Invalid zone ID: {zone_id}")
            return False
    return True


def validate_lead_bias(lead_bias):
    """Validate bite window lead bias (seconds, 0 <= bias <= MAX_LEAD_BIAS)"""
    try:
        value = float(lead_bias)
    except (ValueError, TypeError):
        logger.warning(f"Invalid lead bias: {lead_bias!r} not numeric")
        return False
    return 0.0 <= value <= MAX_LEAD_BIAS


def validate_hotkey(key_name):
    """Validate hotkey name (function key or single character)"""
    if not key_name or not isinstance(key_name, str):
        return False
    key_name = key_name.lower()
    return key_name in FUNCTION_KEYS or len(key_name) == 1


def validate_anchor(anchor):
    """Validate route anchor as an ISO 8601 string"""
    if not anchor or not isinstance(anchor, str):
        return False
    try:
        datetime.fromisoformat(anchor)
        return True
    except ValueError:
        logger.warning(f"Invalid route anchor: {anchor}")
        return False


def validate_poll_interval(interval):
    """Validate log poll interval in seconds (between 10ms and 5s)"""
    try:
        value = float(interval)
    except (ValueError, TypeError):
        return False
    return 0.01 <= value <= 5.0


def validate_frame_interval(interval_ms):
    """Validate tick frame interval in milliseconds (whole number, 1ms to 1s)"""
    if isinstance(interval_ms, bool) or not isinstance(interval_ms, int):
        logger.warning(f"Invalid frame interval: {interval_ms!r} is not an integer")
        return False
    return 1 <= interval_ms <= 1000
