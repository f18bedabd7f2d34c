# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Default configuration values

from data import (
    DEFAULT_SCORING_METHOD,
    OCEAN_FISHING_ZONE_IDS,
    ROUTE_ANCHOR,
    ROUTE_ANCHOR_OFFSET,
)
from core.snapshot import BITE_LEAD_BIAS
from utils.path_helpers import get_default_act_log_dir

SETTINGS_FILENAME = "oceanfishingsettings.json"

DEFAULT_ZONE_SETTINGS = {
    "zone_ids": list(OCEAN_FISHING_ZONE_IDS),
}

DEFAULT_SCHEDULE_SETTINGS = {
    "anchor": ROUTE_ANCHOR.isoformat(),
    "anchor_offset": ROUTE_ANCHOR_OFFSET,
}

DEFAULT_TIMING_SETTINGS = {
    "lead_bias": BITE_LEAD_BIAS,
    "frame_interval_ms": 16,  # ~60 repaints per second while casting
}

DEFAULT_LOG_SETTINGS = {
    "log_dir": get_default_act_log_dir(),
    "poll_interval": 0.05,
}

DEFAULT_HOTKEYS = {
    "toggle": "f8",
    "exit": "f10",
}

DEFAULT_HUD_POSITION = "top-right"
HUD_POSITIONS = ("top", "top-left", "top-right", "bottom-left", "bottom-right")


def get_default_settings():
    """Full settings document written on first run"""
    return {
        "zone_settings": dict(DEFAULT_ZONE_SETTINGS),
        "schedule_settings": dict(DEFAULT_SCHEDULE_SETTINGS),
        "timing_settings": dict(DEFAULT_TIMING_SETTINGS),
        "log_settings": dict(DEFAULT_LOG_SETTINGS),
        "scoring_method": DEFAULT_SCORING_METHOD,
        "hotkeys": dict(DEFAULT_HOTKEYS),
        "hud_position": DEFAULT_HUD_POSITION,
        "always_on_top": True,
    }
