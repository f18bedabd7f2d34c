# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Centralized settings manager
# All load_*() and save_*() methods for the overlay live here

import os
import json
import logging
import threading
from datetime import datetime, timezone

from data import SCORERS, DEFAULT_SCORING_METHOD
from .defaults import (
    get_default_settings,
    DEFAULT_ZONE_SETTINGS,
    DEFAULT_SCHEDULE_SETTINGS,
    DEFAULT_TIMING_SETTINGS,
    DEFAULT_LOG_SETTINGS,
    DEFAULT_HOTKEYS,
    DEFAULT_HUD_POSITION,
    HUD_POSITIONS,
)
from utils.validators import (
    validate_zone_ids,
    validate_lead_bias,
    validate_hotkey,
    validate_anchor,
    validate_poll_interval,
    validate_frame_interval,
)

logger = logging.getLogger("OceanFishing")


class SettingsManager:
    """Centralized settings management for BPS Ocean Fishing Overlay

    One JSON document on disk, cached in memory. Loaders return defaults
    for missing sections; savers validate first and return False (with a
    warning) instead of writing bad values.
    """

    def __init__(self, settings_file: str):
        """Initialize settings manager

        Args:
            settings_file: Absolute path to settings JSON file
        """
        self.settings_file = settings_file
        self._data = {}  # In-memory cache
        self._lock = threading.Lock()  # Thread-safe access
        self._ensure_settings_file_exists()
        self._load_all()

    def _ensure_settings_file_exists(self):
        """Create default settings file if it doesn't exist"""
        if not os.path.exists(self.settings_file):
            logger.info("Creating default settings file...")
            try:
                with open(self.settings_file, "w", encoding="utf-8") as f:
                    json.dump(get_default_settings(), f, indent=4, ensure_ascii=False)
                logger.info(f"Default settings created at: {self.settings_file}")
            except OSError as e:
                logger.error(f"Failed to create default settings: {e}")

    def _load_all(self):
        """Load all settings from file (called at init, no lock needed)"""
        try:
            if os.path.exists(self.settings_file):
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file: {e}")
            self._data = {}
        except OSError as e:
            logger.error(f"Error loading settings: {e}")
            self._data = {}

        if not isinstance(self._data, dict):
            logger.error("Settings file does not hold an object, using defaults")
            self._data = {}

    def _save_all(self):
        """Save all settings to file (assumes caller holds lock)"""
        try:
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")

    def _section(self, key, defaults):
        """Stored section merged over its defaults (assumes caller holds lock)"""
        merged = dict(defaults)
        stored = self._data.get(key)
        if isinstance(stored, dict):
            merged.update(stored)
        return merged

    # ========================================================================
    # LOADERS
    # ========================================================================

    def load_zone_ids(self):
        """Load the zone IDs that count as ocean fishing"""
        with self._lock:
            zone_ids = self._section("zone_settings", DEFAULT_ZONE_SETTINGS)["zone_ids"]
        if not validate_zone_ids(zone_ids):
            logger.warning("Stored zone IDs invalid, using defaults")
            return list(DEFAULT_ZONE_SETTINGS["zone_ids"])
        return list(zone_ids)

    def load_schedule_settings(self):
        """Load route rotation anchor and offset

        Returns:
            Dict with 'anchor' (aware datetime) and 'anchor_offset' (int)
        """
        with self._lock:
            settings = self._section("schedule_settings", DEFAULT_SCHEDULE_SETTINGS)

        anchor_text = settings.get("anchor")
        if not validate_anchor(anchor_text):
            anchor_text = DEFAULT_SCHEDULE_SETTINGS["anchor"]
        anchor = datetime.fromisoformat(anchor_text)
        if anchor.tzinfo is None:
            anchor = anchor.replace(tzinfo=timezone.utc)

        try:
            anchor_offset = int(settings.get("anchor_offset"))
        except (ValueError, TypeError):
            anchor_offset = DEFAULT_SCHEDULE_SETTINGS["anchor_offset"]

        return {"anchor": anchor, "anchor_offset": anchor_offset}

    def load_timing_settings(self):
        """Load bite window lead bias and tick frame interval"""
        with self._lock:
            settings = self._section("timing_settings", DEFAULT_TIMING_SETTINGS)
        if not validate_lead_bias(settings.get("lead_bias")):
            settings["lead_bias"] = DEFAULT_TIMING_SETTINGS["lead_bias"]
        settings["lead_bias"] = float(settings["lead_bias"])
        if not validate_frame_interval(settings.get("frame_interval_ms")):
            settings["frame_interval_ms"] = DEFAULT_TIMING_SETTINGS["frame_interval_ms"]
        return settings

    def load_log_settings(self):
        """Load ACT log directory and poll interval"""
        with self._lock:
            settings = self._section("log_settings", DEFAULT_LOG_SETTINGS)
        if not validate_poll_interval(settings.get("poll_interval")):
            settings["poll_interval"] = DEFAULT_LOG_SETTINGS["poll_interval"]
        return settings

    def load_scoring_method(self):
        """Load the point scorer name (falls back to the default scorer)"""
        with self._lock:
            method = self._data.get("scoring_method", DEFAULT_SCORING_METHOD)
        if method not in SCORERS:
            logger.warning(f"Unknown scoring method '{method}', using {DEFAULT_SCORING_METHOD}")
            return DEFAULT_SCORING_METHOD
        return method

    def load_scorer(self):
        """Load the point scorer function"""
        return SCORERS[self.load_scoring_method()]

    def load_hotkeys(self):
        """Load overlay hotkeys"""
        with self._lock:
            return self._section("hotkeys", DEFAULT_HOTKEYS)

    def load_hud_position(self):
        """Load HUD position from settings file"""
        with self._lock:
            position = self._data.get("hud_position", DEFAULT_HUD_POSITION)
        return position if position in HUD_POSITIONS else DEFAULT_HUD_POSITION

    def load_always_on_top(self):
        """Load always on top setting from settings file"""
        with self._lock:
            return self._data.get("always_on_top", True)

    # ========================================================================
    # SAVERS
    # ========================================================================

    def save_zone_ids(self, zone_ids):
        """Save ocean fishing zone IDs"""
        if not validate_zone_ids(zone_ids):
            logger.warning(f"Refusing to save invalid zone IDs: {zone_ids!r}")
            return False
        with self._lock:
            self._data["zone_settings"] = {"zone_ids": list(zone_ids)}
            self._save_all()
        return True

    def save_schedule_settings(self, anchor, anchor_offset):
        """Save route rotation anchor (datetime or ISO string) and offset"""
        if isinstance(anchor, datetime):
            anchor = anchor.isoformat()
        if not validate_anchor(anchor):
            logger.warning(f"Refusing to save invalid route anchor: {anchor!r}")
            return False
        with self._lock:
            self._data["schedule_settings"] = {
                "anchor": anchor,
                "anchor_offset": int(anchor_offset),
            }
            self._save_all()
        return True

    def save_timing_settings(self, lead_bias, frame_interval_ms):
        """Save bite window lead bias and tick frame interval"""
        if not validate_lead_bias(lead_bias):
            logger.warning(f"Refusing to save invalid lead bias: {lead_bias!r}")
            return False
        if not validate_frame_interval(frame_interval_ms):
            logger.warning(f"Refusing to save invalid frame interval: {frame_interval_ms!r}")
            return False
        with self._lock:
            self._data["timing_settings"] = {
                "lead_bias": float(lead_bias),
                "frame_interval_ms": frame_interval_ms,
            }
            self._save_all()
        return True

    def save_log_settings(self, log_dir, poll_interval):
        """Save ACT log directory and poll interval"""
        if not validate_poll_interval(poll_interval):
            logger.warning(f"Refusing to save invalid poll interval: {poll_interval!r}")
            return False
        with self._lock:
            self._data["log_settings"] = {
                "log_dir": log_dir,
                "poll_interval": float(poll_interval),
            }
            self._save_all()
        return True

    def save_scoring_method(self, method):
        """Save the point scorer name"""
        if method not in SCORERS:
            logger.warning(f"Refusing to save unknown scoring method: {method!r}")
            return False
        with self._lock:
            self._data["scoring_method"] = method
            self._save_all()
        return True

    def save_hotkeys(self, toggle_key, exit_key):
        """Save overlay hotkeys"""
        if not (validate_hotkey(toggle_key) and validate_hotkey(exit_key)):
            logger.warning(f"Refusing to save invalid hotkeys: {toggle_key!r}, {exit_key!r}")
            return False
        with self._lock:
            self._data["hotkeys"] = {
                "toggle": toggle_key.lower(),
                "exit": exit_key.lower(),
            }
            self._save_all()
        logger.info("Hotkeys saved successfully")
        return True

    def save_hud_position(self, hud_position):
        """Save HUD position to settings file"""
        if hud_position not in HUD_POSITIONS:
            return False
        with self._lock:
            self._data["hud_position"] = hud_position
            self._save_all()
        return True

    def save_always_on_top(self, always_on_top):
        """Save always on top setting to settings file"""
        with self._lock:
            self._data["always_on_top"] = bool(always_on_top)
            self._save_all()
