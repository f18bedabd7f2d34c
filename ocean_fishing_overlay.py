# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Ocean fishing companion overlay for the ACT network log.
#
# Usage:
#     python ocean_fishing_overlay.py           # HUD, follows the ACT log
#     python ocean_fishing_overlay.py --debug   # every stop + manual cast

# Fix for darkdetect/customtkinter Windows version detection issue
import os

os.environ.setdefault("DARKDETECT_SKIP_VERSION_CHECK", "1")

import logging
import sys

import customtkinter as ctk

from config import SettingsManager, SETTINGS_FILENAME
from core import OceanFishingSession, LogSourceError
from gui import OceanFishingOverlay, DebugView, HotkeyListener
from services import LoggingService, LogTailer, TkHostBridge
from utils import get_app_dir

BASE_DIR = get_app_dir()
SETTINGS_FILE = os.path.join(BASE_DIR, SETTINGS_FILENAME)


class OceanFishingApp:
    """Wires settings, session, host bridge, tailer, overlay and hotkeys"""

    def __init__(self, root, debug=False):
        self.root = root
        self.debug = debug
        self.logger = logging.getLogger("OceanFishing")

        self.settings = SettingsManager(SETTINGS_FILE)
        schedule = self.settings.load_schedule_settings()
        timing = self.settings.load_timing_settings()
        log_settings = self.settings.load_log_settings()
        self.zone_ids = self.settings.load_zone_ids()

        self.tailer = None
        if not debug:
            self.tailer = LogTailer(
                log_settings["log_dir"], poll_interval=log_settings["poll_interval"]
            )

        self.host = TkHostBridge(
            root,
            tailer=self.tailer,
            frame_interval_ms=timing["frame_interval_ms"],
        )
        self.session = OceanFishingSession(
            self.host,
            zone_ids=self.zone_ids,
            anchor=schedule["anchor"],
            anchor_offset=schedule["anchor_offset"],
            scorer=self.settings.load_scorer(),
            lead_bias=timing["lead_bias"],
            callbacks={"on_error": self._on_session_error},
        )
        self.host.attach(self.session)

        if debug:
            self.view = DebugView(root, self.session)
            self.overlay = None
            self.host.renderer = self.view.render
            # Debug casts need the activity gate open
            self.session.on_zone_change(self.zone_ids[0])
        else:
            root.withdraw()
            self.overlay = OceanFishingOverlay(
                root,
                hud_position=self.settings.load_hud_position(),
                always_on_top=self.settings.load_always_on_top(),
            )
            self.host.renderer = self.overlay.render

        self.hotkeys = HotkeyListener(
            root,
            self.settings.load_hotkeys(),
            {"toggle": self.toggle_overlay, "exit": self.exit},
        )

        root.protocol("WM_DELETE_WINDOW", self.exit)

    def start(self):
        if self.tailer is not None:
            try:
                self.tailer.start()
            except LogSourceError as e:
                self.logger.error(f"{e} - set log_settings.log_dir in {SETTINGS_FILE}")
        self.host.start_pump()
        self.hotkeys.start()
        self.logger.info(
            f"Overlay started ({'debug' if self.debug else 'hud'}), zones {self.zone_ids}"
        )

    def toggle_overlay(self):
        if self.overlay is not None:
            self.overlay.toggle_visibility()

    def exit(self):
        self.logger.info("Shutting down overlay")
        self.hotkeys.stop()
        self.host.stop_pump()
        if self.tailer is not None and self.tailer.is_running():
            self.tailer.stop()
        if self.overlay is not None:
            self.overlay.destroy()
        self.root.destroy()

    def _on_session_error(self, exception):
        self.logger.error(f"Overlay render failed: {exception}")


def main():
    debug = "--debug" in sys.argv
    logging_service = LoggingService(os.path.join(BASE_DIR, "ocean_fishing.log"))
    if debug:
        # Event classifications are logged at DEBUG
        logging_service.set_level(logging.DEBUG)
    logging_service.get_logger().info(f"Settings: {SETTINGS_FILE}")

    ctk.set_appearance_mode("dark")
    root = ctk.CTk()
    app = OceanFishingApp(root, debug=debug)
    app.start()
    root.mainloop()


if __name__ == "__main__":
    main()
