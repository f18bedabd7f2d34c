# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Ocean fishing HUD

import logging
import tkinter as tk

import customtkinter as ctk

from .styles import (
    BG_COLOR,
    HEADER_COLOR,
    FG_COLOR,
    MUTED_COLOR,
    BORDER_COLOR,
    CAST_TIME_FONT,
    ROUTE_FONT,
    BAIT_FONT,
    HUD_WIDTH,
    HUD_MIN_HEIGHT,
    HUD_ROW_HEIGHT,
    HUD_MARGIN,
    HUD_ALPHA,
)
from .widgets import FishGrid

logger = logging.getLogger("OceanFishing")


class OceanFishingOverlay:
    """
    Borderless always-on-top HUD.

    Layout (top to bottom): elapsed cast time, target grid, stop name,
    "bait → spectral bait". Only visible while the session is active and
    the user hasn't hidden it with the toggle hotkey.
    """

    def __init__(self, root, hud_position="top-right", always_on_top=True):
        self.root = root
        self.hud_position = hud_position
        self.user_hidden = False
        self._visible = False
        self._last_snapshot = None
        self._drag_origin = None

        self.window = ctk.CTkToplevel(root)
        self.window.title("Ocean Fishing")
        self.window.overrideredirect(True)
        self.window.attributes("-topmost", always_on_top)
        self.window.attributes("-alpha", HUD_ALPHA)
        self.window.configure(fg_color=BG_COLOR)

        main_frame = tk.Frame(
            self.window,
            bg=BG_COLOR,
            bd=1,
            relief="solid",
            highlightbackground=BORDER_COLOR,
            highlightthickness=1,
        )
        main_frame.pack(fill=tk.BOTH, expand=True)

        # Header doubles as drag handle
        header = tk.Frame(main_frame, bg=HEADER_COLOR, height=6, cursor="fleur")
        header.pack(fill=tk.X)
        header.bind("<ButtonPress-1>", self._start_drag)
        header.bind("<B1-Motion>", self._drag)

        # Top: cast time + targets
        top = tk.Frame(main_frame, bg=BG_COLOR)
        top.pack(fill=tk.BOTH, expand=True, padx=8, pady=(4, 2))

        self.cast_time_label = tk.Label(
            top, text="0.0", font=CAST_TIME_FONT, fg=FG_COLOR, bg=BG_COLOR, anchor="w"
        )
        self.cast_time_label.pack(fill=tk.X)

        self.fish_grid = FishGrid(top)
        self.fish_grid.pack(fill=tk.BOTH, expand=True)

        # Bottom: stop name + baits
        bottom = tk.Frame(main_frame, bg=HEADER_COLOR)
        bottom.pack(fill=tk.X)

        self.route_label = tk.Label(
            bottom, text="", font=ROUTE_FONT, fg=FG_COLOR, bg=HEADER_COLOR, anchor="w"
        )
        self.route_label.pack(fill=tk.X, padx=8, pady=(4, 0))

        self.bait_label = tk.Label(
            bottom, text="", font=BAIT_FONT, fg=MUTED_COLOR, bg=HEADER_COLOR, anchor="w"
        )
        self.bait_label.pack(fill=tk.X, padx=8, pady=(0, 4))

        self.window.withdraw()

    # ========== Rendering ==========

    def render(self, snapshot):
        """Paint one SessionSnapshot (called by the host on every publish)"""
        self._last_snapshot = snapshot
        self._set_visible(snapshot.is_active and not self.user_hidden)
        if not self._visible:
            return

        self.cast_time_label.configure(text=snapshot.cast_time_text)
        self.fish_grid.update_targets(snapshot.targets)
        self.route_label.configure(text=snapshot.route_name)
        self.bait_label.configure(text=f"{snapshot.bait} → {snapshot.spectral_bait}")
        self._fit_height(len(snapshot.targets))

    def toggle_visibility(self):
        """Hotkey action: hide/show the HUD while in the activity"""
        self.user_hidden = not self.user_hidden
        logger.info(f"Overlay {'hidden' if self.user_hidden else 'shown'} by hotkey")
        if self._last_snapshot is not None:
            self.render(self._last_snapshot)

    def destroy(self):
        try:
            self.window.destroy()
        except tk.TclError:
            pass  # Already gone with the root

    # ========== Window helpers ==========

    def _set_visible(self, visible):
        if visible == self._visible:
            return
        self._visible = visible
        if visible:
            self.window.deiconify()
            self._place()
        else:
            self.window.withdraw()

    def _height_for(self, rows):
        return max(HUD_MIN_HEIGHT, 110 + rows * (HUD_ROW_HEIGHT + 2))

    def _fit_height(self, rows):
        height = self._height_for(rows)
        if self.window.winfo_height() != height:
            x, y = self.window.winfo_x(), self.window.winfo_y()
            self.window.geometry(f"{HUD_WIDTH}x{height}+{x}+{y}")

    def _place(self):
        """Initial position from the hud_position setting"""
        rows = len(self._last_snapshot.targets) if self._last_snapshot else 0
        height = self._height_for(rows)
        screen_width = self.window.winfo_screenwidth()
        screen_height = self.window.winfo_screenheight()

        if self.hud_position == "top":
            x = (screen_width - HUD_WIDTH) // 2
            y = HUD_MARGIN
        elif self.hud_position == "top-left":
            x, y = HUD_MARGIN, HUD_MARGIN
        elif self.hud_position == "bottom-left":
            x = HUD_MARGIN
            y = screen_height - height - 50
        elif self.hud_position == "bottom-right":
            x = screen_width - HUD_WIDTH - HUD_MARGIN
            y = screen_height - height - 50
        else:
            x = screen_width - HUD_WIDTH - HUD_MARGIN
            y = HUD_MARGIN

        self.window.geometry(f"{HUD_WIDTH}x{height}+{x}+{y}")

    def _start_drag(self, event):
        self._drag_origin = (
            event.x_root - self.window.winfo_x(),
            event.y_root - self.window.winfo_y(),
        )

    def _drag(self, event):
        if self._drag_origin is None:
            return
        dx, dy = self._drag_origin
        self.window.geometry(f"+{event.x_root - dx}+{event.y_root - dy}")
