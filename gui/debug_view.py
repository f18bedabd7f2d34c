# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Debug view (every stop, manual cast button)

import customtkinter as ctk

from core.catalog import all_stops_info
from core.snapshot import build_target_views
from .styles import (
    BG_COLOR,
    FG_COLOR,
    BUTTON_COLOR,
    HOVER_COLOR,
    CAST_TIME_FONT,
    TITLE_FONT,
    DEBUG_WINDOW_WIDTH,
    DEBUG_WINDOW_HEIGHT,
)
from .widgets import FishGrid


class DebugView:
    """
    Lists every location at every time of day with its target grid.

    The Cast button starts a spectral cast on the session so bite window
    highlighting can be checked without the game running.
    """

    def __init__(self, root, session, stops=None):
        self.root = root
        self.session = session
        self.stops = stops if stops is not None else all_stops_info()
        self._grids = []

        self.root.title("Ocean Fishing - Debug")
        self.root.geometry(f"{DEBUG_WINDOW_WIDTH}x{DEBUG_WINDOW_HEIGHT}")
        self.root.configure(fg_color=BG_COLOR)

        toolbar = ctk.CTkFrame(self.root, fg_color="transparent")
        toolbar.pack(fill="x", padx=8, pady=8)

        self.cast_time_label = ctk.CTkLabel(
            toolbar, text="0.0", font=CAST_TIME_FONT, text_color=FG_COLOR
        )
        self.cast_time_label.pack(side="left", padx=5)

        ctk.CTkButton(
            toolbar,
            text="Cast",
            command=self.session.start_cast,
            width=80,
            fg_color=BUTTON_COLOR,
            hover_color=HOVER_COLOR,
        ).pack(side="left", padx=5)

        scroll = ctk.CTkScrollableFrame(self.root, fg_color="transparent")
        scroll.pack(fill="both", expand=True, padx=8, pady=(0, 8))

        for stop in self.stops:
            ctk.CTkLabel(
                scroll, text=stop.name, font=TITLE_FONT, text_color=FG_COLOR
            ).pack(anchor="w", pady=(10, 2))
            grid = FishGrid(scroll)
            grid.pack(fill="x")
            self._grids.append((stop, grid))

        self.render(self.session.snapshot())

    def render(self, snapshot):
        """Repaint cast time and every grid's bite window highlight"""
        self.cast_time_label.configure(text=snapshot.cast_time_text)
        state = self.session.state
        for stop, grid in self._grids:
            grid.update_targets(
                build_target_views(
                    stop.targets, state, self.session.scorer, self.session.lead_bias
                )
            )
