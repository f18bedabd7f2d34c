# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Target grid widget

import customtkinter as ctk

from ..styles import (
    BG_COLOR,
    FG_COLOR,
    MUTED_COLOR,
    SELECTED_BG_COLOR,
    SELECTED_FG_COLOR,
    TUG_COLORS,
    ROW_FONT,
    ROW_MONO_FONT,
    HUD_ROW_HEIGHT,
    TUG_COLUMN_WIDTH,
    TIME_COLUMN_WIDTH,
    POINTS_COLUMN_WIDTH,
)


class FishGrid(ctk.CTkFrame):
    """
    Target rows: tug marks, bite window, points, name (+ "*" for mooch).

    Rows are only rebuilt when the list of fish changes. Per-frame updates
    while casting just recolor the rows in the bite window.
    """

    def __init__(self, parent, **kwargs):
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(parent, **kwargs)
        self._names = ()
        self._rows = []

    def update_targets(self, targets):
        """Show a tuple of TargetView rows"""
        names = tuple(t.name for t in targets)
        if names != self._names:
            self._rebuild(targets)
            self._names = names
        for row, target in zip(self._rows, targets):
            self._paint_row(row, target)

    def _rebuild(self, targets):
        for row in self._rows:
            row["frame"].destroy()
        self._rows = []

        for target in targets:
            frame = ctk.CTkFrame(
                self, fg_color=BG_COLOR, corner_radius=4, height=HUD_ROW_HEIGHT
            )
            frame.pack(fill="x", pady=1)

            tug = ctk.CTkLabel(
                frame,
                text=target.tug_marks,
                width=TUG_COLUMN_WIDTH * 8,
                font=ROW_MONO_FONT,
                text_color=TUG_COLORS[target.tug - 1] if 1 <= target.tug <= 3 else FG_COLOR,
                anchor="w",
            )
            tug.pack(side="left", padx=(6, 2))

            time_label = ctk.CTkLabel(
                frame,
                text=target.time_text,
                width=TIME_COLUMN_WIDTH * 8,
                font=ROW_MONO_FONT,
                text_color=FG_COLOR,
                anchor="w",
            )
            time_label.pack(side="left", padx=2)

            points = ctk.CTkLabel(
                frame,
                text=str(target.points),
                width=POINTS_COLUMN_WIDTH * 8,
                font=ROW_MONO_FONT,
                text_color=MUTED_COLOR,
                anchor="e",
            )
            points.pack(side="left", padx=2)

            name = ctk.CTkLabel(
                frame,
                text=f"{target.name}{target.mooch_marker}",
                font=ROW_FONT,
                text_color=FG_COLOR,
                anchor="w",
            )
            name.pack(side="left", fill="x", expand=True, padx=(6, 6))

            self._rows.append(
                {
                    "frame": frame,
                    "tug": tug,
                    "time": time_label,
                    "points": points,
                    "name": name,
                    "selected": None,
                }
            )

    def _paint_row(self, row, target):
        if row["selected"] == target.is_selected:
            return
        row["selected"] = target.is_selected

        if target.is_selected:
            row["frame"].configure(fg_color=SELECTED_BG_COLOR)
            for key in ("time", "points", "name"):
                row[key].configure(text_color=SELECTED_FG_COLOR)
        else:
            row["frame"].configure(fg_color=BG_COLOR)
            row["time"].configure(text_color=FG_COLOR)
            row["points"].configure(text_color=MUTED_COLOR)
            row["name"].configure(text_color=FG_COLOR)
