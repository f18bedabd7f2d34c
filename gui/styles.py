# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Styles and Constants

"""
Overlay color scheme and styling constants.
"""

# Dark + white minimalist, same palette as the HUD
BG_COLOR = "#141414"       # Main background
HEADER_COLOR = "#1e1e1e"   # Header strip / drag handle
FG_COLOR = "#f5f5f5"       # Text color (soft white)
MUTED_COLOR = "#a0a0a0"    # Secondary text
BORDER_COLOR = "#2a2a2a"
BUTTON_COLOR = "#2a2a2a"
HOVER_COLOR = "#3d3d3d"

# Bite window highlight
SELECTED_BG_COLOR = "#34d399"
SELECTED_FG_COLOR = "#0d0d0d"

# Tug strength colors (!, !!, !!!)
TUG_COLORS = ("#60a5fa", "#fbbf24", "#f87171")

# Fonts
CAST_TIME_FONT = ("Consolas", 22, "bold")
ROW_FONT = ("Segoe UI", 10)
ROW_MONO_FONT = ("Consolas", 10)
ROUTE_FONT = ("Segoe UI", 10, "bold")
BAIT_FONT = ("Segoe UI", 9)
TITLE_FONT = ("Segoe UI", 11, "bold")

# Window constants
HUD_WIDTH = 300
HUD_MIN_HEIGHT = 120
HUD_ROW_HEIGHT = 22
HUD_MARGIN = 10
HUD_ALPHA = 0.92

DEBUG_WINDOW_WIDTH = 420
DEBUG_WINDOW_HEIGHT = 700

# Column widths of the target grid (characters)
TUG_COLUMN_WIDTH = 4
TIME_COLUMN_WIDTH = 6
POINTS_COLUMN_WIDTH = 6
