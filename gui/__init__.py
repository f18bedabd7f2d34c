# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Main Package

"""
Overlay GUI: the borderless HUD shown during ocean fishing and the
debug view that lists every stop.
"""

from .styles import *
from .overlay import OceanFishingOverlay
from .debug_view import DebugView
from .hotkeys import HotkeyListener

__all__ = ['styles', 'OceanFishingOverlay', 'DebugView', 'HotkeyListener']
