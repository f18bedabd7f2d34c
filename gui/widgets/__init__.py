# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Widgets Package

"""
Reusable GUI widgets
"""

from .fish_grid import FishGrid

__all__ = ['FishGrid']
