# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Path utilities for settings, logs and the ACT log directory

import os
import sys


def get_app_dir():
    """Get the directory where the executable/script is located (for settings/logs)

    For non-frozen runs this is the project root (parent of utils/).
    """
    if getattr(sys, 'frozen', False):
        # Running as compiled executable
        return os.path.dirname(sys.executable)
    return os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def get_default_act_log_dir():
    """Default Advanced Combat Tracker FFXIV log folder for this user"""
    appdata = os.environ.get('APPDATA')
    if appdata:
        return os.path.join(appdata, 'Advanced Combat Tracker', 'FFXIVLogs')
    return os.path.join(os.path.expanduser('~'), 'Advanced Combat Tracker', 'FFXIVLogs')
