# Config module for BPS Ocean Fishing Overlay

from .settings_manager import SettingsManager
from .defaults import get_default_settings, SETTINGS_FILENAME

__all__ = ['SettingsManager', 'get_default_settings', 'SETTINGS_FILENAME']
