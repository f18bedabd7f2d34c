# Utils module for BPS Ocean Fishing Overlay

from .path_helpers import get_app_dir, get_default_act_log_dir
from .timing import interruptible_sleep
from .validators import (
    validate_zone_ids,
    validate_lead_bias,
    validate_hotkey,
    validate_anchor,
    validate_poll_interval,
    validate_frame_interval,
)

__all__ = [
    'get_app_dir',
    'get_default_act_log_dir',
    'interruptible_sleep',
    'validate_zone_ids',
    'validate_lead_bias',
    'validate_hotkey',
    'validate_anchor',
    'validate_poll_interval',
    'validate_frame_interval',
]
