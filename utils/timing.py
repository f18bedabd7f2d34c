# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Timing and sleep utilities

import time


def interruptible_sleep(duration, running_flag_fn, step=0.1):
    """Sleep that can be interrupted by checking a running flag

    Args:
        duration: Sleep duration in seconds
        running_flag_fn: Callable that returns True if should continue, False to interrupt
        step: Seconds between flag checks

    Returns:
        True if completed full duration, False if interrupted
    """
    start = time.monotonic()
    while time.monotonic() - start < duration:
        if not running_flag_fn():
            return False
        time.sleep(min(step, duration))
    return running_flag_fn()
