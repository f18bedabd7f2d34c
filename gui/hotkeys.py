# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# GUI Module - Global hotkeys

import logging

from pynput.keyboard import Listener

logger = logging.getLogger("OceanFishing")


def key_to_name(key):
    """pynput key -> lowercase name ('f8', 'a', ...)"""
    try:
        if getattr(key, "char", None):
            return key.char.lower()
    except AttributeError:
        pass
    return str(key).lower().replace("key.", "")


class HotkeyListener:
    """
    Global hotkey listener.

    on_press runs on the pynput thread, so actions are always marshalled
    to the GUI thread with root.after(0, ...).
    """

    def __init__(self, root, hotkeys, actions):
        """
        Args:
            root: Tk root used to reach the GUI thread
            hotkeys: Dict of action name -> key name (from settings)
            actions: Dict of action name -> callable
        """
        self.root = root
        self.hotkeys = hotkeys
        self.actions = actions
        self.listener = None

    def start(self):
        """Setup global hotkey listener"""
        self.listener = Listener(on_press=self.on_press)
        self.listener.start()
        logger.info(
            "Hotkeys: " + ", ".join(f"{name}={key.upper()}" for name, key in self.hotkeys.items())
        )

    def stop(self):
        if self.listener is not None:
            self.listener.stop()
            self.listener = None

    def on_press(self, key):
        key_name = key_to_name(key)
        for action_name, bound_key in self.hotkeys.items():
            if key_name == bound_key and action_name in self.actions:
                self.root.after(0, self.actions[action_name])
                return
