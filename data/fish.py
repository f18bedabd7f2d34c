# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Fish catalog per ocean location, plus the point scorers

"""
Fish catalog.

Entries are listed per location in catalog order. The catalog filter keeps
this order for fish that share the same min_time, so reordering entries here
changes what the overlay shows.

Bite windows are seconds since the cast. Spectral-only fish carry the
time of day they appear in.
"""

from .models import FishEntry, TimeOfDay
from .bait import RAGWORM, KRILL, PLUMP_WORM
from .routes import (
    GALADION_BAY,
    SOUTHERN_MERLTHOR,
    NORTHERN_MERLTHOR,
    RHOTANO_SEA,
    CIELDALAES,
    BLOODBRINE_SEA,
    ROTHLYT_SOUND,
)

DAY = TimeOfDay.DAY
SUNSET = TimeOfDay.SUNSET
NIGHT = TimeOfDay.NIGHT


def score_double_hook(entry: FishEntry) -> int:
    """Points for a double hook: max_dh fish at base points"""
    return entry.max_dh * entry.points


def score_triple_hook(entry: FishEntry) -> int:
    """Points for a triple hook under the spectral bonus"""
    return ((entry.max_dh - 1) * 2 + 1) * entry.points * 2


SCORERS = {
    "double_hook": score_double_hook,
    "triple_hook": score_triple_hook,
}

DEFAULT_SCORING_METHOD = "triple_hook"
DEFAULT_SCORER = SCORERS[DEFAULT_SCORING_METHOD]


FISH_CATALOG = {
    GALADION_BAY: (
        FishEntry("Heavenskey", 2, 4, tug=1, points=10, max_dh=4, bait=RAGWORM,
                  is_bait_required=True),
        FishEntry("Navigator's Print", 4, 5, tug=1, points=16, max_dh=2,
                  bait=KRILL, is_bait_required=True),
        FishEntry("Fishmonger", 5, 5, tug=1, points=30, max_dh=3, bait=PLUMP_WORM,
                  is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Funnel Shark", 6, 8, tug=2, points=40, max_dh=3,
                  bait=PLUMP_WORM, is_bait_required=True),
        FishEntry("Quicksilver Blade", 8, 11, tug=2, points=44, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Mythril Sovereign", 10, 12, tug=2, points=50, max_dh=2,
                  bait=RAGWORM, is_bait_required=True, time_of_day=DAY),
        FishEntry("Nimble Dancer", 11, 15, tug=2, points=55, max_dh=2,
                  bait=KRILL, is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Great Grandmarlin", 12, 15, tug=3, points=300, max_dh=1,
                  bait=KRILL, is_bait_required=True),
        FishEntry("Sothis", 16, 25, tug=3, points=500, max_dh=1, is_mooch=True,
                  time_of_day=NIGHT),
        FishEntry("Sea Nettle", 3, 6, tug=1, points=4, max_dh=1,
                  is_recommended=False),
    ),
    SOUTHERN_MERLTHOR: (
        FishEntry("Dravanian Smelt", 2, 3, tug=1, points=8, max_dh=4,
                  bait=KRILL, is_bait_required=True),
        FishEntry("Tarnished Shark", 5, 7, tug=2, points=25, max_dh=2,
                  bait=RAGWORM, is_bait_required=True),
        FishEntry("Little Leviathan", 5, 9, tug=2, points=36, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Gladius", 8, 10, tug=2, points=40, max_dh=2, bait=KRILL,
                  is_bait_required=True, time_of_day=DAY),
        FishEntry("Jasperhead", 9, 9, tug=1, points=18, max_dh=3, bait=RAGWORM,
                  is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Coral Manta", 12, 16, tug=3, points=150, max_dh=1,
                  is_mooch=True),
        FishEntry("Drunkfish", 4, 6, tug=1, points=5, max_dh=1,
                  is_recommended=False),
    ),
    NORTHERN_MERLTHOR: (
        FishEntry("Gugrusaurus", 3, 5, tug=1, points=12, max_dh=3,
                  bait=PLUMP_WORM, is_bait_required=True),
        FishEntry("Mopbeard", 4, 6, tug=1, points=20, max_dh=2, bait=RAGWORM,
                  is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Shooting Star", 6, 8, tug=2, points=38, max_dh=2, bait=KRILL,
                  is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Elder Dinichthys", 7, 10, tug=2, points=45, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True, time_of_day=DAY),
        FishEntry("Hafgufa", 13, 15, tug=3, points=250, max_dh=1, bait=RAGWORM,
                  is_bait_required=True),
        FishEntry("Aetherochemical Compound", 6, 9, tug=1, points=6, max_dh=1,
                  is_recommended=False),
    ),
    RHOTANO_SEA: (
        FishEntry("Crimson Monkfish", 2, 5, tug=1, points=14, max_dh=3,
                  bait=RAGWORM, is_bait_required=True),
        FishEntry("Sunken Mask", 5, 5, tug=1, points=18, max_dh=3,
                  bait=PLUMP_WORM, is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Deep Plaice", 5, 8, tug=2, points=28, max_dh=2, bait=KRILL,
                  is_bait_required=True),
        FishEntry("Spectral Discus", 7, 9, tug=2, points=42, max_dh=2,
                  bait=RAGWORM, is_bait_required=True, time_of_day=DAY),
        FishEntry("Slipsnail", 10, 14, tug=2, points=48, max_dh=2, bait=KRILL,
                  is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Stonescale", 17, 25, tug=3, points=400, max_dh=1,
                  is_mooch=True, time_of_day=SUNSET),
        FishEntry("Rhotano Wahoo", 4, 7, tug=1, points=5, max_dh=1,
                  is_recommended=False),
    ),
    CIELDALAES: (
        FishEntry("Metallic Boxfish", 2, 4, tug=1, points=10, max_dh=4,
                  bait=KRILL, is_bait_required=True),
        FishEntry("Goobbue Ray", 4, 6, tug=1, points=22, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Aethereye", 6, 6, tug=2, points=30, max_dh=2, bait=KRILL,
                  is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Hi-aetherlouse", 6, 9, tug=2, points=35, max_dh=2,
                  bait=RAGWORM, is_bait_required=True),
        FishEntry("Dark Nautilus", 9, 12, tug=2, points=46, max_dh=2,
                  bait=KRILL, is_bait_required=True, time_of_day=DAY),
        FishEntry("Titanic Sawfish", 18, 26, tug=3, points=450, max_dh=1,
                  is_mooch=True, time_of_day=SUNSET),
    ),
    BLOODBRINE_SEA: (
        FishEntry("Sweeper", 2, 4, tug=1, points=9, max_dh=4, bait=KRILL,
                  is_bait_required=True),
        FishEntry("Crimson Kelp", 3, 5, tug=1, points=15, max_dh=3,
                  bait=RAGWORM, is_bait_required=True, time_of_day=DAY),
        FishEntry("Bloodpolish Crab", 5, 8, tug=2, points=26, max_dh=2,
                  bait=KRILL, is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Blue Stitcher", 7, 10, tug=2, points=40, max_dh=2,
                  bait=RAGWORM, is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Bareface Barracuda", 9, 13, tug=2, points=52, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True),
        FishEntry("Seafaring Toad", 15, 20, tug=3, points=350, max_dh=1,
                  is_mooch=True, time_of_day=NIGHT),
    ),
    ROTHLYT_SOUND: (
        FishEntry("Rothlyt Kelp", 2, 3, tug=1, points=9, max_dh=4, bait=KRILL,
                  is_bait_required=True),
        FishEntry("Garum Jug", 4, 6, tug=1, points=20, max_dh=3, bait=RAGWORM,
                  is_bait_required=True, time_of_day=SUNSET),
        FishEntry("Trollfish", 5, 8, tug=2, points=32, max_dh=2, bait=KRILL,
                  is_bait_required=True, time_of_day=DAY),
        FishEntry("Panoptes", 7, 7, tug=2, points=38, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True, time_of_day=NIGHT),
        FishEntry("Crepe Sole", 8, 12, tug=2, points=44, max_dh=2,
                  bait=PLUMP_WORM, is_bait_required=True),
        FishEntry("Placodus", 16, 24, tug=3, points=420, max_dh=1,
                  is_mooch=True, time_of_day=NIGHT),
    ),
}
