# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Bait table: default bait and spectral-current bait per time of day

from .models import BaitSet
from .routes import (
    GALADION_BAY,
    SOUTHERN_MERLTHOR,
    NORTHERN_MERLTHOR,
    RHOTANO_SEA,
    CIELDALAES,
    BLOODBRINE_SEA,
    ROTHLYT_SOUND,
)

RAGWORM = "Ragworm"
KRILL = "Krill"
PLUMP_WORM = "Plump Worm"

BAIT_TABLE = {
    GALADION_BAY: BaitSet(default=KRILL, day=RAGWORM, sunset=PLUMP_WORM, night=KRILL),
    SOUTHERN_MERLTHOR: BaitSet(
        default=KRILL, day=KRILL, sunset=RAGWORM, night=PLUMP_WORM
    ),
    NORTHERN_MERLTHOR: BaitSet(
        default=RAGWORM, day=PLUMP_WORM, sunset=KRILL, night=RAGWORM
    ),
    RHOTANO_SEA: BaitSet(
        default=PLUMP_WORM, day=RAGWORM, sunset=PLUMP_WORM, night=KRILL
    ),
    CIELDALAES: BaitSet(default=RAGWORM, day=KRILL, sunset=PLUMP_WORM, night=KRILL),
    BLOODBRINE_SEA: BaitSet(default=KRILL, day=RAGWORM, sunset=KRILL, night=RAGWORM),
    ROTHLYT_SOUND: BaitSet(
        default=PLUMP_WORM, day=KRILL, sunset=RAGWORM, night=PLUMP_WORM
    ),
}
