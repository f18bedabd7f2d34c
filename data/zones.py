# Copyright (C) 2026 BPS
# This file is part of BPS Ocean Fishing Overlay.
#
# Zone identifiers of the ocean fishing instance

# Decimal zone ID as delivered by zone-change notifications.
# Network log files write the same ID in hex ("384").
OCEAN_FISHING_ZONE_IDS = (900,)
