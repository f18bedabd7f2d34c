"""
Log Line Classification

Turns one raw game log line into at most one FishingEvent.

Only six kinds of line matter to the overlay. Every other line (the vast
majority of the log) classifies as None and is ignored by the session.

The pattern table is ORDERED and the first match wins. Area change and
cast must be tested before the miss phrases, which are broad enough to
collide with other messages. A cast into a spectral current is not a
separate pattern: a CAST match is refined to SPECTRAL_CAST afterwards.

Record shape:
    00|<timestamp>|<actor id>|<actor name>|<message>|...
Area change matches on the actor name; everything else on the message of
a system line (empty actor name).
"""

import logging
import re
from enum import Enum, auto
from typing import Optional

logger = logging.getLogger("OceanFishing")


class FishingEvent(Enum):
    """Events the session state machine reacts to"""

    AREA_CHANGE = auto()
    CAST = auto()
    SPECTRAL_CAST = auto()
    MOOCH = auto()
    MISS = auto()
    QUIT = auto()
    BITE = auto()

    def __str__(self):
        return self.name.lower()

    @property
    def starts_cast(self):
        """Returns True for events that put a line in the water"""
        return self in (FishingEvent.CAST, FishingEvent.SPECTRAL_CAST, FishingEvent.MOOCH)

    @property
    def ends_cast(self):
        """Returns True for events that end the current cast"""
        return self in (FishingEvent.MISS, FishingEvent.QUIT, FishingEvent.BITE)


SPECTRAL_CURRENT_MARKER = "spectral current"

_CHAT_PREFIX = r"^00\|[^|]*\|[^|]*\|"

EVENT_PATTERNS = (
    (
        re.compile(_CHAT_PREFIX + r"Foerzagyl\|Weigh the anchors! Shove off!\|"),
        FishingEvent.AREA_CHANGE,
    ),
    (
        re.compile(_CHAT_PREFIX + r"\|You cast your line"),
        FishingEvent.CAST,
    ),
    (
        re.compile(
            _CHAT_PREFIX
            + r"\|(Nothing bites\.|You reel in your line|You lose your bait"
            r"|The fish gets away|You lose your |You cannot carry any more)"
        ),
        FishingEvent.MISS,
    ),
    (
        re.compile(_CHAT_PREFIX + r"\|You recast your line with the fish still hooked\."),
        FishingEvent.MOOCH,
    ),
    (
        re.compile(_CHAT_PREFIX + r"\|(You put away your rod|Fishing canceled)"),
        FishingEvent.QUIT,
    ),
    (
        re.compile(_CHAT_PREFIX + r"\|Something bites"),
        FishingEvent.BITE,
    ),
)


def classify_line(line) -> Optional[FishingEvent]:
    """Classify a raw log line

    Args:
        line: Raw log line (anything; non-strings classify as None)

    Returns:
        The first matching FishingEvent in table order, or None
    """
    if not line or not isinstance(line, str):
        return None

    for pattern, event in EVENT_PATTERNS:
        if pattern.match(line):
            if event is FishingEvent.CAST and SPECTRAL_CURRENT_MARKER in line:
                event = FishingEvent.SPECTRAL_CAST
            logger.debug(f"Classified {event}: {line[:80]}")
            return event

    return None
