"""
Session State Definitions

Defines the cast phases and the immutable session state value that the
transition functions in core.session replace on every event.
"""

from dataclasses import dataclass
from enum import Enum, auto


class CastPhase(Enum):
    """Cast phases of the fishing session"""

    IDLE = auto()       # No line in the water (or the last cast ended)
    CASTING = auto()    # Line is out, elapsed timer running

    def __str__(self):
        return self.name.title()

    @property
    def is_casting(self):
        """Returns True while a cast is in progress"""
        return self is CastPhase.CASTING


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of everything the session tracks.

    cast_start is in host clock seconds. elapsed keeps the last value
    after the cast ends so the overlay can still show it.
    """

    cast_phase: CastPhase = CastPhase.IDLE
    is_spectral: bool = False
    is_mooch: bool = False
    cast_start: float = 0.0
    elapsed: float = 0.0
    route_cursor: int = 0
    is_active: bool = False

    @property
    def is_casting(self) -> bool:
        return self.cast_phase.is_casting

    @property
    def should_tick(self) -> bool:
        """Tick loop guard: still casting AND still in the activity"""
        return self.cast_phase.is_casting and self.is_active
