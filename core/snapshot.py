"""
Session Snapshots

Read-only values handed to the renderer. Everything the overlay paints is
already formatted here, so the GUI never looks at SessionState directly.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

from data import DEFAULT_SCORER, FishEntry, StopInfo
from core.state import SessionState

# Seconds subtracted from both window bounds. The log line for a bite
# arrives slightly after the in-game animation.
BITE_LEAD_BIAS = 0.07

TUG_MARKS = ("!", "!!", "!!!")
MOOCH_MARKER = "*"


@dataclass(frozen=True)
class TargetView:
    """One row of the target grid"""

    name: str
    tug: int
    tug_marks: str
    time_text: str
    points: int
    is_mooch: bool
    mooch_marker: str
    is_selected: bool


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the overlay needs for one repaint"""

    is_active: bool
    route_name: str
    bait: str
    spectral_bait: str
    cast_time: float
    cast_time_text: str
    is_casting: bool
    is_spectral: bool
    is_mooch: bool
    route_cursor: int
    targets: Tuple[TargetView, ...]


def format_cast_time(elapsed: float) -> str:
    """Elapsed cast seconds with exactly one decimal ("3.0", not "3")"""
    return f"{elapsed:.1f}"


def _format_seconds(value: float) -> str:
    return f"{value:g}"


def format_bite_window(entry: FishEntry) -> str:
    """Bite window text: a single value when min and max are equal"""
    if entry.min_time == entry.max_time:
        return _format_seconds(entry.min_time)
    return f"{_format_seconds(entry.min_time)}-{_format_seconds(entry.max_time)}"


def tug_marks(tug: int) -> str:
    if 1 <= tug <= len(TUG_MARKS):
        return TUG_MARKS[tug - 1]
    return ""


def is_in_bite_window(
    entry: FishEntry, state: SessionState, lead_bias: float = BITE_LEAD_BIAS
) -> bool:
    """True when a spectral cast's elapsed time falls in the fish's window

    Mooch state does not affect the window test.
    """
    if not state.is_spectral:
        return False
    lower = entry.min_time - lead_bias
    upper = entry.max_time - lead_bias
    return lower <= state.elapsed <= upper


def build_target_views(
    targets: Iterable[FishEntry],
    state: SessionState,
    scorer: Callable[[FishEntry], int] = DEFAULT_SCORER,
    lead_bias: float = BITE_LEAD_BIAS,
) -> Tuple[TargetView, ...]:
    return tuple(
        TargetView(
            name=f.name,
            tug=f.tug,
            tug_marks=tug_marks(f.tug),
            time_text=format_bite_window(f),
            points=scorer(f),
            is_mooch=f.is_mooch,
            mooch_marker=MOOCH_MARKER if f.is_mooch else "",
            is_selected=is_in_bite_window(f, state, lead_bias),
        )
        for f in targets
    )


def build_snapshot(
    state: SessionState,
    stop: StopInfo,
    scorer: Callable[[FishEntry], int] = DEFAULT_SCORER,
    lead_bias: float = BITE_LEAD_BIAS,
) -> SessionSnapshot:
    """Combine session state and the active stop into a snapshot"""
    return SessionSnapshot(
        is_active=state.is_active,
        route_name=stop.name,
        bait=stop.bait,
        spectral_bait=stop.spectral_bait,
        cast_time=state.elapsed,
        cast_time_text=format_cast_time(state.elapsed),
        is_casting=state.is_casting,
        is_spectral=state.is_spectral,
        is_mooch=state.is_mooch,
        route_cursor=state.route_cursor,
        targets=build_target_views(stop.targets, state, scorer, lead_bias),
    )
