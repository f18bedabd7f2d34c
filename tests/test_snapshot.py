"""
Test suite for core/snapshot.py
===============================
Tests for display formatting, bite windows and scorers.
"""

import pytest
from core.snapshot import (
    MOOCH_MARKER,
    build_snapshot,
    build_target_views,
    format_bite_window,
    format_cast_time,
    is_in_bite_window,
    tug_marks,
)
from core.state import CastPhase, SessionState
from data import FishEntry, StopInfo
from data.fish import score_double_hook, score_triple_hook


def fish(name="Fish", min_time=2, max_time=4, **kwargs):
    kwargs.setdefault("tug", 1)
    kwargs.setdefault("points", 10)
    return FishEntry(name, min_time, max_time, **kwargs)


def casting(elapsed, spectral=True, mooch=False):
    return SessionState(
        cast_phase=CastPhase.CASTING,
        is_spectral=spectral,
        is_mooch=mooch,
        elapsed=elapsed,
        is_active=True,
    )


class TestFormatting:
    """Tests for cast time and bite window text"""

    def test_cast_time_one_decimal(self):
        assert format_cast_time(3.0) == "3.0"
        assert format_cast_time(0) == "0.0"
        assert format_cast_time(12.3) == "12.3"

    def test_equal_bounds_single_value(self):
        assert format_bite_window(fish(min_time=2, max_time=2)) == "2"

    def test_range(self):
        assert format_bite_window(fish(min_time=2, max_time=5)) == "2-5"

    def test_fractional_bounds(self):
        assert format_bite_window(fish(min_time=2.5, max_time=4)) == "2.5-4"

    def test_float_whole_numbers(self):
        assert format_bite_window(fish(min_time=7.0, max_time=7.0)) == "7"

    @pytest.mark.parametrize("tug, marks", [(1, "!"), (2, "!!"), (3, "!!!"), (0, ""), (4, "")])
    def test_tug_marks(self, tug, marks):
        assert tug_marks(tug) == marks


class TestBiteWindow:
    """Tests for is_in_bite_window"""

    def test_inclusive_bounds(self):
        entry = fish(min_time=2, max_time=4)
        assert is_in_bite_window(entry, casting(2.0), lead_bias=0) == True
        assert is_in_bite_window(entry, casting(4.0), lead_bias=0) == True
        assert is_in_bite_window(entry, casting(1.9), lead_bias=0) == False
        assert is_in_bite_window(entry, casting(4.1), lead_bias=0) == False

    def test_lead_bias_shifts_window(self):
        entry = fish(min_time=2, max_time=4)
        assert is_in_bite_window(entry, casting(1.95), lead_bias=0.07) == True
        assert is_in_bite_window(entry, casting(3.95), lead_bias=0.07) == False

    def test_requires_spectral(self):
        entry = fish(min_time=2, max_time=4)
        assert is_in_bite_window(entry, casting(3.0, spectral=False)) == False

    def test_mooch_does_not_matter(self):
        entry = fish(min_time=2, max_time=4)
        assert is_in_bite_window(entry, casting(3.0, mooch=True)) == True

    def test_idle_with_last_elapsed(self):
        # Highlight stays on the last value after the cast ends
        state = SessionState(is_spectral=True, elapsed=3.0, is_active=True)
        assert is_in_bite_window(fish(min_time=2, max_time=4), state) == True


class TestScorers:
    """Tests for the point scorers"""

    def test_double_hook(self):
        assert score_double_hook(fish(points=10, max_dh=3)) == 30

    def test_triple_hook(self):
        # ((3 - 1) * 2 + 1) * 10 * 2
        assert score_triple_hook(fish(points=10, max_dh=3)) == 100

    def test_single_fish(self):
        assert score_double_hook(fish(points=40)) == 40
        assert score_triple_hook(fish(points=40)) == 80


class TestTargetViews:
    """Tests for build_target_views and build_snapshot"""

    def test_row_fields(self):
        entry = fish("Heavenskey", 2, 4, tug=1, points=10, max_dh=4)
        (view,) = build_target_views([entry], casting(3.0), score_double_hook)
        assert view.name == "Heavenskey"
        assert view.tug_marks == "!"
        assert view.time_text == "2-4"
        assert view.points == 40
        assert view.is_selected == True

    def test_mooch_marker_independent_of_selection(self):
        entries = [
            fish("Mooch In", 2, 4, is_mooch=True),
            fish("Mooch Out", 10, 12, is_mooch=True),
            fish("Plain In", 2, 4),
        ]
        views = build_target_views(entries, casting(3.0))
        assert [v.mooch_marker for v in views] == [MOOCH_MARKER, MOOCH_MARKER, ""]
        assert [v.is_selected for v in views] == [True, False, True]

    def test_custom_scorer(self):
        views = build_target_views([fish(points=7)], casting(0.0), lambda f: -1)
        assert views[0].points == -1

    def test_order_preserved(self):
        entries = [fish("B", 5, 6), fish("A", 1, 2)]
        assert [v.name for v in build_target_views(entries, SessionState())] == ["B", "A"]

    def test_snapshot(self):
        stop = StopInfo(
            name="Galadion Bay (Day)",
            bait="Krill",
            spectral_bait="Ragworm",
            targets=(fish("Heavenskey", 2, 4),),
        )
        state = casting(3.0)
        snapshot = build_snapshot(state, stop)
        assert snapshot.is_active == True
        assert snapshot.route_name == "Galadion Bay (Day)"
        assert snapshot.bait == "Krill"
        assert snapshot.spectral_bait == "Ragworm"
        assert snapshot.cast_time == 3.0
        assert snapshot.cast_time_text == "3.0"
        assert snapshot.is_casting == True
        assert snapshot.is_spectral == True
        assert snapshot.route_cursor == 0
        assert snapshot.targets[0].is_selected == True
