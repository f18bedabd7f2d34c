"""
Test suite for core/events.py
=============================
Tests for log line classification and pattern table order.
"""

import pytest
from core.events import (
    EVENT_PATTERNS,
    FishingEvent,
    SPECTRAL_CURRENT_MARKER,
    classify_line,
)

TS = "2021-11-25T12:00:00.0000000-08:00"


def system_line(message):
    """System message record (empty actor name)"""
    return f"00|{TS}|0843||{message}|5f2e1c0a"


class TestAreaChange:
    """Tests for the voyage area change announcement"""

    def test_scenario_line(self):
        line = "00|2021|X|Foerzagyl|Weigh the anchors! Shove off!|"
        assert classify_line(line) == FishingEvent.AREA_CHANGE

    def test_full_record(self):
        line = f"00|{TS}|0044|Foerzagyl|Weigh the anchors! Shove off!|a1b2c3"
        assert classify_line(line) == FishingEvent.AREA_CHANGE

    def test_other_speaker_ignored(self):
        line = f"00|{TS}|0044|Someone|Weigh the anchors! Shove off!|a1b2c3"
        assert classify_line(line) is None


class TestCastEvents:
    """Tests for cast, spectral cast and mooch lines"""

    def test_cast(self):
        assert classify_line(system_line("You cast your line.")) == FishingEvent.CAST

    def test_spectral_cast(self):
        line = system_line("You cast your line into the spectral current.")
        assert classify_line(line) == FishingEvent.SPECTRAL_CAST

    def test_spectral_marker_wins_over_plain_cast(self):
        line = system_line(f"You cast your line ... {SPECTRAL_CURRENT_MARKER}")
        assert classify_line(line) != FishingEvent.CAST
        assert classify_line(line) == FishingEvent.SPECTRAL_CAST

    def test_spectral_marker_only_refines_cast(self):
        # Marker on a non-cast line doesn't create a cast
        line = system_line("The spectral current disappears.")
        assert classify_line(line) is None

    def test_mooch(self):
        line = system_line("You recast your line with the fish still hooked.")
        assert classify_line(line) == FishingEvent.MOOCH

    def test_cast_by_named_actor_ignored(self):
        line = f"00|{TS}|0843|Player Name|You cast your line.|5f2e1c0a"
        assert classify_line(line) is None


class TestCastEndingEvents:
    """Tests for miss, quit and bite phrases"""

    @pytest.mark.parametrize(
        "message",
        [
            "Nothing bites.",
            "You reel in your line.",
            "You lose your bait.",
            "The fish gets away.",
            "You lose your Sothis.",
            "You cannot carry any more Heavenskey.",
        ],
    )
    def test_miss_phrases(self, message):
        assert classify_line(system_line(message)) == FishingEvent.MISS

    @pytest.mark.parametrize("message", ["You put away your rod.", "Fishing canceled."])
    def test_quit_phrases(self, message):
        assert classify_line(system_line(message)) == FishingEvent.QUIT

    def test_bite(self):
        line = system_line("Something bites!")
        assert classify_line(line) == FishingEvent.BITE


class TestFirstMatchWins:
    """Tests for ordered pattern table semantics"""

    def test_table_order(self):
        order = [event for _, event in EVENT_PATTERNS]
        assert order == [
            FishingEvent.AREA_CHANGE,
            FishingEvent.CAST,
            FishingEvent.MISS,
            FishingEvent.MOOCH,
            FishingEvent.QUIT,
            FishingEvent.BITE,
        ]

    def test_spectral_cast_is_not_a_table_slot(self):
        assert FishingEvent.SPECTRAL_CAST not in [event for _, event in EVENT_PATTERNS]

    def test_cast_checked_before_bite(self):
        line = system_line("You cast your line. Something bites!")
        assert classify_line(line) == FishingEvent.CAST

    def test_exactly_one_event_per_line(self):
        line = system_line("You cast your line into the spectral current.")
        result = classify_line(line)
        assert isinstance(result, FishingEvent)


class TestClassifierTotality:
    """Tests that classification never raises"""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "00|",
            "00||||",
            "|||||||",
            "\x00\x01\x02",
            "01|2021-11-25T12:00:00|384|The Endeavor|abc",
            "21|2021-11-25T12:00:00|10001234|Player|7A|Cast|",
            "00|" + "x" * 10000,
            "You cast your line.",
            " 00|ts|id||You cast your line.|",
            "ünïcødé ☃ 00|ts|id||Something bites|",
        ],
    )
    def test_unrecognized_lines(self, line):
        assert classify_line(line) is None

    @pytest.mark.parametrize("value", [None, 0, 42, b"00|ts|id||Something bites|", [], {}])
    def test_non_string_input(self, value):
        assert classify_line(value) is None

    def test_result_domain(self):
        lines = [
            system_line("You cast your line."),
            system_line("Nothing bites."),
            "garbage",
            "",
        ]
        for line in lines:
            result = classify_line(line)
            assert result is None or isinstance(result, FishingEvent)


class TestEventProperties:
    """Tests for FishingEvent helpers"""

    def test_starts_cast(self):
        assert FishingEvent.CAST.starts_cast
        assert FishingEvent.SPECTRAL_CAST.starts_cast
        assert FishingEvent.MOOCH.starts_cast
        assert not FishingEvent.BITE.starts_cast
        assert not FishingEvent.AREA_CHANGE.starts_cast

    def test_ends_cast(self):
        assert FishingEvent.MISS.ends_cast
        assert FishingEvent.QUIT.ends_cast
        assert FishingEvent.BITE.ends_cast
        assert not FishingEvent.CAST.ends_cast
        assert not FishingEvent.AREA_CHANGE.ends_cast
