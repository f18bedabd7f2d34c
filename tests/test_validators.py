"""
Test suite for utils/validators.py
===================================
Tests for zone ID, lead bias, hotkey, anchor, poll and frame interval validation.
"""

import pytest
from utils.validators import (
    validate_zone_ids,
    validate_lead_bias,
    validate_hotkey,
    validate_anchor,
    validate_poll_interval,
    validate_frame_interval,
)


class TestZoneIDValidation:
    """Tests for zone ID list validation"""

    def test_valid_single_zone(self):
        assert validate_zone_ids([900]) == True

    def test_valid_multiple_zones(self):
        assert validate_zone_ids([900, 901]) == True

    def test_valid_tuple(self):
        assert validate_zone_ids((900,)) == True

    def test_empty_list(self):
        assert validate_zone_ids([]) == False

    def test_none(self):
        assert validate_zone_ids(None) == False

    def test_not_a_list(self):
        assert validate_zone_ids(900) == False

    def test_hex_string_rejected(self):
        # Zone IDs are stored decimal; "384" is the log's hex form
        assert validate_zone_ids(["384"]) == False

    def test_negative_rejected(self):
        assert validate_zone_ids([900, -1]) == False

    def test_zero_rejected(self):
        assert validate_zone_ids([0]) == False

    def test_bool_rejected(self):
        assert validate_zone_ids([True]) == False


class TestLeadBiasValidation:
    """Tests for bite window lead bias validation"""

    def test_default_value(self):
        assert validate_lead_bias(0.07) == True

    def test_zero(self):
        assert validate_lead_bias(0) == True

    def test_upper_bound(self):
        assert validate_lead_bias(1.0) == True

    def test_too_large(self):
        assert validate_lead_bias(1.5) == False

    def test_negative(self):
        assert validate_lead_bias(-0.1) == False

    def test_numeric_string(self):
        assert validate_lead_bias("0.1") == True

    def test_non_numeric(self):
        assert validate_lead_bias("fast") == False

    def test_none(self):
        assert validate_lead_bias(None) == False


class TestHotkeyValidation:
    """Tests for hotkey name validation"""

    @pytest.mark.parametrize("key", ["f1", "f8", "f10", "f12", "F8"])
    def test_function_keys(self, key):
        assert validate_hotkey(key) == True

    def test_single_character(self):
        assert validate_hotkey("x") == True

    def test_unknown_function_key(self):
        assert validate_hotkey("f13") == False

    def test_word(self):
        assert validate_hotkey("space bar") == False

    def test_empty(self):
        assert validate_hotkey("") == False

    def test_none(self):
        assert validate_hotkey(None) == False


class TestAnchorValidation:
    """Tests for route anchor validation"""

    def test_aware_iso(self):
        assert validate_anchor("2021-11-25T00:00:00+00:00") == True

    def test_naive_iso(self):
        assert validate_anchor("2021-11-25T00:00:00") == True

    def test_date_only(self):
        assert validate_anchor("2021-11-25") == True

    def test_garbage(self):
        assert validate_anchor("next thursday") == False

    def test_empty(self):
        assert validate_anchor("") == False

    def test_not_a_string(self):
        assert validate_anchor(1637798400) == False


class TestPollIntervalValidation:
    """Tests for log poll interval validation"""

    def test_default(self):
        assert validate_poll_interval(0.05) == True

    def test_bounds(self):
        assert validate_poll_interval(0.01) == True
        assert validate_poll_interval(5.0) == True

    def test_too_small(self):
        assert validate_poll_interval(0.001) == False

    def test_too_large(self):
        assert validate_poll_interval(10) == False

    def test_non_numeric(self):
        assert validate_poll_interval("often") == False
        assert validate_poll_interval(None) == False


class TestFrameIntervalValidation:
    """Tests for tick frame interval validation"""

    def test_default(self):
        assert validate_frame_interval(16) == True

    def test_bounds(self):
        assert validate_frame_interval(1) == True
        assert validate_frame_interval(1000) == True

    def test_out_of_range(self):
        assert validate_frame_interval(0) == False
        assert validate_frame_interval(5000) == False

    def test_not_an_integer(self):
        assert validate_frame_interval(None) == False
        assert validate_frame_interval("abc") == False
        assert validate_frame_interval("16") == False
        assert validate_frame_interval(16.5) == False
        assert validate_frame_interval(True) == False
