"""
Tests for theory module - Camelot wheel key-system conversion.
"""

from types import MappingProxyType

import numpy as np
import pytest
from harmonic_sort.theory import camelot
from harmonic_sort.theory.camelot import (
    MAJOR_KEY_TO_CAMELOT,
    MINOR_KEY_TO_CAMELOT,
    WheelMappingError,
    WheelPosition,
    compatible_wheel_positions,
    get_key_name,
    parse_camelot,
    to_display_string,
    to_sort_value,
    to_wheel_position,
    wheel_position_for,
)
from harmonic_sort.models import AudioFeatures


class TestWheelConversion:
    """Test pitch class / mode to wheel position conversion."""

    def test_all_24_keys_map_to_distinct_positions(self):
        """Every (pitch class, mode) pair should give a unique position."""
        positions = {
            to_wheel_position(pitch_class, mode)
            for pitch_class in range(12)
            for mode in (0, 1)
        }
        assert len(positions) == 24
        assert None not in positions

    def test_each_quality_covers_whole_wheel(self):
        """Minor and major outputs should each cover numbers 1-12."""
        minor = {to_wheel_position(pc, 0) for pc in range(12)}
        major = {to_wheel_position(pc, 1) for pc in range(12)}

        assert {p.number for p in minor} == set(range(1, 13))
        assert {p.number for p in major} == set(range(1, 13))
        assert all(p.letter == "A" for p in minor)
        assert all(p.letter == "B" for p in major)

    def test_tables_are_bijections(self):
        """Both lookup tables map 0-11 onto 1-12."""
        for table in (MINOR_KEY_TO_CAMELOT, MAJOR_KEY_TO_CAMELOT):
            assert set(table.keys()) == set(range(12))
            assert set(table.values()) == set(range(1, 13))

    def test_tables_are_read_only(self):
        """Lookup tables cannot be modified at runtime."""
        with pytest.raises(TypeError):
            MINOR_KEY_TO_CAMELOT[0] = 5

    @pytest.mark.parametrize("pitch_class,mode,expected", [
        (8, 1, "1B"),
        (5, 0, "1A"),
        (0, 1, "5B"),
        (9, 0, "5A"),
        (7, 1, "6B"),
        (1, 1, "12B"),
        (10, 0, "12A"),
    ])
    def test_canonical_strings(self, pitch_class, mode, expected):
        """Known keys should format to their Camelot notation."""
        assert to_display_string(to_wheel_position(pitch_class, mode)) == expected

    def test_nonzero_mode_is_major(self):
        """Any mode other than 0 selects the major table."""
        assert to_wheel_position(0, 2) == to_wheel_position(0, 1)

    @pytest.mark.parametrize("pitch_class", [-1, 12, 100, None])
    def test_out_of_range_pitch_class_is_unknown(self, pitch_class):
        """No key detected or invalid pitch class yields None, not an error."""
        assert to_wheel_position(pitch_class, 1) is None
        assert to_wheel_position(pitch_class, 0) is None

    def test_missing_table_entry_is_fatal(self, monkeypatch):
        """A hole in the mapping tables is a programming error."""
        monkeypatch.setattr(camelot, "MINOR_KEY_TO_CAMELOT", MappingProxyType({}))
        with pytest.raises(WheelMappingError):
            to_wheel_position(3, 0)

    @pytest.mark.parametrize("pitch_class", [3.5, 0.1, 11.9, float("nan"), "3"])
    def test_non_integral_pitch_class_is_unknown(self, pitch_class):
        """Fractional pitch classes are not truncated to a neighbouring key."""
        assert to_wheel_position(pitch_class, 1) is None

    def test_whole_number_pitch_class_types(self):
        assert to_wheel_position(3.0, 1) == to_wheel_position(3, 1)
        assert to_wheel_position(np.int64(9), 0) == WheelPosition(5, "A")

    def test_wheel_position_for_features(self):
        """Features records convert through their key and mode."""
        assert wheel_position_for(AudioFeatures(tempo=120, key=9, mode=0)) == WheelPosition(5, "A")
        assert wheel_position_for(AudioFeatures(tempo=120, key=-1, mode=0)) is None
        assert wheel_position_for(None) is None


class TestDisplayAndSortValues:
    """Test display formatting and sort keys."""

    def test_display_string_of_unknown(self):
        assert to_display_string(None) is None

    def test_str_matches_display_string(self):
        position = WheelPosition(8, "B")
        assert str(position) == to_display_string(position) == "8B"

    def test_minor_keys_sort_before_major(self):
        """Minor keys occupy 0-11, major keys 12-23."""
        assert to_sort_value(WheelPosition(1, "A")) == 0
        assert to_sort_value(WheelPosition(12, "A")) == 11
        assert to_sort_value(WheelPosition(1, "B")) == 12
        assert to_sort_value(WheelPosition(12, "B")) == 23

    def test_unknown_key_sorts_first(self):
        assert to_sort_value(None) == -1

    def test_sort_values_cover_range(self):
        values = {
            to_sort_value(to_wheel_position(pc, mode))
            for pc in range(12)
            for mode in (0, 1)
        }
        assert values == set(range(24))


class TestCompatibleKeys:
    """Test compatible key sets."""

    def test_compatible_positions(self):
        compatible = compatible_wheel_positions(WheelPosition(8, "A"))
        assert compatible == {
            WheelPosition(8, "A"),
            WheelPosition(8, "B"),
            WheelPosition(9, "A"),
            WheelPosition(7, "A"),
        }

    def test_wraps_around_wheel(self):
        """12 wraps to 1 and 1 wraps to 12."""
        assert WheelPosition(1, "B") in compatible_wheel_positions(WheelPosition(12, "B"))
        assert WheelPosition(12, "A") in compatible_wheel_positions(WheelPosition(1, "A"))

    def test_always_four_keys(self):
        for number in range(1, 13):
            for letter in ("A", "B"):
                assert len(compatible_wheel_positions(WheelPosition(number, letter))) == 4


class TestParsingAndNames:
    """Test Camelot parsing and readable key names."""

    def test_parse_camelot(self):
        assert parse_camelot("8A") == WheelPosition(8, "A")
        assert parse_camelot(" 12b ") == WheelPosition(12, "B")

    @pytest.mark.parametrize("text", ["", "8", "8C", "13A", "0B", "XA"])
    def test_parse_invalid_camelot(self, text):
        with pytest.raises(ValueError):
            parse_camelot(text)

    def test_key_names(self):
        assert get_key_name(0, 1) == "C Major"
        assert get_key_name(9, 0) == "A Minor"
        assert get_key_name(6, 1) == "F# Major"
        assert get_key_name(-1, 1) == "Unknown"

    @pytest.mark.parametrize("mode", [0, 2, None])
    def test_key_name_is_major_only_for_mode_1(self, mode):
        assert get_key_name(0, mode) == "C Minor"

    def test_key_name_of_fractional_pitch_class(self):
        assert get_key_name(3.5, 1) == "Unknown"
