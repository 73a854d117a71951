"""
Theory module for music theory utilities.

Contains:
- Camelot wheel key-system conversion
"""

from .camelot import (
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

__all__ = [
    "MAJOR_KEY_TO_CAMELOT",
    "MINOR_KEY_TO_CAMELOT",
    "WheelMappingError",
    "WheelPosition",
    "compatible_wheel_positions",
    "get_key_name",
    "parse_camelot",
    "to_display_string",
    "to_sort_value",
    "to_wheel_position",
    "wheel_position_for",
]
