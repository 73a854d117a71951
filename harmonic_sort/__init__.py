"""
harmonic-sort - BPM and Camelot key playlist ordering for DJ mixing.

Typical use:

    annotated = annotate_tracks(pairs)
    ordered = sort_by_bpm_then_harmonic(annotated, bucket_size=5)
    report = calculate_sort_stats(annotated, ordered)
"""

from harmonic_sort.models import (
    AnnotatedTrack,
    AudioFeatures,
    BpmRange,
    SortReport,
    Track,
)
from harmonic_sort.ordering import (
    SortOptions,
    annotate_tracks,
    calculate_compatibility_score,
    calculate_sort_stats,
    sort_by_bpm_then_harmonic,
)
from harmonic_sort.theory import (
    WheelMappingError,
    WheelPosition,
    compatible_wheel_positions,
    to_display_string,
    to_sort_value,
    to_wheel_position,
)

__version__ = "0.1.0"

__all__ = [
    "AnnotatedTrack",
    "AudioFeatures",
    "BpmRange",
    "SortReport",
    "Track",
    "SortOptions",
    "annotate_tracks",
    "calculate_compatibility_score",
    "calculate_sort_stats",
    "sort_by_bpm_then_harmonic",
    "WheelMappingError",
    "WheelPosition",
    "compatible_wheel_positions",
    "to_display_string",
    "to_sort_value",
    "to_wheel_position",
]
