"""Track ordering module"""

from harmonic_sort.ordering.optimizer import (
    SortOptions,
    annotate_tracks,
    build_tempo_buckets,
    rotate_to_best_match,
    sort_by_bpm_then_harmonic,
)
from harmonic_sort.ordering.camelot_rules import (
    GOOD_TRANSITION_THRESHOLD,
    calculate_compatibility_score,
    is_good_transition,
)
from harmonic_sort.ordering.scoring import calculate_sort_stats, score_transitions

__all__ = [
    "SortOptions",
    "annotate_tracks",
    "build_tempo_buckets",
    "rotate_to_best_match",
    "sort_by_bpm_then_harmonic",
    "GOOD_TRANSITION_THRESHOLD",
    "calculate_compatibility_score",
    "is_good_transition",
    "calculate_sort_stats",
    "score_transitions",
]
