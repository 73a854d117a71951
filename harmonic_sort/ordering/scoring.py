"""
Sort quality scoring

Measures how well a sorted playlist flows compared to its source order.
"""

import math
from typing import List, Sequence

import structlog

from harmonic_sort.models import AnnotatedTrack, BpmRange, SortReport
from harmonic_sort.ordering.camelot_rules import (
    calculate_compatibility_score,
    is_good_transition,
)

logger = structlog.get_logger()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_transitions(sorted_tracks: Sequence[AnnotatedTrack]) -> List[int]:
    """Compatibility score of every adjacent pair, in playlist order."""
    return [
        calculate_compatibility_score(prev.wheel_position, curr.wheel_position)
        for prev, curr in zip(sorted_tracks, sorted_tracks[1:])
    ]


def calculate_sort_stats(
    original: Sequence[AnnotatedTrack],
    sorted_tracks: Sequence[AnnotatedTrack]
) -> SortReport:
    """
    Summarize the quality of a sorted ordering.

    Tracks are matched between the two orderings by id. Playlists with
    duplicate ids are not supported: the last occurrence in the original
    order is used for the lookup.

    Args:
        original: Tracks in their source order
        sorted_tracks: The same tracks after sorting

    Returns:
        SortReport with transition, movement and BPM statistics
    """
    total_transitions = max(len(sorted_tracks) - 1, 0)

    good_transitions = sum(
        1
        for prev, curr in zip(sorted_tracks, sorted_tracks[1:])
        if is_good_transition(prev.wheel_position, curr.wheel_position)
    )

    harmonic_score = 0
    if total_transitions > 0:
        harmonic_score = _round_half_up(good_transitions / total_transitions * 100)

    original_positions = {track.id: index for index, track in enumerate(original)}
    moved_tracks = sum(
        1
        for index, track in enumerate(sorted_tracks)
        if original_positions.get(track.id) != index
    )

    bpms = [track.tempo for track in sorted_tracks if track.tempo > 0]
    bpm_range = None
    if bpms:
        bpm_range = BpmRange(min=_round_half_up(min(bpms)), max=_round_half_up(max(bpms)))

    report = SortReport(
        total_tracks=len(sorted_tracks),
        good_transitions=good_transitions,
        total_transitions=total_transitions,
        harmonic_score_percent=harmonic_score,
        moved_tracks=moved_tracks,
        bpm_range=bpm_range,
    )

    logger.info(
        "Sort stats calculated",
        total_tracks=report.total_tracks,
        good_transitions=report.good_transitions,
        harmonic_score=report.harmonic_score_percent,
        moved_tracks=report.moved_tracks,
    )
    return report
