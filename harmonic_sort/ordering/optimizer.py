"""
Track ordering optimizer

Sorts a playlist in three passes:
- BPM, so tempo changes stay gradual
- Camelot key within each BPM bucket
- Bucket rotation, so the first track of a bucket mixes into the
  last track of the previous one
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import structlog

from harmonic_sort.config import get_settings
from harmonic_sort.models import AnnotatedTrack, AudioFeatures, Track
from harmonic_sort.ordering.camelot_rules import calculate_compatibility_score
from harmonic_sort.theory.camelot import to_sort_value, wheel_position_for

logger = structlog.get_logger()


@dataclass(frozen=True)
class SortOptions:
    """Sorting parameters."""
    bucket_size: float = 5.0  # Width of a BPM bucket
    ascending: bool = True  # Direction for both BPM passes

    def __post_init__(self):
        if isinstance(self.bucket_size, bool) or not isinstance(self.bucket_size, numbers.Real):
            raise ValueError(f"bucket_size must be a number, got {self.bucket_size!r}")
        if not math.isfinite(self.bucket_size) or self.bucket_size <= 0:
            raise ValueError(f"bucket_size must be positive, got {self.bucket_size}")

    @classmethod
    def from_settings(
        cls,
        bucket_size: Optional[float] = None,
        ascending: Optional[bool] = None
    ) -> "SortOptions":
        """Build options, filling unset values from the configured defaults."""
        settings = get_settings()
        return cls(
            bucket_size=settings.bpm_bucket_size if bucket_size is None else bucket_size,
            ascending=settings.ascending if ascending is None else ascending,
        )


def annotate_tracks(
    tracks: Iterable[Any],
    features_by_id: Optional[Mapping[str, Optional[AudioFeatures]]] = None
) -> List[AnnotatedTrack]:
    """
    Attach audio features and wheel positions to playlist tracks.

    Args:
        tracks: Either Track objects or (Track, AudioFeatures | None) pairs
        features_by_id: Features looked up by track id when plain Tracks are given

    Returns:
        List of AnnotatedTrack in input order
    """
    annotated = []

    for index, item in enumerate(tracks):
        if isinstance(item, Track):
            track = item
            features = features_by_id.get(item.id) if features_by_id else None
        else:
            track, features = item

        annotated.append(AnnotatedTrack(
            track=track,
            features=features,
            wheel_position=wheel_position_for(features),
            original_index=index,
        ))

    return annotated


def bucket_key_for(tempo: float, bucket_size: float) -> float:
    """
    Lower bound of the BPM bucket containing a tempo.

    A quotient that overflows to infinity is used as the bucket key
    as is, so those tracks share one bucket after every finite one.
    """
    quotient = tempo / bucket_size
    if math.isinf(quotient):
        return quotient
    return math.floor(quotient) * bucket_size


def build_tempo_buckets(
    tracks: Sequence[AnnotatedTrack],
    options: SortOptions
) -> List[Tuple[float, List[AnnotatedTrack]]]:
    """
    Group tracks into BPM buckets, each sorted by Camelot position.

    Args:
        tracks: Annotated tracks in any order
        options: Validated sort options

    Returns:
        (bucket_key, tracks) pairs ordered by bucket key
    """
    # First pass: sort entirely by BPM (stable)
    by_tempo = sorted(tracks, key=lambda t: t.tempo, reverse=not options.ascending)

    buckets = {}
    for track in by_tempo:
        key = bucket_key_for(track.tempo, options.bucket_size)
        buckets.setdefault(key, []).append(track)

    # Second pass: Camelot order within each bucket, unknown keys first
    ordered = []
    for key in sorted(buckets, reverse=not options.ascending):
        bucket = sorted(buckets[key], key=lambda t: to_sort_value(t.wheel_position))
        ordered.append((key, bucket))

    return ordered


def rotate_to_best_match(
    bucket: List[AnnotatedTrack],
    previous: Optional[AnnotatedTrack]
) -> List[AnnotatedTrack]:
    """
    Rotate a bucket so it starts with the best match for the previous track.

    Ties go to the earliest candidate in the bucket's current order.
    """
    if previous is None or not bucket:
        return list(bucket)

    best_index = 0
    best_score = -1

    for index, candidate in enumerate(bucket):
        score = calculate_compatibility_score(previous.wheel_position, candidate.wheel_position)
        if score > best_score:
            best_score = score
            best_index = index

    return bucket[best_index:] + bucket[:best_index]


def sort_by_bpm_then_harmonic(
    tracks: Sequence[AnnotatedTrack],
    bucket_size: Optional[float] = None,
    ascending: Optional[bool] = None
) -> List[AnnotatedTrack]:
    """
    Order tracks by BPM bucket, then by harmonic compatibility.

    Args:
        tracks: Annotated tracks in playlist order
        bucket_size: Width of a BPM bucket, defaults to settings
        ascending: BPM direction, defaults to settings

    Returns:
        The same tracks in mixing order

    Raises:
        ValueError: If bucket_size is not a positive number
    """
    options = SortOptions.from_settings(bucket_size=bucket_size, ascending=ascending)

    if not tracks:
        return []

    logger.info(
        "Starting track sort",
        track_count=len(tracks),
        bucket_size=options.bucket_size,
        ascending=options.ascending,
    )

    result: List[AnnotatedTrack] = []
    last_track: Optional[AnnotatedTrack] = None

    for key, bucket in build_tempo_buckets(tracks, options):
        rotated = rotate_to_best_match(bucket, last_track)

        logger.debug(
            "Bucket placed",
            bucket=key,
            size=len(rotated),
            first_key=rotated[0].camelot,
            last_key=rotated[-1].camelot,
        )

        result.extend(rotated)
        last_track = rotated[-1]

    logger.info("Track sort finished", track_count=len(result))
    return result
