"""
Track and report data structures shared by the sorting pipeline.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from harmonic_sort.theory.camelot import WheelPosition, to_display_string


@dataclass(frozen=True)
class Track:
    """A playlist item. Only the id is used for ordering decisions."""
    id: str
    name: str = ""
    artists: List[str] = field(default_factory=list, compare=False)
    uri: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class AudioFeatures:
    """Audio analysis supplied by an external service."""
    tempo: Optional[float] = None  # BPM, None or 0 means unknown
    key: int = -1  # pitch class 0-11, -1 when no key was detected
    mode: int = 1  # 0 = minor, 1 = major
    energy: Optional[float] = None
    danceability: Optional[float] = None
    valence: Optional[float] = None
    time_signature: Optional[int] = None


@dataclass(frozen=True)
class AnnotatedTrack:
    """Track enriched with its features and wheel position for one sort run."""
    track: Track
    features: Optional[AudioFeatures]
    wheel_position: Optional[WheelPosition]
    original_index: int

    @property
    def id(self) -> str:
        return self.track.id

    @property
    def tempo(self) -> float:
        if self.features is None or self.features.tempo is None:
            return 0.0
        tempo = float(self.features.tempo)
        # NaN/inf from a broken analysis is treated as unknown
        return tempo if math.isfinite(tempo) else 0.0

    @property
    def camelot(self) -> Optional[str]:
        return to_display_string(self.wheel_position)


@dataclass(frozen=True)
class BpmRange:
    """Rounded tempo bounds of a sorted playlist."""
    min: int
    max: int


@dataclass(frozen=True)
class SortReport:
    """Quality summary of a sorted ordering compared to its source."""
    total_tracks: int
    good_transitions: int
    total_transitions: int
    harmonic_score_percent: int
    moved_tracks: int
    bpm_range: Optional[BpmRange] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys the playlist UI expects."""
        bpm_range = None
        if self.bpm_range is not None:
            bpm_range = {"min": self.bpm_range.min, "max": self.bpm_range.max}

        return {
            "totalTracks": self.total_tracks,
            "goodTransitions": self.good_transitions,
            "totalTransitions": self.total_transitions,
            "harmonicScorePercent": self.harmonic_score_percent,
            "movedTracks": self.moved_tracks,
            "bpmRange": bpm_range,
        }
