"""
Camelot Wheel - key-system conversion for harmonic mixing.

Audio analysis reports a key as a pitch class (0=C, 1=C#/Db, ... 11=B)
plus a mode flag (0=minor, 1=major). The Camelot Wheel places the 24 keys
on a 12-position circle of fifths so that compatible keys sit next to
each other:

Outer circle (B) = MAJOR keys
Inner circle (A) = MINOR keys

| Wheel | Minor (A) | Major (B) |
|-------|-----------|-----------|
| 1     | Fm        | Ab        |
| 2     | Cm        | Eb        |
| 3     | Gm        | Bb        |
| 4     | Dm        | F         |
| 5     | Am        | C         |
| 6     | Em        | G         |
| 7     | Bm        | D         |
| 8     | F#m       | A         |
| 9     | C#m       | E         |
| 10    | G#m       | B         |
| 11    | D#m       | F#        |
| 12    | A#m       | C#        |
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

MINOR = "A"
MAJOR = "B"

# Pitch class -> wheel number, minor keys (A)
MINOR_KEY_TO_CAMELOT: Mapping[int, int] = MappingProxyType({
    5: 1,    # F minor
    0: 2,    # C minor
    7: 3,    # G minor
    2: 4,    # D minor
    9: 5,    # A minor
    4: 6,    # E minor
    11: 7,   # B minor
    6: 8,    # F# minor
    1: 9,    # C# minor
    8: 10,   # G# minor
    3: 11,   # D# minor
    10: 12,  # A# minor
})

# Pitch class -> wheel number, major keys (B)
MAJOR_KEY_TO_CAMELOT: Mapping[int, int] = MappingProxyType({
    8: 1,    # G#/Ab major
    3: 2,    # D#/Eb major
    10: 3,   # A#/Bb major
    5: 4,    # F major
    0: 5,    # C major
    7: 6,    # G major
    2: 7,    # D major
    9: 8,    # A major
    4: 9,    # E major
    11: 10,  # B major
    6: 11,   # F#/Gb major
    1: 12,   # C#/Db major
})

PITCH_CLASS_NAMES = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)


class WheelMappingError(RuntimeError):
    """Raised when the static key tables do not cover a valid pitch class."""


@dataclass(frozen=True)
class WheelPosition:
    """A position on the Camelot Wheel, e.g. 8B."""
    number: int  # 1-12
    letter: str  # A = minor, B = major

    @property
    def is_minor(self) -> bool:
        return self.letter == MINOR

    @property
    def is_major(self) -> bool:
        return self.letter == MAJOR

    def __str__(self) -> str:
        return f"{self.number}{self.letter}"


def _pitch_class_index(pitch_class) -> Optional[int]:
    """Integral pitch class in 0-11, or None for anything else."""
    if pitch_class is None:
        return None
    try:
        index = int(pitch_class)
    except (TypeError, ValueError, OverflowError):
        return None
    if index != pitch_class or not 0 <= index <= 11:
        return None
    return index


def to_wheel_position(pitch_class: Optional[int], mode: Optional[int]) -> Optional[WheelPosition]:
    """
    Convert an analysed pitch class and mode to a wheel position.

    Args:
        pitch_class: Pitch class 0-11, -1 when no key was detected
        mode: 0 for minor, anything else for major

    Returns:
        WheelPosition, or None when the pitch class is out of range
        or not a whole number

    Raises:
        WheelMappingError: If an in-range pitch class is missing from the tables
    """
    index = _pitch_class_index(pitch_class)
    if index is None:
        return None

    is_minor = mode == 0
    table = MINOR_KEY_TO_CAMELOT if is_minor else MAJOR_KEY_TO_CAMELOT

    try:
        number = table[index]
    except KeyError:
        raise WheelMappingError(f"No wheel number for pitch class {pitch_class}")

    return WheelPosition(number=number, letter=MINOR if is_minor else MAJOR)


def wheel_position_for(features) -> Optional[WheelPosition]:
    """Wheel position of an optional AudioFeatures record."""
    if features is None:
        return None
    return to_wheel_position(features.key, features.mode)


def to_display_string(position: Optional[WheelPosition]) -> Optional[str]:
    """Format a wheel position as Camelot notation ("8B", "5A")."""
    if position is None:
        return None
    return f"{position.number}{position.letter}"


def to_sort_value(position: Optional[WheelPosition]) -> int:
    """
    Numeric sort key in the range 0-23.

    Minor keys come first (0-11), then major keys (12-23).
    Unknown keys sort before everything else (-1).
    """
    if position is None:
        return -1
    base_value = 0 if position.is_minor else 12
    return base_value + (position.number - 1)


def compatible_wheel_positions(position: WheelPosition) -> FrozenSet[WheelPosition]:
    """
    Get the keys that mix cleanly with a given position.

    Compatible keys are:
    - Same key
    - Relative major/minor (same number, other letter)
    - +1 and -1 on the wheel, same letter
    """
    other_letter = MAJOR if position.is_minor else MINOR
    next_num = position.number + 1 if position.number < 12 else 1
    prev_num = position.number - 1 if position.number > 1 else 12

    return frozenset({
        position,
        WheelPosition(position.number, other_letter),
        WheelPosition(next_num, position.letter),
        WheelPosition(prev_num, position.letter),
    })


def parse_camelot(camelot: str) -> WheelPosition:
    """
    Parse Camelot notation into a wheel position.

    Args:
        camelot: Camelot notation (e.g., "8A", "12B")

    Returns:
        Parsed WheelPosition

    Raises:
        ValueError: If notation is invalid
    """
    camelot = camelot.upper().strip()

    if len(camelot) < 2:
        raise ValueError(f"Invalid Camelot notation: {camelot}")

    letter = camelot[-1]
    if letter not in (MINOR, MAJOR):
        raise ValueError(f"Invalid Camelot letter: {letter}")

    try:
        number = int(camelot[:-1])
    except ValueError:
        raise ValueError(f"Invalid Camelot notation: {camelot}")

    if not 1 <= number <= 12:
        raise ValueError(f"Invalid Camelot number: {number}")

    return WheelPosition(number=number, letter=letter)


def get_key_name(pitch_class: Optional[int], mode: Optional[int]) -> str:
    """
    Readable key name, e.g. "C Major" or "A Minor".

    Only mode 1 reads as major here; any other mode value is shown as minor.
    """
    index = _pitch_class_index(pitch_class)
    if index is None:
        return "Unknown"

    mode_name = "Major" if mode == 1 else "Minor"
    return f"{PITCH_CLASS_NAMES[index]} {mode_name}"
