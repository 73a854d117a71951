"""
Camelot wheel compatibility rules for harmonic mixing
"""

from typing import Optional

from harmonic_sort.theory.camelot import WheelPosition

# Scores at or above this value count as a good transition
GOOD_TRANSITION_THRESHOLD = 5


def calculate_compatibility_score(
    position1: Optional[WheelPosition],
    position2: Optional[WheelPosition]
) -> int:
    """
    Calculate harmonic compatibility between two wheel positions.

    Scoring (first match wins):
    - Same key: 10
    - Relative major/minor (same number, other letter): 8
    - Adjacent on wheel (+1 or -1), same letter: 7
    - Adjacent with letter change (diagonal): 5
    - Two steps away, same letter: 3
    - Anything else: 1
    - Unknown key on either side: 0

    Args:
        position1: Wheel position of the outgoing track
        position2: Wheel position of the incoming track

    Returns:
        Compatibility score, higher is better
    """
    if position1 is None or position2 is None:
        return 0

    same_letter = position1.letter == position2.letter
    num_diff = abs(position1.number - position2.number)

    # Perfect match
    if num_diff == 0 and same_letter:
        return 10

    # Relative major/minor - mood shift
    if num_diff == 0:
        return 8

    # 11 covers the wrap from 12 to 1
    is_adjacent = num_diff in (1, 11)

    if is_adjacent and same_letter:
        return 7

    if is_adjacent:
        return 5

    # Two steps away
    if num_diff in (2, 10) and same_letter:
        return 3

    return 1


def is_good_transition(
    position1: Optional[WheelPosition],
    position2: Optional[WheelPosition]
) -> bool:
    """True when both keys are known and the pair mixes cleanly."""
    if position1 is None or position2 is None:
        return False
    return calculate_compatibility_score(position1, position2) >= GOOD_TRANSITION_THRESHOLD
