"""
jam_engine/voice_leading.py — Root-movement voice-leading score.

calculate_voice_leading_quality() scores how smoothly a progression moves
from chord to chord, looking only at the roots:

    1. For each adjacent pair, take the root distance mod 12
    2. Fold it onto the shortest path around the circle: min(d, 12 − d)
    3. Look the folded distance up in MOVEMENT_QUALITY (default 0.6)
    4. Average over the n − 1 transitions

Fourths/fifths (5) score highest, whole steps (2) next; repeated roots (0)
and tritones (6) score lowest. Progressions of fewer than two chords score
exactly 1.0.
"""

from __future__ import annotations

from collections.abc import Sequence

from jam_engine.types import ChordAnalysis

MOVEMENT_QUALITY: dict[int, float] = {
    0: 0.3,  # same root
    1: 0.5,  # half step
    2: 0.9,  # whole step
    3: 0.7,  # minor third
    4: 0.8,  # major third
    5: 0.95,  # fourth / fifth
    6: 0.4,  # tritone
}
DEFAULT_MOVEMENT_QUALITY: float = 0.6


def root_movement(from_pc: int, to_pc: int) -> int:
    """Shortest distance between two pitch classes around the circle, in [0, 6].

    Examples:
        >>> root_movement(0, 7)
        5
        >>> root_movement(11, 0)
        1
    """
    distance = abs(from_pc - to_pc) % 12
    return min(distance, 12 - distance)


def _root_pcs(progression: Sequence[ChordAnalysis]) -> list[int]:
    pcs: list[int] = []
    for index, chord in enumerate(progression):
        pc = chord.root_pitch_class
        if pc is None:
            raise ValueError(
                f"Chord at position {index} ({chord.symbol!r}) has no root; "
                "voice leading needs parsed chords"
            )
        pcs.append(pc)
    return pcs


def calculate_voice_leading_quality(progression: Sequence[ChordAnalysis]) -> float:
    """Mean root-movement quality of a progression.

    Args:
        progression: Chord analyses in order

    Returns:
        Score in [0, 1]; 1.0 for fewer than two chords

    Raises:
        ValueError: If any chord is an empty (unparsable) analysis

    Examples:
        >>> from jam_engine.analyzer import analyze_progression
        >>> calculate_voice_leading_quality(analyze_progression(["C", "F", "C"]))
        0.95
    """
    if len(progression) < 2:
        return 1.0

    pcs = _root_pcs(progression)
    scores = [
        MOVEMENT_QUALITY.get(root_movement(a, b), DEFAULT_MOVEMENT_QUALITY)
        for a, b in zip(pcs, pcs[1:])
    ]
    return sum(scores) / len(scores)
