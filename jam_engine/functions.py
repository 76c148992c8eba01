"""
jam_engine/functions.py — Harmonic function maps.

A harmonic function is looked up from the upward semitone distance between
a key's tonic and a chord root, taken mod 12, so roots an octave apart always
share a function.

Two maps coexist and are kept separate:

    SixFunctionMap   — used by analyze(); six labels, everything else "unknown"
        0 tonic, 4 mediant, 5 subdominant, 7 dominant, 9 submediant, 11 leading

    SevenDegreeMap   — used by the cadence checker; the diatonic degrees of
                       the major scale, everything else "chromatic"
        0 tonic, 2 supertonic, 4 mediant, 5 subdominant, 7 dominant,
        9 submediant, 11 leadingTone
"""

from __future__ import annotations

from typing import Protocol

from jam_engine.notes import note_to_pitch_class

SIX_FUNCTION_DEGREES: dict[int, str] = {
    0: "tonic",
    5: "subdominant",
    7: "dominant",
    4: "mediant",
    9: "submediant",
    11: "leading",
}

SEVEN_DEGREE_FUNCTIONS: dict[int, str] = {
    0: "tonic",
    2: "supertonic",
    4: "mediant",
    5: "subdominant",
    7: "dominant",
    9: "submediant",
    11: "leadingTone",
}


def harmonic_degree(root_pc: int, key_pc: int) -> int:
    """Upward semitone distance from the key tonic to the chord root, in [0, 11].

    Both arguments may be any integer; the result depends only on their
    values mod 12.

    Examples:
        >>> harmonic_degree(7, 0)
        7
        >>> harmonic_degree(19, 0)
        7
        >>> harmonic_degree(0, 7)
        5
    """
    return (root_pc - key_pc) % 12


class FunctionMap(Protocol):
    """A harmonic-function strategy: degree → label."""

    name: str
    fallback: str

    def function_for_degree(self, degree: int) -> str: ...

    def function_of(self, root: str, key: str) -> str: ...


class _DegreeTableMap:
    table: dict[int, str]
    fallback: str
    name: str

    def function_for_degree(self, degree: int) -> str:
        return self.table.get(degree % 12, self.fallback)

    def function_of(self, root: str, key: str) -> str:
        """Function of a chord root (note name) in a key (tonic note name).

        An unrecognized root or key yields the map's fallback label.
        """
        try:
            root_pc = note_to_pitch_class(root)
            key_pc = note_to_pitch_class(key)
        except ValueError:
            return self.fallback
        return self.function_for_degree(harmonic_degree(root_pc, key_pc))


class SixFunctionMap(_DegreeTableMap):
    """Six functional labels; non-listed degrees map to "unknown"."""

    name = "six-function"
    table = SIX_FUNCTION_DEGREES
    fallback = "unknown"


class SevenDegreeMap(_DegreeTableMap):
    """Seven diatonic degrees; non-diatonic degrees map to "chromatic"."""

    name = "seven-degree"
    table = SEVEN_DEGREE_FUNCTIONS
    fallback = "chromatic"


SIX_FUNCTION_MAP = SixFunctionMap()
SEVEN_DEGREE_MAP = SevenDegreeMap()

#: Named registry of function-map strategies
FUNCTION_MAPS: dict[str, FunctionMap] = {
    SIX_FUNCTION_MAP.name: SIX_FUNCTION_MAP,
    SEVEN_DEGREE_MAP.name: SEVEN_DEGREE_MAP,
}
