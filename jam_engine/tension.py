"""
jam_engine/tension.py — Chord tension models.

Two tension strategies coexist and are deliberately kept apart; they answer
to different callers and produce different numbers for the same chord.

    BasicTensionModel
        Keyed on the coarse quality from the analyzer's classification
        cascade (major, minor, dominant, ...), plus additive bonuses for
        9th/11th/13th extensions in the quality token. Used by analyze().

    ExtendedQualityTensionModel
        Keyed on a literal, fine-grained quality name (major7, minor9,
        halfDiminished7, power, ...). Unmatched names score 0.5.

Both return values in [0, 1].
"""

from __future__ import annotations

from typing import Protocol

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BASIC_QUALITY_TENSION: dict[str, float] = {
    "major": 0.2,
    "minor": 0.4,
    "dominant": 0.7,
    "diminished": 0.9,
    "augmented": 0.85,
    "suspended": 0.5,
}
BASIC_DEFAULT_TENSION: float = 0.5

# Substring of the quality token → additive bonus. Independent; "13" adds
# its own bonus without triggering "11".
EXTENSION_BONUSES: tuple[tuple[str, float], ...] = (
    ("9", 0.1),
    ("11", 0.15),
    ("13", 0.1),
)

EXTENDED_QUALITY_TENSION: dict[str, float] = {
    "major": 0.0,
    "minor": 0.2,
    "diminished": 0.8,
    "augmented": 0.9,
    "dominant7": 0.7,
    "major7": 0.3,
    "minor7": 0.4,
    "diminished7": 0.9,
    "halfDiminished7": 0.8,
    "augmented7": 0.95,
    "sus2": 0.5,
    "sus4": 0.6,
    "add9": 0.3,
    "add11": 0.4,
    "major9": 0.4,
    "minor9": 0.5,
    "major11": 0.5,
    "minor11": 0.6,
    "major13": 0.6,
    "minor13": 0.7,
    "6": 0.2,
    "minor6": 0.3,
    "power": 0.1,
}
EXTENDED_DEFAULT_TENSION: float = 0.5

# Parser quality token → literal quality name of the extended table.
# Tokens without an entry (e.g. "9", "7sus4") fall through to the default.
_TOKEN_TO_EXTENDED: dict[str, str] = {
    "M": "major",
    "m": "minor",
    "dim": "diminished",
    "aug": "augmented",
    "7": "dominant7",
    "maj7": "major7",
    "m7": "minor7",
    "dim7": "diminished7",
    "m7b5": "halfDiminished7",
    "7#5": "augmented7",
    "sus2": "sus2",
    "sus4": "sus4",
    "add9": "add9",
    "add11": "add11",
    "maj9": "major9",
    "m9": "minor9",
    "maj11": "major11",
    "m11": "minor11",
    "maj13": "major13",
    "m13": "minor13",
    "6": "6",
    "m6": "minor6",
    "5": "power",
}


# ---------------------------------------------------------------------------
# Strategy protocol
# ---------------------------------------------------------------------------


class TensionModel(Protocol):
    """A tension strategy: (quality, token) → tension in [0, 1]."""

    name: str

    def tension(self, quality: str, token: str = "") -> float: ...


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class BasicTensionModel:
    """Coarse quality table plus extension bonuses, clipped to 1.0."""

    name = "basic"

    def tension(self, quality: str, token: str = "") -> float:
        """
        Args:
            quality: Coarse quality from the classification cascade.
            token:   Parser quality token, scanned for 9/11/13 extensions.

        Examples:
            >>> BasicTensionModel().tension("dominant", "13")
            0.8
            >>> BasicTensionModel().tension("diminished", "dim11")
            1.0
        """
        value = BASIC_QUALITY_TENSION.get(quality, BASIC_DEFAULT_TENSION)
        for marker, bonus in EXTENSION_BONUSES:
            if marker in token:
                value += bonus
        return min(round(value, 6), 1.0)


class ExtendedQualityTensionModel:
    """Literal quality-name table; unmatched names score 0.5.

    When a parser token is given it decides the name; the coarse quality is
    only used as the literal name when there is no token.
    """

    name = "extended"

    def tension(self, quality: str, token: str = "") -> float:
        """
        Examples:
            >>> ExtendedQualityTensionModel().tension("halfDiminished7")
            0.8
            >>> ExtendedQualityTensionModel().tension("minor", "maj9")
            0.4
            >>> ExtendedQualityTensionModel().tension("wobble")
            0.5
        """
        name = extended_quality_name(token) if token else quality
        return EXTENDED_QUALITY_TENSION.get(name, EXTENDED_DEFAULT_TENSION)


def extended_quality_name(token: str) -> str:
    """Map a parser quality token onto the extended table's literal name.

    Returns the token itself when there is no mapping.

    Examples:
        >>> extended_quality_name("m7b5")
        'halfDiminished7'
        >>> extended_quality_name("5")
        'power'
    """
    return _TOKEN_TO_EXTENDED.get(token, token)


BASIC_TENSION = BasicTensionModel()
EXTENDED_TENSION = ExtendedQualityTensionModel()

#: Named registry of tension strategies
TENSION_MODELS: dict[str, TensionModel] = {
    BASIC_TENSION.name: BASIC_TENSION,
    EXTENDED_TENSION.name: EXTENDED_TENSION,
}
