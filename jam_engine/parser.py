"""
jam_engine/parser.py — Chord symbol parsing.

The rest of the engine only sees the ChordParser protocol, so the parsing
implementation can be swapped (e.g. for a music21-backed parser) without
touching analysis or generation code.

SymbolChordParser (the default) works in three steps:
    1. A regex splits the symbol into root ("C", "F#", "Bb"), suffix and an
       optional slash bass ("/E").
    2. The suffix is looked up in _SUFFIX_ALIASES, which maps common spellings
       ("min7", "-7", "Δ7", "ø") onto a canonical quality token.
    3. The token's interval formula is spelled from the root.

Anything the alias table does not know is unparsable: parse() returns None
and callers decide how to degrade.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from jam_engine.notes import spell_interval, transpose_note
from jam_engine.types import ParsedChord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Quality tokens → interval formulas (semitones from root)
# ---------------------------------------------------------------------------

CHORD_FORMULAS: dict[str, tuple[int, ...]] = {
    # Triads and dyads
    "M": (0, 4, 7),
    "m": (0, 3, 7),
    "dim": (0, 3, 6),
    "aug": (0, 4, 8),
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    "5": (0, 7),
    # Sixths and added tones
    "6": (0, 4, 7, 9),
    "m6": (0, 3, 7, 9),
    "add9": (0, 4, 7, 14),
    "madd9": (0, 3, 7, 14),
    "add11": (0, 4, 7, 17),
    # Sevenths
    "7": (0, 4, 7, 10),
    "maj7": (0, 4, 7, 11),
    "m7": (0, 3, 7, 10),
    "mMaj7": (0, 3, 7, 11),
    "dim7": (0, 3, 6, 9),
    "m7b5": (0, 3, 6, 10),
    "7#5": (0, 4, 8, 10),
    "7sus4": (0, 5, 7, 10),
    # Extended
    "9": (0, 4, 7, 10, 14),
    "maj9": (0, 4, 7, 11, 14),
    "m9": (0, 3, 7, 10, 14),
    "11": (0, 4, 7, 10, 14, 17),
    "maj11": (0, 4, 7, 11, 14, 17),
    "m11": (0, 3, 7, 10, 14, 17),
    "13": (0, 4, 7, 10, 14, 21),
    "maj13": (0, 4, 7, 11, 14, 21),
    "m13": (0, 3, 7, 10, 14, 21),
}

# Written suffix → canonical token. Lookup is case-sensitive ("M7" ≠ "m7").
_SUFFIX_ALIASES: dict[str, str] = {
    "": "M",
    "M": "M",
    "maj": "M",
    "major": "M",
    "m": "m",
    "min": "m",
    "minor": "m",
    "-": "m",
    "dim": "dim",
    "°": "dim",
    "o": "dim",
    "aug": "aug",
    "+": "aug",
    "sus2": "sus2",
    "sus4": "sus4",
    "sus": "sus4",
    "5": "5",
    "6": "6",
    "m6": "m6",
    "min6": "m6",
    "add9": "add9",
    "add2": "add9",
    "madd9": "madd9",
    "m(add9)": "madd9",
    "add11": "add11",
    "add4": "add11",
    "7": "7",
    "dom7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "Δ": "maj7",
    "Δ7": "maj7",
    "m7": "m7",
    "min7": "m7",
    "-7": "m7",
    "mMaj7": "mMaj7",
    "mM7": "mMaj7",
    "m(maj7)": "mMaj7",
    "dim7": "dim7",
    "°7": "dim7",
    "o7": "dim7",
    "m7b5": "m7b5",
    "min7b5": "m7b5",
    "-7b5": "m7b5",
    "ø": "m7b5",
    "ø7": "m7b5",
    "7#5": "7#5",
    "7+": "7#5",
    "+7": "7#5",
    "aug7": "7#5",
    "7aug": "7#5",
    "7sus4": "7sus4",
    "7sus": "7sus4",
    "9": "9",
    "maj9": "maj9",
    "M9": "maj9",
    "m9": "m9",
    "min9": "m9",
    "11": "11",
    "maj11": "maj11",
    "M11": "maj11",
    "m11": "m11",
    "min11": "m11",
    "13": "13",
    "maj13": "maj13",
    "M13": "maj13",
    "m13": "m13",
    "min13": "m13",
}

_SYMBOL_RE = re.compile(r"^\s*([A-G][#b]?)(.*?)(?:/([A-G][#b]?))?\s*$")


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class ChordParser(Protocol):
    """
    Protocol for chord symbol parsers.

    Any object with a matching ``parse`` method can be passed wherever the
    engine accepts a ``parser=`` argument.
    """

    def parse(self, symbol: str) -> ParsedChord | None:
        """
        Parse a chord symbol.

        Args:
            symbol: Chord symbol, e.g. "Cmaj7", "F#m", "G7sus4".

        Returns:
            ParsedChord, or None when the symbol is not recognized.
            Implementations must not raise on unrecognized input.
        """
        ...


# ---------------------------------------------------------------------------
# Default implementation
# ---------------------------------------------------------------------------


class SymbolChordParser:
    """Table-driven parser for lead-sheet chord symbols."""

    def parse(self, symbol: str) -> ParsedChord | None:
        match = _SYMBOL_RE.match(symbol)
        if match is None:
            return None
        root, suffix, _bass = match.groups()
        token = _SUFFIX_ALIASES.get(suffix)
        if token is None:
            return None
        intervals = CHORD_FORMULAS[token]
        return ParsedChord(
            symbol=symbol,
            root=root,
            quality=token,
            notes=tuple(spell_interval(root, i) for i in intervals),
            intervals=intervals,
        )


DEFAULT_PARSER: ChordParser = SymbolChordParser()


def parse_chord(symbol: str, parser: ChordParser | None = None) -> ParsedChord | None:
    """Parse ``symbol`` with ``parser`` (default: SymbolChordParser).

    Examples:
        >>> parse_chord("Am7").notes
        ('A', 'C', 'E', 'G')
        >>> parse_chord("H7") is None
        True
    """
    return (parser or DEFAULT_PARSER).parse(symbol)


# ---------------------------------------------------------------------------
# Transposition
# ---------------------------------------------------------------------------


def transpose_chord(symbol: str, semitones: int) -> str:
    """Transpose a chord symbol, keeping its suffix as written.

    Symbols the default parser does not recognize are returned unchanged.

    Examples:
        >>> transpose_chord("Am7", 2)
        'Bm7'
        >>> transpose_chord("C/E", 5)
        'F/A'
    """
    match = _SYMBOL_RE.match(symbol)
    if match is None or match.group(2) not in _SUFFIX_ALIASES:
        logger.debug("Leaving unparsable chord %r untransposed", symbol)
        return symbol
    root, suffix, bass = match.groups()
    result = f"{transpose_note(root, semitones)}{suffix}"
    if bass:
        result += f"/{transpose_note(bass, semitones)}"
    return result


def transpose_progression(chords: Sequence[str], semitones: int) -> tuple[str, ...]:
    """Transpose every chord symbol in a progression.

    Examples:
        >>> transpose_progression(["C", "Am", "F", "G"], 2)
        ('D', 'Bm', 'G', 'A')
    """
    return tuple(transpose_chord(c, semitones) for c in chords)
