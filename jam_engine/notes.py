"""
jam_engine/notes.py — Pitch-class arithmetic and note spelling.

Exports:
    NOTE_NAMES              12-element tuple of chromatic note names (sharps)
    FLAT_NAMES              12-element tuple of chromatic note names (flats)

    normalize_note(note) → str
    note_to_pitch_class(note) → int
    pitch_class_to_note(pc, prefer_flats) → str
    prefers_flats(root) → bool
    spell_interval(root, semitones) → str
    transpose_note(note, semitones) → str
    semitone_distance(from_note, to_note) → int
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Chromatic pitch classes
# ---------------------------------------------------------------------------

NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Letters whose flat or sharp forms wrap onto a natural (Cb = B, E# = F, ...)
_LETTER_PC: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]*)$")


# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------


def normalize_note(note: str) -> str:
    """Normalize a note name to sharp notation.

    Args:
        note: Note name, e.g. "Bb", "C#", "g", "Cb"

    Returns:
        Canonical sharp-notation name, e.g. "A#", "C#", "G", "B"

    Raises:
        ValueError: If note is not a recognized pitch class
    """
    return NOTE_NAMES[note_to_pitch_class(note)]


def note_to_pitch_class(note: str) -> int:
    """Return the pitch class (0–11) of a note name.

    Accidentals stack, so "C##" is D and "Fb" is E.

    Args:
        note: Note name, e.g. "A", "C#", "Bb"

    Returns:
        Pitch class integer 0 (C) through 11 (B)

    Raises:
        ValueError: If note is unrecognized

    Examples:
        >>> note_to_pitch_class("Bb")
        10
        >>> note_to_pitch_class("Cb")
        11
    """
    match = _NOTE_RE.match(note.strip())
    if match is None:
        raise ValueError(f"Unknown note {note!r}. Valid: {list(NOTE_NAMES)}")
    letter, accidentals = match.groups()
    offset = accidentals.count("#") - accidentals.count("b")
    return (_LETTER_PC[letter.upper()] + offset) % 12


def pitch_class_to_note(pc: int, prefer_flats: bool = False) -> str:
    """Return a note name for a pitch class.

    Args:
        pc:           Pitch class; any integer, taken mod 12
        prefer_flats: Spell black keys with flats ("Bb") instead of sharps ("A#")

    Returns:
        Note name string
    """
    names = FLAT_NAMES if prefer_flats else NOTE_NAMES
    return names[pc % 12]


def prefers_flats(root: str) -> bool:
    """Whether chord tones built on ``root`` should be spelled with flats.

    Flat roots and F (whose scale carries Bb) use flats; everything else
    uses sharps.
    """
    root = root.strip()
    return "b" in root[1:] or root.upper() == "F"


def spell_interval(root: str, semitones: int) -> str:
    """Spell the note ``semitones`` above ``root`` using the root's spelling preference.

    The root itself (0 semitones) keeps its original spelling.

    Examples:
        >>> spell_interval("Bb", 4)
        'D'
        >>> spell_interval("E", 4)
        'G#'
    """
    if semitones % 12 == 0:
        return root
    pc = note_to_pitch_class(root) + semitones
    return pitch_class_to_note(pc, prefer_flats=prefers_flats(root))


def transpose_note(note: str, semitones: int) -> str:
    """Transpose a note name by a number of semitones.

    Keeps the flat/sharp flavour of the input note: "Bb" + 2 → "C",
    "Bb" + 1 → "B", "Eb" + 3 → "Gb", "F#" + 1 → "G".
    """
    flats = "b" in note.strip()[1:]
    return pitch_class_to_note(note_to_pitch_class(note) + semitones, prefer_flats=flats)


def semitone_distance(from_note: str, to_note: str) -> int:
    """Upward distance in semitones from one note to another, in [0, 11].

    Examples:
        >>> semitone_distance("C", "G")
        7
        >>> semitone_distance("G", "C")
        5
    """
    return (note_to_pitch_class(to_note) - note_to_pitch_class(from_note)) % 12
