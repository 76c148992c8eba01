"""
jam_engine/types.py — Frozen value objects for the jam theory engine.

All types are immutable frozen dataclasses — safe to hash, cache, and share
across threads. No I/O, no side effects, no dependencies beyond stdlib.

Types:
    ParsedChord         — parser output: root, quality token, spelled notes
    ChordAnalysis       — quality, tension, harmonic function of one chord
    ProgressionAnalysis — analyses + voice leading + cadence summary
    BassNote            — a timed bass note (beats from progression start)
    DrumEvent           — a timed percussion hit (beats from pattern start)
    LyricLine           — one lyric line with its syllable count
    SectionLyrics       — the lyric lines of one song section
    SongStructure       — ordered section tags + per-type counts
    ChordSuggestion     — a suggested next chord with reasoning
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from jam_engine.notes import note_to_pitch_class

# ---------------------------------------------------------------------------
# Closed vocabularies
# ---------------------------------------------------------------------------

SectionType = Literal["intro", "verse", "prechorus", "chorus", "bridge", "outro"]

Genre = Literal[
    "pop",
    "rock",
    "indie",
    "folk",
    "country",
    "blues",
    "jazz",
    "soul",
    "rnb",
    "hiphop",
    "electronic",
    "punk",
    "metal",
    "alternative",
    "singer-songwriter",
    "other",
]

ChordQuality = Literal[
    "major", "minor", "diminished", "augmented", "suspended", "dominant", "unknown"
]

#: Ordered section vocabulary
SECTION_TYPES: tuple[str, ...] = ("intro", "verse", "prechorus", "chorus", "bridge", "outro")

#: Genre tags accepted by the structure sequencer
GENRES: frozenset[str] = frozenset(
    {
        "pop",
        "rock",
        "indie",
        "folk",
        "country",
        "blues",
        "jazz",
        "soul",
        "rnb",
        "hiphop",
        "electronic",
        "punk",
        "metal",
        "alternative",
        "singer-songwriter",
        "other",
    }
)

#: Chord qualities produced by the analyzer's classification cascade
CHORD_QUALITIES: frozenset[str] = frozenset(
    {"major", "minor", "diminished", "augmented", "suspended", "dominant", "unknown"}
)

#: Percussion voices emitted by the drum generator
DRUM_VOICES: frozenset[str] = frozenset({"kick", "snare", "hihat"})

SUGGESTION_RELATIONSHIPS: frozenset[str] = frozenset(
    {"resolution", "progression", "substitution", "chromatic", "parallel"}
)


def _check_unit(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in [0, 1], got {value}")


# ---------------------------------------------------------------------------
# ParsedChord
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedChord:
    """The result of parsing a chord symbol.

    Attributes:
        symbol:    Original symbol, e.g. "Bbmaj7"
        root:      Root note as spelled in the symbol, e.g. "Bb"
        quality:   Canonical quality token, e.g. "M", "m", "7", "maj7", "m7b5"
        notes:     Spelled chord tones from the root, e.g. ("Bb", "D", "F", "A")
        intervals: Semitone offsets of each tone from the root, e.g. (0, 4, 7, 11)
    """

    symbol: str
    root: str
    quality: str
    notes: tuple[str, ...]
    intervals: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.root:
            raise ValueError("ParsedChord.root must not be empty")
        if not self.quality:
            raise ValueError("ParsedChord.quality must not be empty")
        if len(self.notes) != len(self.intervals):
            raise ValueError(
                f"ParsedChord.notes ({len(self.notes)}) and intervals "
                f"({len(self.intervals)}) must have the same length"
            )


# ---------------------------------------------------------------------------
# ChordAnalysis
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordAnalysis:
    """Analysis of a single chord symbol.

    A failed parse yields the empty analysis: root "", no notes, quality
    "unknown", tension 0 and confidence 0.

    Attributes:
        symbol:     Original chord symbol
        root:       Root note name ("" when unparsable)
        type:       Quality token from the parser, e.g. "maj7"
        notes:      Spelled chord tones
        quality:    One of CHORD_QUALITIES
        function:   Harmonic function label, or None when no key was given
        tension:    Heuristic harmonic tension in [0, 1]
        confidence: Confidence in the analysis in [0, 1]
    """

    symbol: str
    root: str
    type: str
    notes: tuple[str, ...]
    quality: str
    tension: float
    confidence: float
    function: str | None = None

    def __post_init__(self) -> None:
        if self.quality not in CHORD_QUALITIES:
            raise ValueError(
                f"ChordAnalysis.quality must be one of {sorted(CHORD_QUALITIES)}, "
                f"got {self.quality!r}"
            )
        _check_unit("ChordAnalysis.tension", self.tension)
        _check_unit("ChordAnalysis.confidence", self.confidence)

    @property
    def is_empty(self) -> bool:
        """True when the symbol could not be parsed."""
        return not self.root

    @property
    def root_pitch_class(self) -> int | None:
        """Root as pitch class (0–11), or None for an empty analysis."""
        if not self.root:
            return None
        return note_to_pitch_class(self.root)


# ---------------------------------------------------------------------------
# ProgressionAnalysis
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProgressionAnalysis:
    """Summary of a chord progression in a key.

    Attributes:
        chords:                Per-chord analyses, in order
        key:                   Tonal centre used for function analysis
        voice_leading_quality: Mean root-movement score in [0, 1]
        resolves:              True when the progression cadences to the tonic
        average_tension:       Mean tension across the chords (0 when empty)
    """

    chords: tuple[ChordAnalysis, ...]
    key: str
    voice_leading_quality: float
    resolves: bool
    average_tension: float

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("ProgressionAnalysis.key must not be empty")
        _check_unit("ProgressionAnalysis.voice_leading_quality", self.voice_leading_quality)
        _check_unit("ProgressionAnalysis.average_tension", self.average_tension)

    @property
    def symbols(self) -> tuple[str, ...]:
        """Chord symbols in progression order."""
        return tuple(c.symbol for c in self.chords)


# ---------------------------------------------------------------------------
# BassNote / DrumEvent: timed events in beats
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BassNote:
    """A single bass note.

    Attributes:
        note:     Note name with octave, e.g. "C2", "Bb3"
        time:     Onset in beats from the start of the progression
        duration: Length in beats (> 0)
        velocity: Normalised velocity in [0, 1]
    """

    note: str
    time: float
    duration: float
    velocity: float

    def __post_init__(self) -> None:
        if not self.note:
            raise ValueError("BassNote.note must not be empty")
        if self.time < 0:
            raise ValueError(f"BassNote.time must be >= 0, got {self.time}")
        if self.duration <= 0:
            raise ValueError(f"BassNote.duration must be > 0, got {self.duration}")
        _check_unit("BassNote.velocity", self.velocity)


@dataclass(frozen=True)
class DrumEvent:
    """A single percussion hit.

    Attributes:
        drum:     One of DRUM_VOICES ("kick", "snare", "hihat")
        time:     Onset in beats from the start of the pattern
        duration: Length in beats (> 0)
        velocity: Normalised velocity in [0, 1]
    """

    drum: str
    time: float
    duration: float
    velocity: float

    def __post_init__(self) -> None:
        if self.drum not in DRUM_VOICES:
            raise ValueError(
                f"DrumEvent.drum must be one of {sorted(DRUM_VOICES)}, got {self.drum!r}"
            )
        if self.time < 0:
            raise ValueError(f"DrumEvent.time must be >= 0, got {self.time}")
        if self.duration <= 0:
            raise ValueError(f"DrumEvent.duration must be > 0, got {self.duration}")
        _check_unit("DrumEvent.velocity", self.velocity)


# ---------------------------------------------------------------------------
# Lyrics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LyricLine:
    """One lyric line and its syllable count."""

    text: str
    syllable_count: int

    def __post_init__(self) -> None:
        if self.syllable_count < 0:
            raise ValueError(
                f"LyricLine.syllable_count must be >= 0, got {self.syllable_count}"
            )


@dataclass(frozen=True)
class SectionLyrics:
    """The lyric lines sung in one section."""

    section_type: str
    lines: tuple[LyricLine, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.section_type not in SECTION_TYPES:
            raise ValueError(
                f"SectionLyrics.section_type must be one of {list(SECTION_TYPES)}, "
                f"got {self.section_type!r}"
            )

    @property
    def total_syllables(self) -> int:
        return sum(line.syllable_count for line in self.lines)


# ---------------------------------------------------------------------------
# SongStructure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SongStructure:
    """Snapshot of a song's section layout.

    The counts are expected to match the occurrences of each tag in
    ``sections``; this is the caller's responsibility and is not checked.
    Use :meth:`from_sections` to derive consistent counts.

    Attributes:
        sections:     Ordered section tags
        verse_count:  Number of verses
        chorus_count: Number of choruses
        bridge_count: Number of bridges
        has_intro:    Whether the song opens with an intro
        has_outro:    Whether the song closes with an outro
        genre:        Genre tag, one of GENRES
    """

    sections: tuple[str, ...] = ()
    verse_count: int = 0
    chorus_count: int = 0
    bridge_count: int = 0
    has_intro: bool = False
    has_outro: bool = False
    genre: str = "other"

    def __post_init__(self) -> None:
        unknown = [s for s in self.sections if s not in SECTION_TYPES]
        if unknown:
            raise ValueError(
                f"SongStructure.sections has unknown tags {unknown}. "
                f"Valid: {list(SECTION_TYPES)}"
            )
        for name in ("verse_count", "chorus_count", "bridge_count"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"SongStructure.{name} must be >= 0, got {value}")
        if self.genre not in GENRES:
            raise ValueError(
                f"SongStructure.genre must be one of {sorted(GENRES)}, got {self.genre!r}"
            )

    @classmethod
    def from_sections(cls, sections: Iterable[str], genre: str = "other") -> SongStructure:
        """Build a structure whose counts and flags are derived from ``sections``.

        Examples:
            >>> s = SongStructure.from_sections(["intro", "verse", "chorus"], "pop")
            >>> (s.verse_count, s.chorus_count, s.has_intro, s.has_outro)
            (1, 1, True, False)
        """
        tags = tuple(sections)
        counts = Counter(tags)
        return cls(
            sections=tags,
            verse_count=counts["verse"],
            chorus_count=counts["chorus"],
            bridge_count=counts["bridge"],
            has_intro="intro" in counts,
            has_outro="outro" in counts,
            genre=genre,
        )

    @property
    def total_sections(self) -> int:
        return len(self.sections)


# ---------------------------------------------------------------------------
# ChordSuggestion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordSuggestion:
    """A suggested next chord.

    Attributes:
        chord:          Suggested chord symbol
        confidence:     Score in [0, 1]
        reasoning:      Why the chord was suggested
        relationship:   One of SUGGESTION_RELATIONSHIPS
        tension_change: Estimated tension change in [-1, 1]
    """

    chord: str
    confidence: float
    reasoning: str
    relationship: str
    tension_change: float

    def __post_init__(self) -> None:
        if not self.chord:
            raise ValueError("ChordSuggestion.chord must not be empty")
        _check_unit("ChordSuggestion.confidence", self.confidence)
        if self.relationship not in SUGGESTION_RELATIONSHIPS:
            raise ValueError(
                f"ChordSuggestion.relationship must be one of "
                f"{sorted(SUGGESTION_RELATIONSHIPS)}, got {self.relationship!r}"
            )
        if not (-1.0 <= self.tension_change <= 1.0):
            raise ValueError(
                f"ChordSuggestion.tension_change must be in [-1, 1], got {self.tension_change}"
            )
