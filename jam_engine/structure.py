"""
jam_engine/structure.py — Song structure sequencer.

Exports:
    estimate_section_duration_seconds(section, tempo) → float
    estimate_song_duration_seconds(sections, tempo) → float
    validate_structure_completeness(structure) → float
    suggest_next_section(structure, genre) → SectionType
    sequence_sections(genre, *, max_sections, start=None) → SongStructure

Next-section rules (suggest_next_section), keyed on the last section:

    (empty)    intro for rock/indie/electronic/metal, else verse
    intro      verse
    verse      chorus if there is no chorus yet;
               prechorus for pop/rock/indie/alternative if none used yet;
               otherwise chorus
    prechorus  chorus
    chorus     verse while fewer than 2 verses;
               bridge if none yet and the song has ≥ 6 sections;
               outro once there are ≥ 2 choruses;
               otherwise verse
    bridge     chorus
    outro      outro

The rules depend only on the last section, the counts and the genre, so
repeatedly applying them is deterministic. Counts on the structure are
trusted as given; use SongStructure.from_sections() to derive them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jam_engine.types import GENRES, SectionLyrics, SongStructure

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SYLLABLES_PER_BEAT: float = 2.0

# Completeness weights; a single verse or chorus earns half its weight
COMPLETENESS_WEIGHTS: dict[str, float] = {
    "intro": 0.1,
    "outro": 0.1,
    "verse": 0.3,
    "chorus": 0.3,
    "bridge": 0.2,
}

INTRO_GENRES: frozenset[str] = frozenset({"rock", "indie", "electronic", "metal"})
PRECHORUS_GENRES: frozenset[str] = frozenset({"pop", "rock", "indie", "alternative"})

_BRIDGE_MIN_SECTIONS: int = 6


def _check_tempo(tempo: float) -> None:
    if tempo <= 0:
        raise ValueError(f"tempo must be > 0 BPM, got {tempo}")


def _check_genre(genre: str) -> None:
    if genre not in GENRES:
        raise ValueError(f"Unknown genre {genre!r}. Valid: {sorted(GENRES)}")


# ---------------------------------------------------------------------------
# Duration
# ---------------------------------------------------------------------------


def estimate_section_duration_seconds(section: SectionLyrics, tempo: float) -> float:
    """Estimate how long a section takes to sing, in seconds.

    Assumes two syllables per beat: duration = (syllables / 2) / (tempo / 60).

    Args:
        section: Lyric lines with syllable counts
        tempo:   Tempo in BPM (> 0)

    Raises:
        ValueError: If tempo <= 0

    Examples:
        >>> from jam_engine.lyrics import make_section
        >>> s = make_section("verse", ["la la la la"] * 4)
        >>> estimate_section_duration_seconds(s, 120.0)
        4.0
    """
    _check_tempo(tempo)
    beats = section.total_syllables / SYLLABLES_PER_BEAT
    return beats / (tempo / 60.0)


def estimate_song_duration_seconds(sections: Iterable[SectionLyrics], tempo: float) -> float:
    """Sum of the per-section estimates, in seconds."""
    _check_tempo(tempo)
    return sum(estimate_section_duration_seconds(s, tempo) for s in sections)


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------


def validate_structure_completeness(structure: SongStructure) -> float:
    """Score how complete a song layout is, in [0, 1].

    intro +0.1, outro +0.1, verses +0.3 (two or more) or +0.15 (one),
    choruses +0.3 / +0.15 likewise, any bridge +0.2.

    Examples:
        >>> s = SongStructure.from_sections(
        ...     ["intro", "verse", "chorus", "verse", "chorus", "bridge", "chorus", "outro"]
        ... )
        >>> validate_structure_completeness(s)
        1.0
    """
    score = 0.0
    if structure.has_intro:
        score += COMPLETENESS_WEIGHTS["intro"]
    if structure.has_outro:
        score += COMPLETENESS_WEIGHTS["outro"]
    for name, count in (("verse", structure.verse_count), ("chorus", structure.chorus_count)):
        if count >= 2:
            score += COMPLETENESS_WEIGHTS[name]
        elif count == 1:
            score += COMPLETENESS_WEIGHTS[name] * 0.5
    if structure.bridge_count > 0:
        score += COMPLETENESS_WEIGHTS["bridge"]
    return min(round(score, 6), 1.0)


# ---------------------------------------------------------------------------
# Next-section state machine
# ---------------------------------------------------------------------------


def suggest_next_section(structure: SongStructure, genre: str) -> str:
    """Suggest the section that should follow ``structure``.

    Args:
        structure: Current layout (counts are trusted as given)
        genre:     Genre tag, one of GENRES

    Returns:
        A SectionType tag

    Raises:
        ValueError: If genre is unknown

    Examples:
        >>> suggest_next_section(SongStructure(), "rock")
        'intro'
        >>> suggest_next_section(SongStructure.from_sections(["verse"]), "folk")
        'chorus'
    """
    _check_genre(genre)
    sections = structure.sections

    if not sections:
        return "intro" if genre in INTRO_GENRES else "verse"

    last = sections[-1]

    if last == "intro":
        return "verse"

    if last == "verse":
        if structure.chorus_count == 0:
            return "chorus"
        if genre in PRECHORUS_GENRES and "prechorus" not in sections:
            return "prechorus"
        return "chorus"

    if last == "prechorus":
        return "chorus"

    if last == "chorus":
        if structure.verse_count < 2:
            return "verse"
        if structure.bridge_count == 0 and len(sections) >= _BRIDGE_MIN_SECTIONS:
            return "bridge"
        if structure.chorus_count >= 2:
            return "outro"
        return "verse"

    if last == "bridge":
        return "chorus"

    return "outro"


def sequence_sections(
    genre: str,
    *,
    max_sections: int,
    start: SongStructure | None = None,
) -> SongStructure:
    """Build a song layout by repeatedly applying suggest_next_section().

    Stops after appending the first outro, or once the layout holds
    ``max_sections`` sections, whichever comes first. A ``start`` that
    already ends in an outro or is already at the limit is returned with
    its counts re-derived and nothing appended.

    Args:
        genre:        Genre tag, one of GENRES
        max_sections: Upper bound on the total number of sections (>= 1)
        start:        Layout to continue from (default: empty)

    Returns:
        SongStructure with counts derived from its sections

    Raises:
        ValueError: If genre is unknown or max_sections < 1

    Examples:
        >>> sequence_sections("pop", max_sections=20).sections
        ('verse', 'chorus', 'verse', 'prechorus', 'chorus', 'outro')
    """
    _check_genre(genre)
    if max_sections < 1:
        raise ValueError(f"max_sections must be >= 1, got {max_sections}")

    sections = list(start.sections) if start is not None else []
    structure = SongStructure.from_sections(sections, genre)

    while len(sections) < max_sections and (not sections or sections[-1] != "outro"):
        sections.append(suggest_next_section(structure, genre))
        structure = SongStructure.from_sections(sections, genre)

    if sections and sections[-1] != "outro":
        logger.warning(
            "Stopped sequencing %s song at %d sections without reaching an outro",
            genre,
            len(sections),
        )
    return structure
