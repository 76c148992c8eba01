"""
jam_engine/suggest.py — Next-chord suggestions.

suggest_next_chords() proposes chords to follow the current one. Candidates
come from four strategies, collected in this order:

    1. Genre progressions
         pop   — from the tonic only: V (0.90) and vi (0.85)
         jazz  — dominant 7th a fifth above (0.90), the ii→V / V→I motion
         blues — IV7 (0.88) and V7 (0.87)
    2. Fifth movement — up a fifth (0.82), up a fourth (0.75)
    3. Parallel       — same root, major ↔ minor (0.70)
    4. Jazz only      — tritone substitution, dominant 7th a tritone away (0.75)

Ranking:
    - Stable sort by confidence, highest first (ties keep strategy order)
    - Repeated chord symbols keep only their best-ranked entry
    - Take the top max_suggestions
    - Decay: confidence = max(0.6, confidence − rank × 0.05)

A current chord the parser cannot read yields no suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from jam_engine.notes import note_to_pitch_class, transpose_note
from jam_engine.options import SuggestionOptions
from jam_engine.parser import ChordParser, parse_chord
from jam_engine.types import ChordSuggestion, ParsedChord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FIFTH: int = 7
FOURTH: int = 5
MAJOR_SIXTH: int = 9
TRITONE: int = 6

RANK_DECAY: float = 0.05
MIN_CONFIDENCE: float = 0.6


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def _genre_progressions(
    chord: ParsedChord, key: str, genre: str
) -> Iterator[ChordSuggestion]:
    root = chord.root

    if genre == "pop" and note_to_pitch_class(root) == note_to_pitch_class(key):
        yield ChordSuggestion(
            chord=transpose_note(key, FIFTH),
            confidence=0.9,
            reasoning="Strong tonic to dominant movement (I→V)",
            relationship="progression",
            tension_change=0.5,
        )
        yield ChordSuggestion(
            chord=f"{transpose_note(key, MAJOR_SIXTH)}m",
            confidence=0.85,
            reasoning="Common pop progression (I→vi)",
            relationship="progression",
            tension_change=0.2,
        )

    if genre == "jazz":
        yield ChordSuggestion(
            chord=f"{transpose_note(root, FIFTH)}7",
            confidence=0.9,
            reasoning="Classic ii→V or V→I jazz movement",
            relationship="progression",
            tension_change=-0.3,
        )

    if genre == "blues":
        yield ChordSuggestion(
            chord=f"{transpose_note(root, FOURTH)}7",
            confidence=0.88,
            reasoning="Blues I→IV progression",
            relationship="progression",
            tension_change=0.3,
        )
        yield ChordSuggestion(
            chord=f"{transpose_note(root, FIFTH)}7",
            confidence=0.87,
            reasoning="Blues I→V progression",
            relationship="progression",
            tension_change=0.4,
        )


def _fifth_movement(chord: ParsedChord) -> Iterator[ChordSuggestion]:
    yield ChordSuggestion(
        chord=transpose_note(chord.root, FIFTH),
        confidence=0.82,
        reasoning="Strong fifth relationship (circle of fifths)",
        relationship="progression",
        tension_change=0.3,
    )
    yield ChordSuggestion(
        chord=transpose_note(chord.root, FOURTH),
        confidence=0.75,
        reasoning="Subdominant movement",
        relationship="progression",
        tension_change=-0.2,
    )


def _parallel_movement(chord: ParsedChord) -> Iterator[ChordSuggestion]:
    # Major third without a minor third: G, Gmaj7 and G7 all count as major
    is_major = 4 in chord.intervals and 3 not in chord.intervals
    yield ChordSuggestion(
        chord=f"{chord.root}m" if is_major else chord.root,
        confidence=0.7,
        reasoning=f"Parallel {'minor' if is_major else 'major'} for color variation",
        relationship="parallel",
        tension_change=0.2 if is_major else -0.2,
    )


def _tritone_substitution(chord: ParsedChord) -> Iterator[ChordSuggestion]:
    yield ChordSuggestion(
        chord=f"{transpose_note(chord.root, TRITONE)}7",
        confidence=0.75,
        reasoning="Tritone substitution for sophisticated jazz sound",
        relationship="substitution",
        tension_change=0.4,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def suggest_next_chords(
    current_chord: str,
    options: SuggestionOptions | None = None,
    *,
    parser: ChordParser | None = None,
) -> tuple[ChordSuggestion, ...]:
    """Suggest chords to follow ``current_chord``.

    Args:
        current_chord: Chord symbol, e.g. "C", "Dm7"
        options:       Key, genre and number of suggestions
                       (default: key C, pop, 3 suggestions)
        parser:        Chord parser (default SymbolChordParser)

    Returns:
        Up to max_suggestions ChordSuggestion, best first. Empty when the
        current chord cannot be parsed.

    Examples:
        >>> [s.chord for s in suggest_next_chords("C")]
        ['G', 'Am', 'F']
        >>> suggest_next_chords("C")[0].confidence
        0.9
    """
    opts = options or SuggestionOptions()
    parsed = parse_chord(current_chord, parser)
    if parsed is None:
        logger.debug("No suggestions for unparsable chord %r", current_chord)
        return ()

    candidates: list[ChordSuggestion] = [
        *_genre_progressions(parsed, opts.key, opts.genre),
        *_fifth_movement(parsed),
        *_parallel_movement(parsed),
    ]
    if opts.genre == "jazz":
        candidates.extend(_tritone_substitution(parsed))

    ranked: list[ChordSuggestion] = []
    seen: set[str] = set()
    for suggestion in sorted(candidates, key=lambda s: s.confidence, reverse=True):
        if suggestion.chord in seen:
            continue
        seen.add(suggestion.chord)
        ranked.append(suggestion)

    return tuple(
        replace(s, confidence=round(max(MIN_CONFIDENCE, s.confidence - rank * RANK_DECAY), 6))
        for rank, s in enumerate(ranked[: opts.max_suggestions])
    )


def explain_suggestion(suggestion: ChordSuggestion, key: str = "C") -> str:
    """Render a one-sentence explanation of a suggestion.

    Examples:
        >>> s = suggest_next_chords("C")[0]
        >>> explain_suggestion(s, "C")
        'G - Strong tonic to dominant movement (I→V) (90% confidence). This creates a more tense sound in the key of C.'
    """
    feel = "more tense" if suggestion.tension_change > 0 else "resolving"
    return (
        f"{suggestion.chord} - {suggestion.reasoning} "
        f"({round(suggestion.confidence * 100)}% confidence). "
        f"This creates a {feel} sound in the key of {key}."
    )
