"""
jam_engine/bass.py — Bass line generator.

generate_bassline() turns a chord progression into timed bass notes, one
measure per chord. Times and durations are in beats from the start of the
progression; chord i starts at beat i × beats_per_measure.

Styles:
    root     — one sustained root per chord (whole measure, velocity 0.8)
    walking  — one chord tone per beat, cycling root → third → fifth → ...
               (accent 0.9 on the downbeat, 0.7 elsewhere); chords with
               fewer than three tones are skipped
    arpeggio — root on beat 0 (0.85) and the fifth on beat 2 (0.75)
    octave   — root on beat 0 (0.9), root an octave up on beat 2 (0.75)

Chords the parser cannot read produce no notes; the rest of the line keeps
its timing, so a gap appears where the chord would have been.

Design decisions:
    - Pure: no I/O, no randomness
    - Note names carry the octave as a suffix: "C2", "Bb3"
    - Notes are returned in chord order, then beat order within each chord
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from jam_engine.options import BassLineOptions
from jam_engine.parser import ChordParser, parse_chord
from jam_engine.types import BassNote, ParsedChord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_ROOT_VELOCITY: float = 0.8
_WALK_ACCENT_VELOCITY: float = 0.9
_WALK_VELOCITY: float = 0.7
_WALK_MIN_TONES: int = 3
_ARPEGGIO_ROOT_VELOCITY: float = 0.85
_ARPEGGIO_FIFTH_VELOCITY: float = 0.75
_OCTAVE_LOW_VELOCITY: float = 0.9
_OCTAVE_HIGH_VELOCITY: float = 0.75
_SECOND_HIT_BEAT: int = 2  # arpeggio fifth / octave jump land on beat 3 (0-based 2)

_StyleFn = Callable[[ParsedChord, float, int, int], list[BassNote]]


# ---------------------------------------------------------------------------
# Per-style note builders (one chord each)
# ---------------------------------------------------------------------------


def _root(chord: ParsedChord, start: float, octave: int, beats: int) -> list[BassNote]:
    return [BassNote(f"{chord.root}{octave}", start, float(beats), _ROOT_VELOCITY)]


def _walking(chord: ParsedChord, start: float, octave: int, beats: int) -> list[BassNote]:
    tones = chord.notes
    if len(tones) < _WALK_MIN_TONES:
        logger.debug("Walking bass skips %r: only %d chord tones", chord.symbol, len(tones))
        return []
    return [
        BassNote(
            note=f"{tones[beat % len(tones)]}{octave}",
            time=start + beat,
            duration=1.0,
            velocity=_WALK_ACCENT_VELOCITY if beat == 0 else _WALK_VELOCITY,
        )
        for beat in range(beats)
    ]


def _arpeggio(chord: ParsedChord, start: float, octave: int, beats: int) -> list[BassNote]:
    tones = chord.notes[:3]
    notes = [BassNote(f"{tones[0]}{octave}", start, 1.0, _ARPEGGIO_ROOT_VELOCITY)]
    if len(tones) == 3:
        notes.append(
            BassNote(
                f"{tones[2]}{octave}", start + _SECOND_HIT_BEAT, 1.0, _ARPEGGIO_FIFTH_VELOCITY
            )
        )
    return notes


def _octave(chord: ParsedChord, start: float, octave: int, beats: int) -> list[BassNote]:
    return [
        BassNote(f"{chord.root}{octave}", start, 1.0, _OCTAVE_LOW_VELOCITY),
        BassNote(
            f"{chord.root}{octave + 1}", start + _SECOND_HIT_BEAT, 1.0, _OCTAVE_HIGH_VELOCITY
        ),
    ]


_STYLES: dict[str, _StyleFn] = {
    "root": _root,
    "walking": _walking,
    "arpeggio": _arpeggio,
    "octave": _octave,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_bassline(
    chords: Sequence[str],
    options: BassLineOptions | None = None,
    *,
    parser: ChordParser | None = None,
) -> tuple[BassNote, ...]:
    """Generate a bass line for a chord progression.

    Args:
        chords:  Chord symbols, one per measure, e.g. ["C", "Am", "F", "G"]
        options: Style, octave and meter (default: root style, octave 2, 4 beats)
        parser:  Chord parser (default SymbolChordParser)

    Returns:
        Tuple of BassNote in chord order. Empty for an empty progression.

    Raises:
        pydantic.ValidationError: Invalid options (raised when the options
            object is built, before generation starts)

    Examples:
        >>> notes = generate_bassline(["C", "G"])
        >>> [(n.note, n.time, n.duration) for n in notes]
        [('C2', 0.0, 4.0), ('G2', 4.0, 4.0)]
        >>> opts = BassLineOptions(style="octave", octave=1)
        >>> [n.note for n in generate_bassline(["A"], opts)]
        ['A1', 'A2']
    """
    opts = options or BassLineOptions()
    build = _STYLES[opts.style]
    beats = opts.beats_per_measure

    notes: list[BassNote] = []
    for index, symbol in enumerate(chords):
        parsed = parse_chord(symbol, parser)
        if parsed is None:
            logger.debug("Skipping unparsable chord %r in bass line", symbol)
            continue
        notes.extend(build(parsed, float(index * beats), opts.octave, beats))
    return tuple(notes)
