"""
jam_engine/cadence.py — Cadence detection and progression summaries.

A progression "resolves" when it lands on the tonic, or when its penultimate
chord is the dominant. Functions here come from the seven-degree map, which
differs from the six-function map analyze() uses:

    analyze("D", key="C").function         → "unknown"
    SEVEN_DEGREE_MAP.function_of("D", "C") → "supertonic"

Exports:
    analyze_progression_resolves(progression, key) → bool
    summarize_progression(chords, key) → ProgressionAnalysis
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from jam_engine.analyzer import analyze_progression
from jam_engine.functions import SEVEN_DEGREE_MAP
from jam_engine.options import AnalysisContext
from jam_engine.parser import parse_chord
from jam_engine.types import ChordAnalysis, ProgressionAnalysis
from jam_engine.voice_leading import calculate_voice_leading_quality

logger = logging.getLogger(__name__)


def _root_of(chord: str | ChordAnalysis) -> str:
    if isinstance(chord, ChordAnalysis):
        return chord.root
    parsed = parse_chord(chord)
    return parsed.root if parsed is not None else ""


def analyze_progression_resolves(
    progression: Sequence[str | ChordAnalysis],
    key: str,
) -> bool:
    """Whether a progression ends with a cadence in ``key``.

    Args:
        progression: Chord symbols or analyses, in order
        key:         Tonic note name, e.g. "C", "Bb"

    Returns:
        True if the last chord is the tonic, or the penultimate chord is the
        dominant. False for fewer than two chords. Unparsable chords count
        as "chromatic" and never satisfy either condition.

    Examples:
        >>> analyze_progression_resolves(["F", "G", "C"], "C")
        True
        >>> analyze_progression_resolves(["C", "F"], "C")
        False
    """
    if len(progression) < 2:
        return False

    last = SEVEN_DEGREE_MAP.function_of(_root_of(progression[-1]), key)
    if last == "tonic":
        return True
    penultimate = SEVEN_DEGREE_MAP.function_of(_root_of(progression[-2]), key)
    return penultimate == "dominant"


def summarize_progression(chords: Sequence[str], key: str) -> ProgressionAnalysis:
    """Analyze a progression in a key and summarize it.

    Unparsable chords stay in ``chords`` as empty analyses but are left out
    of the voice-leading score and the average tension.

    Examples:
        >>> s = summarize_progression(["Dm7", "G7", "Cmaj7"], "C")
        >>> s.resolves
        True
    """
    analyses = analyze_progression(chords, AnalysisContext(key=key))
    parsed = [a for a in analyses if not a.is_empty]
    if len(parsed) != len(analyses):
        logger.debug(
            "Skipping %d unparsable chord(s) in progression summary",
            len(analyses) - len(parsed),
        )

    average_tension = sum(a.tension for a in parsed) / len(parsed) if parsed else 0.0
    return ProgressionAnalysis(
        chords=analyses,
        key=key,
        voice_leading_quality=calculate_voice_leading_quality(parsed),
        resolves=analyze_progression_resolves(analyses, key),
        average_tension=round(average_tension, 6),
    )
