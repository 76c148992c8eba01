"""
jam_engine/analyzer.py — Chord analysis.

analyze() turns a chord symbol into a ChordAnalysis:
    1. Parse the symbol (ChordParser; default SymbolChordParser)
    2. Classify the quality token with a priority cascade
    3. Score tension with a tension model (default BasicTensionModel)
    4. If a key is given, label the harmonic function (default SixFunctionMap)

Quality cascade — evaluated in this order, first match wins:
    diminished  token contains "dim"
    augmented   token contains "aug"
    suspended   token contains "sus"
    dominant    token contains "7" but not "maj7" / "m7"
    minor       token starts with "m"/"min" and is not a "maj" token
    major       token contains "M"/"maj", or the chord has a major third
    unknown     anything else (e.g. power chords)

Unparsable symbols never raise: they yield the empty analysis with
confidence 0. A successful parse always reports confidence 0.95; this is
a fixed marker of "parsed", not a measured probability.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from jam_engine.functions import SIX_FUNCTION_MAP, FunctionMap
from jam_engine.options import AnalysisContext
from jam_engine.parser import ChordParser, parse_chord
from jam_engine.tension import BASIC_TENSION, TensionModel
from jam_engine.types import ChordAnalysis

logger = logging.getLogger(__name__)

ANALYSIS_CONFIDENCE: float = 0.95
_MAJOR_THIRD: int = 4


def classify_quality(token: str, intervals: Sequence[int] = ()) -> str:
    """Classify a parser quality token into a coarse chord quality.

    Args:
        token:     Quality token, e.g. "maj7", "m7b5", "7sus4"
        intervals: Semitone offsets of the chord tones; used only to
                   recognise major chords whose token has no "M"/"maj"

    Returns:
        One of "diminished", "augmented", "suspended", "dominant",
        "minor", "major", "unknown"

    Examples:
        >>> classify_quality("G7sus4"[1:])
        'suspended'
        >>> classify_quality("maj7")
        'major'
        >>> classify_quality("m7b5")
        'minor'
        >>> classify_quality("9", (0, 4, 7, 10, 14))
        'major'
    """
    if "dim" in token:
        return "diminished"
    if "aug" in token:
        return "augmented"
    if "sus" in token:
        return "suspended"
    if "7" in token and "maj7" not in token.lower() and "m7" not in token:
        return "dominant"
    if token.startswith("m") and not token.startswith("maj"):
        return "minor"
    if "M" in token or "maj" in token or _MAJOR_THIRD in intervals:
        return "major"
    return "unknown"


def empty_analysis(symbol: str) -> ChordAnalysis:
    """The zero-confidence analysis returned for unparsable symbols."""
    return ChordAnalysis(
        symbol=symbol,
        root="",
        type="",
        notes=(),
        quality="unknown",
        tension=0.0,
        confidence=0.0,
    )


def analyze(
    symbol: str,
    context: AnalysisContext | None = None,
    *,
    parser: ChordParser | None = None,
    tension_model: TensionModel = BASIC_TENSION,
    function_map: FunctionMap = SIX_FUNCTION_MAP,
) -> ChordAnalysis:
    """Analyze a single chord symbol.

    Args:
        symbol:        Chord symbol, e.g. "Cmaj7", "F#m", "G7sus4"
        context:       Optional key / previous chords / genre
        parser:        Chord parser (default SymbolChordParser)
        tension_model: Tension strategy (default BasicTensionModel)
        function_map:  Function strategy used when a key is given
                       (default SixFunctionMap)

    Returns:
        ChordAnalysis. ``function`` is None when no key is supplied.
        Unparsable symbols return the empty analysis (confidence 0).

    Examples:
        >>> a = analyze("G7", AnalysisContext(key="C"))
        >>> (a.quality, a.tension, a.function)
        ('dominant', 0.7, 'dominant')
        >>> analyze("H7").confidence
        0.0
    """
    parsed = parse_chord(symbol, parser)
    if parsed is None:
        logger.debug("Unparsable chord symbol %r", symbol)
        return empty_analysis(symbol)

    quality = classify_quality(parsed.quality, parsed.intervals)
    tension = tension_model.tension(quality, parsed.quality)

    function: str | None = None
    if context is not None and context.key:
        function = function_map.function_of(parsed.root, context.key)

    return ChordAnalysis(
        symbol=symbol,
        root=parsed.root,
        type=parsed.quality,
        notes=parsed.notes,
        quality=quality,
        function=function,
        tension=tension,
        confidence=ANALYSIS_CONFIDENCE,
    )


def analyze_progression(
    chords: Sequence[str],
    context: AnalysisContext | None = None,
    *,
    parser: ChordParser | None = None,
) -> tuple[ChordAnalysis, ...]:
    """Analyze every chord of a progression.

    Each position is analyzed with ``previous_chords`` set to the chords
    before it. The result is otherwise identical to mapping analyze().

    Examples:
        >>> [a.quality for a in analyze_progression(["Am", "F", "G7"])]
        ['minor', 'major', 'dominant']
    """
    base = context or AnalysisContext()
    return tuple(
        analyze(
            symbol,
            base.model_copy(update={"previous_chords": tuple(chords[:index])}),
            parser=parser,
        )
        for index, symbol in enumerate(chords)
    )
