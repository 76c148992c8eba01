"""
Tests for jam_engine/analyzer.py — chord analysis.

Validates:
    - classify_quality: cascade order and first-match-wins
    - analyze: quality, tension, function, fixed confidence
    - Unparsable symbols yield the empty analysis, never raise
    - Strategy injection (tension model, function map, parser)
    - analyze_progression: one analysis per chord, previous_chords threading
"""

import logging

import pytest

from jam_engine.analyzer import (
    ANALYSIS_CONFIDENCE,
    analyze,
    analyze_progression,
    classify_quality,
)
from jam_engine.functions import SEVEN_DEGREE_MAP
from jam_engine.options import AnalysisContext
from jam_engine.tension import EXTENDED_TENSION
from jam_engine.types import ParsedChord

# ---------------------------------------------------------------------------
# classify_quality
# ---------------------------------------------------------------------------


class TestClassifyQuality:
    @pytest.mark.parametrize(
        ("token", "intervals", "expected"),
        [
            ("M", (0, 4, 7), "major"),
            ("m", (0, 3, 7), "minor"),
            ("dim", (0, 3, 6), "diminished"),
            ("dim7", (0, 3, 6, 9), "diminished"),
            ("aug", (0, 4, 8), "augmented"),
            ("sus2", (0, 2, 7), "suspended"),
            ("7sus4", (0, 5, 7, 10), "suspended"),
            ("7", (0, 4, 7, 10), "dominant"),
            ("7#5", (0, 4, 8, 10), "dominant"),
            ("maj7", (0, 4, 7, 11), "major"),
            ("m7", (0, 3, 7, 10), "minor"),
            ("m7b5", (0, 3, 6, 10), "minor"),
            ("mMaj7", (0, 3, 7, 11), "minor"),
            ("9", (0, 4, 7, 10, 14), "major"),
            ("13", (0, 4, 7, 10, 14, 21), "major"),
            ("maj9", (0, 4, 7, 11, 14), "major"),
            ("6", (0, 4, 7, 9), "major"),
            ("5", (0, 7), "unknown"),
        ],
    )
    def test_cascade(self, token, intervals, expected):
        assert classify_quality(token, intervals) == expected

    def test_diminished_beats_dominant(self):
        # "dim7" contains "7" but the diminished rule fires first
        assert classify_quality("dim7") == "diminished"

    def test_maj_token_is_not_minor(self):
        assert classify_quality("maj7") == "major"

    def test_no_third_no_marker_is_unknown(self):
        assert classify_quality("", ()) == "unknown"


# ---------------------------------------------------------------------------
# analyze
# ---------------------------------------------------------------------------


class TestAnalyze:
    def test_dominant_seventh_in_c(self):
        a = analyze("G7", AnalysisContext(key="C"))
        assert a.root == "G"
        assert a.type == "7"
        assert a.quality == "dominant"
        assert a.tension == pytest.approx(0.7)
        assert a.function == "dominant"

    def test_major_seventh_is_major(self):
        a = analyze("Cmaj7")
        assert a.quality == "major"
        assert a.tension == pytest.approx(0.2)

    def test_minor(self):
        a = analyze("Am", AnalysisContext(key="C"))
        assert a.quality == "minor"
        assert a.tension == pytest.approx(0.4)
        assert a.function == "submediant"

    def test_extension_bonus(self):
        a = analyze("Dm11")
        assert a.quality == "minor"
        assert a.tension == pytest.approx(0.55)

    def test_no_key_no_function(self):
        assert analyze("G7").function is None

    def test_non_listed_degree_is_unknown(self):
        assert analyze("D", AnalysisContext(key="C")).function == "unknown"

    def test_unparsable_key_is_unknown(self):
        assert analyze("C", AnalysisContext(key="H")).function == "unknown"

    def test_fixed_confidence(self):
        for symbol in ("C", "F#m7", "Bb13", "Esus2"):
            assert analyze(symbol).confidence == ANALYSIS_CONFIDENCE == 0.95

    def test_notes_are_spelled(self):
        assert analyze("Ebmaj7").notes == ("Eb", "G", "Bb", "D")

    def test_tension_in_unit_range(self):
        for symbol in ("C", "Cm", "C7", "Cdim", "Caug", "Csus4", "C13", "Cdim7", "Cm11"):
            assert 0.0 <= analyze(symbol).tension <= 1.0


class TestAnalyzeUnparsable:
    @pytest.mark.parametrize("bad", ["H7", "", "not a chord", "Cxyz"])
    def test_empty_analysis(self, bad):
        a = analyze(bad, AnalysisContext(key="C"))
        assert a.is_empty
        assert a.symbol == bad
        assert a.root == ""
        assert a.type == ""
        assert a.notes == ()
        assert a.quality == "unknown"
        assert a.tension == 0.0
        assert a.confidence == 0.0
        assert a.function is None

    def test_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="jam_engine.analyzer"):
            analyze("H7")
        assert "H7" in caplog.text


class TestStrategies:
    def test_seven_degree_map(self):
        a = analyze("D", AnalysisContext(key="C"), function_map=SEVEN_DEGREE_MAP)
        assert a.function == "supertonic"

    def test_extended_tension_model(self):
        a = analyze("Bm7b5", tension_model=EXTENDED_TENSION)
        assert a.tension == pytest.approx(0.8)

    def test_custom_parser(self):
        class AlwaysE:
            def parse(self, symbol):
                return ParsedChord(symbol, "E", "M", ("E", "G#", "B"), (0, 4, 7))

        a = analyze("whatever", AnalysisContext(key="A"), parser=AlwaysE())
        assert a.root == "E"
        assert a.function == "dominant"


# ---------------------------------------------------------------------------
# analyze_progression
# ---------------------------------------------------------------------------


class TestAnalyzeProgression:
    def test_one_per_chord(self):
        result = analyze_progression(["C", "Am", "F", "G"], AnalysisContext(key="C"))
        assert len(result) == 4
        assert [a.function for a in result] == ["tonic", "submediant", "subdominant", "dominant"]

    def test_matches_single_analysis(self):
        ctx = AnalysisContext(key="G")
        chords = ["G", "Em7", "C", "D7"]
        assert analyze_progression(chords, ctx) == tuple(analyze(c, ctx) for c in chords)

    def test_empty(self):
        assert analyze_progression([]) == ()

    def test_keeps_unparsable_positions(self):
        result = analyze_progression(["C", "H7", "G"])
        assert result[1].is_empty
        assert result[2].root == "G"

    def test_context_not_mutated(self):
        ctx = AnalysisContext(key="C")
        analyze_progression(["C", "F"], ctx)
        assert ctx.previous_chords == ()
