"""
Tests for jam_engine/voice_leading.py — root-movement scoring.

Validates:
    - root_movement folds distances onto [0, 6]
    - Fewer than two chords score exactly 1.0
    - Mean over transitions, table values, default for unlisted distances
    - Empty analyses are rejected
"""

import pytest

from jam_engine.analyzer import analyze, analyze_progression
from jam_engine.voice_leading import (
    MOVEMENT_QUALITY,
    calculate_voice_leading_quality,
    root_movement,
)


def _quality(*symbols: str) -> float:
    return calculate_voice_leading_quality(analyze_progression(list(symbols)))


class TestRootMovement:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(0, 7, 5), (7, 0, 5), (0, 5, 5), (11, 0, 1), (0, 6, 6), (3, 3, 0), (2, 0, 2)],
    )
    def test_folded(self, a, b, expected):
        assert root_movement(a, b) == expected

    def test_symmetric(self):
        for a in range(12):
            for b in range(12):
                assert root_movement(a, b) == root_movement(b, a)


class TestVoiceLeadingQuality:
    def test_empty_is_one(self):
        assert calculate_voice_leading_quality([]) == 1.0

    def test_single_chord_is_one(self):
        assert calculate_voice_leading_quality([analyze("C")]) == 1.0

    def test_fifth_movement(self):
        assert _quality("C", "G") == pytest.approx(0.95)

    def test_repeated_root(self):
        assert _quality("C", "Cm") == pytest.approx(0.3)

    def test_tritone(self):
        assert _quality("C", "F#") == pytest.approx(0.4)

    def test_mean_over_transitions(self):
        # C→F (5) .95, F→G (2) .9, G→C (5) .95
        assert _quality("C", "F", "G", "C") == pytest.approx((0.95 + 0.9 + 0.95) / 3)

    def test_enharmonic_roots_are_equal(self):
        assert _quality("C#", "Db") == pytest.approx(MOVEMENT_QUALITY[0])

    def test_in_unit_range(self):
        assert 0.0 <= _quality("C", "Db", "D", "Ab", "E", "B") <= 1.0

    def test_empty_analysis_rejected(self):
        with pytest.raises(ValueError, match="no root"):
            calculate_voice_leading_quality([analyze("C"), analyze("H7")])
