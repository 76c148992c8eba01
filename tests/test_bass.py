"""
Tests for jam_engine/bass.py — bass line generator.

Validates:
    - root: one whole-measure note per chord, octave suffix, timing
    - walking: one note per beat cycling chord tones, accent on beat 0
    - arpeggio: root + fifth, two-tone chords get only the root
    - octave: low/high root pair
    - Unparsable chords are skipped without shifting later chords
    - Option validation, meter, invariants (time ≥ 0, duration > 0, velocity)
"""

import pytest
from pydantic import ValidationError

from jam_engine.bass import generate_bassline
from jam_engine.options import BassLineOptions
from jam_engine.types import BassNote

PROGRESSION = ["C", "Am", "F", "G7"]


def _notes(chords, **opts) -> tuple[BassNote, ...]:
    return generate_bassline(chords, BassLineOptions(**opts))


# ---------------------------------------------------------------------------
# root
# ---------------------------------------------------------------------------


class TestRootStyle:
    def test_default_is_root(self):
        assert generate_bassline(PROGRESSION) == _notes(PROGRESSION, style="root")

    def test_one_note_per_chord(self):
        notes = generate_bassline(PROGRESSION)
        assert [n.note for n in notes] == ["C2", "A2", "F2", "G2"]

    def test_timing(self):
        notes = generate_bassline(PROGRESSION)
        assert [n.time for n in notes] == [0.0, 4.0, 8.0, 12.0]
        assert all(n.duration == 4.0 for n in notes)
        assert all(n.velocity == pytest.approx(0.8) for n in notes)

    def test_octave_option(self):
        notes = _notes(["Bb"], octave=3)
        assert notes[0].note == "Bb3"

    def test_three_four_meter(self):
        notes = _notes(["C", "G"], beats_per_measure=3)
        assert [(n.time, n.duration) for n in notes] == [(0.0, 3.0), (3.0, 3.0)]

    def test_empty_progression(self):
        assert generate_bassline([]) == ()


# ---------------------------------------------------------------------------
# walking
# ---------------------------------------------------------------------------


class TestWalkingStyle:
    def test_cycles_chord_tones(self):
        notes = _notes(["C"], style="walking")
        assert [n.note for n in notes] == ["C2", "E2", "G2", "C2"]

    def test_seventh_chord_uses_all_tones(self):
        notes = _notes(["G7"], style="walking")
        assert [n.note for n in notes] == ["G2", "B2", "D2", "F2"]

    def test_velocity_accent(self):
        notes = _notes(["C"], style="walking")
        assert notes[0].velocity == pytest.approx(0.9)
        assert all(n.velocity == pytest.approx(0.7) for n in notes[1:])

    def test_one_note_per_beat(self):
        notes = _notes(PROGRESSION, style="walking")
        assert len(notes) == 16
        assert [n.time for n in notes] == [float(t) for t in range(16)]
        assert all(n.duration == 1.0 for n in notes)

    def test_power_chord_skipped(self):
        notes = _notes(["C5", "G"], style="walking")
        assert [n.time for n in notes] == [4.0, 5.0, 6.0, 7.0]


# ---------------------------------------------------------------------------
# arpeggio / octave
# ---------------------------------------------------------------------------


class TestArpeggioStyle:
    def test_root_and_fifth(self):
        notes = _notes(["Am"], style="arpeggio")
        assert [(n.note, n.time, n.velocity) for n in notes] == [
            ("A2", 0.0, 0.85),
            ("E2", 2.0, 0.75),
        ]

    def test_power_chord_root_only(self):
        notes = _notes(["D5"], style="arpeggio")
        assert [n.note for n in notes] == ["D2"]


class TestOctaveStyle:
    def test_low_and_high_root(self):
        notes = _notes(["E"], style="octave")
        assert [(n.note, n.time, n.velocity) for n in notes] == [
            ("E2", 0.0, 0.9),
            ("E3", 2.0, 0.75),
        ]

    def test_second_chord_offset(self):
        notes = _notes(["E", "A"], style="octave")
        assert [n.time for n in notes] == [0.0, 2.0, 4.0, 6.0]


# ---------------------------------------------------------------------------
# Robustness and options
# ---------------------------------------------------------------------------


class TestUnparsable:
    def test_skipped_without_shifting(self):
        notes = generate_bassline(["C", "H7", "G"])
        assert [(n.note, n.time) for n in notes] == [("C2", 0.0), ("G2", 8.0)]

    def test_all_unparsable(self):
        assert generate_bassline(["???", "H"]) == ()


class TestOptions:
    def test_unknown_style_rejected(self):
        with pytest.raises(ValidationError):
            BassLineOptions(style="slap")

    def test_zero_beats_rejected(self):
        with pytest.raises(ValidationError):
            BassLineOptions(beats_per_measure=0)

    def test_no_complexity_option(self):
        assert "complexity" not in BassLineOptions.model_fields

    @pytest.mark.parametrize("style", ["root", "walking", "arpeggio", "octave"])
    def test_invariants(self, style):
        for n in _notes(PROGRESSION, style=style):
            assert n.time >= 0
            assert n.duration > 0
            assert 0.0 <= n.velocity <= 1.0
