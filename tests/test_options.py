"""
Tests for jam_engine/options.py — boundary validation of option models.

Validates:
    - Defaults for every option model
    - Field constraints and enumerations raise ValidationError (a ValueError)
    - Option models are frozen
    - AnalysisContext accepts any key string and genres from either vocabulary
"""

import pytest
from pydantic import ValidationError

from jam_engine.options import (
    AnalysisContext,
    BassLineOptions,
    DrumPatternOptions,
    SuggestionOptions,
)


class TestDefaults:
    def test_analysis_context(self):
        ctx = AnalysisContext()
        assert ctx.key is None
        assert ctx.previous_chords == ()
        assert ctx.genre is None

    def test_bass(self):
        opts = BassLineOptions()
        assert (opts.style, opts.octave, opts.beats_per_measure) == ("root", 2, 4)

    def test_drums(self):
        opts = DrumPatternOptions()
        assert (opts.style, opts.measures, opts.beats_per_measure) == ("rock", 1, 4)

    def test_suggestions(self):
        opts = SuggestionOptions()
        assert (opts.key, opts.genre, opts.max_suggestions) == ("C", "pop", 3)


class TestValidation:
    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            BassLineOptions(octave=9)

    def test_previous_chords_list_coerced(self):
        ctx = AnalysisContext(previous_chords=["C", "G"])
        assert ctx.previous_chords == ("C", "G")

    def test_unknown_key_accepted_by_context(self):
        assert AnalysisContext(key="H").key == "H"

    def test_unknown_genre_rejected_by_context(self):
        with pytest.raises(ValidationError, match="genre"):
            AnalysisContext(genre="polka")

    @pytest.mark.parametrize("genre", ["classical", "blues", "folk", "metal"])
    def test_context_accepts_suggester_and_structure_genres(self, genre):
        assert AnalysisContext(genre=genre).genre == genre

    def test_drum_style_message(self):
        with pytest.raises(ValidationError, match="style must be one of"):
            DrumPatternOptions(style="samba")

    def test_suggestion_key_message(self):
        with pytest.raises(ValidationError, match="key must be a note name"):
            SuggestionOptions(key="Q")

    def test_flat_key_accepted(self):
        assert SuggestionOptions(key="Eb").key == "Eb"

    @pytest.mark.parametrize("measures", [0, -1, 257])
    def test_measures_bounds(self, measures):
        with pytest.raises(ValidationError):
            DrumPatternOptions(measures=measures)


class TestFrozen:
    def test_bass_options_frozen(self):
        opts = BassLineOptions()
        with pytest.raises(ValidationError):
            opts.octave = 3  # type: ignore[misc]

    def test_context_hashable(self):
        _ = {AnalysisContext(key="C")}
