"""
jam_engine/options.py — Pydantic option models validated at the engine boundary.

Covers:
    analyze / analyze_progression  — AnalysisContext
    generate_bassline              — BassLineOptions
    generate_pattern               — DrumPatternOptions
    suggest_next_chords            — SuggestionOptions

Option objects are frozen; bad values raise pydantic.ValidationError (a
ValueError subclass) before any computation starts.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jam_engine.notes import note_to_pitch_class
from jam_engine.types import GENRES

BassStyle = Literal["root", "walking", "arpeggio", "octave"]
SuggestionGenre = Literal["pop", "jazz", "rock", "classical", "blues"]

# Analysis takes any genre known to the structure sequencer or the suggester
ANALYSIS_GENRES: frozenset[str] = GENRES | frozenset(get_args(SuggestionGenre))

VALID_DRUM_STYLES: frozenset[str] = frozenset({"rock", "pop", "jazz", "electronic"})


def _check_note(v: str, field_name: str) -> str:
    try:
        note_to_pitch_class(v)
    except ValueError as exc:
        raise ValueError(f"{field_name} must be a note name such as 'C' or 'F#', got {v!r}") from exc
    return v


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


class AnalysisContext(BaseModel):
    """Context for chord analysis.

    ``previous_chords`` is informational; analyze() records nothing from it.
    An unrecognized ``key`` is accepted and yields the "unknown" function.
    """

    model_config = ConfigDict(frozen=True)

    key: str | None = Field(default=None, description="Tonal centre, e.g. 'C', 'F#'.")
    previous_chords: tuple[str, ...] = Field(default_factory=tuple)
    genre: str | None = Field(default=None)

    @field_validator("genre")
    @classmethod
    def validate_genre(cls, v: str | None) -> str | None:
        if v is not None and v not in ANALYSIS_GENRES:
            raise ValueError(f"genre must be one of: {', '.join(sorted(ANALYSIS_GENRES))}")
        return v


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


class BassLineOptions(BaseModel):
    """Options for generate_bassline()."""

    model_config = ConfigDict(frozen=True)

    style: BassStyle = Field(default="root")
    octave: int = Field(default=2, ge=0, le=8)
    beats_per_measure: int = Field(default=4, ge=1, le=16)


class DrumPatternOptions(BaseModel):
    """Options for generate_pattern()."""

    model_config = ConfigDict(frozen=True)

    style: str = Field(default="rock")
    measures: int = Field(default=1, ge=1, le=256)
    beats_per_measure: int = Field(default=4, ge=1, le=16)

    @field_validator("style")
    @classmethod
    def validate_style(cls, v: str) -> str:
        if v not in VALID_DRUM_STYLES:
            raise ValueError(f"style must be one of: {', '.join(sorted(VALID_DRUM_STYLES))}")
        return v


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


class SuggestionOptions(BaseModel):
    """Options for suggest_next_chords()."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(default="C", description="Tonal centre, e.g. 'C', 'Bb'.")
    genre: SuggestionGenre = Field(default="pop")
    max_suggestions: int = Field(default=3, ge=1, le=12)

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        return _check_note(v, "key")
