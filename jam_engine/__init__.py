"""
jam_engine/ — Pure music theory engine for songwriting and jam sessions.

Exports:
    Types:     ParsedChord, ChordAnalysis, ProgressionAnalysis, BassNote,
               DrumEvent, LyricLine, SectionLyrics, SongStructure,
               ChordSuggestion, SECTION_TYPES, GENRES
    Options:   AnalysisContext, BassLineOptions, DrumPatternOptions,
               SuggestionOptions
    Parsing:   ChordParser, SymbolChordParser, parse_chord,
               transpose_chord, transpose_progression
    Analysis:  analyze, analyze_progression, classify_quality,
               TENSION_MODELS, FUNCTION_MAPS
    Voicing:   calculate_voice_leading_quality
    Cadence:   analyze_progression_resolves, summarize_progression
    Suggest:   suggest_next_chords, explain_suggestion
    Bass:      generate_bassline
    Drums:     generate_pattern, available_styles
    Structure: estimate_section_duration_seconds, estimate_song_duration_seconds,
               validate_structure_completeness, suggest_next_section,
               sequence_sections
    Lyrics:    count_syllables, make_line, make_section, rhyme_scheme
"""

from jam_engine.analyzer import analyze, analyze_progression, classify_quality
from jam_engine.bass import generate_bassline
from jam_engine.cadence import analyze_progression_resolves, summarize_progression
from jam_engine.drums import available_styles, generate_pattern
from jam_engine.functions import FUNCTION_MAPS, SEVEN_DEGREE_MAP, SIX_FUNCTION_MAP
from jam_engine.lyrics import count_syllables, make_line, make_section, rhyme_scheme
from jam_engine.options import (
    AnalysisContext,
    BassLineOptions,
    DrumPatternOptions,
    SuggestionOptions,
)
from jam_engine.parser import (
    ChordParser,
    SymbolChordParser,
    parse_chord,
    transpose_chord,
    transpose_progression,
)
from jam_engine.structure import (
    estimate_section_duration_seconds,
    estimate_song_duration_seconds,
    sequence_sections,
    suggest_next_section,
    validate_structure_completeness,
)
from jam_engine.suggest import explain_suggestion, suggest_next_chords
from jam_engine.tension import BASIC_TENSION, EXTENDED_TENSION, TENSION_MODELS
from jam_engine.types import (
    GENRES,
    SECTION_TYPES,
    BassNote,
    ChordAnalysis,
    ChordSuggestion,
    DrumEvent,
    LyricLine,
    ParsedChord,
    ProgressionAnalysis,
    SectionLyrics,
    SongStructure,
)
from jam_engine.voice_leading import calculate_voice_leading_quality

__version__ = "0.1.0"

__all__ = [
    # Types
    "ParsedChord",
    "ChordAnalysis",
    "ProgressionAnalysis",
    "BassNote",
    "DrumEvent",
    "LyricLine",
    "SectionLyrics",
    "SongStructure",
    "ChordSuggestion",
    "SECTION_TYPES",
    "GENRES",
    # Options
    "AnalysisContext",
    "BassLineOptions",
    "DrumPatternOptions",
    "SuggestionOptions",
    # Parsing
    "ChordParser",
    "SymbolChordParser",
    "parse_chord",
    "transpose_chord",
    "transpose_progression",
    # Analysis
    "analyze",
    "analyze_progression",
    "classify_quality",
    "BASIC_TENSION",
    "EXTENDED_TENSION",
    "TENSION_MODELS",
    "SIX_FUNCTION_MAP",
    "SEVEN_DEGREE_MAP",
    "FUNCTION_MAPS",
    # Voice leading
    "calculate_voice_leading_quality",
    # Cadence
    "analyze_progression_resolves",
    "summarize_progression",
    # Suggestions
    "suggest_next_chords",
    "explain_suggestion",
    # Bass
    "generate_bassline",
    # Drums
    "generate_pattern",
    "available_styles",
    # Structure
    "estimate_section_duration_seconds",
    "estimate_song_duration_seconds",
    "validate_structure_completeness",
    "suggest_next_section",
    "sequence_sections",
    # Lyrics
    "count_syllables",
    "make_line",
    "make_section",
    "rhyme_scheme",
]
