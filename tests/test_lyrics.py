"""
Tests for jam_engine/lyrics.py — syllables and rhyme.

Validates:
    - count_syllables: vowel groups, trailing silent e, empty/vowel-less text
    - make_line / make_section build validated records
    - rhyme_ending / lines_rhyme / rhyme_pattern / rhyme_scheme
"""

import pytest

from jam_engine.lyrics import (
    count_syllables,
    lines_rhyme,
    make_line,
    make_section,
    rhyme_ending,
    rhyme_pattern,
    rhyme_scheme,
)

# ---------------------------------------------------------------------------
# Syllables
# ---------------------------------------------------------------------------


class TestCountSyllables:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", 0),
            ("   ", 0),
            ("psst", 0),
            ("make", 1),
            ("the", 1),
            ("hello", 2),
            ("hello world", 3),
            ("Dancing through the night", 5),
            ("rhythm", 1),
        ],
    )
    def test_counts(self, text, expected):
        assert count_syllables(text) == expected

    def test_case_insensitive(self):
        assert count_syllables("HELLO") == count_syllables("hello")

    def test_never_negative(self):
        for text in ("", "e", "be", "xyz", "queue"):
            assert count_syllables(text) >= 0


class TestBuilders:
    def test_make_line(self):
        line = make_line("hello world")
        assert line.text == "hello world"
        assert line.syllable_count == 3

    def test_make_section(self):
        section = make_section("chorus", ["hello world", "make"])
        assert section.section_type == "chorus"
        assert [l.syllable_count for l in section.lines] == [3, 1]
        assert section.total_syllables == 4

    def test_make_section_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="section_type"):
            make_section("hook", ["la"])


# ---------------------------------------------------------------------------
# Rhyme
# ---------------------------------------------------------------------------


class TestRhyme:
    def test_ending_from_first_vowel(self):
        assert rhyme_ending("Dancing through the night") == "ight"

    def test_punctuation_stripped(self):
        assert rhyme_ending("hold me tight!") == "ight"

    def test_empty_line(self):
        assert rhyme_ending("") == ""

    def test_lines_rhyme(self):
        assert lines_rhyme("hold me tight", "through the night")
        assert not lines_rhyme("hold me tight", "all day long")

    def test_short_endings_never_rhyme(self):
        assert not lines_rhyme("I", "I")

    def test_pattern(self):
        assert rhyme_pattern(["the day", "the night", "we play", "so bright"]) == "ABAB"

    @pytest.mark.parametrize(
        ("lines", "scheme"),
        [
            (["the day", "we play", "the night", "so bright"], "AABB"),
            (["the day", "the night", "we play", "so bright"], "ABAB"),
            (["the day", "we play", "all day", "the bay"], "AAAA"),
            (["one", "two", "three"], "free"),
            (["alone"], "none"),
            ([], "none"),
        ],
    )
    def test_scheme(self, lines, scheme):
        assert rhyme_scheme(lines) == scheme
