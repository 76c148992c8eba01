"""
jam_engine/lyrics.py — Syllable counting and rhyme detection for lyric lines.

Heuristics only; no dictionary lookup.

Syllables (count_syllables):
    1. Lowercase and trim the text
    2. Count vowel groups ([aeiouy]+)
    3. Drop one for a trailing silent "e" when more than one group was found
    4. At least 1 for text with vowels; 0 for empty or vowel-less text

Rhyme (rhyme_ending):
    The last word, lowercased and stripped to letters, from its first vowel
    onwards ("night" → "ight"). Endings shorter than two letters never rhyme.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from jam_engine.types import LyricLine, SectionLyrics

_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")
_VOWEL_RE = re.compile(r"[aeiouy]")
_NON_LETTER_RE = re.compile(r"[^a-z]")

_MIN_RHYME_LENGTH: int = 2

#: Rhyme patterns recognised by name; anything else is "free"
NAMED_RHYME_SCHEMES: frozenset[str] = frozenset(
    {"AABB", "ABAB", "ABCB", "AAAA", "ABBA", "ABABCC", "AABCCB"}
)


# ---------------------------------------------------------------------------
# Syllables
# ---------------------------------------------------------------------------


def count_syllables(text: str) -> int:
    """Estimate the number of sung syllables in a lyric line.

    Examples:
        >>> count_syllables("make")
        1
        >>> count_syllables("hello world")
        3
        >>> count_syllables("")
        0
        >>> count_syllables("psst")
        0
    """
    cleaned = text.strip().lower()
    if not cleaned:
        return 0

    count = len(_VOWEL_GROUP_RE.findall(cleaned))
    if count == 0:
        return 0
    if cleaned.endswith("e") and count > 1:
        count -= 1
    return max(count, 1)


def make_line(text: str) -> LyricLine:
    """Build a LyricLine with its syllable count."""
    return LyricLine(text=text, syllable_count=count_syllables(text))


def make_section(section_type: str, texts: Iterable[str]) -> SectionLyrics:
    """Build a SectionLyrics from raw line texts.

    Raises:
        ValueError: If section_type is not a SectionType
    """
    return SectionLyrics(section_type=section_type, lines=tuple(make_line(t) for t in texts))


# ---------------------------------------------------------------------------
# Rhyme
# ---------------------------------------------------------------------------


def rhyme_ending(text: str) -> str:
    """The rhyming tail of a line's last word.

    Examples:
        >>> rhyme_ending("Dancing through the night")
        'ight'
        >>> rhyme_ending("")
        ''
    """
    words = text.split()
    if not words:
        return ""
    last = _NON_LETTER_RE.sub("", words[-1].lower())
    if len(last) < _MIN_RHYME_LENGTH:
        return last
    match = _VOWEL_RE.search(last)
    if match is None:
        return last
    return last[match.start():]


def lines_rhyme(first: str, second: str) -> bool:
    """Whether two lines end on the same rhyme.

    Examples:
        >>> lines_rhyme("hold me tight", "through the night")
        True
        >>> lines_rhyme("a", "a")
        False
    """
    a, b = rhyme_ending(first), rhyme_ending(second)
    if len(a) < _MIN_RHYME_LENGTH or len(b) < _MIN_RHYME_LENGTH:
        return False
    return a == b


def rhyme_pattern(lines: Sequence[str]) -> str:
    """Letter pattern of line endings: each new ending gets the next letter.

    Examples:
        >>> rhyme_pattern(["the day", "the night", "we play", "so bright"])
        'ABAB'
    """
    letters: dict[str, str] = {}
    pattern: list[str] = []
    for line in lines:
        ending = rhyme_ending(line)
        if ending not in letters:
            letters[ending] = chr(ord("A") + len(letters))
        pattern.append(letters[ending])
    return "".join(pattern)


def rhyme_scheme(lines: Sequence[str]) -> str:
    """Name the rhyme scheme of a section.

    Returns:
        "none" for fewer than two lines, the pattern itself when it is one
        of NAMED_RHYME_SCHEMES, otherwise "free"

    Examples:
        >>> rhyme_scheme(["the day", "we play", "the night", "so bright"])
        'AABB'
        >>> rhyme_scheme(["just one line"])
        'none'
    """
    if len(lines) < 2:
        return "none"
    pattern = rhyme_pattern(lines)
    return pattern if pattern in NAMED_RHYME_SCHEMES else "free"
