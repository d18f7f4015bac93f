"""
Chord primitives - ChordQuality and Chord.

A triad is a root plus a third and a fifth. The quality picks which third
and which fifth; both are spelled by ascending transposition from the root.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_theory.constants import ErrorMessages

from .interval import Interval
from .pitch import Note


class ChordQuality(str, Enum):
    """The four triad qualities."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"

    @property
    def third(self) -> Interval:
        """Interval from the root to the third."""
        return _THIRDS[self]

    @property
    def fifth(self) -> Interval:
        """Interval from the root to the fifth."""
        return _FIFTHS[self]

    @property
    def suffix(self) -> str:
        """Chord-symbol suffix ('' for major, 'm', 'dim', 'aug')."""
        return _SUFFIXES[self]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> ChordQuality:
        """Parse a quality from 'minor', 'MINOR', 'm', 'dim', '+', ..."""
        text = name.strip()
        if text in _SUFFIX_ALIASES:
            return _SUFFIX_ALIASES[text]
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_QUALITY.format(quality=name)) from None


_THIRDS: dict[ChordQuality, Interval] = {
    ChordQuality.MAJOR: Interval.MAJOR_THIRD,
    ChordQuality.MINOR: Interval.MINOR_THIRD,
    ChordQuality.DIMINISHED: Interval.MINOR_THIRD,
    ChordQuality.AUGMENTED: Interval.MAJOR_THIRD,
}

_FIFTHS: dict[ChordQuality, Interval] = {
    ChordQuality.MAJOR: Interval.PERFECT_FIFTH,
    ChordQuality.MINOR: Interval.PERFECT_FIFTH,
    ChordQuality.DIMINISHED: Interval.DIMINISHED_FIFTH,
    ChordQuality.AUGMENTED: Interval.AUGMENTED_FIFTH,
}

_SUFFIXES: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIMINISHED: "dim",
    ChordQuality.AUGMENTED: "aug",
}

# Accepted chord-symbol suffixes, including common alternates
_SUFFIX_ALIASES: dict[str, ChordQuality] = {
    "": ChordQuality.MAJOR,
    "M": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "m": ChordQuality.MINOR,
    "min": ChordQuality.MINOR,
    "-": ChordQuality.MINOR,
    "dim": ChordQuality.DIMINISHED,
    "°": ChordQuality.DIMINISHED,
    "aug": ChordQuality.AUGMENTED,
    "+": ChordQuality.AUGMENTED,
}

# Root spelling followed by the quality suffix
_CHORD_SYMBOL_RE = re.compile(r"(?P<root>[A-Ga-g](?:bb|b|##|#)?)(?P<suffix>.*)")


@dataclass(frozen=True)
class Chord:
    """
    A triad with a spelled root and a quality.

    The third and fifth are computed on demand, never stored.

    Examples:
        Chord(Note.parse("C"), ChordQuality.MINOR).third() -> Eb
        Chord(Note.parse("C"), ChordQuality.AUGMENTED).fifth() -> G#
    """

    root: Note
    quality: ChordQuality = ChordQuality.MAJOR

    def third(self) -> Note:
        """The third of the chord."""
        return self.root.ascend(self.quality.third)

    def fifth(self) -> Note:
        """The fifth of the chord."""
        return self.root.ascend(self.quality.fifth)

    def notes(self) -> tuple[Note, Note, Note]:
        """Root, third and fifth in that order."""
        return (self.root, self.third(), self.fifth())

    @property
    def name(self) -> str:
        """Chord symbol such as 'Eb', 'F#m' or 'Bdim'."""
        return f"{self.root}{self.quality.suffix}"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, symbol: str) -> Chord:
        """
        Parse a chord from a symbol like 'C', 'Ebm', 'F#dim', 'Gaug'.

        A lowercase 'b' directly after the root letter is read as a flat,
        so 'Bb' is B-flat major and 'Bbm' is B-flat minor.
        """
        text = symbol.strip()
        match = _CHORD_SYMBOL_RE.fullmatch(text)
        if match is None:
            # Let the note parser name the offending part
            Note.parse(text[:1] or text)
            raise ValueError(ErrorMessages.UNKNOWN_QUALITY.format(quality=text))

        root = Note.parse(match.group("root"))
        quality = ChordQuality.parse(match.group("suffix"))
        return cls(root, quality)
