"""
Interval primitives - named diatonic intervals.

An interval here is more than a semitone count. Each named interval also
carries a diatonic step count (how many letters to advance), and that step
count is what decides the spelling of the target note: an augmented fourth
and a diminished fifth are both 6 semitones, but from C one lands on F#
and the other on Gb.
"""

from __future__ import annotations

from enum import Enum


class Interval(str, Enum):
    """
    A named diatonic interval within one octave.

    Every member maps to exactly one semitone distance (0-11) and exactly
    one step count (0-6). Members may share a semitone distance but never
    a (semitones, steps) pair.
    """

    PERFECT_UNISON = "perfect_unison"
    MINOR_SECOND = "minor_second"
    MAJOR_SECOND = "major_second"
    AUGMENTED_SECOND = "augmented_second"
    MINOR_THIRD = "minor_third"
    MAJOR_THIRD = "major_third"
    DIMINISHED_FOURTH = "diminished_fourth"
    PERFECT_FOURTH = "perfect_fourth"
    AUGMENTED_FOURTH = "augmented_fourth"
    DIMINISHED_FIFTH = "diminished_fifth"
    PERFECT_FIFTH = "perfect_fifth"
    AUGMENTED_FIFTH = "augmented_fifth"
    MINOR_SIXTH = "minor_sixth"
    MAJOR_SIXTH = "major_sixth"
    DIMINISHED_SEVENTH = "diminished_seventh"
    MINOR_SEVENTH = "minor_seventh"
    MAJOR_SEVENTH = "major_seventh"

    @property
    def semitones(self) -> int:
        """Number of semitones spanned (0-11)."""
        return _SEMITONES[self]

    @property
    def steps(self) -> int:
        """Number of letter names to advance (0-6)."""
        return _STEPS[self]

    @property
    def short_name(self) -> str:
        """Conventional shorthand such as 'm3', 'P5' or 'A4'."""
        return _SHORT_NAMES[self]

    def invert(self) -> Interval:
        """
        Get the complementary interval for the opposite direction.

        Descending by an interval is ascending by its inversion. This is a
        lookup rather than 12 - n because diminished and augmented
        intervals swap quality when inverted:

        A4 -> d5
        A2 -> d7
        m3 -> M6
        """
        return _INVERSIONS[self]

    def __str__(self) -> str:
        return self.short_name

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse an interval from 'major_third', 'major third' or 'M3'."""
        text = name.strip()

        for member in cls:
            if member.short_name == text:
                return member

        normalized = text.lower().replace(" ", "_").replace("-", "_")
        if normalized == "unison":
            return cls.PERFECT_UNISON
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown interval: {name}") from None


# Interval tables (module level to avoid Enum member issues).
# Every member must appear in every table.
_SEMITONES: dict[Interval, int] = {
    Interval.PERFECT_UNISON: 0,
    Interval.MINOR_SECOND: 1,
    Interval.MAJOR_SECOND: 2,
    Interval.AUGMENTED_SECOND: 3,
    Interval.MINOR_THIRD: 3,
    Interval.MAJOR_THIRD: 4,
    Interval.DIMINISHED_FOURTH: 4,
    Interval.PERFECT_FOURTH: 5,
    Interval.AUGMENTED_FOURTH: 6,
    Interval.DIMINISHED_FIFTH: 6,
    Interval.PERFECT_FIFTH: 7,
    Interval.AUGMENTED_FIFTH: 8,
    Interval.MINOR_SIXTH: 8,
    Interval.MAJOR_SIXTH: 9,
    Interval.DIMINISHED_SEVENTH: 9,
    Interval.MINOR_SEVENTH: 10,
    Interval.MAJOR_SEVENTH: 11,
}

_STEPS: dict[Interval, int] = {
    Interval.PERFECT_UNISON: 0,
    Interval.MINOR_SECOND: 1,
    Interval.MAJOR_SECOND: 1,
    Interval.AUGMENTED_SECOND: 1,
    Interval.MINOR_THIRD: 2,
    Interval.MAJOR_THIRD: 2,
    Interval.DIMINISHED_FOURTH: 3,
    Interval.PERFECT_FOURTH: 3,
    Interval.AUGMENTED_FOURTH: 3,
    Interval.DIMINISHED_FIFTH: 4,
    Interval.PERFECT_FIFTH: 4,
    Interval.AUGMENTED_FIFTH: 4,
    Interval.MINOR_SIXTH: 5,
    Interval.MAJOR_SIXTH: 5,
    Interval.DIMINISHED_SEVENTH: 6,
    Interval.MINOR_SEVENTH: 6,
    Interval.MAJOR_SEVENTH: 6,
}

_INVERSIONS: dict[Interval, Interval] = {
    Interval.PERFECT_UNISON: Interval.PERFECT_UNISON,
    Interval.MINOR_SECOND: Interval.MAJOR_SEVENTH,
    Interval.MAJOR_SECOND: Interval.MINOR_SEVENTH,
    Interval.AUGMENTED_SECOND: Interval.DIMINISHED_SEVENTH,
    Interval.MINOR_THIRD: Interval.MAJOR_SIXTH,
    Interval.MAJOR_THIRD: Interval.MINOR_SIXTH,
    Interval.DIMINISHED_FOURTH: Interval.AUGMENTED_FIFTH,
    Interval.PERFECT_FOURTH: Interval.PERFECT_FIFTH,
    Interval.AUGMENTED_FOURTH: Interval.DIMINISHED_FIFTH,
    Interval.DIMINISHED_FIFTH: Interval.AUGMENTED_FOURTH,
    Interval.PERFECT_FIFTH: Interval.PERFECT_FOURTH,
    Interval.AUGMENTED_FIFTH: Interval.DIMINISHED_FOURTH,
    Interval.MINOR_SIXTH: Interval.MAJOR_THIRD,
    Interval.MAJOR_SIXTH: Interval.MINOR_THIRD,
    Interval.DIMINISHED_SEVENTH: Interval.AUGMENTED_SECOND,
    Interval.MINOR_SEVENTH: Interval.MAJOR_SECOND,
    Interval.MAJOR_SEVENTH: Interval.MINOR_SECOND,
}

_SHORT_NAMES: dict[Interval, str] = {
    Interval.PERFECT_UNISON: "P1",
    Interval.MINOR_SECOND: "m2",
    Interval.MAJOR_SECOND: "M2",
    Interval.AUGMENTED_SECOND: "A2",
    Interval.MINOR_THIRD: "m3",
    Interval.MAJOR_THIRD: "M3",
    Interval.DIMINISHED_FOURTH: "d4",
    Interval.PERFECT_FOURTH: "P4",
    Interval.AUGMENTED_FOURTH: "A4",
    Interval.DIMINISHED_FIFTH: "d5",
    Interval.PERFECT_FIFTH: "P5",
    Interval.AUGMENTED_FIFTH: "A5",
    Interval.MINOR_SIXTH: "m6",
    Interval.MAJOR_SIXTH: "M6",
    Interval.DIMINISHED_SEVENTH: "d7",
    Interval.MINOR_SEVENTH: "m7",
    Interval.MAJOR_SEVENTH: "M7",
}
