"""
Scale primitives - ScaleKind, ScaleDirection, Scale.

A scale kind is an interval pattern between successive degrees (not from
the root). A Scale walks that pattern from a spelled root, transposing
each note from the one before it, so every step is spelled relative to its
immediate predecessor. That is what makes the augmented second of the
harmonic minor land on B natural after Ab rather than on Cb.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from chuk_mcp_theory.constants import ErrorMessages

from .interval import Interval
from .pitch import Note

_M2 = Interval.MAJOR_SECOND  # whole step
_m2 = Interval.MINOR_SECOND  # half step
_A2 = Interval.AUGMENTED_SECOND
_m3 = Interval.MINOR_THIRD


class ScaleKind(str, Enum):
    """
    Named scale and mode identities.

    Major/Ionian and Minor/Aeolian are distinct members that share a
    pattern, so a caller's chosen name is preserved.
    """

    MAJOR = "major"
    IONIAN = "ionian"
    MINOR = "minor"
    AEOLIAN = "aeolian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    LOCRIAN = "locrian"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"
    MAJOR_PENTATONIC = "major_pentatonic"
    MINOR_PENTATONIC = "minor_pentatonic"

    def pattern(self, descending: bool = False) -> tuple[Interval, ...]:
        """
        Get the intervals between successive degrees.

        Ascending patterns run from the root upward. Descending patterns
        run from the root downward: the ascending pattern reversed, except
        that melodic minor descends as natural minor.
        """
        if not descending:
            return _PATTERNS[self]
        return tuple(reversed(_PATTERNS[_DESCENDING_FORMS.get(self, self)]))

    def __str__(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, name: str) -> ScaleKind:
        """Parse a scale kind from 'melodic_minor', 'Melodic Minor', ..."""
        normalized = name.strip().lower().replace(" ", "_").replace("-", "_")
        if normalized == "natural_minor":
            return cls.MINOR
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_SCALE.format(kind=name)) from None


class ScaleDirection(str, Enum):
    """Traversal direction for a scale."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    ASCENDING_THEN_DESCENDING = "ascending_then_descending"
    DESCENDING_THEN_ASCENDING = "descending_then_ascending"

    def __str__(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, name: str) -> ScaleDirection:
        """Parse a direction from 'ascending', 'up', 'up_down', ..."""
        normalized = name.strip().lower().replace(" ", "_").replace("-", "_")
        if normalized in _DIRECTION_ALIASES:
            return _DIRECTION_ALIASES[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_DIRECTION.format(direction=name)) from None


_PATTERNS: dict[ScaleKind, tuple[Interval, ...]] = {
    ScaleKind.MAJOR: (_M2, _M2, _m2, _M2, _M2, _M2, _m2),
    ScaleKind.IONIAN: (_M2, _M2, _m2, _M2, _M2, _M2, _m2),
    ScaleKind.MINOR: (_M2, _m2, _M2, _M2, _m2, _M2, _M2),
    ScaleKind.AEOLIAN: (_M2, _m2, _M2, _M2, _m2, _M2, _M2),
    ScaleKind.DORIAN: (_M2, _m2, _M2, _M2, _M2, _m2, _M2),
    ScaleKind.PHRYGIAN: (_m2, _M2, _M2, _M2, _m2, _M2, _M2),
    ScaleKind.LYDIAN: (_M2, _M2, _M2, _m2, _M2, _M2, _m2),
    ScaleKind.MIXOLYDIAN: (_M2, _M2, _m2, _M2, _M2, _m2, _M2),
    ScaleKind.LOCRIAN: (_m2, _M2, _M2, _m2, _M2, _M2, _M2),
    ScaleKind.HARMONIC_MINOR: (_M2, _m2, _M2, _M2, _m2, _A2, _m2),
    ScaleKind.MELODIC_MINOR: (_M2, _m2, _M2, _M2, _M2, _M2, _m2),
    ScaleKind.MAJOR_PENTATONIC: (_M2, _M2, _m3, _M2, _m3),
    ScaleKind.MINOR_PENTATONIC: (_m3, _M2, _M2, _m3, _M2),
}

# Kinds whose descending form is a different scale, not a reversal
_DESCENDING_FORMS: dict[ScaleKind, ScaleKind] = {
    ScaleKind.MELODIC_MINOR: ScaleKind.AEOLIAN,
}

_DIRECTION_ALIASES: dict[str, ScaleDirection] = {
    "up": ScaleDirection.ASCENDING,
    "down": ScaleDirection.DESCENDING,
    "up_down": ScaleDirection.ASCENDING_THEN_DESCENDING,
    "down_up": ScaleDirection.DESCENDING_THEN_ASCENDING,
}


def _walk(root: Note, kind: ScaleKind, ascending: bool) -> list[Note]:
    """Chain transpositions from the root, each from the previous note."""
    notes = [root]
    for interval in kind.pattern(descending=not ascending):
        notes.append(notes[-1].transpose(interval, ascending=ascending))
    return notes


@dataclass(frozen=True)
class Scale:
    """
    A spelled scale: root, kind and traversal direction.

    The note sequence is built once at construction. One-directional
    scales start and end on the root; bidirectional scales share the
    turnaround note between the two halves.

    Examples:
        Scale(Note.parse("C"), ScaleKind.MINOR).print() -> "C D Eb F G Ab Bb C"
        Scale(Note.parse("G"), ScaleKind.MELODIC_MINOR, ScaleDirection.DESCENDING).print()
            -> "G F Eb D C Bb A G"
    """

    root: Note
    kind: ScaleKind = ScaleKind.MAJOR
    direction: ScaleDirection = ScaleDirection.ASCENDING
    _notes: tuple[Note, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_notes", tuple(self._build()))

    def _build(self) -> list[Note]:
        if self.direction == ScaleDirection.ASCENDING:
            return _walk(self.root, self.kind, ascending=True)
        if self.direction == ScaleDirection.DESCENDING:
            return _walk(self.root, self.kind, ascending=False)
        if self.direction == ScaleDirection.ASCENDING_THEN_DESCENDING:
            up = _walk(self.root, self.kind, ascending=True)
            down = _walk(self.root, self.kind, ascending=False)
            return up + down[1:]
        if self.direction == ScaleDirection.DESCENDING_THEN_ASCENDING:
            down = _walk(self.root, self.kind, ascending=False)
            up = _walk(self.root, self.kind, ascending=True)
            return down + up[1:]
        raise ValueError(ErrorMessages.UNKNOWN_DIRECTION.format(direction=self.direction))

    def notes(self) -> tuple[Note, ...]:
        """The ordered note sequence."""
        return self._notes

    def print(self) -> str:
        """The note sequence as a space-joined string."""
        return " ".join(str(note) for note in self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __str__(self) -> str:
        return f"{self.root} {self.kind}"
