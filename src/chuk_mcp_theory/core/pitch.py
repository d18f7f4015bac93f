"""
Pitch primitives - NoteName, PitchVariant and Note.

A Note is a spelling, not just a pitch: a letter name plus an accidental.
C# and Db share a pitch class but are different Notes. Transposition
picks the target letter from the interval's step count first, then
reconciles the accidental against the target pitch class.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum

from chuk_mcp_theory.constants import (
    FLAT_SYMBOL,
    MAX_NOTE_LENGTH,
    NOTE_LETTERS,
    NOTE_PATTERN,
    SHARP_SYMBOL,
    ErrorMessages,
)

from .interval import Interval

_NOTE_RE = re.compile(NOTE_PATTERN)


class NoteParseError(ValueError):
    """Raised when text is not a legal note spelling."""


class UnspellableNoteError(ValueError):
    """Raised when a transposition would need more than two accidentals."""


class SpellingInvariantError(AssertionError):
    """
    Raised when no accidental reconciles a letter with a pitch class.

    This means the interval tables are inconsistent. It is a programming
    error, never a caller error, and the core never catches it.
    """


class NoteName(str, Enum):
    """
    The 7 letter names, in diatonic order starting from A.

    Each letter has a fixed natural-pitch baseline (A=1 ... G=11).
    Consecutive letters are a whole step apart except B-C and E-F.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @property
    def index(self) -> int:
        """Position in letter order (A=0 ... G=6)."""
        return _LETTERS.index(self)

    @property
    def baseline(self) -> int:
        """Pitch class of the natural letter (0-11)."""
        return _BASELINES[self]

    def step(self, steps: int) -> NoteName:
        """Advance by a number of letters, wrapping G -> A."""
        return _LETTERS[(self.index + steps) % len(_LETTERS)]

    def distance_to(self, other: NoteName) -> int:
        """Semitones from this natural letter up to another (0-11)."""
        return (other.baseline - self.baseline) % 12

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, letter: str) -> NoteName:
        """Parse a single letter character, case-insensitive."""
        if len(letter) != 1 or letter.upper() not in NOTE_LETTERS:
            raise NoteParseError(ErrorMessages.INVALID_LETTER_NAME.format(letter=letter))
        return cls(letter.upper())


class PitchVariant(IntEnum):
    """An accidental, as a semitone offset from the natural letter."""

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def symbol(self) -> str:
        """Accidental suffix: 'bb', 'b', '', '#' or '##'."""
        if self.value < 0:
            return FLAT_SYMBOL * -self.value
        return SHARP_SYMBOL * self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> PitchVariant:
        """Parse an accidental suffix ('' is natural)."""
        for member in cls:
            if member.symbol == symbol:
                return member
        raise NoteParseError(
            ErrorMessages.INVALID_ACCIDENTAL_SYMBOL.format(accidental=symbol)
        )

    @classmethod
    def from_offset(cls, offset: int) -> PitchVariant | None:
        """Get the variant for a semitone offset, or None outside -2..2."""
        try:
            return cls(offset)
        except ValueError:
            return None


# Letter tables (module level to avoid Enum member issues)
_LETTERS: tuple[NoteName, ...] = tuple(NoteName)

_BASELINES: dict[NoteName, int] = {
    NoteName.A: 1,
    NoteName.B: 3,
    NoteName.C: 4,
    NoteName.D: 6,
    NoteName.E: 8,
    NoteName.F: 9,
    NoteName.G: 11,
}


def reconcile(name: NoteName, pitch_class: int) -> PitchVariant:
    """
    Find the accidental that spells a pitch class on a given letter.

    Args:
        name: The target letter
        pitch_class: The target pitch class (0-11)

    Returns:
        The unique variant v with (baseline + v) mod 12 == pitch_class

    Raises:
        SpellingInvariantError: if the pitch class is more than two
            semitones from the letter. Transposition checks this first,
            so reaching it means the interval tables are wrong.
    """
    for variant in PitchVariant:
        if (name.baseline + variant) % 12 == pitch_class % 12:
            return variant
    raise SpellingInvariantError(
        ErrorMessages.UNRECONCILED.format(pitch_class=pitch_class, name=name)
    )


@dataclass(frozen=True)
class Note:
    """
    A spelled note: letter name plus accidental.

    Equality and hashing use the spelling only, so Note.parse("C#") and
    Note.parse("Db") are different values even though they share a
    pitch class. Use is_enharmonic() to compare by sound.

    Immutable and hashable.
    """

    name: NoteName
    variant: PitchVariant = PitchVariant.NATURAL

    @property
    def pitch_class(self) -> int:
        """Position within the octave (0-11), ignoring spelling."""
        return (self.name.baseline + self.variant) % 12

    @property
    def natural(self) -> Note:
        """The same letter with no accidental."""
        return Note(self.name)

    def is_enharmonic(self, other: Note) -> bool:
        """True if both notes sound the same pitch class."""
        return self.pitch_class == other.pitch_class

    def transpose(self, interval: Interval, ascending: bool = True) -> Note:
        """
        Transpose by a named interval, keeping the spelling correct.

        Descending is ascending by the inverted interval, so the new
        letter is always chosen by forward step arithmetic.

        Args:
            interval: The named interval
            ascending: Direction of travel

        Returns:
            The transposed note

        Raises:
            UnspellableNoteError: if the result needs a triple accidental
                (for example B# up an augmented second)
        """
        step_interval = interval if ascending else interval.invert()

        name = self.name.step(step_interval.steps)
        offset = self.variant + step_interval.semitones - self.name.distance_to(name)
        if PitchVariant.from_offset(offset) is None:
            raise UnspellableNoteError(
                ErrorMessages.UNSPELLABLE.format(
                    note=self,
                    direction="up" if ascending else "down",
                    interval=interval.short_name,
                )
            )

        pitch_class = (self.pitch_class + step_interval.semitones) % 12
        return Note(name, reconcile(name, pitch_class))

    def ascend(self, interval: Interval) -> Note:
        """Transpose upward by an interval."""
        return self.transpose(interval, ascending=True)

    def descend(self, interval: Interval) -> Note:
        """Transpose downward by an interval."""
        return self.transpose(interval, ascending=False)

    def __str__(self) -> str:
        return f"{self.name}{self.variant.symbol}"

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from a string like 'C', 'eb', 'F##'.

        The letter is case-insensitive; accidentals are 'b', 'bb', '#'
        or '##'. Surrounding whitespace is ignored.

        Raises:
            NoteParseError: naming the offending part of the text
        """
        text = text.strip()
        if not text:
            raise NoteParseError(ErrorMessages.EMPTY_NOTE)
        if len(text) > MAX_NOTE_LENGTH:
            raise NoteParseError(ErrorMessages.NOTE_TOO_LONG.format(text=text, length=len(text)))

        match = _NOTE_RE.fullmatch(text)
        if match is None:
            letter, accidental = text[0], text[1:]
            if letter.upper() not in NOTE_LETTERS:
                raise NoteParseError(ErrorMessages.INVALID_LETTER.format(letter=letter, text=text))
            raise NoteParseError(
                ErrorMessages.INVALID_ACCIDENTAL.format(accidental=accidental, text=text)
            )

        name = NoteName(match.group("letter").upper())
        variant = PitchVariant.from_symbol(match.group("accidental") or "")
        return cls(name, variant)
