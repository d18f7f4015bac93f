"""
Theory response models - serializable views of spelled notes, chords and scales.

The core types are plain frozen dataclasses and enums. These pydantic
models are the shape the tool layer hands back to MCP clients.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory.core import Chord, Interval, Note, Scale


class NoteInfo(BaseModel):
    """A spelled note with its derived pitch class."""

    name: str = Field(..., description="Canonical spelling (e.g., 'Eb', 'F##')")
    letter: str = Field(..., description="Letter name A-G")
    accidental: str = Field("", description="Accidental suffix ('', 'b', 'bb', '#', '##')")
    offset: int = Field(0, ge=-2, le=2, description="Accidental as a semitone offset")
    pitch_class: int = Field(..., ge=0, le=11, description="Pitch class (0-11)")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: Note) -> NoteInfo:
        """Build from a core Note."""
        return cls(
            name=str(note),
            letter=str(note.name),
            accidental=note.variant.symbol,
            offset=int(note.variant),
            pitch_class=note.pitch_class,
        )


class IntervalInfo(BaseModel):
    """A named interval with its table entries."""

    name: str = Field(..., description="Interval name (e.g., 'augmented_fourth')")
    short_name: str = Field(..., description="Shorthand (e.g., 'A4')")
    semitones: int = Field(..., ge=0, le=11, description="Semitone distance")
    steps: int = Field(..., ge=0, le=6, description="Letter steps")
    inversion: str = Field(..., description="Name of the inverted interval")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        """Build from a core Interval."""
        return cls(
            name=interval.value,
            short_name=interval.short_name,
            semitones=interval.semitones,
            steps=interval.steps,
            inversion=interval.invert().value,
        )


class ChordInfo(BaseModel):
    """A spelled triad."""

    name: str = Field(..., description="Chord symbol (e.g., 'F#m')")
    quality: str = Field(..., description="Chord quality")
    root: NoteInfo
    third: NoteInfo
    fifth: NoteInfo

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordInfo:
        """Build from a core Chord."""
        return cls(
            name=chord.name,
            quality=chord.quality.value,
            root=NoteInfo.from_note(chord.root),
            third=NoteInfo.from_note(chord.third()),
            fifth=NoteInfo.from_note(chord.fifth()),
        )


class ScaleInfo(BaseModel):
    """A spelled scale in traversal order."""

    root: str = Field(..., description="Root spelling")
    kind: str = Field(..., description="Scale kind (e.g., 'harmonic_minor')")
    direction: str = Field(..., description="Traversal direction")
    notes: list[str] = Field(default_factory=list, description="Note spellings in order")
    text: str = Field("", description="Space-joined note spellings")

    model_config = {"frozen": True}

    @classmethod
    def from_scale(cls, scale: Scale) -> ScaleInfo:
        """Build from a core Scale."""
        return cls(
            root=str(scale.root),
            kind=scale.kind.value,
            direction=scale.direction.value,
            notes=[str(note) for note in scale.notes()],
            text=scale.print(),
        )
