"""
Core theory primitives - the spelling engine.

These are the invariants everything else composes on:
- NoteName: The 7 letter names and their natural pitches
- PitchVariant: Accidentals as semitone offsets
- Note: A spelled note (letter + accidental)
- Interval: Named diatonic intervals (semitones + letter steps)
- ChordQuality: Which third and fifth a triad uses
- Chord: A spelled triad
- ScaleKind: Interval pattern defining a scale or mode
- ScaleDirection: How a scale is traversed
- Scale: A spelled scale
"""

from chuk_mcp_theory.core.chord import Chord, ChordQuality
from chuk_mcp_theory.core.interval import Interval
from chuk_mcp_theory.core.pitch import (
    Note,
    NoteName,
    NoteParseError,
    PitchVariant,
    SpellingInvariantError,
    UnspellableNoteError,
    reconcile,
)
from chuk_mcp_theory.core.scale import Scale, ScaleDirection, ScaleKind

__all__ = [
    # Pitch
    "NoteName",
    "PitchVariant",
    "Note",
    "reconcile",
    # Errors
    "NoteParseError",
    "UnspellableNoteError",
    "SpellingInvariantError",
    # Interval
    "Interval",
    # Chord
    "ChordQuality",
    "Chord",
    # Scale
    "ScaleKind",
    "ScaleDirection",
    "Scale",
]
