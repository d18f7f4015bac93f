#!/usr/bin/env python3
"""
Example: Spelling Notes, Chords and Scales.

This demonstrates how every answer keeps its letter names: transposing
picks the letter first, then the accidental, so C up a minor third is Eb
and C up an augmented second is D#.

Usage:
    python examples/spell_scales.py
"""

from chuk_mcp_theory.core import (
    Chord,
    ChordQuality,
    Interval,
    Note,
    Scale,
    ScaleDirection,
    ScaleKind,
    UnspellableNoteError,
)


def main() -> None:
    """Demonstrate enharmonic spelling."""
    print("CHUK Theory Spelling Demo")
    print("=" * 40)
    print()

    # Same pitch, different spellings
    c_sharp, d_flat = Note.parse("C#"), Note.parse("Db")
    print("Enharmonics:")
    print(f"  {c_sharp} == {d_flat}: {c_sharp == d_flat}")
    print(f"  {c_sharp} sounds like {d_flat}: {c_sharp.is_enharmonic(d_flat)}")
    print()

    # Interval quality decides the letter
    c = Note.parse("C")
    print("Transposition from C:")
    for interval in (Interval.MINOR_THIRD, Interval.AUGMENTED_SECOND, Interval.AUGMENTED_FOURTH):
        print(f"  up {interval.short_name:<3} -> {c.ascend(interval)}")
        print(f"  down {interval.short_name:<3} -> {c.descend(interval)}")
    print()

    # Triads
    print("Triads on Bb:")
    bb = Note.parse("Bb")
    for quality in ChordQuality:
        chord = Chord(bb, quality)
        print(f"  {chord.name:<6} {' '.join(str(n) for n in chord.notes())}")
    print()

    # Scales
    print("Scales:")
    g = Note.parse("G")
    examples = [
        Scale(Note.parse("A"), ScaleKind.HARMONIC_MINOR),
        Scale(g, ScaleKind.MELODIC_MINOR, ScaleDirection.ASCENDING_THEN_DESCENDING),
        Scale(Note.parse("F#"), ScaleKind.LYDIAN),
        Scale(Note.parse("Eb"), ScaleKind.MAJOR_PENTATONIC, ScaleDirection.DESCENDING),
    ]
    for scale in examples:
        print(f"  {scale} ({scale.direction}):")
        print(f"    {scale.print()}")
    print()

    # Some roots cannot carry some scales
    print("Limits:")
    try:
        Scale(Note.parse("D##"), ScaleKind.MAJOR)
    except UnspellableNoteError as e:
        print(f"  D## major: {e}")


if __name__ == "__main__":
    main()
