#!/usr/bin/env python3
"""
Command-line entry point for spelling chords and scales.

Usage:
    chuk-theory chord C --quality minor
    chuk-theory scale G --kind melodic_minor --direction descending
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from chuk_mcp_theory.core import (
    Chord,
    ChordQuality,
    Note,
    Scale,
    ScaleDirection,
    ScaleKind,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chuk-theory",
        description="Spell chords and scales with enharmonically correct note names",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    chord = subparsers.add_parser("chord", help="Spell a triad")
    chord.add_argument("root", help="Root note (e.g., 'C', 'Eb', 'f#')")
    chord.add_argument(
        "--quality",
        choices=[q.value for q in ChordQuality],
        default=ChordQuality.MAJOR.value,
        help="Chord quality (default: major)",
    )

    scale = subparsers.add_parser("scale", help="Spell a scale")
    scale.add_argument("root", help="Root note (e.g., 'G', 'Bb')")
    scale.add_argument(
        "--kind",
        choices=[k.value for k in ScaleKind],
        default=ScaleKind.MAJOR.value,
        help="Scale kind (default: major)",
    )
    scale.add_argument(
        "--direction",
        choices=[d.value for d in ScaleDirection],
        default=ScaleDirection.ASCENDING.value,
        help="Traversal direction (default: ascending)",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        root = Note.parse(args.root)
        if args.command == "chord":
            chord = Chord(root, ChordQuality(args.quality))
            logger.debug("Built %r", chord)
            print(f"{chord.name}: {' '.join(str(note) for note in chord.notes())}")
        else:
            scale = Scale(root, ScaleKind(args.kind), ScaleDirection(args.direction))
            logger.debug("Built %r with %d notes", scale, len(scale))
            print(scale.print())
    except ValueError as e:
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
