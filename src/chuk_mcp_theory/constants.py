"""
Constants for the theory system.

No magic strings - spellings, server defaults and message templates live here.
"""

from typing import Literal

# Server defaults
SERVER_NAME = "chuk-mcp-theory"
DEFAULT_PORT = 8000

Transport = Literal["stdio", "http"]
DEFAULT_TRANSPORT: Transport = "stdio"

# Note spelling: one letter, then nothing or one/two identical accidentals
NOTE_LETTERS = "ABCDEFG"
FLAT_SYMBOL = "b"
SHARP_SYMBOL = "#"
NOTE_PATTERN = r"(?P<letter>[A-Ga-g])(?P<accidental>bb|b|##|#)?"
MAX_NOTE_LENGTH = 3


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_NOTE = "Note name is empty."
    NOTE_TOO_LONG = "'{text}' is not a note: expected 1-3 characters, got {length}."
    INVALID_LETTER = "'{letter}' in '{text}' is not a note letter (expected A-G)."
    INVALID_LETTER_NAME = "'{letter}' is not a note letter (expected A-G)."
    INVALID_ACCIDENTAL = "'{accidental}' in '{text}' is not an accidental (expected b, bb, # or ##)."
    INVALID_ACCIDENTAL_SYMBOL = "'{accidental}' is not an accidental (expected b, bb, # or ##)."
    UNSPELLABLE = "{note} {direction} by {interval} needs more than two accidentals."
    UNRECONCILED = "No accidental spells pitch class {pitch_class} on {name}."
    UNKNOWN_QUALITY = "Unknown chord quality: {quality}"
    UNKNOWN_SCALE = "Unknown scale kind: {kind}"
    UNKNOWN_DIRECTION = "Unknown scale direction: {direction}"
    INVALID_TRANSPOSE_DIRECTION = "Invalid direction: {direction}. Expected 'ascending' or 'descending'."
