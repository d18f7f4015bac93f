"""
Pydantic models for the theory system.

This module provides:
- NoteInfo: Spelled note with pitch class
- IntervalInfo: Interval table entry
- ChordInfo: Spelled triad
- ScaleInfo: Spelled scale
"""

from chuk_mcp_theory.models.theory import ChordInfo, IntervalInfo, NoteInfo, ScaleInfo

__all__ = [
    "ChordInfo",
    "IntervalInfo",
    "NoteInfo",
    "ScaleInfo",
]
