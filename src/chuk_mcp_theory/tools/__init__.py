"""
MCP tool implementations.

Tools are organized by domain:
- notes - Note parsing, transposition, interval table
- chords - Triad spelling
- scales - Scale and mode spelling
"""

from chuk_mcp_theory.tools.chords import register_chord_tools
from chuk_mcp_theory.tools.notes import register_note_tools
from chuk_mcp_theory.tools.scales import register_scale_tools

__all__ = [
    "register_chord_tools",
    "register_note_tools",
    "register_scale_tools",
]
