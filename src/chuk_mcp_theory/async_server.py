#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server provides MCP tools for enharmonically correct music theory:
every answer is spelled the way a musician would write it (C up a minor
third is Eb, never D#).

The server provides tools for:
- Parsing note spellings and transposing them by named intervals
- Spelling triads from a root and quality, or from a chord symbol
- Spelling scales and modes in any traversal direction
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.constants import SERVER_NAME
from chuk_mcp_theory.tools import (
    register_chord_tools,
    register_note_tools,
    register_scale_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)

# Register all tools
note_tools = register_note_tools(mcp)
chord_tools = register_chord_tools(mcp)
scale_tools = register_scale_tools(mcp)

# Export tool functions for direct access
theory_parse_note = note_tools["theory_parse_note"]
theory_transpose = note_tools["theory_transpose"]
theory_list_intervals = note_tools["theory_list_intervals"]

theory_build_chord = chord_tools["theory_build_chord"]
theory_parse_chord = chord_tools["theory_parse_chord"]

theory_build_scale = scale_tools["theory_build_scale"]
theory_list_scales = scale_tools["theory_list_scales"]

TOOL_COUNT = len(note_tools) + len(chord_tools) + len(scale_tools)

logger.info("CHUK Theory MCP Server initialized")
logger.info("  Tools: %d", TOOL_COUNT)
