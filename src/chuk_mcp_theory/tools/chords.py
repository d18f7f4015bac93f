"""
Chord tools - MCP tools for spelling triads.

Tools for building a triad from a root and quality, and for reading a
chord symbol.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import Chord, ChordQuality, Note
from chuk_mcp_theory.models import ChordInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(root: str, quality: str = "major") -> str:
        """
        Spell a triad from a root and quality.

        Args:
            root: Root note spelling (e.g., 'C', 'Eb')
            quality: 'major', 'minor', 'diminished' or 'augmented'

        Returns:
            JSON string with the chord symbol and its root, third and fifth

        Example:
            theory_build_chord(root="C", quality="augmented")
        """
        try:
            chord = Chord(Note.parse(root), ChordQuality.parse(quality))
            return json.dumps(
                {"status": "success", "chord": ChordInfo.from_chord(chord).model_dump()}
            )
        except ValueError as e:
            logger.warning("Rejected chord %r %r: %s", root, quality, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_chord"] = theory_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_parse_chord(symbol: str) -> str:
        """
        Spell a triad from a chord symbol.

        Suffixes: none or 'maj' (major), 'm' or 'min' (minor),
        'dim' or '°' (diminished), 'aug' or '+' (augmented).

        Args:
            symbol: Chord symbol (e.g., 'F#m', 'Bbdim', 'Caug')

        Returns:
            JSON string with the chord symbol and its root, third and fifth

        Example:
            theory_parse_chord(symbol="Ebm")
        """
        try:
            chord = Chord.parse(symbol)
            return json.dumps(
                {"status": "success", "chord": ChordInfo.from_chord(chord).model_dump()}
            )
        except ValueError as e:
            logger.warning("Rejected chord symbol %r: %s", symbol, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_parse_chord"] = theory_parse_chord

    return tools
