"""
Scale tools - MCP tools for spelling scales and modes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import Note, Scale, ScaleDirection, ScaleKind
from chuk_mcp_theory.models import ScaleInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_scale(
        root: str,
        kind: str = "major",
        direction: str = "ascending",
    ) -> str:
        """
        Spell a scale from a root.

        Melodic minor descends as natural minor. Bidirectional directions
        share the turnaround note.

        Args:
            root: Root note spelling (e.g., 'G', 'Bb')
            kind: Scale kind (e.g., 'major', 'dorian', 'harmonic_minor')
            direction: 'ascending', 'descending', 'ascending_then_descending'
                or 'descending_then_ascending'

        Returns:
            JSON string with the note sequence

        Example:
            theory_build_scale(root="G", kind="melodic_minor", direction="descending")
        """
        try:
            scale = Scale(Note.parse(root), ScaleKind.parse(kind), ScaleDirection.parse(direction))
            return json.dumps(
                {"status": "success", "scale": ScaleInfo.from_scale(scale).model_dump()}
            )
        except ValueError as e:
            logger.warning("Rejected scale %r %r %r: %s", root, kind, direction, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_scale"] = theory_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_scales() -> str:
        """
        List available scale kinds and directions.

        Returns:
            JSON string with scale kinds, their ascending patterns, and
            the traversal directions

        Example:
            theory_list_scales()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "kind": kind.value,
                            "name": str(kind),
                            "pattern": [i.short_name for i in kind.pattern()],
                        }
                        for kind in ScaleKind
                    ],
                    "directions": [d.value for d in ScaleDirection],
                    "count": len(ScaleKind),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_scales"] = theory_list_scales

    return tools
