"""
Note tools - MCP tools for parsing and transposing spelled notes.

Tools for reading a note spelling, transposing it by a named interval,
and listing the interval table.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core import Interval, Note
from chuk_mcp_theory.models import IntervalInfo, NoteInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_parse_note(note: str) -> str:
        """
        Parse a note spelling.

        Accepts a letter A-G (any case) followed by an optional
        accidental: b, bb, # or ##.

        Args:
            note: Note spelling (e.g., 'C', 'eb', 'F##')

        Returns:
            JSON string with the canonical spelling and pitch class

        Example:
            theory_parse_note(note="bb")
        """
        try:
            parsed = Note.parse(note)
            return json.dumps(
                {"status": "success", "note": NoteInfo.from_note(parsed).model_dump()}
            )
        except ValueError as e:
            logger.warning("Rejected note %r: %s", note, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to parse note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_parse_note"] = theory_parse_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(
        note: str,
        interval: str,
        direction: str = "ascending",
    ) -> str:
        """
        Transpose a note by a named interval.

        The result keeps the spelling a musician would write: C up a
        minor third is Eb, C up an augmented second is D#.

        Args:
            note: Starting note spelling (e.g., 'C', 'F#')
            interval: Interval name or shorthand (e.g., 'minor_third', 'm3', 'A4')
            direction: 'ascending' or 'descending'

        Returns:
            JSON string with the starting and resulting notes

        Example:
            theory_transpose(note="C", interval="m3", direction="ascending")
        """
        try:
            start = Note.parse(note)
            named = Interval.parse(interval)
            direction_key = direction.strip().lower()
            if direction_key not in ("ascending", "descending"):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_TRANSPOSE_DIRECTION.format(
                            direction=direction
                        ),
                    }
                )

            result = start.transpose(named, ascending=direction_key == "ascending")
            return json.dumps(
                {
                    "status": "success",
                    "from": NoteInfo.from_note(start).model_dump(),
                    "interval": IntervalInfo.from_interval(named).model_dump(),
                    "direction": direction_key,
                    "to": NoteInfo.from_note(result).model_dump(),
                }
            )
        except ValueError as e:
            logger.warning("Rejected transposition of %r by %r: %s", note, interval, e)
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose"] = theory_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_intervals() -> str:
        """
        List the named intervals.

        Each entry has its semitone distance, letter step count and
        inversion.

        Returns:
            JSON string with the interval table

        Example:
            theory_list_intervals()
        """
        try:
            intervals = [IntervalInfo.from_interval(i).model_dump() for i in Interval]
            return json.dumps(
                {"status": "success", "intervals": intervals, "count": len(intervals)}
            )
        except Exception as e:
            logger.exception("Failed to list intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_intervals"] = theory_list_intervals

    return tools
