#!/usr/bin/env python3
"""
Entry point for the CHUK Theory MCP Server.

Serves the note, chord and scale spelling tools over stdio (for MCP
clients that spawn the server) or HTTP.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from typing import get_args

from chuk_mcp_theory.constants import DEFAULT_PORT, DEFAULT_TRANSPORT, SERVER_NAME, Transport

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server for enharmonically correct notes, chords and scales",
    )
    parser.add_argument(
        "--transport",
        choices=get_args(Transport),
        default=DEFAULT_TRANSPORT,
        help=f"Transport mode (default: {DEFAULT_TRANSPORT})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"HTTP port, only for http transport (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and run the server on the chosen transport."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Tools register on import, so defer until logging is configured
    from chuk_mcp_theory.async_server import TOOL_COUNT, mcp

    transport: Transport = args.transport
    if transport == "stdio":
        logger.info("Serving %d theory tools over stdio", TOOL_COUNT)
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Serving %d theory tools over http on port %d", TOOL_COUNT, args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
