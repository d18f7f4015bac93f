"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_theory.core import Note, NoteName, PitchVariant


@pytest.fixture
def all_notes() -> list[Note]:
    """Every spellable note: 7 letters x 5 accidentals."""
    return [Note(name, variant) for name in NoteName for variant in PitchVariant]


@pytest.fixture
def natural_notes() -> list[Note]:
    """The 7 natural notes."""
    return [Note(name) for name in NoteName]


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A fresh mock server."""
    return MockMCPServer("test")
