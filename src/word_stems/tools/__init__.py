"""Word stems MCP tool implementations."""

from . import analyze_text, count_file

__all__ = [
    "analyze_text",
    "count_file",
]
