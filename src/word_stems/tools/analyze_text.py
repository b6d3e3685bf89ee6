"""Stem Analyze Text Tool - Count words by stem in inline text."""

from typing import Any

from fastmcp import FastMCP

from word_stems.contracts import build_ok, build_stems_data
from word_stems.counter import count_stems
from word_stems.formatting import report_to_data
from word_stems.utils import FrequencyLimit, InputText


def register(mcp: FastMCP) -> None:
    """Register stems_analyze_text tool with the MCP server."""

    @mcp.tool()
    def stems_analyze_text(
        text: InputText,
        limit: FrequencyLimit = 100,
    ) -> dict[str, Any]:
        """Tokenize text and count words grouped by stem.

        Example: "Добрым людям добро!" gives tokens
        ["добрым", "людям", "добро"] and frequencies добр: 2, люд: 1.

        Related tools:
        - stems_count_file: Same analysis for a file on disk
        """
        # Lone surrogates become malformed bytes instead of raising
        report = count_stems(text.encode("utf-8", errors="surrogatepass"))
        return build_ok(build_stems_data(report_to_data(report, limit)))
