"""Stem Count File Tool - Tokenize a text file and count words by stem."""

import logging
from typing import Any

from fastmcp import FastMCP

from word_stems.config import get_service_config
from word_stems.contracts import build_ok, build_stems_data
from word_stems.counter import process_file
from word_stems.errors import WordStemsError
from word_stems.formatting import build_input_error, report_to_data
from word_stems.utils import FrequencyLimit, InputPath

logger = logging.getLogger("word-stems.tools")


def register(mcp: FastMCP) -> None:
    """Register stems_count_file tool with the MCP server."""

    @mcp.tool()
    def stems_count_file(
        path: InputPath,
        limit: FrequencyLimit = 100,
    ) -> dict[str, Any]:
        """Tokenize a UTF-8 text file and count words grouped by stem.

        Returns the cleaned, lowercased tokens in input order and the stem
        frequencies in first-seen order. Word forms such as "добрым" and
        "добро" are counted together under "добр".

        Related tools:
        - stems_analyze_text: Same analysis for inline text
        """
        cfg = get_service_config()
        try:
            report = process_file(path, max_bytes=cfg.max_file_bytes)
        except WordStemsError as exc:
            logger.info("stems_count_file failed for %s: %s", path, exc)
            return build_input_error(exc)
        return build_ok(build_stems_data(report_to_data(report, limit)))
