"""Report rendering and error formatting for CLI and tool outputs."""

from __future__ import annotations

import os
from typing import Any

from word_stems.contracts import build_error
from word_stems.errors import InputFileError, InputTooLargeError, WordStemsError
from word_stems.models import WordReport

# =============================================================================
# Plain-text report
# =============================================================================

DISPLAY_SEPARATOR = b" - "
FREQUENCY_SEPARATOR = b" : "
FREQUENCY_HEADER = "=== Повторы (по основе) ===".encode("utf-8")
OPEN_ERROR_MESSAGE = "Невозможно открыть файл: {path}"


def render_report(report: WordReport) -> bytes:
    """Render a report as raw bytes.

    Tokens are written back exactly as produced, so malformed input bytes
    pass through instead of being replaced.

    Layout:
        1 - добрым
        2 - людям
        3 - добро

        === Повторы (по основе) ===
        добр : 2
        люд : 1
    """
    lines: list[bytes] = []
    for index, token in enumerate(report.tokens, start=1):
        lines.append(str(index).encode("ascii") + DISPLAY_SEPARATOR + token + b"\n")

    lines.append(b"\n" + FREQUENCY_HEADER + b"\n")
    for stem, count in report.frequencies.items():
        lines.append(stem + FREQUENCY_SEPARATOR + str(count).encode("ascii") + b"\n")

    return b"".join(lines)


def format_open_error(path: str) -> str:
    return OPEN_ERROR_MESSAGE.format(path=path)


def render_open_error(path: str) -> bytes:
    """Render the open failure line for the CLI.

    The path is written back as the raw bytes it came from, so names that
    are not valid UTF-8 still print.
    """
    prefix = OPEN_ERROR_MESSAGE.format(path="").encode("utf-8")
    return prefix + os.fsencode(path) + b"\n"


# =============================================================================
# Tool payloads
# =============================================================================


def _decode(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def report_to_data(report: WordReport, limit: int) -> dict[str, Any]:
    """Convert a report to a JSON-safe tool payload.

    Frequencies keep first-seen order and are cut at ``limit`` entries.
    """
    frequencies = [
        {"stem": _decode(stem), "count": count}
        for stem, count in report.frequencies.items()
    ]
    return {
        "source": report.source,
        "tokens": [_decode(token) for token in report.tokens],
        "frequencies": frequencies[:limit],
        "summary": {
            "token_count": report.token_count,
            "stem_count": report.stem_count,
            "truncated": len(frequencies) > limit,
        },
    }


def build_input_error(exc: WordStemsError) -> dict[str, Any]:
    """Build a unified error envelope for input failures."""
    if isinstance(exc, InputTooLargeError):
        return build_error(
            "input_too_large",
            "Input file is too large",
            {"path": exc.path, "size": exc.size, "limit": exc.limit},
        )
    if isinstance(exc, InputFileError):
        return build_error(
            "input_unreadable",
            format_open_error(exc.path),
            {"path": exc.path, "reason": exc.reason},
        )
    return build_error("operation_error", str(exc) or "word-stems operation failed")
