"""Command-line entry point: print tokens and stem frequencies of a file."""

import argparse
import logging
import sys
from typing import BinaryIO, Optional, Sequence

from word_stems import __version__
from word_stems.config import get_service_config
from word_stems.counter import process_files
from word_stems.errors import WordStemsError
from word_stems.formatting import render_open_error, render_report

logger = logging.getLogger("word-stems.cli")

EXIT_OK = 0
EXIT_INPUT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-stems",
        description="Print the words of a text file and count them by stem",
    )
    parser.add_argument("--version", "-v", action="version", version=f"word-stems {__version__}")
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="UTF-8 text file(s) to process; each file is reported separately",
    )
    return parser


def run(paths: Sequence[str], out: BinaryIO) -> int:
    """Process ``paths`` in order and write their reports to ``out``.

    Returns:
        EXIT_OK if every file was processed, EXIT_INPUT_ERROR otherwise
    """
    status = EXIT_OK
    for path, result in process_files(paths):
        if isinstance(result, WordStemsError):
            out.write(render_open_error(path))
            status = EXIT_INPUT_ERROR
            continue
        out.write(render_report(result))
    out.flush()
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the word-stems CLI."""
    args = build_parser().parse_args(argv)

    # Log lines go to stderr so stdout stays a clean report
    logging.basicConfig(level=get_service_config().log_level, stream=sys.stderr)

    status = run(args.paths, sys.stdout.buffer)
    logger.debug("Processed %d file(s), exit status %d", len(args.paths), status)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
