"""Tokenize input text and count words by stem.

One pass over the input:

    raw bytes -> whitespace split -> clean -> fold case
        -> display list
        -> stem -> frequency table

Each call builds its own report; nothing is shared between files.
"""

import logging
import os
from typing import Iterable, Iterator, Optional, Union

from word_stems.errors import InputFileError, InputTooLargeError, WordStemsError
from word_stems.models import WordReport
from word_stems.text.casefold import fold_case
from word_stems.text.cleaner import clean_token
from word_stems.text.stemmer import Stemmer, stem as default_stem

logger = logging.getLogger("word-stems.counter")

# Tokens that carry no content after cleaning
DASH_TOKEN = b"-"


def split_tokens(data: bytes) -> list[bytes]:
    """Split on runs of ASCII whitespace (space, \\t, \\n, \\r, \\v, \\f)."""
    return data.split()


def normalize_token(raw: bytes) -> bytes:
    """Clean punctuation from a raw token, then lowercase it."""
    return fold_case(clean_token(raw))


def is_content_token(token: bytes) -> bool:
    return bool(token) and token != DASH_TOKEN


def count_stems(
    data: bytes,
    source: Optional[str] = None,
    stemmer: Optional[Stemmer] = None,
) -> WordReport:
    """Build the display list and stem frequencies for ``data``.

    Args:
        data: Input text as UTF-8 bytes (malformed sequences are tolerated)
        source: Label stored on the report, usually the input path
        stemmer: Custom stemmer; the default rule table is used when None

    Returns:
        WordReport with tokens in input order and stems in first-seen order

    Example:
        >>> report = count_stems("Добрым людям добро!".encode("utf-8"))
        >>> [(s.decode(), n) for s, n in report.frequencies.items()]
        [('добр', 2), ('люд', 1)]
    """
    stem_token = stemmer.stem if stemmer is not None else default_stem
    report = WordReport(source=source)

    for raw in split_tokens(data):
        token = normalize_token(raw)
        if not is_content_token(token):
            continue
        report.tokens.append(token)
        report.frequencies.add(stem_token(token))

    logger.debug(
        "Counted %d tokens, %d stems from %s",
        report.token_count,
        report.stem_count,
        source or "<text>",
    )
    return report


def read_input(path: Union[str, os.PathLike], max_bytes: Optional[int] = None) -> bytes:
    """Read a whole input file as bytes.

    Raises:
        InputFileError: If the file cannot be opened or read
        InputTooLargeError: If ``max_bytes`` is set and the file is larger
    """
    label = os.fspath(path)
    try:
        with open(path, "rb") as f:
            if max_bytes is None:
                return f.read()
            # st_size is 0 for pipes and devices, so bound the read itself
            data = f.read(max_bytes + 1)
            if len(data) > max_bytes:
                size = max(os.fstat(f.fileno()).st_size, len(data))
                raise InputTooLargeError(label, size, max_bytes)
            return data
    except OSError as exc:
        logger.warning("Cannot open input file %s: %s", label, exc)
        raise InputFileError(label, exc.strerror or str(exc)) from exc


def process_file(
    path: Union[str, os.PathLike],
    stemmer: Optional[Stemmer] = None,
    max_bytes: Optional[int] = None,
) -> WordReport:
    """Read ``path`` and count its words by stem.

    Raises:
        InputFileError: If the file cannot be opened; nothing is processed
    """
    data = read_input(path, max_bytes=max_bytes)
    logger.debug("Read %d bytes from %s", len(data), os.fspath(path))
    return count_stems(data, source=os.fspath(path), stemmer=stemmer)


def process_files(
    paths: Iterable[Union[str, os.PathLike]],
    stemmer: Optional[Stemmer] = None,
) -> Iterator[tuple[str, Union[WordReport, WordStemsError]]]:
    """Process several files independently.

    Yields one ``(path, result)`` pair per path, in order. ``result`` is the
    report, or the error that stopped that file. A failing file does not
    affect the others.
    """
    for path in paths:
        label = os.fspath(path)
        try:
            yield label, process_file(path, stemmer=stemmer)
        except WordStemsError as exc:
            yield label, exc
