"""Exceptions raised by the word stem counter."""


class WordStemsError(Exception):
    """Base class for word-stems errors."""


class InputFileError(WordStemsError):
    """Input file could not be opened or read.

    Attributes:
        path: Path as given by the caller
        reason: Short description of the underlying OS error
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot open input file {path}: {reason}")
        self.path = path
        self.reason = reason


class InputTooLargeError(WordStemsError):
    """Input file exceeds the configured size limit."""

    def __init__(self, path: str, size: int, limit: int):
        super().__init__(f"Input file {path} is {size} bytes (limit {limit})")
        self.path = path
        self.size = size
        self.limit = limit
