"""Punctuation trimming for raw whitespace-delimited tokens."""

import string

PUNCTUATION_BYTES = frozenset(string.punctuation.encode("ascii"))


def is_punctuation_byte(byte: int) -> bool:
    """Check if a single byte is ASCII punctuation.

    Bytes of multi-byte characters (``>= 0x80``) are never punctuation, so
    non-ASCII marks such as ``«`` or ``—`` survive cleaning.
    """
    return byte in PUNCTUATION_BYTES


def clean_token(data: bytes) -> bytes:
    """Strip ASCII punctuation from both ends of a token.

    Trailing bytes are removed first, then leading bytes. A token made of
    punctuation only becomes empty.

    Example:
        >>> clean_token('"продаются,"'.encode("utf-8")).decode("utf-8")
        'продаются'
        >>> clean_token(b"...")
        b''
    """
    end = len(data)
    while end > 0 and is_punctuation_byte(data[end - 1]):
        end -= 1
    start = 0
    while start < end and is_punctuation_byte(data[start]):
        start += 1
    return data[start:end]
