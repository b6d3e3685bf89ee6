"""Character boundary helpers for UTF-8 byte strings.

Every other text component works on raw bytes and uses these helpers to
step over whole encoded characters, so multi-byte Cyrillic letters are
never split in half.

No validation is performed. A malformed sequence (stray continuation
byte, truncated character) gives an arbitrary but finite segmentation;
none of these functions raise on it.
"""

from typing import Iterator

# Bit masks for UTF-8 lead/continuation byte classification
CONTINUATION_MASK = 0xC0
CONTINUATION_BITS = 0x80


def char_length_at(data: bytes, offset: int) -> int:
    """Return the byte length of the character starting at ``offset``.

    Args:
        data: UTF-8 encoded bytes
        offset: Byte offset of a character start

    Returns:
        1, 2, 3 or 4

    Example:
        >>> char_length_at(b"a", 0)
        1
        >>> char_length_at("я".encode("utf-8"), 0)
        2
    """
    lead = data[offset]
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    return 4


def is_continuation_byte(byte: int) -> bool:
    """True for ``0b10xxxxxx`` bytes, which never start a character."""
    return byte & CONTINUATION_MASK == CONTINUATION_BITS


def iter_characters(data: bytes) -> Iterator[tuple[int, int]]:
    """Yield ``(offset, length)`` for each character in ``data``.

    The last length may run past the end of a truncated buffer.
    """
    offset = 0
    size = len(data)
    while offset < size:
        length = char_length_at(data, offset)
        yield offset, length
        offset += length


def character_count(data: bytes) -> int:
    """Count characters (not bytes) in ``data``.

    Example:
        >>> character_count("добро".encode("utf-8"))
        5
    """
    return sum(1 for _ in iter_characters(data))


def pop_last_character(data: bytes) -> bytes:
    """Return ``data`` without its last character.

    Walks backward over continuation bytes until a lead byte (or the start
    of the buffer) is found. Empty input is returned as is.

    Example:
        >>> pop_last_character("ядер".encode("utf-8")).decode("utf-8")
        'яде'
    """
    if not data:
        return data
    index = len(data) - 1
    while index > 0 and is_continuation_byte(data[index]):
        index -= 1
    return data[:index]


def pop_characters(data: bytes, count: int) -> bytes:
    """Remove ``count`` trailing characters from ``data``."""
    for _ in range(count):
        data = pop_last_character(data)
    return data
