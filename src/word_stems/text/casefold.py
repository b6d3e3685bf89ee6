"""Lowercasing for ASCII and Russian Cyrillic in UTF-8.

Only the letters a Russian text actually needs are folded:

- ASCII ``A-Z``
- ``Ё`` (``D0 81``) becomes ``ё`` (``D1 91``)
- ``А..П`` (``D0 90..9F``) become ``D0 B0..BF``
- ``Р..Я`` (``D0 A0..AF``) become ``D1 80..8F``

Every mapping keeps the encoded length, so folding is a single left to
right rewrite of a copy of the buffer. All other characters are copied
untouched.
"""

CYRILLIC_LEAD_LOW = 0xD0
CYRILLIC_LEAD_HIGH = 0xD1

# Ё -> ё
CAPITAL_IO_TRAIL = 0x81
SMALL_IO = (CYRILLIC_LEAD_HIGH, 0x91)

# А..П -> а..п, lead byte unchanged
FIRST_RANGE = range(0x90, 0xA0)
# Р..Я -> р..я, lead byte becomes D1
SECOND_RANGE = range(0xA0, 0xB0)
CASE_OFFSET = 0x20


def _skip_length(lead: int) -> int:
    """Bytes to copy for a non-ASCII character left unchanged.

    Any byte below E0 (stray continuation bytes included) is treated as a
    2-byte lead.
    """
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def fold_case(data: bytes) -> bytes:
    """Return a lowercased copy of ``data`` with the same byte length.

    Args:
        data: UTF-8 encoded token

    Returns:
        New bytes object; ``len(result) == len(data)``

    Example:
        >>> fold_case("Добрым".encode("utf-8")).decode("utf-8")
        'добрым'
        >>> fold_case(b"HELLO")
        b'hello'
    """
    folded = bytearray(data)
    size = len(folded)
    i = 0
    while i < size:
        lead = folded[i]

        if lead < 0x80:
            if 0x41 <= lead <= 0x5A:
                folded[i] = lead + CASE_OFFSET
            i += 1
            continue

        if lead == CYRILLIC_LEAD_LOW and i + 1 < size:
            trail = folded[i + 1]
            if trail == CAPITAL_IO_TRAIL:
                folded[i], folded[i + 1] = SMALL_IO
                i += 2
                continue
            if trail in FIRST_RANGE:
                folded[i + 1] = trail + CASE_OFFSET
                i += 2
                continue
            if trail in SECOND_RANGE:
                folded[i] = CYRILLIC_LEAD_HIGH
                folded[i + 1] = trail - CASE_OFFSET
                i += 2
                continue

        i += _skip_length(lead)

    return bytes(folded)
