"""Data models for the word stem counter.

Tokens and stems are plain ``bytes`` (UTF-8). The containers below hold
the results of one processing call and are never shared between calls.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class SuffixRule:
    """One entry of the stemmer's ordered suffix table.

    Attributes:
        suffix: Ending to match, as UTF-8 bytes (whole characters only)
        strip: Number of characters removed when the rule applies
    """
    suffix: bytes
    strip: int

    @classmethod
    def of(cls, suffix: str, strip: int) -> "SuffixRule":
        """Build a rule from a text suffix."""
        return cls(suffix.encode("utf-8"), strip)


class FrequencyTable:
    """Insertion-ordered stem counter.

    Stems are kept in the order they were first added; counting an existing
    stem never moves it.

    Usage:
        >>> table = FrequencyTable()
        >>> for stem in (b"s1", b"s1", b"s2", b"s1"):
        ...     table.add(stem)
        >>> list(table.items())
        [(b's1', 3), (b's2', 1)]
    """

    def __init__(self) -> None:
        self._counts: dict[bytes, int] = {}

    def add(self, stem: bytes) -> int:
        """Count one occurrence of ``stem`` and return its new total."""
        total = self._counts.get(stem, 0) + 1
        self._counts[stem] = total
        return total

    def count(self, stem: bytes) -> int:
        return self._counts.get(stem, 0)

    def items(self) -> Iterator[tuple[bytes, int]]:
        return iter(self._counts.items())

    def __contains__(self, stem: object) -> bool:
        return stem in self._counts

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"


@dataclass
class WordReport:
    """Result of processing one input.

    Attributes:
        source: Path label of the input, or None for in-memory text
        tokens: Cleaned and lowercased tokens in input order
        frequencies: Stem counts in first-seen order
    """
    source: Optional[str] = None
    tokens: list[bytes] = field(default_factory=list)
    frequencies: FrequencyTable = field(default_factory=FrequencyTable)

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def stem_count(self) -> int:
        return len(self.frequencies)
