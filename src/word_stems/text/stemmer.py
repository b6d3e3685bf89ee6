"""Rule-based suffix stripping for Russian words.

This is not a real stemmer. It removes one ending from a fixed, ordered
table so that common inflected forms of a word share a grouping key:

    добрым, добро  -> добр
    продаются      -> продают
    ядер           -> ядр

Matching rules:
- Words of 3 characters or fewer are never stripped ("эти", "и", "в").
- A word ending in "ер" drops its "е" ("вёдер" -> "вёдр") before the
  table is consulted.
- Otherwise the FIRST table entry whose suffix matches wins, provided at
  least 2 characters remain. The table is scanned in order, so it is not
  a longest-match search.
"""

from typing import Sequence

from word_stems.models import SuffixRule
from word_stems.text.codepoints import character_count, pop_characters

SUFFIX_RULES: tuple[SuffixRule, ...] = tuple(
    SuffixRule.of(suffix, strip)
    for suffix, strip in (
        # Verbs and adverbial participles
        ("ся", 2), ("сь", 2),  # продаются -> продают
        ("ует", 3),            # трамбует -> трамб
        ("уя", 2),             # трамбуя -> трамб
        ("ает", 3),            # разрывает -> разрыв
        ("яет", 3),            # удобряет -> удобр
        ("ют", 2),             # дренькают -> дренька
        ("ив", 2),             # продырявив -> продыряв

        # Adjective and noun case endings
        ("ями", 3), ("ами", 3), ("ыми", 3), ("ими", 3),
        ("ым", 2), ("им", 2),  # добрым -> добр
        ("ах", 2), ("ях", 2), ("ам", 2), ("ям", 2), ("ом", 2), ("ем", 2),
        ("ов", 2), ("ев", 2),
        ("ой", 2), ("ей", 2), ("ый", 2), ("ий", 2),
        ("ая", 2), ("яя", 2), ("ые", 2), ("ие", 2),
        ("ых", 2), ("их", 2), ("ую", 2), ("юю", 2),

        # Single letters
        ("а", 1), ("я", 1), ("ы", 1), ("и", 1), ("о", 1), ("е", 1),
        ("у", 1), ("ю", 1), ("ь", 1), ("й", 1),
    )
)

# ядер -> ядр, вёдер -> вёдр
ER_SUFFIX = "ер".encode("utf-8")
ER_REPLACEMENT = "р".encode("utf-8")

SHORT_WORD_LENGTH = 3


class Stemmer:
    """Suffix stripper driven by an ordered rule table.

    Usage:
        >>> stemmer = Stemmer()
        >>> stemmer.stem("людям".encode("utf-8")).decode("utf-8")
        'люд'
    """

    def __init__(
        self,
        rules: Sequence[SuffixRule] = SUFFIX_RULES,
        short_word_length: int = SHORT_WORD_LENGTH,
    ):
        """Initialize stemmer.

        Args:
            rules: Ordered rule table; earlier entries take priority
            short_word_length: Words with this many characters or fewer
                are returned unchanged
        """
        self.rules = tuple(rules)
        self.short_word_length = short_word_length

    def stem(self, token: bytes) -> bytes:
        """Return the grouping key for a cleaned, lowercased token.

        Total over any bytes: tokens that match nothing (Latin words,
        numbers, already stemmed input) come back unchanged.
        """
        length = character_count(token)
        if length <= self.short_word_length:
            return token

        if token.endswith(ER_SUFFIX):
            return pop_characters(token, 2) + ER_REPLACEMENT

        rule = self.match_rule(token, length)
        if rule is None:
            return token
        return pop_characters(token, rule.strip)

    def match_rule(self, token: bytes, length: int | None = None) -> SuffixRule | None:
        """Find the first rule that applies to ``token``.

        Args:
            token: Lowercased token bytes
            length: Precomputed character count of ``token``

        Returns:
            The winning rule, or None when no rule applies
        """
        if length is None:
            length = character_count(token)
        for rule in self.rules:
            # Stripping must leave at least 2 characters
            if token.endswith(rule.suffix) and length > rule.strip + 1:
                return rule
        return None


_default_stemmer = Stemmer()


def stem(token: bytes) -> bytes:
    """Stem ``token`` with the default rule table."""
    return _default_stemmer.stem(token)
