"""Byte-level text normalization for the word stem counter.

This package provides the UTF-8 aware building blocks of the pipeline:
character stepping, case folding, punctuation trimming and suffix
stripping.
"""

from word_stems.text.casefold import fold_case
from word_stems.text.cleaner import clean_token, is_punctuation_byte
from word_stems.text.codepoints import (
    char_length_at,
    character_count,
    pop_last_character,
)
from word_stems.text.stemmer import SUFFIX_RULES, Stemmer, stem

__all__ = [
    "char_length_at",
    "character_count",
    "pop_last_character",
    "fold_case",
    "clean_token",
    "is_punctuation_byte",
    "SUFFIX_RULES",
    "Stemmer",
    "stem",
]
