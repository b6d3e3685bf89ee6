"""Tests for the ordered suffix-table stemmer."""

import pytest

from word_stems.models import SuffixRule
from word_stems.text.codepoints import character_count
from word_stems.text.stemmer import SUFFIX_RULES, Stemmer, stem


def u(text: str) -> bytes:
    return text.encode("utf-8")


def stem_text(text: str) -> str:
    return stem(u(text)).decode("utf-8")


class TestShortWords:
    """Words of 3 characters or fewer are never stripped."""

    @pytest.mark.parametrize("word", ["эти", "и", "в", "к", "она", "ядр", "ая", ""])
    def test_short_word_unchanged(self, word):
        assert stem_text(word) == word

    def test_short_word_guard_counts_characters_not_bytes(self):
        # 3 Cyrillic characters are 6 bytes
        assert stem(u("нам")) == u("нам")


class TestErSpecialCase:
    """Words ending in "ер" drop the "е"."""

    def test_yader(self):
        assert stem_text("ядер") == "ядр"

    def test_vyoder(self):
        assert stem_text("вёдер") == "вёдр"

    def test_er_short_circuits_table(self):
        # No table rule ends in "р"
        assert stem_text("сестер") == "сестр"

    def test_three_letter_er_word_untouched(self):
        assert stem_text("мер") == "мер"


class TestSuffixTable:
    """Tests for table lookups."""

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("продаются", "продают"),
            ("трамбует", "трамб"),
            ("трамбуя", "трамб"),
            ("разрывает", "разрыв"),
            ("удобряет", "удобр"),
            ("дренькают", "дренька"),
            ("продырявив", "продыряв"),
            ("добрым", "добр"),
            ("людям", "люд"),
            ("добро", "добр"),
            ("добрыми", "добр"),
            ("книга", "книг"),
        ],
    )
    def test_examples(self, word, expected):
        assert stem_text(word) == expected

    def test_first_rule_wins_over_longer_match(self):
        # "ся" is listed before "я": only two characters are stripped
        assert stem_text("учился") == "учил"

    def test_earlier_rule_wins_when_suffixes_nest(self):
        # "уя" (2) precedes "я" (1)
        assert stem_text("трамбуя") == "трамб"
        rule = Stemmer().match_rule(u("трамбуя"))
        assert rule == SuffixRule.of("уя", 2)

    def test_table_order_is_respected_by_custom_stemmer(self):
        rules = [SuffixRule.of("я", 1), SuffixRule.of("уя", 2)]
        assert Stemmer(rules).stem(u("трамбуя")) == u("трамбу")

    def test_rule_skipped_when_too_few_characters_remain(self):
        # "ами" needs more than 4 characters; "мами" falls through to "и"
        assert stem_text("мами") == "мам"

    def test_no_match_unchanged(self):
        assert stem_text("дом") == "дом"
        assert stem_text("стол") == "стол"
        assert stem_text("python") == "python"
        assert stem_text("12345") == "12345"

    def test_stem_reduction_matches_rule(self):
        stemmer = Stemmer()
        for word in ["продаются", "добрыми", "людям", "книга", "зелёный", "синяя"]:
            token = u(word)
            rule = stemmer.match_rule(token)
            assert rule is not None
            result = stemmer.stem(token)
            assert character_count(result) == character_count(token) - rule.strip
            assert character_count(result) >= 2

    def test_table_is_ordered_pairs(self):
        assert isinstance(SUFFIX_RULES, tuple)
        assert SUFFIX_RULES[0] == SuffixRule.of("ся", 2)
        assert SUFFIX_RULES[-1] == SuffixRule.of("й", 1)
        assert len(SUFFIX_RULES) == 44

    def test_total_over_malformed_bytes(self):
        assert stem(b"\xd0\xd0\xd0\xd0\x80") == b"\xd0\xd0\xd0\xd0\x80"
