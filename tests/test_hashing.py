"""
Tests for the legacy and Blue Burst section id hashes.
"""
import random
import string

import pytest

from domain import CharacterClass, UnsupportedCharacterError
from services.hashing import (
    CHARACTER_VALUES,
    character_value,
    legacy_section_id,
    modern_section_id,
)


def _random_names(alphabet, count=200, seed=1234):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 12)))
        for _ in range(count)
    ]


class TestLegacyHash:
    def test_foobar(self):
        assert legacy_section_id("foobar") == 3

    def test_foo_bar(self):
        assert legacy_section_id("foo bar") == 5

    def test_equals_byte_sum_mod_ten(self):
        for name in _random_names(string.printable[:95]):
            result = legacy_section_id(name)
            assert 0 <= result <= 9
            assert result == sum(ord(ch) for ch in name) % 10

    def test_order_independent(self):
        assert legacy_section_id("abc") == legacy_section_id("cba")


class TestCharacterTable:
    def test_covers_letters_digits_and_space(self):
        for ch in string.ascii_letters + string.digits + " ":
            assert ch in CHARACTER_VALUES

    def test_values_in_range(self):
        assert all(0 <= v <= 9 for v in CHARACTER_VALUES.values())

    def test_supported_punctuation(self):
        for ch in "!#$%&'()*+,-.=@[]^_~":
            assert ch in CHARACTER_VALUES

    @pytest.mark.parametrize("ch", ["é", "/", "\\", "<", "?", "\t", "あ"])
    def test_unsupported_character_raises(self, ch):
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            character_value(ch)
        assert exc_info.value.character == ch

    def test_sample_values(self):
        assert character_value("P") == 0
        assert character_value("o") == 1
        assert character_value(" ") == 2
        assert character_value("1") == 9


class TestModernHash:
    def test_pso_lover_ramar(self):
        assert modern_section_id("PSO Lover", CharacterClass.RAMAR) == 2

    def test_pso_lover_fonewearl(self):
        assert modern_section_id("PSO Lover", CharacterClass.FONEWEARL) == 7

    def test_no_class_contributes_zero(self):
        # P0 S3 O9 _2 L6 o1 v8 e1 r4 = 34
        assert modern_section_id("PSO Lover") == 4
        assert modern_section_id("PSO Lover", CharacterClass.RACASEAL) == 4

    def test_equals_value_sum_plus_offset_mod_ten(self):
        alphabet = "".join(CHARACTER_VALUES)
        classes = [None, *CharacterClass]
        rng = random.Random(99)
        for name in _random_names(alphabet):
            char_class = rng.choice(classes)
            offset = char_class.offset if char_class else 0
            expected = (sum(CHARACTER_VALUES[ch] for ch in name) + offset) % 10
            result = modern_section_id(name, char_class)
            assert 0 <= result <= 9
            assert result == expected

    def test_unsupported_character_names_the_name(self):
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            modern_section_id("café")
        assert exc_info.value.character == "é"
        assert exc_info.value.name == "café"
