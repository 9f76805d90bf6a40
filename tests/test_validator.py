"""Tests for the three-letter Arabic format check."""
import pytest

from wordquiz.validator import is_allowed_char, is_valid_format

ARABIC_RANGE = [chr(c) for c in range(0x0621, 0x064B)] + [chr(c) for c in range(0x0660, 0x066A)]


class TestIsValidFormat:
    @pytest.mark.parametrize("word", ["كتب", "ءءء", "ييي", "٠١٢", "ب٩ء", "قرأ"])
    def test_accepts_three_arabic_chars(self, word):
        assert is_valid_format(word)

    def test_every_char_in_range_accepted(self):
        for ch in ARABIC_RANGE:
            assert is_valid_format(ch * 3), hex(ord(ch))

    @pytest.mark.parametrize("word", ["", "ك", "كت", "كتاب", "كتبت"])
    def test_rejects_wrong_length(self, word):
        assert not is_valid_format(word)

    @pytest.mark.parametrize("word", [
        "abc",
        "كت1",
        "كت ",
        "كت\n",
        "كتَ",      # fatha diacritic U+064E is outside the letter range
        "كتؠ",
        "كت٪",
        "123",
    ])
    def test_rejects_chars_outside_range(self, word):
        assert not is_valid_format(word)


class TestIsAllowedChar:
    def test_arabic_letter(self):
        assert is_allowed_char("ب")

    def test_arabic_digit(self):
        assert is_allowed_char("٥")

    @pytest.mark.parametrize("char", ["a", "5", " ", "", "بب"])
    def test_rejects_others(self, char):
        assert not is_allowed_char(char)
