"""Tests for code point iteration."""

from adifsub.unicode import combine_surrogates, is_ascii, iter_code_points


class TestIterCodePoints:
    """Tests for iter_code_points."""

    def test_empty(self) -> None:
        assert not list(iter_code_points(""))

    def test_native_string(self) -> None:
        assert list(iter_code_points("aé🌀")) == [0x61, 0xE9, 0x1F300]

    def test_surrogate_pair(self) -> None:
        assert list(iter_code_points("a\ud83c\udf00b")) == [0x61, 0x1F300, 0x62]

    def test_lone_high_surrogate(self) -> None:
        assert list(iter_code_points("\ud83cb")) == [0xD83C, 0x62]
        assert list(iter_code_points("a\ud83c")) == [0x61, 0xD83C]

    def test_lone_low_surrogate(self) -> None:
        assert list(iter_code_points("\udf00")) == [0xDF00]

    def test_combine_surrogates(self) -> None:
        assert combine_surrogates(0xD83C, 0xDFEF) == 0x1F3EF
        assert combine_surrogates(0xDBFF, 0xDFFF) == 0x10FFFF


class TestIsAscii:
    """Tests for is_ascii."""

    def test_ascii(self) -> None:
        assert is_ascii("US-ASCII only.\x7f")

    def test_not_ascii(self) -> None:
        assert not is_ascii("Café")
        assert not is_ascii("🌀")
