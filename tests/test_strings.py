from __future__ import annotations

import pytest

from commonutil import include_double_byte, length, trim, uppercase_first_letter


@pytest.mark.parametrize(
    "text, expected",
    [
        ("plain ascii", False),
        ("", False),
        ("café", False),  # é is 0xE9, still single byte
        ("ÿ", False),  # 0xFF boundary
        ("Ā", True),  # 0x100
        ("中文", True),
        ("mixed 中", True),
        ("emoji 🔑", True),
    ],
)
def test_include_double_byte(text, expected):
    assert include_double_byte(text) is expected


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("abc", 2, 3),
        ("", 2, 0),
        ("中文ab", 2, 6),
        ("中文ab", 3, 8),
        ("中", 1, 1),
        ("🔑x", 2, 3),  # one code point, counted once
    ],
)
def test_length(text, width, expected):
    assert length(text, width) == expected


def test_length_default_width():
    assert length("你好") == 4


class TestTrim:
    """Test cases for trim."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("  hello  ", "hello"),
            ("\t\nhello world\n", "hello world"),
            ("hello", "hello"),
            ("   ", ""),
            ("", ""),
        ],
    )
    def test_whitespace_default(self, text, expected):
        assert trim(text) == expected

    def test_directions(self):
        assert trim("--a-b--", "-", "l") == "a-b--"
        assert trim("--a-b--", "-", "r") == "--a-b"
        assert trim("--a-b--", "-") == "a-b"
        assert trim("--a-b--", "-", "both") == "a-b"

    def test_inner_occurrences_are_kept(self):
        assert trim("xxaxxbxx", "x") == "axxb"

    def test_multi_character_fragment_repeats_as_a_unit(self):
        assert trim("ababcab", "ab") == "c"

    def test_char_is_a_regex_fragment(self):
        # Unescaped "." matches any character
        assert trim("..a..", ".") == ""
        assert trim("..a..", r"\.") == "a"

    def test_escape_option(self):
        assert trim("..a..", ".", escape=True) == "a"
        assert trim("**x**", "*", escape=True) == "x"

    def test_trailing_newline_is_not_skipped(self):
        assert trim("ax\n", "x", "r") == "ax\n"

    @pytest.mark.parametrize("text", ["  a  ", "a", "  ", "\n a b \t"])
    def test_idempotent(self, text):
        assert trim(trim(text)) == trim(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("lucy", "Lucy"),
        ("Lucy", "Lucy"),
        ("mcDonald", "McDonald"),
        ("éclair", "Éclair"),
        ("1abc", "1abc"),
        ("", ""),
    ],
)
def test_uppercase_first_letter(text, expected):
    assert uppercase_first_letter(text) == expected
