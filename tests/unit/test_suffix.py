"""Tests for bijective base-26 suffixes"""

import itertools
import string

import pytest

from calverlex.exceptions import FormatError, InvalidSuffixCharacterError
from calverlex.tags.suffix import decode, encode, successor


@pytest.mark.parametrize(
    "number, suffix",
    [
        (1, "a"),
        (2, "b"),
        (26, "z"),
        (27, "aa"),
        (28, "ab"),
        (52, "az"),
        (53, "ba"),
        (702, "zz"),
        (703, "aaa"),
        (731, "abc"),
        (18278, "zzz"),
        (18279, "aaaa"),
    ],
)
def test_encode_and_decode_known_values(number: int, suffix: str) -> None:
    """Tests both directions on values either side of each length boundary"""
    assert encode(number) == suffix
    assert decode(suffix) == number


def test_decode_inverts_encode() -> None:
    """Tests decode(encode(n)) == n for the first 100000 integers"""
    for number in range(1, 100001):
        assert decode(encode(number)) == number


def test_encode_inverts_decode() -> None:
    """Tests encode(decode(s)) == s for every suffix up to three letters"""
    for length in range(1, 4):
        for letters in itertools.product(string.ascii_lowercase, repeat=length):
            suffix = "".join(letters)
            assert encode(decode(suffix)) == suffix


def test_encoding_keeps_order() -> None:
    """Tests that suffixes of one length sort like their integers and
    shorter suffixes come before longer ones"""
    suffixes = [encode(number) for number in range(1, 2000)]
    assert sorted(suffixes, key=lambda suffix: (len(suffix), suffix)) == suffixes


def test_large_numbers() -> None:
    """Tests numbers well past 64 bits"""
    number = 26**30 + 12345
    suffix = encode(number)
    assert len(suffix) == 30
    assert decode(suffix) == number
    assert decode("z" * 40) == sum(26 * 26**power for power in range(40))


@pytest.mark.parametrize("number", [0, -1, -27])
def test_encode_rejects_non_positive(number: int) -> None:
    """Tests that zero and negatives have no suffix"""
    with pytest.raises(ValueError, match="positive"):
        encode(number)


@pytest.mark.parametrize(
    "suffix, character",
    [
        ("A", "A"),
        ("a1", "1"),
        ("1", "1"),
        ("ab-c", "-"),
        ("aé", "é"),
    ],
    ids=["uppercase", "trailing_digit", "digit", "dash", "accent"],
)
def test_decode_rejects_invalid_characters(suffix: str, character: str) -> None:
    """Tests that the offending character is named"""
    with pytest.raises(InvalidSuffixCharacterError) as exc_info:
        decode(suffix)
    assert exc_info.value.character == character
    assert f"Invalid suffix character: {character}" in str(exc_info.value)


def test_decode_rejects_empty_suffix() -> None:
    """Tests that there is no empty numeral"""
    with pytest.raises(InvalidSuffixCharacterError):
        decode("")


def test_invalid_suffix_is_a_format_error() -> None:
    """Tests the error can be caught as a FormatError or a ValueError"""
    with pytest.raises(FormatError):
        decode("B")
    with pytest.raises(ValueError):
        decode("B")


@pytest.mark.parametrize(
    "suffix, expected",
    [("a", "b"), ("y", "z"), ("z", "aa"), ("az", "ba"), ("zz", "aaa")],
)
def test_successor(suffix: str, expected: str) -> None:
    """Tests successor"""
    assert successor(suffix) == expected
