"""Bijective base-26 suffixes

Suffixes count a=1, b=2, ..., z=26, aa=27, ab=28, ... There is no digit for
zero, so every positive integer has exactly one suffix and the length grows
without bound. Python ints are arbitrary precision, so no overflow handling
is needed.
"""

import string

from calverlex.exceptions import InvalidSuffixCharacterError

ALPHABET = string.ascii_lowercase
BASE = len(ALPHABET)


def encode(number: int) -> str:
    """Converts a positive integer into its letter suffix

    Args:
        number (int): the ordinal, starting at 1

    Raises:
        ValueError: If number is less than 1

    Returns:
        str: The suffix, ie. 1 -> "a", 27 -> "aa", 703 -> "aaa"
    """
    if number < 1:
        raise ValueError(
            f"Only positive integers have a suffix, got {number}"
        )
    letters: list[str] = []
    while number > 0:
        number, remainder = divmod(number - 1, BASE)
        letters.append(ALPHABET[remainder])
    return "".join(reversed(letters))


def decode(suffix: str) -> int:
    """Converts a letter suffix back into its integer

    Args:
        suffix (str): one or more lowercase letters

    Raises:
        InvalidSuffixCharacterError: If the suffix is empty or holds a
          character outside a-z. The first offending character is named.

    Returns:
        int: The ordinal, ie. "z" -> 26, "zz" -> 702
    """
    if not suffix:
        raise InvalidSuffixCharacterError("", suffix)
    number = 0
    for char in suffix:
        if not "a" <= char <= "z":
            raise InvalidSuffixCharacterError(char, suffix)
        number = number * BASE + (ord(char) - ord("a") + 1)
    return number


def successor(suffix: str) -> str:
    """Returns the suffix that follows `suffix`, ie. "z" -> "aa" """
    return encode(decode(suffix) + 1)
