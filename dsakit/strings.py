"""Small string routines: anagrams, case changes, counting and permutations."""

from __future__ import annotations

import itertools
import string
from collections import Counter

_VOWELS = frozenset("aeiou")
_LOWER = frozenset(string.ascii_lowercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TOGGLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_lowercase + string.ascii_uppercase,
)


def is_anagram(a: str, b: str) -> bool:
    """Return True if ``a`` and ``b`` hold the same characters the same number of times."""
    return Counter(a) == Counter(b)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII upper-case letters made lower-case."""
    return text.translate(_TO_LOWER)


def count_words(text: str) -> int:
    """Return the number of space-separated words in ``text``."""
    return len(text.split())


def count_vowels_consonants(text: str) -> tuple[int, int]:
    """Return ``(vowels, consonants)`` among the lower-case ASCII letters of ``text``."""
    vowels = sum(1 for c in text if c in _VOWELS)
    consonants = sum(1 for c in text if c in _LOWER and c not in _VOWELS)
    return vowels, consonants


def duplicates(text: str) -> dict[str, int]:
    """Return each lower-case ASCII letter occurring more than once, with its count, in alphabetical order."""
    counts = Counter(c for c in text if c in _LOWER)
    return {c: n for c, n in sorted(counts.items()) if n > 1}


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def toggle_case(text: str) -> str:
    """Return ``text`` with the case of every ASCII letter swapped."""
    return text.translate(_TOGGLE)


def is_valid(text: str) -> bool:
    """Return True if ``text`` holds only ASCII letters and digits."""
    return all(c.isascii() and c.isalnum() for c in text)


def strings_equal(a: str, b: str) -> bool:
    """Return True if ``a`` and ``b`` have the same length and characters."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def permutations(text: str) -> list[str]:
    """Return every arrangement of the characters of ``text``, in positional order."""
    return ["".join(p) for p in itertools.permutations(text)]