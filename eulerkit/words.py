"""Puzzles over English number names, word lists and simple ciphers."""

from __future__ import annotations

import itertools
import math
import string
from collections import defaultdict
from typing import Hashable, Iterable, Sequence

_SMALL = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

_TENS = {
    2: "twenty", 3: "thirty", 4: "forty", 5: "fifty",
    6: "sixty", 7: "seventy", 8: "eighty", 9: "ninety",
}


def number_to_words(n: int) -> str:
    """British English name of ``n`` for 0 <= n <= 1000, words separated by spaces."""
    if not 0 <= n <= 1000:
        raise ValueError(f"no name for {n}")
    if n == 1000:
        return "one thousand"
    if n < 20:
        return _SMALL[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return _TENS[tens] + (f" {_SMALL[ones]}" if ones else "")
    hundreds, rest = divmod(n, 100)
    name = f"{_SMALL[hundreds]} hundred"
    return f"{name} and {number_to_words(rest)}" if rest else name


def number_letter_count(limit: int) -> int:
    """Letters, not counting spaces, used to write out every number from 1 to ``limit``."""
    return sum(len(number_to_words(n).replace(" ", "")) for n in range(1, limit + 1))


def _letter_value(word: str) -> int:
    return sum(ord(letter) - 64 for letter in word)


def _quoted_words(text: str) -> list[str]:
    return text.strip().strip('"').split('","')


def name_scores_total(text: str) -> int:
    """Total of alphabetical value times sorted position over a quoted, comma-separated list."""
    names = sorted(text.strip().split(","))
    return sum(
        position * _letter_value(name.strip('"'))
        for position, name in enumerate(names, 1)
    )


def count_triangle_words(text: str) -> int:
    """Number of words whose letter value is a triangle number below the largest value."""
    values = [_letter_value(word) for word in _quoted_words(text)]
    largest = max(values)
    triangles = set(
        itertools.takewhile(
            lambda t: t < largest,
            (n * (n + 1) // 2 for n in itertools.count(1)),
        )
    )
    return sum(1 for value in values if value in triangles)


def _decrypt(codes: Sequence[int], key: str) -> str:
    return "".join(
        chr(code ^ ord(k)) for code, k in zip(codes, itertools.cycle(key))
    )


def find_xor_key(codes: Sequence[int], marker: str = " the ") -> str:
    """First three-letter lowercase key whose decryption of ``codes`` contains ``marker``."""
    letters = string.ascii_lowercase
    for key in map("".join, itertools.product(letters, repeat=3)):
        if marker in _decrypt(codes, key):
            return key
    raise LookupError(f"no key decrypts to text containing {marker!r}")


def xor_decrypt_sum(text: str, marker: str = " the ") -> int:
    """Sum of the UTF-8 bytes of the decrypted text of comma-separated codes."""
    codes = [int(code) for code in text.strip().split(",")]
    plaintext = _decrypt(codes, find_xor_key(codes, marker))
    return sum(plaintext.encode("utf-8"))


def _pattern(symbols: Iterable[Hashable]) -> tuple[int, ...]:
    first_seen: dict[Hashable, int] = {}
    return tuple(first_seen.setdefault(symbol, len(first_seen)) for symbol in symbols)


def largest_anagramic_square(text: str) -> int:
    """Largest square formed by the second word of an anagram pair mapped from a square."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in _quoted_words(text):
        groups["".join(sorted(word))].append(word)
    anagrams = [words for words in groups.values() if len(words) > 1]
    if not anagrams:
        raise ValueError("the word list holds no anagram pairs")

    longest = max(len(words[0]) for words in anagrams)
    square_patterns: defaultdict[tuple[int, ...], list[str]] = defaultdict(list)
    for n in range(10 ** (longest // 2 + 1)):
        square = str(n * n)
        square_patterns[_pattern(square)].append(square)

    largest = 0
    for words in anagrams:
        for i, first in enumerate(words):
            squares = square_patterns.get(_pattern(first), [])
            for second in words[i + 1:]:
                for square in squares:
                    mapping = dict(zip(first, map(int, square)))
                    if mapping[second[0]] == 0:
                        continue
                    value = int("".join(str(mapping[letter]) for letter in second))
                    if math.isqrt(value) ** 2 == value:
                        largest = max(largest, value)
    return largest