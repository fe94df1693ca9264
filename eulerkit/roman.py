"""Reading and writing Roman numerals."""

from __future__ import annotations

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# (one, five, ten) symbols for units, tens and hundreds.
_PLACES = (("I", "V", "X"), ("X", "L", "C"), ("C", "D", "M"))


def parse_roman(numeral: str) -> int:
    """Value of a valid Roman numeral, minimal or not."""
    try:
        values = [_VALUES[symbol] for symbol in numeral]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral symbol {exc.args[0]!r}") from None
    total = 0
    i = 0
    while i < len(values):
        current = values[i]
        following = values[i + 1] if i + 1 < len(values) else 0
        if current >= following:
            total += current
            i += 1
        else:
            total += following - current
            i += 2
    return total


def _place(digit: int, one: str, five: str, ten: str) -> str:
    if digit == 9:
        return one + ten
    if digit >= 5:
        return five + one * (digit - 5)
    if digit == 4:
        return one + five
    return one * digit


def to_roman(n: int) -> str:
    """Minimal Roman numeral for a non-negative integer."""
    if n < 0:
        raise ValueError("Roman numerals cannot be negative")
    thousands, rest = divmod(n, 1000)
    parts = [
        _place(int(digit), *symbols)
        for symbols, digit in zip(_PLACES, reversed(str(rest)))
    ]
    return "M" * thousands + "".join(reversed(parts))


def characters_saved(text: str) -> int:
    """Characters saved by rewriting each numeral line in minimal form."""
    return sum(
        len(line) - len(to_roman(parse_roman(line)))
        for line in text.strip().splitlines()
    )