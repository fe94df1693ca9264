"""Leading digits of the sum of many large numbers."""

from __future__ import annotations

from typing import Iterable


def first_digits_of_sum(numbers: Iterable[str | int], count: int) -> str:
    """First ``count`` decimal digits of the sum of ``numbers``.

    Each number may be given as an integer or as a string of decimal digits.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    total = sum(int(str(number).strip()) for number in numbers)
    return str(total)[:count]