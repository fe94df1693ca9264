"""Puzzles about the decimal (and binary) digits of numbers."""

from __future__ import annotations

import functools
import itertools
import math

_NONZERO_DIGITS = frozenset("123456789")
_DIGIT_FACTORIALS = tuple(math.factorial(d) for d in range(10))


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def _reverse(n: int) -> int:
    return int(str(n)[::-1])


def digit_powers_sum(power: int, limit: int) -> int:
    """Sum of the numbers 2 <= n < ``limit`` equal to the sum of their digits to ``power``."""
    powers = tuple(d**power for d in range(10))
    return sum(
        n for n in range(2, limit) if sum(powers[int(c)] for c in str(n)) == n
    )


def pandigital_products_sum() -> int:
    """Sum of the distinct products c with a * b = c using each digit 1-9 exactly once."""
    products: set[int] = set()
    for a in range(1, 1000):
        a_text = str(a)
        for b in itertools.count(a):
            c = a * b
            text = a_text + str(b) + str(c)
            if len(text) > 9:
                break
            if len(text) == 9 and set(text) == _NONZERO_DIGITS:
                products.add(c)
    return sum(products)


def digit_factorials_sum(limit: int) -> int:
    """Sum of the numbers 3 <= n < ``limit`` equal to the sum of their digits' factorials."""
    return sum(
        n
        for n in range(3, limit)
        if sum(_DIGIT_FACTORIALS[int(c)] for c in str(n)) == n
    )


def double_base_palindromes_sum(limit: int) -> int:
    """Sum of the numbers below ``limit`` palindromic in both base 10 and base 2."""
    return sum(
        n
        for n in range(1, limit)
        if n % 2 and n % 10
        and _is_palindrome(str(n))
        and _is_palindrome(format(n, "b"))
    )


def largest_pandigital_multiple() -> int:
    """Largest 1-9 pandigital concatenated product of an integer with 1, 2, ..., n."""
    best = 0
    for i in range(1, 10_000):
        digits = ""
        for n in itertools.count(1):
            digits += str(n * i)
            if "0" in digits or len(set(digits)) != len(digits):
                break
            if len(digits) == 9:
                best = max(best, int(digits))
                break
    return best


def _champernowne_digit(position: int) -> int:
    """Digit at 1-based ``position`` of 0.123456789101112..."""
    width, count, start = 1, 9, 1
    while position > width * count:
        position -= width * count
        width += 1
        count *= 10
        start *= 10
    number = start + (position - 1) // width
    return int(str(number)[(position - 1) % width])


def champernowne_product(max_power: int) -> int:
    """Product of the Champernowne digits d(1), d(10), ..., d(10 ** max_power)."""
    if max_power < 0:
        raise ValueError("max_power must not be negative")
    return math.prod(_champernowne_digit(10**p) for p in range(max_power + 1))


def _is_lychrel(n: int, iterations: int) -> bool:
    for _ in range(iterations):
        n += _reverse(n)
        if n == _reverse(n):
            return False
    return True


def lychrel_count(limit: int, iterations: int) -> int:
    """Numbers below ``limit`` that reach no palindrome within ``iterations`` reverse-and-adds."""
    return sum(1 for n in range(1, limit) if _is_lychrel(n, iterations))


def _digit_sum(n: int) -> int:
    return sum(int(c) for c in str(n))


def max_power_digit_sum(limit: int) -> int:
    """Largest digit sum of a ** b for 2 <= a, b < ``limit``."""
    bases = range(2, limit)
    if not bases:
        raise ValueError("limit must be at least 3")
    return max(_digit_sum(a**b) for a in bases for b in bases)


def powerful_digit_count() -> int:
    """Count of positive integers that are n-digit numbers and also n-th powers."""
    total = 0
    for n in itertools.count(1):
        low, high = 10 ** (n - 1), 10**n
        found = 0
        for i in itertools.count(1):
            value = i**n
            if value >= high:
                break
            if value >= low:
                found += 1
        if not found:
            return total
        total += found
    raise AssertionError("unreachable")


def _square_digit_sum(n: int) -> int:
    return sum(int(c) ** 2 for c in str(n))


@functools.lru_cache(maxsize=None)
def _chain_end(n: int) -> int:
    while n not in (1, 89):
        n = _square_digit_sum(n)
    return n


def square_digit_chain_89_count(limit: int) -> int:
    """Starting numbers below ``limit`` whose square-digit chain arrives at 89."""
    def end(n: int) -> int:
        # Large starts fall below 1000 after one step; only small values are cached.
        return _chain_end(n) if n < 1000 else _chain_end(_square_digit_sum(n))

    return sum(1 for n in range(1, limit) if end(n) == 89)