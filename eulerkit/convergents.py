"""Puzzles solved with continued fractions, convergents and exact square roots."""

from __future__ import annotations

import itertools
import math


def _sqrt_continued_fraction(n: int) -> tuple[int, list[int]]:
    """Leading term and repeating period of the continued fraction of sqrt(n).

    The period is empty when ``n`` is a perfect square.
    """
    a0 = math.isqrt(n)
    if a0 * a0 == n:
        return a0, []
    m, d, a = 0, 1, a0
    period: list[int] = []
    while a != 2 * a0:
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        period.append(a)
    return a0, period


def sqrt_two_expansions(iterations: int) -> int:
    """Expansions of sqrt(2), up to ``iterations``, whose numerator has more digits than the denominator."""
    numerator, denominator = 3, 2
    count = 0
    for _ in range(2, iterations + 1):
        numerator, denominator = numerator + 2 * denominator, numerator + denominator
        if len(str(numerator)) > len(str(denominator)):
            count += 1
    return count


def odd_period_square_roots(limit: int) -> int:
    """Count of 2 <= n <= ``limit`` whose square root has an odd continued-fraction period."""
    return sum(
        1
        for n in range(2, limit + 1)
        if len(_sqrt_continued_fraction(n)[1]) % 2 == 1
    )


def _e_term(k: int) -> int:
    if k == 0:
        return 2
    if k % 3 == 2:
        return 2 * (k // 3 + 1)
    return 1


def e_convergent_digit_sum(n: int) -> int:
    """Digit sum of the numerator of the ``n``-th convergent of e."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, _e_term(0)
    for k in range(1, n):
        previous, current = current, _e_term(k) * current + previous
    return sum(int(c) for c in str(current))


def _minimal_pell_x(d: int, a0: int, period: list[int]) -> int:
    h_prev, h = 1, a0
    k_prev, k = 0, 1
    for a in itertools.cycle(period):
        if h * h - d * k * k == 1:
            return h
        h_prev, h = h, a * h + h_prev
        k_prev, k = k, a * k + k_prev
    raise AssertionError("unreachable")


def diophantine_max_x(limit: int) -> int:
    """The non-square D <= ``limit`` whose minimal solution of x^2 - D y^2 = 1 has the largest x."""
    best = (0, 0)
    for d in range(2, limit + 1):
        a0, period = _sqrt_continued_fraction(d)
        if not period:
            continue
        best = max(best, (_minimal_pell_x(d, a0, period), d))
    if best[1] == 0:
        raise ValueError("limit must be at least 2")
    return best[1]


def ordered_fraction_left_of(numerator: int, denominator: int, limit: int) -> int:
    """Numerator of the fraction just left of numerator/denominator among denominators up to ``limit``."""
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if limit < 1:
        raise ValueError("limit must be at least 1")
    best_p, best_q = 0, 1
    for q in range(2, limit + 1):
        scaled = numerator * q
        if scaled % denominator == 0:
            continue
        p = scaled // denominator
        if p * best_q > best_p * q:
            best_p, best_q = p, q
    return best_p


def square_root_digital_sum(limit: int, digits: int) -> int:
    """Total of the first ``digits`` digits of sqrt(n) over non-square 2 <= n < ``limit``."""
    if digits < 1:
        raise ValueError("digits must be at least 1")
    total = 0
    for n in range(2, limit):
        root = math.isqrt(n)
        if root * root == n:
            continue
        leading = str(math.isqrt(n * 100**digits))[:digits]
        total += sum(int(c) for c in leading)
    return total


def arranged_probability(minimum_total: int) -> int:
    """Blue discs in the first arrangement of at least ``minimum_total`` discs giving odds of one half."""
    blue, total = 3, 4
    while total < minimum_total:
        blue, total = 3 * blue + 2 * total - 2, 4 * blue + 3 * total - 3
    return blue