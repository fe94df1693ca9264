"""Arithmetic and elementary number-theory puzzle solutions."""

from __future__ import annotations

import itertools
import math
from collections import Counter
from datetime import date
from typing import Iterable

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _digit_sum(n: int) -> int:
    return sum(int(digit) for digit in str(n))


def _is_palindrome(n: int) -> bool:
    text = str(n)
    return text == text[::-1]


def sum_of_multiples(limit: int, divisors: Iterable[int]) -> int:
    """Sum of the positive integers below ``limit`` divisible by any of ``divisors``."""
    divisors = tuple(divisors)
    return sum(x for x in range(1, limit) if any(x % d == 0 for d in divisors))


def even_fibonacci_sum(limit: int) -> int:
    """Sum of the even Fibonacci terms, generated until a term reaches ``limit``."""
    terms = [0, 1]
    while terms[-1] < limit:
        terms.append(terms[-1] + terms[-2])
    return sum(term for term in terms if term % 2 == 0)


def largest_prime_factor(n: int) -> int:
    """Largest prime factor of ``n`` found by trial division."""
    candidates = itertools.chain((2,), range(3, math.isqrt(n) + 1, 2))
    for i in candidates:
        while n % i == 0 and n != i:
            n //= i
        if n == i:
            break
    return n


def largest_palindrome_product(low: int, high: int) -> int:
    """Largest palindromic product of two factors in ``[low, high]``."""
    factors = range(low, high + 1)
    return max(x * y for x in factors for y in factors if _is_palindrome(x * y))


def smallest_multiple(n: int) -> int:
    """Smallest positive number evenly divisible by every integer below ``n``."""
    return math.lcm(1, *range(1, n))


def sum_square_difference(n: int) -> int:
    """Square of the sum of 1..n minus the sum of the squares of 1..n."""
    numbers = range(1, n + 1)
    return sum(numbers) ** 2 - sum(x * x for x in numbers)


def nth_prime(n: int) -> int:
    """The ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    primes = [2]
    for candidate in itertools.count(3, 2):
        if len(primes) == n:
            break
        bounded = itertools.takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in bounded):
            primes.append(candidate)
    return primes[-1]


def pythagorean_triplet_product(perimeter: int) -> int:
    """Product a*b*c of the first triplet a <= b < c with a+b+c == ``perimeter``."""
    for a in range(1, perimeter):
        for b in itertools.count(a):
            c = perimeter - a - b
            if c <= 0 or a * a + b * b > c * c:
                break
            if a * a + b * b == c * c:
                return a * b * c
    raise ValueError(f"no Pythagorean triplet has perimeter {perimeter}")


def sum_of_primes_below(limit: int) -> int:
    """Sum of all primes below ``limit``, using a sieve."""
    if limit < 3:
        return 0
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for n in range(2, math.isqrt(limit - 1) + 1):
        if sieve[n]:
            sieve[n * n::n] = bytes(len(range(n * n, limit, n)))
    return sum(n for n, flag in enumerate(sieve) if flag)


def first_triangle_with_divisors(count: int) -> int:
    """First triangle number (from the second) with more than ``count`` divisors."""
    for i in itertools.count(2):
        n = i * (i + 1) // 2
        root = math.isqrt(n)
        divisors = sum(2 for d in range(1, root + 1) if n % d == 0)
        if root * root == n:
            divisors -= 1
        if divisors > count:
            return n
    raise AssertionError("unreachable")


def longest_collatz_start(limit: int) -> int:
    """Start below ``limit`` with the longest Collatz chain; ties go to the larger start."""
    lengths = {1: 1}
    for n in range(2, limit):
        if n in lengths:
            continue
        path = []
        current = n
        while current not in lengths:
            path.append(current)
            current = current // 2 if current % 2 == 0 else 3 * current + 1
        base = lengths[current]
        for offset, value in enumerate(reversed(path), 1):
            lengths[value] = base + offset
    return max(range(1, limit), key=lambda k: (lengths[k], k))


def power_digit_sum(base: int, exponent: int) -> int:
    """Sum of the decimal digits of ``base ** exponent``."""
    return _digit_sum(base**exponent)


def factorial_digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n!``."""
    return _digit_sum(math.factorial(n))


def first_fibonacci_with_digits(digits: int) -> int:
    """Index (with F(0) = 0) of the first Fibonacci number having ``digits`` digits."""
    a, b = 0, 1
    index = 0
    while len(str(a)) < digits:
        a, b = b, a + b
        index += 1
    return index


def self_powers_last_digits(n: int, digits: int) -> int:
    """Last ``digits`` digits of 1^1 + 2^2 + ... + n^n."""
    modulus = 10**digits
    return sum(pow(x, x, modulus) for x in range(1, n + 1)) % modulus


def large_prime_last_digits(coefficient: int, exponent: int, digits: int) -> int:
    """Last ``digits`` digits of coefficient * 2**exponent, plus one."""
    modulus = 10**digits
    return (coefficient * pow(2, exponent, modulus)) % modulus + 1


def first_of_month_weekdays(start_year: int, end_year: int) -> Counter:
    """Count the weekdays on which each month's first day falls, years inclusive."""
    return Counter(
        WEEKDAY_NAMES[date(year, month, 1).weekday()]
        for year in range(start_year, end_year + 1)
        for month in range(1, 13)
    )


def largest_exponential_line(text: str) -> int:
    """1-based line number of the largest ``base,exponent`` pair; ties go to the later line."""
    best_line = 0
    best_magnitude = -math.inf
    for number, line in enumerate(text.strip().split("\n"), 1):
        fields = [int(field) for field in line.split(",")]
        base, exponent = fields[0], fields[1]
        magnitude = exponent * math.log(base)
        if magnitude >= best_magnitude:
            best_magnitude = magnitude
            best_line = number
    return best_line