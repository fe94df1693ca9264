"""Puzzles about primes, prime factorizations and prime sums."""

from __future__ import annotations

import functools
import itertools
import math

_TRUNCATABLE_COUNT = 11


def _sieve(limit: int) -> bytearray:
    """Primality flags for 0..limit-1."""
    size = max(limit, 0)
    flags = bytearray([1]) * size
    for index in range(min(size, 2)):
        flags[index] = 0
    for n in range(2, math.isqrt(max(size - 1, 0)) + 1):
        if flags[n]:
            flags[n * n::n] = bytes(len(range(n * n, size, n)))
    return flags


def primes_below(limit: int) -> list[int]:
    """All primes below ``limit``, ascending."""
    return [n for n, flag in enumerate(_sieve(limit)) if flag]


@functools.lru_cache(maxsize=None)
def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % f for f in range(3, math.isqrt(n) + 1, 2))


def _quadratic_run(a: int, b: int) -> int:
    return sum(
        1 for _ in itertools.takewhile(
            lambda n: _is_prime(n * n + a * n + b), itertools.count()
        )
    )


def quadratic_primes_product(limit: int) -> int:
    """Product a*b for |a| < limit, |b| <= limit giving the longest run of primes.

    Ties go to the larger product.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    # A run of length zero can never win once b = 2 is available.
    prime_bs = [b for b in range(2, limit + 1) if _is_prime(b)]
    _, product = max(
        (_quadratic_run(a, b), a * b)
        for a in range(-(limit - 1), limit)
        for b in prime_bs
    )
    return product


def distinct_powers(a_max: int, b_max: int) -> int:
    """Distinct values of a**b for 2 <= a <= a_max, 2 <= b <= b_max, via exponent vectors."""
    primes = primes_below(a_max + 1)

    def exponents(a: int) -> tuple[int, ...]:
        vector = []
        for p in primes:
            count = 0
            while a % p == 0:
                a //= p
                count += 1
            vector.append(count)
        return tuple(vector)

    terms = {
        tuple(e * b for e in vector)
        for vector in map(exponents, range(2, a_max + 1))
        for b in range(2, b_max + 1)
    }
    return len(terms)


def distinct_powers_brute(a_max: int, b_max: int) -> int:
    """Distinct values of a**b computed directly."""
    return len({a**b for a in range(2, a_max + 1) for b in range(2, b_max + 1)})


def circular_primes_count(limit: int) -> int:
    """Number of primes below ``limit`` all of whose digit rotations are prime."""
    if limit < 3:
        return 0
    flags = _sieve(10 ** len(str(limit - 1)))

    def circular(p: int) -> bool:
        text = str(p)
        return all(flags[int(text[i:] + text[:i])] for i in range(1, len(text)))

    return sum(1 for p in range(2, limit) if flags[p] and circular(p))


def truncatable_primes(count: int) -> list[int]:
    """The first ``count`` primes (from 11 up) that stay prime truncated from either side.

    Only eleven such primes exist, so a larger ``count`` is rejected.
    """
    if not 0 <= count <= _TRUNCATABLE_COUNT:
        raise ValueError(f"count must be between 0 and {_TRUNCATABLE_COUNT}")
    found: list[int] = []
    checked = 10
    size = 1024
    while len(found) < count:
        size *= 2
        flags = _sieve(size)
        for p in range(checked, size):
            if not flags[p]:
                continue
            text = str(p)
            if all(
                flags[int(text[i:])] and flags[int(text[:i])]
                for i in range(1, len(text))
            ):
                found.append(p)
                if len(found) == count:
                    break
        checked = size
    return found


def goldbach_other_counterexample() -> int:
    """Smallest odd composite that is not a prime plus twice a square."""
    primes: list[int] = []
    for n in itertools.count(3, 2):
        if all(n % p for p in primes):
            primes.append(n)
            continue
        if not any(math.isqrt((n - p) // 2) ** 2 == (n - p) // 2 for p in primes):
            return n
    raise AssertionError("unreachable")


def consecutive_distinct_factors(count: int) -> int:
    """First of ``count`` consecutive integers each with ``count`` distinct prime factors."""
    if count < 2:
        raise ValueError("count must be at least 2")
    size = 1024
    while True:
        omega = [0] * size
        for p in range(2, size):
            if omega[p] == 0:
                for multiple in range(p, size, p):
                    omega[multiple] += 1
        run = 0
        for i in range(2, size):
            run = run + 1 if omega[i] == count else 0
            if run == count:
                return i - count + 1
        size *= 4


def consecutive_prime_sum(limit: int) -> tuple[int, int]:
    """(terms, prime) for the prime <= ``limit`` that is the longest sum of consecutive primes."""
    flags = _sieve(limit + 1)
    primes = [n for n, flag in enumerate(flags) if flag]
    if not primes:
        raise ValueError("limit must be at least 2")
    prefix = list(itertools.accumulate(primes, initial=0))
    for length in range(len(primes), 0, -1):
        for start in range(len(primes) - length + 1):
            total = prefix[start + length] - prefix[start]
            if total > limit:
                break
            if flags[total]:
                return length, total
    raise AssertionError("unreachable")


def first_with_prime_partitions(threshold: int) -> int:
    """Smallest n >= 2 writable as a sum of primes in at least ``threshold`` ways.

    A prime counts itself as one of its ways.
    """
    bound = 64
    while True:
        ways = [1] + [0] * bound
        for p in primes_below(bound + 1):
            for j in range(p, bound + 1):
                ways[j] += ways[j - p]
        for j in range(2, bound + 1):
            if ways[j] >= threshold:
                return j
        bound *= 2


def prime_power_triples(limit: int) -> int:
    """Count of numbers below ``limit`` expressible as p**2 + q**3 + r**4 with p, q, r prime."""
    primes = primes_below(math.isqrt(max(limit, 0)) + 1)
    found: set[int] = set()
    for p in primes:
        square = p * p
        if square >= limit:
            break
        for q in primes:
            partial = square + q**3
            if partial >= limit:
                break
            for r in primes:
                total = partial + r**4
                if total >= limit:
                    break
                found.add(total)
    return len(found)