"""Puzzles built on divisor sums, repeating decimals and multiplicative partitions."""

from __future__ import annotations

import functools
import itertools
import math


def proper_divisor_sums(limit: int) -> list[int]:
    """Sums of proper divisors for every n in ``range(limit)``; entries 0 and 1 are 0."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    sums = [0] * limit
    for divisor in range(1, limit // 2 + 1):
        for multiple in range(2 * divisor, limit, divisor):
            sums[multiple] += divisor
    return sums


def amicable_sum(limit: int) -> int:
    """Sum of all amicable numbers below ``limit``."""
    d = proper_divisor_sums(limit)
    total = 0
    for n in range(2, limit):
        partner = d[n]
        if partner < n and d[partner] == n:
            total += n + partner
    return total


def non_abundant_sum(limit: int) -> int:
    """Sum of the positive integers below ``limit`` not expressible as two abundant numbers."""
    d = proper_divisor_sums(max(limit, 0))
    abundant = [n for n in range(1, limit) if d[n] > n]
    expressible = bytearray(max(limit, 0))
    for i, a in enumerate(abundant):
        for b in abundant[i:]:
            total = a + b
            if total >= limit:
                break
            expressible[total] = 1
    return sum(n for n in range(1, limit) if not expressible[n])


def recurring_cycle_length(d: int) -> int:
    """Length of the recurring cycle in the decimal expansion of 1/d; 0 if it terminates."""
    if d < 1:
        raise ValueError("d must be a positive integer")
    positions: dict[int, int] = {}
    remainder = 1
    index = 0
    while remainder not in positions:
        positions[remainder] = index
        remainder = remainder * 10 % d
        if remainder == 0:
            return 0
        index += 1
    return index - positions[remainder]


def longest_recurring_cycle(limit: int) -> int:
    """Denominator d below ``limit`` whose 1/d has the longest recurring cycle.

    Ties go to the larger denominator.
    """
    candidates = range(2, limit)
    if not candidates:
        raise ValueError("limit must be greater than 2")
    return max(candidates, key=lambda d: (recurring_cycle_length(d), d))


def _prime_factors(n: int) -> list[int]:
    factors = []
    candidate = 2
    while candidate * candidate <= n:
        while n % candidate == 0:
            factors.append(candidate)
            n //= candidate
        candidate += 1
    if n > 1:
        factors.append(n)
    return factors


@functools.lru_cache(maxsize=None)
def _factorizations(n: int) -> tuple[tuple[int, ...], ...]:
    primes = _prime_factors(n)
    size = len(primes)
    if size < 2:
        return ()
    if size == 2:
        return (tuple(primes),)

    result: list[tuple[int, ...]] = []
    seen: set[int] = set()
    for mask in range(1, 1 << size):
        factor = math.prod(
            primes[size - 1 - bit] for bit in range(size) if mask >> bit & 1
        )
        if factor * factor > n or factor in seen:
            continue
        seen.add(factor)
        cofactor = n // factor
        result.append((factor, cofactor))
        result.extend(
            (factor, *rest) for rest in _factorizations(cofactor) if factor <= rest[0]
        )
    return tuple(result)


def factorizations(n: int) -> list[list[int]]:
    """Ways to write ``n`` as a non-decreasing product of at least two factors above 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    return [list(factors) for factors in _factorizations(n)]


def product_sum_numbers_total(max_k: int) -> int:
    """Sum of the distinct minimal product-sum numbers for 2 <= k <= ``max_k``."""
    if max_k < 1:
        raise ValueError("max_k must be at least 1")
    seen = [False] * (max_k + 1)
    remaining = max_k - 1
    total = 0
    for n in itertools.count(2):
        if remaining == 0:
            break
        counted = False
        for factors in _factorizations(n):
            k = len(factors) + n - sum(factors)
            if k > max_k or seen[k]:
                continue
            if not counted:
                total += n
                counted = True
            seen[k] = True
            remaining -= 1
    return total


def longest_amicable_chain(limit: int) -> int:
    """Smallest member of the longest amicable chain whose members never exceed ``limit``."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    d = proper_divisor_sums(limit + 1)
    chain: list[int | None] = [None] * (limit + 1)
    chain[1] = 0

    for n in range(2, limit + 1):
        if chain[n] is not None or d[n] == 1:
            continue
        path = [n]
        positions = {n: 0}
        current = n
        while True:
            current = d[current]
            if current in positions:
                start = positions[current]
                for member in path[start:]:
                    chain[member] = len(path) - start
                break
            if current > limit or chain[current] is not None:
                chain[n] = 0
                break
            positions[current] = len(path)
            path.append(current)

    return max(
        range(limit + 1),
        key=lambda i: (-1 if chain[i] is None else chain[i], -i),
    )