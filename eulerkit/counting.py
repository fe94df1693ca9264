"""Combinatorial counting puzzles: permutations, partitions, coins and choices."""

from __future__ import annotations

import itertools
import math
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

_SQUARE_DIGITS = tuple(divmod(n * n, 10) for n in range(1, 10))


def nth_permutation(items: Iterable[T], n: int) -> list[T]:
    """The ``n``-th (0-based) permutation of ``items`` in positional lexicographic order."""
    pool = list(items)
    if not 0 <= n < math.factorial(len(pool)):
        raise ValueError(f"there is no permutation number {n} of {len(pool)} items")
    result = []
    while pool:
        index, n = divmod(n, math.factorial(len(pool) - 1))
        result.append(pool.pop(index))
    return result


def spiral_diagonal_sum(size: int) -> int:
    """Sum of the diagonals of a ``size`` by ``size`` number spiral."""
    if size < 0:
        raise ValueError("size must not be negative")
    n = size // 2
    return 1 + (8 * n * (n + 1) * (2 * n + 1)) // 3 + 2 * n * n + 6 * n


def coin_sums(amount: int, coins: Iterable[int]) -> int:
    """Ways to make ``amount`` from the coin values; an amount of 0 has no ways."""
    if amount <= 0:
        return 0
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def counting_summations(n: int) -> int:
    """Ways to write ``n`` as a sum of at least two positive integers."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1] * (n + 1)
    for part in range(2, n + 1):
        for total in range(part, n + 1):
            ways[total] += ways[total - part]
    return ways[n] - 1


def first_partition_divisible(modulus: int, limit: int) -> int:
    """Smallest 2 <= n < ``limit`` whose partition count is divisible by ``modulus``."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    partitions = [1]
    for n in range(1, limit):
        total = 0
        for k in itertools.count(1):
            first = k * (3 * k - 1) // 2
            if first > n:
                break
            sign = 1 if k % 2 else -1
            total += sign * partitions[n - first]
            second = k * (3 * k + 1) // 2
            if second <= n:
                total += sign * partitions[n - second]
        value = total % modulus
        partitions.append(value)
        if n >= 2 and value == 0:
            return n
    raise LookupError(f"no partition count below {limit} is divisible by {modulus}")


def choices(items: Iterable[T], r: int) -> list[list[T]]:
    """All strictly increasing selections of ``r`` distinct items, in sorted order."""
    if r < 1:
        raise ValueError("r must be at least 1")
    return [list(choice) for choice in itertools.combinations(sorted(set(items)), r)]


def _faces(cube: Sequence[int]) -> set[int]:
    faces = set(cube)
    if faces & {6, 9}:
        faces |= {6, 9}
    return faces


def cube_digit_pairs() -> int:
    """Distinct pairs of six-faced digit cubes that can show every square below 100."""
    cubes = [_faces(cube) for cube in choices(range(10), 6)]
    count = 0
    for i, first in enumerate(cubes):
        for second in itertools.islice(cubes, i, None):
            if all(
                (x in first and y in second) or (x in second and y in first)
                for x, y in _SQUARE_DIGITS
            ):
                count += 1
    return count