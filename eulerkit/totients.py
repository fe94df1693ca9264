"""Puzzles built on Euler's totient function."""

from __future__ import annotations


def _totients(limit: int) -> list[int]:
    phi = list(range(limit + 1))
    for p in range(2, limit + 1):
        if phi[p] == p:
            for multiple in range(p, limit + 1, p):
                phi[multiple] -= phi[multiple] // p
    return phi


def totient_maximum(limit: int) -> int:
    """The n <= ``limit`` maximising n / phi(n); ties go to the larger n."""
    if limit < 2:
        raise ValueError("limit must be at least 2")
    phi = _totients(limit)
    return max(range(2, limit + 1), key=lambda n: (n / phi[n], n))


def totient_permutation(limit: int) -> int:
    """The 1 < n <= ``limit`` with phi(n) a digit permutation of n and minimal n / phi(n).

    Ties go to the smaller n.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    phi = _totients(limit)
    candidates = [
        n for n in range(2, limit + 1) if sorted(str(n)) == sorted(str(phi[n]))
    ]
    if not candidates:
        raise ValueError(f"no n up to {limit} has a totient that permutes its digits")
    return min(candidates, key=lambda n: (n / phi[n], n))


def farey_length(limit: int) -> int:
    """Number of reduced proper fractions with denominators up to ``limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return sum(_totients(limit)[2:])