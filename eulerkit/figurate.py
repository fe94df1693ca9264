"""Puzzles about triangle, square, pentagonal and other figurate numbers."""

from __future__ import annotations

import itertools
from collections import defaultdict
from typing import Callable, Iterator


def _triangle(n: int) -> int:
    return n * (n + 1) // 2


def _square(n: int) -> int:
    return n * n


def _pentagonal(n: int) -> int:
    return n * (3 * n - 1) // 2


def _hexagonal(n: int) -> int:
    return n * (2 * n - 1)


def _heptagonal(n: int) -> int:
    return n * (5 * n - 3) // 2


def _octagonal(n: int) -> int:
    return n * (3 * n - 2)


_POLYGONAL = {
    "triangle": _triangle,
    "square": _square,
    "pentagonal": _pentagonal,
    "hexagonal": _hexagonal,
    "heptagonal": _heptagonal,
    "octagonal": _octagonal,
}


class Sequence:
    """Terms func(first_n), func(first_n + 1), ... generated on demand."""

    def __init__(self, func: Callable[[int], int], first_n: int = 1) -> None:
        self._func = func
        self._first_n = first_n
        self._elements: list[int] = []
        self._members: set[int] = set()

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._elements)

    def generate_more(self, n: int) -> None:
        """Append the next ``n`` terms."""
        start = self._first_n + len(self._elements)
        new = [self._func(i) for i in range(start, start + n)]
        self._elements.extend(new)
        self._members.update(new)


def pentagonal_pair_difference(count: int) -> int:
    """Difference of the first pair, among ``count`` pentagonals, whose sum and difference are pentagonal."""
    pentagonals = Sequence(_pentagonal)
    pentagonals.generate_more(count)
    values = list(pentagonals)
    largest = values[-1] if values else 0
    for j, low in enumerate(values):
        for high in itertools.islice(values, j + 1, None):
            total = low + high
            if total > largest:
                break
            if total in pentagonals and high - low in pentagonals:
                return high - low
    raise LookupError(f"no pair among the first {count} pentagonal numbers")


def triangle_pentagonal_hexagonal(index: int) -> int:
    """The ``index``-th (0-based, ascending) number that is triangular, pentagonal and hexagonal."""
    if index < 0:
        raise ValueError("index must not be negative")
    triangles = Sequence(_triangle)
    hexagonals = Sequence(_hexagonal)
    pentagonals = Sequence(_pentagonal)
    while True:
        triangles.generate_more(300)
        hexagonals.generate_more(150)
        pentagonals.generate_more(200)
        bound = min(triangles[-1], hexagonals[-1], pentagonals[-1])
        shared = [
            value
            for value in hexagonals
            if value <= bound and value in triangles and value in pentagonals
        ]
        if len(shared) > index:
            return shared[index]


def _four_digit_terms(func: Callable[[int], int]) -> list[int]:
    sequence = Sequence(func)
    sequence.generate_more(100)
    while sequence[-1] < 10_000:
        sequence.generate_more(100)
    return [value for value in sequence if 1_000 <= value < 10_000]


def cyclic_figurate_sum() -> int:
    """Sum of the cyclic set of six four-digit numbers, one from each polygonal kind."""
    pools = {name: _four_digit_terms(func) for name, func in _POLYGONAL.items()}

    def search(chain: list[int], remaining: frozenset[str]) -> list[int] | None:
        if not remaining:
            return chain if chain[-1] % 100 == chain[0] // 100 else None
        for name in remaining:
            for value in pools[name]:
                if chain[-1] % 100 != value // 100:
                    continue
                found = search(chain + [value], remaining - {name})
                if found:
                    return found
        return None

    others = frozenset(pools) - {"triangle"}
    for start in pools["triangle"]:
        found = search([start], others)
        if found:
            return sum(found)
    raise LookupError("no cyclic set of figurate numbers exists")


def smallest_cube_with_permutations(count: int) -> int:
    """Smallest cube for which exactly ``count`` digit permutations are cubes."""
    if count < 1:
        raise ValueError("count must be at least 1")
    groups: defaultdict[str, list[int]] = defaultdict(list)
    width = 1
    for i in itertools.count(1):
        cube = i**3
        text = str(cube)
        if len(text) > width:
            matches = [group[0] for group in groups.values() if len(group) == count]
            if matches:
                return min(matches)
            groups.clear()
            width = len(text)
        groups["".join(sorted(text))].append(cube)
    raise AssertionError("unreachable")