"""Puzzles over digit strings, grids, triangles and matrices."""

from __future__ import annotations

import heapq
import math
from typing import Sequence

_PRODUCT_DIRECTIONS = ((1, 0), (0, 1), (1, -1), (1, 1))
_UP_DOWN_RIGHT = ((-1, 0), (1, 0), (0, 1))
_ALL_FOUR = ((-1, 0), (1, 0), (0, -1), (0, 1))


def largest_series_product(digits: str, length: int) -> int:
    """Largest product of ``length`` adjacent digits; whitespace is ignored."""
    values = [int(c) for c in "".join(digits.split())]
    if not 0 < length <= len(values):
        raise ValueError("length must be between 1 and the number of digits")
    return max(
        math.prod(values[start:start + length])
        for start in range(len(values) - length + 1)
    )


def parse_grid(text: str) -> list[list[int]]:
    """Parse whitespace-separated rows of integers."""
    return [[int(cell) for cell in line.split()] for line in text.strip().splitlines()]


def largest_grid_product(grid: Sequence[Sequence[int]], run: int) -> int:
    """Largest product of ``run`` cells in a line down, across or diagonally."""
    rows = len(grid)
    columns = len(grid[0]) if rows else 0
    best = 0
    for y, row in enumerate(grid):
        for x, _ in enumerate(row):
            for dy, dx in _PRODUCT_DIRECTIONS:
                cells = [(y + i * dy, x + i * dx) for i in range(run)]
                if all(0 <= cy < rows and 0 <= cx < columns for cy, cx in cells):
                    best = max(best, math.prod(grid[cy][cx] for cy, cx in cells))
    return best


def lattice_paths(rows: int, columns: int) -> int:
    """Number of right/down routes through a ``rows`` by ``columns`` grid of squares."""
    counts = [1] * (columns + 1)
    for _ in range(rows):
        for j in range(1, columns + 1):
            counts[j] += counts[j - 1]
    return counts[-1]


def parse_triangle(text: str) -> list[list[int]]:
    """Parse a number triangle, one row per line."""
    return [[int(cell) for cell in line.split()] for line in text.strip().splitlines()]


def maximum_path_sum(triangle: Sequence[Sequence[int]]) -> int:
    """Largest top-to-bottom sum moving to adjacent numbers on the row below."""
    if not triangle:
        raise ValueError("triangle is empty")
    sums = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        sums = [value + max(left, right) for value, left, right in zip(row, sums, sums[1:])]
    return sums[0]


def parse_matrix(text: str) -> list[list[int]]:
    """Parse comma-separated rows of integers."""
    return [[int(cell) for cell in line.split(",")] for line in text.strip().splitlines()]


def _check_matrix(matrix: Sequence[Sequence[int]]) -> None:
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")


def minimal_path_sum_two_ways(matrix: Sequence[Sequence[int]]) -> int:
    """Minimal top-left to bottom-right sum moving only right and down."""
    _check_matrix(matrix)
    previous: list[int] | None = None
    for row in matrix:
        current: list[int] = []
        for n, value in enumerate(row):
            candidates = []
            if previous is not None:
                candidates.append(previous[n])
            if current:
                candidates.append(current[-1])
            current.append(value + min(candidates, default=0))
        previous = current
    return previous[-1]


def _shortest_sums(matrix, starts, moves) -> dict[tuple[int, int], int]:
    rows = len(matrix)
    columns = len(matrix[0])
    settled: dict[tuple[int, int], int] = {}
    heap = [(matrix[r][c], (r, c)) for r, c in starts]
    heapq.heapify(heap)
    while heap:
        distance, cell = heapq.heappop(heap)
        if cell in settled:
            continue
        settled[cell] = distance
        r, c = cell
        for dr, dc in moves:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < columns and (nr, nc) not in settled:
                heapq.heappush(heap, (distance + matrix[nr][nc], (nr, nc)))
    return settled


def minimal_path_sum_three_ways(matrix: Sequence[Sequence[int]]) -> int:
    """Minimal left-column to right-column sum moving up, down and right."""
    _check_matrix(matrix)
    rows = len(matrix)
    last = len(matrix[0]) - 1
    settled = _shortest_sums(matrix, [(r, 0) for r in range(rows)], _UP_DOWN_RIGHT)
    return min(settled[(r, last)] for r in range(rows))


def minimal_path_sum_four_ways(matrix: Sequence[Sequence[int]]) -> int:
    """Minimal top-left to bottom-right sum moving in any of the four directions."""
    _check_matrix(matrix)
    settled = _shortest_sums(matrix, [(0, 0)], _ALL_FOUR)
    return settled[(len(matrix) - 1, len(matrix[0]) - 1)]